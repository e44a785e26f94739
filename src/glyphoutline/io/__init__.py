"""Path I/O layer for glyphoutline.

This module connects outlines to the outside world: fonttools-backed glyph
sources on the way in, and path sinks (printer, fonttools pens) on the way
out.

Key classes:
- PathSink / PathSource: Drawing interfaces
- OutlineRecorder: Builds an Outline from drawing commands
- PathPrinter: Prints drawing commands as text
- SinkPen / PenSink: Bridges to and from fonttools pens
- FontReader: Load fonts and draw glyph outlines
"""

from glyphoutline.io.printer import PathPrinter
from glyphoutline.io.reader import FontReader
from glyphoutline.io.recorder import OutlineRecorder
from glyphoutline.io.sink import PathSink, PathSource, PenSink, SinkPen

__all__ = [
    "FontReader",
    "OutlineRecorder",
    "PathPrinter",
    "PathSink",
    "PathSource",
    "PenSink",
    "SinkPen",
]

"""Glyphoutline - Synthetic bold and oblique for glyph outlines.

Glyphoutline records a glyph's path into an in-memory contour model,
measures its bounding box, emboldens it with a FreeType-compatible
contour offset, slants it with a horizontal shear and replays it onto any
path sink.

Example:
    $ glyphoutline --embolden --oblique -c g Roboto-Regular.ttf

This prints the bounding box and the path commands of the transformed 'g'.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]

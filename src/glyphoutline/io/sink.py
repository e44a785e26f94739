"""Path sink and source interfaces.

A path sink is anything that accepts the four drawing verbs plus close. The
same interface is used for recording an outline and for replaying it onto a
printer, a rasterizer or a fonttools pen.

This module also bridges between the sink interface and fonttools pens in
both directions:
- SinkPen: a fonttools pen that forwards into a PathSink
- PenSink: a PathSink that forwards into a fonttools pen
"""

from collections.abc import Hashable
from typing import Any, Protocol, runtime_checkable

from fontTools.pens.basePen import AbstractPen, BasePen


@runtime_checkable
class PathSink(Protocol):
    """Consumer of path drawing commands."""

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def quad_to(self, x1: float, y1: float, x: float, y: float) -> None: ...

    def curve_to(
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> None: ...

    def close(self) -> None: ...


class PathSource(Protocol):
    """Producer of glyph outlines."""

    def draw_glyph(self, glyph: Hashable, sink: PathSink) -> bool:
        """Draw a glyph's outline into a sink.

        Returns:
            False if the glyph has no outline or could not be decoded
        """
        ...


class SinkPen(BasePen):
    """fonttools pen that forwards segments to a PathSink.

    BasePen splits multi-point qCurveTo runs into single quadratic segments,
    resolves implied on-curve points and decomposes components through the
    glyph set. Every closePath is preceded by an explicit line back to the
    contour start when the last segment ends elsewhere, so recorded closed
    contours have matching first and last points.
    """

    def __init__(self, sink: PathSink, glyphSet: Any = None) -> None:
        """Initialize the pen.

        Args:
            sink: Path sink receiving the segments
            glyphSet: Glyph set used to decompose components
        """
        super().__init__(glyphSet)
        self.sink = sink
        self._start: tuple[float, float] | None = None

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self._start = pt
        self.sink.move_to(pt[0], pt[1])

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self.sink.line_to(pt[0], pt[1])

    def _qCurveToOne(self, pt1: tuple[float, float], pt2: tuple[float, float]) -> None:
        self.sink.quad_to(pt1[0], pt1[1], pt2[0], pt2[1])

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        self.sink.curve_to(pt1[0], pt1[1], pt2[0], pt2[1], pt3[0], pt3[1])

    def _closePath(self) -> None:
        start = self._start
        current = self._getCurrentPoint()
        if start is not None and current is not None and tuple(current) != tuple(start):
            self.sink.line_to(start[0], start[1])
        self._start = None
        self.sink.close()

    def _endPath(self) -> None:
        # Open contours end without a closing segment.
        self._start = None
        self.sink.close()


class PenSink:
    """PathSink that forwards commands to a fonttools pen.

    Example:
        pen = SVGPathPen(None)
        outline.emit(PenSink(pen))
        svg_path = pen.getCommands()
    """

    def __init__(self, pen: AbstractPen) -> None:
        self.pen = pen

    def move_to(self, x: float, y: float) -> None:
        self.pen.moveTo((x, y))

    def line_to(self, x: float, y: float) -> None:
        self.pen.lineTo((x, y))

    def quad_to(self, x1: float, y1: float, x: float, y: float) -> None:
        self.pen.qCurveTo((x1, y1), (x, y))

    def curve_to(
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> None:
        self.pen.curveTo((x1, y1), (x2, y2), (x, y))

    def close(self) -> None:
        self.pen.closePath()

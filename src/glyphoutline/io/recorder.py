"""Path recorder building an Outline from drawing commands."""

from typing import TYPE_CHECKING

import structlog

from glyphoutline.domain import Contour, Point, Verb

if TYPE_CHECKING:
    from glyphoutline.core.outline import Outline

logger = structlog.get_logger(__name__)


class OutlineRecorder:
    """PathSink that appends every command to an Outline.

    Commands go to the current contour. The first contour is created by the
    first command; each close() moves on to a fresh contour which is only
    materialized when the next command arrives. Input is trusted: arity
    mistakes by the source are not detected here.
    """

    def __init__(self, outline: "Outline") -> None:
        """Initialize the recorder.

        Args:
            outline: Outline receiving the contours
        """
        self.outline = outline
        self._current = len(outline.contours)

    def _contour(self) -> Contour:
        contours = self.outline.contours
        if self._current >= len(contours):
            contours.append(Contour())
        self.outline.invalidate()
        return contours[self._current]

    def move_to(self, x: float, y: float) -> None:
        c = self._contour()
        c.verbs.append(Verb.MOVE_TO)
        c.points.append(Point(float(x), float(y)))

    def line_to(self, x: float, y: float) -> None:
        c = self._contour()
        c.verbs.append(Verb.LINE_TO)
        c.points.append(Point(float(x), float(y)))

    def quad_to(self, x1: float, y1: float, x: float, y: float) -> None:
        c = self._contour()
        c.verbs.append(Verb.QUAD_TO)
        c.points.append(Point(float(x1), float(y1)))
        c.points.append(Point(float(x), float(y)))

    def curve_to(
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> None:
        c = self._contour()
        c.verbs.append(Verb.CURVE_TO)
        c.points.append(Point(float(x1), float(y1)))
        c.points.append(Point(float(x2), float(y2)))
        c.points.append(Point(float(x), float(y)))

    def close(self) -> None:
        c = self._contour()
        if len(c.points) > 1 and c.points[0] != c.points[-1]:
            logger.debug(
                "Contour closed with mismatched ends",
                contour=self._current,
                first=c.points[0].to_tuple(),
                last=c.points[-1].to_tuple(),
            )

        c.verbs.append(Verb.CLOSE)
        self._current += 1

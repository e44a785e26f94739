"""Outline contour store and glyph transform pipeline.

The Outline is the single owner of a glyph's geometry between recording
and emitting. It is created by draining a path source through an
OutlineRecorder, mutated in place by embolden/oblique and finally replayed
onto a path sink.
"""

from collections.abc import Hashable
from typing import TYPE_CHECKING

import structlog

from glyphoutline.core.embolden import embolden_contour
from glyphoutline.domain import BBox, Contour, Point, Verb, Winding

if TYPE_CHECKING:
    from glyphoutline.io.sink import PathSink, PathSource

logger = structlog.get_logger(__name__)

# Embolden strength used by FreeType's synthetic bold.
FT_EMBOLDEN_STRENGTH = 20.0

# Horizontal shear used for synthetic oblique.
DEFAULT_OBLIQUE_SKEW = 0.25


class Outline:
    """Ordered contours of one glyph plus their winding convention.

    The bounding box is memoized and reset by every mutation. The cache is
    not synchronized; an Outline shared between threads needs external
    locking around embolden/oblique.

    Example:
        outline = Outline.from_source(reader, "C", reader.winding)
        if outline is not None:
            outline.embolden(FT_EMBOLDEN_STRENGTH)
            outline.emit(PathPrinter())
    """

    def __init__(
        self,
        contours: list[Contour] | None = None,
        winding: Winding = Winding.TRUETYPE,
    ) -> None:
        """Initialize the outline.

        Args:
            contours: Contours in rendering order
            winding: Winding convention of the source outline format
        """
        self.contours: list[Contour] = contours if contours is not None else []
        self.winding = winding
        self._cached_bbox: BBox | None = None

    @classmethod
    def from_source(
        cls,
        source: "PathSource",
        glyph: Hashable,
        winding: Winding = Winding.TRUETYPE,
    ) -> "Outline | None":
        """Record a glyph from a path source.

        Args:
            source: Path source able to draw the glyph
            glyph: Glyph identifier understood by the source
            winding: Winding convention of the source's outline format

        Returns:
            Recorded outline, or None if the source has no outline for the glyph
        """
        from glyphoutline.io.recorder import OutlineRecorder

        outline = cls(winding=winding)
        recorder = OutlineRecorder(outline)
        if not source.draw_glyph(glyph, recorder):
            logger.debug("No outline", glyph=str(glyph))
            return None

        logger.debug(
            "Outline recorded",
            glyph=str(glyph),
            contours=len(outline.contours),
            points=outline.point_count,
        )
        return outline

    @property
    def point_count(self) -> int:
        """Total number of points across all contours."""
        return sum(len(c.points) for c in self.contours)

    def is_empty(self) -> bool:
        """Check if the outline holds no contours."""
        return len(self.contours) == 0

    def invalidate(self) -> None:
        """Drop the cached bounding box."""
        self._cached_bbox = None

    def bbox(self) -> BBox:
        """Calculate the bounding box over all recorded points.

        Curve control points are included, so the box can be larger than
        the true extent of a curve. Result is cached until the next mutation.

        Returns:
            Bounding box, empty (infinite sentinels) for an empty outline
        """
        if self._cached_bbox is None:
            bbox = BBox()
            for contour in self.contours:
                for p in contour.points:
                    bbox.extend_by(p.x, p.y)
            self._cached_bbox = bbox

        # The cached box itself is never handed out.
        cached = self._cached_bbox
        return BBox(cached.x_min, cached.y_min, cached.x_max, cached.y_max)

    def emit(self, sink: "PathSink") -> None:
        """Replay the outline onto a path sink.

        Args:
            sink: Path sink receiving one call per verb
        """
        points = (p for contour in self.contours for p in contour.points)
        for verb in (v for contour in self.contours for v in contour.verbs):
            if verb is Verb.MOVE_TO:
                p = next(points)
                sink.move_to(p.x, p.y)
            elif verb is Verb.LINE_TO:
                p = next(points)
                sink.line_to(p.x, p.y)
            elif verb is Verb.QUAD_TO:
                p1 = next(points)
                p = next(points)
                sink.quad_to(p1.x, p1.y, p.x, p.y)
            elif verb is Verb.CURVE_TO:
                p1 = next(points)
                p2 = next(points)
                p = next(points)
                sink.curve_to(p1.x, p1.y, p2.x, p2.y, p.x, p.y)
            else:
                sink.close()

    def embolden(self, strength: float) -> None:
        """Thicken the outline by offsetting every contour outward.

        Args:
            strength: Offset distance in font units
        """
        for contour in self.contours:
            embolden_contour(contour.points, strength, self.winding)

        self.invalidate()
        logger.debug("Outline emboldened", strength=strength, winding=self.winding.value)

    def oblique(self, x_skew: float) -> None:
        """Slant the outline with a horizontal shear.

        Args:
            x_skew: Horizontal offset per vertical unit
        """
        for contour in self.contours:
            points = contour.points
            for idx, p in enumerate(points):
                if p.y != 0:
                    points[idx] = Point(p.x + p.y * x_skew, p.y)

        self.invalidate()
        logger.debug("Outline obliqued", skew=x_skew)

    def __repr__(self) -> str:
        return (
            f"Outline(contours={len(self.contours)}, points={self.point_count}, "
            f"winding={self.winding.value})"
        )


def embolden_glyph(
    source: "PathSource",
    glyph: Hashable,
    sink: "PathSink",
    strength: float = FT_EMBOLDEN_STRENGTH,
    winding: Winding = Winding.TRUETYPE,
) -> BBox | None:
    """Embolden a glyph and replay it onto a sink.

    Args:
        source: Path source able to draw the glyph
        glyph: Glyph identifier understood by the source
        sink: Path sink receiving the emboldened outline
        strength: Offset distance in font units
        winding: Winding convention of the source's outline format

    Returns:
        Bounding box of the emitted points, or None if the glyph has
        no outline
    """
    outline = Outline.from_source(source, glyph, winding)
    if outline is None:
        return None

    outline.embolden(strength)
    outline.emit(sink)
    return outline.bbox()

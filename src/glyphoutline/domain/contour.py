"""Core geometric types for outline representation.

This module defines the fundamental geometric types used throughout glyphoutline:
- Point: A 2D coordinate
- BBox: An axis-aligned bounding box that grows by folding points into it
- Verb: Enum for path drawing commands
- Winding: Enum for the outline format's winding convention
- Contour: One sub-path of a glyph outline
"""

import math
from dataclasses import dataclass, field
from enum import Enum


class Verb(Enum):
    """Path drawing command.

    A verb is a tag only. Its coordinates live in the owning contour's
    point list; ``arity`` is the number of points the verb consumes.
    """

    MOVE_TO = "M"
    LINE_TO = "L"
    QUAD_TO = "Q"
    CURVE_TO = "C"
    CLOSE = "Z"

    @property
    def arity(self) -> int:
        """Number of points consumed by this verb."""
        return _ARITY[self]


_ARITY = {
    Verb.MOVE_TO: 1,
    Verb.LINE_TO: 1,
    Verb.QUAD_TO: 2,
    Verb.CURVE_TO: 3,
    Verb.CLOSE: 0,
}


class Winding(Enum):
    """Winding convention of the source outline format.

    The two conventions need opposite signs for the outward normal when
    offsetting contours:
    - TRUETYPE: quadratic outlines from a 'glyf' table
    - POSTSCRIPT: cubic outlines from a 'CFF ' or 'CFF2' table

    The convention is a property of the font, never inferred from geometry.
    """

    TRUETYPE = "truetype"
    POSTSCRIPT = "postscript"


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Attributes:
        x: X coordinate in font units
        y: Y coordinate in font units
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)


@dataclass(slots=True)
class BBox:
    """Axis-aligned bounding box.

    The default box is empty: minimums start at +inf and maximums at -inf,
    so the first ``extend_by`` call sets all four edges. ``width`` and
    ``height`` of an empty box are meaningless.
    """

    x_min: float = math.inf
    y_min: float = math.inf
    x_max: float = -math.inf
    y_max: float = -math.inf

    def width(self) -> float:
        """Return the box width."""
        return self.x_max - self.x_min

    def height(self) -> float:
        """Return the box height."""
        return self.y_max - self.y_min

    def is_empty(self) -> bool:
        """Check if no point has been folded into the box."""
        return self.x_min > self.x_max or self.y_min > self.y_max

    def extend_by(self, x: float, y: float) -> None:
        """Grow the box to include (x, y)."""
        self.x_min = min(self.x_min, x)
        self.y_min = min(self.y_min, y)
        self.x_max = max(self.x_max, x)
        self.y_max = max(self.y_max, y)

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (x_min, y_min, x_max, y_max) tuple."""
        return (self.x_min, self.y_min, self.x_max, self.y_max)


@dataclass
class Contour:
    """One sub-path of an outline.

    Verbs and points are stored side by side: each verb consumes
    ``verb.arity`` points from ``points`` in order.

    Attributes:
        verbs: Drawing commands in order
        points: Coordinates consumed by the verbs
    """

    verbs: list[Verb] = field(default_factory=list)
    points: list[Point] = field(default_factory=list)

    def is_closed(self) -> bool:
        """Check if the first and last points coincide.

        Returns:
            True for contours with more than one point whose ends match
        """
        return len(self.points) > 1 and self.points[0] == self.points[-1]

    def is_consistent(self) -> bool:
        """Check that the point count matches the verbs' arities."""
        return len(self.points) == sum(verb.arity for verb in self.verbs)

"""Domain models for glyphoutline.

This module contains the value types an outline is built from. They are
independent of fonttools implementation details.

Key classes:
- Point: A 2D coordinate
- BBox: Bounding box with empty sentinels
- Verb: Drawing command tag with a fixed point arity
- Winding: Winding convention of the source outline format
- Contour: Verbs and points of one sub-path
"""

from glyphoutline.domain.contour import BBox, Contour, Point, Verb, Winding

__all__: list[str] = [
    # Enums
    "Verb",
    "Winding",
    # Core types
    "Point",
    "BBox",
    "Contour",
]

"""Core outline algorithms for glyphoutline.

This module contains:

- Outline: the contour store with bbox, emit, embolden and oblique
- embolden_contour: the corner-aware contour offset used by Outline.embolden
- embolden_glyph: record, embolden and replay a glyph in one call
"""

from glyphoutline.core.embolden import embolden_contour
from glyphoutline.core.outline import (
    DEFAULT_OBLIQUE_SKEW,
    FT_EMBOLDEN_STRENGTH,
    Outline,
    embolden_glyph,
)

__all__ = [
    "DEFAULT_OBLIQUE_SKEW",
    "FT_EMBOLDEN_STRENGTH",
    "Outline",
    "embolden_contour",
    "embolden_glyph",
]

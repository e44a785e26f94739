"""Contour emboldening.

Widens stems by pushing every vertex of a contour outward along the
bisector of its two adjacent edges, using a miter join that is clamped to
the shorter adjacent edge. The arithmetic follows FreeType's
FT_Outline_EmboldenXY step for step:

- Zero-length edges are skipped; runs of coincident points move together.
- Corners sharper than ~160 degrees (cosine <= -0.9375) get no lateral shift.
- Every point also moves by ``strength`` on both axes.

Curve control points are offset as ordinary polygon vertices.
Coordinates are binary64 floats. Against a 32-bit implementation, bit-exact
agreement is only to be expected for integer-valued regression vectors.
"""

import math

from glyphoutline.domain import Point, Winding

# Cosine of the turn angle below which a corner is treated as a reversal.
REVERSAL_COSINE = -0.9375


def _corner_shift(
    in_x: float,
    in_y: float,
    in_len: float,
    out_x: float,
    out_y: float,
    out_len: float,
    strength: float,
    winding: Winding,
) -> tuple[float, float]:
    """Calculate the lateral shift of the vertex between two edges.

    Args:
        in_x: X component of the incoming unit vector
        in_y: Y component of the incoming unit vector
        in_len: Length of the incoming edge
        out_x: X component of the outgoing unit vector
        out_y: Y component of the outgoing unit vector
        out_len: Length of the outgoing edge
        strength: Embolden strength
        winding: Winding convention of the outline

    Returns:
        Shift (dx, dy), (0, 0) for near-reversal corners
    """
    d = in_x * out_x + in_y * out_y
    if d <= REVERSAL_COSINE:
        return 0.0, 0.0

    d = d + 1.0
    if winding is Winding.TRUETYPE:
        shift_x = -(in_y + out_y)
        shift_y = in_x + out_x
        q = -((out_x * in_y) - (out_y * in_x))
    else:
        shift_x = in_y + out_y
        shift_y = -(in_x + out_x)
        q = (out_x * in_y) - (out_y * in_x)

    length = min(in_len, out_len)

    # q == length == 0 takes the first branch.
    if strength * q <= length * d:
        return (shift_x * strength) / d, (shift_y * strength) / d
    return (shift_x * length) / q, (shift_y * length) / q


def embolden_contour(points: list[Point], strength: float, winding: Winding) -> None:
    """Embolden one contour in place.

    The sweep walks the contour circularly with a trailing index ``i`` and a
    leading index ``j``. Whenever a non-degenerate edge ends a run, the
    points from ``i`` up to ``j`` are moved by the shift computed for the
    corner at ``j - 1``. The first corner found becomes the anchor; reaching
    it again ends the sweep, so every point moves exactly once.

    For closed contours the duplicated closing point is left out of the sweep
    and copied from the first point afterwards.

    Args:
        points: Contour points, replaced in place
        strength: Offset distance in font units
        winding: Winding convention of the outline
    """
    n = len(points)
    if n < 2:
        return

    closed = points[0] == points[-1]
    last = n - 2 if closed else n - 1

    if last > 0:
        _sweep(points, last, strength, winding)

    if closed:
        points[-1] = points[0]


def _sweep(points: list[Point], last: int, strength: float, winding: Winding) -> None:
    def advance(index: int) -> int:
        return index + 1 if index < last else 0

    in_x = in_y = 0.0
    in_len = 0.0

    anchor_x = anchor_y = 0.0
    anchor_len = 0.0

    i = last
    j = 0
    k: int | None = None

    while i != j and i != k:
        if j != k:
            x = points[j].x - points[i].x
            y = points[j].y - points[i].y
            out_len = math.sqrt(x * x + y * y)
            if out_len == 0.0:
                j = advance(j)
                continue
            out_x = x / out_len
            out_y = y / out_len
        else:
            out_x, out_y, out_len = anchor_x, anchor_y, anchor_len

        if in_len != 0.0:
            if k is None:
                k = i
                anchor_x, anchor_y, anchor_len = in_x, in_y, in_len

            shift_x, shift_y = _corner_shift(
                in_x, in_y, in_len, out_x, out_y, out_len, strength, winding
            )
            dx = strength + shift_x
            dy = strength + shift_y

            while i != j:
                p = points[i]
                points[i] = Point(p.x + dx, p.y + dy)
                i = advance(i)
        else:
            i = j

        in_x, in_y, in_len = out_x, out_y, out_len
        j = advance(j)

"""Shared fixtures: test fonts built in memory with fontTools."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.t2CharStringPen import T2CharStringPen
from fontTools.pens.ttGlyphPen import TTGlyphPen

from glyphoutline.core import Outline
from glyphoutline.domain import Contour, Point, Verb, Winding

NAME_STRINGS = {
    "familyName": "Glyphoutline Test",
    "styleName": "Regular",
    "psName": "GlyphoutlineTest-Regular",
}


def square_contour(points: list[tuple[float, float]]) -> Contour:
    """Build a closed line contour through the given corners."""
    pts = [Point(float(x), float(y)) for x, y in points]
    pts.append(pts[0])
    verbs = [Verb.MOVE_TO] + [Verb.LINE_TO] * (len(pts) - 1) + [Verb.CLOSE]
    return Contour(verbs=verbs, points=pts)


@pytest.fixture
def make_contour():
    """Factory for closed line contours."""
    return square_contour


@pytest.fixture
def ccw_square() -> list[tuple[float, float]]:
    """10x10 square, counter-clockwise."""
    return [(0, 0), (10, 0), (10, 10), (0, 10)]


@pytest.fixture
def square_outline(ccw_square: list[tuple[float, float]]) -> Outline:
    """Outline holding the closed counter-clockwise 10x10 square."""
    return Outline([square_contour(ccw_square)], winding=Winding.TRUETYPE)


@pytest.fixture
def ttf_path(tmp_path: Path) -> Path:
    """TrueType font with a square 'A', a quadratic 'V', a composite and a space."""
    glyph_order = [".notdef", "A", "V", "Aring", "space"]

    # Clockwise outer contour, TrueType convention
    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.lineTo((0, 700))
    pen.lineTo((500, 700))
    pen.lineTo((500, 0))
    pen.closePath()
    glyph_a = pen.glyph()

    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.qCurveTo((250, 500), (500, 0))
    pen.closePath()
    glyph_v = pen.glyph()

    pen = TTGlyphPen({"A": glyph_a})
    pen.addComponent("A", (1, 0, 0, 1, 100, 0))
    glyph_aring = pen.glyph()

    glyphs = {
        ".notdef": TTGlyphPen(None).glyph(),
        "A": glyph_a,
        "V": glyph_v,
        "Aring": glyph_aring,
        "space": TTGlyphPen(None).glyph(),
    }

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({ord("A"): "A", ord("V"): "V", 0xC5: "Aring", ord(" "): "space"})
    fb.setupGlyf(glyphs)
    # Left side bearings must match xMin or glyf drawing shifts the outline
    lsb = {"Aring": 100}
    fb.setupHorizontalMetrics({name: (600, lsb.get(name, 0)) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable(NAME_STRINGS)
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()

    path = tmp_path / "Test-Regular.ttf"
    fb.save(str(path))
    return path


@pytest.fixture
def otf_path(tmp_path: Path) -> Path:
    """CFF font with a square 'A' and a space."""
    glyph_order = [".notdef", "A", "space"]

    # Counter-clockwise outer contour, PostScript convention
    pen = T2CharStringPen(600, None)
    pen.moveTo((0, 0))
    pen.lineTo((500, 0))
    pen.lineTo((500, 700))
    pen.lineTo((0, 700))
    pen.closePath()

    char_strings = {
        ".notdef": T2CharStringPen(600, None).getCharString(),
        "A": pen.getCharString(),
        "space": T2CharStringPen(600, None).getCharString(),
    }

    fb = FontBuilder(1000, isTTF=False)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({ord("A"): "A", ord(" "): "space"})
    fb.setupCFF(NAME_STRINGS["psName"], {"FullName": NAME_STRINGS["psName"]}, char_strings, {})
    fb.setupHorizontalMetrics({name: (600, 0) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable(NAME_STRINGS)
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()

    path = tmp_path / "Test-Regular.otf"
    fb.save(str(path))
    return path

"""Font reader for loading TTF/OTF fonts.

This module provides the FontReader class, a path source backed by
fonttools. It loads a font file, maps characters to glyphs and draws glyph
outlines into path sinks.
"""

from collections.abc import Hashable
from pathlib import Path

import structlog
from fontTools.pens.recordingPen import DecomposingRecordingPen
from fontTools.ttLib import TTFont

from glyphoutline.core.outline import Outline
from glyphoutline.domain import Winding
from glyphoutline.exceptions import FontLoadError
from glyphoutline.io.sink import PathSink, SinkPen

logger = structlog.get_logger(__name__)


class FontReader:
    """Loads TTF/OTF fonts and draws glyph outlines.

    Example:
        with FontReader(Path("font.ttf")) as reader:
            outline = reader.outline("C")
    """

    def __init__(self, font_path: Path, face_index: int = 0) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF, OTF or TTC font file
            face_index: Face to load from a font collection
        """
        self._font_path = font_path
        self._face_index = face_index
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            FontLoadError: If font file is invalid or cannot be loaded
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        try:
            self._font = TTFont(str(self._font_path), fontNumber=self._face_index)
        except Exception as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

    @property
    def font(self) -> TTFont:
        """Return the loaded fonttools font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for glyf-based fonts, 'OpenType' for CFF-based fonts
        """
        if "CFF " in self.font or "CFF2" in self.font:
            return "OpenType"
        return "TrueType"

    @property
    def winding(self) -> Winding:
        """Return the winding convention of the font's outlines.

        CFF and CFF2 outlines are cubic and use the PostScript convention;
        glyf outlines are quadratic and use the TrueType convention.
        """
        if self.format == "OpenType":
            return Winding.POSTSCRIPT
        return Winding.TRUETYPE

    @property
    def units_per_em(self) -> int:
        """Return font's units per em."""
        return self.font["head"].unitsPerEm  # type: ignore[attr-defined]

    def glyph_name_for_char(self, char: str) -> str | None:
        """Map a character to a glyph name through the best cmap.

        Args:
            char: Single character

        Returns:
            Glyph name, or None if the font does not map the character
        """
        cmap = self.font.getBestCmap()
        if not cmap:
            return None
        return cmap.get(ord(char))

    def draw_glyph(self, glyph: Hashable, sink: PathSink) -> bool:
        """Draw a glyph's outline into a path sink.

        The outline is fully decoded before the first command reaches the
        sink, so a decoding failure never leaves a partial path behind.
        Components are decomposed.

        Args:
            glyph: Glyph name
            sink: Path sink receiving the outline

        Returns:
            False if the glyph is unknown, has no contours or fails to decode
        """
        font = self.font
        glyph_set = font.getGlyphSet()
        if glyph not in glyph_set:
            logger.debug("Glyph not in font", glyph=str(glyph))
            return False

        recording = DecomposingRecordingPen(glyph_set)
        try:
            glyph_set[glyph].draw(recording)
        except Exception as e:
            logger.warning(
                "Glyph decoding failed",
                glyph=str(glyph),
                error=str(e),
                error_type=type(e).__name__,
            )
            return False

        if not recording.value:
            return False

        recording.replay(SinkPen(sink, glyph_set))
        return True

    def outline(self, char: str) -> Outline | None:
        """Record the outline of the glyph mapped to a character.

        Args:
            char: Single character

        Returns:
            Outline using the font's winding convention, or None if the
            character is unmapped or its glyph has no outline
        """
        glyph_name = self.glyph_name_for_char(char)
        if glyph_name is None:
            return None
        return Outline.from_source(self, glyph_name, self.winding)

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()

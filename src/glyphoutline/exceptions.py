"""Exception hierarchy for Glyphoutline."""


class GlyphOutlineError(Exception):
    """Base exception for all Glyphoutline errors."""

    pass


class FontError(GlyphOutlineError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphError(GlyphOutlineError):
    """Errors related to glyph lookup."""

    pass


class GlyphNotFoundError(GlyphError):
    """Requested character is not mapped by the font."""

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"Character '{char}' (U+{ord(char):04X}) not found in font")


class GlyphOutlineMissingError(GlyphError):
    """Glyph exists but has no outline."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Glyph '{glyph_name}' has no outline")

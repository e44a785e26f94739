"""Configuration settings for Glyphoutline."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from glyphoutline.core.outline import DEFAULT_OBLIQUE_SKEW, FT_EMBOLDEN_STRENGTH

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class TransformConfig(BaseModel):
    """Configuration for outline transforms."""

    embolden: bool = Field(
        default=False,
        description="Apply synthetic bold",
    )
    strength: float = Field(
        default=FT_EMBOLDEN_STRENGTH,
        ge=0.0,
        description="Embolden strength in font units",
    )
    oblique: bool = Field(
        default=False,
        description="Apply synthetic oblique",
    )
    skew: float = Field(
        default=DEFAULT_OBLIQUE_SKEW,
        ge=-1.0,
        le=1.0,
        description="Horizontal shear per vertical unit",
    )


class FontConfig(BaseModel):
    """Configuration for glyph selection."""

    face_index: int = Field(
        default=0,
        ge=0,
        description="Face index inside a font collection",
    )
    character: str = Field(
        default="C",
        min_length=1,
        max_length=1,
        description="Character whose glyph is outlined",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def check_level(cls, value: str) -> str:
        """Normalize a level name and reject unknown ones."""
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {'|'.join(LOG_LEVELS)}")
        return level


class GlyphOutlineSettings(BaseModel):
    """Main application settings."""

    font: FontConfig = Field(default_factory=FontConfig)
    transform: TransformConfig = Field(default_factory=TransformConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphOutlineSettings:
    """Get default application settings."""
    return GlyphOutlineSettings()

"""Configuration management for glyphoutline.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FontConfig: Face and character selection
- TransformConfig: Embolden and oblique settings
- LoggingConfig: Logging settings
- GlyphOutlineSettings: Main application settings
"""

from glyphoutline.config.settings import (
    FontConfig,
    GlyphOutlineSettings,
    LoggingConfig,
    TransformConfig,
    get_default_settings,
)

__all__ = [
    "FontConfig",
    "GlyphOutlineSettings",
    "LoggingConfig",
    "TransformConfig",
    "get_default_settings",
]

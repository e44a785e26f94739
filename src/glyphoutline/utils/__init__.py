"""Utility functions for glyphoutline.

This module provides logging setup and configuration.
"""

from glyphoutline.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]

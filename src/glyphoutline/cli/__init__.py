"""Command-line interface for glyphoutline.

This module provides the CLI using Typer, printing a glyph's bounding box
and path commands after optional synthetic bold and oblique.
"""

from glyphoutline.cli.app import cli, main

__all__ = ["cli", "main"]

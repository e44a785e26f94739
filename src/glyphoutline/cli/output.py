"""Rich console output helpers for the CLI.

Path commands and the bounding box go to stdout untouched; everything
meant for the user's eyes goes through the stderr console below.
"""

from rich.console import Console
from rich.text import Text

from glyphoutline.domain import BBox
from glyphoutline.io.printer import format_coord

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def format_bbox(bbox: BBox) -> str:
    """Format a bounding box for the ``bbox:`` output line.

    Args:
        bbox: Bounding box to format

    Returns:
        Text such as "BBox { x_min: 0, y_min: 0, x_max: 10, y_max: 10 }"
    """
    return (
        f"BBox {{ x_min: {format_coord(bbox.x_min)}, y_min: {format_coord(bbox.y_min)}, "
        f"x_max: {format_coord(bbox.x_max)}, y_max: {format_coord(bbox.y_max)} }}"
    )


def print_font_info(
    font_path: str,
    font_type: str,
    winding: str,
    upm: int,
    glyph_name: str,
) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        font_type: Font format type (e.g., "TrueType", "OpenType")
        winding: Winding convention name
        upm: Units per em value
        glyph_name: Name of the selected glyph
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(font_path)
    line1.append(f" ({font_type})")
    console.print(line1)
    console.print(f"  glyph {glyph_name} {SYM_DOT} {upm:,} UPM {SYM_DOT} {winding} winding")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"[bold red]{SYM_ERR} Error:[/bold red] {message}", highlight=False)
    if details:
        console.print(f"  {details}", highlight=False)

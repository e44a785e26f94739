"""CLI application entry point for glyphoutline.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from glyphoutline import __version__
from glyphoutline.cli.output import console, format_bbox, print_error, print_font_info
from glyphoutline.config import (
    FontConfig,
    GlyphOutlineSettings,
    LoggingConfig,
    TransformConfig,
)
from glyphoutline.core import DEFAULT_OBLIQUE_SKEW, FT_EMBOLDEN_STRENGTH, Outline
from glyphoutline.exceptions import (
    FontLoadError,
    GlyphNotFoundError,
    GlyphOutlineError,
    GlyphOutlineMissingError,
)
from glyphoutline.io import FontReader, PathPrinter
from glyphoutline.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="glyphoutline",
    help="Print a glyph outline, optionally with synthetic bold and oblique.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"glyphoutline v{__version__}")
        raise typer.Exit()


@app.command()
def outline(
    font_file: Annotated[
        Path,
        typer.Argument(
            help="Path to TTF/OTF/TTC font file",
            show_default=False,
        ),
    ],
    face_index: Annotated[
        int,
        typer.Option(
            "--face-index",
            "-f",
            help="Face index inside a font collection",
            min=0,
        ),
    ] = 0,
    character: Annotated[
        str,
        typer.Option(
            "--character",
            "-c",
            help="Character to outline",
        ),
    ] = "C",
    embolden: Annotated[
        bool,
        typer.Option(
            "--embolden",
            "-e",
            help="Apply synthetic bold",
        ),
    ] = False,
    oblique: Annotated[
        bool,
        typer.Option(
            "--oblique",
            "-o",
            help="Apply synthetic oblique",
        ),
    ] = False,
    strength: Annotated[
        float,
        typer.Option(
            "--strength",
            "-s",
            help="Embolden strength in font units",
            min=0.0,
        ),
    ] = FT_EMBOLDEN_STRENGTH,
    skew: Annotated[
        float,
        typer.Option(
            "--skew",
            "-k",
            help="Oblique shear per vertical unit (-1 to 1)",
        ),
    ] = DEFAULT_OBLIQUE_SKEW,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show font information on stderr",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only report errors on the console",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Print the bounding box and path commands of a glyph.

    The glyph is looked up by character, optionally emboldened and slanted,
    and printed as one command per line (M, L, Q, C, Z).

    Example:
        glyphoutline --embolden -c g Roboto-Regular.ttf
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        settings = GlyphOutlineSettings(
            font=FontConfig(face_index=face_index, character=character),
            transform=TransformConfig(
                embolden=embolden,
                strength=strength,
                oblique=oblique,
                skew=skew,
            ),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        print_error(f"Invalid option {field}: {first['msg']}")
        raise typer.Exit(code=1) from None

    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    # Validate input file exists
    if not font_file.is_file():
        print_error(
            f"Input file not found: {font_file}",
            details="Please provide a path to a TTF, OTF or TTC font file.",
        )
        raise typer.Exit(code=1)

    try:
        glyph_outline = _load_outline(font_file, settings.font, verbose)
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1) from None
    except GlyphOutlineError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if settings.transform.embolden:
        glyph_outline.embolden(settings.transform.strength)

    if settings.transform.oblique:
        glyph_outline.oblique(settings.transform.skew)

    typer.echo(f"bbox: {format_bbox(glyph_outline.bbox())}")
    glyph_outline.emit(PathPrinter())


def _load_outline(font_file: Path, font_config: FontConfig, verbose: bool) -> Outline:
    """Load the outline of the configured character.

    Args:
        font_file: Path to font file
        font_config: Face and character selection
        verbose: Print font information

    Returns:
        Recorded outline

    Raises:
        FontLoadError: If the font cannot be parsed
        GlyphNotFoundError: If the character is not mapped
        GlyphOutlineMissingError: If the glyph has no outline
    """
    with FontReader(font_file, face_index=font_config.face_index) as reader:
        glyph_name = reader.glyph_name_for_char(font_config.character)
        if glyph_name is None:
            raise GlyphNotFoundError(font_config.character)

        if verbose:
            print_font_info(
                font_path=str(font_file),
                font_type=reader.format,
                winding=reader.winding.value,
                upm=reader.units_per_em,
                glyph_name=glyph_name,
            )

        glyph_outline = Outline.from_source(reader, glyph_name, reader.winding)
        if glyph_outline is None:
            raise GlyphOutlineMissingError(glyph_name)

    if verbose:
        console.print(
            f"  {len(glyph_outline.contours)} contours, {glyph_outline.point_count} points"
        )
    return glyph_outline


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()

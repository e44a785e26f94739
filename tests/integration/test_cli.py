"""End-to-end tests for the glyphoutline command."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from glyphoutline import __version__
from glyphoutline.cli.app import app

runner = CliRunner()


def _stdout_lines(result) -> list[str]:
    return result.stdout.splitlines()


class TestOutlineCommand:
    """Tests for successful runs."""

    def test_plain_outline(self, ttf_path: Path) -> None:
        """Test bbox line followed by one command per line."""
        result = runner.invoke(app, [str(ttf_path), "-c", "A"])

        assert result.exit_code == 0, result.output
        assert _stdout_lines(result) == [
            "bbox: BBox { x_min: 0, y_min: 0, x_max: 500, y_max: 700 }",
            "M 0 0",
            "L 0 700",
            "L 500 700",
            "L 500 0",
            "L 0 0",
            "Z",
        ]

    def test_embolden(self, ttf_path: Path) -> None:
        """Test --embolden with the default strength."""
        result = runner.invoke(app, [str(ttf_path), "-c", "A", "--embolden"])

        assert result.exit_code == 0, result.output
        lines = _stdout_lines(result)
        assert lines[0] == "bbox: BBox { x_min: 0, y_min: 0, x_max: 540, y_max: 740 }"
        assert lines[1:] == ["M 0 0", "L 0 740", "L 540 740", "L 540 0", "L 0 0", "Z"]

    def test_embolden_custom_strength(self, ttf_path: Path) -> None:
        """Test --strength changes the offset."""
        result = runner.invoke(app, [str(ttf_path), "-c", "A", "-e", "-s", "5"])

        assert result.exit_code == 0, result.output
        assert _stdout_lines(result)[0] == (
            "bbox: BBox { x_min: 0, y_min: 0, x_max: 510, y_max: 710 }"
        )

    def test_embolden_then_oblique(self, ttf_path: Path) -> None:
        """Test embolden is applied before the shear."""
        result = runner.invoke(app, [str(ttf_path), "-c", "A", "-e", "-o"])

        assert result.exit_code == 0, result.output
        assert _stdout_lines(result) == [
            "bbox: BBox { x_min: 0, y_min: 0, x_max: 725, y_max: 740 }",
            "M 0 0",
            "L 185 740",
            "L 725 740",
            "L 540 0",
            "L 0 0",
            "Z",
        ]

    def test_oblique_moves_control_point(self, ttf_path: Path) -> None:
        """Test the shear applies to off-curve points too."""
        result = runner.invoke(app, [str(ttf_path), "-c", "V", "-o", "-k", "0.5"])

        assert result.exit_code == 0, result.output
        lines = _stdout_lines(result)
        assert lines[0] == "bbox: BBox { x_min: 0, y_min: 0, x_max: 500, y_max: 500 }"
        assert lines[1:] == ["M 0 0", "Q 500 500 500 0", "L 0 0", "Z"]

    def test_cff_font(self, otf_path: Path) -> None:
        """Test a CFF font goes through the PostScript convention."""
        result = runner.invoke(app, [str(otf_path), "-c", "A", "-e"])

        assert result.exit_code == 0, result.output
        assert _stdout_lines(result) == [
            "bbox: BBox { x_min: 0, y_min: 0, x_max: 540, y_max: 740 }",
            "M 0 0",
            "L 540 0",
            "L 540 740",
            "L 0 740",
            "L 0 0",
            "Z",
        ]

    def test_verbose(self, ttf_path: Path) -> None:
        """Test font information is printed alongside the path."""
        result = runner.invoke(app, [str(ttf_path), "-c", "A", "-v"])

        assert result.exit_code == 0, result.output
        assert "UPM" in result.output
        assert "truetype winding" in result.output
        assert "bbox: BBox" in result.output

    def test_log_file(self, ttf_path: Path, tmp_path: Path) -> None:
        """Test --log-file receives the structured log."""
        log_file = tmp_path / "outline.log"
        result = runner.invoke(app, [str(ttf_path), "-c", "A", "-e", "--log-file", str(log_file)])

        assert result.exit_code == 0, result.output
        assert "Outline emboldened" in log_file.read_text(encoding="utf-8")

    def test_lowercase_log_level(self, ttf_path: Path) -> None:
        """Test level names are case-insensitive."""
        result = runner.invoke(app, [str(ttf_path), "-c", "A", "--log-level", "debug"])

        assert result.exit_code == 0, result.output
        assert "Outline recorded" in result.output

    def test_quiet_hides_debug_events(self, ttf_path: Path) -> None:
        """Test --quiet keeps debug events off the console."""
        result = runner.invoke(app, [str(ttf_path), "-c", "A", "--log-level", "DEBUG", "-q"])

        assert result.exit_code == 0, result.output
        assert "Outline recorded" not in result.output
        assert "bbox: BBox" in result.output

    def test_version(self) -> None:
        """Test --version prints and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"glyphoutline v{__version__}" in result.stdout


class TestOutlineCommandErrors:
    """Tests for failing runs."""

    def test_verbose_and_quiet_conflict(self, ttf_path: Path) -> None:
        """Test --verbose and --quiet are mutually exclusive."""
        result = runner.invoke(app, [str(ttf_path), "-v", "-q"])

        assert result.exit_code == 1
        assert "Cannot use --verbose and --quiet together" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing font file exits with status 1."""
        result = runner.invoke(app, [str(tmp_path / "missing.ttf")])

        assert result.exit_code == 1
        assert "Input file not found" in result.output

    def test_invalid_font(self, tmp_path: Path) -> None:
        """Test an unparsable file exits with status 1."""
        path = tmp_path / "broken.ttf"
        path.write_bytes(b"\x00\x01\x00\x00garbage")

        result = runner.invoke(app, [str(path), "-c", "A"])

        assert result.exit_code == 1
        assert "Could not load font" in result.output

    def test_unmapped_character(self, ttf_path: Path) -> None:
        """Test a character missing from the cmap."""
        result = runner.invoke(app, [str(ttf_path), "-c", "Z"])

        assert result.exit_code == 1
        assert "U+005A" in result.output
        assert "bbox:" not in result.output

    def test_glyph_without_outline(self, ttf_path: Path) -> None:
        """Test a mapped glyph with no contours."""
        result = runner.invoke(app, [str(ttf_path), "-c", " "])

        assert result.exit_code == 1
        assert "has no outline" in result.output

    @pytest.mark.parametrize(
        ("args", "field"),
        [
            (["-c", "AB"], "character"),
            (["-o", "-k", "1.5"], "skew"),
            (["--log-level", "LOUD"], "log_level"),
        ],
    )
    def test_invalid_option(self, ttf_path: Path, args: list[str], field: str) -> None:
        """Test option values rejected by the settings model."""
        result = runner.invoke(app, [str(ttf_path), *args])

        assert result.exit_code == 1
        assert f"Invalid option {field}" in result.output

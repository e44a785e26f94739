"""Textual path printer."""

import sys
from typing import TextIO


def format_coord(value: float) -> str:
    """Format a coordinate with the shortest round-tripping text.

    Integral values are printed without a fractional part.

    Args:
        value: Coordinate value

    Returns:
        Text such as "10", "-2.5" or "0.1"
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class PathPrinter:
    """PathSink writing one line per command.

    Lines have the form ``M x y``, ``L x y``, ``Q x1 y1 x y``,
    ``C x1 y1 x2 y2 x y`` and ``Z``.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize the printer.

        Args:
            stream: Text stream to write to (default: sys.stdout)
        """
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved late so redirected stdout is honoured.
        return self._stream if self._stream is not None else sys.stdout

    def _write(self, command: str, *coords: float) -> None:
        parts = [command, *(format_coord(c) for c in coords)]
        self.stream.write(" ".join(parts) + "\n")

    def move_to(self, x: float, y: float) -> None:
        self._write("M", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._write("L", x, y)

    def quad_to(self, x1: float, y1: float, x: float, y: float) -> None:
        self._write("Q", x1, y1, x, y)

    def curve_to(
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> None:
        self._write("C", x1, y1, x2, y2, x, y)

    def close(self) -> None:
        self._write("Z")

"""
Parse the text heightmap format into a HeightGrid.

Format, one row per line:

    2199943210
    3987894921
    ...

Rows end with LF or CRLF. Every row is a non-empty run of digits 0-9, with
no surrounding whitespace, and all rows share one length. Whitespace-only
lines before and after the grid are ignored.
"""

from pathlib import Path
from typing import List, Optional, Union

import numpy as np
import structlog

from ..core.grid import HeightGrid

logger = structlog.get_logger()

_DIGITS = frozenset("0123456789")


class MalformedGridError(ValueError):
    """Raised when heightmap text is not a rectangular grid of digits."""

    def __init__(self, message: str, line: int, column: Optional[int] = None):
        self.line = line
        self.column = column
        location = f"line {line}" if column is None else f"line {line}, column {column}"
        super().__init__(f"{message} ({location})")


def parse_heightmap(raw: str) -> HeightGrid:
    """
    Parse heightmap text into a grid.

    Args:
        raw: Text with one row of digits per line

    Returns:
        HeightGrid with uint8 heights

    Raises:
        MalformedGridError: On empty input, a non-digit character or ragged rows
    """
    # Only \n and \r\n end a row; other Unicode line breaks are bad characters
    lines = [line[:-1] if line.endswith("\r") else line for line in raw.split("\n")]

    # Skip blank lines around the grid but keep the file's line numbers
    first = 0
    while first < len(lines) and not lines[first].strip():
        first += 1
    last = len(lines)
    while last > first and not lines[last - 1].strip():
        last -= 1
    if first == last:
        raise MalformedGridError("Heightmap has no rows", line=1)

    width = len(lines[first])
    rows: List[List[int]] = []

    for line_no, line in enumerate(lines[first:last], start=first + 1):
        if not line:
            raise MalformedGridError("Empty row inside heightmap", line=line_no)

        for col_no, char in enumerate(line, start=1):
            if char not in _DIGITS:
                raise MalformedGridError(f"Unexpected character {char!r}", line=line_no, column=col_no)

        if len(line) != width:
            raise MalformedGridError(
                f"Row has {len(line)} cells, expected {width}", line=line_no
            )

        rows.append([int(char) for char in line])

    grid = HeightGrid(np.array(rows, dtype=np.uint8))
    logger.debug("Heightmap parsed", width=grid.width, height=grid.height)
    return grid


def load_heightmap(path: Union[str, Path]) -> HeightGrid:
    """Read and parse a heightmap file."""
    path = Path(path)
    logger.info("Loading heightmap", path=str(path))
    return parse_heightmap(path.read_text(encoding="utf-8"))

"""Loading of height maps: rows of space separated integers."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike

from fdfview.lines import read_lines

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_LEADING_INT = re.compile(r"[\t\n\v\f\r ]*([+-]?\d+)")


class MapError(ValueError):
    """A map file could not be read or is malformed."""


@dataclass(frozen=True)
class HeightMap:
    """A grid of heights: ``rows[y][x]``."""

    width: int
    height: int
    rows: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        if len(self.rows) != self.height or any(len(row) != self.width for row in self.rows):
            raise MapError("rows do not match the map size")

    def at(self, x: int, y: int) -> int:
        """Return the height at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"point ({x}, {y}) outside {self.width}x{self.height} map")
        return self.rows[y][x]


def _to_int(token: str) -> int:
    match = _LEADING_INT.match(token)
    return int(match.group(1)) if match else 0


def parse_map(lines: Iterable[str]) -> HeightMap:
    """Build a height map from its lines; every line must hold as many values as the first."""
    rows: list[tuple[int, ...]] = []
    width: int | None = None
    for number, line in enumerate(lines, start=1):
        tokens = [token for token in line.split(" ") if token]
        if width is None:
            width = len(tokens)
        if len(tokens) != width:
            raise MapError(f"line {number}: expected {width} values, found {len(tokens)}")
        values = tuple(_to_int(token) for token in tokens)
        if any(not INT_MIN <= value <= INT_MAX for value in values):
            raise MapError(f"line {number}: value out of range")
        rows.append(values)
    if not rows:
        raise MapError("map is empty")
    if not width:
        raise MapError("map has no columns")
    return HeightMap(width, len(rows), tuple(rows))


def read_map(path: str | PathLike[str]) -> HeightMap:
    """Read a height map file."""
    try:
        stream = open(path, encoding="utf-8", errors="replace", newline="")
    except OSError as exc:
        raise MapError(f"Error opening file: {path}") from exc
    with stream:
        try:
            return parse_map(read_lines(stream))
        except OSError as exc:
            raise MapError(f"Error reading file: {path}") from exc
"""Reader for XPM images, plus the colour conversion used for shallow visuals."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from fdfview.colors import lookup_color
from fdfview.wordtab import find_token, find_unquoted, split_words

TRANSPARENT = 0xFF000000
"""Pixel value stored for the XPM colour "None"."""

_NAME_LIMIT = 63
_STRTOL_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image: rows of 0xRRGGBB pixel values."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y][x]


def strip_comments(text: str) -> str:
    """Blank out C comments that lie outside quoted strings; the length is kept."""
    chars = list(text)
    for opener, closer, extra in (("/*", "*/", 4), ("//", "\n", 3)):
        while True:
            current = "".join(chars)
            begin = find_unquoted(current, opener)
            if begin == -1:
                break
            end = find_token(current[begin + 2:], closer)
            stop = min(len(chars), begin + end + extra)
            chars[begin:stop] = " " * (stop - begin)
    return "".join(chars)


def _strtol_hex(text: str) -> int:
    match = _STRTOL_HEX.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits, 16) if digits else 0
    if sign == "-":
        value = -value
    # The result is narrowed to a 32-bit signed int.
    return ((value + 2**31) % 2**32) - 2**31


def text_to_rgb(name: str, end: str | None) -> int:
    """Turn an XPM colour spec ("#rrggbb" or a colour name) into 0xRRGGBB.

    ``end`` is the word after the name, joined to it for two-word names.
    Unknown names give 0; "None" gives -1.
    """
    if name.startswith("#"):
        return _strtol_hex(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise ValueError(f"bad XPM header: {line!r}")
    values = []
    for word in words[:4]:
        match = re.match(r"\s*[+-]?\d+", word)
        values.append(int(match.group()) if match else 0)
    width, height, ncolors, cpp = values
    if not (width and height and ncolors and cpp):
        raise ValueError(f"bad XPM header: {line!r}")
    return width, height, ncolors, cpp


def _next_row(rows: Iterator[str], what: str) -> str:
    try:
        return next(rows)
    except StopIteration:
        raise ValueError(f"XPM data ends before {what}") from None


def parse_xpm_data(rows: Iterable[str]) -> XpmImage:
    """Decode an XPM image from its strings: header, colour lines, pixel rows."""
    source = iter(rows)
    width, height, ncolors, cpp = _header(_next_row(source, "the header"))

    palette: dict[str, int] = {}
    last_wins = cpp <= 2
    for _ in range(ncolors):
        line = _next_row(source, "the colour table ends")
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            index = len(words)
        if index >= len(words):
            raise ValueError(f"XPM colour line without a colour: {line!r}")
        end = words[index + 1] if index + 1 < len(words) else None
        rgb = text_to_rgb(words[index], end)
        key = line[:cpp]
        if last_wins:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    pixels = []
    for _ in range(height):
        line = _next_row(source, "all pixel rows")
        if len(line) < width * cpp:
            raise ValueError(f"XPM pixel row too short: {line!r}")
        row = []
        for x in range(width):
            colour = palette.get(line[x * cpp:(x + 1) * cpp], 0)
            row.append(TRANSPARENT if colour == -1 else colour)
        pixels.append(tuple(row))
    return XpmImage(width, height, tuple(pixels))


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        stop = text.find('"', start + 1)
        if stop == -1:
            return
        yield text[start + 1:stop]
        pos = stop + 1


def parse_xpm(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    return parse_xpm_data(_quoted_strings(strip_comments(text)))


def load_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    return parse_xpm(Path(path).read_text(encoding="latin-1"))


def good_color(color: int, depth: int, shifts: Sequence[int]) -> int:
    """Convert 0xRRGGBB to a pixel value for a visual of the given depth.

    ``shifts`` holds, for red, green and blue in turn, the mask offset and
    the mask width. Depths of 24 and more take the colour unchanged.
    """
    if len(shifts) != 6:
        raise ValueError("shifts must hold six values")
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts[1])) << shifts[0])
        + ((green >> (16 - shifts[3])) << shifts[2])
        + ((blue >> (16 - shifts[5])) << shifts[4])
    )
"""A small printf: %c %s %p %d %i %u %x %X %%, with C integer widths."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _as_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def _char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError("%c takes a single character")
        return arg
    return chr(int(arg) & 0xFF)


def _string(arg: Any) -> str:
    return "(null)" if arg is None else str(arg)


def _pointer(arg: Any) -> str:
    value = 0 if arg is None else int(arg) & _ULONG_MASK
    return "(nil)" if value == 0 else f"0x{value:x}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": lambda arg: str(_as_int32(int(arg))),
    "i": lambda arg: str(_as_int32(int(arg))),
    "u": lambda arg: str(int(arg) & _UINT_MASK),
    "x": lambda arg: f"{int(arg) & _UINT_MASK:x}",
    "X": lambda arg: f"{int(arg) & _UINT_MASK:X}",
}


def _expand(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    values = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, None)
        if spec is None:
            return
        if spec == "%":
            yield "%"
        elif spec in _CONVERSIONS:
            try:
                arg = next(values)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{spec}") from None
            yield _CONVERSIONS[spec](arg)
        # Any other conversion character prints nothing and takes no argument.


def cformat(fmt: str, *args: Any) -> str:
    """Format args into fmt and return the text."""
    return "".join(_expand(fmt, args))


def cprintf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to stream (standard output by default).

    Returns the number of characters written.
    """
    text = cformat(fmt, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)
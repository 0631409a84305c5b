"""Word splitting and substring search used by the XPM reader."""

from __future__ import annotations

import re

_BLANKS = re.compile(r"[ \t]+")


def split_words(text: str) -> list[str]:
    """Split text into words separated by runs of spaces and tabs."""
    return [word for word in _BLANKS.split(text) if word]


def _check_token(token: str) -> None:
    if not token:
        raise ValueError("search token must not be empty")


def find_token(text: str, token: str) -> int:
    """Return the index of the first occurrence of token in text, or -1."""
    _check_token(token)
    return text.find(token)


def find_unquoted(text: str, token: str) -> int:
    """Return the index of the first occurrence of token outside double quotes, or -1.

    A double quote toggles the quoted state at its own position, so a token
    that starts with the closing quote of a string can still be found there.
    """
    _check_token(token)
    inside = False
    for pos in range(len(text) - len(token) + 1):
        if text[pos] == '"':
            inside = not inside
        if not inside and text.startswith(token, pos):
            return pos
    return -1
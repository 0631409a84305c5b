"""Buffered line reading from a stream, one line per call."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 42
"""Default number of characters or bytes asked of the stream per read."""


def _line_end(data: AnyStr) -> int:
    """Index just past the first newline in data, or -1 if it has none."""
    newline = b"\n" if isinstance(data, (bytes, bytearray)) else "\n"
    cut = data.find(newline)
    return -1 if cut == -1 else cut + 1


class LineReader(Generic[AnyStr]):
    """Read a text or binary stream one line at a time.

    Each returned line keeps its trailing newline; the last line of a
    stream that does not end in a newline is returned as it is.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, not {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def _read_chunk(self) -> AnyStr | None:
        """Read until a newline has been seen or the stream is exhausted."""
        pieces = []
        while True:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            pieces.append(chunk)
            if _line_end(chunk) != -1:
                break
        if not pieces:
            return None
        return pieces[0][:0].join(pieces)

    def next_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream has no more data."""
        data = self._read_chunk()
        if data is not None:
            self._pending = data if self._pending is None else self._pending + data
        pending = self._pending
        if not pending:
            return None
        end = _line_end(pending)
        if end == -1:
            end = len(pending)
        self._pending = pending[end:] or None
        return pending[:end]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Iterate over the lines of a stream, newlines included."""
    return iter(LineReader(stream, buffer_size))
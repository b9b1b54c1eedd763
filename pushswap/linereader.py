"""Line-by-line reading of a text stream in fixed-size chunks."""

from __future__ import annotations

from typing import Iterator, TextIO

__all__ = ["BUFFER_SIZE", "LineReader", "read_lines"]

BUFFER_SIZE = 32


class LineReader:
    """Read lines from ``stream`` by requesting ``buffer_size`` characters at a time."""

    def __init__(self, stream: TextIO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""

    def read_line(self) -> str:
        """Return the next line.

        A complete line keeps its trailing newline. At the end of the stream the
        unterminated remainder is returned without one; after that, ``""``.
        """
        while "\n" not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending += chunk
        cut = self._pending.find("\n")
        if cut < 0:
            line, self._pending = self._pending, ""
        else:
            line, self._pending = self._pending[:cut + 1], self._pending[cut + 1:]
        return line

    def __iter__(self) -> Iterator[str]:
        """Yield newline-terminated lines without the newline.

        Iteration stops at the first line that has no newline, which is not
        yielded.
        """
        while True:
            line = self.read_line()
            if not line.endswith("\n"):
                return
            yield line[:-1]


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the newline-terminated lines of ``stream`` without their newlines."""
    return iter(LineReader(stream))
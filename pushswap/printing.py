"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

__all__ = ["put_char", "put_str", "put_endl", "put_number"]


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: Optional[TextIO] = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _target(stream).write(char)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text``; a ``None`` text writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; a ``None`` text writes nothing."""
    if text is None:
        return
    _target(stream).write(text + "\n")


def put_number(number: int, stream: Optional[TextIO] = None) -> None:
    """Write ``number`` in decimal."""
    _target(stream).write(str(int(number)))
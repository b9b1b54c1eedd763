"""String helpers with the exact semantics the command-line tools rely on."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, Optional

__all__ = [
    "atoi",
    "itoa",
    "split",
    "strchr",
    "strrchr",
    "strcmp",
    "strncmp",
    "strnstr",
    "strlcpy",
    "strlcat",
    "strmapi",
    "strtrim",
    "substr",
]

_WHITESPACE = frozenset("\t\n\v\f\r ")
_INT_BITS = 32
_INT_MOD = 1 << _INT_BITS
_INT_MAX = (1 << (_INT_BITS - 1)) - 1


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    value %= _INT_MOD
    return value - _INT_MOD if value > _INT_MAX else value


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _single_char(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way a 32-bit ``int`` accumulator would.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. When the accumulator is seen to wrap, the result is ``-1`` for a
    positive number and ``0`` for a negative one. Other wraps go unnoticed and
    the wrapped value is returned.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = -1 if rest.startswith("-") else 1
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    result = 0
    previous = 0
    for char in rest:
        if not _is_ascii_digit(char):
            break
        result = _wrap_int(result * 10 + ord(char) - ord("0"))
        if result < previous:
            return 0 if sign == -1 else -1
        previous = result
    return _wrap_int(sign * result)


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(int(number))


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    return [piece for piece in text.split(_single_char(separator)) if piece]


def strchr(text: str, char: str) -> Optional[int]:
    """Index of the first ``char`` in ``text``; a NUL character finds the end."""
    _single_char(char)
    found = text.find(char)
    if found >= 0:
        return found
    return len(text) if char == "\0" else None


def strrchr(text: str, char: str) -> Optional[int]:
    """Index of the last ``char`` in ``text``; a NUL character finds the end."""
    _single_char(char)
    if char == "\0":
        return len(text)
    found = text.rfind(char)
    return found if found >= 0 else None


def _compare(first: str, second: str) -> int:
    for left, right in zip_longest(first, second, fillvalue="\0"):
        if left != right:
            return ord(left) - ord(right)
    return 0


def strcmp(first: str, second: str) -> int:
    """Difference of the first unequal character codes, or 0 if equal."""
    return _compare(first, second)


def strncmp(first: str, second: str, count: int) -> int:
    """Like :func:`strcmp` but looks at no more than ``count`` characters."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    return _compare(first[:count], second[:count])


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not needle:
        return 0
    found = haystack[:length].find(needle)
    return found if found >= 0 else None


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the full length of ``src``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return src[: max(size - 1, 0)], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` in a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would need;
    if ``dest`` already fills the buffer, the length reported is ``size`` plus
    the length of ``src``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if len(dest) < size:
        copied, src_length = strlcpy(src, size - len(dest))
        return dest + copied, len(dest) + src_length
    return dest, len(src) + size


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string by applying ``func(index, char)`` to every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]
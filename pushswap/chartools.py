"""Character classification and case conversion on ASCII code points."""

from __future__ import annotations

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "to_upper",
    "to_lower",
]

_DIGITS = range(ord("0"), ord("9") + 1)
_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_CASE_SHIFT = ord("a") - ord("A")


def _code_point(code: int | str) -> int:
    """Return the integer code of ``code``, which may be an int or a one-character string."""
    if isinstance(code, str):
        if len(code) != 1:
            raise ValueError(f"expected a single character, got {code!r}")
        return ord(code)
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError(f"expected an int or a single character, got {type(code).__name__}")
    return code


def is_alpha(code: int | str) -> bool:
    """True for an ASCII letter."""
    value = _code_point(code)
    return value in _UPPER or value in _LOWER


def is_digit(code: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return _code_point(code) in _DIGITS


def is_alnum(code: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: int | str) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code_point(code) <= 127


def is_print(code: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code_point(code) <= 126


def to_upper(code: int | str) -> int:
    """Return the code of the upper-case letter, or the code unchanged."""
    value = _code_point(code)
    return value - _CASE_SHIFT if value in _LOWER else value


def to_lower(code: int | str) -> int:
    """Return the code of the lower-case letter, or the code unchanged."""
    value = _code_point(code)
    return value + _CASE_SHIFT if value in _UPPER else value
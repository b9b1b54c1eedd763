"""Validation of the integer arguments given to the tools."""

from __future__ import annotations

from typing import Iterable, Sequence

from .chartools import is_digit
from .strtools import atoi

__all__ = ["InputError", "is_valid_number", "has_duplicates", "parse_arguments", "is_ascending"]


class InputError(ValueError):
    """The arguments are not a list of distinct, well-formed integers."""


def is_valid_number(text: str) -> bool:
    """True if ``text`` is a canonical decimal integer that fits the integer range.

    A leading zero is refused unless the text is ``"0"`` itself, a ``+`` sign is
    refused, and so is ``"-0"``.
    """
    if text.startswith("0") and len(text) > 1:
        return False
    for index, char in enumerate(text):
        if not is_digit(char) and not (index == 0 and char == "-" and len(text) > 1):
            return False
    value = atoi(text)
    if value == -1 and text != "-1":
        return False
    if value == 0 and text != "0":
        return False
    return True


def has_duplicates(args: Sequence[str]) -> bool:
    """True if the same argument text occurs more than once."""
    return len(set(args)) != len(args)


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Validate ``args`` and return their integer values in order.

    Raises :class:`InputError` for a malformed number or a repeated argument.
    """
    texts = list(args)
    for text in texts:
        if not is_valid_number(text):
            raise InputError(f"invalid number {text!r}")
    if has_duplicates(texts):
        raise InputError("duplicate argument")
    return [atoi(text) for text in texts]


def is_ascending(values: Sequence[int]) -> bool:
    """True if no value is smaller than the one before it."""
    return all(lower <= upper for lower, upper in zip(values, values[1:]))
"""Command-line entry points: the solver and the checker."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from .linereader import read_lines
from .parsing import is_ascending, parse_arguments
from .printing import put_endl, put_str
from .solver import solve
from .stacks import Stacks, is_valid_command

__all__ = ["run_checker", "push_swap_main", "checker_main"]

_ERROR = "Error\n"
_OK = "\033[1;32mOK\033[0m"
_KO = "\033[1;31mKO\033[0m"


def run_checker(values: Iterable[int], commands: Iterable[str]) -> bool:
    """Apply ``commands`` to a stack holding ``values``; True if it ends sorted.

    Raises :class:`ValueError` at the first name that is not an operation.
    """
    stacks = Stacks(values)
    for name in commands:
        if not is_valid_command(name):
            raise ValueError(f"invalid command {name!r}")
        stacks.apply(name)
    return stacks.is_sorted()


def _arguments(argv: Optional[Sequence[str]]) -> list[str]:
    return list(sys.argv[1:] if argv is None else argv)


def push_swap_main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the operations that sort the integers given as arguments."""
    args = _arguments(argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except ValueError:
        put_str(_ERROR, sys.stderr)
        return 1
    if is_ascending(values):
        return 0
    for name in solve(values):
        put_endl(name, sys.stdout)
    return 0


def checker_main(argv: Optional[Sequence[str]] = None) -> int:
    """Read operations from standard input and report whether they sort the arguments."""
    args = _arguments(argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
        is_sorted = run_checker(values, read_lines(sys.stdin))
    except ValueError:
        put_str(_ERROR, sys.stderr)
        return 1
    put_endl(_OK if is_sorted else _KO, sys.stdout)
    return 0
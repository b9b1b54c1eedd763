"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Iterable, Optional, TextIO

from .printing import put_str

__all__ = ["COMMANDS", "Cell", "Stacks", "is_valid_command"]

COMMANDS = ("sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr")
_COMMAND_SET = frozenset(COMMANDS)


def is_valid_command(name: str) -> bool:
    """True if ``name`` is exactly one of the eleven operation names."""
    return name in _COMMAND_SET


@dataclass(eq=False)
class Cell:
    """One element of a stack: its value, its rank once ordered, and its group."""

    value: int
    order: int = 0
    group: int = 0


class Stacks:
    """Stacks ``a`` and ``b``; index 0 of each deque is the top.

    When ``output`` is given, every operation that is performed writes its name
    and a newline to it. An operation on a stack too small for it does nothing
    and writes nothing; the combined operations always write their own name.
    """

    def __init__(self, values: Iterable[int] = (), output: Optional[TextIO] = None) -> None:
        self.a: Deque[Cell] = deque(Cell(value) for value in values)
        self.b: Deque[Cell] = deque()
        self.output = output
        count = len(self.a)
        self.next_order = 1
        self.group_index = 0
        self.group_min = 1
        self.group_max = count
        self.group_med = max(count - 1, 0) // 2 + 1
        self._dispatch: dict[str, Callable[[], None]] = {
            "sa": self.swap_a,
            "sb": self.swap_b,
            "ss": self.swap_both,
            "pa": self.push_a,
            "pb": self.push_b,
            "ra": self.rotate_a,
            "rb": self.rotate_b,
            "rr": self.rotate_both,
            "rra": self.reverse_rotate_a,
            "rrb": self.reverse_rotate_b,
            "rrr": self.reverse_rotate_both,
        }

    def __repr__(self) -> str:
        return f"Stacks(a={self.values_a()!r}, b={self.values_b()!r})"

    def _emit(self, name: str) -> None:
        if self.output is not None:
            put_str(name + "\n", self.output)

    @staticmethod
    def _swap(stack: Deque[Cell]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: Deque[Cell], steps: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(steps)
        return True

    def push_a(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._emit("pa")

    def push_b(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._emit("pb")

    def swap_a(self) -> None:
        """Exchange the two top elements of ``a``."""
        if self._swap(self.a):
            self._emit("sa")

    def swap_b(self) -> None:
        """Exchange the two top elements of ``b``."""
        if self._swap(self.b):
            self._emit("sb")

    def swap_both(self) -> None:
        """Swap the tops of both stacks."""
        self._swap(self.a)
        self._swap(self.b)
        self._emit("ss")

    def rotate_a(self) -> None:
        """Move the top of ``a`` to its bottom."""
        if self._rotate(self.a, -1):
            self._emit("ra")

    def rotate_b(self) -> None:
        """Move the top of ``b`` to its bottom."""
        if self._rotate(self.b, -1):
            self._emit("rb")

    def rotate_both(self) -> None:
        """Rotate both stacks."""
        self._rotate(self.a, -1)
        self._rotate(self.b, -1)
        self._emit("rr")

    def reverse_rotate_a(self) -> None:
        """Move the bottom of ``a`` to its top."""
        if self._rotate(self.a, 1):
            self._emit("rra")

    def reverse_rotate_b(self) -> None:
        """Move the bottom of ``b`` to its top."""
        if self._rotate(self.b, 1):
            self._emit("rrb")

    def reverse_rotate_both(self) -> None:
        """Reverse-rotate both stacks."""
        self._rotate(self.a, 1)
        self._rotate(self.b, 1)
        self._emit("rrr")

    def apply(self, name: str) -> None:
        """Perform the operation called ``name``."""
        try:
            operation = self._dispatch[name]
        except KeyError:
            raise ValueError(f"unknown command {name!r}") from None
        operation()

    def values_a(self) -> list[int]:
        """Values of ``a`` from top to bottom."""
        return [cell.value for cell in self.a]

    def values_b(self) -> list[int]:
        """Values of ``b`` from top to bottom."""
        return [cell.value for cell in self.b]

    def is_sorted(self) -> bool:
        """True if ``b`` is empty and ``a`` never decreases from top to bottom."""
        if self.b:
            return False
        values = self.values_a()
        return all(lower <= upper for lower, upper in zip(values, values[1:]))
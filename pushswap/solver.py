"""Producing a sequence of stack operations that sorts stack ``a``."""

from __future__ import annotations

import io
from typing import Iterable

from .parsing import is_ascending
from .stacks import Stacks

__all__ = ["assign_order", "sort_small", "sort_big", "solve"]

_SORTED_GROUP = -1
_SMALL_LIMIT = 5


def assign_order(stacks: Stacks) -> None:
    """Give every cell of ``a`` its 1-based rank among the values of ``a``."""
    ranks: dict[int, int] = {}
    for rank, value in enumerate(sorted(cell.value for cell in stacks.a), start=1):
        ranks.setdefault(value, rank)
    for cell in stacks.a:
        cell.order = ranks[cell.value]


def _sort_three(stacks: Stacks) -> None:
    one, two, three = (stacks.a[index].order for index in range(3))
    if one > two:
        if one < three:
            stacks.swap_a()
        elif two < three:
            stacks.rotate_a()
        elif two > three:
            stacks.swap_a()
            stacks.reverse_rotate_a()
    elif one < two:
        if one > three:
            stacks.reverse_rotate_a()
        elif one < three and two > three:
            stacks.swap_a()
            stacks.rotate_a()


def _sort_four(stacks: Stacks) -> None:
    largest_at_top = bool(stacks.a) and stacks.a[0].order == 4
    while stacks.a[0].order != 1:
        if largest_at_top:
            stacks.reverse_rotate_a()
        else:
            stacks.rotate_a()
    stacks.push_b()
    _sort_three(stacks)
    stacks.push_a()


def _sort_five(stacks: Stacks) -> None:
    remaining = 2
    while remaining:
        if stacks.a[0].order < 3:
            stacks.push_b()
            remaining -= 1
        else:
            stacks.rotate_a()
    _sort_three(stacks)
    if stacks.b[0].order == 1:
        stacks.swap_b()
    stacks.push_a()
    stacks.push_a()


def sort_small(stacks: Stacks) -> None:
    """Sort a stack ``a`` of two to five ranked cells; other sizes are left alone."""
    size = len(stacks.a)
    if size == 2:
        if stacks.a[0].order != 1:
            stacks.swap_a()
    elif size == 3:
        _sort_three(stacks)
    elif size == 4:
        _sort_four(stacks)
    elif size == 5:
        _sort_five(stacks)


def _measure_group(stacks: Stacks, on_a: bool) -> int:
    """Size the group on top of a stack and set the group's bounds and pivot."""
    stack = stacks.a if on_a else stacks.b
    top_group = stack[0].group
    size = 0
    for cell in stack:
        if cell.group != top_group:
            break
        size += 1
    stacks.group_min = stacks.next_order
    stacks.group_max = size + stacks.group_min - 1
    spread = stacks.group_max - stacks.group_min
    if size <= _SMALL_LIMIT:
        stacks.group_med = spread // 2 + stacks.group_min
    else:
        stacks.group_med = spread // 3 * 2 + stacks.group_min
    return size


def _split_group_of_a(stacks: Stacks, size: int) -> int:
    """Push the lower part of the top group of ``a`` to ``b``; return rotations made."""
    rotations = 0
    to_push = stacks.group_med - stacks.group_min + 1
    while to_push and size > 0:
        size -= 1
        top = stacks.a[0]
        if top.order == stacks.next_order and stacks.a[-1].group == _SORTED_GROUP:
            top.group = _SORTED_GROUP
            stacks.next_order += 1
            stacks.rotate_a()
        elif top.order > stacks.group_med:
            stacks.rotate_a()
            rotations += 1
        else:
            stacks.push_b()
            to_push -= 1
    return rotations


def _from_a_to_b(stacks: Stacks) -> None:
    if not stacks.a:
        return
    first_group = stacks.a[0].group
    if first_group < 0:
        return
    size = _measure_group(stacks, on_a=True)
    last_group = stacks.a[-1].group
    rotations = _split_group_of_a(stacks, size)
    if first_group != last_group:
        for _ in range(rotations):
            stacks.reverse_rotate_a()


def _from_b_to_a(stacks: Stacks) -> None:
    size = _measure_group(stacks, on_a=False)
    to_return = stacks.group_max - stacks.group_med + 1
    stacks.group_index += 1
    while to_return and stacks.b and size > 0:
        size -= 1
        top = stacks.b[0]
        if top.order == stacks.next_order:
            top.group = _SORTED_GROUP
            stacks.next_order += 1
            stacks.push_a()
            stacks.rotate_a()
        elif top.order >= stacks.group_med:
            top.group = stacks.group_index
            to_return -= 1
            stacks.push_a()
        else:
            stacks.rotate_b()


def _is_finished(stacks: Stacks) -> bool:
    return not stacks.b and (not stacks.a or stacks.a[0].group == _SORTED_GROUP)


def sort_big(stacks: Stacks) -> None:
    """Sort a stack ``a`` of ranked cells by repeated partitioning through ``b``."""
    while not _is_finished(stacks):
        _from_a_to_b(stacks)
        while stacks.b:
            _from_b_to_a(stacks)


def solve(values: Iterable[int]) -> list[str]:
    """Return the operation names that sort ``values``, none if already ascending."""
    numbers = list(values)
    if len(set(numbers)) != len(numbers):
        raise ValueError("values must be distinct")
    if is_ascending(numbers):
        return []
    output = io.StringIO()
    stacks = Stacks(numbers, output=output)
    assign_order(stacks)
    if len(stacks.a) > _SMALL_LIMIT:
        sort_big(stacks)
    else:
        sort_small(stacks)
    return output.getvalue().splitlines()
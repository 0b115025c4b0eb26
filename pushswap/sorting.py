"""Strategies that sort stack ``a`` of a :class:`PushSwap` machine."""

from __future__ import annotations

from typing import Mapping, Sequence

from .stacks import PushSwap


def chunk_size(size: int) -> int:
    """Return how many ranks one chunk covers for a stack of ``size`` values."""
    if size <= 100:
        count = 5
    elif size <= 500:
        count = 20
    else:
        count = size // 15 + 3
    return size // count


def rank_values(values: Sequence[int]) -> list[int]:
    """Return, for each value, its position in the sorted order of ``values``."""
    position: dict[int, int] = {}
    for rank, value in enumerate(sorted(values)):
        position.setdefault(value, rank)
    return [position[value] for value in values]


def has_in_range(ranks: Sequence[int], low: int, high: int) -> bool:
    """Tell whether any rank lies in ``[low, high]``."""
    return any(low <= rank <= high for rank in ranks)


def first_in_range(ranks: Sequence[int], low: int, high: int) -> int:
    """Return the position of the first rank in ``[low, high]``, or -1."""
    return next(
        (pos for pos, rank in enumerate(ranks) if low <= rank <= high), -1
    )


def max_position(ranks: Sequence[int]) -> int:
    """Return the position of the first largest rank."""
    if not ranks:
        raise ValueError("max_position() of an empty stack")
    best = 0
    for pos, rank in enumerate(ranks):
        if rank > ranks[best]:
            best = pos
    return best


def sort_three(machine: PushSwap) -> None:
    """Sort a stack ``a`` of exactly three values."""
    if len(machine.a) != 3:
        raise ValueError("sort_three() needs exactly three values in stack a")
    a, b, c = machine.a
    if a < b < c:
        return
    if a > b and b < c and a < c:
        machine.swap_a()
    elif a > b > c:
        machine.swap_a()
        machine.reverse_rotate_a()
    elif a < c and b > c:
        machine.reverse_rotate_a()
        machine.swap_a()
    elif a > b and b < c and a > c:
        machine.rotate_a()
    elif a < b and b > c and a > c:
        machine.reverse_rotate_a()


def sort_small(machine: PushSwap) -> None:
    """Sort up to five values by parking the smallest ones on ``b``."""
    if len(machine.a) >= 6:
        return
    while len(machine.a) > 2:
        machine.bring_min_to_front()
        machine.push_b()
    if len(machine.a) >= 2 and machine.a[0] > machine.a[1]:
        machine.swap_a()
    while machine.b:
        machine.push_a()


def push_max_to_a(machine: PushSwap, ranks: Mapping[int, int]) -> None:
    """Rotate ``b`` the shorter way to its largest rank and push it onto ``a``."""
    if not machine.b:
        return
    size_b = len(machine.b)
    pos = max_position([ranks[value] for value in machine.b])
    if pos <= size_b // 2:
        for _ in range(pos):
            machine.rotate_b()
    else:
        for _ in range(size_b - pos):
            machine.reverse_rotate_b()
    machine.push_a()


def process_chunk(
    machine: PushSwap, ranks: Mapping[int, int], low: int, high: int
) -> None:
    """Push every value of ``a`` whose rank lies in ``[low, high]`` onto ``b``."""
    while True:
        current = [ranks[value] for value in machine.a]
        pos = first_in_range(current, low, high)
        if pos < 0:
            return
        size_a = len(machine.a)
        if pos > size_a // 2:
            for _ in range(size_a - pos):
                machine.reverse_rotate_a()
        else:
            for _ in range(pos):
                machine.rotate_a()
        machine.push_b()


def greedy_sort(machine: PushSwap) -> None:
    """Sort a large stack by moving rank chunks to ``b`` and taking maxima back."""
    values = list(machine.a)
    ranks = dict(zip(values, rank_values(values)))
    total = len(values)
    step = chunk_size(total)
    if total and step <= 0:
        raise ValueError(f"too few values for chunked sorting: {total}")
    low = 0
    high = step - 1
    while low < total:
        process_chunk(machine, ranks, low, high)
        low += step
        high += step
        if high > total:
            high = total - 1
    while machine.b:
        push_max_to_a(machine, ranks)


def sort_stacks(machine: PushSwap) -> None:
    """Pick the strategy that suits the size of stack ``a`` and run it."""
    size = len(machine.a)
    if size in (4, 5):
        sort_small(machine)
    elif size == 3:
        sort_three(machine)
    elif size == 2:
        if machine.a[0] > machine.a[1]:
            machine.swap_a()
    elif size > 5:
        greedy_sort(machine)
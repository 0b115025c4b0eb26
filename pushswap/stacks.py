"""The two stacks of the puzzle and the operations that move values between them."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Callable, Iterable, Optional, Sequence

INT_MAX = 2**31 - 1


class Operation(str, Enum):
    """An instruction of the puzzle, valued by the name that is printed for it."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def min_position(values: Sequence[int]) -> int:
    """Return the position of the first smallest value."""
    if not values:
        raise ValueError("min_position() of an empty stack")
    best = 0
    for pos, value in enumerate(values):
        if value < values[best]:
            best = pos
    return best


def min_value(values: Iterable[int]) -> int:
    """Return the smallest value, or INT_MAX for an empty stack."""
    return min(values, default=INT_MAX)


def is_sorted(values: Iterable[int]) -> bool:
    """Tell whether the values are in non-decreasing order from the top."""
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))


class PushSwap:
    """Stacks ``a`` and ``b``, top first, with every operation recorded.

    Each operation performed is appended to ``operations`` and, when given,
    passed to ``on_operation``.
    """

    def __init__(
        self,
        values: Iterable[int] = (),
        on_operation: Optional[Callable[[Operation], None]] = None,
    ) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.operations: list[Operation] = []
        self._on_operation = on_operation

    @property
    def size_a(self) -> int:
        return len(self.a)

    @property
    def size_b(self) -> int:
        return len(self.b)

    def _emit(self, op: Operation) -> None:
        self.operations.append(op)
        if self._on_operation is not None:
            self._on_operation(op)

    @staticmethod
    def _swap(stack: deque[int]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _rotate(stack: deque[int]) -> None:
        stack.rotate(-1)

    @staticmethod
    def _reverse_rotate(stack: deque[int]) -> None:
        stack.rotate(1)

    def swap_a(self) -> None:
        self._swap(self.a)
        self._emit(Operation.SA)

    def swap_b(self) -> None:
        self._swap(self.b)
        self._emit(Operation.SB)

    def swap_both(self) -> None:
        self._swap(self.a)
        self._swap(self.b)
        self._emit(Operation.SS)

    def push_a(self) -> None:
        """Move the top of ``b`` onto ``a``; does nothing when ``b`` is empty."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._emit(Operation.PA)

    def push_b(self) -> None:
        """Move the top of ``a`` onto ``b``; does nothing when ``a`` is empty."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._emit(Operation.PB)

    def rotate_a(self) -> None:
        self._rotate(self.a)
        self._emit(Operation.RA)

    def rotate_b(self) -> None:
        self._rotate(self.b)
        self._emit(Operation.RB)

    def rotate_both(self) -> None:
        self._rotate(self.a)
        self._rotate(self.b)
        self._emit(Operation.RR)

    def reverse_rotate_a(self) -> None:
        self._reverse_rotate(self.a)
        self._emit(Operation.RRA)

    def reverse_rotate_b(self) -> None:
        self._reverse_rotate(self.b)
        self._emit(Operation.RRB)

    def reverse_rotate_both(self) -> None:
        """Reverse-rotate both stacks, recording rra and rrb before rrr."""
        self.reverse_rotate_a()
        self.reverse_rotate_b()
        self._emit(Operation.RRR)

    def bring_min_to_front(self) -> None:
        """Rotate ``a`` the shorter way until its smallest value is on top."""
        size = len(self.a)
        index = min_position(self.a)
        if index <= size // 2:
            for _ in range(index):
                self.rotate_a()
        else:
            for _ in range(size - index):
                self.reverse_rotate_a()
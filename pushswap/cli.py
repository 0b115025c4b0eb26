"""Command line: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .parsing import ParseError, parse_arguments
from .sorting import sort_stacks
from .stacks import Operation, PushSwap, is_sorted


def _print_operation(op: Operation) -> None:
    sys.stdout.write(f"{op.value}\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the integers in ``argv`` and write one operation per line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    if len(values) <= 1:
        return 0
    machine = PushSwap(values, on_operation=_print_operation)
    if not is_sorted(machine.a):
        sort_stacks(machine)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
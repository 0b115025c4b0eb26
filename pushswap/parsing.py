"""Turn command-line arguments into the list of integers for stack ``a``."""

from __future__ import annotations

from typing import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_DIGITS = frozenset("0123456789")


class ParseError(ValueError):
    """The arguments do not describe a valid set of distinct integers."""


def parse_int(text: str) -> int:
    """Parse a 32-bit signed integer: leading spaces, one sign, digits only."""
    body = text.lstrip(" ")
    sign = 1
    if body[:1] in ("-", "+"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    if not body or not all(ch in _DIGITS for ch in body):
        raise ParseError(f"not an integer: {text!r}")
    value = sign * int(body)
    if not INT_MIN <= value <= INT_MAX:
        raise ParseError(f"integer out of range: {text!r}")
    return value


def join_arguments(args: Iterable[str]) -> str:
    """Join arguments with single spaces; an empty argument or none at all is an error."""
    items = list(args)
    if not items or any(not item for item in items):
        raise ParseError("empty argument")
    return " ".join(items)


def split_words(text: str, sep: str) -> list[str]:
    """Split on ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Parse all arguments into distinct integers, in order."""
    words = split_words(join_arguments(args), " ")
    if not words:
        raise ParseError("no values")
    values: list[int] = []
    seen: set[int] = set()
    for word in words:
        value = parse_int(word)
        if value in seen:
            raise ParseError(f"duplicate value: {value}")
        seen.add(value)
        values.append(value)
    return values
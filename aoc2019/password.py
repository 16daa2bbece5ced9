"""Counting candidate passwords within a numeric range."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from itertools import groupby, pairwise

RANGE_START = 109165
RANGE_STOP = 576723


def _digits(number: int) -> str:
    if number < 0:
        raise ValueError(f"number must be non-negative, got {number}")
    return str(number)


def _non_decreasing(digits: str) -> bool:
    return all(a <= b for a, b in pairwise(digits))


def is_valid(number: int) -> bool:
    """Digits never decrease and at least two adjacent digits are equal."""
    digits = _digits(number)
    return _non_decreasing(digits) and any(a == b for a, b in pairwise(digits))


def is_valid_strict(number: int) -> bool:
    """Digits never decrease and some run of equal digits has length exactly two."""
    digits = _digits(number)
    return _non_decreasing(digits) and any(
        len(list(run)) == 2 for _, run in groupby(digits)
    )


def matching_passwords(
    start: int, stop: int, predicate: Callable[[int], bool]
) -> Iterator[int]:
    """Yield the numbers in ``range(start, stop)`` accepted by ``predicate``."""
    return (number for number in range(start, stop) if predicate(number))


def _count_and_print(start: int, stop: int, predicate: Callable[[int], bool]) -> int:
    count = 0
    for number in matching_passwords(start, stop, predicate):
        print(number)
        count += 1
    return count


def solve_day4a(start: int = RANGE_START, stop: int = RANGE_STOP) -> int:
    """Print and count the passwords meeting the basic rules."""
    return _count_and_print(start, stop, is_valid)


def solve_day4b(start: int = RANGE_START, stop: int = RANGE_STOP) -> int:
    """Print and count the passwords meeting the strict rules."""
    return _count_and_print(start, stop, is_valid_strict)
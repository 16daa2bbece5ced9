"""Fuel requirements for launching modules of a given mass."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

_UNSIGNED = re.compile(r"\+?[0-9]+", re.ASCII)

DEFAULT_INPUT = "data/input_day1a.txt"


def simple_fuel(mass: int) -> int:
    """Fuel for a module: a third of its mass, rounded down, minus two."""
    third = mass // 3
    if mass < 0 or third < 2:
        raise ValueError(f"mass {mass} is too small to compute fuel for")
    return third - 2


def total_fuel(mass: int) -> int:
    """Fuel for a module, counting the fuel needed to carry the fuel itself."""
    total = 0
    third = mass // 3
    while third > 2:
        fuel = third - 2
        total += fuel
        third = fuel // 3
    return total


def parse_masses(lines: Iterable[str]) -> Iterator[int]:
    """Yield the masses found in ``lines``, skipping lines that are not unsigned integers."""
    for line in lines:
        text = line.strip()
        if _UNSIGNED.fullmatch(text):
            yield int(text)


def solve_day1a(path: str | PathLike[str] = DEFAULT_INPUT) -> int:
    """Sum the simple fuel requirement of every module listed in ``path``."""
    with open(path, encoding="utf-8") as handle:
        return sum(simple_fuel(mass) for mass in parse_masses(handle))


def solve_day1b(path: str | PathLike[str] = DEFAULT_INPUT) -> int:
    """Sum the total fuel requirement of every module listed in ``path``."""
    with open(path, encoding="utf-8") as handle:
        return sum(total_fuel(mass) for mass in parse_masses(handle))
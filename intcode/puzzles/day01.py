"""Day 1 — fuel for module masses (no VM)."""
from __future__ import annotations

from typing import Callable, List

from intcode.program import ParseError


def fuel(mass: int) -> int:
    return mass // 3 - 2


def fuel_with_fuel(mass: int) -> int:
    total = 0
    step = fuel(mass)
    while step > 0:
        total += step
        step = fuel(step)
    return total


def _masses(text: str) -> List[int]:
    masses = []
    for index, line in enumerate(text.split()):
        if not line.isdecimal():
            raise ParseError(line, index)
        try:
            masses.append(int(line))
        except ValueError:
            raise ParseError(line, index) from None
    return masses


def _total(text: str, mass_to_fuel: Callable[[int], int]) -> str:
    return str(sum(mass_to_fuel(m) for m in _masses(text)))


def part1(text: str) -> str:
    return _total(text, fuel)


def part2(text: str) -> str:
    return _total(text, fuel_with_fuel)

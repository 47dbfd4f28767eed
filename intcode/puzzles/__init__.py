"""
intcode.puzzles
===============
Puzzle solvers driven by the Intcode VM. Every part takes the raw puzzle
input text and returns the answer as a string.
"""
from typing import Callable, Dict, Tuple


class SolverError(RuntimeError):
    """Raised when a puzzle input admits no answer."""


class UnknownPuzzle(SolverError):
    """Raised for a day or part with no solver."""


from . import day01, day02, day05, day09, day11, day13, day15  # noqa: E402

Part = Callable[[str], str]

SOLVERS: Dict[int, Tuple[Part, Part]] = {
    1:  (day01.part1, day01.part2),
    2:  (day02.part1, day02.part2),
    5:  (day05.part1, day05.part2),
    9:  (day09.part1, day09.part2),
    11: (day11.part1, day11.part2),
    13: (day13.part1, day13.part2),
    15: (day15.part1, day15.part2),
}


def solve(day: int, part: int, text: str) -> str:
    if day not in SOLVERS:
        raise UnknownPuzzle(f"Day {day} not implemented")
    if part not in (1, 2):
        raise UnknownPuzzle(f"Part {part} not implemented")
    return SOLVERS[day][part - 1](text)

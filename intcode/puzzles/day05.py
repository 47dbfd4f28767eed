"""Day 5 — thermal diagnostics (system IDs 1 and 5)."""
from intcode.vm import Interpreter


def part1(text: str) -> str:
    return str(Interpreter.from_text(text).run([1]))


def part2(text: str) -> str:
    return str(Interpreter.from_text(text).run([5]))

"""Day 9 — BOOST: test mode (1) and sensor boost mode (2)."""
from intcode.vm import Interpreter


def part1(text: str) -> str:
    return str(Interpreter.from_text(text).run([1]))


def part2(text: str) -> str:
    return str(Interpreter.from_text(text).run([2]))

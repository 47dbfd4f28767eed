"""Day 2 — gravity assist: patch noun/verb, read the result at address 0."""
from __future__ import annotations

from itertools import product

from intcode.isa import Positional
from intcode.program import parse_program
from intcode.puzzles import SolverError
from intcode.vm import Interpreter

TARGET = 19690720


def run_with(program, noun: int, verb: int) -> int:
    computer = Interpreter(program)
    computer.set_value(Positional(1), noun)
    computer.set_value(Positional(2), verb)
    computer.run()
    return computer.get_memory_value(0)


def part1(text: str) -> str:
    return str(run_with(parse_program(text), 12, 2))


def part2(text: str, target: int = TARGET) -> str:
    program = parse_program(text)
    for noun, verb in product(range(100), range(100)):
        if run_with(program, noun, verb) == target:
            return str(100 * noun + verb)
    raise SolverError("Unable to find valid noun/verb combination")

"""Intcode Virtual Machine — resumable interpreter for comma-separated memory images.

A machine is driven in one of two ways:

  run(inputs)               run to halt; blocking on input is an error
  run_until_blocked(inputs) stop on halt *or* on an input instruction with
                            no input left, keeping all state so a later call
                            resumes at that same instruction

Forking a search over possible inputs is done with clone(), which copies the
whole state (memory, pointer, relative base); clones share nothing.
"""
from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Union

from intcode.isa import (
    DESTINATION_SLOTS, OPCODE_NAMES, PARAM_COUNTS,
    Immediate, IndexedParameter, Instruction, Mode, Opcode, Parameter,
    Positional, Relative, mode_digit, opcode_digits,
)
from intcode.program import INT64_MAX, INT64_MIN, load_program, parse_program

log = logging.getLogger(__name__)

MIN_MEMORY   = 2048
MEMORY_LIMIT = 1 << 24

_NO_INPUT = object()


# ── Errors ─────────────────────────────────────────────────────────────────────

class VMError(Exception):
    pass


class DecodeError(VMError):
    """Unrecognised opcode or parameter mode at ``pointer``."""

    def __init__(self, reason: str, pointer: int):
        super().__init__(f"{reason} at pointer {pointer}")
        self.reason  = reason
        self.pointer = pointer


class MemoryAccessError(VMError):
    def __init__(self, address: int, limit: int):
        super().__init__(f"Memory access out of range: {address} (limit {limit})")
        self.address = address
        self.limit   = limit


class BlockedOnInput(VMError):
    """The machine needed more input than ``run`` was given."""


class ArithmeticOverflow(VMError):
    """A value left the signed 64-bit range."""

    def __init__(self, value: int, what: str = "value"):
        super().__init__(f"{what} {value} outside signed 64-bit range")
        self.value = value


def check_word(value, what: str = "value") -> int:
    if not isinstance(value, int):
        raise VMError(f"{what} {value!r} is not an integer")
    if not INT64_MIN <= value <= INT64_MAX:
        raise ArithmeticOverflow(value, what)
    return value


# ── Decode ─────────────────────────────────────────────────────────────────────

def _decode_param(word: int, index: int, raw: int, pointer: int) -> Parameter:
    mode = mode_digit(word, index)
    if mode == Mode.POSITIONAL:
        return Positional(raw)
    if mode == Mode.IMMEDIATE:
        return Immediate(raw)
    if mode == Mode.RELATIVE:
        return Relative(raw)
    raise DecodeError(f"Unrecognized parameter mode {mode}", pointer)


def decode_instruction(read: Callable[[int], int], pointer: int) -> Instruction:
    """Decode the instruction at ``pointer`` using ``read`` to fetch words.

    Pure: nothing is written, so any pointer value can be decoded.
    """
    word = read(pointer)
    if word < 0 or opcode_digits(word) not in OPCODE_NAMES:
        raise DecodeError(f"Unrecognized opcode {word}", pointer)
    op = Opcode(opcode_digits(word))

    params = tuple(
        _decode_param(word, i, read(pointer + i + 1), pointer)
        for i in range(PARAM_COUNTS[op])
    )
    for slot in DESTINATION_SLOTS.get(op, ()):
        if isinstance(params[slot], Immediate):
            raise DecodeError(
                f"Immediate-mode destination for {op.name} (parameter {slot})", pointer
            )
    return Instruction(op, params)


# ── Stop conditions ────────────────────────────────────────────────────────────

class StopReason(Enum):
    BLOCKED = "blocked"
    HALTED  = "halted"


class RunResult(NamedTuple):
    reason: StopReason
    output: List[int]


# ── VM ─────────────────────────────────────────────────────────────────────────

class Interpreter:
    def __init__(self, program: Sequence[int], *, trace: bool = False,
                 memory_limit: int = MEMORY_LIMIT):
        if len(program) > memory_limit:
            raise MemoryAccessError(len(program) - 1, memory_limit)

        for word in program:
            check_word(word, "program word")

        self.memory: List[int] = list(program)
        self.memory.extend([0] * (min(MIN_MEMORY, memory_limit) - len(self.memory)))
        self.pointer       = 0
        self.relative_base = 0
        self.steps         = 0
        self.trace         = trace
        self.memory_limit  = memory_limit

    @classmethod
    def from_text(cls, text: str, **kwargs) -> "Interpreter":
        return cls(parse_program(text), **kwargs)

    @classmethod
    def from_file(cls, path: Union[str, Path], **kwargs) -> "Interpreter":
        return cls(load_program(path), **kwargs)

    def __repr__(self):
        return (f"<Interpreter pointer={self.pointer} relative_base={self.relative_base}"
                f" memory={len(self.memory)} steps={self.steps}>")

    # ── Cloning ───────────────────────────────────────────────────────────────

    def clone(self) -> "Interpreter":
        other = self.__class__.__new__(self.__class__)
        other.memory        = list(self.memory)
        other.pointer       = self.pointer
        other.relative_base = self.relative_base
        other.steps         = self.steps
        other.trace         = self.trace
        other.memory_limit  = self.memory_limit
        return other

    __copy__ = clone

    def __deepcopy__(self, memo):
        return self.clone()

    # ── Memory ────────────────────────────────────────────────────────────────

    def _check(self, address: int) -> int:
        if not 0 <= address < self.memory_limit:
            raise MemoryAccessError(address, self.memory_limit)
        return address

    def get_memory_value(self, address: int) -> int:
        self._check(address)
        if address >= len(self.memory):
            return 0
        return self.memory[address]

    def _set_memory_value(self, address: int, value: int):
        self._check(address)
        if address >= len(self.memory):
            grow_to = min(max(address + 1, len(self.memory) * 2), self.memory_limit)
            self.memory.extend([0] * (grow_to - len(self.memory)))
        self.memory[address] = value

    def resolve_address(self, param: IndexedParameter) -> int:
        if isinstance(param, Positional):
            return param.address
        return self.relative_base + param.offset

    def set_value(self, param: IndexedParameter, value: int):
        """Write ``value`` to the cell a positional or relative reference names."""
        if isinstance(param, Immediate):
            raise TypeError("Cannot write through an immediate parameter")
        self._set_memory_value(self.resolve_address(param), check_word(value))

    def get_param_value(self, param: Parameter) -> int:
        if isinstance(param, Immediate):
            return param.value
        return self.get_memory_value(self.resolve_address(param))

    # ── Decode / execute ──────────────────────────────────────────────────────

    def decode(self) -> Instruction:
        return decode_instruction(self.get_memory_value, self.pointer)

    def step(self, inputs: Iterator[int]) -> Union[StopReason, Optional[int]]:
        """Execute one instruction.

        Returns a StopReason when the machine halts or blocks (pointer left
        on the instruction), otherwise the emitted output value or None.
        """
        instr = self.decode()
        if self.trace:
            log.debug("pointer=%04d rb=%d  %s", self.pointer, self.relative_base, instr)

        op, p = instr.opcode, instr.params
        value = self.get_param_value

        if op == Opcode.HALT:
            return StopReason.HALTED

        if op == Opcode.IN:
            supplied = next(inputs, _NO_INPUT)
            if supplied is _NO_INPUT:
                return StopReason.BLOCKED
            self.set_value(p[0], supplied)
            self.pointer += 2

        elif op == Opcode.OUT:
            out = value(p[0])
            self.pointer += 2
            self.steps += 1
            return out

        elif op == Opcode.ADD:
            self.set_value(p[2], value(p[0]) + value(p[1]))
            self.pointer += 4

        elif op == Opcode.MUL:
            self.set_value(p[2], value(p[0]) * value(p[1]))
            self.pointer += 4

        elif op == Opcode.LT:
            self.set_value(p[2], 1 if value(p[0]) < value(p[1]) else 0)
            self.pointer += 4

        elif op == Opcode.EQ:
            self.set_value(p[2], 1 if value(p[0]) == value(p[1]) else 0)
            self.pointer += 4

        elif op == Opcode.JNZ:
            self.pointer = value(p[1]) if value(p[0]) != 0 else self.pointer + 3

        elif op == Opcode.JZ:
            self.pointer = value(p[1]) if value(p[0]) == 0 else self.pointer + 3

        elif op == Opcode.ARB:
            self.relative_base = check_word(self.relative_base + value(p[0]), "relative base")
            self.pointer += 2

        self.steps += 1
        return None

    # ── Run contracts ─────────────────────────────────────────────────────────

    def run_until_blocked(self, inputs: Iterable[int] = ()) -> RunResult:
        """Run until halt or until an input instruction finds no input left."""
        stream = iter(inputs)
        output: List[int] = []
        while True:
            result = self.step(stream)
            if isinstance(result, StopReason):
                log.debug("%s at pointer=%d after %d outputs",
                          result.value, self.pointer, len(output))
                return RunResult(result, output)
            if result is not None:
                output.append(result)

    def run(self, inputs: Iterable[int] = ()) -> List[int]:
        """Run to halt with a fixed input sequence and return every output."""
        reason, output = self.run_until_blocked(inputs)
        if reason is StopReason.BLOCKED:
            raise BlockedOnInput(f"Blocked on input at pointer {self.pointer}")
        return output

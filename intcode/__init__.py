"""
intcode
=======
Resumable Intcode virtual machine and the puzzle solvers built on it.

Exports:
    Interpreter       — the VM (run / run_until_blocked / clone)
    StopReason        — BLOCKED / HALTED
    RunResult         — (reason, output) pair from run_until_blocked
    Positional        — absolute memory reference
    Relative          — relative-base memory reference
    Immediate         — literal operand

    VMError           — base of DecodeError / MemoryAccessError / BlockedOnInput /
                        ArithmeticOverflow
    ParseError        — malformed program text
"""

from .isa     import Immediate, Instruction, Opcode, Positional, Relative
from .program import ParseError, disassemble, format_program, load_program, parse_program
from .vm      import (ArithmeticOverflow, BlockedOnInput, DecodeError, Interpreter, MemoryAccessError,
                      RunResult, StopReason, VMError)

__version__ = "1.0.0"

__all__ = [
    # VM
    "Interpreter",
    "StopReason",
    "RunResult",
    # ISA
    "Instruction",
    "Opcode",
    "Immediate",
    "Positional",
    "Relative",
    # Program text
    "parse_program",
    "format_program",
    "load_program",
    "disassemble",
    # Errors
    "VMError",
    "DecodeError",
    "MemoryAccessError",
    "BlockedOnInput",
    "ArithmeticOverflow",
    "ParseError",
]

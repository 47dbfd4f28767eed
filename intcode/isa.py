"""Intcode ISA — opcode table, parameter modes and decoded instruction records.

Instruction word layout (decimal):
  ...CBA OO
  OO     two-digit opcode                  (word % 100)
  A      mode of parameter 0               (word // 100   % 10)
  B      mode of parameter 1               (word // 1000  % 10)
  C      mode of parameter 2               (word // 10000 % 10)
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple, Union


# ── Opcodes ────────────────────────────────────────────────────────────────────

class Opcode(IntEnum):
    ADD      = 1
    MUL      = 2
    IN       = 3
    OUT      = 4
    JNZ      = 5    # jump-if-true
    JZ       = 6    # jump-if-false
    LT       = 7
    EQ       = 8
    ARB      = 9    # adjust relative base
    HALT     = 99


# Reverse lookup: opcode int → mnemonic string
OPCODE_NAMES: dict[int, str] = {op.value: op.name for op in Opcode}

# Number of parameters each opcode consumes.
PARAM_COUNTS: dict[Opcode, int] = {
    Opcode.ADD:  3,
    Opcode.MUL:  3,
    Opcode.IN:   1,
    Opcode.OUT:  1,
    Opcode.JNZ:  2,
    Opcode.JZ:   2,
    Opcode.LT:   3,
    Opcode.EQ:   3,
    Opcode.ARB:  1,
    Opcode.HALT: 0,
}

# Parameter slots that are written to; they must decode to indexed references.
DESTINATION_SLOTS: dict[Opcode, Tuple[int, ...]] = {
    Opcode.ADD: (2,),
    Opcode.MUL: (2,),
    Opcode.IN:  (0,),
    Opcode.LT:  (2,),
    Opcode.EQ:  (2,),
}


def instruction_width(op: Opcode) -> int:
    """Words occupied by an instruction: the opcode word plus its parameters."""
    return PARAM_COUNTS[op] + 1


# ── Parameter modes ────────────────────────────────────────────────────────────

class Mode(IntEnum):
    POSITIONAL = 0
    IMMEDIATE  = 1
    RELATIVE   = 2


def opcode_digits(word: int) -> int:
    return word % 100


def mode_digit(word: int, index: int) -> int:
    return (word // 10 ** (index + 2)) % 10


# ── Parameters ─────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Immediate:
    value: int

    def __str__(self):
        return f"#{self.value}"


@dataclass(frozen=True)
class Positional:
    address: int

    def __str__(self):
        return f"[{self.address}]"


@dataclass(frozen=True)
class Relative:
    offset: int

    def __str__(self):
        sign = "+" if self.offset >= 0 else "-"
        return f"[rb{sign}{abs(self.offset)}]"


IndexedParameter = Union[Positional, Relative]
Parameter = Union[Immediate, Positional, Relative]


# ── Instructions ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Instruction:
    opcode: Opcode
    params: Tuple[Parameter, ...] = ()

    @property
    def width(self) -> int:
        return instruction_width(self.opcode)

    @property
    def mnemonic(self) -> str:
        return self.opcode.name

    def __str__(self):
        if not self.params:
            return self.mnemonic
        return f"{self.mnemonic:<5} " + ", ".join(str(p) for p in self.params)

"""Intcode program codec — comma-separated memory images and disassembly."""
from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional, Sequence, Union

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")


class ParseError(ValueError):
    """Raised when program text holds a token that is not a 64-bit integer."""

    def __init__(self, token: str, index: int):
        super().__init__(f"Invalid integer {token!r} at position {index}")
        self.token = token
        self.index = index


def parse_program(text: str) -> List[int]:
    """Parse ``"1,0,0,3,99"`` into a memory image."""
    memory = []
    for index, raw in enumerate(text.strip().split(",")):
        token = raw.strip()
        if not _INT_RE.fullmatch(token):
            raise ParseError(token, index)
        value = int(token)
        if not INT64_MIN <= value <= INT64_MAX:
            raise ParseError(token, index)
        memory.append(value)
    return memory


def format_program(memory: Sequence[int]) -> str:
    return ",".join(str(v) for v in memory)


def load_program(path: Union[str, Path]) -> List[int]:
    return parse_program(Path(path).read_text())


# ── Disassembler ───────────────────────────────────────────────────────────────

def disassemble(memory: Sequence[int], start: int = 0,
                end: Optional[int] = None) -> str:
    """Render a memory image as one line per instruction.

    Words that do not decode (data, or bytes only reached through a jump
    into the middle of an instruction) are shown as ``DATA`` and skipped
    one word at a time.
    """
    from intcode.vm import DecodeError, decode_instruction

    end = len(memory) if end is None else min(end, len(memory))

    def read(address: int) -> int:
        return memory[address] if 0 <= address < len(memory) else 0

    lines = []
    pointer = start
    while pointer < end:
        try:
            instr = decode_instruction(read, pointer)
        except DecodeError:
            lines.append(f"{pointer:04d}  DATA  {memory[pointer]}")
            pointer += 1
            continue
        lines.append(f"{pointer:04d}  {instr}")
        pointer += instr.width
    return "\n".join(lines)

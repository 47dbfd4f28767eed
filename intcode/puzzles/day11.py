"""Day 11 — hull-painting robot.

The robot is fed one camera reading per run_until_blocked call and answers
with two outputs: the colour to paint (0 black, 1 white) and the turn to
make (0 left, 1 right) before moving forward one panel.
"""
from __future__ import annotations

import logging
from typing import Iterator, Optional, Set, Tuple

from intcode.puzzles import SolverError
from intcode.puzzles.geometry import Direction, Point
from intcode.vm import Interpreter, StopReason

log = logging.getLogger(__name__)

BLACK = 0
WHITE = 1

ORIGIN = Point(0, 0)


class HullPainter:
    def __init__(self, text: str, white: Optional[Set[Point]] = None):
        self.computer  = Interpreter.from_text(text)
        self.position  = ORIGIN
        self.direction = Direction.NORTH
        self.white     = set(white or ())
        self.status    = StopReason.BLOCKED

    def __iter__(self) -> Iterator[Tuple[Point, int]]:
        """Yield (panel, colour) for every paint instruction until halt."""
        while self.status is StopReason.BLOCKED:
            camera = WHITE if self.position in self.white else BLACK
            self.status, output = self.computer.run_until_blocked([camera])
            if not output:
                if self.status is StopReason.HALTED:
                    break
                raise SolverError("Robot asked for another camera reading without painting")
            if len(output) != 2:
                raise SolverError(f"Expected colour and turn, got {output}")
            colour, turn = output

            if colour == WHITE:
                self.white.add(self.position)
            elif colour == BLACK:
                self.white.discard(self.position)
            else:
                raise SolverError(f"Unknown colour {colour}")

            painted = self.position
            if turn == 0:
                self.direction = self.direction.rotate_left()
            elif turn == 1:
                self.direction = self.direction.rotate_right()
            else:
                raise SolverError(f"Unknown turn {turn}")
            self.position = self.position + self.direction.offset

            yield painted, colour


def render(white: Set[Point]) -> str:
    if not white:
        return ""
    min_x = min(p.x for p in white)
    max_x = max(p.x for p in white)
    min_y = min(p.y for p in white)
    max_y = max(p.y for p in white)
    return "\n".join(
        "".join("#" if Point(x, y) in white else " " for x in range(min_x, max_x + 1))
        for y in range(max_y, min_y - 1, -1)
    )


def part1(text: str) -> str:
    painted = {panel for panel, _ in HullPainter(text)}
    return str(len(painted))


def part2(text: str) -> str:
    white: Set[Point] = set()
    for panel, colour in HullPainter(text, white={ORIGIN}):
        log.debug("painted %s %s", panel, "white" if colour == WHITE else "black")
        if colour == WHITE:
            white.add(panel)
        else:
            white.discard(panel)
    return render(white)

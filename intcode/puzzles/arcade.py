"""Arcade cabinet — screen model and joystick driver for the breakout game.

The game program emits output triples ``(x, y, tile)``; the triple
``(-1, 0, score)`` updates the score display instead of a tile. The
joystick is read with one input instruction per frame.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Dict, List, Sequence

from intcode.isa import Positional
from intcode.puzzles import SolverError
from intcode.puzzles.geometry import Point
from intcode.vm import Interpreter, StopReason


class Tile(IntEnum):
    EMPTY  = 0
    WALL   = 1
    BLOCK  = 2
    PADDLE = 3
    BALL   = 4


class Joystick(IntEnum):
    LEFT    = -1
    NEUTRAL = 0
    RIGHT   = 1


TILE_GLYPHS = {
    Tile.EMPTY:  " ",
    Tile.WALL:   "█",
    Tile.BLOCK:  "░",
    Tile.PADDLE: "▄",
    Tile.BALL:   "■",
}

SCORE_POSITION = Point(-1, 0)


class Screen:
    def __init__(self):
        self.tiles: Dict[Point, Tile] = {}
        self.score            = 0
        self.paddle           = Point(0, 0)
        self.ball             = Point(0, 0)
        self.remaining_blocks = 0

    def update(self, output: Sequence[int]):
        if len(output) % 3:
            raise SolverError(f"Screen output is not a sequence of triples: {len(output)} values")
        for i in range(0, len(output), 3):
            point = Point(output[i], output[i + 1])
            if point == SCORE_POSITION:
                self.score = output[i + 2]
                continue

            try:
                tile = Tile(output[i + 2])
            except ValueError:
                raise SolverError(f"Unknown tile {output[i + 2]} at {point}") from None

            previous = self.tiles.get(point, Tile.EMPTY)
            if previous == Tile.BLOCK and tile != Tile.BLOCK:
                self.remaining_blocks -= 1
            elif previous != Tile.BLOCK and tile == Tile.BLOCK:
                self.remaining_blocks += 1

            if tile == Tile.PADDLE:
                self.paddle = point
            elif tile == Tile.BALL:
                self.ball = point
            self.tiles[point] = tile

    def __str__(self):
        if not self.tiles:
            return f"Score: {self.score}"
        width  = max(p.x for p in self.tiles) + 1
        height = max(p.y for p in self.tiles) + 1
        rows: List[str] = [
            "".join(TILE_GLYPHS[self.tiles.get(Point(x, y), Tile.EMPTY)] for x in range(width))
            for y in range(height)
        ]
        rows.append(f"Score: {self.score}")
        return "\n".join(rows)


class Game:
    def __init__(self, text: str, has_credits: bool = False):
        self.computer = Interpreter.from_text(text)
        if has_credits:
            self.computer.set_value(Positional(0), 2)

        self.screen = Screen()
        self.status, initial = self.computer.run_until_blocked()
        self.screen.update(initial)

    @property
    def halted(self) -> bool:
        return self.status is StopReason.HALTED

    def do_move(self, joystick: Joystick) -> Screen:
        self.status, output = self.computer.run_until_blocked([int(joystick)])
        self.screen.update(output)
        return self.screen

    def follow_ball(self) -> Joystick:
        if self.screen.paddle.x < self.screen.ball.x:
            return Joystick.RIGHT
        if self.screen.paddle.x > self.screen.ball.x:
            return Joystick.LEFT
        return Joystick.NEUTRAL

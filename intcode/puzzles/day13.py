"""Day 13 — care package: count blocks, then beat the game."""
import logging

from intcode.puzzles import SolverError
from intcode.puzzles.arcade import Game, Joystick

log = logging.getLogger(__name__)


def part1(text: str) -> str:
    game = Game(text)
    screen = game.do_move(Joystick.NEUTRAL)
    return str(screen.remaining_blocks)


def part2(text: str) -> str:
    game = Game(text, has_credits=True)
    joystick = Joystick.NEUTRAL
    while True:
        screen = game.do_move(joystick)
        log.debug("score=%d blocks=%d\n%s", screen.score, screen.remaining_blocks, screen)
        if screen.remaining_blocks == 0:
            return str(screen.score)
        if game.halted:
            raise SolverError(f"Game over with {screen.remaining_blocks} blocks left")
        joystick = game.follow_ball()

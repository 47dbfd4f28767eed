"""Day 15 — oxygen system: breadth-first search over a remote-controlled droid.

Every frontier node owns its own cloned Interpreter, paused on the droid's
next movement command, so each branch of the search replays nothing.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Deque, Dict, Iterator, Optional

from intcode.puzzles import SolverError
from intcode.puzzles.geometry import Direction, Point
from intcode.vm import Interpreter

# Movement commands understood by the droid.
MOVES: Dict[Direction, int] = {
    Direction.NORTH: 1,
    Direction.SOUTH: 2,
    Direction.WEST:  3,
    Direction.EAST:  4,
}


class Status(IntEnum):
    WALL   = 0
    MOVED  = 1
    OXYGEN = 2


@dataclass
class Node:
    computer: Interpreter
    point:    Point
    distance: int
    oxygen:   bool = False


class Maze:
    """Iterate every reachable open cell in breadth-first order."""

    def __init__(self, computer: Interpreter, start: Point = Point(0, 0)):
        self.start = Node(computer, start, 0)

    @classmethod
    def from_text(cls, text: str) -> "Maze":
        return cls(Interpreter.from_text(text))

    def __iter__(self) -> Iterator[Node]:
        queue: Deque[Node] = deque([self.start])
        visited = {self.start.point}
        while queue:
            node = queue.popleft()
            for direction, command in MOVES.items():
                target = node.point + direction.offset
                if target in visited:
                    continue

                computer = node.computer.clone()
                _, output = computer.run_until_blocked([command])
                if len(output) != 1:
                    raise SolverError(f"Expected one status reply, got {output}")
                try:
                    status = Status(output[0])
                except ValueError:
                    raise SolverError(f"Unknown droid status {output[0]}") from None

                visited.add(target)
                if status != Status.WALL:
                    queue.append(Node(computer, target, node.distance + 1,
                                      oxygen=status == Status.OXYGEN))
            yield node


def find_oxygen(maze: Maze) -> Node:
    found: Optional[Node] = next((node for node in maze if node.oxygen), None)
    if found is None:
        raise SolverError("Traversed map without finding the oxygen system")
    return found


def part1(text: str) -> str:
    return str(find_oxygen(Maze.from_text(text)).distance)


def part2(text: str) -> str:
    oxygen = find_oxygen(Maze.from_text(text))
    return str(max(node.distance for node in Maze(oxygen.computer, oxygen.point)))

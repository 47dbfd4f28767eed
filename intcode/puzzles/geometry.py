"""Grid helpers shared by the robot, arcade and maze solvers."""
from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Point(NamedTuple):
    x: int
    y: int

    def __add__(self, other):
        return Point(self.x + other.x, self.y + other.y)


class Direction(Enum):
    """Compass headings; y grows northwards."""
    NORTH = Point(0, 1)
    EAST  = Point(1, 0)
    SOUTH = Point(0, -1)
    WEST  = Point(-1, 0)

    @property
    def offset(self) -> Point:
        return self.value

    def rotate_left(self) -> "Direction":
        return _CLOCKWISE[(_CLOCKWISE.index(self) - 1) % 4]

    def rotate_right(self) -> "Direction":
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 1) % 4]


_CLOCKWISE = [Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST]

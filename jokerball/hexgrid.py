# jokerball/hexgrid.py

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


@dataclass(frozen=True, slots=True)
class Coord:
    """Axial hex coordinate. The third cube axis is always derived: s = -q - r."""

    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    def __add__(self, other: Coord) -> Coord:
        return add(self, other)

    def neighbor(self, direction: Direction) -> Coord:
        return neighbor(self, direction)

    def __repr__(self):
        return f"({self.q},{self.r})"


class Direction(IntEnum):
    """Compass directions of neighbor hexes, pointy-top orientation."""

    E = 0
    NE = 1
    NW = 2
    W = 3
    SW = 4
    SE = 5

    @property
    def arrow(self) -> str:
        return DIRECTION_ARROWS[self]


DIRECTION_VECTORS: dict[Direction, Coord] = {
    Direction.E: Coord(1, 0),
    Direction.NE: Coord(1, -1),
    Direction.NW: Coord(0, -1),
    Direction.W: Coord(-1, 0),
    Direction.SW: Coord(-1, 1),
    Direction.SE: Coord(0, 1),
}

DIRECTION_ARROWS: dict[Direction, str] = {
    Direction.E: "→",
    Direction.NE: "↗",
    Direction.NW: "↖",
    Direction.W: "←",
    Direction.SW: "↙",
    Direction.SE: "↘",
}

# Directions that advance a player's checkers toward the goal they attack.
# Player 0 starts in the south and attacks north, player 1 the reverse.
FORWARD_DIRECTIONS: dict[int, frozenset[Direction]] = {
    0: frozenset({Direction.NE, Direction.NW}),
    1: frozenset({Direction.SW, Direction.SE}),
}


def add(a: Coord, b: Coord) -> Coord:
    # s is never summed; Coord re-derives it from q and r.
    return Coord(a.q + b.q, a.r + b.r)


def neighbor(coord: Coord, direction: Direction) -> Coord:
    return add(coord, DIRECTION_VECTORS[direction])

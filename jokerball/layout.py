from __future__ import annotations

from typing import List

from jokerball.grid import Grid, HexType, Occupied
from jokerball.hexgrid import Coord, Direction

BOARD_RADIUS = 6
BALL_START = Coord(0, 0)

# (start corner, [(direction, hex count), ...]) for the two border chains.
WALL_CHAINS = (
    (Coord(-1, -5), [(Direction.SW, 5), (Direction.SE, 6)]),  # northwest + west
    (Coord(6, -5), [(Direction.SE, 5), (Direction.SW, 6)]),   # east + southeast
)


def red_start() -> List[Coord]:
    return [Coord(q, 4) for q in range(-5, 1)] + [Coord(q, 5) for q in range(-5, 0)]


def blue_start() -> List[Coord]:
    return [Coord(q, -5) for q in range(0, 5)] + [Coord(q, -4) for q in range(-1, 5)]


def build_walls(grid: Grid) -> None:
    for start, legs in WALL_CHAINS:
        c = start
        for direction, count in legs:
            for _ in range(count):
                grid.require(c).type = HexType.WALL
                c = c.neighbor(direction)


def build_goals(grid: Grid) -> None:
    radius = grid.radius
    # top
    for q in range(0, radius + 1):
        grid.require(Coord(q, -radius)).type = HexType.GOAL
    # bottom
    for q in range(-radius, 1):
        grid.require(Coord(q, radius)).type = HexType.GOAL


def place_checkers(grid: Grid) -> None:
    for c in red_start():
        grid.require(c).occupied = Occupied.RED
    for c in blue_start():
        grid.require(c).occupied = Occupied.BLUE


def lay_out_board(grid: Grid) -> Coord:
    """Set up walls, goals, both checker formations and the ball.

    Returns the ball's starting coordinate. Raises CoordinateOutOfRange when the
    grid is too small for the standard layout.
    """
    grid.require(BALL_START).occupied = Occupied.BALL
    place_checkers(grid)
    build_walls(grid)
    build_goals(grid)
    return BALL_START

from __future__ import annotations

from typing import List, Optional

from jokerball.dice import ball_direction
from jokerball.grid import Grid, Hex, HexType, Occupied
from jokerball.hexgrid import FORWARD_DIRECTIONS, Direction


def _is_opponent(hex_: Hex, mover: Occupied) -> bool:
    return hex_.occupied.is_checker and hex_.occupied is not mover


def check_direction(
    grid: Grid,
    origin: Hex,
    direction: Direction,
    forward: bool,
    checker_die: int,
) -> Optional[Hex]:
    """Find the destination (if any) for a checker moving up to `checker_die` hexes in one direction.

    Rules:
      - an opponent checker is always a destination (capture), in any direction
      - forward: a goal is a destination; a wall or any other occupant stops
        the checker on the hex before it; open space for the full distance
        ends on the last hex
      - not forward: any occupant, goal or wall ends the search with nothing;
        open space for the full distance is not a legal move either
    """
    accum = origin
    prior = origin
    for _ in range(checker_die):
        accum = grid.lookup(prior.coord.neighbor(direction))
        if accum is None:
            return None

        if _is_opponent(accum, origin.occupied):
            return accum

        if forward:
            if accum.type is HexType.GOAL:
                return accum
            if accum.type is HexType.WALL:
                return prior
            if not accum.is_empty:
                return prior
        elif not accum.is_empty or accum.type is not HexType.PLAY_AREA:
            return None

        prior = accum

    return accum if forward else None


def checker_destinations(grid: Grid, origin: Hex, player: int, checker_die: int) -> List[int]:
    """Indices of every hex the checker on `origin` may move to, in direction order."""
    forward_dirs = FORWARD_DIRECTIONS[player]
    destinations: List[int] = []
    for direction in Direction:
        dest = check_direction(grid, origin, direction, direction in forward_dirs, checker_die)
        if dest is None or dest.idx == origin.idx:
            continue
        if dest.idx not in destinations:
            destinations.append(dest.idx)
    return destinations


def movable_checkers(grid: Grid, player: int, checker: Occupied, checker_die: int) -> List[int]:
    """Indices of `checker` hexes that have at least one destination, ascending."""
    return [
        h.idx
        for h in grid.hexes_occupied_by(checker)
        if checker_destinations(grid, h, player, checker_die)
    ]


def ball_destinations(grid: Grid, ball_hex: Hex, ball_die: int) -> List[int]:
    """
    Every hex the ball may stop on, nearest first.
    The ball travels in the single direction picked by `ball_die`; it may stop
    on any empty hex along the line, or on the goal that ends its travel.
    Walls, occupants and the board edge end the line without being added.
    """
    direction = ball_direction(ball_die)
    destinations: List[int] = []
    current = ball_hex

    while True:
        nxt = grid.lookup(current.coord.neighbor(direction))
        if nxt is None or nxt.type is HexType.WALL:
            break
        if nxt.type is HexType.GOAL:
            destinations.append(nxt.idx)
            break
        if not nxt.is_empty:
            break
        destinations.append(nxt.idx)
        current = nxt

    return destinations

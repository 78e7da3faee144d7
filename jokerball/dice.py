from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol
import random

from jokerball.hexgrid import Direction


class RNG(Protocol):
    def randint(self, a: int, b: int) -> int: ...


DIE_FACES = 6

# Ball die face -> direction the ball travels.
BALL_DIE_DIRECTIONS: dict[int, Direction] = {
    1: Direction.E,
    2: Direction.NE,
    3: Direction.NW,
    4: Direction.W,
    5: Direction.SW,
    6: Direction.SE,
}


def ball_direction(ball_die: int) -> Direction:
    try:
        return BALL_DIE_DIRECTIONS[ball_die]
    except KeyError:
        raise ValueError(f"Ball die must be in 1..{DIE_FACES}, got {ball_die}") from None


@dataclass(frozen=True, slots=True)
class Roll:
    """One turn's dice: how far the checker moves and which way the ball goes."""

    checker_die: int
    ball_die: int

    @staticmethod
    def roll(rng: RNG | None = None) -> Roll:
        r = rng or random.Random()
        return Roll(checker_die=r.randint(1, DIE_FACES), ball_die=r.randint(1, DIE_FACES))

    @property
    def ball_direction(self) -> Direction:
        return ball_direction(self.ball_die)

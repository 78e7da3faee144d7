import pytest

from jokerball.grid import Grid, Occupied
from jokerball.hexgrid import Coord
from jokerball.turn_engine import Game


class FixedRNG:
    """Dice that come up in a fixed sequence: randint() pops the next value."""

    def __init__(self, values):
        self.values = list(values)

    def randint(self, a: int, b: int) -> int:
        v = self.values.pop(0)
        assert a <= v <= b, f"scripted roll {v} outside {a}..{b}"
        return v


def place(grid: Grid, coord: Coord, occupied: Occupied):
    h = grid.require(coord)
    h.occupied = occupied
    return h


def clear_checkers(grid: Grid, occupied: Occupied) -> None:
    for h in grid.hexes_occupied_by(occupied):
        h.occupied = Occupied.EMPTY


def idx(grid: Grid, q: int, r: int) -> int:
    return grid.require(Coord(q, r)).idx


@pytest.fixture
def grid():
    """Bare radius-6 board: all play area, nothing on it."""
    return Grid(6)


@pytest.fixture
def make_game():
    def _make(*rolls):
        return Game(rng=FixedRNG(rolls))
    return _make


@pytest.fixture
def events():
    return []


@pytest.fixture
def game(make_game, events):
    """Standard game, red to move, dice scripted to checker=3 / ball=2 (NE)."""
    g = make_game(3, 2)
    g.register(events.append)
    return g

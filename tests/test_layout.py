import pytest

from jokerball.errors import CoordinateOutOfRange
from jokerball.grid import Grid, HexType, Occupied
from jokerball.hexgrid import Coord
from jokerball.layout import BALL_START, blue_start, lay_out_board, red_start


@pytest.fixture
def board():
    g = Grid(6)
    lay_out_board(g)
    return g


def _coords(hexes):
    return {(h.coord.q, h.coord.r) for h in hexes}


def test_walls_cover_the_east_and_west_borders(board):
    west = {(-1, -5), (-2, -4), (-3, -3), (-4, -2), (-5, -1)} | {(-6, r) for r in range(0, 6)}
    east = {(6, r) for r in range(-5, 1)} | {(5, 1), (4, 2), (3, 3), (2, 4), (1, 5)}
    assert _coords(board.hexes_of_type(HexType.WALL)) == west | east
    assert len(west | east) == 22


def test_goals_are_the_north_and_south_rows(board):
    top = {(q, -6) for q in range(0, 7)}
    bottom = {(q, 6) for q in range(-6, 1)}
    assert _coords(board.hexes_of_type(HexType.GOAL)) == top | bottom


def test_every_border_hex_is_wall_or_goal(board):
    for h in board:
        c = h.coord
        if max(abs(c.q), abs(c.r), abs(c.s)) == 6:
            assert h.type in (HexType.WALL, HexType.GOAL), c


def test_starting_formations_and_ball(board):
    assert _coords(board.hexes_occupied_by(Occupied.RED)) == {(c.q, c.r) for c in red_start()}
    assert _coords(board.hexes_occupied_by(Occupied.BLUE)) == {(c.q, c.r) for c in blue_start()}
    assert len(red_start()) == 11 and len(blue_start()) == 11

    balls = board.hexes_occupied_by(Occupied.BALL)
    assert [h.coord for h in balls] == [BALL_START] == [Coord(0, 0)]


def test_checkers_start_on_play_area(board):
    for h in board.hexes_occupied_by(Occupied.RED) + board.hexes_occupied_by(Occupied.BLUE):
        assert h.type is HexType.PLAY_AREA


def test_layout_needs_a_full_size_board():
    with pytest.raises(CoordinateOutOfRange):
        lay_out_board(Grid(4))

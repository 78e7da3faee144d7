import pytest

from jokerball.hexgrid import (
    DIRECTION_VECTORS,
    FORWARD_DIRECTIONS,
    Coord,
    Direction,
    add,
    neighbor,
)


def test_direction_vectors_are_the_six_unit_offsets():
    assert [(v.q, v.r) for v in (DIRECTION_VECTORS[d] for d in Direction)] == [
        (1, 0),
        (1, -1),
        (0, -1),
        (-1, 0),
        (-1, 1),
        (0, 1),
    ]


def test_add_rederives_s():
    c = add(Coord(2, -5), Coord(-4, 1))
    assert (c.q, c.r, c.s) == (-2, -4, 6)
    assert c.q + c.r + c.s == 0


@pytest.mark.parametrize("q,r", [(0, 0), (3, -1), (-6, 6), (5, 1)])
def test_cube_constraint_holds_for_every_neighbor(q, r):
    origin = Coord(q, r)
    for d in Direction:
        n = neighbor(origin, d)
        assert n.q + n.r + n.s == 0
        assert max(abs(n.q - origin.q), abs(n.r - origin.r), abs(n.s - origin.s)) == 1


def test_six_directions_sum_back_to_origin():
    total = Coord(0, 0)
    for d in Direction:
        total = total + DIRECTION_VECTORS[d]
    assert total == Coord(0, 0)


def test_opposite_directions_cancel():
    c = Coord(1, 2)
    assert c.neighbor(Direction.E).neighbor(Direction.W) == c
    assert c.neighbor(Direction.NE).neighbor(Direction.SW) == c
    assert c.neighbor(Direction.NW).neighbor(Direction.SE) == c


def test_coord_is_a_value_type():
    assert Coord(1, -1) == Coord(1, -1)
    assert len({Coord(1, -1), Coord(1, -1), Coord(0, 0)}) == 2
    with pytest.raises(AttributeError):
        Coord(0, 0).q = 3


def test_forward_directions_point_at_opposite_goals():
    assert FORWARD_DIRECTIONS[0] == {Direction.NE, Direction.NW}
    assert FORWARD_DIRECTIONS[1] == {Direction.SW, Direction.SE}
    # Player 0 forward moves decrease r (north); player 1 forward moves increase it.
    assert all(DIRECTION_VECTORS[d].r < 0 for d in FORWARD_DIRECTIONS[0])
    assert all(DIRECTION_VECTORS[d].r > 0 for d in FORWARD_DIRECTIONS[1])

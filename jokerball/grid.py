from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, List, Optional

from jokerball.errors import CoordinateOutOfRange, InvalidEnumValue
from jokerball.hexgrid import Coord


class HexType(str, Enum):
    PLAY_AREA = "play_area"
    # North or south border row. Checkers entering it leave play; the ball entering it ends the game.
    GOAL = "goal"
    # East and west borders. Nothing moves into or past them.
    WALL = "wall"


class Occupied(str, Enum):
    EMPTY = "empty"
    BALL = "ball"
    RED = "red"    # player 0
    BLUE = "blue"  # player 1

    @property
    def is_checker(self) -> bool:
        return self in (Occupied.RED, Occupied.BLUE)


class Hex:
    """A space on the board.

    `coord` and `idx` never change. `type` and `occupied` are validated on
    every write: values outside HexType / Occupied are rejected and the hex
    keeps its previous value.
    """

    __slots__ = ("coord", "idx", "_type", "_occupied")

    def __init__(self, coord: Coord, idx: int, type: HexType = HexType.PLAY_AREA):
        self.coord = coord
        self.idx = idx
        self._type = HexType.PLAY_AREA
        self._occupied = Occupied.EMPTY
        self.type = type

    @property
    def type(self) -> HexType:
        return self._type

    @type.setter
    def type(self, value: HexType) -> None:
        if not isinstance(value, HexType):
            raise InvalidEnumValue(f"Invalid hex type value {value!r}")
        self._type = value

    @property
    def occupied(self) -> Occupied:
        return self._occupied

    @occupied.setter
    def occupied(self, value: Occupied) -> None:
        if not isinstance(value, Occupied):
            raise InvalidEnumValue(f"Invalid occupied value {value!r}")
        self._occupied = value

    @property
    def is_empty(self) -> bool:
        return self._occupied is Occupied.EMPTY

    def __repr__(self):
        return f"Hex#{self.idx}{self.coord} {self._type.value}/{self._occupied.value}"


class Grid:
    """Hexagonal board of a fixed radius.

    Hex indices follow the enumeration order q = -radius..radius, then r
    ascending over its valid range. Views map their cells to hexes by that
    index, so the order must never change.
    """

    def __init__(self, radius: int):
        if radius < 0:
            raise ValueError("radius must be >= 0")
        self.radius = radius
        self.hexes: List[Hex] = []
        self._by_coord: Dict[tuple[int, int], Hex] = {}

        for q in range(-radius, radius + 1):
            r1 = max(-radius, -q - radius)
            r2 = min(radius, -q + radius)
            for r in range(r1, r2 + 1):
                h = Hex(Coord(q, r), len(self.hexes))
                self.hexes.append(h)
                self._by_coord[(q, r)] = h

    @classmethod
    def build(cls, radius: int) -> Grid:
        return cls(radius)

    def __len__(self) -> int:
        return len(self.hexes)

    def __iter__(self) -> Iterator[Hex]:
        return iter(self.hexes)

    def lookup(self, coord: Coord) -> Optional[Hex]:
        return self._by_coord.get((coord.q, coord.r))

    def require(self, coord: Coord) -> Hex:
        h = self.lookup(coord)
        if h is None:
            raise CoordinateOutOfRange(f"coord not found {coord!r} (radius {self.radius})")
        return h

    def hex_at(self, idx: int) -> Hex:
        if idx < 0 or idx >= len(self.hexes):
            raise IndexError(f"No hex with index {idx}")
        return self.hexes[idx]

    def hexes_occupied_by(self, occupied: Occupied) -> List[Hex]:
        return [h for h in self.hexes if h.occupied is occupied]

    def hexes_of_type(self, hex_type: HexType) -> List[Hex]:
        return [h for h in self.hexes if h.type is hex_type]

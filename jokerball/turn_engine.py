# jokerball/turn_engine.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple
import random

from jokerball.dice import RNG, Roll, ball_direction
from jokerball.errors import InvalidOperation
from jokerball.grid import Grid, Hex, HexType, Occupied
from jokerball.hexgrid import Coord, Direction
from jokerball.layout import BOARD_RADIUS, lay_out_board
from jokerball.movement import ball_destinations, checker_destinations, movable_checkers


class State(str, Enum):
    ROLL = "roll"
    SELECT_CHECKER = "select-checker"
    MOVE_CHECKER = "move-checker"
    MOVE_BALL = "move-ball"
    END = "end"


PLAYERS: Tuple[str, str] = ("red", "blue")
PLAYER_CHECKERS: Tuple[Occupied, Occupied] = (Occupied.RED, Occupied.BLUE)


@dataclass(frozen=True, slots=True)
class HexView:
    idx: int
    coord: Coord
    type: HexType
    occupied: Occupied


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Everything a view needs to draw one frame."""

    player: int
    player_name: str
    state: State
    hexes: Tuple[HexView, ...]
    checker_die: Optional[int]
    ball_die: Optional[int]
    selectable: Tuple[int, ...]
    ball: Coord
    selected_checker: Optional[int]

    @property
    def ball_direction(self) -> Optional[Direction]:
        return None if self.ball_die is None else ball_direction(self.ball_die)


Observer = Callable[[GameSnapshot], None]


class Game:
    """Turn state machine for one match.

    Turn cycle:
      ROLL -> SELECT_CHECKER -> MOVE_CHECKER -> MOVE_BALL -> (other player's ROLL | END)

    The game is mutated only through press_ok(), select_space() and
    unselect_checker(). Each successful call notifies the registered observer
    with a fresh snapshot; a call that raises leaves the game untouched.
    """

    def __init__(self, rng: RNG | None = None):
        self.grid = Grid(BOARD_RADIUS)
        self.ball: Coord = lay_out_board(self.grid)
        self.players = PLAYERS
        self.player: int = 0
        self.checker_die: Optional[int] = None
        self.ball_die: Optional[int] = None
        self.state: State = State.ROLL
        self.selectable_spaces: List[int] = []
        self.selected_checker: Optional[int] = None
        self.log: List[str] = []
        self.rng = rng or random.Random()
        self._observer: Optional[Observer] = None

    # -----------------------------
    # Observer
    # -----------------------------

    def register(self, callback: Observer) -> None:
        """Register the single observer that receives a snapshot after every change."""
        self._observer = callback

    def start(self) -> None:
        """Publish the initial state."""
        self.log.append(f"Game started. {self.player_name} to roll.")
        self._notify()

    def _notify(self) -> None:
        if self._observer is not None:
            self._observer(self.snapshot())

    # -----------------------------
    # Read surface
    # -----------------------------

    @property
    def player_name(self) -> str:
        return self.players[self.player]

    @property
    def player_checker(self) -> Occupied:
        return PLAYER_CHECKERS[self.player]

    @property
    def is_over(self) -> bool:
        return self.state is State.END

    def ball_hex(self) -> Hex:
        return self.grid.require(self.ball)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            player=self.player,
            player_name=self.player_name,
            state=self.state,
            hexes=tuple(HexView(h.idx, h.coord, h.type, h.occupied) for h in self.grid),
            checker_die=self.checker_die,
            ball_die=self.ball_die,
            selectable=tuple(self.selectable_spaces),
            ball=self.ball,
            selected_checker=self.selected_checker,
        )

    # -----------------------------
    # Move computation
    # -----------------------------

    def checker_destinations(self, hex_: Hex) -> List[int]:
        return checker_destinations(self.grid, hex_, self.player, self.checker_die)

    def ball_destinations(self) -> List[int]:
        return ball_destinations(self.grid, self.ball_hex(), self.ball_die)

    def _set_selectable_checkers(self) -> None:
        self.selectable_spaces = movable_checkers(self.grid, self.player, self.player_checker, self.checker_die)

    def _set_selectable_ball(self) -> None:
        self.selectable_spaces = self.ball_destinations()

    # -----------------------------
    # Mutations
    # -----------------------------

    def _move_checker(self, dest: Hex) -> None:
        src = self.grid.hex_at(self.selected_checker)
        captured = dest.occupied if dest.occupied.is_checker else None

        # A checker entering a goal leaves the board.
        if dest.type is not HexType.GOAL:
            dest.occupied = src.occupied
        src.occupied = Occupied.EMPTY
        self.selected_checker = None

        if dest.type is HexType.GOAL:
            self.log.append(f"{self.player_name} checker {src.idx}{src.coord} exits through the goal at {dest.coord}.")
        elif captured is not None:
            self.log.append(f"{self.player_name} checker {src.idx}{src.coord} captures {captured.value} at {dest.coord}.")
        else:
            self.log.append(f"{self.player_name} checker moved {src.idx}{src.coord} -> {dest.idx}{dest.coord}.")

    def _move_ball(self, dest: Hex) -> None:
        src = self.ball_hex()
        dest.occupied = src.occupied
        src.occupied = Occupied.EMPTY
        self.ball = dest.coord
        self.log.append(f"{self.player_name} moved the ball {src.coord} -> {dest.coord}.")

    def _end_turn(self) -> None:
        self.player = (self.player + 1) % len(self.players)
        self.state = State.ROLL
        self.log.append(f"Now active: {self.player_name}")

    # -----------------------------
    # Transitions
    # -----------------------------

    def press_ok(self) -> None:
        """Confirm / advance. What it does depends on the current state."""
        if self.state is State.ROLL:
            roll = Roll.roll(self.rng)
            self.checker_die = roll.checker_die
            self.ball_die = roll.ball_die
            self.state = State.SELECT_CHECKER
            self._set_selectable_checkers()
            self.log.append(
                f"{self.player_name} rolled checker={roll.checker_die} "
                f"ball={roll.ball_die} ({roll.ball_direction.arrow})."
            )

        elif self.state is State.SELECT_CHECKER:
            if self.selectable_spaces:
                raise InvalidOperation("Not valid to press OK when there are selectable checkers")
            self.log.append(f"{self.player_name} has no checker to move.")
            self.state = State.MOVE_BALL
            self._set_selectable_ball()

        elif self.state is State.MOVE_CHECKER:
            raise InvalidOperation("A destination must be selected for the checker")

        elif self.state is State.MOVE_BALL:
            if self.selectable_spaces:
                raise InvalidOperation("Not valid to press OK when the ball can move")
            self.log.append(f"{self.player_name} cannot move the ball.")
            self._end_turn()

        else:
            self.log.append("Game over; no further moves.")

        self._notify()

    def select_space(self, idx: int) -> None:
        """Pick one of the currently selectable hexes."""
        if idx not in self.selectable_spaces:
            raise InvalidOperation(f"Hex {idx} is not selectable in state {self.state.value}")
        hex_ = self.grid.hex_at(idx)

        if self.state is State.SELECT_CHECKER:
            self.selected_checker = idx
            self.state = State.MOVE_CHECKER
            self.selectable_spaces = self.checker_destinations(hex_)
            self.log.append(f"{self.player_name} picked checker {idx}{hex_.coord}.")

        elif self.state is State.MOVE_CHECKER:
            self._move_checker(hex_)
            self.state = State.MOVE_BALL
            self._set_selectable_ball()

        elif self.state is State.MOVE_BALL:
            self._move_ball(hex_)
            self.selectable_spaces = []
            if hex_.type is HexType.GOAL:
                self.state = State.END
                self.log.append(f"Goal! {self.player_name} put the ball in at {hex_.coord}. Game over.")
            else:
                self._end_turn()

        else:
            raise InvalidOperation(f"Nothing to select in state {self.state.value}")

        self._notify()

    def unselect_checker(self) -> None:
        """Revert the in-progress checker selection. Only meaningful in MOVE_CHECKER."""
        if self.state is not State.MOVE_CHECKER:
            return
        self.log.append(f"{self.player_name} put checker {self.selected_checker} back.")
        self.state = State.SELECT_CHECKER
        self.selected_checker = None
        self._set_selectable_checkers()
        self._notify()

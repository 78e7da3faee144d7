from __future__ import annotations

from typing import Dict, List, Optional

from jokerball.grid import HexType, Occupied
from jokerball.turn_engine import GameSnapshot, HexView, State

CELL_WIDTH = 4

OCCUPANT_SYMBOLS = {
    Occupied.RED: " R ",
    Occupied.BLUE: " B ",
    Occupied.BALL: " o ",
}

TYPE_SYMBOLS = {
    HexType.PLAY_AREA: " . ",
    HexType.GOAL: "===",
    HexType.WALL: "###",
}

STATE_SUMMARIES = {
    State.ROLL: "Roll the dice.",
    State.SELECT_CHECKER: "Select a checker to move.",
    State.MOVE_CHECKER: "Select the destination.",
    State.MOVE_BALL: "Select where to move the ball.",
    State.END: "Goal! Game over.",
}

NO_ACTION_TEXT = {
    State.SELECT_CHECKER: "No available checkers to move",
    State.MOVE_CHECKER: "No valid destinations for your checker",
    State.MOVE_BALL: "No valid destinations for the ball",
}


def summary(snap: GameSnapshot) -> str:
    return STATE_SUMMARIES[snap.state]


def no_action_text(snap: GameSnapshot) -> Optional[str]:
    """Hint shown when the player has nothing to select and must press OK instead."""
    if snap.selectable or snap.state in (State.ROLL, State.END):
        return None
    return NO_ACTION_TEXT[snap.state]


def dice_text(snap: GameSnapshot) -> str:
    if snap.state in (State.ROLL, State.END) or snap.checker_die is None:
        return ""
    return f"checker die {snap.checker_die} | ball die {snap.ball_die} {snap.ball_direction.arrow}"


def render_cell(h: HexView, snap: GameSnapshot) -> str:
    if h.idx in snap.selectable:
        return f"{h.idx:>3}"
    if h.idx == snap.selected_checker:
        return f"({OCCUPANT_SYMBOLS[h.occupied].strip()})"
    if h.occupied is not Occupied.EMPTY:
        return OCCUPANT_SYMBOLS[h.occupied]
    return TYPE_SYMBOLS[h.type]


def render_board_ascii(snap: GameSnapshot) -> str:
    """
    Draws the hexagon with north (r = -radius) on top.
    Selectable hexes show their index so they can be typed back in.
    """
    rows: Dict[int, List[HexView]] = {}
    for h in snap.hexes:
        rows.setdefault(h.coord.r, []).append(h)

    lines: List[str] = []
    half = CELL_WIDTH // 2
    for r in sorted(rows):
        cells = sorted(rows[r], key=lambda h: h.coord.q)
        indent = " " * (abs(r) * half)
        lines.append(f"r={r:>2} {indent}" + " ".join(render_cell(h, snap) for h in cells))
    return "\n".join(lines)


def render_status(snap: GameSnapshot) -> str:
    parts = [f"Turn: {snap.player_name}", summary(snap)]
    dice = dice_text(snap)
    if dice:
        parts.append(dice)
    hint = no_action_text(snap)
    if hint:
        parts.append(f"{hint} (press OK)")
    return " | ".join(parts)


def render_game_ascii(snap: GameSnapshot) -> str:
    legend = "Legend: R red | B blue | o ball | ### wall | === goal | (R) selected | 97 selectable index"
    return "\n".join([render_status(snap), legend, "", render_board_ascii(snap)])

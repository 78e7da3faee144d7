from __future__ import annotations

import threading
import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from jokerball.config import max_games, new_rng, templates_dir
from jokerball.errors import InvalidOperation
from jokerball.render_ascii import dice_text, no_action_text, render_board_ascii, summary
from jokerball.turn_engine import Game, GameSnapshot

app = FastAPI(title="Jokerball")
templates = Jinja2Templates(directory=templates_dir())

# Games live in this process only; restarting the server drops them.
# Insertion order is creation order, so the first key is the oldest game.
GAMES: Dict[str, Game] = {}
# Handlers run in a threadpool. One lock per game serializes its transitions.
LOCKS: Dict[str, threading.Lock] = {}
_registry_lock = threading.Lock()


def _new_game() -> str:
    game_id = str(uuid.uuid4())
    game = Game(rng=new_rng(game_id))
    game.start()
    with _registry_lock:
        limit = max_games()
        while len(GAMES) >= limit:
            oldest = next(iter(GAMES))
            del GAMES[oldest]
            LOCKS.pop(oldest, None)
        GAMES[game_id] = game
        LOCKS[game_id] = threading.Lock()
    return game_id


def _load_game(game_id: str) -> Game:
    game = GAMES.get(game_id)
    if game is None:
        raise HTTPException(status_code=404, detail="No such game")
    return game


@contextmanager
def _locked_game(game_id: str) -> Iterator[Game]:
    with _registry_lock:
        game = _load_game(game_id)
        lock = LOCKS[game_id]
    with lock:
        yield game


def _tail(lines: list[str], n: int = 50) -> list[str]:
    if n <= 0:
        return []
    return lines[-n:]


def _snapshot_json(snap: GameSnapshot) -> dict[str, Any]:
    return {
        "player": snap.player,
        "player_name": snap.player_name,
        "state": snap.state.value,
        "checker_die": snap.checker_die,
        "ball_die": snap.ball_die,
        "ball_direction": None if snap.ball_direction is None else snap.ball_direction.name,
        "selectable": list(snap.selectable),
        "selected_checker": snap.selected_checker,
        "ball": {"q": snap.ball.q, "r": snap.ball.r},
        "hexes": [
            {
                "idx": h.idx,
                "q": h.coord.q,
                "r": h.coord.r,
                "s": h.coord.s,
                "type": h.type.value,
                "occupied": h.occupied.value,
            }
            for h in snap.hexes
        ],
    }


def _ui_state(game_id: str) -> dict[str, Any]:
    game = _load_game(game_id)
    snap = game.snapshot()
    return {
        "game_id": game_id,
        "active_player": snap.player_name,
        "summary": summary(snap),
        "dice": dice_text(snap),
        "no_action": no_action_text(snap),
        "map_text": render_board_ascii(snap),
        "log_tail": "\n".join(_tail(game.log, 60)),
        "snapshot": _snapshot_json(snap),
    }


def _apply(game: Game, action, *args) -> list[str]:
    """Run one transition and return the log lines it produced. Illegal moves become 409s."""
    before = len(game.log)
    try:
        action(*args)
    except InvalidOperation as e:
        raise HTTPException(status_code=409, detail=str(e))
    return game.log[before:]


def _apply_command(game: Game, command: str) -> list[str]:
    """Text command surface for the HTML form: ok | select <idx> | unselect."""
    parts = command.strip().split()
    if not parts:
        return ["(no command)"]

    head = parts[0].lower()
    try:
        if head == "ok":
            return _apply(game, game.press_ok)
        if head == "unselect":
            return _apply(game, game.unselect_checker)
        if head == "select":
            if len(parts) != 2:
                return ["Usage: select <idx>"]
            try:
                idx = int(parts[1])
            except ValueError:
                return ["idx must be an integer"]
            return _apply(game, game.select_space, idx)
    except HTTPException as e:
        return [f"ERROR: {e.detail}"]

    return [f"Unknown command: {command.strip()}"]


@app.get("/", response_class=HTMLResponse)
def index(request: Request, game_id: Optional[str] = None):
    # If no game exists yet, create one and redirect to it.
    if game_id is None:
        new_id = _new_game()
        return RedirectResponse(url=f"/?game_id={new_id}", status_code=302)

    with _locked_game(game_id):
        state = _ui_state(game_id)
    return templates.TemplateResponse(
        request,
        "index.html",
        {**state, "games": list(GAMES)},
    )


@app.get("/games")
def list_games():
    return {"games": list(GAMES)}


@app.post("/games")
def create_game():
    return {"game_id": _new_game()}


@app.get("/games/{game_id}/state")
def get_state(game_id: str):
    with _locked_game(game_id):
        return _ui_state(game_id)


@app.post("/games/{game_id}/ok")
def press_ok(game_id: str):
    with _locked_game(game_id) as game:
        events = _apply(game, game.press_ok)
        return {"events": events, "state": _ui_state(game_id)}


@app.post("/games/{game_id}/select")
def select_space(game_id: str, payload: Dict[str, Any]):
    try:
        idx = int(payload["index"])
    except (KeyError, TypeError, ValueError):
        raise HTTPException(status_code=400, detail="index (integer) is required")
    with _locked_game(game_id) as game:
        events = _apply(game, game.select_space, idx)
        return {"events": events, "state": _ui_state(game_id)}


@app.post("/games/{game_id}/unselect")
def unselect_checker(game_id: str):
    with _locked_game(game_id) as game:
        events = _apply(game, game.unselect_checker)
        return {"events": events, "state": _ui_state(game_id)}


@app.post("/ui/command", response_class=HTMLResponse)
def ui_command(
    request: Request,
    game_id: str = Form(...),
    command: str = Form(""),
):
    with _locked_game(game_id) as game:
        events = _apply_command(game, command)
        state = _ui_state(game_id)
    return templates.TemplateResponse(
        request,
        "index.html",
        {**state, "games": list(GAMES), "last_events": "\n".join(events)},
    )

from __future__ import annotations

import os
import random
from pathlib import Path
from typing import Optional

DEFAULT_TEMPLATES_DIR = str((Path(__file__).parent.parent / "templates").resolve())
DEFAULT_MAX_GAMES = 100


def dice_seed() -> Optional[str]:
    seed = os.environ.get("JOKERBALL_SEED", "").strip()
    return seed or None


def templates_dir() -> str:
    return os.environ.get("JOKERBALL_TEMPLATES", DEFAULT_TEMPLATES_DIR)


def new_rng(game_id: str = "") -> random.Random:
    """Dice RNG for a new game. Seeded per game when JOKERBALL_SEED is set, otherwise system-random."""
    seed = dice_seed()
    if seed is None:
        return random.Random()
    return random.Random(f"{seed}|{game_id}")


def max_games() -> int:
    """Upper bound on games held by the web view. Oldest games are dropped past it."""
    raw = os.environ.get("JOKERBALL_MAX_GAMES", "").strip()
    if not raw:
        return DEFAULT_MAX_GAMES
    value = int(raw)
    if value < 1:
        raise ValueError("JOKERBALL_MAX_GAMES must be >= 1")
    return value

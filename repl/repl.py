from jokerball.config import new_rng
from jokerball.errors import InvalidOperation
from jokerball.hexgrid import Coord
from jokerball.render_ascii import render_game_ascii
from jokerball.turn_engine import Game

HELP_LINES = [
    "Commands:",
    "  map                 - show the board",
    "  ok                  - roll / pass when nothing can move",
    "  select <idx>        - pick a selectable hex by index",
    "  pick <q> <r>        - pick a selectable hex by coordinate",
    "  unselect            - drop the checker you picked",
    "  moves               - list selectable hexes",
    "  log                 - show recent game log",
    "  exit                - quit",
]


def handle_command(game: Game, raw: str) -> list[str]:
    """Apply one REPL command to `game` and return the lines to print."""
    parts = raw.strip().split()
    if not parts:
        return []
    head = parts[0].lower()

    if head == "help":
        return list(HELP_LINES)

    if head == "map":
        return [render_game_ascii(game.snapshot())]

    if head == "log":
        if not game.log:
            return ["(no events)"]
        return [f"  {line}" for line in game.log[-20:]]

    if head == "moves":
        if not game.selectable_spaces:
            return ["(nothing selectable)"]
        return [f"  {idx}: {game.grid.hex_at(idx).coord}" for idx in game.selectable_spaces]

    before = len(game.log)
    try:
        if head in ("ok", "roll"):
            game.press_ok()
        elif head == "unselect":
            game.unselect_checker()
        elif head == "select":
            if len(parts) != 2:
                return ["Usage: select <idx>"]
            try:
                idx = int(parts[1])
            except ValueError:
                return ["idx must be an integer."]
            game.select_space(idx)
        elif head == "pick":
            if len(parts) != 3:
                return ["Usage: pick <q> <r>"]
            try:
                q, r = int(parts[1]), int(parts[2])
            except ValueError:
                return ["q and r must be integers."]
            h = game.grid.lookup(Coord(q, r))
            if h is None:
                return [f"ERROR: ({q},{r}) is off the board"]
            game.select_space(h.idx)
        else:
            return [f"Unknown command: {raw.strip()}"]
    except InvalidOperation as e:
        return [f"ERROR: {e}"]

    return game.log[before:] or ["(no change)"]


def run_repl(game: Game):
    print("Jokerball")
    print("Type 'help' for commands. Type 'exit' to quit.\n")

    game.register(lambda snap: print(render_game_ascii(snap)))
    game.start()

    while True:
        prompt = f"[{game.player_name} | {game.state.value}]> "
        raw = input(prompt).strip()

        if raw.lower() in ("quit", "exit"):
            break

        for line in handle_command(game, raw):
            print(line)


if __name__ == "__main__":
    run_repl(Game(rng=new_rng("repl")))

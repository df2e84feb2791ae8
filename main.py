"""Terminal entry point for Hunter Chase.

Runs the game in a curses window: the hunter is steered with the keyboard
while chasers roam the board and pounce when they get close.

Usage:
    python main.py
    python main.py --rows 15 --cols 30 --walls 10 --seed 42

Environment variables:
    HUNTER_CHASE_ROWS   : Default board height (default: 20)
    HUNTER_CHASE_COLS   : Default board width (default: 40)
    HUNTER_CHASE_WALLS  : Default wall percentage (default: 5)
    HUNTER_CHASE_LOG    : Log file path (default: hunter_chase.log)
"""

import argparse
import curses
import logging
import time

from config import (
    CHASER_TICK_INTERVAL,
    COUNTDOWN_SECONDS,
    DOWN_KEY,
    FRAME_SECONDS,
    GRID_COLS,
    GRID_ROWS,
    INITIAL_CHASERS,
    LEFT_KEY,
    LOG_FILE,
    RIGHT_KEY,
    UP_KEY,
    WALL_PERCENTAGE,
)
from engine.controls import decode_keys
from engine.game import Game, create_game, run_tick
from engine.render import board_text, countdown_text, instructions_text, score_text

logger = logging.getLogger(__name__)

# Arrow keys steer the same way as the letter bindings
ARROW_KEYS = {
    curses.KEY_UP: UP_KEY,
    curses.KEY_DOWN: DOWN_KEY,
    curses.KEY_LEFT: LEFT_KEY,
    curses.KEY_RIGHT: RIGHT_KEY,
}

ENTER_KEYS = (curses.KEY_ENTER, ord("\n"), ord("\r"))


def _draw(stdscr: "curses.window", text: str) -> None:
    """Replace the window contents with ``text``."""
    stdscr.erase()
    try:
        stdscr.addstr(0, 0, text)
    except curses.error:
        raise SystemExit("Terminal window is too small for this board; try smaller --rows/--cols")
    stdscr.refresh()


def _poll_keys(stdscr: "curses.window") -> list:
    """Drain every key pressed since the last poll without blocking."""
    keys = []
    while True:
        try:
            key = stdscr.getch()
        except curses.error:
            break
        if key == -1:
            break
        keys.append(ARROW_KEYS.get(key, key))
    return keys


def _wait_for_enter(stdscr: "curses.window") -> None:
    stdscr.nodelay(False)
    while stdscr.getch() not in ENTER_KEYS:
        pass
    stdscr.nodelay(True)


def _countdown(stdscr: "curses.window", seconds: int) -> None:
    for remaining in range(seconds, -1, -1):
        _draw(stdscr, countdown_text(remaining))
        time.sleep(1)


def play(stdscr: "curses.window", game: Game) -> None:
    """Run the game loop until the player quits."""
    curses.curs_set(0)
    stdscr.keypad(True)

    _draw(stdscr, instructions_text())
    _wait_for_enter(stdscr)
    _countdown(stdscr, COUNTDOWN_SECONDS)

    while True:
        key_input = decode_keys(_poll_keys(stdscr), hunter_id=game.hunter_id)
        if key_input.quit:
            logger.info("Player quit after %d ticks", game.tick)
            break

        cells = run_tick(game, key_input.moves, key_input.chasers_requested)
        _draw(stdscr, board_text(cells) + score_text(game.keeper.score()))
        time.sleep(FRAME_SECONDS)


def main() -> None:
    parser = argparse.ArgumentParser(description="Hunter Chase: outrun the chasers on a terminal grid")
    parser.add_argument("--rows", type=int, default=GRID_ROWS, help="Board height")
    parser.add_argument("--cols", type=int, default=GRID_COLS, help="Board width")
    parser.add_argument("--walls", type=int, default=WALL_PERCENTAGE, help="Wall percentage (0-100)")
    parser.add_argument("--chasers", type=int, default=INITIAL_CHASERS, help="Chasers at start")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible game")
    args = parser.parse_args()

    logging.basicConfig(
        filename=LOG_FILE,
        level=logging.INFO,
        format="%(asctime)s %(levelname)s:%(name)s:%(message)s",
    )

    try:
        game = create_game(
            rows=args.rows,
            cols=args.cols,
            wall_percentage=args.walls,
            seed=args.seed,
            chaser_interval=CHASER_TICK_INTERVAL,
            initial_chasers=args.chasers,
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        curses.wrapper(play, game)
    except KeyboardInterrupt:
        pass

    score = game.keeper.score()
    print(score_text(score), end="")
    print("Thanks for playing!")


if __name__ == "__main__":
    main()

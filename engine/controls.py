"""Keyboard decoding for Hunter Chase."""

from __future__ import annotations

from typing import Iterable

from config import ADD_CHASER_KEY, DOWN_KEY, LEFT_KEY, QUIT_KEY, RIGHT_KEY, UP_KEY
from models.board import Direction, Move
from models.events import KeyInput

KEY_DIRECTIONS: dict[str, Direction] = {
    UP_KEY: Direction.UP,
    DOWN_KEY: Direction.DOWN,
    LEFT_KEY: Direction.LEFT,
    RIGHT_KEY: Direction.RIGHT,
}


def decode_keys(keys: Iterable[int | str], hunter_id: int = 0) -> KeyInput:
    """Turn one poll's worth of key presses into hunter moves and commands.

    Movement keys become hunter moves in the order pressed, each add-chaser
    key bumps the chaser count, and the quit key stops decoding so anything
    typed after it is ignored. Bindings are case-sensitive and
    unknown keys are skipped.

    Args:
        keys: Key codes (as returned by curses ``getch``) or characters.
        hunter_id: Entity id the movement keys steer.

    Returns:
        The decoded KeyInput.
    """
    decoded = KeyInput()
    for key in keys:
        char = chr(key) if isinstance(key, int) and 0 <= key < 256 else key
        if not isinstance(char, str):
            continue

        if char == QUIT_KEY:
            decoded.quit = True
            break
        if char == ADD_CHASER_KEY:
            decoded.chasers_requested += 1
        elif char in KEY_DIRECTIONS:
            decoded.moves.append(Move(entity_id=hunter_id, direction=KEY_DIRECTIONS[char]))

    return decoded

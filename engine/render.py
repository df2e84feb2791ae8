"""Text rendering of the board and score for Hunter Chase."""

from __future__ import annotations

from config import ADD_CHASER_KEY, DOWN_KEY, LEFT_KEY, QUIT_KEY, RIGHT_KEY, UP_KEY
from models.events import Score


def board_text(cells: list[list[str]]) -> str:
    """Join a glyph matrix into newline-terminated rows."""
    return "".join("".join(row) + "\n" for row in cells)


def score_text(score: Score) -> str:
    return (
        f"Chasers On Screen: {score.chasers_added}\n"
        f"Times Caught: {score.times_caught}\n"
    )


def instructions_text() -> str:
    keys = [
        ("spacebar" if ADD_CHASER_KEY == " " else ADD_CHASER_KEY, "add a chaser"),
        (QUIT_KEY, "EXIT"),
        (UP_KEY, "UP"),
        (LEFT_KEY, "LEFT"),
        (DOWN_KEY, "DOWN"),
        (RIGHT_KEY, "RIGHT"),
    ]
    lines = ["---- Game Instructions ----"]
    lines += [f"{key:<8} -> {action}" for key, action in keys]
    lines.append("PRESS ENTER TO START!")
    return "\n".join(lines) + "\n"


def countdown_text(seconds_left: int) -> str:
    return f"{seconds_left} seconds to go!"

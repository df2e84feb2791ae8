"""Score notifications and input models for Hunter Chase."""

from enum import Enum

from pydantic import BaseModel

from models.board import Move


class GameNotification(str, Enum):
    """Events the score keeper listens for."""
    CAUGHT = "caught"               # A chaser and the hunter collided
    CHASER_ADDED = "chaser_added"


class Score(BaseModel):
    """Snapshot of the score counters."""
    chasers_added: int = 0
    times_caught: int = 0


class KeyInput(BaseModel):
    """Decoded keyboard input for one tick."""
    moves: list[Move] = []
    chasers_requested: int = 0
    quit: bool = False

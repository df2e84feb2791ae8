"""Board, position and movement models for Hunter Chase."""

from enum import Enum

from pydantic import BaseModel


class Direction(str, Enum):
    """Step directions. Cardinal declaration order is the pursuit tie-break order."""
    UP = "up"
    DOWN = "down"
    RIGHT = "right"
    LEFT = "left"
    NONE = "none"                   # No legal move / not yet moved


CARDINAL_DIRECTIONS = [Direction.UP, Direction.DOWN, Direction.RIGHT, Direction.LEFT]


class Role(str, Enum):
    """Who controls an entity."""
    HUNTER = "hunter"               # The player, always the first insertion
    CHASER = "chaser"


class Tile(str, Enum):
    """What a board cell currently holds."""
    EMPTY = "empty"
    WALL = "wall"
    HUNTER = "hunter"
    CHASER = "chaser"


class Collision(str, Enum):
    """Result of stepping into a cell."""
    NONE = "none"
    WALL = "wall"
    HUNTER = "hunter"
    CHASER = "chaser"


class Position(BaseModel):
    """Where an entity stands and which way it last moved."""
    row: int
    col: int
    facing: Direction = Direction.NONE
    role: Role = Role.CHASER

    @property
    def cell(self) -> tuple[int, int]:
        return (self.row, self.col)


class Move(BaseModel):
    """A single requested step for one entity during one tick."""
    entity_id: int
    direction: Direction

"""Board storage, movement validation, and batch move application for Hunter Chase."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Iterable

from config import EMPTY_GLYPH, HUNTER_GLYPH, WALL_GLYPH
from engine.random_source import RandomSource
from models.board import Collision, Direction, Move, Position, Role, Tile
from models.events import GameNotification

if TYPE_CHECKING:
    from engine.score import ScoreKeeper

logger = logging.getLogger(__name__)

# (row, col) step for each cardinal direction
DIRECTION_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.RIGHT: (0, 1),
    Direction.LEFT: (0, -1),
}

# Chaser glyph keyed by facing; a chaser that hasn't moved yet shows as "<"
CHASER_GLYPHS: dict[Direction, str] = {
    Direction.UP: "v",
    Direction.DOWN: "^",
    Direction.RIGHT: "<",
    Direction.LEFT: ">",
    Direction.NONE: "<",
}

NO_OFFSET = (0, 0)


def create_cells(rows: int, cols: int) -> list[list[str]]:
    """Initialize an empty rows x cols glyph matrix indexed as cells[row][col]."""
    return [[EMPTY_GLYPH for _ in range(cols)] for _ in range(rows)]


def glyph_for(position: Position) -> str:
    """Return the glyph an entity is drawn with."""
    if position.role == Role.HUNTER:
        return HUNTER_GLYPH
    return CHASER_GLYPHS[position.facing]


def classify_glyph(glyph: str) -> Tile:
    """Map a board glyph to the kind of tile it represents."""
    if glyph == EMPTY_GLYPH:
        return Tile.EMPTY
    if glyph == WALL_GLYPH:
        return Tile.WALL
    if glyph == HUNTER_GLYPH:
        return Tile.HUNTER
    return Tile.CHASER


class Grid:
    """The game board: glyph matrix plus the position of every entity.

    The Grid is the only writer of positions and cells. Entities are inserted
    once and never removed, so entity ids are dense and start at 0. The first
    inserted entity is the hunter; every later one is a chaser.

    Cells are only written during a render pass (``apply_moves`` or
    ``render``), so collision checks made while a batch is being applied see
    the board exactly as it stood when the batch started.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        keeper: ScoreKeeper,
        rng: random.Random | None = None,
    ) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid must be at least 1x1, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._cells = create_cells(rows, cols)
        self._positions: dict[int, Position] = {}
        self._next_id = 0
        self._keeper = keeper
        rng = rng or random.Random()
        self._row_source = RandomSource(0, rows - 1, rng)
        self._col_source = RandomSource(0, cols - 1, rng)

    # ------------------------------------------------------------------
    # Entities
    # ------------------------------------------------------------------

    @property
    def hunter_id(self) -> int:
        return 0

    @property
    def entity_count(self) -> int:
        return self._next_id

    def insert_entity(self, at: tuple[int, int] | None = None) -> int:
        """Add an entity to the board and return its id.

        The first entity is the hunter and always starts at (0, 0). Later
        entities are chasers placed on a uniformly random cell, which may
        already hold a wall or another entity. Nothing is drawn until the
        next render pass.

        Args:
            at: Optional (row, col) spawn cell overriding the random draw.

        Returns:
            The new entity's id.

        Raises:
            ValueError: If ``at`` is outside the grid.
        """
        role = Role.HUNTER if self._next_id == 0 else Role.CHASER

        if at is not None:
            row, col = at
            if not self.in_bounds(row, col):
                raise ValueError(f"Spawn cell ({row}, {col}) is out of bounds")
        elif role == Role.HUNTER:
            row, col = 0, 0
        else:
            row = self._row_source.get_random_int()
            col = self._col_source.get_random_int()

        entity_id = self._next_id
        self._positions[entity_id] = Position(row=row, col=col, role=role)
        self._next_id += 1
        logger.debug("Inserted %s %d at (%d, %d)", role.value, entity_id, row, col)
        return entity_id

    def current_position(self, entity_id: int) -> Position:
        """Return a copy of an entity's position.

        Raises:
            KeyError: If no entity has this id.
        """
        return self._positions[entity_id].model_copy()

    def role_of(self, entity_id: int) -> Role:
        return self._positions[entity_id].role

    # ------------------------------------------------------------------
    # Walls
    # ------------------------------------------------------------------

    def generate_walls(self, percentage: int, rng: random.Random | None = None) -> int:
        """Scatter walls over every cell outside row 0 and column 0.

        Each candidate cell gets its own draw in [1, 100] and becomes a wall
        when the draw is at most ``percentage``. Row 0 and column 0 stay open
        so the hunter's start cell is never walled.

        Args:
            percentage: Chance (0-100) that a candidate cell becomes a wall.
            rng: Optional Random instance for seeded/testing layouts.

        Returns:
            Number of walls placed.

        Raises:
            ValueError: If percentage is outside 0..100.
        """
        if not 0 <= percentage <= 100:
            raise ValueError(f"Wall percentage must be within 0..100, got {percentage}")

        decision = RandomSource(1, 100, rng)
        placed = 0
        for row in range(1, self.rows):
            for col in range(1, self.cols):
                if decision.get_random_int() <= percentage:
                    self._cells[row][col] = WALL_GLYPH
                    placed += 1

        logger.info("Placed %d walls (%d%%) on %dx%d grid", placed, percentage, self.rows, self.cols)
        return placed

    def place_wall(self, row: int, col: int) -> None:
        """Wall off a single cell, for hand-built layouts.

        Raises:
            IndexError: If the cell is outside the grid.
        """
        self._check_cell(row, col)
        self._cells[row][col] = WALL_GLYPH

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def tile_at(self, row: int, col: int) -> Tile:
        """Classify the glyph currently stored at (row, col).

        Raises:
            IndexError: If the cell is outside the grid.
        """
        self._check_cell(row, col)
        return classify_glyph(self._cells[row][col])

    def validate_boundary(
        self,
        cell: tuple[int, int],
        direction: Direction,
    ) -> tuple[tuple[int, int], Direction]:
        """Check that one step from ``cell`` stays on the board.

        Args:
            cell: (row, col) the step starts from.
            direction: Requested direction.

        Returns:
            ((d_row, d_col), direction) for a legal step, or
            ((0, 0), Direction.NONE) if the step leaves the grid or the
            direction isn't cardinal.
        """
        offset = DIRECTION_OFFSETS.get(direction)
        if offset is None:
            return NO_OFFSET, Direction.NONE

        row, col = cell
        if not self.in_bounds(row + offset[0], col + offset[1]):
            return NO_OFFSET, Direction.NONE
        return offset, direction

    def validate_collision(self, cell: tuple[int, int], offset: tuple[int, int]) -> Collision:
        """Classify what occupies ``cell + offset`` on the current board.

        The caller guarantees the target is in bounds (see validate_boundary).

        Raises:
            IndexError: If the target cell is outside the grid.
        """
        tile = self.tile_at(cell[0] + offset[0], cell[1] + offset[1])
        if tile == Tile.WALL:
            return Collision.WALL
        if tile == Tile.HUNTER:
            return Collision.HUNTER
        if tile == Tile.CHASER:
            return Collision.CHASER
        return Collision.NONE

    def snapshot(self) -> list[list[str]]:
        """Return a copy of the glyph matrix."""
        return [list(row) for row in self._cells]

    # ------------------------------------------------------------------
    # Move application
    # ------------------------------------------------------------------

    def apply_moves(self, moves: Iterable[Move]) -> list[list[str]]:
        """Apply one tick's moves in order and redraw the board.

        Every move is classified against the board as it stood before the
        batch. Off-grid and wall steps are dropped. A chaser stepping onto
        the hunter, or the hunter stepping onto a chaser, notifies the score
        keeper and still moves. Vacated cells are cleared only after every
        move is resolved, then every entity is redrawn.

        Args:
            moves: The tick's moves, chasers first then hunter input.

        Returns:
            The redrawn glyph matrix.

        Raises:
            KeyError: If a move names an unknown entity.
        """
        vacated: list[tuple[int, int]] = []
        for move in moves:
            previous = self._update_entity(move)
            if previous is not None:
                vacated.append(previous)

        for row, col in vacated:
            self._cells[row][col] = EMPTY_GLYPH

        return self.render()

    def render(self) -> list[list[str]]:
        """Draw every entity at its current cell and return the board."""
        for position in self._positions.values():
            self._cells[position.row][position.col] = glyph_for(position)
        return self.snapshot()

    def _update_entity(self, move: Move) -> tuple[int, int] | None:
        """Resolve a single move. Returns the vacated cell, or None if it didn't move."""
        position = self._positions[move.entity_id]
        start = position.cell

        offset, direction = self.validate_boundary(start, move.direction)
        if direction == Direction.NONE:
            return None

        collision = self.validate_collision(start, offset)
        if collision == Collision.WALL:
            return None

        if (
            (position.role == Role.CHASER and collision == Collision.HUNTER)
            or (position.role == Role.HUNTER and collision == Collision.CHASER)
        ):
            logger.info("Entity %d caught moving %s from %s", move.entity_id, direction.value, start)
            self._keeper.notify(GameNotification.CAUGHT)

        position.facing = direction
        position.row += offset[0]
        position.col += offset[1]
        return start

    def _check_cell(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is outside the {self.rows}x{self.cols} grid")

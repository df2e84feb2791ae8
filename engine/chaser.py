"""Chaser AI for Hunter Chase: bounded pursuit with random wandering."""

from __future__ import annotations

import logging
import random
from collections import deque
from typing import TYPE_CHECKING

from config import PURSUIT_DEPTH, TURN_PERCENTAGE
from engine.random_source import RandomSource, random_direction
from models.board import CARDINAL_DIRECTIONS, Collision, Direction, Move

if TYPE_CHECKING:
    from engine.grid import Grid

logger = logging.getLogger(__name__)


class Chaser:
    """Decision policy for one chaser entity.

    Every tick the chaser first looks for the hunter with a breadth-first
    search limited to ``depth`` steps. If the hunter is out of reach it
    wanders, usually keeping its last direction and occasionally turning.
    """

    def __init__(
        self,
        entity_id: int,
        rng: random.Random | None = None,
        depth: int = PURSUIT_DEPTH,
        turn_percentage: int = TURN_PERCENTAGE,
    ) -> None:
        if depth < 1:
            raise ValueError(f"Pursuit depth must be positive, got {depth}")
        if not 0 <= turn_percentage <= 100:
            raise ValueError(f"Turn percentage must be within 0..100, got {turn_percentage}")
        self.entity_id = entity_id
        self.depth = depth
        self.turn_percentage = turn_percentage
        rng = rng or random.Random()
        self._direction_source = RandomSource(0, 3, rng)
        self._turn_source = RandomSource(1, 100, rng)
        self.last_move = random_direction(self._direction_source)

    def get_next_move(self, grid: Grid) -> Move:
        """Decide this tick's move: chase the hunter if close, else wander."""
        start = grid.current_position(self.entity_id).cell

        direction = self.find_hunter(grid, start)
        if direction is not None:
            self.last_move = direction
            return Move(entity_id=self.entity_id, direction=direction)

        return Move(entity_id=self.entity_id, direction=self._wander(grid, start))

    def find_hunter(self, grid: Grid, start: tuple[int, int]) -> Direction | None:
        """Breadth-first search for the hunter from ``start``.

        Cells are explored level by level through the cardinal directions in
        tie-break order (up, down, right, left), skipping walls and never
        revisiting a cell. Each discovered cell remembers the first step of
        the path that reached it. Cells more than ``depth`` steps away are not
        expanded, so the hunter is spotted at most ``depth + 1`` steps out.

        Returns:
            The first step of a shortest path to the hunter, or None if the
            hunter wasn't reached.
        """
        visited = {start}
        queue: deque[tuple[tuple[int, int], int, Direction]] = deque()
        queue.append((start, 0, Direction.NONE))

        while queue:
            cell, level, launch = queue.popleft()
            for step in CARDINAL_DIRECTIONS:
                offset, direction = grid.validate_boundary(cell, step)
                if direction == Direction.NONE:
                    continue

                collision = grid.validate_collision(cell, offset)
                if collision == Collision.WALL:
                    continue

                first_step = step if level == 0 else launch
                if collision == Collision.HUNTER:
                    logger.debug(
                        "Chaser %d spotted hunter %d steps away, heading %s",
                        self.entity_id, level + 1, first_step.value,
                    )
                    return first_step

                next_cell = (cell[0] + offset[0], cell[1] + offset[1])
                if next_cell in visited or level == self.depth:
                    continue
                visited.add(next_cell)
                queue.append((next_cell, level + 1, first_step))

        return None

    def _wander(self, grid: Grid, start: tuple[int, int]) -> Direction:
        """Pick a wandering step that doesn't run into a wall or off the board.

        Other entities never block a wandering chaser. Loops until a legal
        direction turns up. A chaser boxed in on all four sides (it can spawn
        inside a wall pocket) stays put instead.
        """
        if not any(self._can_step(grid, start, step) for step in CARDINAL_DIRECTIONS):
            logger.debug("Chaser %d is boxed in at %s", self.entity_id, start)
            return Direction.NONE

        while True:
            move = self.last_move
            if (
                self.last_move == Direction.NONE
                or self._turn_source.get_random_int() > 100 - self.turn_percentage
            ):
                move = random_direction(self._direction_source)

            if self._can_step(grid, start, move):
                self.last_move = move
                return move

            self.last_move = random_direction(self._direction_source)

    @staticmethod
    def _can_step(grid: Grid, start: tuple[int, int], direction: Direction) -> bool:
        offset, resolved = grid.validate_boundary(start, direction)
        if resolved == Direction.NONE:
            return False
        return grid.validate_collision(start, offset) != Collision.WALL

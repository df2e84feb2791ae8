"""Tests for chaser pursuit and wandering."""

import random

import pytest

from engine.chaser import Chaser
from engine.grid import Grid
from engine.score import ScoreKeeper
from models.board import CARDINAL_DIRECTIONS, Direction, Tile


def _make_board(
    rows: int,
    cols: int,
    chaser_at: tuple[int, int],
    walls: tuple[tuple[int, int], ...] = (),
    seed: int = 0,
    **chaser_kwargs,
) -> tuple[Grid, Chaser]:
    """Helper: hunter at (0, 0), one chaser at ``chaser_at``, board drawn."""
    grid = Grid(rows, cols, ScoreKeeper(), rng=random.Random(seed))
    grid.insert_entity()
    chaser_id = grid.insert_entity(at=chaser_at)
    for row, col in walls:
        grid.place_wall(row, col)
    grid.render()
    return grid, Chaser(chaser_id, rng=random.Random(seed), **chaser_kwargs)


class _ScriptedSource:
    """Stand-in for RandomSource that hands out fixed draws."""

    def __init__(self, values):
        self._values = iter(values)

    def get_random_int(self) -> int:
        return next(self._values)


def _share_leaving(chaser: Chaser, grid: Grid, heading: Direction, steps: int) -> float:
    """Fraction of wandering steps that abandon ``heading``."""
    turned = 0
    for _ in range(steps):
        chaser.last_move = heading
        if chaser.get_next_move(grid).direction != heading:
            turned += 1
    return turned / steps


class TestChaserSetup:
    """Tests for Chaser construction."""

    def test_starts_with_cardinal_direction(self):
        for seed in range(20):
            chaser = Chaser(1, rng=random.Random(seed))
            assert chaser.last_move in CARDINAL_DIRECTIONS

    def test_invalid_parameters(self):
        with pytest.raises(ValueError):
            Chaser(1, depth=0)
        with pytest.raises(ValueError):
            Chaser(1, turn_percentage=101)


class TestPursuit:
    """Tests for the bounded breadth-first search."""

    def test_corner_to_corner_prefers_up(self):
        """From (2, 2) on a 3x3 board both UP and LEFT start shortest paths; UP wins."""
        grid, chaser = _make_board(3, 3, chaser_at=(2, 2), depth=4)
        move = chaser.get_next_move(grid)
        assert move.entity_id == chaser.entity_id
        assert move.direction == Direction.UP
        assert chaser.last_move == Direction.UP

    def test_adjacent_hunter_left(self):
        grid, chaser = _make_board(3, 3, chaser_at=(0, 1))
        assert chaser.get_next_move(grid).direction == Direction.LEFT

    def test_adjacent_hunter_up(self):
        grid, chaser = _make_board(3, 3, chaser_at=(1, 0))
        assert chaser.get_next_move(grid).direction == Direction.UP

    def test_path_around_wall(self):
        grid, chaser = _make_board(2, 3, chaser_at=(0, 2), walls=((0, 1),))
        assert chaser.get_next_move(grid).direction == Direction.DOWN

    def test_other_chasers_do_not_block_search(self):
        grid = Grid(1, 4, ScoreKeeper(), rng=random.Random(0))
        grid.insert_entity()
        grid.insert_entity(at=(0, 1))
        chaser_id = grid.insert_entity(at=(0, 2))
        grid.render()
        chaser = Chaser(chaser_id, rng=random.Random(0))
        assert chaser.find_hunter(grid, (0, 2)) == Direction.LEFT

    def test_hunter_just_beyond_depth_is_spotted(self):
        """Cells up to ``depth`` steps out are expanded, so depth + 1 is the reach."""
        grid, chaser = _make_board(1, 8, chaser_at=(0, 6), depth=5)
        assert chaser.find_hunter(grid, (0, 6)) == Direction.LEFT

    def test_hunter_out_of_reach(self):
        grid, chaser = _make_board(1, 8, chaser_at=(0, 7), depth=5)
        assert chaser.find_hunter(grid, (0, 7)) is None

    def test_walled_off_hunter_not_found(self):
        grid, chaser = _make_board(3, 3, chaser_at=(2, 2), walls=((0, 1), (1, 0), (1, 1)))
        assert chaser.find_hunter(grid, (2, 2)) is None

    def test_search_is_repeatable(self):
        grid, chaser = _make_board(6, 6, chaser_at=(3, 2), walls=((2, 2), (1, 1)))
        first = chaser.find_hunter(grid, (3, 2))
        second = chaser.find_hunter(grid, (3, 2))
        assert first is not None
        assert first == second


class TestWandering:
    """Tests for the fallback random walk."""

    def test_single_exit_always_taken(self):
        """Boxed in on three sides, the only legal step is the one returned."""
        for seed in range(25):
            grid, chaser = _make_board(
                3, 3, chaser_at=(1, 1), walls=((0, 1), (1, 0), (1, 2)), seed=seed,
            )
            move = chaser.get_next_move(grid)
            assert move.direction == Direction.DOWN
            assert chaser.last_move == Direction.DOWN

    def test_keeps_heading_without_turns(self):
        grid, chaser = _make_board(20, 20, chaser_at=(10, 10), turn_percentage=0)
        chaser.last_move = Direction.RIGHT
        for _ in range(5):
            assert chaser.get_next_move(grid).direction == Direction.RIGHT

    def test_turns_away_from_edge(self):
        grid, chaser = _make_board(20, 20, chaser_at=(10, 19), turn_percentage=0)
        chaser.last_move = Direction.RIGHT
        move = chaser.get_next_move(grid)
        assert move.direction in (Direction.UP, Direction.DOWN, Direction.LEFT)

    def test_entities_do_not_block_wandering(self):
        grid = Grid(1, 12, ScoreKeeper(), rng=random.Random(0))
        grid.insert_entity()
        grid.insert_entity(at=(0, 10))
        chaser_id = grid.insert_entity(at=(0, 11))
        grid.render()
        chaser = Chaser(chaser_id, rng=random.Random(3), depth=1, turn_percentage=0)
        # Only LEFT stays on the board, straight into the other chaser
        assert chaser.get_next_move(grid).direction == Direction.LEFT

    def test_never_steps_into_wall_or_off_board(self):
        grid, chaser = _make_board(
            15, 15, chaser_at=(7, 7), walls=((6, 7), (8, 8), (7, 5)), seed=4, depth=1,
        )
        for _ in range(100):
            position = grid.current_position(chaser.entity_id)
            move = chaser.get_next_move(grid)
            offset, direction = grid.validate_boundary(position.cell, move.direction)
            assert direction == move.direction
            assert grid.tile_at(position.row + offset[0], position.col + offset[1]) != Tile.WALL
            grid.apply_moves([move])

    def test_boxed_in_stays_put(self):
        grid, chaser = _make_board(
            3, 3, chaser_at=(1, 1), walls=((0, 1), (1, 0), (1, 2), (2, 1)),
        )
        heading = chaser.last_move
        move = chaser.get_next_move(grid)
        assert move.direction == Direction.NONE
        assert chaser.last_move == heading

    def test_turn_threshold(self):
        """A draw above 100 - turn_percentage turns; anything at or below keeps heading."""
        grid, chaser = _make_board(20, 20, chaser_at=(10, 10))
        chaser._turn_source = _ScriptedSource([85, 86])
        chaser._direction_source = _ScriptedSource([0])
        chaser.last_move = Direction.RIGHT

        assert chaser.get_next_move(grid).direction == Direction.RIGHT
        assert chaser.get_next_move(grid).direction == Direction.UP
        assert chaser.last_move == Direction.UP

    def test_default_turn_rate(self):
        # A redraw lands back on the old heading a quarter of the time
        grid, chaser = _make_board(20, 20, chaser_at=(10, 10), seed=11)
        share = _share_leaving(chaser, grid, Direction.RIGHT, steps=4000)
        assert share == pytest.approx(0.15 * 3 / 4, abs=0.03)

    def test_always_turning(self):
        grid, chaser = _make_board(20, 20, chaser_at=(10, 10), seed=12, turn_percentage=100)
        share = _share_leaving(chaser, grid, Direction.RIGHT, steps=4000)
        assert share == pytest.approx(3 / 4, abs=0.04)

"""Game orchestration: setup, chaser spawning, and the per-tick driver."""

from __future__ import annotations

import logging
import random
from typing import Iterable

from config import GRID_COLS, GRID_ROWS, INITIAL_CHASERS, PURSUIT_DEPTH, TURN_PERCENTAGE, WALL_PERCENTAGE
from engine.chaser import Chaser
from engine.grid import Grid
from engine.score import ScoreKeeper
from models.board import Move
from models.events import GameNotification

logger = logging.getLogger(__name__)

# Upper bound for seeds handed to the per-component generators
_SEED_BOUND = 2**32 - 1


class Game:
    """Everything one running game owns.

    ``rng`` is the master generator; every chaser gets its own generator
    seeded from it so a whole game replays identically from one seed.
    """

    def __init__(
        self,
        grid: Grid,
        keeper: ScoreKeeper,
        rng: random.Random,
        chaser_interval: int = 1,
        pursuit_depth: int = PURSUIT_DEPTH,
        turn_percentage: int = TURN_PERCENTAGE,
    ) -> None:
        if chaser_interval < 1:
            raise ValueError(f"Chaser interval must be positive, got {chaser_interval}")
        self.grid = grid
        self.keeper = keeper
        self.rng = rng
        self.chasers: list[Chaser] = []
        self.tick = 0
        self.chaser_interval = chaser_interval
        self.pursuit_depth = pursuit_depth
        self.turn_percentage = turn_percentage

    @property
    def hunter_id(self) -> int:
        return self.grid.hunter_id


def create_game(
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
    wall_percentage: int = WALL_PERCENTAGE,
    seed: int | None = None,
    chaser_interval: int = 1,
    initial_chasers: int = INITIAL_CHASERS,
    pursuit_depth: int = PURSUIT_DEPTH,
    turn_percentage: int = TURN_PERCENTAGE,
) -> Game:
    """Set up a new game: board, hunter, walls, and the starting chasers.

    The hunter is inserted before walls are drawn and walls never touch row 0
    or column 0, so the hunter's start cell is always open. The starting
    positions are drawn before returning so chasers see the hunter on the
    first tick.

    Args:
        rows: Board height.
        cols: Board width.
        wall_percentage: Chance (0-100) each non-border cell is a wall.
        seed: Master seed; None draws a fresh one.
        chaser_interval: Chasers act on every Nth tick.
        initial_chasers: Chasers spawned before the first tick.
        pursuit_depth: BFS depth for every chaser.
        turn_percentage: Wandering turn chance for every chaser.

    Returns:
        A Game ready for its first tick.
    """
    rng = random.Random(seed)
    keeper = ScoreKeeper()
    grid = Grid(rows, cols, keeper, rng=random.Random(rng.randint(0, _SEED_BOUND)))
    game = Game(
        grid,
        keeper,
        rng,
        chaser_interval=chaser_interval,
        pursuit_depth=pursuit_depth,
        turn_percentage=turn_percentage,
    )

    grid.insert_entity()
    grid.generate_walls(wall_percentage, rng=random.Random(rng.randint(0, _SEED_BOUND)))
    add_chasers(game, initial_chasers)
    grid.render()

    logger.info(
        "Created %dx%d game (walls=%d%%, chasers=%d, seed=%s)",
        rows, cols, wall_percentage, initial_chasers, seed,
    )
    return game


def add_chasers(game: Game, count: int, at: tuple[int, int] | None = None) -> list[int]:
    """Spawn ``count`` chasers and bind an AI to each.

    Args:
        game: Current game (mutated in place).
        count: How many chasers to add.
        at: Optional (row, col) spawn cell for every new chaser.

    Returns:
        The new chasers' entity ids.
    """
    added: list[int] = []
    for _ in range(count):
        entity_id = game.grid.insert_entity(at=at)
        chaser = Chaser(
            entity_id,
            rng=random.Random(game.rng.randint(0, _SEED_BOUND)),
            depth=game.pursuit_depth,
            turn_percentage=game.turn_percentage,
        )
        game.chasers.append(chaser)
        game.keeper.notify(GameNotification.CHASER_ADDED)
        added.append(entity_id)

    if added:
        logger.info("Added %d chaser(s): %s", len(added), added)
    return added


def collect_chaser_moves(game: Game) -> list[Move]:
    """Ask every chaser for its move, in insertion order."""
    return [chaser.get_next_move(game.grid) for chaser in game.chasers]


def run_tick(
    game: Game,
    hunter_moves: Iterable[Move] = (),
    chasers_requested: int = 0,
) -> list[list[str]]:
    """Advance the game by one tick.

    Chasers decide first (on ticks that are a multiple of the chaser
    interval), the hunter's moves are appended after theirs, the batch is
    applied to the grid, and requested chasers are spawned last so they act
    from the next tick on.

    Args:
        game: Current game (mutated in place).
        hunter_moves: Decoded hunter moves for this tick.
        chasers_requested: Chasers to add after the batch.

    Returns:
        The board after the batch, ready to display.
    """
    moves: list[Move] = []
    if game.tick % game.chaser_interval == 0:
        moves.extend(collect_chaser_moves(game))
    moves.extend(hunter_moves)

    cells = game.grid.apply_moves(moves)
    game.tick += 1

    if chasers_requested > 0:
        add_chasers(game, chasers_requested)

    return cells

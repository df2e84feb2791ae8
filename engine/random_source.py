"""Bounded random integer draws for Hunter Chase."""

import random

from models.board import CARDINAL_DIRECTIONS, Direction


class RandomSource:
    """Uniform integer draws in the inclusive range [lower, upper].

    Wraps an explicitly owned ``random.Random`` so callers can seed it for
    reproducible games and tests. Several sources may share one generator.
    """

    def __init__(self, lower: int, upper: int, rng: random.Random | None = None) -> None:
        if lower > upper:
            raise ValueError(f"Invalid range [{lower}, {upper}]")
        self.lower = lower
        self.upper = upper
        self._rng = rng or random.Random()

    def get_random_int(self) -> int:
        """Draw the next integer in [lower, upper]."""
        return self._rng.randint(self.lower, self.upper)


def random_direction(source: RandomSource) -> Direction:
    """Pick a cardinal direction using a source over [0, 3]."""
    return CARDINAL_DIRECTIONS[source.get_random_int()]

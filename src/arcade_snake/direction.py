"""Compass directions used for snake, bullet, and enemy movement."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    Screen coordinates: ``x`` grows to the right, ``y`` grows downwards.
    """

    RIGHT = (1, 0)
    LEFT = (-1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def vector(self) -> tuple[int, int]:
        """Unit displacement for one step in this direction."""
        return self.value

    def opposite(self) -> Direction:
        """Return the direction pointing the other way."""
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.RIGHT: Direction.LEFT,
    Direction.LEFT: Direction.RIGHT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

ALL_DIRECTIONS: list[Direction] = list(Direction)


def random_direction(rng: np.random.Generator) -> Direction:
    """Pick a uniformly random direction."""
    return ALL_DIRECTIONS[int(rng.integers(len(ALL_DIRECTIONS)))]

"""Timed trap spawning."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from arcade_snake.grid import Grid, Position

logger = logging.getLogger(__name__)


class TrapSpawner:
    """Emits a random trap position every :attr:`cooldown` seconds.

    The owning game state shortens :attr:`cooldown` as the session goes
    on; the spawner never changes it itself.
    """

    def __init__(
        self,
        grid: Grid,
        cooldown: float = 5.0,
        rng: np.random.Generator | None = None,
    ) -> None:
        if cooldown <= 0:
            raise ValueError("cooldown must be positive.")
        self.grid = grid
        self.base_cooldown = cooldown
        self.cooldown = cooldown
        self.timer = 0.0
        self.rng = rng if rng is not None else np.random.default_rng()

    def reset(self) -> None:
        """Restore the base cooldown and an expired timer."""
        self.cooldown = self.base_cooldown
        self.timer = 0.0

    def update(self, elapsed_seconds: float) -> Position | None:
        """Advance the timer; returns a new trap position when one is due."""
        self.timer -= elapsed_seconds
        if self.timer >= 0.0:
            return None
        self.timer += self.cooldown
        position = self.grid.random_position(self.rng)
        logger.debug("Trap due at %s.", position)
        return position

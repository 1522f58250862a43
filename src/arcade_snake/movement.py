"""Timed movement strategies driving bullets and enemies.

A :class:`Movement` is a small tagged variant. ``NONE`` never moves,
``STATIC`` steps in a fixed direction, and ``RANDOM`` re-rolls its
direction on every step. All moving variants share one countdown timer
that replenishes by adding the cooldown, so overshoot from long frames
carries forward into the next interval.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

import numpy as np

from arcade_snake.direction import Direction, random_direction


class MovementKind(enum.Enum):
    """Which movement behaviour a :class:`Movement` carries."""

    NONE = "none"
    STATIC = "static"
    RANDOM = "random"


@dataclass
class Movement:
    """Per-entity movement state.

    Use the :meth:`none`, :meth:`static`, and :meth:`random` constructors
    rather than building instances by hand.
    """

    kind: MovementKind = MovementKind.NONE
    direction: Direction = Direction.RIGHT
    cooldown: float = 0.0
    timer: float = 0.0
    rng: np.random.Generator | None = field(default=None, repr=False)

    @classmethod
    def none(cls) -> Movement:
        return cls()

    @classmethod
    def static(cls, direction: Direction, cooldown: float) -> Movement:
        return cls(MovementKind.STATIC, direction, cooldown)

    @classmethod
    def random(
        cls,
        direction: Direction,
        cooldown: float,
        rng: np.random.Generator | None = None,
    ) -> Movement:
        return cls(
            MovementKind.RANDOM, direction, cooldown,
            rng=rng if rng is not None else np.random.default_rng(),
        )

    def apply(self, elapsed_seconds: float) -> tuple[int, int] | None:
        """Advance the timer and return a displacement if a step is due."""
        if self.kind is MovementKind.NONE:
            return None

        self.timer -= elapsed_seconds
        if self.timer >= 0.0:
            return None
        self.timer += self.cooldown

        if self.kind is MovementKind.RANDOM:
            self.direction = random_direction(self.rng)
        return self.direction.vector

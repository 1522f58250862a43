"""Positioned grid objects: food, bullets, traps, and the enemy."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from arcade_snake.movement import Movement

if TYPE_CHECKING:
    import numpy as np

    from arcade_snake.direction import Direction
    from arcade_snake.grid import Position

BULLET_MOVE_COOLDOWN = 0.07
ENEMY_MOVE_COOLDOWN = 0.3


class EntityKind(enum.Enum):
    """Game role of an entity; the front-end picks colours from it."""

    FOOD = "food"
    BULLET = "bullet"
    TRAP = "trap"
    ENEMY = "enemy"


@dataclass
class Entity:
    """A single-cell object optionally driven by a :class:`Movement`.

    Entities never check the grid bounds themselves; what leaving the
    grid means is up to the owning game state.
    """

    position: Position
    kind: EntityKind
    movement: Movement = field(default_factory=Movement.none)

    @classmethod
    def food(cls, position: Position) -> Entity:
        return cls(position, EntityKind.FOOD)

    @classmethod
    def trap(cls, position: Position) -> Entity:
        return cls(position, EntityKind.TRAP)

    @classmethod
    def bullet(
        cls,
        position: Position,
        direction: Direction,
        cooldown: float = BULLET_MOVE_COOLDOWN,
    ) -> Entity:
        return cls(
            position, EntityKind.BULLET, Movement.static(direction, cooldown),
        )

    @classmethod
    def enemy(
        cls,
        position: Position,
        direction: Direction,
        cooldown: float = ENEMY_MOVE_COOLDOWN,
        rng: np.random.Generator | None = None,
    ) -> Entity:
        return cls(
            position, EntityKind.ENEMY,
            Movement.random(direction, cooldown, rng=rng),
        )

    def update(self, elapsed_seconds: float) -> None:
        """Move by whatever displacement the movement yields this tick."""
        step = self.movement.apply(elapsed_seconds)
        if step is not None:
            dx, dy = step
            x, y = self.position
            self.position = (x + dx, y + dy)

    def to_dict(self) -> dict:
        """Serialize entity state to a dictionary."""
        return {
            "kind": self.kind.value,
            "position": list(self.position),
            "movement": self.movement.kind.value,
        }

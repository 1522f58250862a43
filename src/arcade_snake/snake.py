"""Snake representation, movement timing, and ammo."""

from __future__ import annotations

from arcade_snake.direction import Direction
from arcade_snake.grid import Position

SNAKE_MOVE_COOLDOWN = 0.1


class Snake:
    """A snake represented as an ordered list of ``(x, y)`` body segments.

    The tail is ``positions[0]``; the head is ``positions[-1]``. Moving
    appends a new head and never drops the tail on its own, the owner
    calls :meth:`trim_tail` when the snake did not eat.
    """

    def __init__(
        self,
        position: Position,
        max_ammo: int = 5,
        direction: Direction = Direction.RIGHT,
        move_cooldown: float = SNAKE_MOVE_COOLDOWN,
    ) -> None:
        if max_ammo < 0:
            raise ValueError("max_ammo must be non-negative.")
        self.positions: list[Position] = [position]
        self.direction = direction
        self.next_direction = direction
        self.move_cooldown = move_cooldown
        self.move_timer = 0.0
        self.ammo = 0
        self.max_ammo = max_ammo

    def __len__(self) -> int:
        return len(self.positions)

    @property
    def head(self) -> Position:
        """Return the head coordinate."""
        assert self.positions, "Snake must have a head."
        return self.positions[-1]

    def try_set_direction(self, direction: Direction) -> None:
        """Buffer a turn for the next move, ignoring 180° reversals."""
        if direction != self.direction.opposite():
            self.next_direction = direction

    def position_ahead(self) -> Position:
        """The cell one step past the head in the current direction."""
        x, y = self.head
        dx, dy = self.direction.vector
        return x + dx, y + dy

    def update(self, elapsed_seconds: float) -> bool:
        """Advance the move timer; returns True if the snake stepped."""
        self.move_timer -= elapsed_seconds
        if self.move_timer >= 0.0:
            return False
        self.move_timer += self.move_cooldown
        self.direction = self.next_direction
        self.positions.append(self.position_ahead())
        return True

    def trim_tail(self) -> Position:
        """Drop and return the oldest body segment."""
        assert len(self.positions) > 1, "Cannot trim a snake's only segment."
        return self.positions.pop(0)

    def self_collision(self) -> bool:
        """Check whether the head overlaps any other body segment."""
        return self.head in self.positions[:-1]

    def try_shoot(self) -> tuple[Position, Direction] | None:
        """Spend one ammo and return where a bullet should spawn.

        Returns ``None`` when the snake is out of ammo.
        """
        if self.ammo <= 0:
            return None
        self.ammo -= 1
        return self.position_ahead(), self.direction

    def gain_ammo(self, amount: int) -> None:
        """Add ammo, saturating at :attr:`max_ammo`."""
        self.ammo = min(self.ammo + amount, self.max_ammo)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.positions],
            "direction": self.direction.name.lower(),
            "ammo": self.ammo,
            "max_ammo": self.max_ammo,
        }

"""Session state machine composing the snake, entities, and trap spawner."""

from __future__ import annotations

import enum
import logging

import numpy as np

from arcade_snake.config import GameConfig
from arcade_snake.direction import Direction
from arcade_snake.entity import Entity
from arcade_snake.grid import CellType, Grid, Position
from arcade_snake.snake import Snake
from arcade_snake.traps import TrapSpawner

logger = logging.getLogger(__name__)


class Key(enum.Enum):
    """Discrete inputs the front-end forwards to the game."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    FIRE = "fire"
    CONFIRM = "confirm"


class Phase(enum.Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


class Notice(enum.Enum):
    """Non-fatal feedback returned from :meth:`GameState.handle_key`."""

    NO_AMMO = "no_ammo"
    RESTARTED = "restarted"


_KEY_DIRECTIONS: dict[Key, Direction] = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


class GameState:
    """One play session, advanced by :meth:`update` once per frame.

    The state owns every entity in the session. The front-end feeds it
    elapsed time and key presses and reads positions back through the
    accessor properties, :meth:`get_state`, or :meth:`to_array`.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        cfg = config or GameConfig()
        self.config = cfg
        self.rng = rng if rng is not None else np.random.default_rng(cfg.seed)
        self.grid = Grid(width=cfg.grid_width, height=cfg.grid_height)
        self.trap_spawner = TrapSpawner(
            self.grid, cooldown=cfg.trap_cooldown, rng=self.rng,
        )

        self.bullet: Entity | None = None
        self.traps: list[Entity] = []
        self.enemy: Entity | None = None
        self.reset()

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Start a fresh session, discarding every entity."""
        cfg = self.config
        self.playing = True
        self.snake = Snake(
            cfg.snake_start, cfg.max_ammo,
            move_cooldown=cfg.snake_move_cooldown,
        )
        self.food = Entity.food(self.grid.random_position(self.rng))
        self.bullet = None
        self.traps = []
        self.enemy = Entity.enemy(
            cfg.enemy_start, Direction.DOWN,
            cooldown=cfg.enemy_move_cooldown, rng=self.rng,
        )
        self.trap_spawner.reset()
        self.total_elapsed_seconds = 0.0

    def update(self, dt: float) -> None:
        """Advance the session by *dt* seconds."""
        if not self.playing:
            return

        self._ramp_difficulty(dt)
        self.total_elapsed_seconds += dt

        if self.enemy is not None:
            self.enemy.update(dt)

        if self.snake.update(dt):
            self._after_snake_move()

        if self.bullet is not None:
            self._update_bullet(dt)

        trap_position = self.trap_spawner.update(dt)
        if trap_position is not None:
            self.traps.append(Entity.trap(trap_position))
            logger.debug("Trap spawned at %s.", trap_position)

    def handle_key(self, key: Key) -> Notice | None:
        """Apply a key press; returns a notice for the player, if any."""
        if not self.playing:
            if key is Key.CONFIRM:
                logger.info("Restarting session.")
                self.reset()
                return Notice.RESTARTED
            return None

        if key in _KEY_DIRECTIONS:
            self.snake.try_set_direction(_KEY_DIRECTIONS[key])
        elif key is Key.FIRE:
            shot = self.snake.try_shoot()
            if shot is None:
                logger.info("No ammo.")
                return Notice.NO_AMMO
            position, direction = shot
            self.bullet = Entity.bullet(
                position, direction, cooldown=self.config.bullet_move_cooldown,
            )
        return None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def phase(self) -> Phase:
        return Phase.PLAYING if self.playing else Phase.GAME_OVER

    @property
    def snake_alive(self) -> bool:
        return self.playing

    @property
    def snake_positions(self) -> list[Position]:
        return list(self.snake.positions)

    @property
    def food_position(self) -> Position:
        return self.food.position

    @property
    def bullet_position(self) -> Position | None:
        return self.bullet.position if self.bullet is not None else None

    @property
    def trap_positions(self) -> list[Position]:
        return [trap.position for trap in self.traps]

    @property
    def enemy_position(self) -> Position | None:
        return self.enemy.position if self.enemy is not None else None

    @property
    def ammo(self) -> int:
        return self.snake.ammo

    @property
    def max_ammo(self) -> int:
        return self.snake.max_ammo

    @property
    def grid_size(self) -> tuple[int, int]:
        return self.grid.size

    @property
    def trap_cooldown(self) -> float:
        return self.trap_spawner.cooldown

    def get_state(self) -> dict:
        """Return the full, serializable session state."""
        return {
            "phase": self.phase.value,
            "elapsed_seconds": self.total_elapsed_seconds,
            "trap_cooldown": self.trap_spawner.cooldown,
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict(),
            "food": self.food.to_dict(),
            "bullet": self.bullet.to_dict() if self.bullet else None,
            "traps": [trap.to_dict() for trap in self.traps],
            "enemy": self.enemy.to_dict() if self.enemy else None,
        }

    def to_array(self) -> np.ndarray:
        """Render in-grid entities as a ``(height, width)`` CellType array.

        Later layers overwrite earlier ones: food, traps, enemy, bullet,
        then the snake on top.
        """
        cells = self.grid.empty_cells()
        self.grid.paint(cells, [self.food.position], CellType.FOOD)
        self.grid.paint(cells, self.trap_positions, CellType.TRAP)
        if self.enemy is not None:
            self.grid.paint(cells, [self.enemy.position], CellType.ENEMY)
        if self.bullet is not None:
            self.grid.paint(cells, [self.bullet.position], CellType.BULLET)
        self.grid.paint(cells, self.snake.positions, CellType.SNAKE)
        return cells

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _ramp_difficulty(self, dt: float) -> None:
        """Shorten the trap cooldown when this tick crosses a threshold."""
        cfg = self.config
        before = self.total_elapsed_seconds
        after = before + dt
        for threshold, cooldown in (
            (cfg.medium_threshold, cfg.medium_trap_cooldown),
            (cfg.fast_threshold, cfg.fast_trap_cooldown),
        ):
            if before < threshold <= after:
                self.trap_spawner.cooldown = cooldown
                logger.info(
                    "Difficulty up at %.1fs: traps every %.2fs.",
                    threshold, cooldown,
                )

    def _after_snake_move(self) -> None:
        """Resolve collisions, eating, and tail trimming for a new head."""
        head = self.snake.head
        # Self-collision must see the body before the tail is trimmed.
        if (
            not self.grid.in_bounds(head)
            or self.snake.self_collision()
            or any(trap.position == head for trap in self.traps)
            or (self.enemy is not None and self.enemy.position == head)
        ):
            self._game_over()

        if head == self.food.position:
            self._relocate_food()
            self.snake.gain_ammo(self.config.food_ammo)
            logger.debug("Food eaten; ammo now %d.", self.snake.ammo)
        else:
            self.snake.trim_tail()

    def _update_bullet(self, dt: float) -> None:
        bullet = self.bullet
        bullet.update(dt)
        if bullet.position == self.food.position:
            self._relocate_food()
        remaining = [t for t in self.traps if t.position != bullet.position]
        if len(remaining) != len(self.traps):
            logger.debug("Bullet destroyed trap at %s.", bullet.position)
            self.traps = remaining

    def _relocate_food(self) -> None:
        self.food.position = self.grid.random_position(
            self.rng, exclude=self.food.position,
        )

    def _game_over(self) -> None:
        """Mark the session lost and clear the board of traps."""
        self.traps.clear()
        self.playing = False
        logger.info(
            "Game over after %.1fs with length %d.",
            self.total_elapsed_seconds, len(self.snake),
        )

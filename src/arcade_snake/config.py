"""Game configuration for arcade snake sessions."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Tunable constants for one game session.

    Supports JSON serialization so a front-end can load a saved setup.
    """

    # Grid
    grid_width: int = 32
    grid_height: int = 32

    # Ammo
    max_ammo: int = 5
    food_ammo: int = 3

    # Movement cooldowns (seconds per cell)
    snake_move_cooldown: float = 0.1
    bullet_move_cooldown: float = 0.07
    enemy_move_cooldown: float = 0.3

    # Trap spawning and the two-step difficulty ramp
    trap_cooldown: float = 5.0
    medium_threshold: float = 30.0
    medium_trap_cooldown: float = 2.0
    fast_threshold: float = 60.0
    fast_trap_cooldown: float = 0.5

    # Randomness
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.grid_width < 4 or self.grid_height < 4:
            raise ValueError("grid_width and grid_height must each be at least 4.")
        if self.max_ammo < 0 or self.food_ammo < 0:
            raise ValueError("max_ammo and food_ammo must be non-negative.")
        cooldowns = (
            self.snake_move_cooldown,
            self.bullet_move_cooldown,
            self.enemy_move_cooldown,
            self.trap_cooldown,
            self.medium_trap_cooldown,
            self.fast_trap_cooldown,
        )
        if any(c <= 0 for c in cooldowns):
            raise ValueError("All cooldowns must be positive.")
        if not 0 < self.medium_threshold < self.fast_threshold:
            raise ValueError(
                "Difficulty thresholds must satisfy 0 < medium < fast."
            )
        if not (
            self.trap_cooldown >= self.medium_trap_cooldown
            >= self.fast_trap_cooldown
        ):
            raise ValueError("Trap cooldowns must not grow as difficulty rises.")

    @property
    def snake_start(self) -> tuple[int, int]:
        """Left edge, vertically centred."""
        return 0, self.grid_height // 2

    @property
    def enemy_start(self) -> tuple[int, int]:
        return self.grid_width // 2, self.grid_height // 2

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls(**json.loads(Path(path).read_text()))

"""Headless throughput benchmark for the simulation core."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from arcade_snake.config import GameConfig
from arcade_snake.state import GameState, Key

logger = logging.getLogger(__name__)

_PLAY_KEYS: list[Key] = [Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT, Key.FIRE]


@dataclass
class BenchmarkResult:
    """Results from a throughput benchmark run."""

    total_games: int
    total_ticks: int
    wall_time_seconds: float
    games_per_second: float
    ticks_per_second: float

    def summary(self) -> str:
        return (
            f"Benchmark: {self.total_games} games, {self.total_ticks} ticks in "
            f"{self.wall_time_seconds:.2f}s | "
            f"{self.games_per_second:.1f} games/s, "
            f"{self.ticks_per_second:.1f} ticks/s"
        )


def benchmark_throughput(
    *,
    num_games: int = 100,
    max_ticks: int = 2_000,
    dt: float = 1 / 60,
    key_prob: float = 0.1,
    config: GameConfig | None = None,
    seed: int = 42,
) -> BenchmarkResult:
    """Measure raw simulation throughput.

    Plays *num_games* sessions with random key presses, each ending at
    game over or after *max_ticks* ticks of *dt* seconds.
    """
    if num_games < 1:
        raise ValueError("num_games must be at least 1.")
    rng = np.random.default_rng(seed)
    state = GameState(config, rng=rng)

    total_ticks = 0
    start = time.perf_counter()

    for _ in range(num_games):
        state.reset()
        for _ in range(max_ticks):
            if rng.random() < key_prob:
                state.handle_key(_PLAY_KEYS[int(rng.integers(len(_PLAY_KEYS)))])
            state.update(dt)
            total_ticks += 1
            if not state.playing:
                break

    elapsed = time.perf_counter() - start
    result = BenchmarkResult(
        total_games=num_games,
        total_ticks=total_ticks,
        wall_time_seconds=elapsed,
        games_per_second=num_games / max(elapsed, 1e-9),
        ticks_per_second=total_ticks / max(elapsed, 1e-9),
    )
    logger.info(result.summary())
    return result

"""Bounded grid geometry and cell codes for the arcade snake game."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterable

Position = tuple[int, int]


class CellType(enum.IntEnum):
    """Integer codes stored in rendered grid arrays."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2
    BULLET = 3
    TRAP = 4
    ENEMY = 5


class Grid:
    """Fixed-size game grid without wrap-around.

    Positions use ``(x, y)`` ordering; rendered arrays are indexed
    ``[y, x]`` consistent with NumPy row-major layout.
    """

    def __init__(self, width: int = 32, height: int = 32) -> None:
        if width < 4 or height < 4:
            raise ValueError("Grid dimensions must be at least 4×4.")
        self.width = width
        self.height = height

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def in_bounds(self, position: Position) -> bool:
        """Check whether a position lies within the grid."""
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def random_position(
        self,
        rng: np.random.Generator,
        exclude: Position | None = None,
    ) -> Position:
        """Sample a uniformly random cell.

        When *exclude* is an in-grid cell it is never returned.
        """
        cells = self.width * self.height
        if exclude is not None and self.in_bounds(exclude):
            skipped = exclude[1] * self.width + exclude[0]
            index = int(rng.integers(cells - 1))
            if index >= skipped:
                index += 1
        else:
            index = int(rng.integers(cells))
        return index % self.width, index // self.width

    def paint(
        self,
        cells: np.ndarray,
        positions: Iterable[Position],
        cell_type: CellType,
    ) -> None:
        """Write *cell_type* into *cells* at every in-grid position."""
        for pos in positions:
            if self.in_bounds(pos):
                cells[pos[1], pos[0]] = cell_type

    def empty_cells(self) -> np.ndarray:
        """Return a fresh all-empty ``(height, width)`` cell array."""
        return np.zeros((self.height, self.width), dtype=np.int8)

    def to_dict(self) -> dict:
        """Serialize grid geometry to a dictionary."""
        return {"width": self.width, "height": self.height}

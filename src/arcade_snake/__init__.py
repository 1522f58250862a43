"""Arcade Snake — simulation core."""

from arcade_snake.config import GameConfig
from arcade_snake.direction import Direction
from arcade_snake.entity import Entity, EntityKind
from arcade_snake.grid import CellType, Grid
from arcade_snake.movement import Movement, MovementKind
from arcade_snake.snake import Snake
from arcade_snake.state import GameState, Key, Notice, Phase
from arcade_snake.traps import TrapSpawner

__all__ = [
    "CellType",
    "Direction",
    "Entity",
    "EntityKind",
    "GameConfig",
    "GameState",
    "Grid",
    "Key",
    "Movement",
    "MovementKind",
    "Notice",
    "Phase",
    "Snake",
    "TrapSpawner",
]

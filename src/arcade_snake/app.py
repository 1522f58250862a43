"""Pygame front-end: window, frame loop, and drawing."""

from __future__ import annotations

import logging

import pygame

from arcade_snake.config import GameConfig
from arcade_snake.entity import EntityKind
from arcade_snake.state import GameState, Key

logger = logging.getLogger(__name__)

WINDOW_SIZE = (600, 600)
CELL_SIZE = 16
FPS = 60

COLORS: dict[str, tuple[int, int, int]] = {
    "background": (25, 25, 25),
    "grid": (76, 0, 178),
    "snake": (255, 255, 0),
    "dead_snake": (255, 0, 0),
    EntityKind.FOOD.value: (76, 255, 76),
    EntityKind.BULLET.value: (204, 25, 25),
    EntityKind.TRAP.value: (204, 25, 204),
    EntityKind.ENEMY.value: (102, 51, 76),
    "ammo_slot": (128, 128, 128),
    "ammo": (0, 0, 0),
}

KEY_BINDINGS: dict[int, Key] = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_SPACE: Key.FIRE,
    pygame.K_RETURN: Key.CONFIRM,
}


def key_for(pygame_key: int) -> Key | None:
    """Translate a pygame key code into a game key."""
    return KEY_BINDINGS.get(pygame_key)


def board_offset(
    surface_size: tuple[int, int], grid_size: tuple[int, int],
) -> tuple[int, int]:
    """Pixel offset that centres the board on the surface."""
    return (
        (surface_size[0] - grid_size[0] * CELL_SIZE) // 2,
        (surface_size[1] - grid_size[1] * CELL_SIZE) // 2,
    )


def _draw_cell(
    surface: pygame.Surface,
    offset: tuple[int, int],
    position: tuple[int, int],
    color: tuple[int, int, int],
) -> None:
    rect = pygame.Rect(
        offset[0] + position[0] * CELL_SIZE,
        offset[1] + position[1] * CELL_SIZE,
        CELL_SIZE,
        CELL_SIZE,
    )
    pygame.draw.rect(surface, color, rect)


def _draw_grid_lines(
    surface: pygame.Surface,
    offset: tuple[int, int],
    grid_size: tuple[int, int],
) -> None:
    width, height = grid_size
    ox, oy = offset
    for x in range(width + 1):
        px = ox + x * CELL_SIZE
        pygame.draw.line(
            surface, COLORS["grid"], (px, oy), (px, oy + height * CELL_SIZE),
        )
    for y in range(height + 1):
        py = oy + y * CELL_SIZE
        pygame.draw.line(
            surface, COLORS["grid"], (ox, py), (ox + width * CELL_SIZE, py),
        )


def _draw_ammo(surface: pygame.Surface, ammo: int, max_ammo: int) -> None:
    margin, padding, size = 4, 1, 16
    for i in range(max_ammo):
        slot = pygame.Rect(margin + i * (size + 2), margin, size, size)
        pygame.draw.rect(surface, COLORS["ammo_slot"], slot)
        if ammo > i:
            pygame.draw.rect(
                surface, COLORS["ammo"], slot.inflate(-2 * padding, -2 * padding),
            )


def draw(surface: pygame.Surface, state: GameState) -> None:
    """Render one frame of *state* onto *surface*."""
    surface.fill(COLORS["background"])
    offset = board_offset(surface.get_size(), state.grid_size)
    _draw_grid_lines(surface, offset, state.grid_size)

    snake_color = COLORS["snake"] if state.snake_alive else COLORS["dead_snake"]
    for pos in state.snake_positions:
        _draw_cell(surface, offset, pos, snake_color)

    _draw_cell(surface, offset, state.food_position, COLORS["food"])
    if state.bullet_position is not None:
        _draw_cell(surface, offset, state.bullet_position, COLORS["bullet"])
    for pos in state.trap_positions:
        _draw_cell(surface, offset, pos, COLORS["trap"])
    if state.enemy_position is not None:
        _draw_cell(surface, offset, state.enemy_position, COLORS["enemy"])

    _draw_ammo(surface, state.ammo, state.max_ammo)


def run(config: GameConfig | None = None) -> None:
    """Open a window and play until it is closed or Escape is pressed."""
    pygame.init()
    screen = pygame.display.set_mode(WINDOW_SIZE)
    pygame.display.set_caption("Arcade Snake")
    clock = pygame.time.Clock()

    state = GameState(config)
    logger.info("Session started on a %dx%d grid.", *state.grid_size)

    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                        continue
                    key = key_for(event.key)
                    if key is not None:
                        state.handle_key(key)

            dt = clock.tick(FPS) / 1000.0
            state.update(dt)

            draw(screen, state)
            pygame.display.flip()
    finally:
        pygame.quit()

"""Tests for the pygame front-end helpers."""

import pygame

from arcade_snake.app import (
    CELL_SIZE,
    COLORS,
    KEY_BINDINGS,
    WINDOW_SIZE,
    board_offset,
    draw,
    key_for,
)
from arcade_snake.config import GameConfig
from arcade_snake.state import GameState, Key


def _pixel(surface, offset, position):
    x = offset[0] + position[0] * CELL_SIZE + CELL_SIZE // 2
    y = offset[1] + position[1] * CELL_SIZE + CELL_SIZE // 2
    return tuple(surface.get_at((x, y)))[:3]


class TestKeyBindings:
    def test_arrows_and_actions(self):
        assert key_for(pygame.K_UP) is Key.UP
        assert key_for(pygame.K_LEFT) is Key.LEFT
        assert key_for(pygame.K_SPACE) is Key.FIRE
        assert key_for(pygame.K_RETURN) is Key.CONFIRM

    def test_unbound_key(self):
        assert key_for(pygame.K_a) is None

    def test_every_game_key_bound(self):
        assert set(KEY_BINDINGS.values()) == set(Key)


class TestDraw:
    def test_board_centred(self):
        assert board_offset((600, 600), (32, 32)) == (44, 44)

    def test_entities_drawn(self):
        state = GameState(GameConfig(seed=0))
        state.food.position = (20, 0)
        surface = pygame.Surface(WINDOW_SIZE)
        draw(surface, state)
        offset = board_offset(WINDOW_SIZE, state.grid_size)
        assert _pixel(surface, offset, (0, 16)) == COLORS["snake"]
        assert _pixel(surface, offset, (20, 0)) == COLORS["food"]
        assert _pixel(surface, offset, (16, 16)) == COLORS["enemy"]

    def test_dead_snake_colour(self):
        state = GameState(GameConfig(seed=0))
        state.playing = False
        surface = pygame.Surface(WINDOW_SIZE)
        draw(surface, state)
        offset = board_offset(WINDOW_SIZE, state.grid_size)
        assert _pixel(surface, offset, (0, 16)) == COLORS["dead_snake"]

    def test_off_grid_bullet_does_not_crash(self):
        state = GameState(GameConfig(seed=0))
        state.snake.gain_ammo(1)
        state.handle_key(Key.FIRE)
        state.bullet.position = (40, 40)
        draw(pygame.Surface(WINDOW_SIZE), state)

"""Tests for the Movement strategies."""

import pytest

from arcade_snake.direction import Direction
from arcade_snake.movement import Movement, MovementKind


class TestNoMovement:
    def test_never_moves(self):
        movement = Movement.none()
        assert movement.kind is MovementKind.NONE
        for _ in range(5):
            assert movement.apply(10.0) is None

    def test_timer_untouched(self):
        movement = Movement.none()
        movement.apply(1.0)
        assert movement.timer == 0.0


class TestStaticMovement:
    def test_fires_immediately_from_zero_timer(self):
        movement = Movement.static(Direction.RIGHT, 0.1)
        assert movement.apply(0.01) == (1, 0)

    def test_zero_elapsed_does_not_fire(self):
        movement = Movement.static(Direction.RIGHT, 0.1)
        assert movement.apply(0.0) is None

    def test_waits_for_cooldown(self):
        movement = Movement.static(Direction.UP, 0.1)
        assert movement.apply(0.05) == (0, -1)
        assert movement.apply(0.03) is None
        assert movement.apply(0.03) == (0, -1)

    def test_carry_over_not_reset(self):
        movement = Movement.static(Direction.DOWN, 0.1)
        movement.apply(0.25)
        # -0.25 + 0.1: the overshoot stays on the timer.
        assert movement.timer == pytest.approx(-0.15)
        assert movement.apply(0.0) == (0, 1)
        assert movement.timer == pytest.approx(-0.05)

    def test_at_most_one_step_per_call(self):
        movement = Movement.static(Direction.LEFT, 0.1)
        assert movement.apply(1.0) == (-1, 0)

    def test_average_rate_preserved(self):
        movement = Movement.static(Direction.RIGHT, 0.1)
        steps = sum(
            movement.apply(dt) is not None for dt in [0.03, 0.07] * 50
        )
        assert steps in (50, 51)

    def test_direction_fixed(self):
        movement = Movement.static(Direction.LEFT, 0.01)
        for _ in range(10):
            movement.apply(0.02)
        assert movement.direction == Direction.LEFT


class TestRandomMovement:
    def test_resamples_direction(self, scripted_rng):
        movement = Movement.random(
            Direction.DOWN, 0.3, rng=scripted_rng([1, 2]),
        )
        assert movement.apply(0.01) == (-1, 0)
        assert movement.direction == Direction.LEFT
        assert movement.apply(0.3) == (0, -1)
        assert movement.direction == Direction.UP

    def test_may_repeat_direction(self, scripted_rng):
        movement = Movement.random(Direction.DOWN, 0.1, rng=scripted_rng([0]))
        assert movement.apply(0.2) == (1, 0)
        assert movement.apply(0.2) == (1, 0)

    def test_no_resample_between_firings(self, scripted_rng):
        rng = scripted_rng([3])
        movement = Movement.random(Direction.RIGHT, 0.3, rng=rng)
        movement.apply(0.01)
        movement.apply(0.01)
        movement.apply(0.01)
        assert rng.calls == 1

    def test_default_rng(self):
        movement = Movement.random(Direction.RIGHT, 0.1)
        step = movement.apply(0.5)
        assert step in [d.vector for d in Direction]

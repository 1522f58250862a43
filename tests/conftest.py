"""Shared test helpers."""

import pytest


class ScriptedRng:
    """Random source that replays a fixed list of integers, cycling."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def integers(self, high):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value % high

    def random(self):
        return 0.5


@pytest.fixture
def scripted_rng():
    return ScriptedRng

"""
Pytest configuration and fixtures for colony Life tests.
"""

import matplotlib

matplotlib.use("Agg")

import pytest

from colonylife.config import Config
from colonylife.colonies import NumpyRandomSource


class ScriptedRandomSource:
    """Random source that replays fixed draws and records every request."""

    def __init__(self, draws=None):
        self.draws = list(draws or [])
        self.requests = []

    def randrange(self, n: int) -> int:
        self.requests.append(n)
        if self.draws:
            return self.draws.pop(0)
        return 0

    def random(self) -> float:
        return 0.0


@pytest.fixture
def default_config() -> Config:
    """Default configuration for tests."""
    return Config()


@pytest.fixture
def small_config() -> Config:
    """Small board for fast tests."""
    return Config(width=8, height=6, density=0.4, cell_characters=" XO")


@pytest.fixture
def scripted_rng() -> ScriptedRandomSource:
    """Random source that always draws 0 unless told otherwise."""
    return ScriptedRandomSource()


@pytest.fixture
def rng() -> NumpyRandomSource:
    """Seeded random source for stochastic tests."""
    return NumpyRandomSource(12345)


@pytest.fixture
def block_board() -> str:
    """2x2 block with a dead border."""
    return "    \n OO \n OO \n    "


@pytest.fixture
def blinker_board() -> str:
    """Horizontal blinker."""
    return "     \n     \n OOO \n     \n     "

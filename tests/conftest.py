import pytest

from melinjo_run.config import GameConfig
from melinjo_run.data_models import Obstacle, ObstacleType, Pickup
from melinjo_run.game_engine import GameEngine


class ConstantRandom:
    """RandomSource that always returns the same value."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def constant_random():
    return ConstantRandom


@pytest.fixture
def empty_engine(config):
    """An engine whose level has been cleared so tests can place entities by hand."""
    engine = GameEngine(config, rng=ConstantRandom(0.0))
    engine.state.obstacles = []
    engine.state.pickups = []
    return engine


@pytest.fixture
def rock():
    def make(x, width=40.0, height=20.0, ground_line=350.0):
        return Obstacle(x=x, y=ground_line - height, width=width, height=height,
                        kind=ObstacleType.ROCK)
    return make


@pytest.fixture
def melinjo():
    def make(x, y, size=20.0):
        return Pickup(x=x, y=y, width=size, height=size)
    return make

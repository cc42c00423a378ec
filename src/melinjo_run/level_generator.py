"""
level_generator.py: Procedural placement of obstacles and melinjo pickups along the track.
"""

import logging
import random
from typing import List, Optional, Protocol, Tuple

from .config import GameConfig
from .data_models import Obstacle, ObstacleType, Pickup

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def random(self) -> float:  # returns in [0.0, 1.0)
        ...


def make_random_source(seed: Optional[int] = None) -> RandomSource:
    """An unseeded source gives a different layout every run."""
    return random.Random(seed)


def _uniform(rng: RandomSource, bounds: Tuple[float, float]) -> float:
    low, high = bounds
    return low + rng.random() * (high - low)


def track_length(config: GameConfig) -> float:
    """Approximate distance scrolled over a full game."""
    return config.scroll_speed * config.game_duration * config.frame_rate_assumption


def generate_obstacles(config: GameConfig, rng: RandomSource) -> List[Obstacle]:
    """Rocks and water from just off the right edge to the end of the track."""
    obstacles: List[Obstacle] = []
    end_x = track_length(config) + config.screen_width
    x = float(config.screen_width)

    while x < end_x:
        kind = ObstacleType(int(rng.random() * 2))
        if kind is ObstacleType.ROCK:
            width = _uniform(rng, config.rock_width)
            height = _uniform(rng, config.rock_height)
        else:
            width = _uniform(rng, config.water_width)
            height = config.water_height

        obstacles.append(Obstacle(
            x=x,
            y=config.ground_line - height,
            width=width,
            height=height,
            kind=kind,
        ))
        x += _uniform(rng, config.obstacle_gap)

    return obstacles


def generate_pickups(config: GameConfig, rng: RandomSource) -> List[Pickup]:
    """Melinjos floating at random altitudes above the ground."""
    pickups: List[Pickup] = []
    end_x = track_length(config) + config.screen_width
    x = float(config.screen_width)

    while x < end_x:
        altitude = _uniform(rng, config.pickup_altitude)
        pickups.append(Pickup(
            x=x,
            y=config.ground_line - altitude,
            width=config.pickup_size,
            height=config.pickup_size,
        ))
        x += _uniform(rng, config.pickup_gap)

    return pickups


def generate_level(config: GameConfig, rng: RandomSource) -> Tuple[List[Obstacle], List[Pickup]]:
    obstacles = generate_obstacles(config, rng)
    pickups = generate_pickups(config, rng)
    logger.info("Generated level: %d obstacles, %d melinjos over %.0f units",
                len(obstacles), len(pickups), track_length(config))
    return obstacles, pickups

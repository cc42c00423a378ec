import random

from melinjo_run.config import GameConfig
from melinjo_run.data_models import ObstacleType
from melinjo_run.level_generator import (
    generate_level, generate_obstacles, generate_pickups, track_length,
)


def test_track_length(config):
    assert track_length(config) == 9000
    assert track_length(config) + config.screen_width == 9800


def test_obstacles_stay_within_track(config):
    obstacles = generate_obstacles(config, random.Random(7))
    assert obstacles
    assert obstacles[0].x == 800
    for o in obstacles:
        assert 800 <= o.x < 9800


def test_obstacle_gaps_and_sizes(config):
    obstacles = generate_obstacles(config, random.Random(11))
    xs = [o.x for o in obstacles]
    for a, b in zip(xs, xs[1:]):
        assert 300 <= b - a < 600

    for o in obstacles:
        assert o.y == config.ground_line - o.height
        assert not o.passed
        if o.kind is ObstacleType.ROCK:
            assert 30 <= o.width < 50
            assert 20 <= o.height < 50
        else:
            assert 60 <= o.width < 100
            assert o.height == 20


def test_both_obstacle_types_appear(config):
    kinds = {o.kind for o in generate_obstacles(config, random.Random(3))}
    assert kinds == {ObstacleType.ROCK, ObstacleType.WATER}


def test_minimum_draws_give_tightest_rock_layout(config, constant_random):
    obstacles = generate_obstacles(config, constant_random(0.0))
    assert len(obstacles) == 30
    assert obstacles[-1].x == 9500
    assert all(o.kind is ObstacleType.ROCK for o in obstacles)
    assert all((o.width, o.height) == (30, 20) for o in obstacles)


def test_midpoint_draws_give_water(config, constant_random):
    obstacles = generate_obstacles(config, constant_random(0.5))
    assert len(obstacles) == 20
    assert all(o.kind is ObstacleType.WATER for o in obstacles)
    assert all(o.width == 80 and o.y == 330 for o in obstacles)


def test_pickups_float_above_ground(config):
    pickups = generate_pickups(config, random.Random(5))
    xs = [m.x for m in pickups]
    assert xs[0] == 800
    for a, b in zip(xs, xs[1:]):
        assert 200 <= b - a < 600
    for m in pickups:
        assert 800 <= m.x < 9800
        assert (m.width, m.height) == (20, 20)
        altitude = config.ground_line - m.y
        assert 100 <= altitude < 250
        assert not m.collected


def test_pickup_count_with_minimum_gap(config, constant_random):
    pickups = generate_pickups(config, constant_random(0.0))
    assert len(pickups) == 45
    assert all(m.y == 250 for m in pickups)


def test_seeded_generation_is_reproducible(config):
    first = generate_level(config, random.Random(42))
    second = generate_level(config, random.Random(42))
    assert first == second


def test_shorter_game_gives_shorter_track(constant_random):
    cfg = GameConfig(game_duration=1.0)
    obstacles = generate_obstacles(cfg, constant_random(0.0))
    # 300 units of track end at x=1100, so the second rock falls outside.
    assert [o.x for o in obstacles] == [800]

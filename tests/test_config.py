import pytest

from melinjo_run.config import GameConfig
from melinjo_run.exceptions import ConfigError


def test_defaults_geometry(config):
    assert config.ground_line == 350.0
    assert config.player_ground_y == 310.0
    assert config.seed is None
    assert config.scale_to_delta_time is False


def test_overrides_replace_known_options():
    cfg = GameConfig.from_overrides({"game_duration": 10, "scroll_speed": 3.0})
    assert cfg.game_duration == 10
    assert cfg.scroll_speed == 3.0
    assert cfg.gravity == GameConfig().gravity


def test_overrides_ignore_none_values():
    cfg = GameConfig.from_overrides({"seed": None, "fps": None})
    assert cfg == GameConfig()


def test_unknown_option_rejected():
    with pytest.raises(ConfigError, match="gravitee"):
        GameConfig.from_overrides({"gravitee": 1.0})


@pytest.mark.parametrize("overrides", [
    {"game_duration": 0},
    {"scroll_speed": -1},
    {"jump_force": 15},
    {"energy_jump_cost": 150},
    {"ground_height": 400},
    {"obstacle_gap": (600, 300)},
    {"pickup_gap": (0, 100)},
])
def test_invalid_values_rejected(overrides):
    with pytest.raises(ConfigError):
        GameConfig.from_overrides(overrides)


def test_range_options_coerced_to_float_pairs():
    cfg = GameConfig.from_overrides({"rock_width": [10, 20]})
    assert cfg.rock_width == (10.0, 20.0)


def test_range_option_must_be_pair():
    with pytest.raises(ConfigError):
        GameConfig.from_overrides({"rock_width": 5})


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        GameConfig(fps=0)


def test_player_must_fit_above_ground():
    with pytest.raises(ConfigError, match="player_height"):
        GameConfig(player_height=350)
    assert GameConfig(player_height=349).player_ground_y == 1.0


@pytest.mark.parametrize("overrides", [
    {"game_duration": "30"},
    {"gravity": "heavy"},
    {"scroll_speed": True},
])
def test_non_numeric_values_rejected(overrides):
    with pytest.raises(ConfigError, match="must be a number"):
        GameConfig.from_overrides(overrides)

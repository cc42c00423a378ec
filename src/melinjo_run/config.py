"""
config.py: The game's configuration surface.

Every tunable number lives on GameConfig, with defaults taken from constants.py.
Hosts build a config either directly or through GameConfig.from_overrides(),
which only accepts recognized option names.
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional, Tuple

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, GROUND_HEIGHT,
    PLAYER_X, PLAYER_WIDTH, PLAYER_HEIGHT,
    GRAVITY, JUMP_FORCE, FLYING_FORCE_MULTIPLIER,
    ENERGY_MAX, ENERGY_JUMP_COST, ENERGY_REFILL_RATE, ENERGY_PICKUP_BONUS,
    GAME_DURATION, SCROLL_SPEED, FRAME_RATE_ASSUMPTION,
    OBSTACLE_GAP_RANGE, ROCK_WIDTH_RANGE, ROCK_HEIGHT_RANGE,
    WATER_WIDTH_RANGE, WATER_HEIGHT,
    PICKUP_GAP_RANGE, PICKUP_SIZE, PICKUP_ALTITUDE_RANGE,
    RENDER_FPS, MAX_FRAME_DT,
)
from .exceptions import ConfigError

Range = Tuple[float, float]


@dataclass(frozen=True)
class GameConfig:
    """Immutable set of recognized game options."""

    # Viewport
    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    ground_height: int = GROUND_HEIGHT

    # Player
    player_x: float = PLAYER_X
    player_width: float = PLAYER_WIDTH
    player_height: float = PLAYER_HEIGHT

    # Physics
    gravity: float = GRAVITY
    jump_force: float = JUMP_FORCE
    flying_multiplier: float = FLYING_FORCE_MULTIPLIER

    # Energy
    energy_max: float = ENERGY_MAX
    energy_jump_cost: float = ENERGY_JUMP_COST
    energy_refill_rate: float = ENERGY_REFILL_RATE
    energy_pickup_bonus: float = ENERGY_PICKUP_BONUS

    # Timing
    game_duration: float = GAME_DURATION
    scroll_speed: float = SCROLL_SPEED
    frame_rate_assumption: int = FRAME_RATE_ASSUMPTION
    scale_to_delta_time: bool = False

    # Level generation
    obstacle_gap: Range = OBSTACLE_GAP_RANGE
    rock_width: Range = ROCK_WIDTH_RANGE
    rock_height: Range = ROCK_HEIGHT_RANGE
    water_width: Range = WATER_WIDTH_RANGE
    water_height: float = WATER_HEIGHT
    pickup_gap: Range = PICKUP_GAP_RANGE
    pickup_size: float = PICKUP_SIZE
    pickup_altitude: Range = PICKUP_ALTITUDE_RANGE
    seed: Optional[int] = None
    prune_offscreen: bool = False

    # Client loop
    fps: int = RENDER_FPS
    max_frame_dt: float = MAX_FRAME_DT

    def __post_init__(self):
        positive = (
            "screen_width", "screen_height", "player_width", "player_height",
            "energy_max", "game_duration", "scroll_speed",
            "frame_rate_assumption", "water_height", "pickup_size",
            "fps", "max_frame_dt",
        )
        numeric = positive + (
            "ground_height", "player_x", "gravity", "jump_force", "flying_multiplier",
            "energy_jump_cost", "energy_refill_rate", "energy_pickup_bonus",
        )
        for name in numeric:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{name} must be a number, got {value!r}")

        for name in positive:
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be > 0, got {getattr(self, name)!r}")

        if not 0 <= self.ground_height < self.screen_height:
            raise ConfigError("ground_height must be in [0, screen_height)")
        if self.player_height >= self.ground_line:
            raise ConfigError("player_height must be smaller than the space above the ground")
        if self.gravity < 0:
            raise ConfigError("gravity must be >= 0")
        if self.jump_force >= 0:
            raise ConfigError("jump_force must be negative (upward)")
        if self.flying_multiplier < 0:
            raise ConfigError("flying_multiplier must be >= 0")

        for name in ("energy_jump_cost", "energy_refill_rate", "energy_pickup_bonus"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must be >= 0")
        if self.energy_jump_cost > self.energy_max:
            raise ConfigError("energy_jump_cost cannot exceed energy_max")

        for name in ("obstacle_gap", "rock_width", "rock_height", "water_width",
                     "pickup_gap", "pickup_altitude"):
            low, high = getattr(self, name)
            if low < 0 or high < low:
                raise ConfigError(f"{name} must be a range 0 <= low <= high, got {(low, high)!r}")
        # A zero gap would never advance the generator.
        if self.obstacle_gap[0] <= 0 or self.pickup_gap[0] <= 0:
            raise ConfigError("generation gaps must start above 0")

    # ---------- Derived geometry ----------

    @property
    def ground_line(self) -> float:
        """Y of the ground surface; obstacles rest on it."""
        return float(self.screen_height - self.ground_height)

    @property
    def player_ground_y(self) -> float:
        """Largest y the player's top edge may reach (standing on the ground)."""
        return self.ground_line - self.player_height

    # ---------- Construction ----------

    @classmethod
    def option_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_overrides(cls, overrides: Optional[Mapping[str, Any]] = None,
                       base: Optional["GameConfig"] = None) -> "GameConfig":
        """
        Builds a config from `base` (defaults if None) with the given options replaced.
        Unknown option names raise ConfigError; None values are ignored.
        """
        base = base or cls()
        if not overrides:
            return base

        known = set(cls.option_names())
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigError(f"Unknown config option(s): {', '.join(unknown)}")

        changes = {k: v for k, v in overrides.items() if v is not None}
        for name in ("obstacle_gap", "rock_width", "rock_height", "water_width",
                     "pickup_gap", "pickup_altitude"):
            if name in changes:
                try:
                    low, high = changes[name]
                except (TypeError, ValueError) as e:
                    raise ConfigError(f"{name} must be a (low, high) pair") from e
                changes[name] = (float(low), float(high))
        return replace(base, **changes)

"""
data_models.py: Data structures for the game state.
"""

import enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class Player:
    """The player's dinosaur. Only y and the jump fields change during a run."""
    x: float
    y: float
    width: float
    height: float
    velocity: float = 0.0           # Vertical only; negative is upward
    is_jumping: bool = False
    jump_count: int = 0             # Consecutive airborne impulses since leaving the ground


class ObstacleType(enum.Enum):
    ROCK = 0
    WATER = 1


@dataclass
class Obstacle:
    """A ground-anchored hazard scrolling towards the player."""
    x: float
    y: float
    width: float
    height: float
    kind: ObstacleType
    passed: bool = False            # Fully behind the player; never reverts


@dataclass
class Pickup:
    """A floating melinjo fruit that restores energy when collected."""
    x: float
    y: float
    width: float
    height: float
    collected: bool = False


class GameStatus(enum.Enum):
    ACTIVE = "active"
    ENDED = "ended"


class EndReason(enum.Enum):
    TIME_UP = "time_up"
    COLLISION = "collision"
    FELL = "fell"


@dataclass
class GameState:
    """The single owned aggregate mutated by the engine each frame."""
    player: Player
    obstacles: List[Obstacle] = field(default_factory=list)
    pickups: List[Pickup] = field(default_factory=list)
    energy: float = 0.0
    elapsed: float = 0.0            # Seconds of active play
    status: GameStatus = GameStatus.ACTIVE
    end_reason: Optional[EndReason] = None
    frame: int = 0                  # Active frames simulated

    @property
    def active(self) -> bool:
        return self.status is GameStatus.ACTIVE

    def end(self, reason: EndReason) -> bool:
        """
        Moves the game to ENDED. The first reason recorded wins; later calls are no-ops.
        Returns True if this call performed the transition.
        """
        if self.status is GameStatus.ENDED:
            return False
        self.status = GameStatus.ENDED
        self.end_reason = reason
        return True


# ----------------- Read-only views for the renderer -----------------

@dataclass(frozen=True)
class EntityView:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class ObstacleView(EntityView):
    kind: ObstacleType = ObstacleType.ROCK


@dataclass(frozen=True)
class RenderSnapshot:
    """Everything the renderer needs for one frame; nothing in it feeds back into the game."""
    screen_width: int
    screen_height: int
    ground_line: float
    player: EntityView
    obstacles: Tuple[ObstacleView, ...]
    pickups: Tuple[EntityView, ...]   # Uncollected only
    energy: float
    energy_percent: float
    elapsed: float
    game_duration: float
    status: GameStatus
    end_reason: Optional[EndReason]

    @property
    def ended(self) -> bool:
        return self.status is GameStatus.ENDED

    @property
    def is_win(self) -> bool:
        """Win framing depends only on whether the clock reached the duration."""
        return self.elapsed >= self.game_duration

    @property
    def timer_text(self) -> str:
        return f"Time: {int(self.elapsed)}s / {self.game_duration:g}s"

    @property
    def end_title(self) -> str:
        return "Level Complete!" if self.is_win else "Game Over"

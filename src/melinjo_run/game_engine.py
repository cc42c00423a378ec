"""
game_engine.py: The game clock, state machine and per-frame simulation step.
"""

import logging
from typing import Optional

from .config import GameConfig
from .data_models import (
    EndReason, EntityView, GameState, ObstacleView, Player, RenderSnapshot,
)
from .level_generator import RandomSource, generate_level, make_random_source
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Owns one GameState and advances it frame by frame.
    Input collaborators call request_jump() / request_restart(); renderers read snapshot().
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[RandomSource] = None):
        self.config = config or GameConfig()
        self.core = PhysicsCore(self.config)
        self.rng = rng if rng is not None else make_random_source(self.config.seed)
        self.state = self._new_state()

    def _new_state(self) -> GameState:
        obstacles, pickups = generate_level(self.config, self.rng)
        player = Player(
            x=float(self.config.player_x),
            y=self.config.player_ground_y,
            width=self.config.player_width,
            height=self.config.player_height,
        )
        return GameState(
            player=player,
            obstacles=obstacles,
            pickups=pickups,
            energy=self.config.energy_max,
        )

    @property
    def active(self) -> bool:
        return self.state.active

    def step(self, dt: float):
        """
        Advances the game by one frame that took `dt` seconds.
        Order: clock, player, scroll, energy, collisions. Nothing changes once ended.
        """
        state = self.state
        if not state.active:
            return

        state.elapsed += dt
        state.frame += 1
        # The frame that runs out the clock still completes its update below.
        if state.elapsed >= self.config.game_duration:
            state.end(EndReason.TIME_UP)
            logger.info("Time up after %d frames: level complete", state.frame)

        factor = self.core.frame_factor(dt)
        self.core.apply_gravity_and_movement(state.player, factor)
        self.core.scroll_world(state, factor)
        self.core.regenerate_energy(state, factor)
        self.core.check_collisions(state)

        if self.config.prune_offscreen:
            self.core.prune_offscreen(state)

        if state.end_reason in (EndReason.COLLISION, EndReason.FELL):
            logger.info("Game over (%s) at %.2fs", state.end_reason.value, state.elapsed)

    def request_jump(self) -> bool:
        """Applies a jump or flying impulse immediately. Ignored once the game has ended."""
        if not self.state.active:
            return False
        return self.core.apply_jump(self.state)

    def request_restart(self) -> bool:
        """Restarts only from the end screen. Returns True if a new run began."""
        if self.state.active:
            return False
        self.reset()
        return True

    def reset(self):
        """Regenerates the level and starts a fresh run in place."""
        self.state = self._new_state()
        logger.info("Game reset")

    def snapshot(self) -> RenderSnapshot:
        state = self.state
        cfg = self.config
        p = state.player
        return RenderSnapshot(
            screen_width=cfg.screen_width,
            screen_height=cfg.screen_height,
            ground_line=cfg.ground_line,
            player=EntityView(x=p.x, y=p.y, width=p.width, height=p.height),
            obstacles=tuple(
                ObstacleView(x=o.x, y=o.y, width=o.width, height=o.height, kind=o.kind)
                for o in state.obstacles
            ),
            pickups=tuple(
                EntityView(x=m.x, y=m.y, width=m.width, height=m.height)
                for m in state.pickups if not m.collected
            ),
            energy=state.energy,
            energy_percent=state.energy / cfg.energy_max * 100.0,
            elapsed=state.elapsed,
            game_duration=cfg.game_duration,
            status=state.status,
            end_reason=state.end_reason,
        )

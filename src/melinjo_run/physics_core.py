"""
physics_core.py: Player kinematics, world scrolling, energy bookkeeping and collision logic.
"""

import logging
from typing import Union

from .config import GameConfig
from .data_models import EndReason, GameState, Obstacle, Pickup, Player

logger = logging.getLogger(__name__)

Box = Union[Player, Obstacle, Pickup]


class PhysicsCore:
    """
    Stateless rules applied to a GameState. The engine decides when each rule runs.
    """

    def __init__(self, config: GameConfig):
        self.config = config

    def frame_factor(self, dt: float) -> float:
        """
        Multiplier for per-frame increments. Fixed at 1.0 unless the config
        asks for delta-time scaling.
        """
        if self.config.scale_to_delta_time:
            return dt * self.config.frame_rate_assumption
        return 1.0

    # ---------- Player ----------

    def apply_gravity_and_movement(self, player: Player, factor: float = 1.0):
        """Integrates one frame of gravity and snaps the player to the ground on landing."""
        player.velocity += self.config.gravity * factor
        player.y += player.velocity * factor

        ground_y = self.config.player_ground_y
        if player.y >= ground_y:
            player.y = ground_y
            player.velocity = 0.0
            player.is_jumping = False
            player.jump_count = 0

    def flying_force(self, jump_count: int) -> float:
        """Upward velocity of a mid-air impulse; weaker with every impulse already spent."""
        return self.config.jump_force * self.config.flying_multiplier / jump_count

    def apply_jump(self, state: GameState) -> bool:
        """
        Ground jump or, when airborne, a flying impulse. Each costs energy and is
        silently refused when there is not enough. Returns True if applied.
        """
        cost = self.config.energy_jump_cost
        if state.energy < cost:
            logger.debug("Jump refused: energy %.1f < %.1f", state.energy, cost)
            return False

        player = state.player
        if not player.is_jumping:
            player.velocity = self.config.jump_force
            player.is_jumping = True
            player.jump_count = 1
        else:
            player.velocity = self.flying_force(player.jump_count)
            player.jump_count += 1

        state.energy -= cost
        logger.debug("Impulse %d applied: velocity=%.2f energy=%.1f",
                     player.jump_count, player.velocity, state.energy)
        return True

    # ---------- World ----------

    def scroll_world(self, state: GameState, factor: float = 1.0):
        dx = self.config.scroll_speed * factor
        for obstacle in state.obstacles:
            obstacle.x -= dx
        for pickup in state.pickups:
            pickup.x -= dx

    def prune_offscreen(self, state: GameState):
        """Drops entities that can no longer be drawn or collided with."""
        state.obstacles = [o for o in state.obstacles if not (o.passed and o.x + o.width < 0)]
        state.pickups = [p for p in state.pickups if p.x + p.width >= 0]

    # ---------- Energy ----------

    def regenerate_energy(self, state: GameState, factor: float = 1.0):
        if state.energy < self.config.energy_max:
            state.energy = min(state.energy + self.config.energy_refill_rate * factor,
                               self.config.energy_max)

    def grant_pickup_bonus(self, state: GameState):
        state.energy = min(state.energy + self.config.energy_pickup_bonus,
                           self.config.energy_max)

    # ---------- Collisions ----------

    @staticmethod
    def overlaps(a: Box, b: Box) -> bool:
        """Strict AABB overlap; boxes that only share an edge do not collide."""
        return (a.x < b.x + b.width and
                a.x + a.width > b.x and
                a.y < b.y + b.height and
                a.y + a.height > b.y)

    def check_collisions(self, state: GameState):
        """
        Obstacles first (a hit ends the game and stops the pass), then pickups,
        then the fall-out-of-view check.
        """
        player = state.player

        for obstacle in state.obstacles:
            if not obstacle.passed and self.overlaps(player, obstacle):
                if state.end(EndReason.COLLISION):
                    logger.debug("Hit a %s at x=%.1f", obstacle.kind.name.lower(), obstacle.x)
                return

            if not obstacle.passed and obstacle.x + obstacle.width < player.x:
                obstacle.passed = True

        for pickup in state.pickups:
            if not pickup.collected and self.overlaps(player, pickup):
                pickup.collected = True
                self.grant_pickup_bonus(state)
                logger.debug("Melinjo collected: energy=%.1f", state.energy)

        if player.y > self.config.screen_height:
            if state.end(EndReason.FELL):
                logger.debug("Player fell out of view at y=%.1f", player.y)

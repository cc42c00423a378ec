#!/usr/bin/env python3
"""
game_client.py

pygame window, rendering and input for the simulation in game_engine.
The client only reads snapshots and forwards jump / restart requests.
"""

import argparse
import logging
import os
from typing import List, Optional

import pygame

from .config import GameConfig
from .constants import WINDOW_TITLE
from .data_models import ObstacleType, RenderSnapshot
from .exceptions import ConfigError
from .game_engine import GameEngine

logger = logging.getLogger(__name__)

SKY_COLOR = (135, 206, 235)
GROUND_COLOR = (139, 69, 19)
GRASS_COLOR = (124, 252, 0)
PLAYER_COLOR = (34, 139, 34)
ROCK_COLOR = (128, 128, 128)
WATER_COLOR = (30, 144, 255)
MELINJO_COLOR = (255, 99, 71)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
ENERGY_BAR_BG = (60, 60, 60)
ENERGY_BAR_FG = (255, 215, 0)

JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP, pygame.K_w)
RESTART_KEYS = (pygame.K_SPACE, pygame.K_r, pygame.K_F5)


class GameClient:
    def __init__(self, engine: GameEngine):
        pygame.init()
        self.engine = engine
        cfg = engine.config
        self.screen = pygame.display.set_mode((cfg.screen_width, cfg.screen_height))
        pygame.display.set_caption(WINDOW_TITLE)

        self.clock = pygame.time.Clock()
        self.large_font = pygame.font.Font(None, 48)
        self.font = pygame.font.Font(None, 24)
        self.frames_run = 0

    def run(self, max_frames: Optional[int] = None, screenshot_path: Optional[str] = None):
        """The main client loop. Rendering continues after the game ends."""
        cfg = self.engine.config
        logger.info("Client started (%dx%d @ %d fps)", cfg.screen_width, cfg.screen_height, cfg.fps)

        running = True
        try:
            while running:
                dt = self.clock.tick(cfg.fps) / 1000.0
                dt = min(dt, cfg.max_frame_dt)

                for event in pygame.event.get():
                    if not self.handle_event(event):
                        running = False

                self.engine.step(dt)
                self.draw(self.engine.snapshot())

                self.frames_run += 1
                if max_frames is not None and self.frames_run >= max_frames:
                    running = False

            if screenshot_path:
                pygame.image.save(self.screen, screenshot_path)
                logger.info("Saved screenshot to %s", screenshot_path)
        finally:
            logger.info("Client stopped after %d frames", self.frames_run)
            pygame.quit()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Forwards input to the engine. Returns False when the player asked to quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return False

        # Touches also arrive as synthetic mouse clicks; count them once.
        pressed = (event.type == pygame.FINGERDOWN or
                   (event.type == pygame.MOUSEBUTTONDOWN and not getattr(event, "touch", False)))
        if self.engine.active:
            if pressed or (event.type == pygame.KEYDOWN and event.key in JUMP_KEYS):
                self.engine.request_jump()
        else:
            if pressed or (event.type == pygame.KEYDOWN and event.key in RESTART_KEYS):
                self.engine.request_restart()
        return True

    # ----------------- Rendering -----------------

    def draw(self, snap: RenderSnapshot):
        screen = self.screen
        ground = int(snap.ground_line)

        screen.fill(SKY_COLOR)
        pygame.draw.rect(screen, GROUND_COLOR, (0, ground, snap.screen_width, snap.screen_height - ground))
        pygame.draw.rect(screen, GRASS_COLOR, (0, ground, snap.screen_width, 5))

        for ob in snap.obstacles:
            if ob.x + ob.width > 0 and ob.x < snap.screen_width:
                color = ROCK_COLOR if ob.kind is ObstacleType.ROCK else WATER_COLOR
                pygame.draw.rect(screen, color, (ob.x, ob.y, ob.width, ob.height))

        for m in snap.pickups:
            if m.x + m.width > 0 and m.x < snap.screen_width:
                center = (int(m.x + m.width / 2), int(m.y + m.height / 2))
                pygame.draw.circle(screen, MELINJO_COLOR, center, int(m.width / 2))

        p = snap.player
        pygame.draw.rect(screen, PLAYER_COLOR, (p.x, p.y, p.width, p.height))
        pygame.draw.rect(screen, WHITE, (p.x + 35, p.y + 10, 10, 10))
        pygame.draw.rect(screen, BLACK, (p.x + 40, p.y + 12, 5, 5))

        self._draw_hud(snap)
        if snap.ended:
            self._draw_end_overlay(snap)

        pygame.display.flip()

    def _draw_hud(self, snap: RenderSnapshot):
        timer = self.font.render(snap.timer_text, True, BLACK)
        self.screen.blit(timer, (10, 10))

        bar_x, bar_y, bar_w, bar_h = 10, 36, 200, 14
        pygame.draw.rect(self.screen, ENERGY_BAR_BG, (bar_x, bar_y, bar_w, bar_h))
        fill_w = int(bar_w * snap.energy_percent / 100.0)
        pygame.draw.rect(self.screen, ENERGY_BAR_FG, (bar_x, bar_y, fill_w, bar_h))
        label = self.font.render("Energy", True, BLACK)
        self.screen.blit(label, (bar_x + bar_w + 8, bar_y - 2))

    def _draw_end_overlay(self, snap: RenderSnapshot):
        overlay = pygame.Surface((snap.screen_width, snap.screen_height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 128))
        self.screen.blit(overlay, (0, 0))

        cx, cy = snap.screen_width // 2, snap.screen_height // 2
        title = self.large_font.render(snap.end_title, True, WHITE)
        self.screen.blit(title, (cx - title.get_width() // 2, cy - title.get_height() // 2))
        hint = self.font.render("Press SPACE or tap to restart", True, WHITE)
        self.screen.blit(hint, (cx - hint.get_width() // 2, cy + 40))


# ----------------- Command line -----------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the Melinjo Run side-scroller.")
    parser.add_argument("--duration", type=float, default=None,
                        help="Seconds to survive for a win.")
    parser.add_argument("--scroll-speed", type=float, default=None,
                        help="World units scrolled per frame.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed the level generator for a reproducible layout.")
    parser.add_argument("--fps", type=int, default=None,
                        help="Target frames per second.")
    parser.add_argument("--scale-dt", action="store_true",
                        help="Scale physics, scrolling and energy by measured frame time.")
    parser.add_argument("--frames", type=int, default=None,
                        help="Run the game loop for a limited number of frames.")
    parser.add_argument("--screenshot", type=str, default=None,
                        help="Path to save a screenshot of the final frame.")
    parser.add_argument("--headless", action="store_true",
                        help="Use the SDL dummy video driver to render without opening a window.")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig.from_overrides({
        "game_duration": args.duration,
        "scroll_speed": args.scroll_speed,
        "seed": args.seed,
        "fps": args.fps,
        "scale_to_delta_time": True if args.scale_dt else None,
    })


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        config = config_from_args(args)
    except ConfigError as e:
        parser.error(str(e))

    if args.headless:
        os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

    engine = GameEngine(config)
    client = GameClient(engine)
    client.run(max_frames=args.frames, screenshot_path=args.screenshot)


if __name__ == "__main__":
    main()

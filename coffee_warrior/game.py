"""Pygame host: window, input, asset loading and the frame loop for Coffee Warrior."""

from __future__ import annotations

import logging
import os
import random
import sys
from dataclasses import replace
from pathlib import Path

import pygame

from .audio import AudioCues
from .config import DESIGN_HEIGHT, DESIGN_WIDTH, FPS, PLAYER_HEIGHT, PLAYER_IMAGE, Tuning
from .errors import AssetUnavailable
from .render import Renderer
from .simulation import Simulation

logger = logging.getLogger(__name__)

ACTIVATE_KEYS = (pygame.K_SPACE, pygame.K_UP, pygame.K_w)


def load_player_image(asset_dir: Path) -> pygame.Surface:
    path = asset_dir / PLAYER_IMAGE
    if not path.is_file():
        raise AssetUnavailable(str(path), "file not found")
    try:
        image = pygame.image.load(str(path))
    except pygame.error as e:
        raise AssetUnavailable(str(path), str(e)) from e
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def tuning_for_image(image: pygame.Surface | None, tuning: Tuning) -> Tuning:
    """Keep the sprite's aspect ratio at the gameplay height."""
    if image is None or image.get_height() == 0:
        return tuning
    width = image.get_width() * PLAYER_HEIGHT / image.get_height()
    return replace(tuning, player_height=PLAYER_HEIGHT, player_width=width)


class Game:
    """Top-level host: owns the window and forwards ticks, taps and resizes to the simulation."""

    def __init__(self, asset_dir: Path | str = "assets", seed: int | None = None) -> None:
        pygame.init()
        self.asset_dir = Path(asset_dir)
        self.screen = pygame.display.set_mode((DESIGN_WIDTH, DESIGN_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption("The Coffee Warrior")
        self.clock = pygame.time.Clock()

        try:
            self.player_image: pygame.Surface | None = load_player_image(self.asset_dir)
        except AssetUnavailable as e:
            logger.error("%s", e)
            self.player_image = None

        w, h = self.screen.get_size()
        self.simulation = Simulation(
            w,
            h,
            tuning=tuning_for_image(self.player_image, Tuning()),
            rng=random.Random(seed),
            assets_ready=self.player_image is not None,
        )
        self.renderer = Renderer(self.player_image)
        self.audio = AudioCues.load(self.asset_dir)
        self.simulation.subscribe(self.audio.on_event)

    def handle_input(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key in ACTIVATE_KEYS:
                self.simulation.activate()
            elif event.key == pygame.K_ESCAPE:
                pygame.event.post(pygame.event.Event(pygame.QUIT))
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1:
                self.simulation.activate()
        elif event.type == pygame.VIDEORESIZE:
            self.simulation.resize(event.w, event.h)

    def draw(self) -> None:
        snap = self.simulation.snapshot()
        canvas = pygame.Surface((int(snap.scale.canvas_width), int(snap.scale.canvas_height)))
        self.renderer.draw(canvas, snap)
        # Letterbox: centre the canvas inside whatever window we were given
        self.screen.fill((0, 0, 0))
        sw, sh = self.screen.get_size()
        self.screen.blit(canvas, ((sw - canvas.get_width()) // 2, (sh - canvas.get_height()) // 2))
        pygame.display.flip()

    def run(self) -> None:
        while True:
            self.clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    pygame.quit()
                    sys.exit(0)
                self.handle_input(event)

            self.simulation.tick()
            self.audio.update()
            self.draw()


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def main() -> None:
    setup_logging(os.getenv("COFFEE_WARRIOR_DEBUG", "false").lower() == "true")
    seed = os.getenv("COFFEE_WARRIOR_SEED")
    asset_dir = os.getenv("COFFEE_WARRIOR_ASSETS", "assets")
    logger.info("Coffee Warrior starting (assets: %s)", asset_dir)
    Game(asset_dir, seed=int(seed) if seed else None).run()

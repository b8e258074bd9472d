"""Jittered spawn timers for cacti, coffee cups and clouds."""

from __future__ import annotations

import logging
import math
import random

from .config import Tuning
from .entities import (
    Player,
    ScrollEntity,
    make_collectible,
    make_decoration,
    make_obstacle,
)
from .state import SimulationState
from .viewport import ScaleContext

logger = logging.getLogger(__name__)


class Spawner:
    """Two independent timers (obstacles, collectibles) plus the cloud cadence.

    Randomness comes only from the injected ``rng`` so runs replay exactly
    under a fixed seed.
    """

    def __init__(self, tuning: Tuning, rng: random.Random) -> None:
        self.tuning = tuning
        self.rng = rng

    def _interval(self, lo: float, hi: float, scroll_speed: float, scale: ScaleContext) -> int:
        # Cadence compresses as the world speeds up relative to its starting speed
        speed_ratio = scroll_speed / (self.tuning.base_speed * scale.scale_factor)
        return math.floor(self.rng.uniform(lo, hi) / speed_ratio)

    def arm_obstacle(self, state: SimulationState, scale: ScaleContext) -> None:
        t = self.tuning
        state.next_obstacle_tick = state.elapsed_ticks + self._interval(
            t.min_obstacle_interval, t.max_obstacle_interval, state.scroll_speed, scale
        )

    def arm_collectible(self, state: SimulationState, scale: ScaleContext) -> None:
        t = self.tuning
        state.next_collectible_tick = state.elapsed_ticks + self._interval(
            t.min_collectible_interval, t.max_collectible_interval, state.scroll_speed, scale
        )

    def spawn_due(
        self,
        state: SimulationState,
        scale: ScaleContext,
        player: Player,
        obstacles: list[ScrollEntity],
        collectibles: list[ScrollEntity],
    ) -> list[ScrollEntity]:
        """Fire whichever timers have come due and return what was actually added."""
        spawned: list[ScrollEntity] = []
        if state.elapsed_ticks >= state.next_obstacle_tick:
            obstacle = make_obstacle(scale, self.tuning)
            obstacles.append(obstacle)
            spawned.append(obstacle)
            self.arm_obstacle(state, scale)
            logger.debug("Spawned obstacle at tick %d", state.elapsed_ticks)

        if state.elapsed_ticks >= state.next_collectible_tick:
            cup = self.try_spawn_collectible(state, scale, player, obstacles)
            if cup is not None:
                collectibles.append(cup)
                spawned.append(cup)
                self.arm_collectible(state, scale)
        return spawned

    def try_spawn_collectible(
        self,
        state: SimulationState,
        scale: ScaleContext,
        player: Player,
        obstacles: list[ScrollEntity],
    ) -> ScrollEntity | None:
        """Build a coffee cup, or re-arm a short cooldown if a cactus is too close.

        The lift range straddles the runner's reach so some cups need a jump.
        """
        t = self.tuning
        lift = self.rng.uniform(t.collectible_size * 1.2 * scale.scale_factor, player.h * 1.5)
        cup = make_collectible(scale, t, lift, phase=self.rng.uniform(0.0, math.tau))
        for obs in obstacles:
            if abs(cup.x - obs.x) < obs.w * t.spawn_spacing_factor:
                state.next_collectible_tick = state.elapsed_ticks + t.spawn_reject_cooldown
                logger.debug(
                    "Collectible crowded by obstacle at x=%.1f; retry at tick %d",
                    obs.x,
                    state.next_collectible_tick,
                )
                return None
        logger.debug("Spawned collectible at tick %d (lift %.1f)", state.elapsed_ticks, lift)
        return cup

    def spawn_decoration(self, scale: ScaleContext, x: float | None = None) -> ScrollEntity:
        t = self.tuning
        s = scale.scale_factor
        return make_decoration(
            x=scale.canvas_width if x is None else x,
            y=self.rng.uniform(scale.canvas_height * 0.1, scale.canvas_height * 0.4),
            size=self.rng.uniform(t.cloud_min_size, t.cloud_max_size) * s,
            speed_factor=t.cloud_speed_factor * self.rng.uniform(0.8, 1.2),
        )

    def seed_decorations(self, scale: ScaleContext) -> list[ScrollEntity]:
        return [
            self.spawn_decoration(scale, x=self.rng.uniform(0.0, scale.canvas_width))
            for _ in range(self.tuning.cloud_count)
        ]

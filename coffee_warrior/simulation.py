"""Frame-driven game state machine for Coffee Warrior.

The simulation owns every piece of mutable game data. Hosts drive it with
``tick()``, ``activate()`` and ``resize()`` and read it back through
``snapshot()``; nothing in here draws or plays sound.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from .collision import resolve_collisions
from .config import DESIGN_HEIGHT, DESIGN_WIDTH, Tuning
from .entities import (
    EntityKind,
    Player,
    ScrollEntity,
    is_offscreen,
    rescale_entity,
    rescale_player,
    spawn_player,
)
from .events import EventKind, EventSignals, GameEvent, Listener
from .physics import advance_all, integrate_player, jump, scroll_speed_for
from .spawner import Spawner
from .state import GameState, SimulationState
from .viewport import ScaleContext, compute_scale_context

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntityView:
    kind: EntityKind
    x: float
    y: float
    w: float
    h: float
    phase: float = 0.0


@dataclass(frozen=True)
class PlayerView:
    x: float
    y: float
    w: float
    h: float
    velocity_y: float
    is_on_ground: bool


@dataclass(frozen=True)
class Snapshot:
    """Value copy of everything a renderer needs for one frame."""

    game_state: GameState
    score: int
    scroll_speed: float
    elapsed_ticks: int
    scale: ScaleContext
    player: PlayerView
    obstacles: tuple[EntityView, ...]
    collectibles: tuple[EntityView, ...]
    decorations: tuple[EntityView, ...]


def _view(entity: ScrollEntity) -> EntityView:
    return EntityView(entity.kind, entity.x, entity.y, entity.w, entity.h, entity.phase)


class Simulation:
    """Start → Playing → GameOver → Playing … with Error as a dead end."""

    def __init__(
        self,
        available_width: float = DESIGN_WIDTH,
        available_height: float = DESIGN_HEIGHT,
        *,
        tuning: Tuning | None = None,
        rng: random.Random | None = None,
        assets_ready: bool = True,
    ) -> None:
        self.tuning = tuning or Tuning()
        self.rng = rng or random.Random()
        self.assets_ready = assets_ready
        self.scale = compute_scale_context(available_width, available_height, self.tuning)
        self.spawner = Spawner(self.tuning, self.rng)
        self.signals = EventSignals()

        self.state = SimulationState(scroll_speed=scroll_speed_for(0, self.scale, self.tuning))
        self.player: Player = spawn_player(self.scale, self.tuning)
        self.obstacles: list[ScrollEntity] = []
        self.collectibles: list[ScrollEntity] = []
        self.decorations: list[ScrollEntity] = []

        self.frame = 0  # counts every tick, in any state
        self._in_tick = False

        # Build the backdrop for the title screen the same way a run starts
        self._reset()

    # ----- Host-facing API -----
    def subscribe(self, listener: Listener):
        """Register ``listener`` and return its unsubscribe callable.

        The constructor's first reset may already have failed, so a listener
        joining a simulation in ``ERROR`` is handed that ERROR event at once.
        """
        unsubscribe = self.signals.subscribe(listener)
        if self.state.game_state is GameState.ERROR:
            listener(GameEvent(EventKind.ERROR, self.state.elapsed_ticks))
        return unsubscribe

    def activate(self) -> None:
        """Handle one discrete key press or tap."""
        gs = self.state.game_state
        if gs is GameState.ERROR:
            return
        if gs in (GameState.START, GameState.GAME_OVER):
            self._start_run()
        elif jump(self.player, self.scale, self.tuning):
            self._emit(EventKind.JUMP, velocity_y=self.player.velocity_y)

    def tick(self, delta_frames: int = 1) -> None:
        if delta_frames < 1:
            raise ValueError(f"delta_frames must be >= 1, got {delta_frames}")
        for _ in range(delta_frames):
            if self.state.game_state is GameState.ERROR:
                return
            self._in_tick = True
            try:
                self._step()
            finally:
                self._in_tick = False

    def resize(self, available_width: float, available_height: float) -> None:
        """Re-fit the canvas between ticks and carry every live entity over to the new scale."""
        if self._in_tick:
            raise RuntimeError("resize() must not be called while a tick is in progress")
        new_scale = compute_scale_context(available_width, available_height, self.tuning)
        if new_scale == self.scale:
            return
        ratio = new_scale.scale_factor / self.scale.scale_factor
        self.scale = new_scale
        rescale_player(self.player, ratio, new_scale)
        for entity in (*self.obstacles, *self.collectibles, *self.decorations):
            rescale_entity(entity, ratio, new_scale)
        self.state.scroll_speed = scroll_speed_for(self.state.elapsed_ticks, new_scale, self.tuning)
        logger.debug(
            "Resized canvas to %.0fx%.0f (scale %.3f)",
            new_scale.canvas_width,
            new_scale.canvas_height,
            new_scale.scale_factor,
        )

    def snapshot(self) -> Snapshot:
        p = self.player
        return Snapshot(
            game_state=self.state.game_state,
            score=self.state.score,
            scroll_speed=self.state.scroll_speed,
            elapsed_ticks=self.state.elapsed_ticks,
            scale=self.scale,
            player=PlayerView(p.x, p.y, p.w, p.h, p.velocity_y, p.is_on_ground),
            obstacles=tuple(_view(e) for e in self.obstacles),
            collectibles=tuple(_view(e) for e in self.collectibles),
            decorations=tuple(_view(e) for e in self.decorations),
        )

    # ----- Transitions -----
    def _reset(self) -> None:
        if not self.assets_ready:
            if self.state.game_state is not GameState.ERROR:
                self.state.game_state = GameState.ERROR
                logger.error("Required assets are unavailable; simulation disabled")
                self._emit(EventKind.ERROR)
            return

        st = self.state
        st.score = 0
        st.elapsed_ticks = 0
        st.game_over_tick = None
        st.scroll_speed = scroll_speed_for(0, self.scale, self.tuning)
        self.obstacles.clear()
        self.collectibles.clear()
        self.decorations.clear()
        self.player = spawn_player(self.scale, self.tuning)
        self.spawner.arm_obstacle(st, self.scale)
        self.spawner.arm_collectible(st, self.scale)
        self.decorations.extend(self.spawner.seed_decorations(self.scale))

    def _start_run(self) -> None:
        previous = self.state.game_state
        self._reset()
        if self.state.game_state is GameState.ERROR:
            return
        self.state.game_state = GameState.PLAYING
        logger.info("Run started (%s -> playing)", previous.value)
        self._emit(EventKind.RUN_STARTED)

    def _game_over(self, obstacle: ScrollEntity) -> None:
        st = self.state
        st.game_state = GameState.GAME_OVER
        st.game_over_tick = st.elapsed_ticks
        self._emit(EventKind.COLLISION, x=obstacle.x, y=obstacle.y)
        logger.info("Game over at tick %d with score %d", st.elapsed_ticks, st.score)
        self._emit(EventKind.GAME_OVER, score=st.score)

    # ----- Per-tick work -----
    def _step(self) -> None:
        self.frame += 1
        st = self.state
        if st.game_state is GameState.PLAYING:
            # Physics
            st.elapsed_ticks += 1
            st.scroll_speed = scroll_speed_for(st.elapsed_ticks, self.scale, self.tuning)
            integrate_player(self.player, self.scale, self.tuning)
            advance_all(self.obstacles, st.scroll_speed, self.tuning)
            advance_all(self.collectibles, st.scroll_speed, self.tuning)
            advance_all(self.decorations, st.scroll_speed, self.tuning)
            # Spawning
            self.spawner.spawn_due(st, self.scale, self.player, self.obstacles, self.collectibles)
            self._step_decorations()
            # Collision & scoring
            report = resolve_collisions(self.player, self.obstacles, self.collectibles)
            if report.hit is not None:
                self._game_over(report.hit)
                return
            # Bank every pickup before any listener runs
            running = st.score
            st.score += report.points
            for cup in report.collected:
                running += cup.score_value
                self._emit(EventKind.COLLECT, value=cup.score_value, score=running)
        else:
            # Clouds keep drifting at the frozen speed on the title and game-over screens
            advance_all(self.decorations, st.scroll_speed, self.tuning)
            self._step_decorations()

    def _step_decorations(self) -> None:
        self.decorations[:] = [d for d in self.decorations if not is_offscreen(d)]
        if (
            self.state.game_state is not GameState.GAME_OVER
            and self.frame % self.tuning.cloud_spawn_interval == 0
        ):
            self.decorations.append(self.spawner.spawn_decoration(self.scale))

    def _emit(self, kind: EventKind, **data) -> GameEvent:
        return self.signals.emit(kind, self.state.elapsed_ticks, **data)

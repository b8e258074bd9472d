"""Game phase and the single mutable record the simulation owns."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class GameState(Enum):
    START = "start"
    PLAYING = "playing"
    GAME_OVER = "game_over"
    ERROR = "error"


@dataclass
class SimulationState:
    game_state: GameState = GameState.START
    score: int = 0
    scroll_speed: float = 0.0
    elapsed_ticks: int = 0
    next_obstacle_tick: int = 0
    next_collectible_tick: int = 0
    game_over_tick: int | None = None

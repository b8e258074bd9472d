"""Game entities: the runner and everything that scrolls past it.

Entities are plain records. Behaviour lives in free functions here and in
``physics``/``collision`` so the simulation never stores per-instance callbacks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .config import Tuning
from .viewport import ScaleContext


class EntityKind(Enum):
    OBSTACLE = "obstacle"
    COLLECTIBLE = "collectible"
    DECORATION = "decoration"


@dataclass
class Player:
    x: float
    y: float
    w: float
    h: float
    velocity_y: float = 0.0
    is_on_ground: bool = True


@dataclass(eq=False)
class ScrollEntity:
    """Anything that moves left with the world: cacti, coffee cups, clouds."""

    x: float
    y: float
    w: float
    h: float
    kind: EntityKind
    score_value: int = 0
    phase: float = 0.0  # idle animation only
    speed_factor: float = 1.0  # fraction of the scroll speed this entity travels at

    @property
    def right(self) -> float:
        return self.x + self.w


def spawn_player(scale: ScaleContext, tuning: Tuning) -> Player:
    """Place a fresh runner standing on the ground at a quarter of the canvas width."""
    w = tuning.player_width * scale.scale_factor
    h = tuning.player_height * scale.scale_factor
    return Player(
        x=scale.canvas_width * tuning.player_x_fraction,
        y=scale.ground_y - h,
        w=w,
        h=h,
    )


def make_obstacle(scale: ScaleContext, tuning: Tuning) -> ScrollEntity:
    s = scale.scale_factor
    w = tuning.obstacle_width * s
    h = tuning.obstacle_height * s
    return ScrollEntity(x=scale.canvas_width, y=scale.ground_y - h, w=w, h=h, kind=EntityKind.OBSTACLE)


def make_collectible(
    scale: ScaleContext, tuning: Tuning, lift: float, phase: float = 0.0
) -> ScrollEntity:
    """Coffee cup at the right edge whose bottom hovers ``lift`` above the ground."""
    s = scale.scale_factor
    w = (tuning.cup_width + tuning.cup_handle_size / 2) * s
    h = tuning.cup_height * s
    return ScrollEntity(
        x=scale.canvas_width,
        y=scale.ground_y - lift - h,
        w=w,
        h=h,
        kind=EntityKind.COLLECTIBLE,
        score_value=tuning.collectible_value,
        phase=phase,
    )


def make_decoration(x: float, y: float, size: float, speed_factor: float) -> ScrollEntity:
    # A cloud is three overlapping ellipses spanning about 1.5 sizes across
    return ScrollEntity(
        x=x, y=y, w=size * 1.5, h=size * 0.7, kind=EntityKind.DECORATION, speed_factor=speed_factor
    )


def is_offscreen(entity: ScrollEntity) -> bool:
    return entity.right < 0


def rescale_entity(entity: ScrollEntity, ratio: float, scale: ScaleContext) -> None:
    """Carry an entity over to a new scale factor; obstacles stay planted on the ground."""
    entity.x *= ratio
    entity.y *= ratio
    entity.w *= ratio
    entity.h *= ratio
    if entity.kind is EntityKind.OBSTACLE:
        entity.y = scale.ground_y - entity.h


def rescale_player(player: Player, ratio: float, scale: ScaleContext) -> None:
    player.x *= ratio
    player.y *= ratio
    player.w *= ratio
    player.h *= ratio
    player.velocity_y *= ratio
    if player.is_on_ground or player.y + player.h > scale.ground_y:
        player.y = scale.ground_y - player.h
        player.velocity_y = 0.0
        player.is_on_ground = True

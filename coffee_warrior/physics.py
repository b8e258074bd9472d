"""Per-tick integration for the runner and the scrolling world."""

from __future__ import annotations

from .config import Tuning
from .entities import EntityKind, Player, ScrollEntity
from .viewport import ScaleContext


def scroll_speed_for(elapsed_ticks: int, scale: ScaleContext, tuning: Tuning) -> float:
    """World speed after ``elapsed_ticks`` ticks of play, in canvas pixels per tick."""
    s = scale.scale_factor
    return tuning.base_speed * s + elapsed_ticks * tuning.speed_increase_rate * s


def jump_velocity(scale: ScaleContext, tuning: Tuning) -> float:
    return tuning.jump_force * scale.scale_factor ** tuning.jump_scale_exponent


def jump(player: Player, scale: ScaleContext, tuning: Tuning) -> bool:
    """Launch the player if grounded. Returns False (and does nothing) mid-air."""
    if not player.is_on_ground:
        return False
    player.velocity_y = jump_velocity(scale, tuning)
    player.is_on_ground = False
    return True


def integrate_player(player: Player, scale: ScaleContext, tuning: Tuning) -> None:
    """Semi-implicit Euler step followed by the ground clamp."""
    player.velocity_y += tuning.gravity * scale.scale_factor
    player.y += player.velocity_y
    clamp_to_ground(player, scale)


def clamp_to_ground(player: Player, scale: ScaleContext) -> None:
    if player.y + player.h >= scale.ground_y:
        player.y = scale.ground_y - player.h
        player.velocity_y = 0.0
        player.is_on_ground = True


def advance_entity(entity: ScrollEntity, scroll_speed: float, tuning: Tuning) -> None:
    entity.x -= scroll_speed * entity.speed_factor
    if entity.kind is EntityKind.COLLECTIBLE:
        entity.phase += tuning.collectible_phase_step


def advance_all(entities: list[ScrollEntity], scroll_speed: float, tuning: Tuning) -> None:
    for entity in entities:
        advance_entity(entity, scroll_speed, tuning)

"""Bounding-box contact between the runner and the scrolling world."""

from __future__ import annotations

from dataclasses import dataclass, field

from .entities import Player, ScrollEntity, is_offscreen


def aabb_overlap(a: Player | ScrollEntity, b: Player | ScrollEntity) -> bool:
    """Strict overlap on both axes; touching edges do not count."""
    return a.x < b.x + b.w and a.x + a.w > b.x and a.y < b.y + b.h and a.y + a.h > b.y


@dataclass
class CollisionReport:
    hit: ScrollEntity | None = None
    collected: list[ScrollEntity] = field(default_factory=list)

    @property
    def points(self) -> int:
        return sum(c.score_value for c in self.collected)


def resolve_collisions(
    player: Player,
    obstacles: list[ScrollEntity],
    collectibles: list[ScrollEntity],
) -> CollisionReport:
    """Apply one tick of contact rules, pruning the entity lists in place.

    The first obstacle touched ends processing for the tick: nothing behind it
    is pruned and no cup is collected. Cups are removed either on pickup or
    once they have fully left the screen.
    """
    report = CollisionReport()
    for i in range(len(obstacles) - 1, -1, -1):
        obs = obstacles[i]
        if aabb_overlap(player, obs):
            report.hit = obs
            return report
        if is_offscreen(obs):
            del obstacles[i]

    for i in range(len(collectibles) - 1, -1, -1):
        cup = collectibles[i]
        if aabb_overlap(player, cup):
            report.collected.append(cup)
            del collectibles[i]
        elif is_offscreen(cup):
            del collectibles[i]
    return report

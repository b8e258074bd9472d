from coffee_warrior.config import Tuning
from coffee_warrior.collision import aabb_overlap, resolve_collisions
from coffee_warrior.entities import make_collectible, make_obstacle, spawn_player
from coffee_warrior.viewport import compute_scale_context

TUNING = Tuning()
SCALE = compute_scale_context(800, 400)


def test_aabb_strict_overlap() -> None:
    player = spawn_player(SCALE, TUNING)  # x 200..260, y 250..350
    obs = make_obstacle(SCALE, TUNING)  # y 300..350
    obs.x = 259.5
    assert aabb_overlap(player, obs)
    obs.x = 260.0  # edges touching
    assert not aabb_overlap(player, obs)
    obs.x = 200 - obs.w
    assert not aabb_overlap(player, obs)


def test_obstacle_hit_stops_processing() -> None:
    player = spawn_player(SCALE, TUNING)
    gone = make_obstacle(SCALE, TUNING)
    gone.x = -500
    hit = make_obstacle(SCALE, TUNING)
    hit.x = 220
    cup = make_collectible(SCALE, TUNING, lift=10.0)
    cup.x = 210
    obstacles = [gone, hit]
    collectibles = [cup]
    report = resolve_collisions(player, obstacles, collectibles)
    assert report.hit is hit
    assert report.collected == []
    # Nothing pruned once the hit is found
    assert obstacles == [gone, hit]
    assert collectibles == [cup]


def test_offscreen_obstacles_are_pruned() -> None:
    player = spawn_player(SCALE, TUNING)
    gone = make_obstacle(SCALE, TUNING)
    gone.x = -gone.w - 1
    edge = make_obstacle(SCALE, TUNING)
    edge.x = -edge.w  # still touching the left edge
    obstacles = [gone, edge]
    report = resolve_collisions(player, obstacles, [])
    assert report.hit is None
    assert obstacles == [edge]


def test_cups_collected_or_pruned() -> None:
    player = spawn_player(SCALE, TUNING)
    grabbed = make_collectible(SCALE, TUNING, lift=20.0)
    grabbed.x = 230
    missed = make_collectible(SCALE, TUNING, lift=20.0)
    missed.x = -100
    ahead = make_collectible(SCALE, TUNING, lift=20.0)
    collectibles = [grabbed, missed, ahead]
    obstacles = [make_obstacle(SCALE, TUNING)]
    report = resolve_collisions(player, obstacles, collectibles)
    assert report.hit is None
    assert report.collected == [grabbed]
    assert report.points == 1
    assert collectibles == [ahead]
    assert len(obstacles) == 1

import math

from coffee_warrior.config import Tuning
from coffee_warrior.viewport import compute_scale_context


def test_design_size_is_unit_scale() -> None:
    ctx = compute_scale_context(800, 400)
    assert ctx.scale_factor == 1.0
    assert (ctx.canvas_width, ctx.canvas_height) == (800.0, 400.0)
    assert ctx.ground_y == 350.0


def test_wide_window_is_height_bound() -> None:
    ctx = compute_scale_context(1600, 400)
    assert ctx.scale_factor == 1.0
    assert ctx.canvas_width == 800.0


def test_tall_window_is_width_bound() -> None:
    ctx = compute_scale_context(1000, 1000)
    assert math.isclose(ctx.scale_factor, 1.25)
    assert math.isclose(ctx.canvas_width, 1000.0)
    assert math.isclose(ctx.canvas_height, 500.0)
    assert math.isclose(ctx.ground_y, 500.0 - 50 * 1.25)


def test_canvas_fits_inside_available_area_and_keeps_aspect() -> None:
    for w, h in [(1024, 768), (333, 999), (1920, 1080), (801, 399)]:
        ctx = compute_scale_context(w, h)
        assert ctx.canvas_width <= w + 1e-9
        assert ctx.canvas_height <= h + 1e-9
        assert math.isclose(ctx.canvas_width / ctx.canvas_height, 2.0)


def test_degenerate_sizes_clamp_to_one_pixel() -> None:
    ctx = compute_scale_context(0, -5)
    assert ctx.scale_factor > 0
    assert ctx.canvas_width >= 1
    assert ctx.canvas_height >= 1


def test_idempotent() -> None:
    tuning = Tuning(ground_height=40)
    assert compute_scale_context(1234, 567, tuning) == compute_scale_context(1234, 567, tuning)

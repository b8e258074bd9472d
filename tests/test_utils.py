import numpy as np

from coffee_warrior.utils import clamp, procedural_noise_surface, scale_color, tuft_noise


def test_clamp_basic() -> None:
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10
    assert clamp(3, 5, 4) == 5


def test_scale_color_clamps_channels() -> None:
    assert scale_color((100, 200, 50), 2.0) == (200, 255, 100)
    assert scale_color((100, 200, 50, 128), 0.0) == (0, 0, 0)


def test_noise_surface_blends_between_colours() -> None:
    flat = procedural_noise_surface(4, 3, lambda X, Y: np.zeros_like(X), base=(10, 20, 30), dark=(0, 0, 0))
    assert flat.shape == (4, 3, 3)
    assert flat.dtype == np.uint8
    assert (flat == np.array([10, 20, 30], dtype=np.uint8)).all()

    full = procedural_noise_surface(2, 2, lambda X, Y: np.ones_like(X), base=(10, 20, 30), dark=(200, 100, 0))
    assert (full == np.array([200, 100, 0], dtype=np.uint8)).all()


def test_tuft_noise_in_unit_range() -> None:
    X, Y = np.meshgrid(np.linspace(0, 1, 64), np.linspace(0, 1, 16), indexing="ij")
    v = tuft_noise(X, Y)
    assert v.min() >= 0.0
    assert v.max() <= 1.0

"""Colour and procedural-texture helpers used by the renderer."""

from __future__ import annotations

from typing import Callable

import numpy as np


def clamp(value: float, lo: float, hi: float) -> float:
    """Pin ``value`` between ``lo`` and ``hi``; ``lo`` wins if the range is empty."""
    return max(lo, min(hi, value))


def scale_color(color: tuple[int, int, int], factor: float) -> tuple[int, int, int]:
    """Lighten or darken a palette colour; any alpha channel is dropped."""
    r, g, b = color[:3]
    return (
        int(clamp(r * factor, 0, 255)),
        int(clamp(g * factor, 0, 255)),
        int(clamp(b * factor, 0, 255)),
    )


def procedural_noise_surface(
    w: int,
    h: int,
    noise_func: Callable[[np.ndarray, np.ndarray], np.ndarray],
    base: tuple[int, int, int] = (255, 255, 255),
    dark: tuple[int, int, int] = (0, 0, 0),
) -> np.ndarray:
    """Generate an RGB array by blending two colours with a noise field.

    Args:
        w, h: Dimensions.
        noise_func: Function taking X, Y meshgrids in [0, 1] and returning values in [0, 1].
        base, dark: Colours at noise 0 and noise 1.

    Returns:
        uint8 array shaped (w, h, 3), ready for ``pygame.surfarray.make_surface``.
    """
    x = np.linspace(0, 1, max(1, w), dtype=np.float32)
    y = np.linspace(0, 1, max(1, h), dtype=np.float32)
    X, Y = np.meshgrid(x, y, indexing="ij")
    v = np.clip(noise_func(X, Y), 0.0, 1.0)[..., None]
    base_arr = np.asarray(base, dtype=np.float32)
    dark_arr = np.asarray(dark, dtype=np.float32)
    rgb = base_arr * (1.0 - v) + dark_arr * v
    return np.clip(rgb, 0, 255).astype(np.uint8)


def tuft_noise(X: np.ndarray, Y: np.ndarray) -> np.ndarray:
    """Striated grass-tuft pattern for the ground band."""
    v = np.sin(X * 157.0 + np.sin(Y * 11.0) * 2.0) * 0.5
    v += np.sin(Y * 23.0 + np.sin(X * 61.0)) * 0.3
    v = np.abs(v)
    # Only the strongest ridges read as tufts
    return np.where(v > 0.55, (v - 0.55) / 0.45, 0.0)

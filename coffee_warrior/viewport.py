"""Letterboxed, aspect-locked canvas sizing."""

from __future__ import annotations

from dataclasses import dataclass

from .config import Tuning


@dataclass(frozen=True)
class ScaleContext:
    scale_factor: float
    canvas_width: float
    canvas_height: float
    ground_y: float


def compute_scale_context(
    available_width: float,
    available_height: float,
    tuning: Tuning | None = None,
) -> ScaleContext:
    """Fit the design canvas inside the available area without cropping.

    Whichever dimension binds first decides the scale factor; the other side is
    left with letterbox bars. Pure: the same input always yields the same context.
    """
    tuning = tuning or Tuning()
    available_width = max(1.0, float(available_width))
    available_height = max(1.0, float(available_height))

    width_if_fit_height = available_height * tuning.aspect_ratio
    if width_if_fit_height <= available_width:
        scale = available_height / tuning.design_height
    else:
        scale = available_width / tuning.design_width

    canvas_width = max(1.0, tuning.design_width * scale)
    canvas_height = max(1.0, tuning.design_height * scale)
    return ScaleContext(
        scale_factor=scale,
        canvas_width=canvas_width,
        canvas_height=canvas_height,
        ground_y=canvas_height - tuning.ground_height * scale,
    )

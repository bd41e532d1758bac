"""Value-to-pixel mapping for the balance chart."""

from __future__ import annotations

from .config import VALUE_DOMAIN_MAX, LayoutParams


def map_value_to_y(value: float, layout: LayoutParams) -> float:
    """Map a sample in [0, 100] to a y pixel inside the padded band.

    The axis is inverted: 0 lands on the band bottom, 100 on the band top.
    Values outside the domain are not clamped and extrapolate linearly.
    """
    top = layout.band_top
    bottom = layout.band_bottom
    return bottom - (float(value) / VALUE_DOMAIN_MAX) * (bottom - top)


def step_size(count: int, layout: LayoutParams) -> float:
    # A single sample has no spacing.
    if count <= 1:
        return 0.0
    return layout.usable_width / (count - 1)


def sample_x(index: int, count: int, layout: LayoutParams) -> float:
    return layout.padding_x + step_size(count, layout) * index


__all__ = ["map_value_to_y", "sample_x", "step_size"]

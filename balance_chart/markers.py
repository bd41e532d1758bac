"""Marker and label anchors derived from the layout and the last sample."""

from __future__ import annotations

from typing import Sequence

from .config import LayoutParams
from .mapping import map_value_to_y
from .paths import Point
from .ui.theme import ChartStyle


def compute_marker_anchor(samples: Sequence[float], layout: LayoutParams) -> Point:
    """Centre of the marker disc sitting on the last sample.

    *samples* must not be empty.
    """
    x = layout.surface_width - layout.marker_inset_right
    return Point(x, map_value_to_y(samples[-1], layout))


def compute_label_anchor(layout: LayoutParams, style: ChartStyle) -> Point:
    return Point(
        layout.surface_width * style.label_x_ratio,
        layout.surface_height * style.label_y_ratio + style.label_shift_y,
    )


def compute_magnified_label_anchor(layout: LayoutParams, style: ChartStyle) -> Point:
    """Baseline of the enlarged copy of the label drawn inside the area clip."""
    base = compute_label_anchor(layout, style)
    dx, dy = style.magnified_offset
    return Point(base.x + dx, base.y + style.label_font_size + dy)


__all__ = [
    "compute_label_anchor",
    "compute_magnified_label_anchor",
    "compute_marker_anchor",
]

"""Compose every geometric output of one chart render."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .config import LayoutParams
from .markers import compute_label_anchor, compute_magnified_label_anchor, compute_marker_anchor
from .paths import PathDescriptor, Point, build_area_path, build_smooth_path
from .ui.theme import ChartStyle


@dataclass(frozen=True)
class ChartGeometry:
    layout: LayoutParams
    curve: PathDescriptor
    area: PathDescriptor
    marker: Optional[Point]
    label: Point
    magnified_label: Point


def build_chart(samples: Sequence[float], layout: LayoutParams, style: ChartStyle) -> ChartGeometry:
    values = tuple(float(v) for v in samples)
    return ChartGeometry(
        layout=layout,
        curve=build_smooth_path(values, layout),
        area=build_area_path(values, layout),
        # No marker without a last sample.
        marker=compute_marker_anchor(values, layout) if values else None,
        label=compute_label_anchor(layout, style),
        magnified_label=compute_magnified_label_anchor(layout, style),
    )


__all__ = ["ChartGeometry", "build_chart"]

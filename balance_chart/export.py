"""Headless export of a period chart to SVG or PNG."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from .chart import build_chart
from .config import LayoutParams, get_current_layout
from .periods import DEFAULT_PERIOD, get_period
from .ui.mpl_backend import MatplotlibRenderer
from .ui.svg_backend import SvgRenderer
from .ui.theme import ChartStyle
from .ui.theming import theme

logger = logging.getLogger(__name__)

EXPORT_SUFFIXES = (".svg", ".png")


def _resolve(period: str, samples: Optional[Sequence[float]]):
    if samples is not None:
        return list(samples), ""
    data = get_period(period)
    return list(data.points), data.balance


def render_svg(
    period: str = DEFAULT_PERIOD,
    layout: Optional[LayoutParams] = None,
    style: Optional[ChartStyle] = None,
    samples: Optional[Sequence[float]] = None,
) -> str:
    """Return the SVG document of a period, or of explicit *samples* without label."""
    layout = layout or get_current_layout()
    style = style or theme()
    points, balance = _resolve(period, samples)
    renderer = SvgRenderer(layout, style)
    renderer.draw_chart(build_chart(points, layout, style), balance)
    return renderer.document()


def export_chart(
    path: str | Path,
    period: str = DEFAULT_PERIOD,
    layout: Optional[LayoutParams] = None,
    style: Optional[ChartStyle] = None,
    samples: Optional[Sequence[float]] = None,
) -> Path:
    target = Path(path)
    suffix = target.suffix.lower()
    if suffix not in EXPORT_SUFFIXES:
        raise ValueError(f"Format d'export non supporté : {suffix or '(aucun)'} (attendu : .svg ou .png)")
    layout = layout or get_current_layout()
    style = style or theme()
    points, balance = _resolve(period, samples)
    geometry = build_chart(points, layout, style)
    logger.debug("Export : %d échantillons, %d commandes", len(points), len(geometry.curve))
    if suffix == ".svg":
        renderer = SvgRenderer(layout, style)
        renderer.draw_chart(geometry, balance)
        return renderer.write(target)
    renderer = MatplotlibRenderer(layout, style)
    renderer.draw_chart(geometry, balance)
    return renderer.save_png(target)


__all__ = ["EXPORT_SUFFIXES", "export_chart", "render_svg"]

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np
from matplotlib.colors import to_rgba
from matplotlib.figure import Figure
from matplotlib.patches import Circle, FancyBboxPatch, PathPatch
from matplotlib.path import Path as MplPath
from matplotlib.text import Text
from matplotlib.transforms import Affine2D

from ..config import LayoutParams
from ..paths import CLOSE, CURVE, LINE, MOVE, PathDescriptor, Point
from .renderer import Renderer
from .theme import ChartStyle

logger = logging.getLogger(__name__)

DPI = 100

_CODES = {
    MOVE: MplPath.MOVETO,
    CURVE: MplPath.CURVE4,
    LINE: MplPath.LINETO,
}


def to_mpl_path(path: PathDescriptor) -> MplPath:
    """Convert a descriptor to a matplotlib path in surface pixel coordinates."""
    vertices: List[Tuple[float, float]] = []
    codes: List[int] = []
    subpath_start = (0.0, 0.0)
    for cmd in path:
        if cmd.op == CLOSE:
            vertices.append(subpath_start)
            codes.append(MplPath.CLOSEPOLY)
            continue
        code = _CODES[cmd.op]
        if cmd.op == MOVE:
            subpath_start = (cmd.points[0].x, cmd.points[0].y)
        for p in cmd.points:
            vertices.append((p.x, p.y))
            codes.append(code)
    if not vertices:
        return MplPath(np.empty((0, 2)))
    return MplPath(np.array(vertices, dtype=float), np.array(codes, dtype=MplPath.code_type))


def _px_to_pt(px: float) -> float:
    return float(px) * 72.0 / DPI


class MatplotlibRenderer(Renderer):
    """Draws the chart on a matplotlib :class:`Figure` sized to the surface.

    The axis spans the surface in pixels with y growing downwards, so path
    coordinates are used as they are.
    """

    def __init__(self, layout: LayoutParams, style: ChartStyle, figure: Optional[Figure] = None):
        super().__init__(layout, style)
        w, h = layout.surface_width, layout.surface_height
        self.fig = figure if figure is not None else Figure(figsize=(w / DPI, h / DPI), dpi=DPI)
        self.ax = self.fig.add_axes([0.0, 0.0, 1.0, 1.0])
        self._configure_axes()

    def _configure_axes(self) -> None:
        w, h = self.layout.surface_width, self.layout.surface_height
        self.ax.set_xlim(0.0, w)
        self.ax.set_ylim(h, 0.0)
        self.ax.set_axis_off()
        self.fig.set_facecolor(self.style.card_bg)

    def clear(self) -> None:
        self.ax.clear()
        self._configure_axes()

    def render(
        self,
        path: PathDescriptor,
        *,
        stroke: Optional[str] = None,
        stroke_width: float = 0.0,
        stroke_alpha: float = 1.0,
        fill: Optional[str] = None,
        fill_alpha: float = 1.0,
        offset: Tuple[float, float] = (0.0, 0.0),
    ) -> Optional[PathPatch]:
        if not path:
            return None
        patch = PathPatch(
            to_mpl_path(path),
            facecolor=to_rgba(fill, fill_alpha) if fill else "none",
            edgecolor=to_rgba(stroke, stroke_alpha) if stroke else "none",
            linewidth=_px_to_pt(stroke_width) if stroke else 0.0,
            capstyle="round",
            joinstyle="round",
        )
        dx, dy = offset
        if dx or dy:
            patch.set_transform(Affine2D().translate(dx, dy) + self.ax.transData)
        self.ax.add_patch(patch)
        return patch

    def render_background(self) -> None:
        s = self.style
        w, h = self.layout.surface_width, self.layout.surface_height
        box = FancyBboxPatch(
            (0.0, 0.0), w, h,
            boxstyle=f"round,pad=0,rounding_size={s.corner_radius}",
            facecolor=s.chart_bg,
            edgecolor="none",
            zorder=0,
        )
        self.ax.add_patch(box)
        # Vertical gradient reaching the bottom colour at 70 % of the height.
        rows = 64
        t = np.clip(np.linspace(0.0, 1.0, rows) / 0.7, 0.0, 1.0)[:, None]
        top = np.array(to_rgba(s.gradient_top, s.gradient_top_alpha))
        bottom = np.array(to_rgba(s.gradient_bottom, 1.0))
        gradient = (top + (bottom - top) * t)[:, None, :]
        image = self.ax.imshow(
            gradient,
            extent=(0.0, w, h, 0.0),
            aspect="auto",
            interpolation="bilinear",
            zorder=0,
        )
        image.set_clip_path(box)
        self._render_inner_shadow(box)
        # imshow resets the limits.
        self.ax.set_xlim(0.0, w)
        self.ax.set_ylim(h, 0.0)

    def _shade(self, alpha: np.ndarray, extent: Tuple[float, float, float, float], box) -> None:
        rgba = np.zeros(alpha.shape + (4,))
        rgba[..., 3] = alpha
        image = self.ax.imshow(rgba, extent=extent, aspect="auto", interpolation="bilinear", zorder=0)
        image.set_clip_path(box)

    def _render_inner_shadow(self, box: FancyBboxPatch) -> None:
        s = self.style
        w, h = self.layout.surface_width, self.layout.surface_height
        fade = np.linspace(1.0, 0.0, 32)
        if s.top_shade_alpha > 0:
            self._shade(s.top_shade_alpha * fade[:, None], (0.0, w, s.top_shade_height, 0.0), box)
        if s.left_shade_alpha > 0:
            self._shade(s.left_shade_alpha * fade[None, :], (0.0, s.left_shade_width, h, 0.0), box)
        if s.corner_shade_alpha > 0:
            # Radial fade centred on the outer corner of the square.
            u = np.linspace(0.0, 1.0, 32)
            dist = np.hypot(u[None, :], u[:, None])
            o, size = s.corner_shade_origin, s.corner_shade_size
            self._shade(s.corner_shade_alpha * np.clip(1.0 - dist, 0.0, 1.0), (o, o + size, o + size, o), box)

    def render_text(
        self,
        text: str,
        anchor: Point,
        *,
        font_size: float,
        color: str,
        alpha: float = 1.0,
        clip: Optional[PathDescriptor] = None,
    ) -> Text:
        # Famille et graisse viennent des rcParams poussés par apply_theme().
        artist = self.ax.text(
            anchor.x,
            anchor.y,
            text,
            fontsize=_px_to_pt(font_size),
            color=to_rgba(color, alpha),
            va="baseline",
            ha="left",
            zorder=1,
        )
        if clip:
            clip_patch = PathPatch(to_mpl_path(clip), facecolor="none", edgecolor="none")
            clip_patch.set_transform(self.ax.transData)
            # Text artists are created with clipping disabled.
            artist.set_clip_on(True)
            artist.set_clip_path(clip_patch)
        return artist

    def render_marker(self, anchor: Point) -> None:
        s = self.style
        self.ax.add_patch(Circle(
            (anchor.x, anchor.y),
            s.marker_radius - s.marker_border_width / 2.0,
            facecolor=s.marker_color,
            edgecolor=s.marker_border,
            linewidth=_px_to_pt(s.marker_border_width),
            zorder=5,
        ))

    def save_png(self, path: str | Path) -> Path:
        target = Path(path)
        self.fig.savefig(target, dpi=DPI, facecolor=self.fig.get_facecolor())
        logger.info("PNG exporté : %s", target)
        return target


__all__ = ["DPI", "MatplotlibRenderer", "to_mpl_path"]

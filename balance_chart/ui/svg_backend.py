"""Server-side SVG emission of the balance chart."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple
from xml.sax.saxutils import escape, quoteattr

from ..config import LayoutParams
from ..paths import PathDescriptor, Point
from ..utils import fmt_number as _fmt
from .renderer import Renderer
from .theme import ChartStyle

logger = logging.getLogger(__name__)


class SvgRenderer(Renderer):
    """Collects SVG elements; :meth:`document` returns the full ``<svg>`` text."""

    def __init__(self, layout: LayoutParams, style: ChartStyle):
        super().__init__(layout, style)
        self._defs: List[str] = []
        self._body: List[str] = []
        self._clip_ids: dict[str, str] = {}

    def _clip_id(self, path: PathDescriptor) -> str:
        d = path.to_svg()
        if d not in self._clip_ids:
            clip_id = f"graphClip{len(self._clip_ids)}"
            self._clip_ids[d] = clip_id
            self._defs.append(f'<clipPath id="{clip_id}"><path d="{d}"/></clipPath>')
        return self._clip_ids[d]

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
    ) -> None:
        if not path:
            return
        attrs = [f'd="{path.to_svg()}"', f'fill="{fill or "none"}"']
        if fill:
            attrs.append(f'fill-opacity="{_fmt(fill_alpha)}"')
        if stroke:
            attrs += [
                f'stroke="{stroke}"',
                f'stroke-width="{_fmt(stroke_width)}"',
                f'stroke-opacity="{_fmt(stroke_alpha)}"',
                'stroke-linecap="round"',
            ]
        dx, dy = offset
        if dx or dy:
            attrs.append(f'transform="translate({_fmt(dx)} {_fmt(dy)})"')
        self._body.append(f"<path {' '.join(attrs)}/>")

    def render_background(self) -> None:
        s = self.style
        w, h = _fmt(self.layout.surface_width), _fmt(self.layout.surface_height)
        self._defs.append(
            '<linearGradient id="bgGrad" x1="0" y1="0" x2="0" y2="0.7">'
            f'<stop offset="0" stop-color="{s.gradient_top}" stop-opacity="{_fmt(s.gradient_top_alpha)}"/>'
            f'<stop offset="1" stop-color="{s.gradient_bottom}" stop-opacity="1"/>'
            "</linearGradient>"
        )
        r = _fmt(s.corner_radius)
        self._body.append(f'<rect x="0" y="0" width="{w}" height="{h}" rx="{r}" fill="{s.chart_bg}"/>')
        self._body.append(f'<rect x="0" y="0" width="{w}" height="{h}" rx="{r}" fill="url(#bgGrad)"/>')
        self._render_inner_shadow()

    def _render_inner_shadow(self) -> None:
        s = self.style
        w, h = _fmt(self.layout.surface_width), _fmt(self.layout.surface_height)
        r = _fmt(s.corner_radius)
        if s.top_shade_alpha > 0:
            self._defs.append(
                '<linearGradient id="topShade" x1="0" y1="0" x2="0" y2="1">'
                f'<stop offset="0" stop-color="#000000" stop-opacity="{_fmt(s.top_shade_alpha)}"/>'
                '<stop offset="1" stop-color="#000000" stop-opacity="0"/>'
                "</linearGradient>"
            )
            self._body.append(
                f'<rect x="0" y="0" width="{w}" height="{_fmt(s.top_shade_height)}" rx="{r}" fill="url(#topShade)"/>'
            )
        if s.left_shade_alpha > 0:
            self._defs.append(
                '<linearGradient id="leftShade" x1="0" y1="0" x2="1" y2="0">'
                f'<stop offset="0" stop-color="#000000" stop-opacity="{_fmt(s.left_shade_alpha)}"/>'
                '<stop offset="1" stop-color="#000000" stop-opacity="0"/>'
                "</linearGradient>"
            )
            self._body.append(
                f'<rect x="0" y="0" width="{_fmt(s.left_shade_width)}" height="{h}" rx="{r}" fill="url(#leftShade)"/>'
            )
        if s.corner_shade_alpha > 0:
            o, size = _fmt(s.corner_shade_origin), _fmt(s.corner_shade_size)
            self._defs.append(
                '<radialGradient id="cornerShade" cx="0" cy="0" r="1">'
                f'<stop offset="0" stop-color="#000000" stop-opacity="{_fmt(s.corner_shade_alpha)}"/>'
                '<stop offset="1" stop-color="#000000" stop-opacity="0"/>'
                "</radialGradient>"
            )
            self._body.append(
                f'<rect x="{o}" y="{o}" width="{size}" height="{size}" fill="url(#cornerShade)"/>'
            )

    def render_text(
        self,
        text: str,
        anchor: Point,
        *,
        font_size: float,
        color: str,
        alpha: float = 1.0,
        clip: Optional[PathDescriptor] = None,
    ) -> None:
        element = (
            f'<text x="{_fmt(anchor.x)}" y="{_fmt(anchor.y)}" font-size="{_fmt(font_size)}" '
            f'font-family={quoteattr(self.style.label_font)} font-weight="{self.style.label_weight}" '
            f'fill="{color}" fill-opacity="{_fmt(alpha)}">{escape(text)}</text>'
        )
        if clip:
            element = f'<g clip-path="url(#{self._clip_id(clip)})">{element}</g>'
        self._body.append(element)

    def render_marker(self, anchor: Point) -> None:
        s = self.style
        # The border is drawn inside the disc footprint.
        r = s.marker_radius - s.marker_border_width / 2.0
        self._body.append(
            f'<circle cx="{_fmt(anchor.x)}" cy="{_fmt(anchor.y)}" r="{_fmt(r)}" '
            f'fill="{s.marker_color}" stroke="{s.marker_border}" '
            f'stroke-width="{_fmt(s.marker_border_width)}"/>'
        )

    def document(self) -> str:
        w, h = _fmt(self.layout.surface_width), _fmt(self.layout.surface_height)
        lines = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}">'
        ]
        if self._defs:
            lines.append("  <defs>")
            lines += [f"    {item}" for item in self._defs]
            lines.append("  </defs>")
        lines += [f"  {item}" for item in self._body]
        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    def write(self, path: str | Path) -> Path:
        target = Path(path)
        target.write_text(self.document(), encoding="utf-8")
        logger.info("SVG exporté : %s", target)
        return target


__all__ = ["SvgRenderer"]

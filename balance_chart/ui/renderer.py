"""Backend-agnostic drawing of a composed chart.

A backend only needs to know how to paint a path, a piece of text, a marker
disc and the card background; :meth:`Renderer.draw_chart` decides the layer
order shared by every backend.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..chart import ChartGeometry
from ..config import LayoutParams
from ..paths import PathDescriptor, Point
from .theme import ChartStyle


class Renderer(ABC):
    def __init__(self, layout: LayoutParams, style: ChartStyle):
        self.layout = layout
        self.style = style

    @abstractmethod
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
        """Paint *path*; an empty descriptor paints nothing."""

    @abstractmethod
    def render_background(self) -> None:
        ...

    @abstractmethod
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
        ...

    @abstractmethod
    def render_marker(self, anchor: Point) -> None:
        ...

    # Composition ------------------------------------------------------
    def render_shadows(self, curve: PathDescriptor) -> None:
        s = self.style
        for extra, alpha in s.shadow_passes:
            self.render(
                curve,
                stroke="#000000",
                stroke_width=s.line_width + extra,
                stroke_alpha=alpha,
                offset=s.shadow_offset,
            )

    def draw_chart(self, geometry: ChartGeometry, balance: str = "") -> None:
        s = self.style
        self.render_background()
        if balance:
            # The label anchor is the top of the text box; backends expect a baseline.
            self.render_text(
                balance,
                Point(geometry.label.x, geometry.label.y + s.label_font_size),
                font_size=s.label_font_size,
                color=s.label_color,
                alpha=s.label_alpha,
            )
        if s.shadow_layer == "under-fill":
            self.render_shadows(geometry.curve)
        self.render(geometry.area, fill=s.fill_color, fill_alpha=s.fill_alpha)
        if s.shadow_layer == "between":
            self.render_shadows(geometry.curve)
        self.render(
            geometry.curve,
            stroke=s.line_color,
            stroke_width=s.line_width,
            stroke_alpha=s.line_alpha,
        )
        if s.shadow_layer == "over-line":
            self.render_shadows(geometry.curve)
        if balance and geometry.area:
            self.render_text(
                balance,
                geometry.magnified_label,
                font_size=s.magnified_font_size,
                color=s.magnified_color,
                clip=geometry.area,
            )
        if geometry.marker is not None:
            self.render_marker(geometry.marker)


__all__ = ["Renderer"]

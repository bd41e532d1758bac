from __future__ import annotations

from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.figure import Figure

from ..chart import build_chart
from ..config import LayoutParams
from ..periods import DEFAULT_PERIOD, get_period
from .mpl_backend import DPI, MatplotlibRenderer
from .theming import theme


class BalanceChartWidget:
    """
    Affiche la courbe lissée du solde pour une période.
    - Courbe + remplissage + ombres dessinés par MatplotlibRenderer.
    - Changement de période via .show(period).
    """

    def __init__(self, parent, layout: LayoutParams, period: str = DEFAULT_PERIOD):
        self.layout = layout
        self.period = period
        self.fig = Figure(figsize=(layout.surface_width / DPI, layout.surface_height / DPI), dpi=DPI)
        self.renderer = MatplotlibRenderer(layout, theme(), figure=self.fig)
        self.canvas = FigureCanvasTkAgg(self.fig, master=parent)
        self.widget = self.canvas.get_tk_widget()
        self.show(period)

    def pack(self, **kwargs):  # pragma: no cover - wrapper Tk
        self.widget.pack(**kwargs)

    def grid(self, **grid_kw):  # pragma: no cover
        self.widget.grid(**grid_kw)

    def place(self, **kwargs):  # pragma: no cover
        self.widget.place(**kwargs)

    def show(self, period: str) -> None:
        data = get_period(period)
        self.period = period
        self.renderer.style = theme()
        self.renderer.clear()
        self.renderer.draw_chart(build_chart(data.points, self.layout, self.renderer.style), data.balance)
        self.canvas.draw_idle()


__all__ = ["BalanceChartWidget"]

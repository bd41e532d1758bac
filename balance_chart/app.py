from __future__ import annotations

import argparse
import logging
import os
import sys
import tkinter as tk
from tkinter import ttk
from typing import Optional, Sequence

from .config import get_current_layout, load_layout_from_disk
from .export import export_chart
from .periods import DEFAULT_PERIOD, PERIODS
from .ui.chart_widget import BalanceChartWidget
from .ui.theme import THEMES
from .ui.theming import apply_theme, theme
from .utils import parse_samples

logger = logging.getLogger(__name__)


class ChartApp(tk.Tk):
    def __init__(self, period: str = DEFAULT_PERIOD):
        super().__init__()
        t = theme()
        self.title("Solde")
        self.configure(bg=t.card_bg)
        self.resizable(False, False)
        self.layout = get_current_layout()
        self.active_period = period
        self._tabs: dict[str, ttk.Button] = {}
        self._init_styles()
        self._build_ui()
        self._refresh_tabs()
        self.bind_all("<Left>", lambda e: self._step_period(-1))
        self.bind_all("<Right>", lambda e: self._step_period(1))

    def _init_styles(self) -> None:
        t = theme()
        style = ttk.Style(self)
        style.configure("Tab.TButton", background=t.card_bg, foreground="#9AA1A8",
                        borderwidth=0, padding=(12, 6), font=("TkDefaultFont", 9))
        style.configure("TabActive.TButton", background=t.marker_color, foreground="#FFFFFF",
                        borderwidth=0, padding=(12, 6), font=("TkDefaultFont", 9, "bold"))
        style.configure("Card.TFrame", background=t.card_bg)

    def _build_ui(self) -> None:
        card = ttk.Frame(self, style="Card.TFrame", padding=16)
        card.pack(fill="both", expand=True)
        self.chart = BalanceChartWidget(card, self.layout, self.active_period)
        self.chart.pack(fill="x")
        tabs = ttk.Frame(card, style="Card.TFrame")
        tabs.pack(fill="x", pady=(14, 0))
        for name in PERIODS:
            btn = ttk.Button(tabs, text=name, style="Tab.TButton",
                             command=lambda p=name: self.select_period(p))
            btn.pack(side="left", expand=True, padx=4)
            self._tabs[name] = btn

    def _refresh_tabs(self) -> None:
        for name, btn in self._tabs.items():
            btn.configure(style="TabActive.TButton" if name == self.active_period else "Tab.TButton")

    def _step_period(self, delta: int) -> None:
        idx = PERIODS.index(self.active_period)
        self.select_period(PERIODS[(idx + delta) % len(PERIODS)])

    def select_period(self, period: str) -> None:
        if period == self.active_period:
            return
        self.active_period = period
        self.chart.show(period)
        self._refresh_tabs()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Courbe lissée du solde par période.")
    parser.add_argument("--period", choices=PERIODS, default=DEFAULT_PERIOD)
    parser.add_argument("--theme", choices=sorted(THEMES), default="light")
    parser.add_argument("--layout", metavar="FICHIER", help="surcharges de mise en page (JSON)")
    parser.add_argument("--export", metavar="FICHIER", help="exporter en .svg ou .png sans fenêtre")
    parser.add_argument("--samples", metavar="VALEURS", help="échantillons explicites, ex. \"40 26 22 72\" (export)")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.samples is not None and not args.export:
        print("Erreur : --samples n'a d'effet qu'avec --export", file=sys.stderr)
        return 2
    if args.layout and not os.path.isfile(args.layout):
        print(f"Erreur : fichier de mise en page introuvable : {args.layout}", file=sys.stderr)
        return 2
    apply_theme(args.theme)
    load_layout_from_disk(args.layout)
    if args.export:
        try:
            samples = parse_samples(args.samples) if args.samples is not None else None
            target = export_chart(args.export, args.period, samples=samples)
        except ValueError as exc:
            print(f"Erreur : {exc}", file=sys.stderr)
            return 2
        print(target)
        return 0
    logger.info("Démarrage de la fenêtre (%s)", args.period)
    app = ChartApp(args.period)
    app.mainloop()
    return 0


__all__ = ["ChartApp", "main"]

from __future__ import annotations

from matplotlib import rcParams

from .theme import THEMES, ChartStyle

_current_theme: ChartStyle = THEMES["light"]


def apply_theme(name: str) -> ChartStyle:
    """Select the current style and push its label font to matplotlib.

    The matplotlib backend leaves family and weight of its texts to
    ``rcParams``; an unknown *name* keeps the current style.
    """
    global _current_theme
    _current_theme = THEMES.get(name, _current_theme)
    t = _current_theme
    rcParams.update({
        # K2D n'est pas toujours installée : repli sur la police par défaut
        "font.family": [t.label_font, "sans-serif"],
        "font.weight": t.label_weight,
    })
    return t


def theme() -> ChartStyle:
    return _current_theme

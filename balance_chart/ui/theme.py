from dataclasses import dataclass
from typing import Tuple

SHADOW_LAYERS = ("under-fill", "between", "over-line")


@dataclass(frozen=True)
class ChartStyle:
    name: str
    card_bg: str             # fond de la carte
    chart_bg: str            # fond du graphique
    gradient_top: str        # dégradé du fond (haut)
    gradient_top_alpha: float
    gradient_bottom: str     # dégradé du fond (bas)
    line_color: str          # TRAIT de la courbe
    line_alpha: float
    line_width: float
    fill_color: str          # REMPLISSAGE sous la courbe
    fill_alpha: float
    shadow_layer: str        # "under-fill" | "between" | "over-line"
    shadow_offset: Tuple[float, float]
    # (largeur ajoutée au trait, opacité) pour chaque passe d'ombre, du plus large au plus fin
    shadow_passes: Tuple[Tuple[float, float], ...]
    marker_color: str
    marker_border: str
    marker_radius: float
    marker_border_width: float
    label_color: str
    label_alpha: float
    label_font_size: float
    label_font: str
    label_x_ratio: float
    label_y_ratio: float
    label_shift_y: float
    magnified_color: str
    magnified_font_size: float
    magnified_offset: Tuple[float, float]
    corner_radius: float
    label_weight: int = 600
    # Ombre intérieure de la carte (bord haut, bord gauche, coin haut-gauche)
    top_shade_alpha: float = 0.09
    top_shade_height: float = 7.0
    left_shade_alpha: float = 0.0
    left_shade_width: float = 9.0
    corner_shade_alpha: float = 0.11
    corner_shade_origin: float = -12.0
    corner_shade_size: float = 46.0

    def __post_init__(self) -> None:
        if self.shadow_layer not in SHADOW_LAYERS:
            raise ValueError(f"shadow_layer inconnu : {self.shadow_layer!r}")


# Ombres portées de la courbe (reprises de la maquette mobile)
_SHADOW_PASSES = (
    (26.0, 0.02),
    (20.0, 0.03),
    (15.0, 0.01),
    (10.0, 0.06),
    (1.0, 0.08),
)


LIGHT = ChartStyle(
    name="light",
    card_bg="#FFFFFF",
    chart_bg="#F1F2F4",
    gradient_top="#3170f7",
    gradient_top_alpha=0.1,
    gradient_bottom="#FFFFFF",
    line_color="#ffffff",
    line_alpha=0.64,
    line_width=1.0,
    fill_color="#ffffff",
    fill_alpha=0.4,
    shadow_layer="between",
    shadow_offset=(-2.0, -2.0),
    shadow_passes=_SHADOW_PASSES,
    marker_color="#2F80FF",
    marker_border="#FFFFFF",
    marker_radius=10.0,
    marker_border_width=3.0,
    label_color="#2272ff",
    label_alpha=0.9,
    label_font_size=54.0,
    label_font="K2D",
    label_x_ratio=0.18,
    label_y_ratio=0.43,
    label_shift_y=-26.0,
    magnified_color="#2272ff",
    magnified_font_size=58.0,
    magnified_offset=(-14.0, 28.0),
    corner_radius=26.0,
)


DARK = ChartStyle(
    name="dark",
    card_bg="#0f172a",
    chart_bg="#1f2937",
    gradient_top="#22c55e",
    gradient_top_alpha=0.12,
    gradient_bottom="#111827",
    line_color="#e5e7eb",
    line_alpha=0.8,
    line_width=1.0,
    fill_color="#22c55e",
    fill_alpha=0.2,
    shadow_layer="between",
    shadow_offset=(-2.0, -2.0),
    shadow_passes=_SHADOW_PASSES,
    marker_color="#22c55e",
    marker_border="#e5e7eb",
    marker_radius=10.0,
    marker_border_width=3.0,
    label_color="#e5e7eb",
    label_alpha=0.9,
    label_font_size=54.0,
    label_font="K2D",
    label_x_ratio=0.18,
    label_y_ratio=0.43,
    label_shift_y=-26.0,
    magnified_color="#22c55e",
    magnified_font_size=58.0,
    magnified_offset=(-14.0, 28.0),
    corner_radius=26.0,
)


THEMES = {
    "light": LIGHT,
    "dark": DARK,
}

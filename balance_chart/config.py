"""Chart layout parameters and their persisted user overrides.

- Valeurs par défaut de la surface de dessin (carte 390x180 px)
- Chargement / sauvegarde JSON des surcharges de mise en page
- Accès uniforme à la mise en page "courante" (override sinon défaut)
"""

from __future__ import annotations

import json
import logging
import numbers
import os
from dataclasses import asdict, dataclass, fields, replace as _replace
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

# Lead-in: synthetic point below the baseline, left of the drawing area.
LEAD_IN_OVERSHOOT = 6.0
# Handle deltas of the entry Bezier (lead-in side, first-sample side).
LEAD_IN_HANDLE = (14.0, -14.0)
ENTRY_HANDLE = (-14.0, 10.0)

VALUE_DOMAIN_MAX = 100.0

CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".balance_chart")
LAYOUT_PATH = os.path.join(CONFIG_DIR, "layout.json")


@dataclass(frozen=True)
class LayoutParams:
    surface_width: float = 390.0
    surface_height: float = 180.0
    padding_top: float = 26.0
    padding_bottom: float = 20.0
    lead_in_x: float = -32.0
    smoothness: float = 0.2
    marker_inset_right: float = 30.0
    padding_x: float = 0.0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ValueError(f"{f.name} doit être numérique, reçu {value!r}")
            object.__setattr__(self, f.name, float(value))
        if self.surface_width <= 0 or self.surface_height <= 0:
            raise ValueError("La surface de dessin doit avoir une taille > 0.")
        if self.smoothness <= 0:
            raise ValueError("smoothness doit être > 0.")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LayoutParams":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Clés de mise en page inconnues : {', '.join(unknown)}")
        return cls(**dict(data))

    def to_dict(self) -> dict:
        return asdict(self)

    def replace(self, **changes: Any) -> "LayoutParams":
        return _replace(self, **changes)

    # Derived geometry ---------------------------------------------------
    @property
    def band_top(self) -> float:
        return self.padding_top

    @property
    def band_bottom(self) -> float:
        return self.surface_height - self.padding_bottom

    @property
    def usable_width(self) -> float:
        return self.surface_width - self.padding_x * 2

    @property
    def lead_in_y(self) -> float:
        return self.surface_height + LEAD_IN_OVERSHOOT


DEFAULT_LAYOUT = LayoutParams()

# --- Etat courant (en mémoire) ---
_CURRENT: LayoutParams = DEFAULT_LAYOUT


def get_current_layout() -> LayoutParams:
    """Retourne la mise en page courante (override s'il existe, sinon défaut)."""
    return _CURRENT


def set_current_layout(layout: LayoutParams) -> None:
    global _CURRENT
    _CURRENT = layout


def reset_layout_to_default() -> None:
    set_current_layout(DEFAULT_LAYOUT)


def load_layout_from_disk(path: Optional[str] = None) -> bool:
    """Charge la mise en page depuis le disque. Retourne True si OK."""
    target = path or LAYOUT_PATH
    if not os.path.exists(target):
        if path:
            logger.warning("Mise en page introuvable : %s", target)
        reset_layout_to_default()
        return False
    try:
        with open(target, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("le fichier doit contenir un objet JSON")
        set_current_layout(LayoutParams.from_dict(data))
    except (OSError, ValueError, TypeError) as exc:
        logger.warning("Mise en page ignorée (%s) : %s", target, exc)
        reset_layout_to_default()
        return False
    logger.info("Mise en page chargée depuis %s", target)
    return True


def save_layout_to_disk(path: Optional[str] = None) -> str:
    target = path or LAYOUT_PATH
    folder = os.path.dirname(target)
    if folder:
        os.makedirs(folder, exist_ok=True)
    with open(target, "w", encoding="utf-8") as f:
        json.dump(_CURRENT.to_dict(), f, indent=2, ensure_ascii=False)
    logger.info("Mise en page enregistrée dans %s", target)
    return target


__all__ = [
    "CONFIG_DIR",
    "DEFAULT_LAYOUT",
    "ENTRY_HANDLE",
    "LAYOUT_PATH",
    "LEAD_IN_HANDLE",
    "LEAD_IN_OVERSHOOT",
    "LayoutParams",
    "VALUE_DOMAIN_MAX",
    "get_current_layout",
    "load_layout_from_disk",
    "reset_layout_to_default",
    "save_layout_to_disk",
    "set_current_layout",
]

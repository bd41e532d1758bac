"""Formatting helpers shared by the path serialiser and the backends."""

from __future__ import annotations

import math


def fmt_number(value: float) -> str:
    """Shortest text for a coordinate: ``-32`` rather than ``-32.0``, ``90.8`` as is."""
    value = float(value)
    if not math.isfinite(value):
        return repr(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def fmt_point(x: float, y: float) -> str:
    return f"{fmt_number(x)} {fmt_number(y)}"


def parse_samples(raw: str) -> list[float]:
    """Accept ``"40, 26 22;72"`` style input. Empty text gives an empty list.

    ``nan`` and ``inf`` are refused: they would leak into the path text.
    """
    text = (raw or "").replace(";", " ").replace(",", " ")
    values = []
    for tok in text.split():
        value = float(tok)
        if not math.isfinite(value):
            raise ValueError(f"Valeur non finie : {tok!r}")
        values.append(value)
    return values

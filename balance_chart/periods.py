"""Static sample sequences for each selectable time range."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class PeriodData:
    points: Tuple[float, ...]
    balance: str


class UnknownPeriodError(KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Période inconnue {self.name!r} (attendu : {', '.join(PERIODS)})"


PERIODS = ("24h", "1W", "1M", "3M", "1Y", "ALL")
DEFAULT_PERIOD = "24h"

PERIOD_DATA: Dict[str, PeriodData] = {
    "24h": PeriodData((40, 26, 22, 72, 82, 80, 88), "$ 11,950"),
    "1W": PeriodData((30, 45, 35, 60, 55, 70, 68, 75), "$ 12,450"),
    "1M": PeriodData((25, 35, 42, 38, 50, 48, 62, 58, 70, 75), "$ 13,200"),
    "3M": PeriodData((20, 25, 30, 28, 35, 40, 45, 50, 55, 60, 65, 70), "$ 14,850"),
    "1Y": PeriodData(
        (15, 18, 22, 25, 30, 28, 35, 40, 38, 45, 50, 55, 60, 58, 65, 70),
        "$ 16,750",
    ),
    "ALL": PeriodData(
        (10, 12, 15, 18, 20, 25, 30, 35, 40, 45, 50, 55, 60, 65, 70, 75, 78, 82),
        "$ 18,950",
    ),
}


def get_period(name: str) -> PeriodData:
    try:
        return PERIOD_DATA[name]
    except KeyError:
        raise UnknownPeriodError(name) from None


__all__ = ["DEFAULT_PERIOD", "PERIODS", "PERIOD_DATA", "PeriodData", "UnknownPeriodError", "get_period"]

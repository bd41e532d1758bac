import matplotlib

matplotlib.use("Agg")

import pytest

from balance_chart.config import DEFAULT_LAYOUT, reset_layout_to_default
from balance_chart.ui.theme import LIGHT
from balance_chart.ui.theming import apply_theme


@pytest.fixture(autouse=True)
def _reset_globals():
    yield
    reset_layout_to_default()
    apply_theme("light")


@pytest.fixture
def layout():
    return DEFAULT_LAYOUT


@pytest.fixture
def style():
    return LIGHT

import pytest

from balance_chart.utils import fmt_number, fmt_point, parse_samples


@pytest.mark.parametrize(
    "value, expected",
    [(-32.0, "-32"), (186, "186"), (90.8, "90.8"), (-0.0, "0"), (0.25, "0.25")],
)
def test_fmt_number(value, expected):
    assert fmt_number(value) == expected


def test_fmt_point():
    assert fmt_point(-14.0, 103.0) == "-14 103"


def test_parse_samples():
    assert parse_samples("40, 26 22;72") == [40.0, 26.0, 22.0, 72.0]
    assert parse_samples("") == []
    with pytest.raises(ValueError):
        parse_samples("40 abc")


@pytest.mark.parametrize("raw", ["nan", "inf", "40 -inf", "1e400"])
def test_parse_samples_rejects_non_finite(raw):
    with pytest.raises(ValueError, match="non finie"):
        parse_samples(raw)

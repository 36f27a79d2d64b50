import math

import pytest

from toolkits.fund_holdings.cells import EmptyCell, NumberCell, TextCell
from toolkits.fund_holdings.weights import normalize_weight


@pytest.mark.parametrize("value", [1.5, 5, 12.3, 100, 250])
def test_numbers_above_one_are_percentages(value):
    assert normalize_weight(value) == pytest.approx(value / 100)


@pytest.mark.parametrize("value", [0, 0.0, 0.0512, 0.5, 1, 1.0])
def test_fractions_pass_through(value):
    assert normalize_weight(value) == value


def test_full_holding_written_as_one_is_not_rescaled():
    assert normalize_weight(1.0) == 1.0
    assert normalize_weight(100) == 1.0


def test_negative_percentage_uses_magnitude():
    assert normalize_weight(-5) == pytest.approx(-0.05)
    assert normalize_weight("-0.25") == pytest.approx(-0.25)


@pytest.mark.parametrize("value", ["", None, EmptyCell(), "   ", "n/a", "--", float("nan")])
def test_blank_or_textual_values_are_unknown(value):
    assert normalize_weight(value) is None


def test_non_finite_numbers_are_unknown():
    assert normalize_weight(float("inf")) is None
    assert normalize_weight(NumberCell(-math.inf)) is None


def test_decimal_comma_and_percent_sign():
    assert normalize_weight("12,5%") == pytest.approx(0.125)
    assert normalize_weight(" 5.12 % ") == pytest.approx(0.0512)


def test_annotation_after_number_is_ignored():
    assert normalize_weight("1.23 (est.)") == pytest.approx(0.0123)
    assert normalize_weight(TextCell("approx 0.75")) == pytest.approx(0.75)


def test_text_fraction_is_kept():
    assert normalize_weight("0.031") == pytest.approx(0.031)

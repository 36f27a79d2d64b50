import pytest

from toolkits.fund_holdings.cells import EmptyCell, NumberCell, TextCell
from toolkits.fund_holdings.errors import MissingColumns
from toolkits.fund_holdings.headers import find_column, resolve_columns, SYMBOL_PREDICATES


def test_symbol_and_percent_weight():
    assert resolve_columns(["Symbol", "Weight (%)"]) == (0, 1)


def test_missing_columns_carries_header():
    with pytest.raises(MissingColumns) as excinfo:
        resolve_columns(["Name", "Value"])
    assert excinfo.value.header == ["Name", "Value"]


@pytest.mark.parametrize(
    "header, expected",
    [
        (["Name", "TICKER", "WEIGHT"], (1, 2)),
        ([" Ticker Symbol ", "Portfolio Weight (%)"], (0, 1)),
        (["Code", "Shares", "Weight%"], (0, 2)),
        (["Holding", "Ticker", "Market Value", "Weight(%)"], (1, 3)),
        (["Ticker", "% Weight (%)"], (0, 1)),
        (["Ticker", "Weight of Fund %"], (0, 1)),
    ],
)
def test_tolerant_header_names(header, expected):
    assert resolve_columns(header) == expected


def test_first_matching_column_wins():
    assert resolve_columns(["Ticker", "Symbol", "Weight", "Weight (%)"]) == (0, 2)


def test_symbol_match_is_exact():
    assert find_column(["Ticker Code", "Symbols", "Tickers"], SYMBOL_PREDICATES) == -1
    with pytest.raises(MissingColumns):
        resolve_columns(["Ticker Code", "Weight"])


def test_weight_requires_known_shape():
    with pytest.raises(MissingColumns):
        resolve_columns(["Ticker", "Weighting"])


def test_cells_are_stringified_before_matching():
    header = [EmptyCell(), NumberCell(2024.0), TextCell(" symbol "), TextCell("weight")]
    assert resolve_columns(header) == (2, 3)

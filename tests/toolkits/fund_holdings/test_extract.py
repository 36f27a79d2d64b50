import pytest

from toolkits.fund_holdings.cells import EmptyCell, NumberCell, TextCell
from toolkits.fund_holdings.errors import MissingColumns
from toolkits.fund_holdings.extract import extract_holdings


def test_empty_table_yields_nothing():
    assert extract_holdings([]) == []


def test_header_only_table_yields_nothing():
    assert extract_holdings([["Ticker", "Weight"]]) == []


def test_row_with_empty_symbol_is_dropped():
    assert extract_holdings([["Ticker", "Weight"], ["", "10"]]) == []
    assert extract_holdings([["Ticker", "Weight"], ["   ", "10"]]) == []


def test_extracts_in_order_with_duplicates():
    table = [
        ["Name", "Ticker", "Weight (%)"],
        ["Apple", "AAPL", "7.1"],
        ["Microsoft", " MSFT ", "6,5%"],
        ["Apple", "AAPL", "0.2"],
    ]
    records = extract_holdings(table)
    assert [record.symbol for record in records] == ["AAPL", "MSFT", "AAPL"]
    assert records[0].weight == pytest.approx(0.071)
    assert records[1].weight == pytest.approx(0.065)
    assert records[2].weight == pytest.approx(0.2)


def test_blank_and_short_rows():
    table = [
        [TextCell("Symbol"), TextCell("Shares"), TextCell("Weight")],
        None,
        [],
        [TextCell("CASH")],
        [EmptyCell(), NumberCell(10.0), NumberCell(0.5)],
        [NumberCell(700.0), NumberCell(1.0), NumberCell(3.25)],
    ]
    records = extract_holdings(table)
    assert [(record.symbol, record.weight) for record in records] == [
        ("CASH", None),
        ("700", pytest.approx(0.0325)),
    ]


def test_unresolvable_header_raises():
    with pytest.raises(MissingColumns):
        extract_holdings([["Name", "Value"], ["AAA", "1"]])

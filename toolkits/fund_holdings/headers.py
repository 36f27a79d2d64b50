"""Locate the ticker and weight columns in a holdings header row."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence

from .cells import Cell, to_cell
from .errors import MissingColumns

HeaderPredicate = Callable[[str], bool]


def _pattern(expr: str) -> HeaderPredicate:
    compiled = re.compile(expr, re.IGNORECASE)
    return lambda header: compiled.search(header) is not None


SYMBOL_PREDICATES: tuple[HeaderPredicate, ...] = (
    _pattern(r"^(ticker|symbol|ticker symbol|code)$"),
)

# Order matters: evaluated per column, first column with any hit wins.
WEIGHT_PREDICATES: tuple[HeaderPredicate, ...] = (
    _pattern(r"^weight.*%$"),
    _pattern(r"^%?\s*weight\s*\(%\)$"),
    _pattern(r"^weight$"),
    _pattern(r"portfolio\s*weight"),
)


def header_labels(header: Sequence[Cell | object]) -> list[str]:
    """Stringify and trim every header cell."""
    return [to_cell(value).text.strip() for value in header]


def find_column(labels: Sequence[str], predicates: Sequence[HeaderPredicate]) -> int:
    """Return the index of the first label matching any predicate, or -1."""
    for index, label in enumerate(labels):
        if any(predicate(label) for predicate in predicates):
            return index
    return -1


def resolve_columns(header: Sequence[Cell | object]) -> tuple[int, int]:
    """Return ``(symbol_index, weight_index)`` for a header row.

    Raises:
        MissingColumns: when either column cannot be located.
    """
    labels = header_labels(header)
    symbol_index = find_column(labels, SYMBOL_PREDICATES)
    weight_index = find_column(labels, WEIGHT_PREDICATES)
    if symbol_index == -1 or weight_index == -1:
        raise MissingColumns(labels)
    return symbol_index, weight_index

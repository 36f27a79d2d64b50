"""Turn a raw holdings table into ticker/weight records."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .cells import RawRow, cell_at, to_row
from .domain import HoldingRecord
from .headers import resolve_columns
from .weights import normalize_weight

logger = logging.getLogger(__name__)


def extract_holdings(table: Sequence[RawRow | Sequence[object] | None]) -> list[HoldingRecord]:
    """Extract holdings from a table whose first row is the header.

    Rows without a ticker are dropped; order and duplicates are kept as published.
    """
    if not table:
        return []

    symbol_index, weight_index = resolve_columns(to_row(table[0]))
    records: list[HoldingRecord] = []
    for raw in table[1:]:
        row = to_row(raw)
        if not row:
            continue
        symbol = cell_at(row, symbol_index).text.strip()
        if not symbol:
            continue
        weight = normalize_weight(cell_at(row, weight_index))
        records.append(HoldingRecord(symbol=symbol, weight=weight))

    logger.debug(
        "Extracted %d holdings (ticker column %d, weight column %d)", len(records), symbol_index, weight_index
    )
    return records

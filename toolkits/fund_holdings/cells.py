"""Cell values of a raw holdings table.

Publishers hand us loosely typed cells: spreadsheet numbers, text, blanks.
Each raw value is coerced once into one of three variants so downstream code
can match on the variant instead of probing runtime types.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class EmptyCell:
    """Blank or absent cell."""

    @property
    def text(self) -> str:
        return ""


@dataclass(frozen=True)
class NumberCell:
    value: float

    @property
    def text(self) -> str:
        if math.isfinite(self.value) and self.value.is_integer():
            return str(int(self.value))
        return repr(self.value)


@dataclass(frozen=True)
class TextCell:
    value: str

    @property
    def text(self) -> str:
        return self.value


Cell = Union[EmptyCell, NumberCell, TextCell]
RawRow = list[Cell]
RawTable = list[RawRow]

EMPTY = EmptyCell()


def to_cell(value: object) -> Cell:
    """Coerce a decoded value (str, number, None, NaN, ...) into a cell."""
    if isinstance(value, (EmptyCell, NumberCell, TextCell)):
        return value
    if value is None:
        return EMPTY
    if isinstance(value, bool):
        return TextCell(str(value).lower())
    if isinstance(value, numbers.Real):
        number = float(value)
        if math.isnan(number):
            return EMPTY
        return NumberCell(number)
    text = str(value)
    if text == "":
        return EMPTY
    return TextCell(text)


def to_row(values: Iterable[object] | None) -> RawRow:
    """Coerce an iterable of raw values into a row of cells."""
    if values is None:
        return []
    return [to_cell(value) for value in values]


def cell_at(row: RawRow, index: int) -> Cell:
    """Return the cell at ``index`` or an empty cell when the row is short."""
    if 0 <= index < len(row):
        return row[index]
    return EMPTY


def is_blank_row(row: RawRow) -> bool:
    return all(isinstance(cell, EmptyCell) for cell in row)

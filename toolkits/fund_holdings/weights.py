"""Weight normalisation for holdings cells."""

from __future__ import annotations

import math
import re

from .cells import Cell, EmptyCell, NumberCell, TextCell, to_cell

_FIRST_NUMBER = re.compile(r"-?\d+(?:\.\d+)?")


def normalize_weight(value: Cell | object) -> float | None:
    """Return a fractional weight, or ``None`` when the cell carries no usable number.

    Publishers mix fractions (``0.0512``) and percentages (``5.12``, ``"5,12%"``).
    Any magnitude above 1 is read as a percentage and divided by 100, so a
    genuine 100% holding written as ``1`` stays ``1.0``.
    """
    match to_cell(value):
        case EmptyCell():
            return None
        case NumberCell(value=number):
            return _scale(number)
        case TextCell(value=text):
            return _scale(_parse_text(text))
    return None


def _parse_text(raw: str) -> float | None:
    text = raw.strip().replace(",", ".", 1)
    # "1.23 (est.)" -> "1.23", "12.5%" -> "12.5"
    found = _FIRST_NUMBER.search(text)
    if found is None:
        return None
    return float(found.group(0))


def _scale(number: float | None) -> float | None:
    if number is None or not math.isfinite(number):
        return None
    if abs(number) > 1:
        return number / 100.0
    return number

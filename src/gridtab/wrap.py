"""
Cell wrapping.

Cells wider than their column capacity are split into a head that stays
on the row and a remainder that moves to a continuation row directly
below it. A line break inside the allowed width wins over a width cut,
and a width cut backs up to the last space so words stay whole.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence

from .models import Cell, Row
from .width import cut_index, display_width

logger = logging.getLogger(__name__)


def split_cell(cell: str, capacity: int) -> tuple[str, str] | None:
    """
    Split a cell that does not fit on one line of ``capacity`` columns.

    Args:
        cell: Cell text
        capacity: Maximum display width of the head

    Returns:
        ``(head, remainder)``, or None if the cell fits as-is
    """
    newline = cell.find("\n")
    if newline == -1 and display_width(cell) <= capacity:
        return None

    cut = cut_index(cell, capacity)
    if newline != -1 and newline <= cut:
        return cell[:newline], cell[newline + 1 :]

    # Always consume at least one glyph so the remainder shrinks.
    cut = max(cut, 1)
    if cut >= len(cell):
        # A single glyph wider than the column cannot be cut further.
        return None
    if cell[cut].isspace():
        remainder = cell[cut + 1 :]
        return cell[:cut], "" if remainder.isspace() else remainder

    for space in range(cut - 1, -1, -1):
        if cell[space].isspace():
            return cell[:space], cell[space + 1 :]
    return cell[:cut], cell[cut:]


def _capacity(capacities: int | Sequence[int], index: int) -> int:
    if isinstance(capacities, int):
        return capacities
    return capacities[index]


def _split_row(row: Row, capacities: int | Sequence[int]) -> tuple[Row, Row | None]:
    heads: list[Cell] = []
    tails: list[Cell] = []
    for i, cell in enumerate(row.cells):
        parts = None if cell is None else split_cell(cell, _capacity(capacities, i))
        head, tail = (cell, "") if parts is None else parts
        heads.append(head)
        tails.append(tail)
    head_row = Row.of(heads, row.is_continuation)
    if not any(tails):
        return head_row, None
    return head_row, Row.of(tails, is_continuation=True)


def _wrap_row(row: Row, capacities: int | Sequence[int]) -> Iterator[Row]:
    pending: Row | None = row
    while pending is not None:
        head, pending = _split_row(pending, capacities)
        yield head


def wrap_rows(rows: Iterable[Row], capacities: int | Sequence[int]) -> list[Row]:
    """
    Wrap every row so no cell exceeds its column capacity.

    Each row that needed splitting is followed by one or more continuation
    rows holding the remainders; cells that fit get an empty string in the
    continuation rows.

    Args:
        rows: Rows to wrap
        capacities: One capacity for all columns, or one per column

    Returns:
        New list of rows
    """
    wrapped: list[Row] = []
    count = 0
    for row in rows:
        count += 1
        wrapped.extend(_wrap_row(row, capacities))
    logger.debug("Wrapped %d rows into %d", count, len(wrapped))
    return wrapped

"""
Input normalizers.

Each adapter turns one accepted input shape into a Table of strings:

- ``from_rows``: a sequence of rows (or one flat row of scalars)
- ``from_mapping``: a mapping of column label -> column values
- ``from_records``: a sequence of mappings, one per row

``normalize`` picks the adapter for a value. Supporting a new shape
means adding an adapter here, not branching in the layout code.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from itertools import zip_longest
from typing import Any

from .exceptions import UnsupportedInputError
from .models import Cell, Table


def format_value(value: Any, float_format: str = "") -> Cell:
    """
    Convert a single value to cell text.

    Args:
        value: Any value; None stays None (a missing cell)
        float_format: ``format()`` spec for floats, e.g. ``".2f"``.
            Empty means the shortest repr that round-trips.

    Returns:
        Cell text, or None
    """
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, float):
        return format(value, float_format) if float_format else repr(value)
    return str(value)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, bytes)) or not isinstance(value, Iterable)


def from_rows(
    rows: Iterable[Any],
    header: Sequence[str] | None = None,
    float_format: str = "",
) -> Table:
    """
    Build a table from rows of values.

    A flat sequence of scalars (``["a", 1, 2.5]``) is treated as a single
    row.
    """
    rows = list(rows)
    if rows and all(_is_scalar(v) for v in rows):
        rows = [rows]
    cells = [[format_value(v, float_format) for v in row] for row in rows]
    return Table.of(header, cells)


def from_mapping(
    columns: Mapping[Any, Iterable[Any]],
    float_format: str = "",
) -> Table:
    """
    Build a table from columns keyed by label.

    Labels become the header in mapping order. Columns of unequal length
    are padded with missing cells.
    """
    header = [str(label) for label in columns]
    values = [v if not _is_scalar(v) else [v] for v in columns.values()]
    rows = [
        [format_value(v, float_format) for v in row]
        for row in zip_longest(*values, fillvalue=None)
    ]
    return Table.of(header, rows)


def from_records(
    records: Iterable[Mapping[Any, Any]],
    float_format: str = "",
) -> Table:
    """
    Build a table from one mapping per row.

    The header is every key seen, in first-seen order; keys absent from a
    record are missing cells.
    """
    records = list(records)
    keys: dict[Any, None] = {}
    for record in records:
        keys.update(dict.fromkeys(record))
    rows = [[format_value(r.get(k), float_format) for k in keys] for r in records]
    return Table.of([str(k) for k in keys], rows)


def normalize(
    data: Any,
    header: Sequence[str] | None = None,
    float_format: str = "",
) -> Table:
    """
    Convert supported input into a Table.

    Args:
        data: Rows, a column mapping, records, or an existing Table
        header: Explicit column labels (overrides labels from mappings)
        float_format: ``format()`` spec for float values

    Returns:
        Normalized table

    Raises:
        UnsupportedInputError: If ``data`` is not one of the accepted shapes
    """
    if isinstance(data, Table):
        table = data
    elif isinstance(data, Mapping):
        table = from_mapping(data, float_format)
    elif isinstance(data, (str, bytes)) or not isinstance(data, Iterable):
        raise UnsupportedInputError(type(data).__name__)
    else:
        data = list(data)
        if data and all(isinstance(r, Mapping) for r in data):
            table = from_records(data, float_format)
        else:
            return from_rows(data, header, float_format)
    if header is not None:
        return Table.of(header, table.rows)
    return table

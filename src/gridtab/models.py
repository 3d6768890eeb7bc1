"""Core models for gridtab."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum

from .exceptions import ConfigurationError

Cell = str | None
"""A cell value. None marks a missing value rendered as the placeholder."""

DEFAULT_MAX_CELL_WIDTH = 30


class Alignment(Enum):
    """Horizontal alignment of cell content."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class BorderLine(Enum):
    """Border lines that can be hidden."""

    TOP = "top"
    BELOW_HEADER = "belowheader"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Row:
    """
    One rendered row of cells.

    Attributes:
        cells: Cell values, possibly fewer than the table's column count
        is_continuation: True if this row holds the wrapped tail of the
            row above it
    """

    cells: tuple[Cell, ...]
    is_continuation: bool = False

    @classmethod
    def of(cls, cells: Iterable[Cell], is_continuation: bool = False) -> Row:
        """Build a row from any iterable of cells."""
        return cls(tuple(cells), is_continuation)

    def cell(self, index: int) -> Cell:
        """Cell at ``index``, or None if the row is shorter."""
        if index < len(self.cells):
            return self.cells[index]
        return None

    def is_blank(self, index: int) -> bool:
        """
        True if the cell at ``index`` renders as the empty-cell placeholder.

        Missing, None and empty cells are blank. On continuation rows an
        empty string only fills space under a cell that did not wrap, so it
        is not blank.
        """
        cell = self.cell(index)
        return cell is None or (cell == "" and not self.is_continuation)

    def __len__(self) -> int:
        return len(self.cells)


@dataclass(frozen=True)
class Table:
    """
    Header plus rows.

    Attributes:
        header: Column labels
        rows: Data rows
    """

    header: tuple[str, ...] = ()
    rows: tuple[Row, ...] = ()

    @classmethod
    def of(
        cls,
        header: Sequence[str] | None,
        rows: Iterable[Iterable[Cell] | Row],
    ) -> Table:
        """Build a table, copying the header and rows into immutable tuples."""
        built = tuple(r if isinstance(r, Row) else Row.of(r) for r in rows)
        return cls(tuple(header or ()), built)

    @property
    def ncols(self) -> int:
        """Column count: the widest of the header and every row."""
        return max([len(self.header), *(len(r) for r in self.rows)], default=0)

    def with_inferred_header(self) -> Table:
        """
        Return a table whose header covers every column.

        With no header the first row becomes the header. A header shorter
        than the widest row is padded with empty labels at the front, so
        the given labels name the rightmost columns.
        """
        header, rows = self.header, self.rows
        if not header and rows:
            header = tuple(c or "" for c in rows[0].cells)
            rows = rows[1:]
        ncols = max([len(header), *(len(r) for r in rows)], default=0)
        if len(header) < ncols:
            header = ("",) * (ncols - len(header)) + header
        return Table(header, rows)

    def with_rows(self, rows: Iterable[Row]) -> Table:
        """Return a copy holding ``rows`` instead."""
        return replace(self, rows=tuple(rows))


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off", ""):
        return False
    raise ConfigurationError(name, raw, "Expected a boolean (true/false).")


def _parse_int(name: str, raw: str, minimum: int) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(name, raw, "Expected an integer.") from None
    if value < minimum:
        raise ConfigurationError(name, raw, f"Must be >= {minimum}.")
    return value


def parse_alignment(value: str | Alignment) -> Alignment:
    """Convert ``"left"``, ``"right"`` or ``"center"`` to an Alignment."""
    if isinstance(value, Alignment):
        return value
    try:
        return Alignment(value.strip().lower())
    except ValueError:
        raise ConfigurationError(
            "alignment", value, "Expected one of: left, right, center."
        ) from None


def parse_hidden_lines(values: Iterable[str | BorderLine]) -> frozenset[BorderLine]:
    """Convert line names (``top``, ``belowheader``, ``bottom``) to BorderLines."""
    hidden = set()
    for value in values:
        if isinstance(value, BorderLine):
            hidden.add(value)
            continue
        name = value.strip().lower()
        if not name:
            continue
        try:
            hidden.add(BorderLine(name))
        except ValueError:
            raise ConfigurationError(
                "hidden line", value, "Expected one of: top, belowheader, bottom."
            ) from None
    return frozenset(hidden)


@dataclass(frozen=True)
class RenderConfig:
    """
    Options controlling how a table is laid out and rendered.

    Attributes:
        style: Registered style name (None selects the default style)
        alignment: Cell alignment
        empty: Placeholder for missing cells
        hidden_lines: Border lines to suppress
        autosize: Fit the table to ``target_width`` (or the terminal)
        wrap: Wrap cells wider than ``max_cell_width`` (ignored when autosizing)
        max_cell_width: Wrap capacity when ``wrap`` is on
        target_width: Total width to fit when autosizing; None asks the
            width source
        float_format: Format spec applied to float values ("" = repr)
    """

    style: str | None = None
    alignment: Alignment = Alignment.RIGHT
    empty: str = ""
    hidden_lines: frozenset[BorderLine] = field(default_factory=frozenset)
    autosize: bool = False
    wrap: bool = False
    max_cell_width: int = DEFAULT_MAX_CELL_WIDTH
    target_width: int | None = None
    float_format: str = ""

    def __post_init__(self) -> None:
        if self.max_cell_width < 1:
            raise ConfigurationError("max_cell_width", self.max_cell_width, "Must be >= 1.")
        if self.target_width is not None and self.target_width < 1:
            raise ConfigurationError("target_width", self.target_width, "Must be >= 1.")

    def is_hidden(self, line: BorderLine) -> bool:
        return line in self.hidden_lines

    @classmethod
    def from_environment(cls) -> RenderConfig:
        """Create RenderConfig from GRIDTAB_* environment variables."""
        env = os.environ
        target = env.get("GRIDTAB_WIDTH")
        return cls(
            style=env.get("GRIDTAB_STYLE") or None,
            alignment=parse_alignment(env.get("GRIDTAB_ALIGN", "right")),
            empty=env.get("GRIDTAB_EMPTY", ""),
            hidden_lines=parse_hidden_lines(env.get("GRIDTAB_HIDE", "").split(",")),
            autosize=_parse_bool("GRIDTAB_AUTOSIZE", env.get("GRIDTAB_AUTOSIZE", "")),
            wrap=_parse_bool("GRIDTAB_WRAP", env.get("GRIDTAB_WRAP", "")),
            max_cell_width=_parse_int(
                "GRIDTAB_MAX_CELL_WIDTH",
                env.get("GRIDTAB_MAX_CELL_WIDTH", str(DEFAULT_MAX_CELL_WIDTH)),
                minimum=1,
            ),
            target_width=_parse_int("GRIDTAB_WIDTH", target, minimum=1) if target else None,
            float_format=env.get("GRIDTAB_FLOAT_FORMAT", ""),
        )

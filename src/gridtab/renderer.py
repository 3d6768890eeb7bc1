"""
Table renderer with pluggable border styles.

This module provides a TableRenderer class for assembling a laid-out
table (header, rows and final column widths) into text.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from .models import Alignment, BorderLine, RenderConfig, Row, Table
from .styles import Line, RowDelimiters, Style
from .width import display_width


def align_cell(text: str, width: int, alignment: Alignment) -> str:
    """Pad ``text`` with spaces to ``width`` display columns.

    Args:
        text: Cell content
        width: Target display width
        alignment: LEFT pads on the right, RIGHT on the left, CENTER on
            both sides with the odd space before the content

    Returns:
        Padded text (unchanged if already at least ``width`` wide)
    """
    deficit = max(width - display_width(text), 0)
    if alignment is Alignment.LEFT:
        return text + " " * deficit
    if alignment is Alignment.CENTER:
        before = math.ceil(deficit / 2)
        return " " * before + text + " " * (deficit - before)
    return " " * deficit + text


class TableRenderer:
    """Render a table with the glyphs of a Style.

    Example output (``grid`` style):
        +----------+------------+
        |     Name |       City |
        +==========+============+
        | Jon Snow | Winterfell |
        +----------+------------+
    """

    def __init__(self, style: Style, config: RenderConfig | None = None) -> None:
        """Initialize the table renderer.

        Args:
            style: Border glyphs and padding
            config: Alignment, placeholder and hidden lines. Defaults to
                RenderConfig().
        """
        self._style = style
        self._config = config or RenderConfig()

    def render(self, table: Table, widths: Sequence[int]) -> str:
        """Render a table using precomputed column widths.

        Args:
            table: Header and rows (already wrapped, if wrapping is wanted)
            widths: Content width of every column

        Returns:
            Rendered table, one newline-terminated line per output line
        """
        style = self._style
        padded = [w + 2 * style.padding for w in widths]

        lines: list[str] = []
        self._add_line(lines, style.top, padded, BorderLine.TOP)
        lines.append(self._build_header(table.header, widths, style.header_row))
        self._add_line(lines, style.below_header, padded, BorderLine.BELOW_HEADER)

        rows = table.rows
        for index, row in enumerate(rows):
            lines.append(self._build_row(row, widths, style.data_row))
            if index + 1 < len(rows) and not rows[index + 1].is_continuation:
                self._add_line(lines, style.between_rows, padded)

        self._add_line(lines, style.bottom, padded, BorderLine.BOTTOM)

        return "".join(line + "\n" for line in lines)

    def _add_line(
        self,
        lines: list[str],
        line: Line | None,
        padded: Sequence[int],
        kind: BorderLine | None = None,
    ) -> None:
        if line is None or (kind is not None and self._config.is_hidden(kind)):
            return
        lines.append(line.begin + line.sep.join(line.fill * w for w in padded) + line.end)

    def _build_header(
        self,
        header: Sequence[str],
        widths: Sequence[int],
        delimiters: RowDelimiters,
    ) -> str:
        labels = [header[i] if i < len(header) else "" for i in range(len(widths))]
        return self._join(labels, widths, delimiters)

    def _build_row(
        self,
        row: Row,
        widths: Sequence[int],
        delimiters: RowDelimiters,
    ) -> str:
        empty = self._config.empty
        cells = [empty if row.is_blank(i) else row.cell(i) or "" for i in range(len(widths))]
        return self._join(cells, widths, delimiters)

    def _join(
        self,
        cells: Sequence[str],
        widths: Sequence[int],
        delimiters: RowDelimiters,
    ) -> str:
        pad = " " * self._style.padding
        alignment = self._config.alignment
        rendered = [pad + align_cell(c, w, alignment) + pad for c, w in zip(cells, widths)]
        return delimiters.begin + delimiters.sep.join(rendered) + delimiters.end

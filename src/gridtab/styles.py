"""
Table styles and the style registry.

A style is an immutable bundle of border glyphs plus a padding unit.
The built-in styles are:

    plain    no borders, two spaces between columns
    simple   dashed lines above, below the header and at the bottom
    grid     ASCII ``+-|`` grid with ``=`` under the header
    border   box-drawing characters, heavy header
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .exceptions import StyleExistsError, UnknownStyleError
from .width import display_width

DEFAULT_STYLE = "grid"
"""Style used when no name is given."""


@dataclass(frozen=True)
class Line:
    """Horizontal rule: ``begin`` + ``fill`` per column joined by ``sep`` + ``end``."""

    begin: str
    fill: str
    sep: str
    end: str


@dataclass(frozen=True)
class RowDelimiters:
    """Glyphs around and between the cells of a header or data row."""

    begin: str
    sep: str
    end: str

    def overhead(self, ncols: int) -> int:
        """Display columns taken by delimiters in a row of ``ncols`` cells."""
        if ncols <= 0:
            return 0
        return (
            display_width(self.begin)
            + display_width(self.end)
            + (ncols - 1) * display_width(self.sep)
        )


@dataclass(frozen=True)
class Style:
    """
    Visual appearance of a table.

    Attributes:
        top: Line above the header, or None
        below_header: Line between header and first data row, or None
        between_rows: Line between two data rows, or None
        bottom: Line after the last data row, or None
        header_row: Delimiters for the header row
        data_row: Delimiters for data rows
        padding: Spaces added on each side of every cell
    """

    header_row: RowDelimiters
    data_row: RowDelimiters
    top: Line | None = None
    below_header: Line | None = None
    between_rows: Line | None = None
    bottom: Line | None = None
    padding: int = 1

    def __post_init__(self) -> None:
        if self.padding < 0:
            raise ValueError("padding must be non-negative")

    def overhead(self, ncols: int) -> int:
        """Columns a rendered row adds around its content (delimiters and padding)."""
        return self.data_row.overhead(ncols) + ncols * 2 * self.padding


BUILTIN_STYLES: dict[str, Style] = {
    "plain": Style(
        header_row=RowDelimiters("", "  ", ""),
        data_row=RowDelimiters("", "  ", ""),
    ),
    "simple": Style(
        top=Line("", "-", "  ", ""),
        below_header=Line("", "-", "  ", ""),
        bottom=Line("", "-", "  ", ""),
        header_row=RowDelimiters("", "  ", ""),
        data_row=RowDelimiters("", "  ", ""),
    ),
    "grid": Style(
        top=Line("+", "-", "+", "+"),
        below_header=Line("+", "=", "+", "+"),
        between_rows=Line("+", "-", "+", "+"),
        bottom=Line("+", "-", "+", "+"),
        header_row=RowDelimiters("|", "|", "|"),
        data_row=RowDelimiters("|", "|", "|"),
    ),
    "border": Style(
        top=Line("┏", "━", "┳", "┓"),
        below_header=Line("┡", "━", "╇", "┩"),
        between_rows=Line("├", "─", "┼", "┤"),
        bottom=Line("└", "─", "┴", "┘"),
        header_row=RowDelimiters("┃", "┃", "┃"),
        data_row=RowDelimiters("│", "│", "│"),
    ),
}


class StyleRegistry:
    """
    Name -> Style mapping.

    Populate it before rendering starts; concurrent registration while
    other threads render is not synchronized.
    """

    def __init__(self, styles: dict[str, Style] | None = None) -> None:
        self._styles: dict[str, Style] = dict(styles or {})

    def register(self, name: str, style: Style, *, replace: bool = False) -> None:
        """
        Register a custom style.

        Args:
            name: Lookup name
            style: The style to register
            replace: Allow overriding an existing registration

        Raises:
            StyleExistsError: If the name is taken and replace is False
        """
        if name in self._styles and not replace:
            raise StyleExistsError(name)
        self._styles[name] = style

    def get(self, name: str | None = None) -> Style:
        """
        Look up a style by name, or the default style when name is None.

        Raises:
            UnknownStyleError: If no style is registered under the name
        """
        key = name or DEFAULT_STYLE
        try:
            return self._styles[key]
        except KeyError:
            raise UnknownStyleError(key, list(self._styles)) from None

    def names(self) -> list[str]:
        """Registered style names, sorted."""
        return sorted(self._styles)

    def __contains__(self, name: object) -> bool:
        return name in self._styles

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._styles)


def default_registry() -> StyleRegistry:
    """Create a registry holding the built-in styles."""
    return StyleRegistry(BUILTIN_STYLES)

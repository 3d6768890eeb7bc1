"""
gridtab: render tabular data as aligned, bordered text tables.

This library provides:
- Display-width aware column sizing (wide CJK glyphs count as two columns)
- Built-in and custom border styles via a StyleRegistry
- Autosizing to a target (terminal) width
- Word-boundary wrapping of long cells into continuation rows

Example:
    from gridtab import tabulate

    print(tabulate(
        [["Jon Snow", "Winterfell"], ["Arya Stark", "Braavos"]],
        header=["Name", "City"],
        style="border",
        alignment="left",
    ))
"""

from .exceptions import (
    ConfigurationError,
    EmptyInputError,
    GridtabError,
    InputError,
    StyleError,
    StyleExistsError,
    UnknownStyleError,
    UnsupportedInputError,
    WidthSourceUnavailable,
)
from .layout import fit, minimum_widths, natural_widths
from .models import Alignment, BorderLine, RenderConfig, Row, Table
from .normalize import from_mapping, from_records, from_rows, normalize
from .renderer import TableRenderer
from .styles import (
    BUILTIN_STYLES,
    DEFAULT_STYLE,
    Line,
    RowDelimiters,
    Style,
    StyleRegistry,
    default_registry,
)
from .tabulator import Tabulate, tabulate
from .terminal import terminal_width
from .width import display_width
from .wrap import wrap_rows

__all__ = [
    # Main API
    "Tabulate",
    "tabulate",
    # Models
    "Alignment",
    "BorderLine",
    "RenderConfig",
    "Row",
    "Table",
    # Styles
    "BUILTIN_STYLES",
    "DEFAULT_STYLE",
    "Line",
    "RowDelimiters",
    "Style",
    "StyleRegistry",
    "default_registry",
    # Layout stages
    "display_width",
    "fit",
    "minimum_widths",
    "natural_widths",
    "wrap_rows",
    "TableRenderer",
    "terminal_width",
    # Normalizers
    "from_mapping",
    "from_records",
    "from_rows",
    "normalize",
    # Exceptions
    "GridtabError",
    "InputError",
    "StyleError",
    "EmptyInputError",
    "UnsupportedInputError",
    "UnknownStyleError",
    "StyleExistsError",
    "WidthSourceUnavailable",
    "ConfigurationError",
]

"""
Table pipeline: header inference, width computation, autosizing or
wrapping, and rendering.

Example:
    from gridtab import Tabulate

    table = Tabulate.create([["Jon Snow", "Winterfell"]], header=["Name", "City"])
    print(table.render("grid"))
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import replace
from typing import Any

from .exceptions import EmptyInputError
from .layout import fit, minimum_widths, natural_widths
from .models import RenderConfig, Table, parse_alignment, parse_hidden_lines
from .normalize import normalize
from .renderer import TableRenderer
from .styles import Style, StyleRegistry, default_registry
from .terminal import terminal_width
from .wrap import wrap_rows

logger = logging.getLogger(__name__)

WidthSource = Callable[[], int]


def make_config(base: RenderConfig | None = None, **options: Any) -> RenderConfig:
    """
    Build a RenderConfig from keyword options.

    ``alignment`` accepts a string and ``hidden_lines`` accepts line
    names, so callers do not need the enums.
    """
    if "alignment" in options:
        options["alignment"] = parse_alignment(options["alignment"])
    if "hidden_lines" in options:
        options["hidden_lines"] = parse_hidden_lines(options["hidden_lines"] or ())
    return replace(base or RenderConfig(), **options)


class Tabulate:
    """
    A table plus the options used to render it.

    Rendering never mutates the table; every stage produces a new value.
    """

    def __init__(
        self,
        table: Table,
        config: RenderConfig | None = None,
        registry: StyleRegistry | None = None,
        width_source: WidthSource = terminal_width,
    ) -> None:
        """
        Initialize the pipeline.

        Args:
            table: Normalized header and rows
            config: Render options (defaults to RenderConfig())
            registry: Style registry (defaults to the built-in styles)
            width_source: Called once per autosized render when the config
                has no explicit target width
        """
        self._table = table
        self._config = config or RenderConfig()
        self._registry = registry if registry is not None else default_registry()
        self._width_source = width_source

    @classmethod
    def create(
        cls,
        data: Any,
        header: Sequence[str] | None = None,
        config: RenderConfig | None = None,
        **kwargs: Any,
    ) -> Tabulate:
        """
        Normalize ``data`` and wrap it in a Tabulate.

        Args:
            data: Rows, a column mapping, records, or a Table
            header: Column labels; when omitted the first row is the header
            config: Render options
            **kwargs: Forwarded to the constructor (registry, width_source)

        Raises:
            UnsupportedInputError: If ``data`` has an unsupported shape
        """
        config = config or RenderConfig()
        table = normalize(data, header, config.float_format)
        return cls(table, config, **kwargs)

    @property
    def table(self) -> Table:
        return self._table

    @property
    def config(self) -> RenderConfig:
        return self._config

    @property
    def registry(self) -> StyleRegistry:
        return self._registry

    def with_config(self, **options: Any) -> Tabulate:
        """Return a copy with some render options changed."""
        return Tabulate(
            self._table,
            make_config(self._config, **options),
            self._registry,
            self._width_source,
        )

    def layout(self, style: str | None = None) -> tuple[Table, list[int], Style]:
        """
        Run every stage except the final text assembly.

        Args:
            style: Style name overriding the config's style

        Returns:
            ``(table, widths, style)``: the inferred-header, possibly
            wrapped table, the final column widths and the resolved style

        Raises:
            UnknownStyleError: If the style is not registered
            EmptyInputError: If there are no data rows
            WidthSourceUnavailable: If autosizing cannot get a width
        """
        config = self._config
        resolved = self._registry.get(style or config.style)

        table = self._table.with_inferred_header()
        if not table.rows:
            raise EmptyInputError(table.header)

        if config.autosize:
            target = config.target_width or self._width_source()
            natural = natural_widths(table.header, table.rows, config.empty)
            floors = minimum_widths(table.header, table.rows, config.empty)
            widths = fit(natural, table.header, resolved, target, floors)
            table = table.with_rows(wrap_rows(table.rows, widths))
        else:
            if config.wrap:
                table = table.with_rows(wrap_rows(table.rows, config.max_cell_width))
            widths = natural_widths(table.header, table.rows, config.empty)

        logger.debug(
            "Laid out %d columns x %d rows with widths %s", len(widths), len(table.rows), widths
        )
        return table, widths, resolved

    def render(self, style: str | None = None) -> str:
        """
        Render the table.

        Args:
            style: Style name overriding the config's style

        Returns:
            The table text, every line newline-terminated

        Raises:
            UnknownStyleError: If the style is not registered
            EmptyInputError: If there are no data rows
            WidthSourceUnavailable: If autosizing cannot get a width
        """
        table, widths, resolved = self.layout(style)
        return TableRenderer(resolved, self._config).render(table, widths)

    def __str__(self) -> str:
        return self.render()


def tabulate(
    data: Any,
    header: Sequence[str] | None = None,
    style: str | None = None,
    *,
    registry: StyleRegistry | None = None,
    width_source: WidthSource = terminal_width,
    **options: Any,
) -> str:
    """
    Render data as a table in one call.

    Args:
        data: Rows, a column mapping, records, or a Table
        header: Column labels; when omitted the first row is the header
        style: Style name (default ``grid``)
        registry: Style registry (defaults to the built-in styles)
        width_source: Width provider for autosizing
        **options: RenderConfig fields, e.g. ``alignment="left"``,
            ``hidden_lines=["top"]``, ``autosize=True``, ``wrap=True``

    Returns:
        The rendered table

    Example:
        >>> print(tabulate([["Jon Snow", "Winterfell"]], header=["Name", "City"]), end="")
        +----------+------------+
        |     Name |       City |
        +==========+============+
        | Jon Snow | Winterfell |
        +----------+------------+
    """
    config = make_config(style=style, **options)
    return Tabulate.create(
        data, header, config, registry=registry, width_source=width_source
    ).render()

"""Command-line interface for rendering tables."""

from __future__ import annotations

import csv
import json
import logging
import sys
from typing import IO, Any

import click
import yaml

from .exceptions import GridtabError
from .models import RenderConfig
from .styles import default_registry
from .tabulator import Tabulate, make_config


def _load(stream: IO[str], input_format: str) -> Any:
    if input_format == "csv":
        return [row for row in csv.reader(stream) if row]
    if input_format == "json":
        return json.load(stream)
    return yaml.safe_load(stream)


@click.group()
@click.version_option(package_name="gridtab")
def cli() -> None:
    """gridtab: render tabular data as aligned text tables."""
    pass


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option(
    "--input-format",
    "-i",
    type=click.Choice(["csv", "json", "yaml"]),
    default="csv",
    show_default=True,
    help="Format of the input data",
)
@click.option("--style", "-s", help="Table style name (see `gridtab styles`)")
@click.option(
    "--align",
    "-a",
    type=click.Choice(["left", "right", "center"]),
    help="Cell alignment (default: right)",
)
@click.option("--empty", help="Placeholder shown for missing cells")
@click.option(
    "--hide",
    multiple=True,
    type=click.Choice(["top", "belowheader", "bottom"]),
    help="Border line to hide (repeatable)",
)
@click.option(
    "--autosize/--no-autosize",
    default=None,
    help="Fit the table to the terminal (or --width)",
)
@click.option(
    "--wrap/--no-wrap",
    default=None,
    help="Wrap cells longer than --max-cell-width",
)
@click.option(
    "--max-cell-width",
    type=click.IntRange(min=1),
    help="Wrap capacity for --wrap (default: 30)",
)
@click.option(
    "--width",
    "-w",
    type=click.IntRange(min=1),
    help="Target table width for --autosize (default: terminal width)",
)
@click.option("--float-format", help="Format spec for floats in JSON/YAML input, e.g. .2f")
@click.option(
    "--no-header",
    is_flag=True,
    default=False,
    help="Treat the first row as data instead of column labels",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log layout decisions")
def render(
    source: IO[str],
    input_format: str,
    style: str | None,
    align: str | None,
    empty: str | None,
    hide: tuple[str, ...],
    autosize: bool | None,
    wrap: bool | None,
    max_cell_width: int | None,
    width: int | None,
    float_format: str | None,
    no_header: bool,
    verbose: bool,
) -> None:
    """Render SOURCE (a file, or - for stdin) as a table."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    overrides: dict[str, Any] = {
        "style": style,
        "alignment": align,
        "empty": empty,
        "hidden_lines": hide or None,
        "autosize": autosize,
        "wrap": wrap,
        "max_cell_width": max_cell_width,
        "target_width": width,
        "float_format": float_format,
    }

    try:
        config = make_config(
            RenderConfig.from_environment(),
            **{k: v for k, v in overrides.items() if v is not None},
        )
        data = _load(source, input_format)
        header = None
        if no_header and isinstance(data, list) and data and all(isinstance(r, list) for r in data):
            header = [""] * max(len(row) for row in data)
        output = Tabulate.create(data, header, config).render()
    except (json.JSONDecodeError, yaml.YAMLError, csv.Error) as e:
        click.echo(f"Error: cannot parse {input_format} input: {e}", err=True)
        sys.exit(1)
    except GridtabError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(output, nl=False)


@cli.command()
def styles() -> None:
    """List the available table styles."""
    for name in default_registry().names():
        click.echo(name)


if __name__ == "__main__":
    cli()

"""Pytest fixtures for gridtab tests."""

import pytest

from gridtab import Alignment, RenderConfig, Table


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Unset GRIDTAB_* variables so host settings do not leak into tests."""
    for name in (
        "GRIDTAB_STYLE",
        "GRIDTAB_ALIGN",
        "GRIDTAB_EMPTY",
        "GRIDTAB_HIDE",
        "GRIDTAB_AUTOSIZE",
        "GRIDTAB_WRAP",
        "GRIDTAB_MAX_CELL_WIDTH",
        "GRIDTAB_WIDTH",
        "GRIDTAB_FLOAT_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def got_table() -> Table:
    """Small two-column table used across tests."""
    return Table.of(
        ["Name", "City"],
        [["Jon Snow", "Winterfell"], ["Arya Stark", "Braavos"]],
    )


@pytest.fixture
def left_config() -> RenderConfig:
    """Left-aligned render options."""
    return RenderConfig(alignment=Alignment.LEFT)

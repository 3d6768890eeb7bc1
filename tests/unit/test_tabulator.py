"""Tests for the Tabulate pipeline and tabulate()."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from gridtab import (
    EmptyInputError,
    Line,
    RenderConfig,
    RowDelimiters,
    Style,
    Tabulate,
    UnknownStyleError,
    WidthSourceUnavailable,
    default_registry,
    tabulate,
)
from gridtab.models import Alignment, Row
from gridtab.width import display_width

GRID_EXAMPLE = (
    "+----------+------------+\n"
    "|     Name |       City |\n"
    "+==========+============+\n"
    "| Jon Snow | Winterfell |\n"
    "+----------+------------+\n"
)
SENTENCE = "This is a very long sentence that needs wrapping"


class TestTabulateFunction:
    """Tests for tabulate()."""

    def test_grid_example(self) -> None:
        assert tabulate([["Jon Snow", "Winterfell"]], header=["Name", "City"]) == GRID_EXAMPLE

    def test_first_row_is_header(self) -> None:
        assert tabulate([["Name", "City"], ["Jon Snow", "Winterfell"]]) == GRID_EXAMPLE

    def test_options(self) -> None:
        output = tabulate(
            [["Jon Snow", "Winterfell"]],
            header=["Name", "City"],
            style="simple",
            alignment="left",
            hidden_lines=["top"],
        )
        assert output.splitlines() == [
            " Name        City       ",
            "----------  ------------",
            " Jon Snow    Winterfell ",
            "----------  ------------",
        ]

    def test_header_only_is_empty(self) -> None:
        with pytest.raises(EmptyInputError):
            tabulate([["Name", "City"]])

    def test_no_rows_is_empty(self) -> None:
        with pytest.raises(EmptyInputError) as exc_info:
            tabulate([], header=["a"])
        assert exc_info.value.header == ("a",)

    def test_unknown_style(self) -> None:
        with pytest.raises(UnknownStyleError, match="nope"):
            tabulate([["a"], ["b"]], style="nope")

    def test_mapping_input(self) -> None:
        output = tabulate({"n": [1, 22]}, alignment="left", hidden_lines=["top", "bottom"])
        assert output.splitlines() == ["| n  |", "+====+", "| 1  |", "+----+", "| 22 |"]

    def test_float_format(self) -> None:
        output = tabulate([[3.14159]], header=["pi"], float_format=".2f")
        assert "3.14 " in output
        assert "3.141" not in output

    def test_wide_glyphs_align(self) -> None:
        output = tabulate([["東京", "Tokyo"], ["Paris", "パリ"]], header=["a", "b"])
        assert len({display_width(line) for line in output.splitlines()}) == 1

    def test_input_is_not_mutated(self) -> None:
        rows = [["Name", "City"], ["Jon Snow", SENTENCE]]
        tabulate(rows, wrap=True, max_cell_width=10)
        assert rows == [["Name", "City"], ["Jon Snow", SENTENCE]]


class TestWrapping:
    """Tests for fixed-width wrapping."""

    def test_wrap_to_max_cell_width(self) -> None:
        output = tabulate(
            [["1", SENTENCE]],
            header=["id", "text"],
            alignment="left",
            wrap=True,
            max_cell_width=10,
        )
        assert output.splitlines() == [
            "+----+------------+",
            "| id | text       |",
            "+====+============+",
            "| 1  | This is a  |",
            "|    | very long  |",
            "|    | sentence   |",
            "|    | that needs |",
            "|    | wrapping   |",
            "+----+------------+",
        ]

    def test_wrap_is_off_by_default(self) -> None:
        output = tabulate([["1", SENTENCE]], header=["id", "text"])
        assert SENTENCE in output

    def test_max_cell_width_ignored_without_wrap(self) -> None:
        output = tabulate([["1", SENTENCE]], header=["id", "text"], max_cell_width=5)
        assert SENTENCE in output


class TestAutosize:
    """Tests for autosizing."""

    def test_shrink_and_wrap(self) -> None:
        output = tabulate(
            [["1", SENTENCE]],
            header=["id", "text"],
            alignment="left",
            autosize=True,
            target_width=30,
        )
        lines = output.splitlines()
        assert lines[3:6] == [
            "| 1  | This is a very long   |",
            "|    | sentence that needs   |",
            "|    | wrapping              |",
        ]
        assert all(display_width(line) <= 30 for line in lines)

    def test_expand(self, got_table) -> None:
        output = Tabulate(got_table, RenderConfig(autosize=True, target_width=30)).render()
        lines = output.splitlines()
        assert {display_width(line) for line in lines} == {29}

    def test_width_source_used_once(self, got_table) -> None:
        width_source = MagicMock(return_value=40)
        Tabulate(got_table, RenderConfig(autosize=True), width_source=width_source).render()
        width_source.assert_called_once_with()

    def test_explicit_target_skips_width_source(self, got_table) -> None:
        width_source = MagicMock(return_value=40)
        config = RenderConfig(autosize=True, target_width=50)
        Tabulate(got_table, config, width_source=width_source).render()
        width_source.assert_not_called()

    def test_width_source_not_used_without_autosize(self, got_table) -> None:
        width_source = MagicMock(side_effect=WidthSourceUnavailable("no terminal"))
        Tabulate(got_table, width_source=width_source).render()
        width_source.assert_not_called()

    def test_width_source_failure_surfaces(self, got_table) -> None:
        width_source = MagicMock(side_effect=WidthSourceUnavailable("no terminal"))
        tab = Tabulate(got_table, RenderConfig(autosize=True), width_source=width_source)
        with pytest.raises(WidthSourceUnavailable):
            tab.render()

    def test_autosize_ignores_max_cell_width(self, got_table) -> None:
        config = RenderConfig(autosize=True, target_width=80, wrap=True, max_cell_width=3)
        table, _, _ = Tabulate(got_table, config).layout()
        assert len(table.rows) == 2


class TestTabulate:
    """Tests for the Tabulate class."""

    def test_create_and_render(self) -> None:
        tab = Tabulate.create([["Jon Snow", "Winterfell"]], header=["Name", "City"])
        assert tab.render() == GRID_EXAMPLE
        assert str(tab) == GRID_EXAMPLE

    def test_style_argument_overrides_config(self, got_table) -> None:
        tab = Tabulate(got_table, RenderConfig(style="grid"))
        assert tab.render("plain").count("+") == 0

    def test_with_config_returns_copy(self, got_table) -> None:
        tab = Tabulate(got_table)
        left = tab.with_config(alignment="left")
        assert left.config.alignment is Alignment.LEFT
        assert tab.config.alignment is Alignment.RIGHT
        assert left.table is tab.table

    def test_layout(self) -> None:
        tab = Tabulate.create(
            [["Name", "City"], ["Jon", SENTENCE]],
            config=RenderConfig(wrap=True),
        )
        table, widths, style = tab.layout()
        assert table.header == ("Name", "City")
        assert widths == [4, 28]
        assert table.rows[1] == Row(("", "that needs wrapping"), is_continuation=True)
        assert style is tab.registry.get("grid")

    def test_custom_style(self, got_table) -> None:
        registry = default_registry()
        registry.register(
            "dots",
            Style(
                top=Line(".", ".", ".", "."),
                header_row=RowDelimiters(":", ":", ":"),
                data_row=RowDelimiters(":", ":", ":"),
                padding=0,
            ),
        )
        output = Tabulate(got_table, registry=registry).render("dots")
        assert output.splitlines()[0] == "." * 23
        assert output.splitlines()[1] == ":      Name:      City:"

    def test_placeholder(self) -> None:
        tab = Tabulate.create(
            [["a", "b"], ["1"], ["2", None]],
            config=RenderConfig(empty="n/a"),
        )
        lines = tab.render().splitlines()
        assert lines[3] == "| 1 | n/a |"
        assert lines[5] == "| 2 | n/a |"

    def test_autosize_keeps_room_for_placeholder(self) -> None:
        output = tabulate(
            [["aaaa aaaa", None], ["bbbb bbbb", "x"]],
            header=["A", "B"],
            autosize=True,
            target_width=20,
            empty="<missing>",
        )
        lines = output.splitlines()
        assert len({display_width(line) for line in lines}) == 1
        assert any("<missing> |" in line for line in lines)

    def test_empty_string_cell_gets_placeholder(self) -> None:
        output = tabulate([["a", ""], ["b", "x"]], header=["A", "B"], empty="-")
        assert output.splitlines()[3] == "| a | - |"

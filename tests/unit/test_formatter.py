"""Tests for TableFormatter."""

import io
import logging

import pytest

from tablefmt import FormatterSettings, Table, TableFormatter

RULE = "+----+------+\n"
LABELS = "| ID | NAME |\n"


class BrokenSink:
    """Text sink whose writes always fail."""

    def write(self, s: str) -> int:
        raise OSError("disk full")


class BytesOnlySink:
    """Sink that accepts bytes but is neither an io class nor has a mode."""

    def __init__(self) -> None:
        self.data = b""

    def write(self, data: bytes) -> int:
        self.data += data
        return len(data)


@pytest.fixture
def formatter(id_name_table: Table) -> TableFormatter:
    return id_name_table.formatter()


@pytest.fixture
def int_table() -> Table:
    """ID/NAME table that maps ints to one row each."""
    return (
        Table.builder()
        .columns("| ID | NAME |")
        .widths(4, 6)
        .alignments("R")
        .row_mapper(int, lambda i: [str(i), f"n{i}"])
        .build()
    )


class TestSections:
    """Tests for header, footer, text and line."""

    def test_header_then_footer(self, formatter: TableFormatter) -> None:
        content = formatter.header().footer().getvalue()

        assert content == RULE + LABELS + RULE + RULE
        assert len({len(line) for line in content.splitlines()}) == 1

    def test_header_custom_labels(self, formatter: TableFormatter) -> None:
        content = formatter.header("{label}", "Who").getvalue()

        assert content.splitlines()[1] == "| ID | Who  |"

    def test_header_fills_missing_labels(self, formatter: TableFormatter) -> None:
        content = formatter.header("Who").getvalue()

        assert content == RULE + "|Who | NAME |\n" + RULE

    def test_default_widths_truncate_labels(self) -> None:
        formatter = Table.builder().columns("| ID | NAME |").build().formatter()

        assert formatter.header().getvalue().splitlines()[1] == "| I| NAM|"

    def test_footer_trailing_text(self, formatter: TableFormatter) -> None:
        content = formatter.footer("(2) rows", "done").getvalue()

        assert content == RULE + "(2) rows\ndone\n"

    def test_text_bypasses_columns(self, formatter: TableFormatter) -> None:
        assert formatter.text("Customers:", "").getvalue() == "Customers:\n\n"

    def test_line_with_markers(self, formatter: TableFormatter) -> None:
        content = formatter.line("{===}", "{===}").line("{---}", "").getvalue()

        assert content == "+====+======+\n" + "+----+" + " " * 7 + "\n"

    def test_chaining_returns_formatter(self, formatter: TableFormatter) -> None:
        assert formatter.header() is formatter
        assert formatter.row("1", "Al") is formatter
        assert formatter.text("x") is formatter
        assert formatter.footer() is formatter

    def test_empty_table_renders_blank_lines(self) -> None:
        formatter = Table.builder().build().formatter()

        assert formatter.header().row("a").footer().getvalue() == ""


class TestRows:
    """Tests for row, row_for and rows_for."""

    def test_row(self, formatter: TableFormatter) -> None:
        assert formatter.row("1", "Al").getvalue() == "|  1 | Al   |\n"

    def test_row_for_unmapped_object(self, int_table: Table) -> None:
        formatter = int_table.formatter()

        assert formatter.row_for("text").row_for(None).getvalue() == ""

    def test_row_for_with_separator_line(self, int_table: Table) -> None:
        content = int_table.formatter().row_for(7, separator_line=True).getvalue()

        assert content == "|  7 | n7   |\n" + RULE

    def test_rows_for(self, int_table: Table) -> None:
        content = int_table.formatter().rows_for([1, 2]).getvalue()

        assert content == "|  1 | n1   |\n|  2 | n2   |\n"

    def test_row_for_single_mapper_returning_none(self) -> None:
        table = Table.builder().columns("| A |").widths(3).row_mapper(int, lambda i: None).build()

        assert table.formatter().row_for(1).getvalue() == ""

    def test_rows_for_none(self, int_table: Table) -> None:
        assert int_table.formatter().rows_for(None).getvalue() == ""

    def test_multi_row_mapper(self) -> None:
        table = (
            Table.builder()
            .columns("| A | B |")
            .widths(3, 3)
            .multi_row_mapper(list, lambda items: [[str(i), str(i * i)] for i in items])
            .build()
        )

        lines = table.formatter().row_for([1, 2, 3]).getvalue().splitlines()

        assert lines == ["| 1 | 1 |", "| 2 | 4 |", "| 3 | 9 |"]

    def test_single_and_multi_mappers_both_fire(self) -> None:
        table = (
            Table.builder()
            .columns("| A |")
            .widths(5)
            .multi_row_mapper(int, lambda i: [["m1"], ["m2"]])
            .row_mapper(int, lambda i: ["s"])
            .build()
        )

        lines = table.formatter().row_for(1, separator_line=True).getvalue().splitlines()

        assert lines == ["| s   |", "+-----+", "| m1  |", "| m2  |", "+-----+"]


class TestPrint:
    """Tests for print() and buffer handling."""

    def test_print_to_text_sink_clears_buffer(self, formatter: TableFormatter) -> None:
        sink = io.StringIO()

        assert formatter.header().print(sink) is True
        assert sink.getvalue() == RULE + LABELS + RULE
        assert formatter.getvalue() == ""

    def test_second_print_writes_nothing(self, formatter: TableFormatter) -> None:
        sink = io.StringIO()
        formatter.row("1", "Al").print(sink)
        formatter.print(sink)

        assert sink.getvalue() == "|  1 | Al   |\n"

    def test_print_none_sink_keeps_buffer(self, formatter: TableFormatter) -> None:
        assert formatter.row("1", "Al").print(None) is False
        assert formatter.getvalue() == "|  1 | Al   |\n"

    def test_print_to_binary_sink(self, formatter: TableFormatter) -> None:
        sink = io.BytesIO()

        assert formatter.row("1", "5€").print(sink) is True
        assert sink.getvalue().decode("utf-8") == "|  1 | 5€   |\n"

    def test_print_with_configured_encoding(self, id_name_table: Table) -> None:
        formatter = id_name_table.formatter(FormatterSettings(encoding="latin-1"))
        sink = io.BytesIO()

        formatter.row("1", "é").print(sink)

        assert sink.getvalue() == "|  1 | é    |\n".encode("latin-1")

    def test_unencodable_content_is_reported(self, id_name_table: Table, caplog) -> None:
        formatter = id_name_table.formatter(FormatterSettings(encoding="latin-1"))

        with caplog.at_level(logging.WARNING):
            assert formatter.row("1", "5€").print(io.BytesIO()) is False

        assert "Failed to print table" in caplog.text
        assert formatter.getvalue() == "|  1 | 5€   |\n"

    def test_failing_sink_keeps_buffer(self, formatter: TableFormatter, caplog) -> None:
        formatter.row("1", "Al")

        with caplog.at_level(logging.WARNING):
            assert formatter.print(BrokenSink()) is False

        assert "disk full" in caplog.text
        assert formatter.getvalue() == "|  1 | Al   |\n"

    def test_unknown_encoding_keeps_buffer(self, id_name_table: Table, caplog) -> None:
        formatter = id_name_table.formatter(FormatterSettings(encoding="no-such-codec"))

        with caplog.at_level(logging.WARNING):
            assert formatter.row("1", "Al").print(io.BytesIO()) is False

        assert "Failed to print table" in caplog.text
        assert formatter.getvalue() == "|  1 | Al   |\n"

    def test_bytes_only_sink_without_mode(self, formatter: TableFormatter, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            assert formatter.row("1", "Al").print(BytesOnlySink()) is False

        assert "Failed to print table" in caplog.text
        assert formatter.getvalue() == "|  1 | Al   |\n"

    def test_clear(self, formatter: TableFormatter) -> None:
        formatter.header().clear()

        assert str(formatter) == ""

    def test_default_settings(self, formatter: TableFormatter) -> None:
        assert formatter.settings.encoding == "utf-8"

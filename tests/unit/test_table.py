"""Unit tests for Table and TableBuilder."""

from tablefmt import Table, TableBuilder, TableFormatter
from tablefmt.columns import Alignment
from tablefmt.mappers import MapperKind


class TestBuilderConstruction:
    """Test TableBuilder construction and method chaining."""

    def test_builder_returns_builder_instance(self):
        assert isinstance(Table.builder(), TableBuilder)

    def test_builder_methods_return_self(self):
        builder = Table.builder()
        result = (
            builder.columns("| A | B |")
            .widths(3, 4)
            .alignments("RL")
            .row_mapper(int, lambda i: [str(i)])
            .multi_row_mapper(int, lambda i: [[str(i)]])
        )
        assert result is builder

    def test_build_applies_configuration(self):
        table = (
            Table.builder()
            .columns("| ID | NAME |")
            .widths(6, 16)
            .alignments("R")
            .row_mapper(int, lambda i: [str(i), "n"])
            .build()
        )

        assert table.labels == ["ID", "NAME"]
        assert [c.width for c in table.columns] == [6, 16]
        assert [c.alignment for c in table.columns] == [Alignment.RIGHT, Alignment.LEFT]
        assert [m.kind for m in table.mappers] == [MapperKind.SINGLE]

    def test_columns_called_twice_appends(self):
        table = Table.builder().columns("| A |").columns("+ B +").build()

        assert [(c.index, c.label, c.separator) for c in table.columns] == [
            (0, "A", "|"),
            (1, "B", "+"),
        ]

    def test_widths_before_columns_ignored(self):
        table = Table.builder().widths(10).columns("| A |").build()

        assert table.columns[0].width == 1

    def test_none_mapper_arguments_ignored(self):
        table = Table.builder().row_mapper(None, None).multi_row_mapper(int, None).build()

        assert len(table.mappers) == 0


class TestTableImmutability:
    """A built Table is never changed by later builder calls."""

    def test_later_builder_calls_do_not_leak(self):
        builder = Table.builder().columns("| A |")
        first = builder.build()

        builder.columns("| B |").widths(9, 9).row_mapper(str, lambda s: [s])
        second = builder.build()

        assert first.labels == ["A"]
        assert first.columns[0].width == 1
        assert len(first.mappers) == 0
        assert second.labels == ["A", "B"]
        assert len(second.mappers) == 1

    def test_empty_spec_yields_empty_table(self):
        table = Table.builder().columns("no delimiters").build()

        assert table.columns == ()
        assert table.line_width == 0


class TestTableFormatterFactory:
    def test_formatters_share_table_not_buffer(self, ab_table):
        first = ab_table.formatter()
        second = ab_table.formatter()

        first.row("x", "y")

        assert isinstance(first, TableFormatter)
        assert first.table is second.table
        assert second.getvalue() == ""

    def test_line_width(self, id_name_table):
        assert id_name_table.line_width == 13

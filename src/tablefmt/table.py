"""Table configuration and its fluent builder.

The builder collects the column spec, widths, alignments and row mappers,
then ``build()`` freezes them into a ``Table``. A ``Table`` never changes
after it is built and may be shared by any number of formatters.

Example:
    table = (
        Table.builder()
        .columns("| ID | NAME | FIRSTNAME | CONTACT |")
        .widths(6, 16, 16, 24)
        .alignments("R")
        .row_mapper(Customer, lambda c: [str(c.id), c.name, c.first_names, c.contact(0)])
        .build()
    )
    table.formatter().header().row_for(customer).footer().print(sys.stdout)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, TypeVar

from .columns import Column, parse_columns, with_alignments, with_widths
from .mappers import MapperKind, MapperRegistry

if TYPE_CHECKING:
    from .config import FormatterSettings
    from .formatter import TableFormatter

T = TypeVar("T")


@dataclass(frozen=True)
class Table:
    """
    Immutable table configuration.

    Attributes:
        columns: Column definitions in order
        mappers: Registered object-to-row mappers
    """

    columns: tuple[Column, ...] = ()
    mappers: MapperRegistry = field(default_factory=MapperRegistry)

    @staticmethod
    def builder() -> TableBuilder:
        """Return a new builder."""
        return TableBuilder()

    @property
    def labels(self) -> list[str]:
        return [c.label for c in self.columns]

    @property
    def line_width(self) -> int:
        """Width of a full rendered row, separators included."""
        if not self.columns:
            return 0
        return sum(c.width + 1 for c in self.columns) + 1

    def formatter(self, settings: FormatterSettings | None = None) -> TableFormatter:
        """Create a formatter with its own buffer for this table."""
        from .formatter import TableFormatter

        return TableFormatter(self, settings=settings)


class TableBuilder:
    """Fluent builder for ``Table``.

    All configuration methods return ``self`` for chaining. ``widths()`` and
    ``alignments()`` apply to the columns defined so far, so call
    ``columns()`` first.
    """

    def __init__(self) -> None:
        self._columns: tuple[Column, ...] = ()
        self._mappers = MapperRegistry()

    # -------------------------------------------------------------------------
    # Layout
    # -------------------------------------------------------------------------

    def columns(self, spec: str | None) -> TableBuilder:
        """Add columns from a spec such as ``"| ID | NAME |"``."""
        parsed = parse_columns(spec)
        offset = len(self._columns)
        self._columns += tuple(replace(c, index=offset + c.index) for c in parsed)
        return self

    def widths(self, *widths: int) -> TableBuilder:
        """Set column widths left to right (e.g. ``.widths(6, 16, 16, 24)``)."""
        self._columns = with_widths(self._columns, widths)
        return self

    def alignments(self, alignments: str | None) -> TableBuilder:
        """Set column alignments left to right (e.g. ``.alignments("RLL")``)."""
        self._columns = with_alignments(self._columns, alignments)
        return self

    # -------------------------------------------------------------------------
    # Row mappers
    # -------------------------------------------------------------------------

    def row_mapper(self, target: type[T], fn: Callable[[T], Any]) -> TableBuilder:
        """Register a mapper producing one row for instances of ``target``."""
        if target is not None and fn is not None:
            self._mappers = self._mappers.with_mapper(MapperKind.SINGLE, target, fn)
        return self

    def multi_row_mapper(self, target: type[T], fn: Callable[[T], Any]) -> TableBuilder:
        """Register a mapper producing several rows for instances of ``target``."""
        if target is not None and fn is not None:
            self._mappers = self._mappers.with_mapper(MapperKind.MULTI, target, fn)
        return self

    def build(self) -> Table:
        """Freeze the configuration into a ``Table``."""
        return Table(columns=self._columns, mappers=self._mappers)

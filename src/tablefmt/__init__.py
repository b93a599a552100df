"""
tablefmt: fixed-width text tables for reports.

This library renders typed domain objects into text tables with:
- Column layout declared as a header-like spec string
- Per-column widths, margins and alignment
- Cell markup for rules, label substitution and alignment overrides
- Single-row and multi-row object mappers dispatched by ``isinstance``
- A buffered, chainable formatter flushed to any text or binary stream

Example:
    import sys
    from tablefmt import Table

    table = (
        Table.builder()
        .columns("| ID | NAME | FIRSTNAME | CONTACT |")
        .widths(6, 16, 16, 24)
        .alignments("R")
        .row_mapper(Customer, lambda c: [str(c.id), c.name, c.first_names, c.contact(0)])
        .build()
    )

    (
        table.formatter()
        .header()
        .rows_for(customers)
        .footer()
        .print(sys.stdout)
    )

Output:
    +------+----------------+----------------+------------------------+
    |   ID | NAME           | FIRSTNAME      | CONTACT                |
    +------+----------------+----------------+------------------------+
    |  100 | Meyer          | Eric           | eme22@gmail.com        |
    +------+----------------+----------------+------------------------+
"""

from .columns import Alignment, Column, parse_columns
from .config import FormatterSettings, TableDefinition
from .exceptions import TableDefinitionError, TableFormatError, UnknownReportError
from .formatter import TableFormatter
from .mappers import MapperKind, MapperRegistry, RowMapper
from .markup import ResolvedCell, SeparatorCarry, parse_marker, resolve_cell
from .render import RenderedCell, render_cell, render_row
from .table import Table, TableBuilder

__all__ = [
    # Table configuration
    "Table",
    "TableBuilder",
    "TableFormatter",
    "FormatterSettings",
    "TableDefinition",
    # Columns
    "Alignment",
    "Column",
    "parse_columns",
    # Markup and rendering
    "ResolvedCell",
    "SeparatorCarry",
    "parse_marker",
    "resolve_cell",
    "RenderedCell",
    "render_cell",
    "render_row",
    # Mappers
    "MapperKind",
    "MapperRegistry",
    "RowMapper",
    # Exceptions
    "TableFormatError",
    "TableDefinitionError",
    "UnknownReportError",
]

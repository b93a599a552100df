"""
Table formatter: composes rows, rules and free text into a buffer.

Each formatter owns a private buffer. All content operations append to the
buffer and return the formatter for chaining; ``print()`` flushes the buffer
to a sink::

    (
        table.formatter()
        .text("Customers:")
        .header()
        .rows_for(customers)
        .footer()
        .print(sys.stdout)
    )

A formatter is not safe for concurrent use. Create one formatter per thread
from the shared ``Table``.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable
from typing import IO, Any

from .config import FormatterSettings
from .markup import LABEL_MARKER, RULE_MARKERS
from .render import render_row
from .table import Table

logger = logging.getLogger(__name__)

LABEL = "{" + LABEL_MARKER + "}"
RULE = "{" + RULE_MARKERS[0] + "}"


class TableFormatter:
    """Format rows of a ``Table`` into a text buffer.

    Example output:
        +------+----------------+----------------+------------------------+
        |   ID | NAME           | FIRSTNAME      | CONTACT                |
        +------+----------------+----------------+------------------------+
        |  100 | Meyer          | Eric           | eme22@gmail.com        |
        |  101 | Sommer         | Tina           | +49 030 22458 29425    |
        +------+----------------+----------------+------------------------+
    """

    def __init__(self, table: Table, settings: FormatterSettings | None = None) -> None:
        """Initialize the formatter.

        Args:
            table: Immutable table configuration
            settings: Runtime settings (default: ``FormatterSettings()``)
        """
        self.table = table
        self.settings = settings or FormatterSettings()
        self._buffer: list[str] = []

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def header(self, *labels: str) -> TableFormatter:
        """Append a rule, a label row and another rule.

        Columns without a given label show their own label. Labels may
        carry markers, e.g. ``header("{label}", "Price EUR")``.
        """
        missing = len(self.table.columns) - len(labels)
        labels = (*labels, *(LABEL for _ in range(missing)))
        return self.line().row(*labels).line()

    def footer(self, *trailing_text: str) -> TableFormatter:
        """Append a closing rule, then each trailing text as a raw line."""
        return self.line().text(*trailing_text)

    def text(self, *lines: str) -> TableFormatter:
        """Append raw lines that bypass the column layout."""
        for line in lines:
            self._buffer.append(f"{line}\n")
        return self

    def line(self, *markers: str) -> TableFormatter:
        """Append a rule line, optionally with per-column markers."""
        if not markers:
            markers = tuple(RULE for _ in self.table.columns)
        return self.row(*markers)

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------

    def row(self, *values: str | None) -> TableFormatter:
        """Append one row, the i-th value going into the i-th column.

        - ``"text"`` text in a cell with separators
        - ``" "`` empty cell with separators
        - ``""`` empty cell, no separator when the previous cell is empty too
        - ``"{R}text"``, ``"{L }text"``, ``"{---}"``, ... see ``tablefmt.markup``
        """
        self._buffer.append(render_row(self.table.columns, values))
        return self

    def row_for(self, obj: Any, separator_line: bool = False) -> TableFormatter:
        """Append the rows produced by every mapper matching ``obj``.

        Args:
            obj: Domain object; None appends nothing
            separator_line: Append a rule after each firing mapper's rows
        """
        for mapper in self.table.mappers.matching(obj):
            for values in mapper.rows(obj):
                self.row(*values)
            if separator_line:
                self.line()
        return self

    def rows_for(
        self, objects: Iterable[Any] | None, separator_line: bool = False
    ) -> TableFormatter:
        """Append rows for each object in iteration order."""
        for obj in objects or ():
            self.row_for(obj, separator_line)
        return self

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def getvalue(self) -> str:
        """Return the buffered content without clearing it."""
        return "".join(self._buffer)

    def clear(self) -> TableFormatter:
        """Discard the buffered content."""
        self._buffer.clear()
        return self

    def print(self, sink: IO[Any] | None = None) -> bool:
        """Write the buffer to ``sink`` and clear it.

        Text sinks receive ``str``; binary sinks receive bytes encoded with
        ``settings.encoding``. Write failures are logged and swallowed; the
        buffer is only cleared after a successful write so the caller may
        retry.

        Args:
            sink: Destination stream; None makes this a no-op

        Returns:
            True if the content was written, False otherwise
        """
        if sink is None:
            return False

        content = self.getvalue()
        try:
            if _is_binary(sink):
                sink.write(content.encode(self.settings.encoding))
            else:
                sink.write(content)
            flush = getattr(sink, "flush", None)
            if callable(flush):
                flush()
        except (OSError, ValueError, LookupError, TypeError) as e:
            logger.warning("Failed to print table (%d chars buffered): %s", len(content), e)
            return False

        logger.debug("Printed %d chars", len(content))
        self._buffer.clear()
        return True

    def __str__(self) -> str:
        return self.getvalue()


def _is_binary(sink: Any) -> bool:
    if isinstance(sink, io.TextIOBase):
        return False
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        return True
    mode = getattr(sink, "mode", "")
    return isinstance(mode, str) and "b" in mode

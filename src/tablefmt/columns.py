"""
Column model for fixed-width text tables.

A table is declared with a single column spec string that looks like the
header row it produces::

    "| ID | NAME | FIRSTNAME | CONTACT |"

``|`` and ``+`` delimit columns. The delimiter that opens a segment becomes
that column's separator character; whitespace around the label becomes its
left and right margins.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum

logger = logging.getLogger(__name__)

DELIMITERS = "|+"
"""Characters that delimit columns in a column spec string."""


class Alignment(Enum):
    """Horizontal alignment of cell content."""

    LEFT = "L"
    RIGHT = "R"

    @classmethod
    def parse(cls, value: str) -> Alignment | None:
        """Return the alignment for ``"L"``/``"R"`` (any case), or None."""
        try:
            return cls(value.upper())
        except ValueError:
            return None


@dataclass(frozen=True)
class Column:
    """
    A fixed-width cell slot.

    Attributes:
        index: Position of the column, counted from 0
        separator: Character drawn before the cell ("|", "+" or " ")
        label: Trimmed label text
        left_margin: Spaces kept between separator and left-aligned content
        right_margin: Spaces kept after right-aligned content
        width: Cell width in characters, separator excluded
        alignment: Default alignment of the cell content
    """

    index: int
    separator: str
    label: str
    left_margin: int = 0
    right_margin: int = 0
    width: int = 0
    alignment: Alignment = Alignment.LEFT

    @classmethod
    def from_segment(cls, index: int, separator: str, segment: str) -> Column:
        """Create a column from the raw text between two delimiters.

        The default width is the label length, so margins truncate the label
        until ``widths()`` makes room.
        """
        label = segment.strip()
        return cls(
            index=index,
            separator=separator,
            label=label,
            left_margin=len(segment) - len(segment.lstrip()),
            right_margin=len(segment) - len(segment.rstrip()),
            width=len(label),
        )


def parse_columns(spec: str | None) -> tuple[Column, ...]:
    """
    Parse a column specification string.

    Args:
        spec: Specification such as ``"| ID | NAME |"``

    Returns:
        Columns in declaration order. A spec without delimiters yields
        an empty tuple.
    """
    if not spec:
        return ()

    columns: list[Column] = []
    segment: list[str] = []
    opener: str | None = None
    for char in spec:
        if char not in DELIMITERS:
            segment.append(char)
            continue
        if opener is not None:
            columns.append(Column.from_segment(len(columns), opener, "".join(segment)))
        opener = char
        segment.clear()

    logger.debug("Parsed %d column(s) from spec %r", len(columns), spec)
    return tuple(columns)


def with_widths(columns: tuple[Column, ...], widths: Iterable[int]) -> tuple[Column, ...]:
    """Override column widths positionally, ignoring surplus widths."""
    result = list(columns)
    for i, width in enumerate(widths):
        if i >= len(result):
            break
        if width < 0:
            logger.warning("Ignoring negative width %d for column %d, using 0", width, i)
            width = 0
        result[i] = replace(result[i], width=width)
    return tuple(result)


def with_alignments(columns: tuple[Column, ...], alignments: str | None) -> tuple[Column, ...]:
    """
    Override column alignments positionally.

    Args:
        columns: Columns to update
        alignments: One ``L``/``R`` character per column, e.g. ``"RLL"``.
            Columns beyond the string keep their alignment.

    Returns:
        Updated columns
    """
    result = list(columns)
    for i, char in enumerate(alignments or ""):
        if i >= len(result):
            break
        alignment = Alignment.parse(char)
        if alignment is None:
            logger.warning("Ignoring unknown alignment %r for column %d", char, i)
            continue
        result[i] = replace(result[i], alignment=alignment)
    return tuple(result)

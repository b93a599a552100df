"""
Row layout for fixed-width text tables.

Lays out one row of raw cell values against the table's columns. Cell
rendering is a pure function of the column, the value, the previous value
and the separator carry handed over from the previous cell, so a row is a
left-to-right fold over its cells.

Example output of three rendered rows::

    +------+----------------+
    |   ID | NAME           |
    +------+----------------+
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .columns import Alignment, Column
from .markup import BLANK, SeparatorCarry, resolve_cell

FILL = " "


@dataclass(frozen=True)
class RenderedCell:
    """Text of one rendered cell plus the state handed to the next cell."""

    text: str
    separator: str
    carry: SeparatorCarry


def render_cell(
    column: Column,
    value: str,
    previous: str,
    carry: SeparatorCarry = SeparatorCarry.NONE,
) -> RenderedCell:
    """
    Render a single cell.

    Args:
        column: Column the cell belongs to
        value: Raw cell value (may carry a marker)
        previous: Raw value of the previous cell; for the first cell, the
            cell's own value
        carry: Separator override handed over by the previous cell

    Returns:
        Rendered text (leading separator included) and the carry for the
        next cell
    """
    cell = resolve_cell(value, column, carry)
    separator = cell.separator
    content = cell.content
    left_margin = cell.left_margin
    right_margin = cell.right_margin
    width = column.width

    if not content:
        left_margin = right_margin = 0
        # adjacent empty cells merge into one gap
        if not previous:
            separator = BLANK
        content = FILL * width

    if cell.alignment is Alignment.RIGHT:
        keep = max(0, min(len(content), width - right_margin))
        content = content[len(content) - keep :]
        pad = max(0, width - right_margin - len(content))
        text = f"{separator}{FILL * pad}{content}{FILL * right_margin}"
    else:
        content = content[: max(0, width - left_margin)]
        pad = max(0, width - left_margin - len(content))
        text = f"{separator}{FILL * left_margin}{content}{FILL * pad}"

    return RenderedCell(text=text, separator=separator, carry=cell.carry)


def render_row(columns: Sequence[Column], values: Sequence[str | None]) -> str:
    """
    Render one row of values.

    Only ``min(len(columns), len(values))`` cells are drawn: surplus values
    are ignored and missing values produce no output. The row is closed with
    a trailing separator and a line break only when a value for the last
    column is present.

    Args:
        columns: Table columns
        values: Raw cell values; None counts as an empty value

    Returns:
        Rendered text, possibly empty
    """
    raw = ["" if v is None else v for v in values]
    parts: list[str] = []
    carry = SeparatorCarry.NONE

    for i in range(min(len(columns), len(raw))):
        cell = render_cell(columns[i], raw[i], raw[max(0, i - 1)], carry)
        carry = cell.carry
        parts.append(cell.text)
        if i == len(columns) - 1:
            parts.append(cell.separator if raw[i] else BLANK)
            parts.append("\n")

    return "".join(parts)

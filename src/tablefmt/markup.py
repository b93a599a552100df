"""
Cell markup grammar.

A raw cell value may start with a ``{marker}`` prefix that changes how the
cell is drawn. The rest of the value is the literal cell content.

Markers:
    ``{}``          blank cell, trailing content is dropped
    ``{label}``     the owning column's label
    ``{---}``       rule segment drawn with ``-`` between ``+`` corners
    ``{===}``       rule segment drawn with ``=`` between ``+`` corners
    ``{L...}``      left-align this cell
    ``{R...}``      right-align this cell
    ``{... }``      any marker containing a space blanks the separators

Markers are tested independently, so ``{R }total:`` right-aligns *and*
blanks the separators. A value with ``{`` but no closing ``}`` is plain text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .columns import Alignment, Column

LABEL_MARKER = "label"
RULE_MARKERS = ("---", "===")
CORNER = "+"
BLANK = " "


class SeparatorCarry(Enum):
    """Separator override handed from one cell to the next within a row."""

    NONE = ""
    CORNER = CORNER
    BLANK = BLANK


@dataclass(frozen=True)
class ResolvedCell:
    """
    A cell value after marker resolution.

    Attributes:
        content: Text to place in the cell (not yet padded or truncated)
        alignment: Effective alignment for this render
        left_margin: Effective left margin
        right_margin: Effective right margin
        separator: Leading separator character for this cell
        carry: Separator override for the next cell
    """

    content: str
    alignment: Alignment
    left_margin: int
    right_margin: int
    separator: str
    carry: SeparatorCarry = SeparatorCarry.NONE


def parse_marker(value: str) -> tuple[str | None, str]:
    """
    Split a raw value into its marker and literal content.

    Returns:
        ``(marker, content)``; marker is None when the value carries no
        well-formed ``{...}`` prefix, in which case content is the value.
    """
    if value.startswith("{"):
        end = value.find("}")
        if end > 0:
            return value[1:end], value[end + 1 :]
    return None, value


def resolve_cell(
    value: str,
    column: Column,
    carry: SeparatorCarry = SeparatorCarry.NONE,
) -> ResolvedCell:
    """
    Apply marker effects to one raw cell value.

    Args:
        value: Raw cell value, possibly prefixed with a marker
        column: Column the cell belongs to
        carry: Separator override received from the previous cell

    Returns:
        The resolved cell, including the carry for the next cell
    """
    separator = CORNER if carry is SeparatorCarry.CORNER else column.separator
    if carry is SeparatorCarry.BLANK and not value:
        separator = BLANK

    alignment = column.alignment
    left_margin = column.left_margin
    right_margin = column.right_margin
    next_carry = SeparatorCarry.NONE

    marker, content = parse_marker(value)
    if marker == "":
        content = ""
    elif marker is not None:
        if marker == LABEL_MARKER:
            content = column.label
        if marker in RULE_MARKERS:
            left_margin = right_margin = 0
            separator = CORNER
            next_carry = SeparatorCarry.CORNER
            content = marker[0] * column.width
        if marker.startswith("L"):
            alignment = Alignment.LEFT
        if marker.startswith("R"):
            alignment = Alignment.RIGHT
        if BLANK in marker:
            separator = BLANK
            next_carry = SeparatorCarry.BLANK

    return ResolvedCell(
        content=content,
        alignment=alignment,
        left_margin=left_margin,
        right_margin=right_margin,
        separator=separator,
        carry=next_carry,
    )

"""Configuration for tablefmt: runtime settings and YAML table definitions."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .exceptions import TableDefinitionError

if TYPE_CHECKING:
    from .table import TableBuilder

ENCODING_ENV_VAR = "TABLEFMT_ENCODING"
"""Environment variable for the encoding used with binary sinks."""

LOG_LEVEL_ENV_VAR = "TABLEFMT_LOG_LEVEL"
"""Environment variable for the CLI log level."""


@dataclass
class FormatterSettings:
    """Runtime settings shared by formatters."""

    # Encoding applied when printing to a binary sink
    encoding: str = "utf-8"

    # Log level configured by the CLI
    log_level: str = "WARNING"

    @classmethod
    def from_environment(cls) -> FormatterSettings:
        """Create FormatterSettings from environment variables."""
        return cls(
            encoding=os.environ.get(ENCODING_ENV_VAR, "utf-8"),
            log_level=os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING").upper(),
        )


@dataclass(frozen=True)
class TableDefinition:
    """Declarative table layout, typically loaded from YAML.

    Example YAML::

        title: "Customers:"
        columns: "| ID | NAME | FIRSTNAMES | CONTACTS |"
        widths: [6, 22, 22, 24]
        alignments: R
    """

    columns: str
    widths: list[int] = field(default_factory=list)
    alignments: str = ""
    title: str | None = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> TableDefinition:
        if not isinstance(d, dict):
            raise TableDefinitionError("<root>", d, "definition must be a mapping")

        columns = d.get("columns")
        if not isinstance(columns, str) or not columns.strip():
            raise TableDefinitionError("columns", columns, "a non-empty column spec is required")

        widths = d.get("widths", [])
        if not isinstance(widths, list) or not all(
            isinstance(w, int) and not isinstance(w, bool) for w in widths
        ):
            raise TableDefinitionError("widths", widths, "must be a list of integers")

        alignments = d.get("alignments", "")
        if not isinstance(alignments, str) or any(a not in "LRlr" for a in alignments):
            raise TableDefinitionError("alignments", alignments, "must contain only 'L' or 'R'")

        title = d.get("title")
        if title is not None and not isinstance(title, str):
            raise TableDefinitionError("title", title, "must be a string")

        return cls(columns=columns, widths=widths, alignments=alignments, title=title)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> TableDefinition:
        import yaml

        try:
            data = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise TableDefinitionError("<root>", None, f"invalid YAML: {e}") from e
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"columns": self.columns}
        if self.widths:
            result["widths"] = list(self.widths)
        if self.alignments:
            result["alignments"] = self.alignments
        if self.title is not None:
            result["title"] = self.title
        return result

    def to_builder(self) -> TableBuilder:
        """Return a builder preconfigured with this layout."""
        from .table import Table

        return (
            Table.builder()
            .columns(self.columns)
            .widths(*self.widths)
            .alignments(self.alignments)
        )

"""Exceptions for tablefmt."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class TableFormatError(Exception):
    """
    Base exception for all tablefmt errors.

    Rendering itself never raises: malformed column specs and cell markup
    degrade to empty or literal output. Errors are only raised while loading
    configuration (table definitions, report names) so callers can catch
    every library-specific error with a single except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Configuration Exceptions
# ---------------------------------------------------------------------------


class TableDefinitionError(TableFormatError):
    """
    Raised when a table definition cannot be loaded.

    Attributes:
        field: Name of the offending definition field
        value: The rejected value
        reason: Human readable explanation
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid table definition field '{field}': {reason} (got {value!r})")


class UnknownReportError(TableFormatError):
    """Raised when a demo report name is not known."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(f"Unknown report: {name} (available: {', '.join(available)})")

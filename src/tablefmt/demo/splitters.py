"""Name and contact splitting for the demo data model.

Both splitters are plain objects injected where they are needed; there are
no process-wide instances.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Leading/trailing whitespace, commas, semicolons and quotes
_EDGE_CHARS = " \t\r\n\f\v\"',;"
_NAME_SECTIONS = re.compile(r"[,;]")


def _trim(s: str) -> str:
    return s.strip(_EDGE_CHARS)


@dataclass(frozen=True)
class SplitName:
    """A single-string name split into last name and first names."""

    name: str
    first_names: str


class NameSplitter:
    """Split single-string names into last name and first names.

    ``"Bayer, Anne"`` and ``"Bayer; Anne"`` are read last-name first.
    Otherwise the name is split on whitespace and the last token is the
    last name: ``"Nadine-Ulla Blumenfeld"`` -> ``("Blumenfeld", "Nadine-Ulla")``.
    """

    def split(self, name: str | None) -> SplitName | None:
        if not name:
            return None

        sections = _NAME_SECTIONS.split(name)
        while sections and not sections[-1]:
            sections.pop()
        if len(sections) > 1:
            return SplitName(name=_trim(sections[0]), first_names=_trim(sections[1]))

        first: list[str] = []
        last = ""
        for token in name.split():
            if last:
                first.append(last)
            last = _trim(token)
        return SplitName(name=last, first_names=" ".join(first))


class ContactsSplitter:
    """Store a list of contacts in a single string.

    One contact is kept as the plain string; several contacts are kept as a
    JSON array. Contacts are trimmed and duplicates are ignored.
    """

    def as_list(self, contacts: str) -> list[str]:
        """Return the contacts stored in ``contacts``."""
        if not contacts:
            return []
        if not contacts.startswith("["):
            return [contacts]
        try:
            values = json.loads(contacts)
        except json.JSONDecodeError:
            logger.warning("Ignoring malformed contacts value: %r", contacts)
            return []
        return [v for v in values if isinstance(v, str)] if isinstance(values, list) else []

    def dump(self, contacts: list[str]) -> str:
        """Return the string representation for ``contacts``."""
        if not contacts:
            return ""
        if len(contacts) == 1:
            return contacts[0]
        return json.dumps(contacts, ensure_ascii=False)

    def add(self, contacts: str, contact: str | None) -> str:
        """Return ``contacts`` with ``contact`` appended unless already present."""
        if not contact:
            return contacts
        contact = _trim(contact)
        values = self.as_list(contacts)
        if not contact or contact in values:
            return contacts
        return self.dump(values + [contact])

    def remove(self, contacts: str, i: int) -> str:
        """Return ``contacts`` without the i-th contact."""
        values = self.as_list(contacts)
        if 0 <= i < len(values):
            del values[i]
        return self.dump(values)

    def contact(self, contacts: str, i: int) -> str:
        """Return the i-th contact, or an empty string."""
        values = self.as_list(contacts)
        return values[i] if 0 <= i < len(values) else ""

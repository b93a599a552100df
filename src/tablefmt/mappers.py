"""
Object-to-row mappers.

A mapper turns a domain object into raw row values. Two kinds exist:

- ``MapperKind.SINGLE``: ``fn(obj) -> Sequence[str]``, one row per object
- ``MapperKind.MULTI``: ``fn(obj) -> Sequence[Sequence[str]]``, several rows

Mappers are selected with ``isinstance``, so a mapper registered for a base
class, an ABC or a ``runtime_checkable`` protocol fires for every object
implementing it. Every matching mapper fires; single-row mappers come
before multi-row mappers, each group in registration order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

Row = Sequence[str | None]
SingleRowFn = Callable[[Any], Row | None]
MultiRowFn = Callable[[Any], Sequence[Row] | None]


class MapperKind(Enum):
    """Kind of row production a mapper performs."""

    SINGLE = "single"
    MULTI = "multi"


@dataclass(frozen=True)
class RowMapper:
    """
    A registered mapper.

    Attributes:
        kind: Whether ``fn`` yields one row or several
        target: Type (or ABC / runtime-checkable protocol) the mapper serves
        fn: Mapping function
    """

    kind: MapperKind
    target: type
    fn: SingleRowFn | MultiRowFn

    def matches(self, obj: Any) -> bool:
        """Return True if ``obj`` is an instance of the mapper's target."""
        return obj is not None and isinstance(obj, self.target)

    def rows(self, obj: Any) -> list[Row]:
        """Apply the mapper and return its rows in order; None yields no rows."""
        produced = self.fn(obj)
        if produced is None:
            return []
        if self.kind is MapperKind.SINGLE:
            return [produced]
        return list(produced)


@dataclass(frozen=True)
class MapperRegistry:
    """Immutable, ordered collection of row mappers."""

    mappers: tuple[RowMapper, ...] = field(default_factory=tuple)

    def with_mapper(
        self, kind: MapperKind, target: type, fn: SingleRowFn | MultiRowFn
    ) -> MapperRegistry:
        """Return a new registry with the mapper appended.

        Registering the same kind and target again replaces the earlier
        mapper in place.
        """
        mapper = RowMapper(kind=kind, target=target, fn=fn)
        mappers = list(self.mappers)
        for i, existing in enumerate(mappers):
            if existing.kind is kind and existing.target is target:
                mappers[i] = mapper
                break
        else:
            mappers.append(mapper)
        return MapperRegistry(tuple(mappers))

    def matching(self, obj: Any) -> list[RowMapper]:
        """Return every mapper that applies to ``obj``, singles first."""
        found = [m for m in self.mappers if m.matches(obj)]
        return [m for m in found if m.kind is MapperKind.SINGLE] + [
            m for m in found if m.kind is MapperKind.MULTI
        ]

    def __iter__(self) -> Iterator[RowMapper]:
        return iter(self.mappers)

    def __len__(self) -> int:
        return len(self.mappers)

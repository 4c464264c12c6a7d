"""Record Search — predicate filtering, deterministic ordering and page slicing.

Invariants:
    - Pure function: no IO, no DB; input is a snapshot of collection values
    - Predicates compose with AND; an empty predicate list matches everything
    - Case-insensitive substring match for Contains
    - Range bounds are inclusive and each bound is optional
    - A record whose path value is missing or None never matches
    - Results ordered ascending by (created_at, id), never by id shape alone
    - page/limit below 1 are rejected, not clamped; a page past the end is []

Design Decisions:
    - Predicates are frozen dataclasses over attribute paths: callers describe
      WHAT to match, the engine owns traversal
    - Filters absent from PropertySearchFilters produce no predicate at all,
      so an unspecified filter can never narrow the result
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from rentstore.core.domain_types import PropertyStatus
from rentstore.core.errors import ValidationError
from rentstore.schemas.property import PropertySearchFilters

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_MISSING = object()


def resolve_path(record: object, path: Sequence[str]) -> object:
    value = record
    for part in path:
        if value is None:
            return _MISSING
        value = getattr(value, part, _MISSING)
        if value is _MISSING:
            return _MISSING
    return _MISSING if value is None else value


def _plain(value: object) -> object:
    return value.value if isinstance(value, Enum) else value


@dataclass(frozen=True)
class Equals:
    path: tuple[str, ...]
    value: object

    def matches(self, record: object) -> bool:
        found = resolve_path(record, self.path)
        return found is not _MISSING and _plain(found) == _plain(self.value)


@dataclass(frozen=True)
class Contains:
    path: tuple[str, ...]
    text: str

    def matches(self, record: object) -> bool:
        found = resolve_path(record, self.path)
        if not isinstance(found, str):
            return False
        return self.text.lower() in found.lower()


@dataclass(frozen=True)
class InRange:
    path: tuple[str, ...]
    minimum: float | None = None
    maximum: float | None = None

    def matches(self, record: object) -> bool:
        found = resolve_path(record, self.path)
        if found is _MISSING:
            return False
        if self.minimum is not None and found < self.minimum:
            return False
        if self.maximum is not None and found > self.maximum:
            return False
        return True


@dataclass(frozen=True)
class AtLeast:
    path: tuple[str, ...]
    minimum: float

    def matches(self, record: object) -> bool:
        found = resolve_path(record, self.path)
        return found is not _MISSING and found >= self.minimum


Predicate = Equals | Contains | InRange | AtLeast


@dataclass(frozen=True)
class Page:
    """1-based page window. Build with Page.create() to get input checks."""
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def create(cls, page: object, limit: object) -> "Page | ValidationError":
        for name, value in (("page", page), ("limit", limit)):
            if isinstance(value, bool) or not isinstance(value, int):
                return ValidationError(name, "must be an integer")
            if value < 1:
                return ValidationError(name, "must be at least 1")
        return cls(page, limit)

    @property
    def start(self) -> int:
        return (self.page - 1) * self.limit

    def slice(self, items: Sequence) -> list:
        return list(items[self.start:self.start + self.limit])


def sort_key(record: object) -> tuple:
    return (record.created_at, record.id)


def matches_all(record: object, predicates: Iterable[Predicate]) -> bool:
    return all(p.matches(record) for p in predicates)


def filter_records(records: Iterable, predicates: Sequence[Predicate]) -> list:
    """All matches in (created_at, id) order, unpaginated."""
    return sorted(
        (r for r in records if matches_all(r, predicates)), key=sort_key,
    )


def run_query(
    records: Iterable, predicates: Sequence[Predicate], page: Page,
) -> list:
    return page.slice(filter_records(records, predicates))


def property_predicates(filters: PropertySearchFilters) -> list[Predicate]:
    """Map search filters to predicates; only available listings are searchable."""
    predicates: list[Predicate] = [
        Equals(("status",), PropertyStatus.AVAILABLE),
    ]
    if filters.city:
        predicates.append(Contains(("location", "city"), filters.city))
    if filters.min_price is not None or filters.max_price is not None:
        predicates.append(InRange(
            ("rent", "monthly"), filters.min_price, filters.max_price,
        ))
    if filters.bedrooms is not None:
        predicates.append(AtLeast(("specifications", "bedrooms"), filters.bedrooms))
    if filters.property_type is not None:
        predicates.append(Equals(("type",), filters.property_type))
    if filters.furnished is not None:
        predicates.append(Equals(("specifications", "furnished"), filters.furnished))
    if filters.pets_allowed is not None:
        predicates.append(Equals(("specifications", "pets_allowed"), filters.pets_allowed))
    return predicates

"""Referential Index — resolves "all records whose foreign key equals a parent id".

Invariants:
    - Logical only: a filtered scan over collection values, nothing materialized
    - Same ordering as search results: (created_at, id) ascending
    - Never paginated; an unknown or malformed parent id yields []
"""

from collections.abc import Iterable

from rentstore.core.search_records import Equals, filter_records, sort_key


def resolve_children(records: Iterable, field: str, parent_id: str) -> list:
    return filter_records(records, [Equals((field,), parent_id)])


def resolve_between(
    records: Iterable, first_field: str, second_field: str, a: str, b: str,
) -> list:
    """Records linking a and b through two foreign keys, in either direction."""
    records = list(records)
    forward = filter_records(
        records, [Equals((first_field,), a), Equals((second_field,), b)],
    )
    if a == b:
        return forward
    backward = filter_records(
        records, [Equals((first_field,), b), Equals((second_field,), a)],
    )
    return sorted(forward + backward, key=sort_key)

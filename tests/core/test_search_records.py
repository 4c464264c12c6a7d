"""Record Search — predicates, ordering, pagination.

Tests cover:
    - Equals / Contains / InRange / AtLeast semantics
    - Missing or None values never match
    - AND composition, empty predicate list matches all
    - Ordering by (created_at, id)
    - Page windows and page/limit validation
    - property_predicates: only given filters narrow, always status=available
"""

import random
from datetime import timedelta

import pytest

from rentstore.core.enforce_entities import build_entity
from rentstore.core.errors import ValidationError
from rentstore.core.search_records import (
    AtLeast, Contains, Equals, InRange, Page, filter_records,
    property_predicates, run_query,
)
from rentstore.schemas.property import Property, PropertySearchFilters
from tests.builders import T0, new_id, property_payload


def _property(offset: int = 0, id: str | None = None, **overrides) -> Property:
    return build_entity(
        Property, property_payload(**overrides),
        id=id or new_id(), created_at=T0 + timedelta(seconds=offset),
    )


# ─── Predicates ─────────────────────────────────────────────────

def test_equals_compares_enums_with_plain_values():
    listing = _property(type="house")
    assert Equals(("type",), "house").matches(listing)
    assert not Equals(("type",), "apartment").matches(listing)


def test_contains_is_case_insensitive_substring():
    listing = _property(location={"city": "Austin"})
    assert Contains(("location", "city"), "aus").matches(listing)
    assert Contains(("location", "city"), "AUSTIN").matches(listing)
    assert not Contains(("location", "city"), "Dallas").matches(listing)


def test_in_range_bounds_are_inclusive_and_optional():
    listing = _property(rent={"monthly": 1500})
    assert InRange(("rent", "monthly"), 1500, 1500).matches(listing)
    assert InRange(("rent", "monthly"), None, 1500).matches(listing)
    assert InRange(("rent", "monthly"), 1500, None).matches(listing)
    assert not InRange(("rent", "monthly"), 1501, None).matches(listing)
    assert not InRange(("rent", "monthly"), None, 1499).matches(listing)


def test_at_least():
    listing = _property(specifications={"bedrooms": 2})
    assert AtLeast(("specifications", "bedrooms"), 2).matches(listing)
    assert not AtLeast(("specifications", "bedrooms"), 3).matches(listing)


def test_missing_or_none_path_never_matches():
    listing = _property()
    assert listing.location.coordinates is None
    assert not Equals(("location", "coordinates", "latitude"), 0).matches(listing)
    assert not InRange(("location", "coordinates", "latitude"), -90, 90).matches(listing)
    assert not Contains(("virtual_tour",), "").matches(listing)
    assert not Equals(("no_such_field",), None).matches(listing)


# ─── Ordering / composition ─────────────────────────────────────

def test_empty_predicates_match_everything():
    records = [_property(i) for i in range(3)]
    assert filter_records(records, []) == records


def test_predicates_combine_with_and():
    cheap_austin = _property(0, rent={"monthly": 900})
    pricey_austin = _property(1, rent={"monthly": 2500})
    cheap_dallas = _property(2, rent={"monthly": 900}, location={"city": "Dallas"})
    found = filter_records(
        [cheap_austin, pricey_austin, cheap_dallas],
        [Contains(("location", "city"), "austin"), InRange(("rent", "monthly"), None, 1000)],
    )
    assert found == [cheap_austin]


def test_ordering_by_created_at_then_id():
    later = _property(5)
    tie_low = _property(1, id="00000000-0000-4000-8000-000000000001")
    tie_high = _property(1, id="ffffffff-0000-4000-8000-000000000001")
    earliest = _property(0, id="ffffffff-ffff-4fff-bfff-ffffffffffff")
    found = filter_records([later, tie_high, earliest, tie_low], [])
    assert found == [earliest, tie_low, tie_high, later]


# ─── Pagination ─────────────────────────────────────────────────

def test_second_page_of_fifteen_returns_last_five():
    ranked = [_property(i) for i in range(15)]
    shuffled = ranked[:]
    random.Random(7).shuffle(shuffled)

    page_two = run_query(shuffled, [], Page(2, 10))
    assert page_two == ranked[10:15]
    assert run_query(shuffled, [], Page(1, 10)) == ranked[:10]
    assert run_query(shuffled, [], Page(4, 10)) == []


def test_page_window_arithmetic():
    assert Page(3, 5).start == 10
    assert Page(1, 10).slice(list(range(4))) == [0, 1, 2, 3]


@pytest.mark.parametrize("page, limit, field, reason", [
    (0, 10, "page", "must be at least 1"),
    (-1, 10, "page", "must be at least 1"),
    (1, 0, "limit", "must be at least 1"),
    ("2", 10, "page", "must be an integer"),
    (1, 2.5, "limit", "must be an integer"),
    (True, 10, "page", "must be an integer"),
])
def test_page_create_rejects_bad_input(page, limit, field, reason):
    assert Page.create(page, limit) == ValidationError(field, reason)


def test_page_create_accepts_valid_input():
    assert Page.create(2, 25) == Page(2, 25)


# ─── Property filters ───────────────────────────────────────────

def test_no_filters_means_status_only():
    predicates = property_predicates(PropertySearchFilters())
    assert predicates == [Equals(("status",), "available")]


def test_unlisted_properties_never_returned():
    available = _property(0)
    rented = _property(1, status="rented")
    found = filter_records([available, rented], property_predicates(PropertySearchFilters()))
    assert found == [available]


def test_given_filters_each_add_a_predicate():
    filters = PropertySearchFilters(
        city="Austin", min_price=1000, max_price=2000, bedrooms=2,
        property_type="apartment", furnished=True, pets_allowed=False,
    )
    assert len(property_predicates(filters)) == 7


def test_only_min_price_leaves_upper_bound_open():
    filters = PropertySearchFilters(min_price=1000)
    assert InRange(("rent", "monthly"), 1000, None) in property_predicates(filters)


def test_boolean_filters_match_false_values():
    furnished = _property(0, specifications={"furnished": True})
    bare = _property(1, specifications={"furnished": False})
    found = filter_records(
        [furnished, bare], property_predicates(PropertySearchFilters(furnished=False)),
    )
    assert found == [bare]

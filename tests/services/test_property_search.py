"""Property Search — filters, availability and pagination over the stored listings.

Tests cover:
    - City / price range / minimum bedrooms combined with AND
    - Only available listings are returned
    - Results in creation order, paged by page/limit
    - page or limit below 1 returns ValidationError
    - Malformed filters return ValidationError
"""

import pytest

from rentstore.core.errors import ValidationError
from rentstore.schemas.property import PropertySearchFilters
from tests.builders import property_payload


def _listing(store, city="Austin", monthly=1500, bedrooms=2, **overrides):
    return store.properties.create(property_payload(
        location={"city": city},
        rent={"monthly": monthly},
        specifications={"bedrooms": bedrooms},
        **overrides,
    ))


def test_city_price_and_bedroom_filters(store):
    match = _listing(store, "Austin", 1500, 2)
    bigger = _listing(store, "austin", 2000, 3)
    _listing(store, "Austin", 2100, 2)
    _listing(store, "Austin", 1500, 1)
    _listing(store, "Dallas", 1500, 2)
    _listing(store, "Austin", 999, 4)

    found = store.properties.search(
        {"city": "Austin", "minPrice": 1000, "maxPrice": 2000, "bedrooms": 2},
    )
    assert found == [match, bigger]


def test_accepts_filter_model(store):
    house = _listing(store, type="house")
    _listing(store)
    found = store.properties.search(PropertySearchFilters(property_type="house"))
    assert found == [house]


def test_unavailable_listings_excluded(store):
    available = _listing(store)
    rented = _listing(store)
    store.properties.update(rented.id, {"status": "rented"})
    assert store.properties.search() == [available]


def test_pagination_over_fifteen_matches(store):
    listings = [_listing(store) for _ in range(15)]
    assert store.properties.search(page=1, limit=10) == listings[:10]
    assert store.properties.search(page=2, limit=10) == listings[10:]
    assert store.properties.search(page=4, limit=10) == []


def test_default_limit_is_ten(store):
    listings = [_listing(store) for _ in range(12)]
    assert store.properties.search() == listings[:10]


@pytest.mark.parametrize("page, limit, field", [
    (0, 10, "page"),
    (1, 0, "limit"),
    (-3, 5, "page"),
])
def test_page_and_limit_below_one_rejected(store, page, limit, field):
    _listing(store)
    error = store.properties.search(page=page, limit=limit)
    assert error == ValidationError(field, "must be at least 1")


def test_malformed_filters_rejected(store):
    error = store.properties.search({"bedrooms": -1})
    assert isinstance(error, ValidationError)
    assert error.field == "bedrooms"
    assert isinstance(store.properties.search({"colour": "red"}), ValidationError)


@pytest.mark.parametrize("filters, field", [
    ({"minPrice": "nan"}, "minPrice"),
    ({"maxPrice": float("nan")}, "maxPrice"),
    ({"maxPrice": "inf"}, "maxPrice"),
    ({"minPrice": -100}, "minPrice"),
])
def test_non_finite_or_negative_price_bounds_rejected(store, filters, field):
    _listing(store, monthly=5000)
    error = store.properties.search(filters)
    assert isinstance(error, ValidationError)
    assert error.field == field


def test_no_match_is_empty(store):
    _listing(store)
    assert store.properties.search({"city": "Houston"}) == []

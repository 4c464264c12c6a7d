"""Error Taxonomy — returned outcomes and raised infrastructure errors.

Tests:
    - ValidationError / NotFound are immutable values with a REST envelope
    - DatabaseError carries the failed operation and a 503 status
    - StoreNotInitializedError is a RentStoreError
"""

import dataclasses

import pytest

from rentstore.core.errors import (
    DatabaseError, NotFound, RentStoreError, StoreNotInitializedError,
    ValidationError,
)


def test_validation_error_names_field_and_reason():
    error = ValidationError("rent.monthly", "must be >= 0")
    assert error.message == "rent.monthly: must be >= 0"
    assert error.http_status == 400
    body = error.to_response()["error"]
    assert body["code"] == "VALIDATION_ERROR"
    assert body["field"] == "rent.monthly"
    assert body["category"] == "validation"


def test_outcomes_are_frozen_and_compare_by_value():
    error = ValidationError("page", "must be at least 1")
    assert error == ValidationError("page", "must be at least 1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        error.field = "limit"


def test_not_found_envelope():
    missing = NotFound("Property", "abc")
    assert missing.message == "Property 'abc' not found"
    body = missing.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert "timestamp" in body
    assert missing.http_status == 404


def test_database_error_records_operation():
    error = DatabaseError("disk I/O error", operation="commit")
    assert isinstance(error, RentStoreError)
    assert error.operation == "commit"
    assert error.http_status == 503
    assert error.to_response()["error"]["severity"] == "critical"
    assert "commit" in str(error)


def test_store_not_initialized_is_raised_type():
    with pytest.raises(RentStoreError) as info:
        raise StoreNotInitializedError()
    assert info.value.code == "STORE_NOT_INITIALIZED"

"""Domain Types — identifier aliases and enum values.

Tests:
    - NewType aliases are plain str at runtime
    - Enums serialize to their literal string
    - MaintenanceStatus is declared in lifecycle order
"""

from uuid import uuid4

from rentstore.core.domain_types import (
    ApplicationStatus, MaintenanceStatus, PropertyId, PropertyStatus,
    PropertyType, RentalStatus, UserId, UserType,
)


def test_identity_types_are_plain_strings():
    raw = str(uuid4())
    assert UserId(raw) == raw
    assert isinstance(PropertyId(raw), str)


def test_enums_compare_equal_to_their_value():
    assert PropertyStatus.AVAILABLE == "available"
    assert UserType("agency") is UserType.AGENCY
    assert PropertyType.COMMERCIAL.value == "commercial"


def test_property_status_members():
    assert {s.value for s in PropertyStatus} == {
        "available", "rented", "maintenance", "unlisted",
    }


def test_lifecycle_enums():
    assert {s.value for s in RentalStatus} == {"pending", "active", "completed", "cancelled"}
    assert {s.value for s in ApplicationStatus} == {"pending", "approved", "rejected"}


def test_maintenance_status_in_lifecycle_order():
    assert [s.value for s in MaintenanceStatus] == [
        "reported", "scheduled", "in_progress", "completed",
    ]

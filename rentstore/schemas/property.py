"""Property — a listing owned by one landlord, plus the search filter contract.

Invariants:
    - rent.monthly and rent.securityDeposit are non-negative
    - views and favoriteCount start at 0 and never decrease (see enforce_transitions)
    - status defaults to available: a new listing is searchable immediately
"""

from pydantic import Field

from rentstore.core.domain_types import PropertyStatus, PropertyType
from rentstore.schemas.common import (
    Component, Entity, NonEmptyStr, PropertyRef, UserRef, UtcDatetime,
)


class Coordinates(Component):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class Location(Component):
    address: NonEmptyStr
    city: NonEmptyStr
    state: NonEmptyStr
    zip_code: NonEmptyStr
    coordinates: Coordinates | None = None


class Specifications(Component):
    bedrooms: int = Field(ge=0)
    bathrooms: float = Field(ge=0)
    square_footage: float = Field(0, ge=0)
    furnished: bool = False
    parking: bool = False
    pets_allowed: bool = False


class Rent(Component):
    monthly: float = Field(ge=0)
    security_deposit: float = Field(0, ge=0)
    utilities: list[str] = Field(default_factory=list)
    included_utilities: list[str] = Field(default_factory=list)


class Property(Entity):
    id: PropertyRef
    landlord_id: UserRef
    title: NonEmptyStr
    type: PropertyType
    status: PropertyStatus = PropertyStatus.AVAILABLE
    location: Location
    specifications: Specifications
    amenities: list[str] = Field(default_factory=list)
    rent: Rent
    images: list[str] = Field(default_factory=list)
    virtual_tour: str | None = None
    available_from: UtcDatetime
    minimum_lease_term: int = Field(1, ge=1)  # months
    maximum_occupants: int = Field(1, ge=1)
    views: int = Field(0, ge=0)
    favorite_count: int = Field(0, ge=0)


class PropertySearchFilters(Component):
    """Caller-supplied search filters. Every filter is optional; None means omitted."""

    city: str | None = None
    min_price: float | None = Field(None, ge=0)
    max_price: float | None = Field(None, ge=0)
    bedrooms: int | None = Field(None, ge=0)
    property_type: PropertyType | None = None
    furnished: bool | None = None
    pets_allowed: bool | None = None

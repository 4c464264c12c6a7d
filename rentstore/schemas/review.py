"""Review — a tenant's rating of a property and its landlord."""

from pydantic import Field

from rentstore.schemas.common import Entity, PropertyRef, ReviewRef, UserRef

MIN_REVIEW_RATING = 1
MAX_REVIEW_RATING = 5


def _rating():
    return Field(ge=MIN_REVIEW_RATING, le=MAX_REVIEW_RATING)


class Review(Entity):
    id: ReviewRef
    property_id: PropertyRef
    user_id: UserRef
    rating: float = _rating()
    comment: str = ""
    amenities_rating: float = _rating()
    location_rating: float = _rating()
    value_for_money_rating: float = _rating()
    landlord_rating: float = _rating()
    images: list[str] = Field(default_factory=list)
    helpful: int = Field(0, ge=0)
    verified: bool = False

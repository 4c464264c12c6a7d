"""User — tenant, landlord or agency account record."""

from typing import Annotated

from pydantic import Field, StringConstraints, field_validator

from rentstore.core.domain_types import UserType
from rentstore.schemas.common import Entity, NonEmptyStr, ReviewRef, UserRef

MIN_USER_RATING = 0.0
MAX_USER_RATING = 5.0

EmailAddress = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$",
    ),
]


class User(Entity):
    id: UserRef
    type: UserType
    name: NonEmptyStr
    email: EmailAddress
    phone: str = ""
    verification_status: bool = False
    rating: float = Field(MIN_USER_RATING, ge=MIN_USER_RATING, le=MAX_USER_RATING)
    reviews: list[ReviewRef] = Field(default_factory=list)

    @field_validator("reviews")
    @classmethod
    def reviews_are_a_set(cls, v: list[str]) -> list[str]:
        if len(set(v)) != len(v):
            raise ValueError("duplicate review id")
        return v

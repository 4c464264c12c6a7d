"""Application — a tenant's request to rent a property."""

from pydantic import Field

from rentstore.core.domain_types import ApplicationStatus
from rentstore.schemas.common import (
    ApplicationRef, Component, Entity, NonEmptyStr, PropertyRef, UserRef,
    UtcDatetime,
)

MIN_CREDIT_SCORE = 300
MAX_CREDIT_SCORE = 850


class Employment(Component):
    employer: NonEmptyStr
    position: str = ""
    duration: int = Field(0, ge=0)  # months


class Reference(Component):
    name: NonEmptyStr
    contact: NonEmptyStr
    relationship: str = ""


class ApplicationDocument(Component):
    name: NonEmptyStr
    url: NonEmptyStr
    type: str = "other"


class Application(Entity):
    id: ApplicationRef
    property_id: PropertyRef
    tenant_id: UserRef
    status: ApplicationStatus = ApplicationStatus.PENDING
    desired_move_in: UtcDatetime
    lease_term: int = Field(ge=1)  # months
    occupants: int = Field(1, ge=1)
    monthly_income: float = Field(ge=0)
    credit_score: int | None = Field(None, ge=MIN_CREDIT_SCORE, le=MAX_CREDIT_SCORE)
    employment: Employment | None = None
    references: list[Reference] = Field(default_factory=list)
    documents: list[ApplicationDocument] = Field(default_factory=list)

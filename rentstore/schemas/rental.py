"""Rental — a lease between a tenant and a landlord for one property.

Invariants:
    - leaseEnd strictly after leaseStart
    - paymentHistory entries carry their own minted id
"""

from pydantic import Field, ValidationInfo, field_validator

from rentstore.core.domain_types import PaymentStatus, RentalDocumentType, RentalStatus
from rentstore.schemas.common import (
    Component, Entity, NonEmptyStr, PaymentRef, PropertyRef, RentalRef,
    UserRef, UtcDatetime,
)


class RentalDocument(Component):
    name: NonEmptyStr
    url: NonEmptyStr
    type: RentalDocumentType


class Payment(Component):
    id: PaymentRef
    amount: float = Field(ge=0)
    date: UtcDatetime
    status: PaymentStatus = PaymentStatus.PENDING


class Rental(Entity):
    id: RentalRef
    property_id: PropertyRef
    tenant_id: UserRef
    landlord_id: UserRef
    status: RentalStatus = RentalStatus.PENDING
    lease_start: UtcDatetime
    lease_end: UtcDatetime
    monthly_rent: float = Field(ge=0)
    security_deposit: float = Field(0, ge=0)
    documents: list[RentalDocument] = Field(default_factory=list)
    payment_history: list[Payment] = Field(default_factory=list)

    @field_validator("lease_end")
    @classmethod
    def lease_end_after_start(cls, v, info: ValidationInfo):
        start = info.data.get("lease_start")
        if start is not None and v <= start:
            raise ValueError("must be after leaseStart")
        return v

"""Shared Schema Pieces — base entity, field types and reference validators.

Invariants:
    - extra="forbid" on every model: unknown payload keys are a ValidationError
    - NaN and infinity are rejected for every float field
    - Reference fields accept only well-formed identifiers (no existence check)
    - Datetimes are stored timezone-aware UTC; naive input is read as UTC

Design Decisions:
    - camelCase aliases with populate_by_name: callers may send either form,
      persisted JSON is always camelCase
"""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

from rentstore.core.domain_types import (
    ApplicationId, MaintenanceId, MessageId, PaymentId, PropertyId,
    RentalId, ReviewId, UserId,
)
from rentstore.core.identity import as_utc, is_well_formed


def _require_identifier(value: str) -> str:
    if not is_well_formed(value):
        raise ValueError("not a well-formed identifier")
    return value


UserRef = Annotated[UserId, AfterValidator(_require_identifier)]
PropertyRef = Annotated[PropertyId, AfterValidator(_require_identifier)]
ReviewRef = Annotated[ReviewId, AfterValidator(_require_identifier)]
RentalRef = Annotated[RentalId, AfterValidator(_require_identifier)]
ApplicationRef = Annotated[ApplicationId, AfterValidator(_require_identifier)]
MessageRef = Annotated[MessageId, AfterValidator(_require_identifier)]
MaintenanceRef = Annotated[MaintenanceId, AfterValidator(_require_identifier)]
PaymentRef = Annotated[PaymentId, AfterValidator(_require_identifier)]

UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]
NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class Component(BaseModel):
    """Nested sub-structure (location, rent, documents, ...)."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid",
        allow_inf_nan=False,
    )


class Entity(Component):
    """Stored record: minted id plus creation/update timestamps.

    updated_at is None until the first modification after creation.
    """

    id: str
    created_at: UtcDatetime
    updated_at: UtcDatetime | None = None

    def to_record(self) -> dict:
        """camelCase JSON form, as persisted and returned to callers."""
        return self.model_dump(mode="json", by_alias=True)

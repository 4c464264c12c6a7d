"""Maintenance — a repair ticket raised by a tenant against a property."""

from pydantic import Field

from rentstore.core.domain_types import (
    MaintenanceCategory, MaintenancePriority, MaintenanceStatus,
)
from rentstore.schemas.common import (
    Entity, MaintenanceRef, NonEmptyStr, PropertyRef, UserRef, UtcDatetime,
)


class Maintenance(Entity):
    id: MaintenanceRef
    property_id: PropertyRef
    tenant_id: UserRef
    category: MaintenanceCategory
    status: MaintenanceStatus = MaintenanceStatus.REPORTED
    priority: MaintenancePriority
    description: NonEmptyStr
    images: list[str] = Field(default_factory=list)
    scheduled_date: UtcDatetime | None = None
    completed_date: UtcDatetime | None = None
    cost: float | None = Field(None, ge=0)
    notes: str | None = None

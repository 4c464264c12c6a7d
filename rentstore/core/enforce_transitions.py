"""Lifecycle Enforcement — update-time rules comparing a stored record with its patched form.

Invariants:
    - Every check is PURE and returns ValidationError | None
    - Staying in the same status is always allowed
    - Terminal statuses have no outgoing transitions
    - Counters (views, favoriteCount, helpful) never decrease
    - Fields outside an entity's mutable set never change

Design Decisions:
    - Separated from enforce_entities: structural checks hold for any single
      record, these rules only exist between two versions of one record
    - Maintenance is forward-only: skipping ahead (reported -> in_progress) is
      accepted, moving backward is not
"""

from collections.abc import Iterable, Mapping, Sequence
from enum import Enum

from pydantic import BaseModel

from rentstore.core.apply_patch import camel_key
from rentstore.core.domain_types import (
    ApplicationStatus, MaintenanceStatus, RentalStatus,
)
from rentstore.core.errors import ValidationError

Transitions = Mapping[str, frozenset[str]]


def forward_only(order: Sequence[Enum]) -> Transitions:
    """Each status may move to any status declared after it."""
    values = [status.value for status in order]
    return {
        value: frozenset(values[index + 1:])
        for index, value in enumerate(values)
    }


RENTAL_TRANSITIONS: Transitions = {
    RentalStatus.PENDING.value: frozenset({
        RentalStatus.ACTIVE.value, RentalStatus.CANCELLED.value,
    }),
    RentalStatus.ACTIVE.value: frozenset({RentalStatus.COMPLETED.value}),
    RentalStatus.COMPLETED.value: frozenset(),
    RentalStatus.CANCELLED.value: frozenset(),
}

APPLICATION_TRANSITIONS: Transitions = {
    ApplicationStatus.PENDING.value: frozenset({
        ApplicationStatus.APPROVED.value, ApplicationStatus.REJECTED.value,
    }),
    ApplicationStatus.APPROVED.value: frozenset(),
    ApplicationStatus.REJECTED.value: frozenset(),
}

MAINTENANCE_TRANSITIONS: Transitions = forward_only(list(MaintenanceStatus))


def _value(member: object) -> object:
    return member.value if isinstance(member, Enum) else member


def check_status_transition(
    current: object, proposed: object, transitions: Transitions,
) -> ValidationError | None:
    """Rule: status only moves along the entity's transition table."""
    current, proposed = _value(current), _value(proposed)
    if current == proposed:
        return None
    if proposed not in transitions.get(current, frozenset()):
        return ValidationError(
            "status", f"cannot transition from {current} to {proposed}",
        )
    return None


def check_counters(
    before: BaseModel, after: BaseModel, counters: Iterable[str],
) -> ValidationError | None:
    """Rule: monotonically non-decreasing counters."""
    for name in counters:
        if getattr(after, name) < getattr(before, name):
            return ValidationError(camel_key(name), "counter cannot decrease")
    return None


def check_frozen_fields(
    before: BaseModel, after: BaseModel, mutable: Iterable[str],
) -> ValidationError | None:
    """Rule: only fields in `mutable` may differ (timestamps excluded)."""
    allowed = set(mutable) | {"updated_at"}
    for name in type(before).model_fields:
        if name in allowed:
            continue
        if getattr(before, name) != getattr(after, name):
            return ValidationError(camel_key(name), "cannot be changed after creation")
    return None

"""Entity Validation — builds typed entities from payloads, reporting the first bad field.

Invariants:
    - build_entity and validate_* are PURE: no IO, the caller supplies id and clock value
    - A failure is RETURNED as ValidationError{field, reason}, never raised
    - field is the dotted camelCase path of the offending input (e.g. "rent.monthly")
    - id, createdAt and updatedAt are assigned by the store; a payload carrying
      them is rejected rather than silently overwritten
    - Lifecycle statuses and counters a repository owns cannot be preset on
      create; they start at their schema defaults

Design Decisions:
    - Pydantic does the structural checks, this module only translates its
      errors into the store's outcome type
    - Only the first error is reported: callers fix one field at a time and
      the outcome stays a flat {field, reason} pair
"""

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import TypeVar

from pydantic import ValidationError as PydanticValidationError

from rentstore.core.apply_patch import snake_key
from rentstore.core.errors import ValidationError
from rentstore.core.identity import utc_now
from rentstore.schemas.application import Application
from rentstore.schemas.common import Entity
from rentstore.schemas.maintenance import Maintenance
from rentstore.schemas.message import Message
from rentstore.schemas.property import Property
from rentstore.schemas.rental import Rental
from rentstore.schemas.review import Review
from rentstore.schemas.user import User

E = TypeVar("E", bound=Entity)

STORE_ASSIGNED_FIELDS: frozenset[str] = frozenset({
    "id", "createdAt", "created_at", "updatedAt", "updated_at",
})

# Stands in for the minted id when a payload is validated without being stored
_PLACEHOLDER_ID = "00000000-0000-0000-0000-000000000000"


def first_error(exc: PydanticValidationError) -> ValidationError:
    """Translate the first Pydantic error into a ValidationError outcome."""
    error = exc.errors()[0]
    path = ".".join(str(part) for part in error["loc"]) or "payload"
    return ValidationError(path, error["msg"])


def check_store_assigned(payload: Mapping) -> ValidationError | None:
    for key in payload:
        if key in STORE_ASSIGNED_FIELDS:
            return ValidationError(key, "assigned by the store")
    return None


def check_lifecycle_owned(
    payload: Mapping, fields: Iterable[str],
) -> ValidationError | None:
    """Reject create payloads that preset a status or counter the store owns."""
    owned = set(fields)
    for key in payload:
        if snake_key(str(key)) in owned:
            return ValidationError(str(key), "starts at its default on create")
    return None


def build_entity(
    schema: type[E], payload: object, *, id: str, created_at: datetime,
) -> E | ValidationError:
    """Construct a new entity of `schema` from a caller payload."""
    if not isinstance(payload, Mapping):
        return ValidationError("payload", "must be an object")
    error = check_store_assigned(payload)
    if error:
        return error
    return rebuild_entity(
        schema, {**payload, "id": id, "createdAt": created_at},
    )


def rebuild_entity(schema: type[E], data: Mapping) -> E | ValidationError:
    """Re-validate a complete record (used after merging an update patch)."""
    try:
        return schema.model_validate(dict(data))
    except PydanticValidationError as exc:
        return first_error(exc)


def validate_payload(schema: type[Entity], payload: object) -> ValidationError | None:
    result = build_entity(
        schema, payload, id=_PLACEHOLDER_ID, created_at=utc_now(),
    )
    return result if isinstance(result, ValidationError) else None


# ─── Per-entity validators ───────────────────────────────────────

def validate_user(payload: object) -> ValidationError | None:
    return validate_payload(User, payload)


def validate_property(payload: object) -> ValidationError | None:
    return validate_payload(Property, payload)


def validate_review(payload: object) -> ValidationError | None:
    return validate_payload(Review, payload)


def validate_rental(payload: object) -> ValidationError | None:
    return validate_payload(Rental, payload)


def validate_application(payload: object) -> ValidationError | None:
    return validate_payload(Application, payload)


def validate_message(payload: object) -> ValidationError | None:
    return validate_payload(Message, payload)


def validate_maintenance(payload: object) -> ValidationError | None:
    return validate_payload(Maintenance, payload)

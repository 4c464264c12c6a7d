"""Entity Repository — create / get / list-by-parent / update over one record collection.

Invariants:
    - create mints a fresh id, sets createdAt, leaves updatedAt None, applies
      schema defaults, validates, then persists; a failure writes nothing
    - Statuses and counters listed in initial_fields always start at their
      defaults; only update, transition and the counter helpers move them
    - update merges the patch into the stored JSON, re-validates the whole
      record, applies lifecycle rules, then stamps updatedAt strictly after
      the previous timestamp
    - The read-modify-write of update holds the collection lock
    - ValidationError / NotFound are returned, never raised

Design Decisions:
    - Per-entity rules are declared as class attributes (parent fields,
      counters, transition table, mutable fields) and read by this base
    - Collection and clock are injected: tests drive time explicitly
"""

import logging
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import ClassVar, Generic, TypeVar

from rentstore.core.apply_patch import camel_key, merge_patch, snake_key
from rentstore.core.enforce_entities import (
    build_entity, check_lifecycle_owned, check_store_assigned, rebuild_entity,
)
from rentstore.core.enforce_transitions import (
    Transitions, check_counters, check_frozen_fields, check_status_transition,
)
from rentstore.core.errors import NotFound, ValidationError
from rentstore.core.identity import IdentityGenerator, stamp_after, utc_now
from rentstore.core.referential_index import resolve_children
from rentstore.infrastructure.record_collection import RecordCollection
from rentstore.schemas.common import Entity

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)


class EntityRepository(Generic[E]):
    """Uniform operation set for one entity kind."""

    entity_name: ClassVar[str]
    # Foreign-key attributes usable with list_by_parent; the first is the default.
    parent_fields: ClassVar[tuple[str, ...]] = ()
    counter_fields: ClassVar[tuple[str, ...]] = ()
    # Fields a create payload may not preset (statuses, counters).
    initial_fields: ClassVar[frozenset[str]] = frozenset()
    # None means every field may change on update.
    mutable_fields: ClassVar[frozenset[str] | None] = None

    def __init__(
        self,
        collection: RecordCollection[E],
        ids: IdentityGenerator,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._collection = collection
        self._ids = ids
        self._clock = clock

    @property
    def collection(self) -> RecordCollection[E]:
        return self._collection

    # ─── Create / read ──────────────────────────────────────────

    def create(self, payload: Mapping) -> E | ValidationError:
        entity = None
        if isinstance(payload, Mapping):
            entity = check_lifecycle_owned(payload, self.initial_fields)
        if entity is None:
            entity = build_entity(
                self._collection.schema, payload,
                id=self._ids.next(), created_at=self._clock(),
            )
        if isinstance(entity, ValidationError):
            self._log_rejected("create", entity)
            return entity
        self._collection.insert(entity.id, entity)
        logger.info(
            f"{self.entity_name} created",
            extra={"collection": self._collection.name, "record_id": entity.id},
        )
        return entity

    def get_by_id(self, id: str) -> E | NotFound:
        entity = self._collection.get(id)
        if entity is None:
            return NotFound(self.entity_name, id)
        return entity

    def list_by_parent(
        self, parent_id: str, via: str | None = None,
    ) -> list[E] | ValidationError:
        """Children of parent_id through the foreign key `via` (snake or camelCase)."""
        if not self.parent_fields:
            return ValidationError("via", f"{self.entity_name} has no parent references")
        field = snake_key(via) if via else self.parent_fields[0]
        if field not in self.parent_fields:
            expected = ", ".join(camel_key(name) for name in self.parent_fields)
            return ValidationError("via", f"expected one of {expected}")
        return resolve_children(self._collection.values(), field, parent_id)

    def list_all(self) -> list[E]:
        return self._collection.values()

    # ─── Update ─────────────────────────────────────────────────

    def update(self, id: str, patch: Mapping) -> E | NotFound | ValidationError:
        if not isinstance(patch, Mapping):
            return ValidationError("patch", "must be an object")
        error = check_store_assigned(patch)
        if error:
            self._log_rejected("update", error, id)
            return error

        with self._collection.locked():
            current = self._collection.get(id)
            if current is None:
                return NotFound(self.entity_name, id)

            candidate = rebuild_entity(
                self._collection.schema, merge_patch(current.to_record(), patch),
            )
            if not isinstance(candidate, ValidationError):
                candidate = self._check_update(current, candidate) or candidate
            if isinstance(candidate, ValidationError):
                self._log_rejected("update", candidate, id)
                return candidate

            previous = current.updated_at or current.created_at
            updated = candidate.model_copy(
                update={"updated_at": stamp_after(self._clock(), previous)},
            )
            self._collection.put(id, updated)
        logger.info(
            f"{self.entity_name} updated",
            extra={"collection": self._collection.name, "record_id": id},
        )
        return updated

    def _check_update(self, before: E, after: E) -> ValidationError | None:
        if self.mutable_fields is not None:
            error = check_frozen_fields(before, after, self.mutable_fields)
            if error:
                return error
        return check_counters(before, after, self.counter_fields)

    def _increment(self, id: str, counter: str) -> E | NotFound:
        """Bump a counter by one under the collection lock."""
        with self._collection.locked():
            current = self._collection.get(id)
            if current is None:
                return NotFound(self.entity_name, id)
            return self.update(id, {counter: getattr(current, counter) + 1})

    def _log_rejected(
        self, operation: str, error: ValidationError, id: str | None = None,
    ) -> None:
        logger.info(
            f"{self.entity_name} {operation} rejected: {error.message}",
            extra={
                "collection": self._collection.name,
                "record_id": id,
                "error_code": error.code,
                "field": error.field,
            },
        )


class LifecycleRepository(EntityRepository[E]):
    """Repository for entities whose status follows a transition table."""

    status_transitions: ClassVar[Transitions]
    initial_fields = frozenset({"status"})

    def transition(self, id: str, status: str) -> E | NotFound | ValidationError:
        return self.update(id, {"status": status})

    def _check_update(self, before: E, after: E) -> ValidationError | None:
        error = check_status_transition(
            before.status, after.status, self.status_transitions,
        )
        return error or super()._check_update(before, after)

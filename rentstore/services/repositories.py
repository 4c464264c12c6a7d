"""Entity Repositories — the per-entity operation sets exposed to the route layer.

Invariants:
    - Only Property exposes delete; every other collection is append/update-only
    - Message content is immutable: only the read flag changes after creation
    - Cross-collection helpers (attach_review) are single-collection writes;
      callers combining them accept transient inconsistency
"""

import logging
from collections.abc import Mapping

from pydantic import ValidationError as PydanticValidationError

from rentstore.core.enforce_entities import check_store_assigned, first_error
from rentstore.core.enforce_transitions import (
    APPLICATION_TRANSITIONS, MAINTENANCE_TRANSITIONS, RENTAL_TRANSITIONS,
)
from rentstore.core.errors import NotFound, ValidationError
from rentstore.core.identity import is_well_formed
from rentstore.core.referential_index import resolve_between
from rentstore.core.search_records import (
    DEFAULT_LIMIT, DEFAULT_PAGE, Page, property_predicates, run_query,
)
from rentstore.schemas.application import Application
from rentstore.schemas.maintenance import Maintenance
from rentstore.schemas.message import Message
from rentstore.schemas.property import Property, PropertySearchFilters
from rentstore.schemas.rental import Rental
from rentstore.schemas.review import Review
from rentstore.schemas.user import User
from rentstore.services.entity_repository import EntityRepository, LifecycleRepository

logger = logging.getLogger(__name__)


class UserRepository(EntityRepository[User]):
    entity_name = "User"

    def attach_review(self, user_id: str, review_id: str) -> User | NotFound | ValidationError:
        """Add review_id to the user's review set (no-op when already present)."""
        if not is_well_formed(review_id):
            return ValidationError("reviewId", "not a well-formed identifier")
        with self._collection.locked():
            user = self._collection.get(user_id)
            if user is None:
                return NotFound(self.entity_name, user_id)
            if review_id in user.reviews:
                return user
            return self.update(user_id, {"reviews": [*user.reviews, review_id]})


class PropertyRepository(EntityRepository[Property]):
    entity_name = "Property"
    parent_fields = ("landlord_id",)
    counter_fields = ("views", "favorite_count")
    # status is left to the landlord: a listing may start unlisted
    initial_fields = frozenset(counter_fields)

    def search(
        self,
        filters: PropertySearchFilters | Mapping | None = None,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
    ) -> list[Property] | ValidationError:
        """Available properties matching every given filter, one page at a time."""
        window = Page.create(page, limit)
        if isinstance(window, ValidationError):
            return window
        if not isinstance(filters, PropertySearchFilters):
            try:
                filters = PropertySearchFilters.model_validate(filters or {})
            except PydanticValidationError as exc:
                return first_error(exc)
        return run_query(
            self._collection.values(), property_predicates(filters), window,
        )

    def delete(self, id: str) -> bool:
        removed = self._collection.remove(id)
        if removed:
            logger.info(
                "Property deleted",
                extra={"collection": self._collection.name, "record_id": id},
            )
        return removed

    def record_view(self, id: str) -> Property | NotFound:
        return self._increment(id, "views")

    def add_favorite(self, id: str) -> Property | NotFound:
        return self._increment(id, "favorite_count")


class ReviewRepository(EntityRepository[Review]):
    entity_name = "Review"
    parent_fields = ("property_id", "user_id")
    counter_fields = ("helpful",)
    initial_fields = frozenset({"helpful", "verified"})

    def mark_helpful(self, id: str) -> Review | NotFound:
        return self._increment(id, "helpful")


class RentalRepository(LifecycleRepository[Rental]):
    entity_name = "Rental"
    parent_fields = ("property_id", "tenant_id", "landlord_id")
    status_transitions = RENTAL_TRANSITIONS

    def record_payment(
        self, id: str, payment: Mapping,
    ) -> Rental | NotFound | ValidationError:
        """Append a payment history entry under a freshly minted payment id."""
        if not isinstance(payment, Mapping):
            return ValidationError("payment", "must be an object")
        error = check_store_assigned(payment)
        if error:
            return error
        with self._collection.locked():
            rental = self._collection.get(id)
            if rental is None:
                return NotFound(self.entity_name, id)
            history = rental.to_record()["paymentHistory"]
            entry = {**payment, "id": self._ids.next()}
            return self.update(id, {"paymentHistory": [*history, entry]})


class ApplicationRepository(LifecycleRepository[Application]):
    entity_name = "Application"
    parent_fields = ("property_id", "tenant_id")
    status_transitions = APPLICATION_TRANSITIONS


class MessageRepository(EntityRepository[Message]):
    entity_name = "Message"
    parent_fields = ("receiver_id", "sender_id", "property_id")
    mutable_fields = frozenset({"read"})

    def mark_read(self, id: str) -> Message | NotFound:
        return self.update(id, {"read": True})

    def list_conversation(self, user_a: str, user_b: str) -> list[Message]:
        """Messages exchanged between two users, in either direction, oldest first."""
        return resolve_between(
            self._collection.values(), "sender_id", "receiver_id", user_a, user_b,
        )


class MaintenanceRepository(LifecycleRepository[Maintenance]):
    entity_name = "Maintenance"
    parent_fields = ("property_id", "tenant_id")
    status_transitions = MAINTENANCE_TRANSITIONS

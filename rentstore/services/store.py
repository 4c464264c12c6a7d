"""Rental Store — the process-wide set of seven collections and their repositories.

Invariants:
    - One store per process: init_store() once at startup, get_store() afterwards
    - get_store() before init_store() raises StoreNotInitializedError
    - Collections are independent; no operation spans two of them atomically

Design Decisions:
    - Module-level singleton mirrors the database manager lifecycle: created at
      startup, released only at process exit
    - RentalStore itself is a plain object so tests build isolated instances
"""

import logging
from collections.abc import Callable, Mapping
from datetime import datetime

from rentstore.config import Settings, get_settings
from rentstore.core.errors import NotFound, StoreNotInitializedError, ValidationError
from rentstore.core.identity import IdentityGenerator, utc_now
from rentstore.infrastructure.database import DatabaseSessionManager
from rentstore.infrastructure.record_collection import RecordCollection
from rentstore.models.collection_rows import (
    ApplicationRow, MaintenanceRow, MessageRow, PropertyRow, RentalRow,
    ReviewRow, UserRow,
)
from rentstore.schemas.application import Application
from rentstore.schemas.maintenance import Maintenance
from rentstore.schemas.message import Message
from rentstore.schemas.property import Property
from rentstore.schemas.rental import Rental
from rentstore.schemas.review import Review
from rentstore.schemas.user import User
from rentstore.services.repositories import (
    ApplicationRepository, MaintenanceRepository, MessageRepository,
    PropertyRepository, RentalRepository, ReviewRepository, UserRepository,
)

logger = logging.getLogger(__name__)


class RentalStore:
    """Seven record collections behind their repositories."""

    def __init__(
        self,
        db: DatabaseSessionManager,
        ids: IdentityGenerator | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.db = db
        ids = ids or IdentityGenerator()

        def collection(name, row_type, schema):
            return RecordCollection(name, row_type, schema, db)

        self.users = UserRepository(
            collection("users", UserRow, User), ids, clock,
        )
        self.properties = PropertyRepository(
            collection("properties", PropertyRow, Property), ids, clock,
        )
        self.reviews = ReviewRepository(
            collection("reviews", ReviewRow, Review), ids, clock,
        )
        self.rentals = RentalRepository(
            collection("rentals", RentalRow, Rental), ids, clock,
        )
        self.applications = ApplicationRepository(
            collection("applications", ApplicationRow, Application), ids, clock,
        )
        self.messages = MessageRepository(
            collection("messages", MessageRow, Message), ids, clock,
        )
        self.maintenance = MaintenanceRepository(
            collection("maintenance", MaintenanceRow, Maintenance), ids, clock,
        )

    def submit_review(self, payload: Mapping) -> Review | ValidationError:
        """Create a review, then add it to its author's review set.

        Two independent writes: if attaching fails the review still exists and
        the user's set is repaired by calling users.attach_review again.
        """
        review = self.reviews.create(payload)
        if isinstance(review, ValidationError):
            return review
        attached = self.users.attach_review(review.user_id, review.id)
        if isinstance(attached, (NotFound, ValidationError)):
            logger.warning(
                f"Review {review.id} stored but not attached: {attached.message}",
                extra={"collection": "users", "record_id": review.user_id},
            )
        return review


# Singleton (initialized on startup)
_store: RentalStore | None = None


def open_store(settings: Settings) -> RentalStore:
    """Build a store on the configured database, creating tables if missing."""
    db = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    db.create_tables()
    return RentalStore(db)


def init_store(settings: Settings | None = None) -> RentalStore:
    global _store
    _store = open_store(settings or get_settings())
    logger.info("Record store initialized")
    return _store


def get_store() -> RentalStore:
    if _store is None:
        raise StoreNotInitializedError()
    return _store

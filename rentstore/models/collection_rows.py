"""Collection Tables — one keyed table per entity kind.

Invariants:
    - id is the minted identifier and the primary key
    - payload holds the entity's camelCase JSON dump, nested structures included
    - created_at is denormalized from the payload for ordering and inspection
    - No foreign keys between tables: references are plain ids in the payload

Design Decisions:
    - Independent tables: no cross-collection file or wire format
"""

from datetime import datetime

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from rentstore.db.base import Base


class CollectionRow(Base):
    """Shared columns of every collection table."""
    __abstract__ = True

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True,
    )
    payload: Mapped[dict] = mapped_column(JSON, nullable=False)


class UserRow(CollectionRow):
    __tablename__ = "users"


class PropertyRow(CollectionRow):
    __tablename__ = "properties"


class ReviewRow(CollectionRow):
    __tablename__ = "reviews"


class RentalRow(CollectionRow):
    __tablename__ = "rentals"


class ApplicationRow(CollectionRow):
    __tablename__ = "applications"


class MessageRow(CollectionRow):
    __tablename__ = "messages"


class MaintenanceRow(CollectionRow):
    __tablename__ = "maintenance"

"""Record Collection — durable, identifier-keyed container for one entity kind.

Invariants:
    - Write-through: put/insert/remove commit their own transaction before returning
    - put is an upsert: a second put with the same id replaces the record
    - insert refuses an existing id (DatabaseError), used when minting new records
    - values() is a snapshot in ascending id order, not refreshed afterwards
    - remove reports whether a record existed; ids are never reissued because
      only the identity generator mints them
    - Each collection serializes its own writes; there is no store-wide lock

Design Decisions:
    - Records are persisted as their camelCase JSON dump and re-validated on
      read, so what get() returns is always a fully typed entity
    - RLock: a repository can hold locked() across a read-modify-write while
      the nested put() re-acquires it
"""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Generic, TypeVar

from sqlalchemy import func, select

from rentstore.infrastructure.database import DatabaseSessionManager
from rentstore.models.collection_rows import CollectionRow
from rentstore.schemas.common import Entity

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)


class RecordCollection(Generic[E]):
    """Keyed store of one entity type backed by its own table."""

    def __init__(
        self,
        name: str,
        row_type: type[CollectionRow],
        schema: type[E],
        db: DatabaseSessionManager,
    ):
        self.name = name
        self.row_type = row_type
        self.schema = schema
        self._db = db
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold this collection's write lock across several operations."""
        with self._lock:
            yield

    def _row(self, id: str, record: E) -> CollectionRow:
        return self.row_type(
            id=id, created_at=record.created_at, payload=record.to_record(),
        )

    def _load(self, row: CollectionRow) -> E:
        return self.schema.model_validate(row.payload)

    def put(self, id: str, record: E) -> None:
        with self._lock, self._db.session() as db:
            db.merge(self._row(id, record))
            db.commit()
        logger.debug(
            f"put {self.name}/{id}",
            extra={"collection": self.name, "record_id": id},
        )

    def insert(self, id: str, record: E) -> None:
        with self._lock, self._db.session() as db:
            db.add(self._row(id, record))
            db.commit()
        logger.debug(
            f"insert {self.name}/{id}",
            extra={"collection": self.name, "record_id": id},
        )

    def get(self, id: str) -> E | None:
        with self._db.session() as db:
            row = db.get(self.row_type, id)
            return self._load(row) if row is not None else None

    def contains(self, id: str) -> bool:
        with self._db.session() as db:
            return db.get(self.row_type, id) is not None

    def values(self) -> list[E]:
        with self._db.session() as db:
            rows = db.scalars(
                select(self.row_type).order_by(self.row_type.id),
            ).all()
            return [self._load(row) for row in rows]

    def remove(self, id: str) -> bool:
        with self._lock, self._db.session() as db:
            row = db.get(self.row_type, id)
            if row is None:
                return False
            db.delete(row)
            db.commit()
        logger.debug(
            f"remove {self.name}/{id}",
            extra={"collection": self.name, "record_id": id},
        )
        return True

    def __len__(self) -> int:
        with self._db.session() as db:
            return db.scalar(
                select(func.count()).select_from(self.row_type),
            ) or 0

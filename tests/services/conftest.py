"""Service test fixtures — in-memory database and a fresh store per test.

Invariants:
    - Every test gets a fresh in-memory SQLite database with all tables created
    - The store's clock ticks one second per call, so createdAt order is
      creation order and updatedAt is always later than createdAt
"""

import pytest

from rentstore.infrastructure.database import DatabaseSessionManager
from rentstore.services.store import RentalStore
from tests.builders import TickingClock


@pytest.fixture
def db():
    manager = DatabaseSessionManager("sqlite://")
    manager.create_tables()
    yield manager
    manager.dispose()


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def store(db, clock):
    return RentalStore(db, clock=clock)

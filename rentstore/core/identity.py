"""Identity & Clock — minted identifiers and UTC timestamps for new records.

Invariants:
    - next() never returns the same value twice, including across threads
    - Identifiers carry no ordering; sorting uses explicit keys (created_at, id)
    - is_well_formed() accepts only the canonical lowercase UUID text form
    - Timestamps are timezone-aware UTC

Design Decisions:
    - uuid4 over a counter: unique across processes and restarts without any
      shared state to persist
"""

import uuid
from datetime import datetime, timedelta, timezone

_RESOLUTION = timedelta(microseconds=1)


class IdentityGenerator:
    """Mints globally unique string identifiers."""

    def next(self) -> str:
        return str(uuid.uuid4())


def is_well_formed(value: object) -> bool:
    """True when value is a canonical UUID string (what next() produces)."""
    if not isinstance(value, str):
        return False
    try:
        return str(uuid.UUID(value)) == value
    except ValueError:
        return False


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Read naive datetimes as UTC; convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def stamp_after(now: datetime, previous: datetime) -> datetime:
    """Return now, nudged forward so it is strictly later than previous."""
    if now > previous:
        return now
    return previous + _RESOLUTION

"""Identity & Clock — minted ids, id syntax checks, timestamp helpers.

Tests cover:
    - next() returns distinct well-formed ids, also across threads
    - is_well_formed accepts canonical UUIDs only
    - as_utc reads naive datetimes as UTC
    - stamp_after is strictly later than the previous timestamp
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone

from rentstore.core.identity import (
    IdentityGenerator, as_utc, is_well_formed, stamp_after,
)


def test_next_returns_well_formed_ids():
    ids = IdentityGenerator()
    assert is_well_formed(ids.next())


def test_next_never_repeats():
    ids = IdentityGenerator()
    minted = [ids.next() for _ in range(1000)]
    assert len(set(minted)) == 1000


def test_next_never_repeats_across_threads():
    ids = IdentityGenerator()
    with ThreadPoolExecutor(max_workers=8) as pool:
        minted = list(pool.map(lambda _: ids.next(), range(2000)))
    assert len(set(minted)) == 2000


def test_is_well_formed_rejects_garbage():
    assert not is_well_formed("not-an-id")
    assert not is_well_formed("")
    assert not is_well_formed(None)
    assert not is_well_formed(42)


def test_is_well_formed_rejects_non_canonical_forms():
    canonical = IdentityGenerator().next()
    assert not is_well_formed(canonical.upper())
    assert not is_well_formed(canonical.replace("-", ""))
    assert not is_well_formed("{" + canonical + "}")


def test_as_utc_reads_naive_as_utc():
    naive = datetime(2026, 3, 1, 9, 30)
    assert as_utc(naive) == datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)


def test_as_utc_converts_other_offsets():
    plus_two = datetime(2026, 3, 1, 11, 30, tzinfo=timezone(timedelta(hours=2)))
    converted = as_utc(plus_two)
    assert converted.tzinfo == timezone.utc
    assert converted.hour == 9


def test_stamp_after_keeps_later_now():
    previous = datetime(2026, 1, 1, tzinfo=timezone.utc)
    now = previous + timedelta(seconds=5)
    assert stamp_after(now, previous) == now


def test_stamp_after_nudges_equal_or_earlier_now():
    previous = datetime(2026, 1, 1, tzinfo=timezone.utc)
    assert stamp_after(previous, previous) > previous
    assert stamp_after(previous - timedelta(hours=1), previous) > previous

"""
Unit tests for the anonymous daily usage gate.
"""
from datetime import date, timedelta

import pytest

from ideaspark.core.errors import LimitExceededError
from ideaspark.db.models.usage_tracking import UsageTracking
from ideaspark.services.usage_gate import UsageGate

TODAY = date(2026, 10, 19)
IP = "203.0.113.7"


@pytest.fixture
def gate(db):
    return UsageGate(db, daily_limit=2)


def test_unseen_ip_has_zero_usage(gate):
    assert gate.get_count(IP, TODAY) == 0
    assert gate.remaining(IP, TODAY) == 2
    assert gate.check(IP, TODAY, is_authenticated=False) == 0


def test_check_does_not_write(gate, db):
    gate.check(IP, TODAY, is_authenticated=False)
    assert db.query(UsageTracking).count() == 0


def test_record_generation_creates_then_increments(gate, db):
    """First increment creates the row at 1, the next one bumps it to 2."""
    assert gate.record_generation(IP, TODAY) == 1
    assert gate.record_generation(IP, TODAY) == 2

    rows = db.query(UsageTracking).all()
    assert len(rows) == 1
    assert rows[0].ip_address == IP
    assert rows[0].usage_date == TODAY
    assert rows[0].generation_count == 2


def test_limit_reached_after_two_generations(gate):
    gate.record_generation(IP, TODAY)
    assert gate.check(IP, TODAY, is_authenticated=False) == 1
    gate.record_generation(IP, TODAY)

    with pytest.raises(LimitExceededError) as exc_info:
        gate.check(IP, TODAY, is_authenticated=False)
    assert exc_info.value.status_code == 429
    assert exc_info.value.to_body()["requiresAuth"] is True
    assert gate.remaining(IP, TODAY) == 0


def test_rejected_check_does_not_increment(gate):
    gate.record_generation(IP, TODAY)
    gate.record_generation(IP, TODAY)

    with pytest.raises(LimitExceededError):
        gate.check(IP, TODAY, is_authenticated=False)
    assert gate.get_count(IP, TODAY) == 2


def test_next_day_starts_fresh(gate, db):
    gate.record_generation(IP, TODAY)
    gate.record_generation(IP, TODAY)
    tomorrow = TODAY + timedelta(days=1)

    assert gate.check(IP, tomorrow, is_authenticated=False) == 0
    assert gate.record_generation(IP, tomorrow) == 1
    # Yesterday's row is kept as history
    assert db.query(UsageTracking).count() == 2


def test_counts_are_per_ip(gate):
    gate.record_generation(IP, TODAY)
    gate.record_generation(IP, TODAY)

    assert gate.check("198.51.100.1", TODAY, is_authenticated=False) == 0


def test_authenticated_caller_is_never_limited(gate, db):
    gate.record_generation(IP, TODAY)
    gate.record_generation(IP, TODAY)
    gate.record_generation(IP, TODAY)

    assert gate.check(IP, TODAY, is_authenticated=True) == 0


def test_orm_fallback_matches_upsert(gate):
    """The read-modify-write path used on other dialects counts the same way."""
    assert gate._record_generation_orm(IP, TODAY) == 1
    assert gate._record_generation_orm(IP, TODAY) == 2
    assert gate.record_generation(IP, TODAY) == 3

"""
Tests for verification staleness classification.
"""
from datetime import date, datetime, timedelta, timezone

from traced.config.constants import STALE_AFTER_DAYS
from traced.models.card import Staleness
from traced.services.staleness import (
    age_in_days,
    evaluate_staleness,
    reference_date,
    verified_label,
)


class TestBoundary:
    """The 180-day window, in whole days."""

    def test_window_is_180_days(self):
        assert STALE_AFTER_DAYS == 180

    def test_179_days_current(self, fixed_now, days_ago):
        assert evaluate_staleness(days_ago(179), fixed_now) is Staleness.CURRENT

    def test_180_days_current(self, fixed_now, days_ago):
        """Exactly at the window is still current; stale means strictly older."""
        assert evaluate_staleness(days_ago(180), fixed_now) is Staleness.CURRENT

    def test_181_days_stale(self, fixed_now, days_ago):
        assert evaluate_staleness(days_ago(181), fixed_now) is Staleness.STALE

    def test_verified_today(self, fixed_now):
        assert evaluate_staleness(fixed_now.date(), fixed_now) is Staleness.CURRENT

    def test_future_date_current(self, fixed_now, days_ago):
        assert evaluate_staleness(days_ago(-30), fixed_now) is Staleness.CURRENT

    def test_custom_window(self, fixed_now, days_ago):
        assert evaluate_staleness(days_ago(31), fixed_now, window_days=30) is Staleness.STALE


class TestReferenceDate:
    """`now` may be a date, naive datetime, or aware datetime."""

    def test_date_passthrough(self):
        assert reference_date(date(2026, 3, 1)) == date(2026, 3, 1)

    def test_naive_datetime(self):
        assert reference_date(datetime(2026, 3, 1, 23, 59)) == date(2026, 3, 1)

    def test_aware_datetime_converted_to_utc(self):
        pacific = timezone(timedelta(hours=-8))
        late_evening = datetime(2026, 3, 1, 20, 0, tzinfo=pacific)
        assert reference_date(late_evening) == date(2026, 3, 2)

    def test_time_of_day_ignored(self):
        verified = date(2026, 1, 1)
        morning = datetime(2026, 1, 2, 0, 1, tzinfo=timezone.utc)
        night = datetime(2026, 1, 2, 23, 59, tzinfo=timezone.utc)
        assert age_in_days(verified, morning) == age_in_days(verified, night) == 1


class TestVerifiedLabel:
    """Labels keep the raw date and the classification."""

    def test_current_label(self):
        label = verified_label(date(2026, 2, 1), Staleness.CURRENT)
        assert label.date == date(2026, 2, 1)
        assert label.status is Staleness.CURRENT
        assert label.text == "2026-02-01"

    def test_stale_label(self):
        label = verified_label(date(2025, 6, 1), Staleness.STALE)
        assert label.status is Staleness.STALE
        assert label.text == "Needs review — 2025-06-01"

    def test_serializes_status(self):
        label = verified_label(date(2025, 6, 1), Staleness.STALE)
        assert label.model_dump(mode="json") == {
            "date": "2025-06-01",
            "status": "stale",
            "text": "Needs review — 2025-06-01",
        }

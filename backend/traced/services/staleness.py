"""
Staleness evaluation of editorial verification dates.

A record is stale once its verification is more than STALE_AFTER_DAYS old.
Ages are whole days, matching the resolution of the verified date; a record
verified exactly STALE_AFTER_DAYS ago is still current.

Verified dates are validated when the catalog loads, so an unparseable date
never reaches this module.
"""
from __future__ import annotations

from datetime import date, datetime, timezone

from ..config.constants import NEEDS_REVIEW_LABEL, STALE_AFTER_DAYS
from ..models.card import Staleness, VerifiedLabel


def reference_date(now: date | datetime) -> date:
    """Calendar date of the reference instant (UTC for aware datetimes)."""
    if isinstance(now, datetime):
        if now.tzinfo is not None:
            now = now.astimezone(timezone.utc)
        return now.date()
    return now


def age_in_days(verified: date, now: date | datetime) -> int:
    return (reference_date(now) - verified).days


def evaluate_staleness(
    verified: date,
    now: date | datetime,
    window_days: int = STALE_AFTER_DAYS,
) -> Staleness:
    """Classify a verification date as current or stale relative to `now`."""
    if age_in_days(verified, now) > window_days:
        return Staleness.STALE
    return Staleness.CURRENT


def verified_label(verified: date, staleness: Staleness) -> VerifiedLabel:
    """Build the label carrying both the raw date and its classification."""
    iso = verified.isoformat()
    text = f"{NEEDS_REVIEW_LABEL} — {iso}" if staleness is Staleness.STALE else iso
    return VerifiedLabel(date=verified, status=staleness, text=text)

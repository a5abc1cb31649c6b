"""
Pytest fixtures for API and service tests.
"""
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from traced.cache import app_cache
from traced.dependencies import get_now
from traced.main import app
from traced.services.catalog import Catalog

FIXED_NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _vendor(vendor_id, city="sf", **overrides):
    """Raw vendor declaration with sensible defaults."""
    raw = {
        "id": vendor_id,
        "name": f"Vendor {vendor_id}",
        "type": "shop",
        "city": city,
        "distance": "1.0 mi",
        "address": "1 Main St",
        "hours": "Daily 9am–5pm",
        "meta": "Independent shop",
        "profileUrl": f"vendor-{vendor_id}.html",
        "note": f"Default note for {vendor_id}.",
        "notes": {},
        "badges": [],
        "tags": [],
        "verified": "2026-02-01",
        "score": 3,
    }
    raw.update(overrides)
    return raw


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def small_raw_catalog():
    """Three localities' worth of vendors with deliberate score ties."""
    return {
        "sf": [
            _vendor("sf-shop", score=4, tags=["grocery", "pasta"]),
            _vendor("sf-maker", type="maker", score=5, notes={"annies": "Annie's note."}),
            _vendor("sf-market", type="market", score=4, tags=["produce"]),
            _vendor("sf-csa", type="csa", score=2, tags=["maker"], verified="2025-06-01"),
        ],
        "oc": [
            _vendor("oc-maker", city="oc", type="maker", score=5),
            _vendor("oc-shop", city="oc", score=4, tags=["pasta"]),
        ],
    }


@pytest.fixture
def small_catalog(small_raw_catalog):
    return Catalog.from_mapping(small_raw_catalog)


@pytest.fixture(scope="module")
def client():
    """Create a test client for the FastAPI app with a pinned clock."""
    app.dependency_overrides[get_now] = lambda: FIXED_NOW
    app_cache.invalidate("vendor_cards")
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(scope="module")
def base_url():
    """Base URL for API v1 endpoints."""
    return "/api/v1"


@pytest.fixture
def days_ago(fixed_now):
    """date that is `n` days before the fixed reference instant."""
    def _days_ago(n):
        return fixed_now.date() - timedelta(days=n)
    return _days_ago


@pytest.fixture
def make_vendor():
    """Factory for raw vendor declarations."""
    return _vendor

"""Catalog, clock, and settings dependencies for the API."""
import os
import threading
from datetime import datetime, timezone

from .services.catalog import Catalog, load_catalog

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# Seconds a rendered card listing stays cached (keyed by context + reference day)
CARDS_CACHE_TTL = int(os.environ.get("CARDS_CACHE_TTL", "600"))

_catalog: Catalog | None = None
_catalog_lock = threading.Lock()


def get_catalog() -> Catalog:
    """Return the process-wide catalog, validating it on first use.

    Raises CatalogError if the static declarations are invalid.
    """
    global _catalog
    if _catalog is None:
        with _catalog_lock:
            if _catalog is None:
                _catalog = load_catalog()
    return _catalog


def get_now() -> datetime:
    """Reference instant for a request. Sampled once per request."""
    return datetime.now(timezone.utc)

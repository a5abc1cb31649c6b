# Pydantic models for catalog records and API responses
from .vendor import Badge, BadgeKind, VendorRecord, VendorType
from .card import CardViewModel, Staleness, VerifiedLabel
from .directory import (
    DirectoryFiltersResponse,
    QueryContextResponse,
    VendorCardsResponse,
    VendorProfileResponse,
)

__all__ = [
    "Badge",
    "BadgeKind",
    "VendorRecord",
    "VendorType",
    "CardViewModel",
    "Staleness",
    "VerifiedLabel",
    "DirectoryFiltersResponse",
    "QueryContextResponse",
    "VendorCardsResponse",
    "VendorProfileResponse",
]

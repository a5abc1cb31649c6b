"""Pydantic models for vendor catalog records."""
from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from ..config.constants import MAX_SCORE, MIN_SCORE


class VendorType(str, Enum):
    """Closed set of vendor categories."""

    MAKER = "maker"
    MARKET = "market"
    SHOP = "shop"
    CSA = "csa"


class BadgeKind(str, Enum):
    """Visual emphasis of a badge. Presentational only."""

    EMPHASIS_A = "emphasis-a"
    EMPHASIS_B = "emphasis-b"
    DEFAULT = "default"


class Badge(BaseModel):
    """A short label shown on a vendor card."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1, description="Badge text")
    kind: BadgeKind = Field(BadgeKind.DEFAULT, description="Badge emphasis")


class VendorRecord(BaseModel):
    """One vendor/business in the local discovery catalog.

    Records are validated once when the catalog is loaded and are read-only
    afterwards. A record without a default note, with a score outside
    1-5, or with a verified date that does not parse is rejected.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Catalog-wide unique slug")
    name: str = Field(..., description="Display name")
    type: VendorType = Field(..., description="Vendor category")
    city: str = Field(..., description="Locality code, e.g. sf or oc")
    distance: str = Field(..., description="Human-readable distance")
    address: str = Field(..., description="Street address")
    hours: str = Field(..., description="Hours summary")
    meta: str = Field(..., description="One-line descriptor")
    profile_url: str = Field(..., alias="profileUrl", description="Relative profile page URL")
    note: str = Field(..., description="Default editorial note")
    notes: Mapping[str, str] = Field(
        default_factory=dict,
        validate_default=True,
        description="Investigation slug -> contextual note (read-only)",
    )
    badges: Tuple[Badge, ...] = Field(default_factory=tuple, description="Card badges, in order")
    tags: Tuple[str, ...] = Field(default_factory=tuple, description="Keywords for category filtering")
    verified: date = Field(..., description="Last editorial verification date")
    score: int = Field(..., ge=MIN_SCORE, le=MAX_SCORE, description="Sort weight (5 = most prominent)")

    @field_validator(
        "id", "name", "city", "distance", "address", "hours", "meta", "profile_url", "note"
    )
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("notes")
    @classmethod
    def _notes_read_only(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        for slug, text in value.items():
            if not slug or not text.strip():
                raise ValueError(f"contextual note for '{slug}' must not be blank")
        # read-only view; catalog records are shared across requests
        return MappingProxyType(dict(value))

    @field_serializer("notes")
    def _dump_notes(self, value: Mapping[str, str]) -> Dict[str, str]:
        return dict(value)

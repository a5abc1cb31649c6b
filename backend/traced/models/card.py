"""Pydantic models for vendor card view models."""
import datetime
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .vendor import Badge, VendorType


class Staleness(str, Enum):
    """Whether a verification date is inside the freshness window."""

    CURRENT = "current"
    STALE = "stale"


class VerifiedLabel(BaseModel):
    """Verification date plus its staleness classification.

    The renderer picks the visual treatment from `status`; `text` is the
    plain-text fallback.
    """

    model_config = ConfigDict(frozen=True)

    date: datetime.date = Field(..., description="Last editorial verification date")
    status: Staleness = Field(..., description="current or stale")
    text: str = Field(..., description="Display text, e.g. 'Needs review — 2025-01-02'")


class CardViewModel(BaseModel):
    """Everything a renderer needs to draw one vendor card."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Vendor slug")
    name: str = Field(..., description="Display name")
    city: str = Field(..., description="Locality code")
    type: VendorType = Field(..., description="Vendor category")
    meta: str = Field(..., description="One-line descriptor")
    distance: str = Field(..., description="Human-readable distance")
    address: str = Field(..., description="Street address")
    hours: str = Field(..., description="Hours summary")
    badges: List[Badge] = Field(default_factory=list, description="Badges, unchanged from the record")
    resolved_note: str = Field(..., description="Contextual note for the referral, or the default note")
    profile_href: str = Field(..., description="Profile link, forwarding ?from= when set")
    verified_label: VerifiedLabel = Field(..., description="Verification date and staleness")

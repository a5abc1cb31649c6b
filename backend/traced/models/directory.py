"""Pydantic response models for the vendor directory endpoints."""
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .card import CardViewModel, VerifiedLabel
from .vendor import Badge, VendorType


class QueryContextResponse(BaseModel):
    """The resolved query context echoed back to the caller."""

    from_slug: str = Field("", description="Referral investigation slug ('' when none)")
    city: str = Field("all", description="Locality filter")
    category: str = Field("all", description="Vendor type or tag filter")
    max_cards: Optional[int] = Field(None, description="Card limit (null = unlimited)")


class VendorCardsResponse(BaseModel):
    """Ordered vendor cards, or the explicit no-matches outcome.

    `status == "no_matches"` means nothing survived filtering and truncation;
    `matched` tells whether the filter itself matched nothing (0) or the
    card limit removed everything.
    """

    status: Literal["ok", "no_matches"] = Field(..., description="Outcome of the query")
    context: QueryContextResponse
    matched: int = Field(..., description="Records matching the filter before truncation")
    data: List[CardViewModel] = Field(default_factory=list)
    clear_filters_href: Optional[str] = Field(
        None, description="Link for the clear-filters affordance (no_matches only)"
    )


class DirectoryFiltersResponse(BaseModel):
    """Filter values present in the catalog."""

    cities: List[str]
    types: List[VendorType]
    total_vendors: int


class VendorProfileResponse(BaseModel):
    """A single vendor profile with its note resolved for the referral."""

    id: str
    name: str
    type: VendorType
    city: str
    distance: str
    address: str
    hours: str
    meta: str
    resolved_note: str
    from_slug: str = ""
    badges: List[Badge] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    score: int
    verified_label: VerifiedLabel

"""
API router for vendor directory endpoints.

Provides the context-aware vendor card listing, the available filter
values, and single vendor profiles.

Thin router — directory logic lives in DirectoryService.
"""
from datetime import datetime
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Path, Query

from ..cache import CARDS_CACHE, app_cache
from ..config.constants import CATEGORY_PARAM, CITY_PARAM, FROM_PARAM, MAX_CARDS_PARAM
from ..dependencies import CARDS_CACHE_TTL, get_catalog, get_now
from ..middleware.error_handler import NotFoundError
from ..models.directory import (
    DirectoryFiltersResponse,
    QueryContextResponse,
    VendorCardsResponse,
    VendorProfileResponse,
)
from ..services.catalog import Catalog
from ..services.listing import NoMatches
from ..services.notes import resolve_note
from ..services.query_context import QueryContext, resolve_query_context
from ..services.staleness import evaluate_staleness, reference_date, verified_label
from ..services.directory_service import directory_service

logger = structlog.get_logger("traced.api.vendors")

router = APIRouter(prefix="/vendors", tags=["vendors"])


def _context_response(ctx: QueryContext) -> QueryContextResponse:
    return QueryContextResponse(
        from_slug=ctx.from_slug,
        city=ctx.city_filter,
        category=ctx.type_filter,
        max_cards=ctx.max_cards,
    )


@router.get("/cards", response_model=VendorCardsResponse)
def list_vendor_cards(
    from_slug: Optional[str] = Query(None, alias="from", description="Referring investigation slug"),
    city: Optional[str] = Query(None, description="Locality filter: sf, oc, ... or all"),
    category: Optional[str] = Query(None, description="Vendor type or tag, or all"),
    max_cards: Optional[str] = Query(None, description="Maximum cards to return (non-negative integer)"),
    catalog: Catalog = Depends(get_catalog),
    now: datetime = Depends(get_now),
):
    """
    List vendor cards for the current referral and filters.

    Cards are sorted by score (highest first); equal scores keep catalog
    order. When nothing survives, status is "no_matches" and a
    clear-filters link is included.
    """
    ctx = resolve_query_context(
        params={
            FROM_PARAM: from_slug,
            CITY_PARAM: city,
            CATEGORY_PARAM: category,
            MAX_CARDS_PARAM: max_cards,
        }
    )

    # fingerprint keeps overridden or reloaded catalogs from sharing entries
    cache_key = f"{catalog.fingerprint}|{ctx.cache_key()}|{reference_date(now).isoformat()}"
    cached = app_cache.get(CARDS_CACHE, cache_key)
    if cached is not None:
        return cached

    result = directory_service.list_cards(catalog, ctx, now)

    if isinstance(result, NoMatches):
        response = VendorCardsResponse(
            status="no_matches",
            context=_context_response(ctx),
            matched=result.matched,
            data=[],
            clear_filters_href=result.clear_filters_href,
        )
    else:
        response = VendorCardsResponse(
            status="ok",
            context=_context_response(ctx),
            matched=result.matched,
            data=result.cards,
        )

    app_cache.set(CARDS_CACHE, cache_key, response, ttl=CARDS_CACHE_TTL)
    return response


@router.get("/filters", response_model=DirectoryFiltersResponse)
def list_filters(catalog: Catalog = Depends(get_catalog)):
    """Localities and vendor types present in the catalog."""
    return DirectoryFiltersResponse(**directory_service.available_filters(catalog))


@router.get("/{vendor_id}", response_model=VendorProfileResponse)
def get_vendor_profile(
    vendor_id: str = Path(..., description="Vendor slug"),
    from_slug: Optional[str] = Query(None, alias="from", description="Referring investigation slug"),
    catalog: Catalog = Depends(get_catalog),
    now: datetime = Depends(get_now),
):
    """
    Get one vendor profile.

    With ?from=<slug>, the note written for that investigation is returned
    in place of the default note, matching the card that linked here.
    """
    record = directory_service.get_vendor(catalog, vendor_id)
    if record is None:
        logger.info("vendor_not_found", vendor_id=vendor_id)
        raise NotFoundError(f"Vendor '{vendor_id}' not found", details={"vendor_id": vendor_id})

    slug = from_slug or ""
    staleness = evaluate_staleness(record.verified, now)
    return VendorProfileResponse(
        id=record.id,
        name=record.name,
        type=record.type,
        city=record.city,
        distance=record.distance,
        address=record.address,
        hours=record.hours,
        meta=record.meta,
        resolved_note=resolve_note(record, slug),
        from_slug=slug,
        badges=list(record.badges),
        tags=list(record.tags),
        score=record.score,
        verified_label=verified_label(record.verified, staleness),
    )

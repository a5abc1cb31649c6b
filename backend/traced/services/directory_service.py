"""
Vendor directory service — filter, sort, truncate, and annotate.

Pure given its inputs: the catalog, the resolved context, and a reference
instant sampled once by the caller. Routers parse the request and call
the service.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Mapping

import structlog

from ..config.constants import DEFAULT_FILTER
from ..models.card import Staleness
from ..models.vendor import VendorRecord
from .cards import build_card
from .catalog import Catalog
from .listing import DirectoryListing, DirectoryResult, NoMatches, truncate
from .notes import resolve_note
from .query_context import DirectoryOptions, QueryContext, resolve_query_context
from .staleness import evaluate_staleness

logger = structlog.get_logger("traced.services.directory")


def matches(record: VendorRecord, ctx: QueryContext) -> bool:
    """Locality and category predicate.

    A category filter matches the record's type OR any of its tags, so a
    category can alias onto a free-text tag outside the VendorType enum.
    """
    city_ok = ctx.city_filter == DEFAULT_FILTER or record.city == ctx.city_filter
    type_ok = (
        ctx.type_filter == DEFAULT_FILTER
        or record.type.value == ctx.type_filter
        or ctx.type_filter in record.tags
    )
    return city_ok and type_ok


def select_records(catalog: Catalog, ctx: QueryContext) -> tuple[list[VendorRecord], int]:
    """
    Filter the catalog, sort by score descending, and apply max_cards.

    sorted() is stable, so equal scores keep canonical catalog order.

    Returns:
        (selected records, number matched before truncation)
    """
    filtered = [r for r in catalog.records() if matches(r, ctx)]
    ranked = sorted(filtered, key=lambda r: r.score, reverse=True)
    return truncate(ranked, ctx.max_cards), len(filtered)


class DirectoryService:
    """Business logic for the vendor card directory."""

    def list_cards(
        self,
        catalog: Catalog,
        ctx: QueryContext,
        now: date | datetime,
    ) -> DirectoryResult:
        """Render cards for an already-resolved context."""
        selected, matched = select_records(catalog, ctx)

        if not selected:
            logger.info(
                "directory_no_matches",
                city=ctx.city_filter,
                category=ctx.type_filter,
                max_cards=ctx.max_cards,
                matched=matched,
            )
            return NoMatches(context=ctx, matched=matched)

        cards = [
            build_card(
                record,
                resolve_note(record, ctx.from_slug),
                evaluate_staleness(record.verified, now),
                ctx.from_slug,
            )
            for record in selected
        ]

        logger.debug(
            "directory_rendered",
            city=ctx.city_filter,
            category=ctx.type_filter,
            from_slug=ctx.from_slug or None,
            matched=matched,
            cards=len(cards),
            stale=sum(1 for c in cards if c.verified_label.status is Staleness.STALE),
        )
        return DirectoryListing(context=ctx, cards=cards, matched=matched)

    def build_directory(
        self,
        catalog: Catalog,
        options: DirectoryOptions | None = None,
        params: Mapping[str, Any] | None = None,
        *,
        now: date | datetime,
    ) -> DirectoryResult:
        """Resolve the context from options and ambient params, then render."""
        ctx = resolve_query_context(options, params)
        return self.list_cards(catalog, ctx, now)

    def get_vendor(self, catalog: Catalog, vendor_id: str) -> VendorRecord | None:
        return catalog.get(vendor_id)

    def available_filters(self, catalog: Catalog) -> dict:
        """Localities and vendor types present in the catalog, in catalog order."""
        types = []
        for record in catalog.records():
            if record.type not in types:
                types.append(record.type)
        return {
            "cities": catalog.localities(),
            "types": types,
            "total_vendors": len(catalog),
        }


# Singleton instance for router use
directory_service = DirectoryService()


def build_directory(
    catalog: Catalog,
    options: DirectoryOptions | None = None,
    params: Mapping[str, Any] | None = None,
    *,
    now: date | datetime,
) -> DirectoryResult:
    """Module-level shortcut for directory_service.build_directory."""
    return directory_service.build_directory(catalog, options, params, now=now)

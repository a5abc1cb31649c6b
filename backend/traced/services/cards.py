"""Card view model assembly."""
from __future__ import annotations

from urllib.parse import quote

from ..config.constants import FROM_PARAM
from ..models.card import CardViewModel, Staleness
from ..models.vendor import VendorRecord
from .staleness import verified_label


def profile_href(profile_url: str, from_slug: str) -> str:
    """Profile link, forwarding the referral slug so the profile page can
    resolve the same contextual note."""
    if not from_slug:
        return profile_url
    separator = "&" if "?" in profile_url else "?"
    return f"{profile_url}{separator}{FROM_PARAM}={quote(from_slug, safe='')}"


def build_card(
    record: VendorRecord,
    resolved_note: str,
    staleness: Staleness,
    from_slug: str,
) -> CardViewModel:
    return CardViewModel(
        id=record.id,
        name=record.name,
        city=record.city,
        type=record.type,
        meta=record.meta,
        distance=record.distance,
        address=record.address,
        hours=record.hours,
        badges=list(record.badges),
        resolved_note=resolved_note,
        profile_href=profile_href(record.profile_url, from_slug),
        verified_label=verified_label(record.verified, staleness),
    )

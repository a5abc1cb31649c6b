"""
Query context resolution.

Every read of ambient request parameters happens here, once per call. The
rest of the directory pipeline only sees the resulting QueryContext.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..config.constants import (
    CATEGORY_PARAM,
    CITY_PARAM,
    DEFAULT_FILTER,
    FROM_PARAM,
    MAX_CARDS_PARAM,
)
from ..middleware.error_handler import InvalidFilterError


@dataclass(frozen=True)
class DirectoryOptions:
    """Explicit caller options. Any field left as None (or '') defers to the
    ambient parameters."""
    from_slug: str | None = None
    city: str | None = None
    type: str | None = None
    max_cards: int | None = None


@dataclass(frozen=True)
class QueryContext:
    """Resolved referral slug, filters, and card limit for one render call."""
    from_slug: str = ""
    city_filter: str = DEFAULT_FILTER
    type_filter: str = DEFAULT_FILTER
    max_cards: int | None = None

    def cache_key(self) -> str:
        limit = "" if self.max_cards is None else str(self.max_cards)
        return f"{self.from_slug}|{self.city_filter}|{self.type_filter}|{limit}"


def _first_non_empty(*values: Any) -> Any:
    for value in values:
        if value is not None and value != "":
            return value
    return None


def _parse_max_cards(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidFilterError("max_cards must be an integer", details={"max_cards": value})
    if isinstance(value, int):
        parsed = value
    else:
        try:
            parsed = int(str(value).strip())
        except ValueError:
            raise InvalidFilterError(
                f"max_cards must be an integer, got '{value}'",
                details={"max_cards": value},
            ) from None
    if parsed < 0:
        raise InvalidFilterError(
            "max_cards must not be negative", details={"max_cards": parsed}
        )
    return parsed


def resolve_query_context(
    options: DirectoryOptions | None = None,
    params: Mapping[str, Any] | None = None,
) -> QueryContext:
    """
    Resolve the query context: explicit option, then ambient parameter, then default.

    Values are not checked against known localities or types; an unknown
    value simply matches nothing downstream.

    Args:
        options: Explicit caller options (may be partial or None)
        params: Ambient request parameters, e.g. a URL query string mapping.
                Read once into a snapshot.

    Raises:
        InvalidFilterError: max_cards is not a non-negative integer
    """
    options = options or DirectoryOptions()
    ambient = dict(params) if params else {}

    from_slug = _first_non_empty(options.from_slug, ambient.get(FROM_PARAM)) or ""
    city = _first_non_empty(options.city, ambient.get(CITY_PARAM)) or DEFAULT_FILTER
    vendor_type = _first_non_empty(options.type, ambient.get(CATEGORY_PARAM)) or DEFAULT_FILTER
    max_cards = _parse_max_cards(
        _first_non_empty(options.max_cards, ambient.get(MAX_CARDS_PARAM))
    )

    return QueryContext(
        from_slug=str(from_slug),
        city_filter=str(city),
        type_filter=str(vendor_type),
        max_cards=max_cards,
    )

"""
Listing result types for the service layer.

A directory query ends in exactly one of two outcomes: a DirectoryListing
with at least one card, or the NoMatches marker.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, TypeVar, Union

from ..config.constants import CLEAR_FILTERS_HREF
from ..models.card import CardViewModel
from .query_context import QueryContext

T = TypeVar("T")


@dataclass(frozen=True)
class DirectoryListing:
    """Ordered cards for one render call."""
    context: QueryContext
    cards: list[CardViewModel] = field(default_factory=list)
    matched: int = 0

    def __len__(self) -> int:
        return len(self.cards)


@dataclass(frozen=True)
class NoMatches:
    """Nothing survived filtering and truncation.

    `matched` is the filter hit count before truncation: 0 when the filters
    exclude every record, positive when max_cards=0 removed them.
    """
    context: QueryContext
    matched: int = 0
    clear_filters_href: str = CLEAR_FILTERS_HREF


DirectoryResult = Union[DirectoryListing, NoMatches]


def truncate(items: Sequence[T], max_cards: int | None) -> list[T]:
    """Keep the first `max_cards` items; None means unlimited."""
    if max_cards is None:
        return list(items)
    return list(items[:max_cards])

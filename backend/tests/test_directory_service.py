"""
Unit tests for the directory pipeline: filtering, sorting, truncation,
and the no-matches outcome.
"""
import itertools

import pytest

from traced.models.card import Staleness
from traced.services.catalog import Catalog, load_catalog
from traced.services.directory_service import (
    build_directory,
    directory_service,
    matches,
    select_records,
)
from traced.services.listing import DirectoryListing, NoMatches
from traced.services.query_context import DirectoryOptions, QueryContext


def ids(result):
    return [card.id for card in result.cards]


class TestFilter:
    """Locality and category predicate."""

    def test_city_filter(self, small_catalog, fixed_now):
        result = build_directory(small_catalog, DirectoryOptions(city="sf"), now=fixed_now)
        assert isinstance(result, DirectoryListing)
        assert all(card.city == "sf" for card in result.cards)
        assert len(result) == 4

    def test_type_filter_matches_type_or_tag(self, small_catalog, fixed_now):
        result = build_directory(small_catalog, DirectoryOptions(type="maker"), now=fixed_now)
        for card in result.cards:
            record = small_catalog.get(card.id)
            assert record.type.value == "maker" or "maker" in record.tags
        assert set(ids(result)) == {"sf-maker", "oc-maker", "sf-csa"}

    def test_tag_as_category(self, small_catalog, fixed_now):
        """A category that is not a vendor type still matches on tags."""
        result = build_directory(small_catalog, DirectoryOptions(type="pasta"), now=fixed_now)
        assert ids(result) == ["sf-shop", "oc-shop"]

    def test_city_and_category_combined(self, small_catalog, fixed_now):
        result = build_directory(
            small_catalog, DirectoryOptions(city="oc", type="pasta"), now=fixed_now
        )
        assert ids(result) == ["oc-shop"]

    def test_all_is_unrestricted(self, small_catalog, fixed_now):
        result = build_directory(
            small_catalog, DirectoryOptions(city="all", type="all"), now=fixed_now
        )
        assert result.matched == len(small_catalog)

    def test_matches_is_case_sensitive(self, small_catalog):
        record = small_catalog.get("sf-maker")
        assert matches(record, QueryContext(city_filter="sf", type_filter="maker"))
        assert not matches(record, QueryContext(city_filter="SF"))
        assert not matches(record, QueryContext(type_filter="Maker"))


class TestSort:
    """Descending score, stable on ties."""

    def test_monotonic(self, small_catalog, fixed_now):
        result = build_directory(small_catalog, now=fixed_now)
        scores = [small_catalog.get(i).score for i in ids(result)]
        assert all(a >= b for a, b in zip(scores, scores[1:]))

    def test_full_order(self, small_catalog, fixed_now):
        result = build_directory(small_catalog, now=fixed_now)
        assert ids(result) == ["sf-maker", "oc-maker", "sf-shop", "sf-market", "oc-shop", "sf-csa"]

    @pytest.mark.parametrize(
        "city,category",
        list(itertools.product(["all", "sf", "oc"], ["all", "maker", "shop", "pasta"])),
    )
    def test_ties_keep_canonical_order(self, small_catalog, city, category):
        """Equal scores appear in catalog order regardless of filters."""
        canonical = [r.id for r in small_catalog.records()]
        selected, _ = select_records(
            small_catalog, QueryContext(city_filter=city, type_filter=category)
        )
        for a, b in zip(selected, selected[1:]):
            if a.score == b.score:
                assert canonical.index(a.id) < canonical.index(b.id)

    def test_end_to_end_sf_example(self, make_vendor, fixed_now):
        """Two sf records (4 then 5 declared) and one oc record scored 5."""
        catalog = Catalog.from_mapping({
            "sf": [make_vendor("sf-four", score=4), make_vendor("sf-five", score=5)],
            "oc": [make_vendor("oc-five", city="oc", score=5)],
        })
        result = build_directory(
            catalog, DirectoryOptions(city="sf", type="all"), now=fixed_now
        )
        assert ids(result) == ["sf-five", "sf-four"]


class TestTruncation:
    """max_cards keeps the first N sorted records."""

    @pytest.mark.parametrize("max_cards", [1, 2, 3, 6, 10])
    def test_length(self, small_catalog, fixed_now, max_cards):
        result = build_directory(
            small_catalog, DirectoryOptions(max_cards=max_cards), now=fixed_now
        )
        assert len(result) == min(max_cards, len(small_catalog))
        assert result.matched == len(small_catalog)

    def test_keeps_top_ranked(self, small_catalog, fixed_now):
        result = build_directory(small_catalog, DirectoryOptions(max_cards=2), now=fixed_now)
        assert ids(result) == ["sf-maker", "oc-maker"]

    def test_unlimited(self, small_catalog, fixed_now):
        result = build_directory(small_catalog, now=fixed_now)
        assert len(result) == len(small_catalog)


class TestNoMatches:
    """An empty outcome is a distinct marker, never an empty listing."""

    def test_unknown_city(self, small_catalog, fixed_now):
        result = build_directory(small_catalog, DirectoryOptions(city="la"), now=fixed_now)
        assert isinstance(result, NoMatches)
        assert result.matched == 0
        assert result.clear_filters_href == "index.html#local"

    def test_unknown_category(self, small_catalog, fixed_now):
        result = build_directory(small_catalog, params={"category": "bakery"}, now=fixed_now)
        assert isinstance(result, NoMatches)

    def test_zero_max_cards_distinguishable(self, small_catalog, fixed_now):
        """Truncation to zero reports how many records did match."""
        result = build_directory(small_catalog, DirectoryOptions(max_cards=0), now=fixed_now)
        assert isinstance(result, NoMatches)
        assert result.matched == len(small_catalog)

    def test_context_carried(self, small_catalog, fixed_now):
        result = build_directory(small_catalog, DirectoryOptions(city="la"), now=fixed_now)
        assert result.context.city_filter == "la"


class TestAnnotation:
    """Cards carry the referral note, profile link, and staleness."""

    def test_contextual_note(self, small_catalog, fixed_now):
        result = build_directory(small_catalog, params={"from": "annies"}, now=fixed_now)
        cards = {card.id: card for card in result.cards}
        assert cards["sf-maker"].resolved_note == "Annie's note."
        assert cards["sf-shop"].resolved_note == "Default note for sf-shop."

    def test_profile_href_forwards_slug(self, small_catalog, fixed_now):
        result = build_directory(small_catalog, params={"from": "annies"}, now=fixed_now)
        assert all(card.profile_href.endswith("?from=annies") for card in result.cards)

    def test_profile_href_without_slug(self, small_catalog, fixed_now):
        result = build_directory(small_catalog, now=fixed_now)
        assert result.cards[0].profile_href == "vendor-sf-maker.html"

    def test_staleness(self, small_catalog, fixed_now):
        result = build_directory(small_catalog, now=fixed_now)
        labels = {card.id: card.verified_label for card in result.cards}
        assert labels["sf-csa"].status is Staleness.STALE
        assert labels["sf-shop"].status is Staleness.CURRENT

    def test_badges_passed_through(self, make_vendor, fixed_now):
        badges = [{"text": "B Corp", "kind": "emphasis-b"}, {"text": "Since 1964", "kind": "default"}]
        catalog = Catalog.from_mapping({"sf": [make_vendor("b", badges=badges)]})
        result = build_directory(catalog, now=fixed_now)
        card_badges = [b.model_dump(mode="json") for b in result.cards[0].badges]
        assert card_badges == badges


class TestDefaultCatalogListing:
    """Behavior against the shipped catalog."""

    def test_makers_across_cities(self, fixed_now):
        result = build_directory(load_catalog(), DirectoryOptions(type="maker"), now=fixed_now)
        assert ids(result) == ["dandelion", "pasta-supply", "oc-chocolate-grove"]

    def test_sf_order(self, fixed_now):
        result = build_directory(load_catalog(), DirectoryOptions(city="sf"), now=fixed_now)
        assert ids(result) == ["dandelion", "ferry-plaza", "birite", "pasta-supply", "rainbow"]

    def test_available_filters(self):
        filters = directory_service.available_filters(load_catalog())
        assert filters["cities"] == ["sf", "oc"]
        assert [t.value for t in filters["types"]] == ["maker", "shop", "market", "csa"]
        assert filters["total_vendors"] == 7

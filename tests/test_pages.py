"""Tests for the page registry and the keyword bank."""

import pytest

from pallet_seo.pages.keyword_bank import (
    category_key,
    get_all_keywords,
    get_keywords_for_page,
    retailer_key,
)
from pallet_seo.pages.models import ContentAngle, PageDefinition
from pallet_seo.pages.registry import (
    ALL_PAGES,
    get_all_slugs,
    get_page_by_slug,
    get_page_definitions,
)


class TestRegistry:
    def test_counts_per_type(self):
        assert len(get_page_definitions("retailer")) == 16
        assert len(get_page_definitions("category")) == 14
        assert len(get_page_definitions("inventory")) == 10
        assert len(get_page_definitions()) == 40

    def test_order_is_retailers_then_categories_then_inventory(self):
        types = [p.page_type for p in ALL_PAGES]
        assert types == ["retailer"] * 16 + ["category"] * 14 + ["inventory"] * 10
        assert ALL_PAGES[0].slug == "amazon-liquidation"

    def test_slugs_unique(self):
        slugs = get_all_slugs()
        assert len(slugs) == len(set(slugs))

    def test_slug_filter(self):
        pages = get_page_definitions(slug="walmart-liquidation")
        assert [p.slug for p in pages] == ["walmart-liquidation"]

    def test_slug_filter_within_type(self):
        with pytest.raises(KeyError):
            get_page_definitions(page_type="category", slug="walmart-liquidation")

    def test_unknown_slug(self):
        with pytest.raises(KeyError, match="Page not found: nope"):
            get_page_definitions(slug="nope")

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            get_page_definitions(page_type="brand")

    def test_get_page_by_slug(self):
        assert get_page_by_slug("best-buy-liquidation").display_name == "Best Buy"
        assert get_page_by_slug("missing") is None

    def test_angle_weights_in_range(self):
        for p in ALL_PAGES:
            assert p.angles
            for angle in p.angles:
                assert 0.0 <= angle.weight <= 1.0


class TestModels:
    def test_angle_weight_validated(self):
        with pytest.raises(ValueError):
            ContentAngle(id="x", name="X", weight=1.5)

    def test_page_type_validated(self):
        with pytest.raises(ValueError):
            PageDefinition(
                slug="x", display_name="X", page_type="brand",
                keywords=(), angles=(), related_terms=(), image_style="",
            )

    def test_to_dict_camel_case(self):
        data = get_page_by_slug("amazon-liquidation").to_dict()
        assert data["displayName"] == "Amazon"
        assert data["pageType"] == "retailer"
        assert "Fulfilled by Amazon returns" in data["angles"][0]["phrases"]
        assert "specificTerms" in data


class TestKeywordBank:
    def test_key_normalization(self):
        assert retailer_key("home-depot-liquidation") == "homedepot"
        assert retailer_key("best-buy-liquidation") == "bestbuy"
        assert category_key("electronics-pallets") == "electronics"
        assert category_key("apparel-wholesale") == "apparel"

    def test_deterministic(self):
        first = get_keywords_for_page("amazon-liquidation", "retailer")
        second = get_keywords_for_page("amazon-liquidation", "retailer")
        assert first == second

    def test_no_duplicates(self):
        for p in ALL_PAGES:
            terms = get_keywords_for_page(p.slug, p.page_type)
            assert len(terms) == len(set(terms)), p.slug
        all_terms = get_all_keywords()
        assert len(all_terms) == len(set(all_terms))

    def test_retailer_terms_included(self):
        assert "LPN" in get_keywords_for_page("amazon-liquidation", "retailer")
        assert "Geek Squad returns" in get_keywords_for_page("best-buy-liquidation", "retailer")
        assert "LPN" not in get_keywords_for_page("walmart-liquidation", "retailer")

    def test_category_terms_included(self):
        assert "data wiped" in get_keywords_for_page("electronics-pallets", "category")

    def test_unknown_slug_gets_generic_vocabulary(self):
        terms = get_keywords_for_page("unknown-page", "retailer")
        generic = get_keywords_for_page("another-unknown", "category")
        assert terms == generic
        assert "LPN" not in terms
        assert "dock-high" in terms


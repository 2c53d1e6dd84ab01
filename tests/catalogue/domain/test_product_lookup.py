"""Tests for catalogue lookup helpers."""

from catalogue.product.lookup import (
    get_availability_status,
    get_coming_soon_products,
    get_featured_products,
    get_product_by_id,
    get_product_by_slug,
    get_products_by_category,
    get_purchasable_products,
    get_related_products,
    list_products,
    search_products,
    slugify,
)
from catalogue.product.product import AvailabilityStatus, ProductCategory


class TestListing:
    def test_test_products_are_hidden_by_default(self):
        ids = [p.id for p in list_products()]
        assert "test-checkout-product" not in ids
        assert len(ids) == 7

    def test_test_products_can_be_included(self):
        assert len(list_products(include_test=True)) == 8

    def test_by_category(self):
        ids = [p.id for p in get_products_by_category(ProductCategory.UPSELLS)]
        assert ids == ["cushion-set-troopy-kits", "mass-noise-liner"]

    def test_by_category_name(self):
        assert len(get_products_by_category("flat-packs")) == 3

    def test_unknown_category(self):
        assert get_products_by_category("boats") == []

    def test_purchasable_excludes_coming_soon(self):
        ids = [p.id for p in get_purchasable_products()]
        assert "roam-troopy-flat-pack-general" not in ids
        assert "shower-outlet" in ids

    def test_coming_soon(self):
        assert [p.id for p in get_coming_soon_products()] == ["roam-troopy-flat-pack-general"]

    def test_featured(self):
        assert [p.id for p in get_featured_products()] == ["wander-troopy-flat-pack", "cushion-set-troopy-kits"]


class TestLookup:
    def test_by_id(self):
        assert get_product_by_id("shower-outlet").name == "Hot/Cold Shower Outlet"

    def test_by_slug(self):
        assert get_product_by_slug("roam-troopy-flat-pack").id == "roam-troopy-flat-pack-general"

    def test_missing(self):
        assert get_product_by_id("nope") is None
        assert get_product_by_slug("nope") is None


class TestSearch:
    def test_matches_name_case_insensitively(self):
        assert [p.id for p in search_products("CUSHION")] == ["cushion-set-troopy-kits"]

    def test_matches_tags(self):
        assert [p.id for p in search_products("plumbing")] == ["shower-outlet"]

    def test_blank_query(self):
        assert search_products("  ") == []


class TestRelatedProducts:
    def test_declared_related_first_then_same_category(self):
        product = get_product_by_id("wander-troopy-flat-pack")
        related = [p.id for p in get_related_products(product)]
        assert related == [
            "cushion-set-troopy-kits",
            "shower-outlet",
            "mass-noise-liner",
            "wander-chest-plain",
        ]

    def test_limit(self):
        product = get_product_by_id("wander-troopy-flat-pack")
        assert len(get_related_products(product, limit=2)) == 2


class TestAvailability:
    def test_coming_soon(self):
        assert get_availability_status(get_product_by_id("roam-troopy-flat-pack-general")) == AvailabilityStatus.COMING_SOON

    def test_low_stock(self):
        assert get_availability_status(get_product_by_id("shower-outlet")) == AvailabilityStatus.LOW_STOCK

    def test_in_stock(self):
        assert get_availability_status(get_product_by_id("cushion-set-troopy-kits")) == AvailabilityStatus.IN_STOCK


class TestSlugify:
    def test_slugify(self):
        assert slugify("Wander Kit - Chest Fridge (Plain Hardwood)") == "wander-kit-chest-fridge-plain-hardwood"

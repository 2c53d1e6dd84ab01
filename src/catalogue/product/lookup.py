"""Lookup helpers over the static catalogue."""

import re

from catalogue.product.data import PRODUCTS
from catalogue.product.product import (
    LOW_STOCK_THRESHOLD,
    AvailabilityStatus,
    Product,
    ProductCategory,
)

_BY_ID = {product.id: product for product in PRODUCTS}
_BY_SLUG = {product.slug: product for product in PRODUCTS}


def list_products(include_test: bool = False) -> list[Product]:
    return [p for p in PRODUCTS if include_test or p.category != ProductCategory.TEST]


def get_product_by_id(product_id: str) -> Product | None:
    return _BY_ID.get(product_id)


def get_product_by_slug(slug: str) -> Product | None:
    return _BY_SLUG.get(slug)


def get_products_by_category(category: ProductCategory | str) -> list[Product]:
    try:
        category = ProductCategory(category)
    except ValueError:
        return []
    return [p for p in PRODUCTS if p.category == category]


def get_purchasable_products() -> list[Product]:
    return [p for p in list_products() if p.is_purchasable]


def get_coming_soon_products() -> list[Product]:
    return [p for p in PRODUCTS if p.coming_soon]


def get_featured_products() -> list[Product]:
    return [p for p in PRODUCTS if p.featured]


def search_products(query: str) -> list[Product]:
    """Case-insensitive match on name, description and tags."""
    needle = (query or "").strip().lower()
    if not needle:
        return []
    return [
        p
        for p in list_products()
        if needle in p.name.lower()
        or needle in p.description.lower()
        or any(needle in tag.lower() for tag in p.tags)
    ]


def get_related_products(product: Product, limit: int = 4) -> list[Product]:
    """Declared related products first, then others from the same category."""
    related = [_BY_ID[pid] for pid in product.related_ids if pid in _BY_ID]
    for candidate in PRODUCTS:
        if len(related) >= limit:
            break
        if candidate.id != product.id and candidate.category == product.category and candidate not in related:
            related.append(candidate)
    return related[:limit]


def get_availability_status(product: Product) -> AvailabilityStatus:
    if product.coming_soon:
        return AvailabilityStatus.COMING_SOON
    if not product.in_stock or product.stock_quantity == 0:
        return AvailabilityStatus.OUT_OF_STOCK
    if product.stock_quantity is not None and product.stock_quantity <= LOW_STOCK_THRESHOLD:
        return AvailabilityStatus.LOW_STOCK
    return AvailabilityStatus.IN_STOCK


def slugify(name: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower())
    return slug.strip("-")

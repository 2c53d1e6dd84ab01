"""FastAPI endpoints for the Catalogue."""

from fastapi import APIRouter, HTTPException

from catalogue.api.schemas import (
    ProductDetailResponse,
    ProductSummaryResponse,
    ResolvedVariantResponse,
    ResolveVariantRequest,
)
from catalogue.product.lookup import (
    get_product_by_slug,
    get_products_by_category,
    get_related_products,
    list_products,
    search_products,
)
from catalogue.product.variants import resolve_variant

product_router = APIRouter(prefix="/products", tags=["products"])


def _get_or_404(slug: str):
    product = get_product_by_slug(slug)
    if product is None:
        raise HTTPException(status_code=404, detail=f"Product {slug} not found")
    return product


@product_router.get("", response_model=list[ProductSummaryResponse])
async def get_products(category: str | None = None, q: str | None = None) -> list[ProductSummaryResponse]:
    if q:
        products = search_products(q)
    elif category:
        products = get_products_by_category(category)
    else:
        products = list_products()
    return [ProductSummaryResponse.from_product(p) for p in products]


@product_router.get("/{slug}", response_model=ProductDetailResponse)
async def get_product(slug: str) -> ProductDetailResponse:
    product = _get_or_404(slug)
    return ProductDetailResponse.from_product(product, related=get_related_products(product))


@product_router.post("/{slug}/variant", response_model=ResolvedVariantResponse)
async def resolve_product_variant(slug: str, body: ResolveVariantRequest) -> ResolvedVariantResponse:
    product = _get_or_404(slug)
    return ResolvedVariantResponse.from_variant(resolve_variant(product, body.selected_options))

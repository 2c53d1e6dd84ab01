"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from catalogue.product.lookup import get_availability_status
from catalogue.product.product import Product, ResolvedVariant


class DimensionsSchema(BaseModel):
    length: float
    width: float
    height: float


class VariantOptionValueSchema(BaseModel):
    value: str
    label: str
    available: bool = True
    price: float | None = None
    image: str | None = None


class VariantOptionSchema(BaseModel):
    name: str
    display_name: str
    required: bool = True
    values: list[VariantOptionValueSchema]


class ProductSummaryResponse(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "wander-troopy-flat-pack",
                    "name": "Wander Troopy Flat Pack",
                    "slug": "wander-troopy-flat-pack",
                    "price": 3750.0,
                    "category": "flat-packs",
                    "image": "/brand/wander-troopy-flat-pack-346203.jpg",
                    "availability": "low-stock",
                }
            ]
        }
    }

    id: str
    name: str
    slug: str
    price: float
    category: str
    image: str | None = None
    short_description: str = ""
    availability: str

    @classmethod
    def from_product(cls, product: Product) -> ProductSummaryResponse:
        return cls(
            id=product.id,
            name=product.name,
            slug=product.slug,
            price=product.price,
            category=product.category.value,
            image=product.image,
            short_description=product.short_description,
            availability=get_availability_status(product).value,
        )


class ProductDetailResponse(ProductSummaryResponse):
    sku: str
    description: str = ""
    images: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    weight: float | None = None
    dimensions: DimensionsSchema | None = None
    ship_class: str
    variant_options: list[VariantOptionSchema] = Field(default_factory=list)
    related: list[ProductSummaryResponse] = Field(default_factory=list)

    @classmethod
    def from_product(cls, product: Product, related: list[Product] | None = None) -> ProductDetailResponse:
        summary = ProductSummaryResponse.from_product(product)
        return cls(
            **summary.model_dump(),
            sku=product.sku,
            description=product.description,
            images=list(product.images),
            tags=list(product.tags),
            weight=product.weight,
            dimensions=DimensionsSchema(**vars(product.dimensions)) if product.dimensions else None,
            ship_class=product.ship_class.value,
            variant_options=[
                VariantOptionSchema(
                    name=option.name,
                    display_name=option.display_name,
                    required=option.required,
                    values=[
                        VariantOptionValueSchema(
                            value=v.value,
                            label=v.label,
                            available=v.available,
                            price=v.price,
                            image=v.image,
                        )
                        for v in option.values
                    ],
                )
                for option in product.variant_options
            ],
            related=[ProductSummaryResponse.from_product(p) for p in related or []],
        )


class ResolveVariantRequest(BaseModel):
    model_config = {
        "json_schema_extra": {"examples": [{"selected_options": {"Material": "black-hex", "Bungee": "with-bungee"}}]}
    }

    selected_options: dict[str, str] = Field(default_factory=dict)


class ResolvedVariantResponse(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "variant": {
                        "id": "SP-BH-WB",
                        "product_id": "troopy-side-panels-with-storage",
                        "sku": "SP-BH-WB-001",
                        "price": 865.0,
                        "image": "/brand/side-panels-storage.jpg",
                        "in_stock": False,
                        "stock_quantity": 0,
                        "available": True,
                        "options": {"Material": "black-hex", "Bungee": "with-bungee"},
                    },
                    "complete": True,
                }
            ]
        }
    }

    variant: ResolvedVariantSchema | None = None
    complete: bool

    @classmethod
    def from_variant(cls, variant: ResolvedVariant | None) -> ResolvedVariantResponse:
        if variant is None:
            return cls(variant=None, complete=False)
        return cls(variant=ResolvedVariantSchema(**vars(variant)), complete=True)


class ResolvedVariantSchema(BaseModel):
    id: str
    product_id: str
    sku: str
    price: float
    image: str | None = None
    in_stock: bool
    stock_quantity: int | None = None
    available: bool
    options: dict[str, str]


ResolvedVariantResponse.model_rebuild()

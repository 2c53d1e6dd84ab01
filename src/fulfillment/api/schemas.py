"""Pydantic API schemas for shipping quotes and locality search.

These are the external API contracts; the routes translate them into the
quote service's value types.
"""

from pydantic import BaseModel, Field

from fulfillment.quotes.models import DeliveryAddress, Quote, QuoteItem, QuoteResult, SuburbSuggestion


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------
class DeliveryAddressSchema(BaseModel):
    street: str = Field(min_length=1)
    city: str = Field(min_length=1)
    state: str = Field(min_length=1)
    postcode: str = Field(min_length=1)
    country: str = "AU"

    def to_address(self) -> DeliveryAddress:
        return DeliveryAddress(**self.model_dump())


class DimensionsSchema(BaseModel):
    length: float = Field(gt=0)
    width: float = Field(gt=0)
    height: float = Field(gt=0)


class QuoteItemSchema(BaseModel):
    id: str
    name: str
    quantity: int = Field(ge=1)
    price: float = Field(gt=0)
    weight: float | None = Field(default=None, gt=0)
    dimensions: DimensionsSchema | None = None
    ship_class: str = "standard"

    def to_item(self) -> QuoteItem:
        dims = self.dimensions
        return QuoteItem(
            name=self.name,
            quantity=self.quantity,
            price=self.price,
            weight=self.weight,
            length=dims.length if dims else None,
            width=dims.width if dims else None,
            height=dims.height if dims else None,
            ship_class=self.ship_class,
        )


class ShippingQuoteRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "delivery_address": {
                        "street": "12 Export Drive",
                        "city": "Brooklyn",
                        "state": "VIC",
                        "postcode": "3012",
                        "country": "AU",
                    },
                    "items": [
                        {
                            "id": "shower-outlet",
                            "name": "Hot/Cold Shower Outlet",
                            "quantity": 1,
                            "price": 89.0,
                            "weight": 0.8,
                            "dimensions": {"length": 20, "width": 15, "height": 10},
                        }
                    ],
                    "total_value": 89.0,
                }
            ]
        }
    }

    delivery_address: DeliveryAddressSchema
    items: list[QuoteItemSchema] = Field(min_length=1)
    total_value: float = Field(gt=0)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------
class QuoteSchema(BaseModel):
    service: str
    price: float
    delivery_days: int
    carrier: str
    description: str = ""
    authority_to_leave: bool = False
    restrictions: list[str] = Field(default_factory=list)
    source: str
    service_code: str | None = None
    carrier_id: str | None = None

    @classmethod
    def from_quote(cls, quote: Quote) -> "QuoteSchema":
        return cls(**quote.to_dict())


class ShippingQuoteResponse(BaseModel):
    success: bool
    quotes: list[QuoteSchema] = Field(default_factory=list)
    error: str | None = None
    error_code: str | None = None
    fallback_used: bool = False
    details: list | None = None

    @classmethod
    def from_result(cls, result: QuoteResult) -> "ShippingQuoteResponse":
        return cls(
            success=result.success,
            quotes=[QuoteSchema.from_quote(q) for q in result.quotes],
            error=result.error,
            error_code=result.error_code,
            fallback_used=result.fallback_used,
            details=result.details,
        )


class SuburbSuggestionSchema(BaseModel):
    suburb: str
    postcode: str
    state: str
    label: str
    description: str
    locality_id: int | None = None

    @classmethod
    def from_suggestion(cls, suggestion: SuburbSuggestion) -> "SuburbSuggestionSchema":
        return cls(
            suburb=suggestion.suburb,
            postcode=suggestion.postcode,
            state=suggestion.state,
            label=suggestion.label,
            description=suggestion.description,
            locality_id=suggestion.locality_id,
        )

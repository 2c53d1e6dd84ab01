"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands.
"""

from pydantic import BaseModel, Field

from ordering.cart.cart import ShoppingCart


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class AddressSchema(BaseModel):
    street: str = Field(min_length=1)
    city: str = Field(min_length=1)
    state: str = Field(min_length=1)
    postcode: str = Field(min_length=1)
    country: str = "AU"


class ShippingQuoteSchema(BaseModel):
    service: str
    price: float
    delivery_days: int
    carrier: str | None = None
    description: str = ""
    authority_to_leave: bool = False
    restrictions: list[str] = Field(default_factory=list)
    source: str
    service_code: str | None = None
    carrier_id: str | None = None


class CartItemSchema(BaseModel):
    product_id: str
    name: str
    unit_price: float
    quantity: int
    image: str | None = None
    weight: float | None = None
    ship_class: str | None = None


# ---------------------------------------------------------------------------
# Cart Request Schemas
# ---------------------------------------------------------------------------
class CreateCartRequest(BaseModel):
    session_id: str | None = None

    model_config = {"json_schema_extra": {"examples": [{"session_id": "sess-7f3a"}]}}


class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = Field(ge=1, default=1)
    selected_options: dict[str, str] = Field(default_factory=dict)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": "troopy-side-panels-with-storage",
                    "quantity": 1,
                    "selected_options": {"Material": "black-hex", "Bungee": "no-bungee"},
                }
            ]
        }
    }


class UpdateCartQuantityRequest(BaseModel):
    quantity: int


class SelectShippingQuoteRequest(BaseModel):
    service_code: str | None = None
    index: int | None = Field(default=None, ge=0)


class RequestShippingQuotesRequest(BaseModel):
    buyer_is_business: bool | None = None
    buyer_has_forklift: bool | None = None


class CheckoutRequest(BaseModel):
    payment_surcharge: str | None = None
    shipping_insurance: str | None = None
    special_instructions: str | None = None
    customer_email: str | None = None
    success_url: str | None = None
    cancel_url: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "payment_surcharge": "credit-card",
                    "shipping_insurance": "standard",
                    "special_instructions": "Call on arrival",
                }
            ]
        }
    }


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class CartIdResponse(BaseModel):
    cart_id: str


class StatusResponse(BaseModel):
    status: str = "ok"


class CartResponse(BaseModel):
    cart_id: str
    items: list[CartItemSchema]
    item_count: int
    subtotal: float
    total: float
    shipping_address: AddressSchema | None = None
    shipping_quotes: list[ShippingQuoteSchema] = Field(default_factory=list)
    selected_quote: ShippingQuoteSchema | None = None
    quotes_loading: bool = False
    shipping_error: str | None = None
    can_checkout: bool

    @classmethod
    def from_cart(cls, cart: ShoppingCart) -> "CartResponse":
        address = cart.shipping_address
        return cls(
            cart_id=str(cart.id),
            items=[
                CartItemSchema(
                    product_id=item.product_id,
                    name=item.name,
                    unit_price=item.unit_price,
                    quantity=item.quantity,
                    image=item.image,
                    weight=item.weight,
                    ship_class=item.ship_class,
                )
                for item in cart.items
            ],
            item_count=cart.item_count,
            subtotal=cart.subtotal,
            total=cart.total,
            shipping_address=AddressSchema(
                street=address.street,
                city=address.city,
                state=address.state,
                postcode=address.postcode,
                country=address.country or "AU",
            )
            if address
            else None,
            shipping_quotes=[ShippingQuoteSchema(**q) for q in cart.quotes],
            selected_quote=ShippingQuoteSchema(**cart.selected_quote.to_dict()) if cart.selected_quote else None,
            quotes_loading=bool(cart.quotes_loading),
            shipping_error=cart.shipping_error,
            can_checkout=bool(cart.items) and cart.selected_quote is not None,
        )


class ShippingQuotesResponse(BaseModel):
    quotes: list[ShippingQuoteSchema] = Field(default_factory=list)
    selected_quote: ShippingQuoteSchema | None = None
    error: str | None = None


class CheckoutTotalsResponse(BaseModel):
    subtotal: float
    shipping: float
    surcharge: float
    insurance: float
    total: float
    display_total: str


class CheckoutSessionResponse(BaseModel):
    sessionId: str | None = None  # noqa: N815 - wire name
    url: str | None = None
    total: float | None = None
    error: str | None = None

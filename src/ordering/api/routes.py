"""FastAPI routes for the Ordering domain: carts, shipping and checkout."""

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from protean.utils.globals import current_domain

from catalogue.product.lookup import get_product_by_id, get_product_by_slug
from catalogue.product.variants import resolve_variant
from ordering.api.schemas import (
    AddressSchema,
    AddToCartRequest,
    CartIdResponse,
    CartResponse,
    CheckoutRequest,
    CheckoutSessionResponse,
    CheckoutTotalsResponse,
    CreateCartRequest,
    RequestShippingQuotesRequest,
    SelectShippingQuoteRequest,
    ShippingQuoteSchema,
    ShippingQuotesResponse,
    StatusResponse,
    UpdateCartQuantityRequest,
)
from ordering.cart.cart import ShoppingCart
from ordering.cart.items import AddToCart, RemoveFromCart, UpdateCartQuantity
from ordering.cart.management import ClearCart, CreateCart
from ordering.cart.shipping import RequestShippingQuotes, SelectShippingQuote, SetShippingAddress
from ordering.checkout.session import StartCheckout
from ordering.checkout.totals import CheckoutOptions, cart_totals

cart_router = APIRouter(prefix="/carts", tags=["carts"])


def _load_cart(cart_id: str) -> ShoppingCart:
    return current_domain.repository_for(ShoppingCart).get(cart_id)


def _add_to_cart_command(cart_id: str, body: AddToCartRequest) -> AddToCart:
    """Translate a catalogue selection into a cart line."""
    product = get_product_by_id(body.product_id) or get_product_by_slug(body.product_id)
    if product is None:
        raise HTTPException(status_code=404, detail=f"Product {body.product_id} not found")
    if not product.is_purchasable:
        raise HTTPException(status_code=400, detail=f"{product.name} is not available for purchase")

    line_id, price, image, name = product.id, product.price, product.image, product.name
    if product.has_variants:
        variant = resolve_variant(product, body.selected_options)
        if variant is None:
            raise HTTPException(status_code=400, detail="Please select all required options")
        if not variant.available:
            raise HTTPException(status_code=400, detail="The selected options are not available")
        labels = ", ".join(
            product.option(option_name).find_value(value).label for option_name, value in variant.options.items()
        )
        line_id, price, image, name = variant.id, variant.price, variant.image, f"{product.name} ({labels})"

    dims = product.dimensions
    return AddToCart(
        cart_id=cart_id,
        product_id=line_id,
        name=name,
        unit_price=price,
        quantity=body.quantity,
        image=image,
        weight=product.weight,
        length=dims.length if dims else None,
        width=dims.width if dims else None,
        height=dims.height if dims else None,
        ship_class=product.ship_class.value,
    )


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
@cart_router.post("", status_code=201, response_model=CartIdResponse)
async def create_cart(body: CreateCartRequest) -> CartIdResponse:
    result = current_domain.process(CreateCart(session_id=body.session_id), asynchronous=False)
    return CartIdResponse(cart_id=result)


@cart_router.get("/{cart_id}", response_model=CartResponse)
async def get_cart(cart_id: str) -> CartResponse:
    return CartResponse.from_cart(_load_cart(cart_id))


@cart_router.post("/{cart_id}/items", response_model=StatusResponse)
async def add_cart_item(cart_id: str, body: AddToCartRequest) -> StatusResponse:
    current_domain.process(_add_to_cart_command(cart_id, body), asynchronous=False)
    return StatusResponse()


@cart_router.put("/{cart_id}/items/{product_id}", response_model=StatusResponse)
async def update_cart_item_quantity(cart_id: str, product_id: str, body: UpdateCartQuantityRequest) -> StatusResponse:
    command = UpdateCartQuantity(
        cart_id=cart_id,
        product_id=product_id,
        quantity=body.quantity,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.delete("/{cart_id}/items/{product_id}", response_model=StatusResponse)
async def remove_cart_item(cart_id: str, product_id: str) -> StatusResponse:
    current_domain.process(RemoveFromCart(cart_id=cart_id, product_id=product_id), asynchronous=False)
    return StatusResponse()


@cart_router.delete("/{cart_id}/items", response_model=StatusResponse)
async def clear_cart(cart_id: str) -> StatusResponse:
    current_domain.process(ClearCart(cart_id=cart_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Shipping
# ---------------------------------------------------------------------------
@cart_router.put("/{cart_id}/shipping-address", response_model=StatusResponse)
async def set_shipping_address(cart_id: str, body: AddressSchema) -> StatusResponse:
    command = SetShippingAddress(
        cart_id=cart_id,
        street=body.street,
        city=body.city,
        state=body.state,
        postcode=body.postcode,
        country=body.country,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.post("/{cart_id}/shipping-quotes", response_model=ShippingQuotesResponse)
async def request_shipping_quotes(
    cart_id: str, body: RequestShippingQuotesRequest | None = None
) -> ShippingQuotesResponse:
    body = body or RequestShippingQuotesRequest()
    quotes = current_domain.process(
        RequestShippingQuotes(
            cart_id=cart_id,
            buyer_is_business=body.buyer_is_business,
            buyer_has_forklift=body.buyer_has_forklift,
        ),
        asynchronous=False,
    )
    if quotes is None:
        raise HTTPException(status_code=400, detail="Add items and a delivery address before requesting quotes")

    cart = _load_cart(cart_id)
    return ShippingQuotesResponse(
        quotes=[ShippingQuoteSchema(**q) for q in quotes],
        selected_quote=ShippingQuoteSchema(**cart.selected_quote.to_dict()) if cart.selected_quote else None,
        error=cart.shipping_error,
    )


@cart_router.put("/{cart_id}/shipping-quote", response_model=StatusResponse)
async def select_shipping_quote(cart_id: str, body: SelectShippingQuoteRequest) -> StatusResponse:
    command = SelectShippingQuote(
        cart_id=cart_id,
        service_code=body.service_code,
        index=body.index,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Checkout
# ---------------------------------------------------------------------------
@cart_router.get("/{cart_id}/totals", response_model=CheckoutTotalsResponse)
async def get_checkout_totals(
    cart_id: str, payment_surcharge: str | None = None, shipping_insurance: str | None = None
) -> CheckoutTotalsResponse:
    totals = cart_totals(
        _load_cart(cart_id),
        CheckoutOptions(payment_surcharge=payment_surcharge, shipping_insurance=shipping_insurance),
    )
    return CheckoutTotalsResponse(**totals.to_dict())


@cart_router.post("/{cart_id}/checkout", response_model=CheckoutSessionResponse)
async def checkout_cart(cart_id: str, body: CheckoutRequest):
    command = StartCheckout(
        cart_id=cart_id,
        payment_surcharge=body.payment_surcharge,
        shipping_insurance=body.shipping_insurance,
        special_instructions=body.special_instructions,
        customer_email=body.customer_email,
        success_url=body.success_url,
        cancel_url=body.cancel_url,
    )
    result = current_domain.process(command, asynchronous=False)
    if "error" in result:
        return JSONResponse(status_code=502, content={"error": result["error"]})
    return CheckoutSessionResponse(**result)

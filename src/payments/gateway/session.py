"""Checkout session parameter construction.

Translates a ``CheckoutSessionRequest`` into gateway session parameters:
line items priced in integer cents, shipping as its own line, redirect URLs
and order metadata.
"""

import json
import os

from payments.gateway.port import CheckoutSessionRequest, InvalidCheckoutRequest
from shared.money import to_cents

DEFAULT_SITE_URL = "https://unwind-designs.vercel.app"
DEFAULT_CURRENCY = "aud"


def site_url() -> str:
    return os.environ.get("SITE_URL", DEFAULT_SITE_URL).rstrip("/")


def _absolute(image: str, base: str) -> str:
    return f"{base}{image}" if image.startswith("/") else image


def validate_request(request: CheckoutSessionRequest) -> None:
    if not request.items:
        raise InvalidCheckoutRequest("At least one item is required")
    for item in request.items:
        if item.price <= 0 or item.quantity < 1:
            raise InvalidCheckoutRequest(f"Item {item.id} must have a positive price and quantity")
    if request.shipping_cost < 0:
        raise InvalidCheckoutRequest("Shipping cost cannot be negative")


def build_session_params(request: CheckoutSessionRequest, currency: str = DEFAULT_CURRENCY) -> dict:
    validate_request(request)
    base = site_url()

    line_items = [
        {
            "price_data": {
                "currency": currency,
                "product_data": {
                    "name": item.name,
                    "description": item.short_description or item.name,
                    "images": [_absolute(img, base) for img in item.images[:1]],
                },
                "unit_amount": to_cents(item.price),
            },
            "quantity": item.quantity,
        }
        for item in request.items
    ]

    shipping_cents = to_cents(request.shipping_cost)
    if shipping_cents > 0:
        line_items.append(
            {
                "price_data": {
                    "currency": currency,
                    "product_data": {
                        "name": request.shipping_method or "Shipping",
                        "description": "Shipping cost",
                        "images": [],
                    },
                    "unit_amount": shipping_cents,
                },
                "quantity": 1,
            }
        )

    metadata = {
        "source": "unwind-designs-website",
        "items": json.dumps(
            [{"id": item.id, "name": item.name, "price": to_cents(item.price), "quantity": item.quantity} for item in request.items]
        ),
        "shippingCost": str(shipping_cents),
        "shippingMethod": request.shipping_method or "Standard Shipping",
        **{key: str(value) for key, value in request.metadata.items()},
    }
    if request.shipping_address:
        metadata["calculatedShippingAddress"] = json.dumps(request.shipping_address)

    return {
        "payment_method_types": ["card"],
        "mode": "payment",
        "line_items": line_items,
        "customer_email": request.customer_email,
        "success_url": request.success_url or f"{base}/checkout/success?session_id={{CHECKOUT_SESSION_ID}}",
        "cancel_url": request.cancel_url or f"{base}/checkout/cancelled",
        "metadata": metadata,
        "billing_address_collection": "required",
        "shipping_address_collection": {"allowed_countries": ["AU"]},
    }

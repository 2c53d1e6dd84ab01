"""Checkout session: hand a priced cart to the payment gateway.

Checkout is refused until the cart has items and a selected shipping quote.
Gateway failures are converted to an ``{"error": ...}`` value rather than
raised, so the storefront can show a message and leave the cart untouched.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from ordering.cart.cart import ShoppingCart
from ordering.cart.events import CheckoutStarted
from ordering.checkout.totals import CheckoutOptions, CheckoutTotals, cart_totals
from ordering.domain import ordering
from payments.gateway import get_gateway
from payments.gateway.port import CheckoutItem, CheckoutSessionRequest
from shared.money import from_cents

logger = structlog.get_logger(__name__)

GENERIC_CHECKOUT_ERROR = "Failed to create checkout session"


@ordering.command(part_of="ShoppingCart")
class StartCheckout:
    cart_id = Identifier(required=True)
    payment_surcharge = String(max_length=50)
    shipping_insurance = String(max_length=50)
    special_instructions = Text()
    customer_email = String(max_length=255)
    success_url = String(max_length=500)
    cancel_url = String(max_length=500)


def assert_ready_for_checkout(cart: ShoppingCart) -> None:
    if not cart.items:
        raise ValidationError({"cart": ["Cannot check out an empty cart"]})
    if cart.selected_quote is None:
        raise ValidationError({"shipping": ["Please select a shipping option before checking out"]})


def build_checkout_request(cart: ShoppingCart, totals: CheckoutTotals, command: StartCheckout) -> CheckoutSessionRequest:
    items = [
        CheckoutItem(
            id=str(item.product_id),
            name=item.name,
            price=item.unit_price,
            quantity=item.quantity,
            images=(item.image,) if item.image else (),
        )
        for item in cart.items
    ]

    # Surcharge and insurance are charged as their own lines so the hosted
    # checkout total matches the total shown in the cart.
    if totals.surcharge_cents:
        items.append(
            CheckoutItem(
                id="payment-surcharge",
                name=f"Payment surcharge ({command.payment_surcharge})",
                price=from_cents(totals.surcharge_cents),
                quantity=1,
            )
        )
    if totals.insurance_cents:
        items.append(
            CheckoutItem(
                id="shipping-insurance",
                name=f"Shipping insurance ({command.shipping_insurance})",
                price=from_cents(totals.insurance_cents),
                quantity=1,
            )
        )

    address = cart.shipping_address
    metadata = {"cartId": str(cart.id)}
    if command.special_instructions:
        metadata["specialInstructions"] = command.special_instructions[:500]

    return CheckoutSessionRequest(
        items=tuple(items),
        success_url=command.success_url,
        cancel_url=command.cancel_url,
        shipping_cost=cart.selected_quote.price,
        shipping_method=cart.selected_quote.service,
        customer_email=command.customer_email,
        shipping_address={
            "street": address.street,
            "city": address.city,
            "state": address.state,
            "postcode": address.postcode,
            "country": address.country,
        }
        if address
        else None,
        metadata=metadata,
    )


@ordering.command_handler(part_of=ShoppingCart)
class CheckoutHandler:
    @handle(StartCheckout)
    def start_checkout(self, command):
        """Returns ``{"sessionId", "url", "total"}`` on success or ``{"error"}``."""
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)
        assert_ready_for_checkout(cart)

        options = CheckoutOptions(
            payment_surcharge=command.payment_surcharge,
            shipping_insurance=command.shipping_insurance,
            special_instructions=command.special_instructions,
        )
        totals = cart_totals(cart, options)
        log = logger.bind(cart_id=str(cart.id), total_cents=totals.total_cents)

        try:
            result = get_gateway().create_checkout_session(build_checkout_request(cart, totals, command))
        except Exception:
            log.exception("checkout_session_error")
            return {"error": GENERIC_CHECKOUT_ERROR}

        if not result.success:
            log.warning("checkout_session_failed", reason=result.failure_reason)
            return {"error": result.failure_reason or GENERIC_CHECKOUT_ERROR}

        cart.raise_(
            CheckoutStarted(
                cart_id=str(cart.id),
                session_id=result.session_id,
                total=totals.total,
                payment_surcharge=command.payment_surcharge,
                shipping_insurance=command.shipping_insurance,
            )
        )
        repo.add(cart)
        log.info("checkout_session_created", session_id=result.session_id)
        return {**result.to_dict(), "total": totals.total}

"""Tests for the StartCheckout command."""

import pytest
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from ordering.cart.cart import ShoppingCart
from ordering.checkout.session import GENERIC_CHECKOUT_ERROR, StartCheckout, build_checkout_request
from ordering.checkout.totals import CheckoutOptions, cart_totals
from payments.gateway import set_gateway
from payments.gateway.fake_adapter import FakeGateway
from payments.gateway.port import CheckoutGateway


class _ExplodingGateway(CheckoutGateway):
    def create_checkout_session(self, request):
        raise RuntimeError("connection reset")


@pytest.fixture()
def gateway():
    fake = FakeGateway()
    set_gateway(fake)
    return fake


@pytest.fixture()
def priced_cart(quotes):
    cart = ShoppingCart.create(session_id="sess-001")
    cart.add_item("widget", "Widget", 50.0, 2, image="/brand/widget.jpg")
    cart.set_shipping_address("1 Main St", "Sydney", "NSW", "2000")
    cart.record_quotes(quotes)
    current_domain.repository_for(ShoppingCart).add(cart)
    return str(cart.id)


def _checkout(cart_id, **kwargs):
    return current_domain.process(StartCheckout(cart_id=cart_id, **kwargs), asynchronous=False)


class TestStartCheckout:
    def test_returns_session_and_total(self, gateway, priced_cart):
        result = _checkout(priced_cart, payment_surcharge="credit-card")

        assert result["sessionId"].startswith("cs_test_")
        assert result["url"].endswith(result["sessionId"])
        assert result["total"] == 117.5

    def test_surcharge_and_insurance_lines_are_sent(self, gateway, priced_cart):
        _checkout(priced_cart, payment_surcharge="credit-card", shipping_insurance="basic")

        params = gateway.calls[0]["params"]
        names = [line["price_data"]["product_data"]["name"] for line in params["line_items"]]
        assert "Payment surcharge (credit-card)" in names
        assert "Shipping insurance (basic)" in names

    def test_metadata_carries_cart_and_instructions(self, gateway, priced_cart):
        _checkout(priced_cart, special_instructions="Leave at the roller door")

        metadata = gateway.calls[0]["params"]["metadata"]
        assert metadata["cartId"] == priced_cart
        assert metadata["specialInstructions"] == "Leave at the roller door"

    def test_gateway_failure(self, gateway, priced_cart):
        gateway.configure(should_succeed=False, failure_reason="Card network unavailable")
        assert _checkout(priced_cart) == {"error": "Card network unavailable"}

    def test_gateway_exception(self, priced_cart):
        set_gateway(_ExplodingGateway())
        assert _checkout(priced_cart) == {"error": GENERIC_CHECKOUT_ERROR}

    def test_requires_selected_quote(self, gateway):
        cart = ShoppingCart.create()
        cart.add_item("widget", "Widget", 50.0, 1)
        current_domain.repository_for(ShoppingCart).add(cart)

        with pytest.raises(ValidationError) as exc:
            _checkout(str(cart.id))
        assert "shipping" in exc.value.messages
        assert gateway.calls == []

    def test_rejects_empty_cart(self, gateway):
        cart = ShoppingCart.create()
        current_domain.repository_for(ShoppingCart).add(cart)

        with pytest.raises(ValidationError):
            _checkout(str(cart.id))


class TestCheckoutRequest:
    def test_lines_shipping_and_address(self, quotes):
        cart = ShoppingCart.create()
        cart.add_item("widget", "Widget", 50.0, 2)
        cart.set_shipping_address("1 Main St", "Sydney", "NSW", "2000")
        cart.record_quotes(quotes)
        command = StartCheckout(cart_id=str(cart.id), payment_surcharge="paypal")

        request = build_checkout_request(cart, cart_totals(cart, CheckoutOptions(payment_surcharge="paypal")), command)

        assert [item.id for item in request.items] == ["widget", "payment-surcharge"]
        assert request.items[1].price == 3.5
        assert request.shipping_cost == 15.0
        assert request.shipping_method == "Road Express"
        assert request.shipping_address["postcode"] == "2000"

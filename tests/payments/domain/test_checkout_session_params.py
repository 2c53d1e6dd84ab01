"""Tests for hosted checkout session parameter construction."""

import json

import pytest

from payments.gateway.fake_adapter import FakeGateway
from payments.gateway.port import CheckoutItem, CheckoutSessionRequest, InvalidCheckoutRequest
from payments.gateway.session import build_session_params


@pytest.fixture(autouse=True)
def _site_url(monkeypatch):
    monkeypatch.setenv("SITE_URL", "https://shop.example.com/")


def _request(**overrides):
    defaults = {
        "items": (
            CheckoutItem(
                id="shower-outlet",
                name="Hot/Cold Shower Outlet",
                price=89.0,
                quantity=2,
                images=("/brand/shower-outlet.jpg",),
            ),
        ),
        "shipping_cost": 12.0,
        "shipping_method": "Standard Shipping",
    }
    defaults.update(overrides)
    return CheckoutSessionRequest(**defaults)


class TestLineItems:
    def test_prices_in_cents(self):
        params = build_session_params(_request())
        line = params["line_items"][0]
        assert line["price_data"]["unit_amount"] == 8900
        assert line["price_data"]["currency"] == "aud"
        assert line["quantity"] == 2

    def test_relative_images_become_absolute(self):
        line = build_session_params(_request())["line_items"][0]
        assert line["price_data"]["product_data"]["images"] == ["https://shop.example.com/brand/shower-outlet.jpg"]

    def test_shipping_is_its_own_line(self):
        shipping = build_session_params(_request())["line_items"][-1]
        assert shipping["price_data"]["product_data"]["name"] == "Standard Shipping"
        assert shipping["price_data"]["unit_amount"] == 1200
        assert shipping["quantity"] == 1

    def test_free_shipping_adds_no_line(self):
        params = build_session_params(_request(shipping_cost=0.0))
        assert len(params["line_items"]) == 1

    def test_half_cent_rounds_up(self):
        item = CheckoutItem(id="x", name="X", price=10.005, quantity=1)
        assert build_session_params(_request(items=(item,)))["line_items"][0]["price_data"]["unit_amount"] == 1001


class TestMetadataAndUrls:
    def test_default_redirect_urls(self):
        params = build_session_params(_request())
        assert params["success_url"] == "https://shop.example.com/checkout/success?session_id={CHECKOUT_SESSION_ID}"
        assert params["cancel_url"] == "https://shop.example.com/checkout/cancelled"

    def test_metadata(self):
        address = {"street": "1 Main St", "city": "Sydney", "state": "NSW", "postcode": "2000", "country": "AU"}
        params = build_session_params(_request(shipping_address=address, metadata={"cartId": "cart-1"}))
        metadata = params["metadata"]
        assert metadata["shippingCost"] == "1200"
        assert metadata["shippingMethod"] == "Standard Shipping"
        assert metadata["cartId"] == "cart-1"
        assert json.loads(metadata["calculatedShippingAddress"]) == address
        assert json.loads(metadata["items"]) == [
            {"id": "shower-outlet", "name": "Hot/Cold Shower Outlet", "price": 8900, "quantity": 2}
        ]


class TestValidation:
    def test_no_items(self):
        with pytest.raises(InvalidCheckoutRequest):
            build_session_params(_request(items=()))

    def test_zero_price(self):
        with pytest.raises(InvalidCheckoutRequest):
            build_session_params(_request(items=(CheckoutItem(id="x", name="X", price=0, quantity=1),)))


class TestFakeGateway:
    def test_success(self):
        gateway = FakeGateway()
        result = gateway.create_checkout_session(_request())
        assert result.success is True
        assert result.session_id.startswith("cs_test_")
        assert result.url.endswith(result.session_id)
        assert gateway.calls[0]["params"]["line_items"][0]["quantity"] == 2

    def test_configured_failure(self):
        gateway = FakeGateway()
        gateway.configure(should_succeed=False, failure_reason="Card network unavailable")
        result = gateway.create_checkout_session(_request())
        assert result.to_dict() == {"error": "Card network unavailable"}

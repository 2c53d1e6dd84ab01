"""Integration tests for the cart API via TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from ordering.api import cart_router
from payments.gateway import set_gateway
from payments.gateway.fake_adapter import FakeGateway
from shared.errors import register_error_handlers

ADDRESS = {"street": "12 Export Drive", "city": "Brooklyn", "state": "VIC", "postcode": "3012"}


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(cart_router)
    register_error_handlers(app)
    return TestClient(app)


@pytest.fixture()
def cart_id(client):
    response = client.post("/carts", json={"session_id": "sess-001"})
    assert response.status_code == 201
    return response.json()["cart_id"]


def _add(client, cart_id, product_id, quantity=1, **options):
    return client.post(
        f"/carts/{cart_id}/items",
        json={"product_id": product_id, "quantity": quantity, "selected_options": options},
    )


class TestCartItems:
    def test_add_simple_product(self, client, cart_id):
        assert _add(client, cart_id, "shower-outlet", quantity=2).status_code == 200

        data = client.get(f"/carts/{cart_id}").json()
        assert data["item_count"] == 2
        assert data["subtotal"] == 178.0
        assert data["items"][0]["weight"] == 0.8

    def test_add_variant_by_slug(self, client, cart_id):
        response = _add(client, cart_id, "troopy-side-panels-with-storage", Material="black-hex", Bungee="no-bungee")
        assert response.status_code == 200

        item = client.get(f"/carts/{cart_id}").json()["items"][0]
        assert item["product_id"] == "SP-BH-NB"
        assert item["name"] == "Troopy Side Panels with Storage (Black Hex, No Bungee)"
        assert item["unit_price"] == 850.0

    def test_incomplete_variant_selection(self, client, cart_id):
        response = _add(client, cart_id, "troopy-side-panels-with-storage", Material="black-hex")
        assert response.status_code == 400
        assert response.json()["detail"] == "Please select all required options"

    def test_unavailable_variant(self, client, cart_id):
        response = _add(client, cart_id, "cushion-set-troopy-kits", **{"Flat Pack Model": "wander-roam", "Color": "charcoal"})
        assert response.status_code == 400
        assert response.json()["detail"] == "The selected options are not available"

    def test_coming_soon_product(self, client, cart_id):
        response = _add(client, cart_id, "roam-troopy-flat-pack")
        assert response.status_code == 400

    def test_unknown_product(self, client, cart_id):
        assert _add(client, cart_id, "flux-capacitor").status_code == 404

    def test_update_and_remove(self, client, cart_id):
        _add(client, cart_id, "shower-outlet")

        client.put(f"/carts/{cart_id}/items/shower-outlet", json={"quantity": 3})
        assert client.get(f"/carts/{cart_id}").json()["item_count"] == 3

        client.put(f"/carts/{cart_id}/items/shower-outlet", json={"quantity": 0})
        assert client.get(f"/carts/{cart_id}").json()["item_count"] == 3

        client.delete(f"/carts/{cart_id}/items/shower-outlet")
        assert client.get(f"/carts/{cart_id}").json()["items"] == []

    def test_update_unknown_line_is_ignored(self, client, cart_id):
        _add(client, cart_id, "shower-outlet")

        assert client.put(f"/carts/{cart_id}/items/nope", json={"quantity": 3}).status_code == 200
        assert client.get(f"/carts/{cart_id}").json()["item_count"] == 1

    def test_clear(self, client, cart_id):
        _add(client, cart_id, "shower-outlet")
        assert client.delete(f"/carts/{cart_id}/items").status_code == 200
        assert client.get(f"/carts/{cart_id}").json()["item_count"] == 0

    def test_unknown_cart(self, client):
        assert client.get("/carts/does-not-exist").status_code == 404


class TestShippingAndCheckout:
    def test_quotes_need_address(self, client, cart_id):
        _add(client, cart_id, "shower-outlet")
        assert client.post(f"/carts/{cart_id}/shipping-quotes").status_code == 400

    def test_fallback_quotes_and_checkout(self, client, cart_id):
        gateway = FakeGateway()
        set_gateway(gateway)
        _add(client, cart_id, "shower-outlet", quantity=2)
        assert client.put(f"/carts/{cart_id}/shipping-address", json=ADDRESS).status_code == 200

        quotes = client.post(f"/carts/{cart_id}/shipping-quotes", json={}).json()
        assert quotes["selected_quote"]["service"] == "Standard Shipping"
        assert quotes["selected_quote"]["price"] == 12.0
        assert quotes["error"] is None

        totals = client.get(f"/carts/{cart_id}/totals", params={"payment_surcharge": "credit-card"}).json()
        assert totals["total"] == 194.45
        assert totals["display_total"] == "$194.45"

        response = client.post(f"/carts/{cart_id}/checkout", json={"payment_surcharge": "credit-card"})
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 194.45
        assert data["url"].endswith(data["sessionId"])

    def test_select_express(self, client, cart_id):
        _add(client, cart_id, "shower-outlet")
        client.put(f"/carts/{cart_id}/shipping-address", json=ADDRESS)
        client.post(f"/carts/{cart_id}/shipping-quotes")

        assert client.put(f"/carts/{cart_id}/shipping-quote", json={"index": 1}).status_code == 200
        assert client.get(f"/carts/{cart_id}").json()["selected_quote"]["service"] == "Express Shipping"

    def test_select_unknown_quote(self, client, cart_id):
        _add(client, cart_id, "shower-outlet")
        client.put(f"/carts/{cart_id}/shipping-address", json=ADDRESS)
        client.post(f"/carts/{cart_id}/shipping-quotes")

        response = client.put(f"/carts/{cart_id}/shipping-quote", json={"service_code": "NOPE"})
        assert response.status_code == 400
        assert response.json()["error"] == "Shipping quote not found for this cart"

    def test_checkout_without_quote(self, client, cart_id):
        _add(client, cart_id, "shower-outlet")
        response = client.post(f"/carts/{cart_id}/checkout", json={})
        assert response.status_code == 400
        assert response.json()["error"] == "Please select a shipping option before checking out"

    def test_changing_items_needs_new_quote(self, client, cart_id):
        _add(client, cart_id, "shower-outlet")
        client.put(f"/carts/{cart_id}/shipping-address", json=ADDRESS)
        client.post(f"/carts/{cart_id}/shipping-quotes")
        client.put(f"/carts/{cart_id}/items/shower-outlet", json={"quantity": 4})

        assert client.get(f"/carts/{cart_id}").json()["selected_quote"] is None
        response = client.post(f"/carts/{cart_id}/checkout", json={})
        assert response.status_code == 400
        assert response.json()["error"] == "Please select a shipping option before checking out"

    def test_gateway_failure(self, client, cart_id):
        gateway = FakeGateway()
        gateway.configure(should_succeed=False)
        set_gateway(gateway)
        _add(client, cart_id, "shower-outlet")
        client.put(f"/carts/{cart_id}/shipping-address", json=ADDRESS)
        client.post(f"/carts/{cart_id}/shipping-quotes")

        response = client.post(f"/carts/{cart_id}/checkout", json={})
        assert response.status_code == 502
        assert response.json() == {"error": "Failed to create checkout session"}

"""Shared BDD fixtures and step definitions for the cart."""

import pytest
from pytest_bdd import given, parsers

from ordering.cart.cart import ShoppingCart


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@given("an empty cart", target_fixture="cart")
def empty_cart():
    return ShoppingCart.create(session_id="sess-bdd")


@given(parsers.cfparse('the customer adds {quantity:d} of "{product_id}" at {price:f}'))
def given_item_added(cart, quantity, product_id, price):
    cart.add_item(product_id, product_id.title(), price, quantity)


@given(parsers.cfparse('a delivery address in "{state}"'))
def delivery_address(cart, state):
    cart.set_shipping_address("1 Main St", "Springfield", state, "2000")

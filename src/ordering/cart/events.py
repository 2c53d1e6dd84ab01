"""Domain events for the ShoppingCart aggregate."""

from protean.fields import Float, Identifier, Integer, String

from ordering.domain import ordering


@ordering.event(part_of="ShoppingCart")
class CartItemAdded:
    """A product was added to the shopping cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = String(required=True)
    quantity = Integer(required=True)
    unit_price = Float(required=True)


@ordering.event(part_of="ShoppingCart")
class CartQuantityUpdated:
    """The quantity of a cart item was changed."""

    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = String(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@ordering.event(part_of="ShoppingCart")
class CartItemRemoved:
    """An item was removed from the shopping cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = String(required=True)


@ordering.event(part_of="ShoppingCart")
class CartCleared:
    """Every item was removed from the cart."""

    __version__ = 1

    cart_id = Identifier(required=True)


@ordering.event(part_of="ShoppingCart")
class ShippingAddressSet:
    """The delivery address changed; earlier quotes no longer apply."""

    __version__ = 1

    cart_id = Identifier(required=True)
    city = String(required=True)
    state = String(required=True)
    postcode = String(required=True)
    country = String()


@ordering.event(part_of="ShoppingCart")
class ShippingQuotesReceived:
    """Quotes arrived for the current address."""

    __version__ = 1

    cart_id = Identifier(required=True)
    quote_count = Integer(required=True)
    selected_service = String()


@ordering.event(part_of="ShoppingCart")
class ShippingQuoteFailed:
    """The quote request failed; the cart has no quotes."""

    __version__ = 1

    cart_id = Identifier(required=True)
    error = String(required=True)
    error_code = String()


@ordering.event(part_of="ShoppingCart")
class ShippingQuoteSelected:
    """The customer chose a shipping service."""

    __version__ = 1

    cart_id = Identifier(required=True)
    service = String(required=True)
    price = Float(required=True)
    carrier = String()


@ordering.event(part_of="ShoppingCart")
class CheckoutStarted:
    """A hosted checkout session was created for the cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    session_id = String(required=True)
    total = Float(required=True)
    payment_surcharge = String()
    shipping_insurance = String()

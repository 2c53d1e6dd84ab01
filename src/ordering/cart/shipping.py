"""Cart shipping: delivery address, quote requests and quote selection.

``RequestShippingQuotes`` is the only cart operation that performs network
I/O. Quote failures never raise out of the handler: they are recorded on the
cart as ``shipping_error`` for the storefront to display.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Identifier, Integer, String
from protean.utils.globals import current_domain

from fulfillment.quotes.models import DeliveryAddress, QuoteItem, QuoteOptions
from fulfillment.quotes.service import get_quotes_for_cart
from ordering.cart.cart import ShoppingCart
from ordering.domain import ordering

logger = structlog.get_logger(__name__)


@ordering.command(part_of="ShoppingCart")
class SetShippingAddress:
    cart_id = Identifier(required=True)
    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=50)
    postcode = String(required=True, max_length=10)
    country = String(max_length=50, default="AU")


@ordering.command(part_of="ShoppingCart")
class RequestShippingQuotes:
    cart_id = Identifier(required=True)
    buyer_is_business = Boolean()
    buyer_has_forklift = Boolean()


@ordering.command(part_of="ShoppingCart")
class SelectShippingQuote:
    """Select one of the cart's current quotes by service code or by position."""

    cart_id = Identifier(required=True)
    service_code = String(max_length=100)
    index = Integer(min_value=0)


def quote_items_for(cart: ShoppingCart) -> list[QuoteItem]:
    return [
        QuoteItem(
            name=item.name,
            quantity=item.quantity,
            price=item.unit_price,
            weight=item.weight,
            length=item.length,
            width=item.width,
            height=item.height,
            ship_class=item.ship_class or "standard",
        )
        for item in cart.items
    ]


def delivery_address_for(cart: ShoppingCart) -> DeliveryAddress:
    address = cart.shipping_address
    return DeliveryAddress(
        street=address.street,
        city=address.city,
        state=address.state,
        postcode=address.postcode,
        country=address.country or "AU",
    )


@ordering.command_handler(part_of=ShoppingCart)
class CartShippingHandler:
    @handle(SetShippingAddress)
    def set_shipping_address(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)
        cart.set_shipping_address(
            street=command.street,
            city=command.city,
            state=command.state,
            postcode=command.postcode,
            country=command.country,
        )
        repo.add(cart)

    @handle(RequestShippingQuotes)
    def request_shipping_quotes(self, command):
        """Fetch quotes for the cart's address and items.

        Returns the quote list (empty on failure), or None when the cart has
        no address or no items yet.
        """
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)
        if not cart.can_request_quotes:
            return None

        cart.begin_quote_request()
        result = get_quotes_for_cart(
            delivery_address_for(cart),
            quote_items_for(cart),
            cart.subtotal,
            QuoteOptions(
                buyer_is_business=command.buyer_is_business,
                buyer_has_forklift=command.buyer_has_forklift,
            ),
        )

        if result.success:
            quotes = [quote.to_dict() for quote in result.quotes]
            cart.record_quotes(quotes)
        else:
            logger.info("cart_quote_failed", cart_id=str(cart.id), error_code=result.error_code)
            quotes = []
            cart.record_quote_error(result.error, result.error_code)

        repo.add(cart)
        return quotes

    @handle(SelectShippingQuote)
    def select_shipping_quote(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)
        quotes = cart.quotes

        if command.service_code:
            quote = next((q for q in quotes if q.get("service_code") == command.service_code), None)
        elif command.index is not None and command.index < len(quotes):
            quote = quotes[command.index]
        else:
            quote = None

        if quote is None:
            raise ValidationError({"quote": ["Shipping quote not found for this cart"]})

        cart.select_shipping_quote(quote)
        repo.add(cart)

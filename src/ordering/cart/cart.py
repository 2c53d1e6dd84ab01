"""Shopping Cart aggregate: line items, delivery address and shipping quote.

The cart is a standard CQRS aggregate (not event sourced). It owns the line
items the customer has chosen, the delivery address, the list of shipping
quotes returned for that address, and the single selected quote.

Totals are never stored: ``item_count``, ``subtotal`` and ``total`` are
recomputed from the line items (and selected quote) on every read, in
integer cents.
"""

import json
from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, HasMany, Integer, String, Text, ValueObject

from ordering.cart.events import (
    CartCleared,
    CartItemAdded,
    CartItemRemoved,
    CartQuantityUpdated,
    ShippingAddressSet,
    ShippingQuoteFailed,
    ShippingQuoteSelected,
    ShippingQuotesReceived,
)
from ordering.domain import ordering
from shared.money import from_cents, to_cents


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@ordering.value_object(part_of="ShoppingCart")
class ShippingAddress:
    """Where the cart will be delivered. All four locality fields are required."""

    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=50)
    postcode = String(required=True, max_length=10)
    country = String(max_length=50, default="AU")

    @property
    def is_complete(self) -> bool:
        return all((self.street, self.city, self.state, self.postcode))


@ordering.value_object(part_of="ShoppingCart")
class ShippingQuote:
    """A carrier-priced delivery option for the cart's current address."""

    service = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    delivery_days = Integer(default=5)
    carrier = String(max_length=255)
    description = String(max_length=500)
    authority_to_leave = Boolean(default=False)
    restrictions = Text()  # JSON array of strings
    source = String(max_length=20, default="bigpost")
    service_code = String(max_length=100)
    carrier_id = String(max_length=100)

    @classmethod
    def from_dict(cls, data: dict) -> "ShippingQuote":
        return cls(
            service=data["service"],
            price=data["price"],
            delivery_days=data.get("delivery_days", 5),
            carrier=data.get("carrier"),
            description=data.get("description") or None,
            authority_to_leave=bool(data.get("authority_to_leave", False)),
            restrictions=json.dumps(list(data.get("restrictions") or [])),
            source=data.get("source", "bigpost"),
            service_code=data.get("service_code"),
            carrier_id=data.get("carrier_id"),
        )

    def to_dict(self) -> dict:
        return {
            "service": self.service,
            "price": self.price,
            "delivery_days": self.delivery_days,
            "carrier": self.carrier,
            "description": self.description or "",
            "authority_to_leave": bool(self.authority_to_leave),
            "restrictions": json.loads(self.restrictions) if self.restrictions else [],
            "source": self.source,
            "service_code": self.service_code,
            "carrier_id": self.carrier_id,
        }


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="ShoppingCart")
class CartItem:
    """One cart line. ``product_id`` is the product id, or the variant id for configured products."""

    product_id = String(required=True, max_length=255)
    name = String(required=True, max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    image = String(max_length=500)
    weight = Float()
    length = Float()
    width = Float()
    height = Float()
    ship_class = String(max_length=20, default="standard")
    added_at = DateTime()

    @property
    def line_total_cents(self) -> int:
        return to_cents(self.unit_price) * self.quantity


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class ShoppingCart:
    session_id = String(max_length=255)  # Browser session that owns the cart
    items = HasMany(CartItem)
    shipping_address = ValueObject(ShippingAddress)
    shipping_quotes = Text()  # JSON array of quote dicts for the current address
    selected_quote = ValueObject(ShippingQuote)
    quotes_loading = Boolean(default=False)
    shipping_error = String(max_length=500)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, session_id=None):
        now = datetime.now(UTC)
        return cls(
            session_id=session_id,
            shipping_quotes=json.dumps([]),
            quotes_loading=False,
            created_at=now,
            updated_at=now,
        )

    # -------------------------------------------------------------------
    # Derived totals
    # -------------------------------------------------------------------
    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def subtotal_cents(self) -> int:
        return sum(item.line_total_cents for item in self.items)

    @property
    def shipping_cents(self) -> int:
        return to_cents(self.selected_quote.price) if self.selected_quote else 0

    @property
    def total_cents(self) -> int:
        return self.subtotal_cents + self.shipping_cents

    @property
    def subtotal(self) -> float:
        return from_cents(self.subtotal_cents)

    @property
    def total(self) -> float:
        return from_cents(self.total_cents)

    @property
    def quotes(self) -> list[dict]:
        return json.loads(self.shipping_quotes) if self.shipping_quotes else []

    def find_item(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def _touch(self):
        self.updated_at = datetime.now(UTC)

    def _discard_quotes(self):
        self.shipping_quotes = json.dumps([])
        self.selected_quote = None
        self.shipping_error = None

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(
        self,
        product_id,
        name,
        unit_price,
        quantity=1,
        image=None,
        weight=None,
        length=None,
        width=None,
        height=None,
        ship_class="standard",
    ):
        """Add a line to the cart, or increase the quantity of an existing line.

        Any quotes priced for the previous contents are discarded.
        """
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        existing = self.find_item(product_id)
        if existing:
            existing.quantity += quantity
        else:
            self.add_items(
                CartItem(
                    product_id=product_id,
                    name=name,
                    unit_price=unit_price,
                    quantity=quantity,
                    image=image,
                    weight=weight,
                    length=length,
                    width=width,
                    height=height,
                    ship_class=ship_class or "standard",
                    added_at=datetime.now(UTC),
                )
            )

        self._discard_quotes()
        self._touch()
        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                product_id=str(product_id),
                quantity=quantity,
                unit_price=unit_price,
            )
        )

    def update_quantity(self, product_id, quantity):
        """Set a line's quantity exactly. Quantities below 1 and unknown ids are ignored."""
        if quantity is None or quantity < 1:
            return

        item = self.find_item(product_id)
        if item is None:
            return

        previous_quantity = item.quantity
        if previous_quantity == quantity:
            return

        item.quantity = quantity
        self._discard_quotes()
        self._touch()
        self.raise_(
            CartQuantityUpdated(
                cart_id=str(self.id),
                product_id=str(product_id),
                previous_quantity=previous_quantity,
                new_quantity=quantity,
            )
        )

    def remove_item(self, product_id):
        """Remove a line from the cart. Unknown ids are ignored."""
        item = self.find_item(product_id)
        if item is None:
            return

        self.remove_items(item)
        self._discard_quotes()
        self._touch()
        self.raise_(CartItemRemoved(cart_id=str(self.id), product_id=str(product_id)))

    def clear(self):
        """Empty the cart and forget any quotes priced for its contents."""
        for item in list(self.items):
            self.remove_items(item)
        self._discard_quotes()
        self.quotes_loading = False
        self._touch()
        self.raise_(CartCleared(cart_id=str(self.id)))

    # -------------------------------------------------------------------
    # Shipping
    # -------------------------------------------------------------------
    def set_shipping_address(self, street, city, state, postcode, country="AU"):
        """Replace the delivery address. Quotes for the old address are discarded."""
        self.shipping_address = ShippingAddress(
            street=street,
            city=city,
            state=state,
            postcode=postcode,
            country=country or "AU",
        )
        self._discard_quotes()
        self._touch()
        self.raise_(
            ShippingAddressSet(
                cart_id=str(self.id),
                city=city,
                state=state,
                postcode=postcode,
                country=country or "AU",
            )
        )

    @property
    def can_request_quotes(self) -> bool:
        return self.shipping_address is not None and self.shipping_address.is_complete and bool(self.items)

    def begin_quote_request(self):
        if not self.can_request_quotes:
            raise ValidationError({"shipping": ["A delivery address and at least one item are required for a quote"]})
        self.quotes_loading = True
        self.shipping_error = None

    def record_quotes(self, quotes: list[dict]):
        """Store a fresh quote list. The first (cheapest) quote becomes the selection."""
        self.shipping_quotes = json.dumps(quotes)
        self.selected_quote = ShippingQuote.from_dict(quotes[0]) if quotes else None
        self.quotes_loading = False
        self.shipping_error = None
        self._touch()
        self.raise_(
            ShippingQuotesReceived(
                cart_id=str(self.id),
                quote_count=len(quotes),
                selected_service=quotes[0]["service"] if quotes else None,
            )
        )

    def record_quote_error(self, message, error_code=None):
        self.shipping_quotes = json.dumps([])
        self.selected_quote = None
        self.quotes_loading = False
        self.shipping_error = (message or "Unable to get shipping quotes")[:500]
        self._touch()
        self.raise_(
            ShippingQuoteFailed(
                cart_id=str(self.id),
                error=self.shipping_error,
                error_code=error_code,
            )
        )

    def select_shipping_quote(self, quote):
        """Make ``quote`` the selected quote, replacing any earlier selection."""
        if isinstance(quote, dict):
            quote = ShippingQuote.from_dict(quote)
        self.selected_quote = quote
        self._touch()
        self.raise_(
            ShippingQuoteSelected(
                cart_id=str(self.id),
                service=quote.service,
                price=quote.price,
                carrier=quote.carrier,
            )
        )

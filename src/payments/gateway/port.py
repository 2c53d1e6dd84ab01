"""Checkout gateway port (abstract interface).

Defines the contract for hosted-checkout payment providers. The storefront
never handles card data: it creates a checkout session and redirects the
customer to the URL the gateway returns.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CheckoutItem:
    id: str
    name: str
    price: float
    quantity: int
    short_description: str | None = None
    images: tuple[str, ...] = ()


@dataclass(frozen=True)
class CheckoutSessionRequest:
    items: tuple[CheckoutItem, ...]
    success_url: str | None = None
    cancel_url: str | None = None
    shipping_cost: float = 0.0
    shipping_method: str | None = None
    customer_email: str | None = None
    shipping_address: dict | None = None
    metadata: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """The request body shape the storefront posts to the checkout endpoint."""
        return {
            "items": [
                {
                    "id": item.id,
                    "name": item.name,
                    "price": item.price,
                    "quantity": item.quantity,
                    "shortDescription": item.short_description,
                    "images": list(item.images),
                }
                for item in self.items
            ],
            "successUrl": self.success_url,
            "cancelUrl": self.cancel_url,
            "shippingCost": self.shipping_cost,
            "shippingMethod": self.shipping_method,
        }


@dataclass(frozen=True)
class CheckoutSessionResult:
    """Result of a checkout session creation attempt."""

    success: bool
    session_id: str | None = None
    url: str | None = None
    failure_reason: str | None = None

    def to_dict(self) -> dict:
        if self.success:
            return {"sessionId": self.session_id, "url": self.url}
        return {"error": self.failure_reason}


class InvalidCheckoutRequest(ValueError):
    """The session request cannot be sent to the gateway as-is."""


class CheckoutGateway(ABC):
    """Abstract hosted-checkout gateway interface."""

    @abstractmethod
    def create_checkout_session(self, request: CheckoutSessionRequest) -> CheckoutSessionResult:
        """Create a hosted checkout session for ``request``."""
        ...

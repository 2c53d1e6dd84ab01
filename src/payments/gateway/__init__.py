"""Checkout gateway factory.

Provides get_gateway() / set_gateway() to swap implementations. FakeGateway
is the default for development and testing.
"""

from payments.gateway.fake_adapter import FakeGateway
from payments.gateway.port import CheckoutGateway

_current_gateway: CheckoutGateway | None = None


def get_gateway() -> CheckoutGateway:
    """Return the current checkout gateway. Defaults to FakeGateway."""
    global _current_gateway
    if _current_gateway is None:
        _current_gateway = FakeGateway()
    return _current_gateway


def set_gateway(gateway: CheckoutGateway) -> None:
    """Override the active checkout gateway (useful for tests)."""
    global _current_gateway
    _current_gateway = gateway


def reset_gateway() -> None:
    """Reset to default gateway."""
    global _current_gateway
    _current_gateway = None

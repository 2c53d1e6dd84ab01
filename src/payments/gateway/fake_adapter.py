"""Configurable fake checkout gateway for development and testing.

Builds the same session parameters a real gateway would receive, records
them, and returns a deterministic hosted-checkout URL. It can be configured
at runtime to fail, making it useful for:
- Automated tests with predictable outcomes
- Development without real gateway credentials
"""

from uuid import uuid4

from payments.gateway.port import CheckoutGateway, CheckoutSessionRequest, CheckoutSessionResult
from payments.gateway.session import build_session_params


class FakeGateway(CheckoutGateway):
    """Configurable fake checkout gateway."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Failed to create checkout session"
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Failed to create checkout session") -> None:
        """Configure gateway behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def create_checkout_session(self, request: CheckoutSessionRequest) -> CheckoutSessionResult:
        params = build_session_params(request)
        self.calls.append({"method": "create_checkout_session", "params": params})

        if not self.should_succeed:
            return CheckoutSessionResult(success=False, failure_reason=self.failure_reason)

        session_id = f"cs_test_{uuid4().hex[:24]}"
        return CheckoutSessionResult(
            success=True,
            session_id=session_id,
            url=f"https://checkout.fake-gateway.example.com/c/pay/{session_id}",
        )

"""Checkout total computation.

Pure functions over integer cents. The payment-method surcharge applies to the
item subtotal only; shipping and insurance are never surcharged.
"""

from dataclasses import dataclass

from shared.money import format_cents, from_cents, percent_of, to_cents

SURCHARGE_BASIS_POINTS = {
    "credit-card": 250,
    "paypal": 350,
}

INSURANCE_TIERS_CENTS = {
    "basic": 5000,
    "standard": 11900,
    "premium": 25000,
}


@dataclass(frozen=True)
class CheckoutOptions:
    payment_surcharge: str | None = None
    shipping_insurance: str | None = None
    special_instructions: str | None = None


@dataclass(frozen=True)
class CheckoutTotals:
    subtotal_cents: int
    shipping_cents: int
    surcharge_cents: int = 0
    insurance_cents: int = 0

    @property
    def total_cents(self) -> int:
        return self.subtotal_cents + self.shipping_cents + self.surcharge_cents + self.insurance_cents

    @property
    def total(self) -> float:
        return from_cents(self.total_cents)

    @property
    def display_total(self) -> str:
        return format_cents(self.total_cents)

    def to_dict(self) -> dict:
        return {
            "subtotal": from_cents(self.subtotal_cents),
            "shipping": from_cents(self.shipping_cents),
            "surcharge": from_cents(self.surcharge_cents),
            "insurance": from_cents(self.insurance_cents),
            "total": self.total,
            "display_total": self.display_total,
        }


def surcharge_cents(subtotal_cents: int, payment_surcharge: str | None) -> int:
    return percent_of(subtotal_cents, SURCHARGE_BASIS_POINTS.get(payment_surcharge or "", 0))


def insurance_cents(shipping_insurance: str | None) -> int:
    return INSURANCE_TIERS_CENTS.get(shipping_insurance or "", 0)


def calculate_checkout_total(
    subtotal_cents: int,
    shipping_cents: int = 0,
    options: CheckoutOptions | None = None,
) -> CheckoutTotals:
    options = options or CheckoutOptions()
    return CheckoutTotals(
        subtotal_cents=subtotal_cents,
        shipping_cents=shipping_cents,
        surcharge_cents=surcharge_cents(subtotal_cents, options.payment_surcharge),
        insurance_cents=insurance_cents(options.shipping_insurance),
    )


def calculate_checkout_total_for_amounts(subtotal: float, shipping: float = 0.0, options: CheckoutOptions | None = None) -> CheckoutTotals:
    """Dollar-denominated entry point, e.g. ``(100, 10, credit-card)`` totals $112.50."""
    return calculate_checkout_total(to_cents(subtotal), to_cents(shipping), options)


def cart_totals(cart, options: CheckoutOptions | None = None) -> CheckoutTotals:
    """Totals for a ShoppingCart; shipping is the selected quote's price, or 0."""
    return calculate_checkout_total(cart.subtotal_cents, cart.shipping_cents, options)

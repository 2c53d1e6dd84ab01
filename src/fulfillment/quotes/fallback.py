"""Approximate shipping rates used when no carrier credential is configured.

A small rule table keyed on destination state and total weight. Prices are
estimates, good enough for development and for keeping checkout
usable while the carrier integration is switched off.
"""

from fulfillment.quotes.address import REMOTE_STATES, normalize_state
from fulfillment.quotes.models import DeliveryAddress, Quote, QuoteItem

FREE_WEIGHT_KG = 5.0
HEAVY_ITEM_KG = 30.0

DOMESTIC_SERVICES = (
    # service, base, remote base, days, remote days
    ("Standard Shipping", 12.00, 25.00, 3, 7),
    ("Express Shipping", 27.00, 40.00, 1, 3),
)
DOMESTIC_WEIGHT_RATE = 1.5
DOMESTIC_WEIGHT_SURCHARGE_CAP = 20.00

INTERNATIONAL_BASE = 35.00
INTERNATIONAL_WEIGHT_RATE = 2.0
INTERNATIONAL_DAYS = 14
INTERNATIONAL_RESTRICTIONS = ("Subject to customs duties", "Delivery times may vary")
HEAVY_ITEM_RESTRICTION = "Heavy items may require special handling"


def total_weight(items: list[QuoteItem]) -> float:
    return sum(item.effective_weight * item.quantity for item in items)


def _overweight(weight: float) -> float:
    return max(0.0, weight - FREE_WEIGHT_KG)


def fallback_quotes(address: DeliveryAddress, items: list[QuoteItem]) -> list[Quote]:
    weight = total_weight(items)

    if not address.is_domestic:
        return [
            Quote(
                service="International Shipping",
                price=round(INTERNATIONAL_BASE + _overweight(weight) * INTERNATIONAL_WEIGHT_RATE, 2),
                delivery_days=INTERNATIONAL_DAYS,
                carrier="Australia Post",
                description=f"International delivery to {address.country}",
                restrictions=INTERNATIONAL_RESTRICTIONS,
                source="fallback",
                service_code="FALLBACK-INTL",
            )
        ]

    state = normalize_state(address.state) or address.state
    remote = state in REMOTE_STATES
    surcharge = min(_overweight(weight) * DOMESTIC_WEIGHT_RATE, DOMESTIC_WEIGHT_SURCHARGE_CAP)
    restrictions = (HEAVY_ITEM_RESTRICTION,) if weight > HEAVY_ITEM_KG else ()

    quotes = []
    for service, base, remote_base, days, remote_days in DOMESTIC_SERVICES:
        speed = service.split()[0]
        quotes.append(
            Quote(
                service=service,
                price=round((remote_base if remote else base) + surcharge, 2),
                delivery_days=remote_days if remote else days,
                carrier="Australia Post",
                description=f"{speed} delivery to {state}",
                authority_to_leave=True,
                restrictions=restrictions,
                source="fallback",
                service_code=f"FALLBACK-{speed.upper()}",
            )
        )
    return quotes

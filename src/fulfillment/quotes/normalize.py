"""Carrier response normalisation.

Carriers (and older BigPost API versions) disagree on field names. Every
spelling we have seen is coalesced here so nothing downstream has to care.
"""

import json

import structlog

from fulfillment.quotes.models import Quote

logger = structlog.get_logger(__name__)

DEFAULT_DELIVERY_DAYS = 5
DEFAULT_CARRIER = "Carrier"
DEFAULT_SERVICE = "Standard Shipping"

_SERVICE_KEYS = ("ServiceName", "serviceName", "service", "Service")
_PRICE_KEYS = ("Total", "TotalPrice", "totalPrice", "Price", "price", "total")
_DAYS_KEYS = ("EstimatedDeliveryDays", "estimatedDeliveryDays", "deliveryDays", "DeliveryDays", "delivery_days")
_CARRIER_KEYS = ("CarrierName", "carrierName", "carrier", "Carrier")
_DESCRIPTION_KEYS = ("Description", "description")
_ATL_KEYS = ("AuthorityToLeave", "authorityToLeave", "authority_to_leave")
_RESTRICTION_KEYS = ("Restrictions", "restrictions")
_SERVICE_CODE_KEYS = ("ServiceCode", "serviceCode", "service_code")
_CARRIER_ID_KEYS = ("CarrierId", "carrierId", "carrier_id")


def _coalesce(raw: dict, keys, default=None):
    for key in keys:
        value = raw.get(key)
        if value is not None and value != "":
            return value
    return default


def _as_float(value) -> float | None:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _as_int(value, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _as_restrictions(value) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            return (value,)
    if isinstance(value, (list, tuple)):
        return tuple(str(v) for v in value)
    return (str(value),)


def normalize_quote(raw: dict, source: str = "bigpost") -> Quote | None:
    """Map one raw quote onto ``Quote``; None if it carries no usable price."""
    if not isinstance(raw, dict):
        return None

    price = _as_float(_coalesce(raw, _PRICE_KEYS))
    if price is None or price < 0:
        logger.debug("carrier_quote_dropped", reason="no_price", quote=raw)
        return None

    service_code = _coalesce(raw, _SERVICE_CODE_KEYS)
    carrier_id = _coalesce(raw, _CARRIER_ID_KEYS)
    return Quote(
        service=str(_coalesce(raw, _SERVICE_KEYS, service_code or DEFAULT_SERVICE)),
        price=round(price, 2),
        delivery_days=_as_int(_coalesce(raw, _DAYS_KEYS), DEFAULT_DELIVERY_DAYS),
        carrier=str(_coalesce(raw, _CARRIER_KEYS, DEFAULT_CARRIER)),
        description=str(_coalesce(raw, _DESCRIPTION_KEYS, "")),
        authority_to_leave=bool(_coalesce(raw, _ATL_KEYS, False)),
        restrictions=_as_restrictions(_coalesce(raw, _RESTRICTION_KEYS)),
        source=source,
        service_code=str(service_code) if service_code is not None else None,
        carrier_id=str(carrier_id) if carrier_id is not None else None,
    )


def normalize_quotes(response, source: str = "bigpost") -> list[Quote]:
    """Extract and normalise the quote list from a carrier response, cheapest first."""
    if isinstance(response, list):
        raw_quotes = response
    elif isinstance(response, dict):
        raw_quotes = _coalesce(response, ("Quotes", "quotes", "Results", "results"), [])
    else:
        raw_quotes = []

    quotes = [q for q in (normalize_quote(raw, source) for raw in raw_quotes) if q is not None]
    return sorted(quotes, key=lambda q: (q.price, q.delivery_days))

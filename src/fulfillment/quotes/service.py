"""Shipping quote service.

Composes the carrier request, calls the configured carrier and normalises the
answer. Every failure is returned as a ``QuoteResult`` value; nothing raised
by the carrier escapes this module.
"""

import pydantic
import structlog

from fulfillment.carrier import get_carrier
from fulfillment.carrier.errors import CarrierError
from fulfillment.quotes.address import missing_fields, normalize_address, normalize_state, validate_address
from fulfillment.quotes.fallback import fallback_quotes
from fulfillment.quotes.models import DeliveryAddress, QuoteItem, QuoteOptions, QuoteResult, SuburbSuggestion
from fulfillment.quotes.normalize import normalize_quotes
from fulfillment.quotes.request import build_quote_request

logger = structlog.get_logger(__name__)

MIN_SUBURB_QUERY_LENGTH = 2

# Used for suburb autocomplete when the carrier is not configured
COMMON_LOCALITIES = (
    ("BROOKLYN", "3012", "VIC"),
    ("MELBOURNE", "3000", "VIC"),
    ("GEELONG", "3220", "VIC"),
    ("SYDNEY", "2000", "NSW"),
    ("NEWCASTLE", "2300", "NSW"),
    ("BRISBANE", "4000", "QLD"),
    ("CAIRNS", "4870", "QLD"),
    ("ADELAIDE", "5000", "SA"),
    ("PERTH", "6000", "WA"),
    ("BROOME", "6725", "WA"),
    ("HOBART", "7000", "TAS"),
    ("DARWIN", "0800", "NT"),
    ("CANBERRA", "2600", "ACT"),
)


def _fallback_result(address: DeliveryAddress, items: list[QuoteItem]) -> QuoteResult:
    return QuoteResult(success=True, quotes=fallback_quotes(address, items), fallback_used=True)


def _validation_details(exc: pydantic.ValidationError) -> list[str]:
    return [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()]


def _incomplete_address(errors: dict[str, list[str]]) -> QuoteResult:
    return QuoteResult.failure(
        "Please complete your delivery address",
        "VALIDATION_ERROR",
        details=[msg for messages in errors.values() for msg in messages],
    )


def get_quotes_for_cart(
    address: DeliveryAddress,
    items: list[QuoteItem],
    total_value: float,
    options: QuoteOptions | None = None,
) -> QuoteResult:
    """Quote delivery of ``items`` to ``address``.

    Without a configured carrier credential the fallback rate table answers
    and the result is always successful. Carrier failures come back as
    ``success=False`` with an ``error_code``, unless ``options.fallback_on_error``
    asks for fallback rates instead.
    """
    options = options or QuoteOptions()
    log = logger.bind(state=address.state, postcode=address.postcode, items=len(items), total_value=total_value)

    carrier = get_carrier()
    live = carrier.is_configured and address.is_domestic

    # The rate table only needs the four fields present; formats matter to the carrier.
    errors = validate_address(address) if live else missing_fields(address)
    if errors:
        log.info("shipping_quote_address_invalid", errors=errors)
        return _incomplete_address(errors)

    address = normalize_address(address)

    if not live:
        log.info("shipping_quote_fallback", reason="carrier_not_configured" if address.is_domestic else "international")
        return _fallback_result(address, items)

    if not items:
        return QuoteResult.failure("At least one item is required", "VALIDATION_ERROR")

    try:
        request = build_quote_request(address, items, options)
    except pydantic.ValidationError as e:
        log.info("shipping_quote_request_invalid", errors=e.error_count())
        return QuoteResult.failure("Invalid shipping request", "VALIDATION_ERROR", details=_validation_details(e))

    try:
        response = carrier.get_quote(request.to_payload())
    except CarrierError as e:
        log.warning("shipping_quote_carrier_error", error_code=e.error_code, error=e.message)
        if options.fallback_on_error:
            return _fallback_result(address, items)
        return QuoteResult.failure(e.message, e.error_code, details=e.details)

    quotes = normalize_quotes(response)
    if not quotes:
        message = response.get("ErrorMessage") if isinstance(response, dict) else None
        log.warning("shipping_quote_empty", carrier_message=message)
        if options.fallback_on_error:
            return _fallback_result(address, items)
        return QuoteResult.failure(message or "No shipping options available for this address", "NO_QUOTES")

    log.info("shipping_quote_received", quotes=len(quotes))
    return QuoteResult(success=True, quotes=quotes)


def _to_suggestion(raw: dict) -> SuburbSuggestion | None:
    suburb = raw.get("Suburb") or raw.get("suburb")
    postcode = raw.get("Postcode") or raw.get("postcode")
    state = raw.get("State") or raw.get("state")
    if not (suburb and postcode and state):
        return None
    locality_id = raw.get("Id") or raw.get("id")
    return SuburbSuggestion(
        suburb=str(suburb),
        postcode=str(postcode),
        state=str(state),
        locality_id=int(locality_id) if locality_id is not None else None,
    )


def search_suburbs(query: str, state: str | None = None) -> list[SuburbSuggestion]:
    """Autocomplete localities by suburb name or postcode.

    Queries shorter than two characters return nothing. Carrier failures are
    logged and yield an empty list.
    """
    query = (query or "").strip()
    if len(query) < MIN_SUBURB_QUERY_LENGTH:
        return []
    state = normalize_state(state) if state else None

    carrier = get_carrier()
    if not carrier.is_configured:
        needle = query.upper()
        return [
            SuburbSuggestion(suburb=suburb, postcode=postcode, state=loc_state)
            for suburb, postcode, loc_state in COMMON_LOCALITIES
            if (suburb.startswith(needle) or postcode.startswith(needle)) and (state is None or loc_state == state)
        ]

    try:
        raw_results = carrier.search_suburbs(query, state)
    except CarrierError as e:
        logger.warning("suburb_search_failed", query=query, error_code=e.error_code, error=e.message)
        return []

    return [s for s in (_to_suggestion(raw) for raw in raw_results if isinstance(raw, dict)) if s is not None]

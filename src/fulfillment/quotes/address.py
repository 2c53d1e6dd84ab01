"""Australian delivery address validation and normalisation."""

import re

from fulfillment.quotes.models import DeliveryAddress

STREET_MAX_LENGTH = 30
SUBURB_MAX_LENGTH = 30
NAME_MAX_LENGTH = 255

STATE_NAMES = {
    "ACT": "Australian Capital Territory",
    "NSW": "New South Wales",
    "NT": "Northern Territory",
    "QLD": "Queensland",
    "SA": "South Australia",
    "TAS": "Tasmania",
    "VIC": "Victoria",
    "WA": "Western Australia",
}
_STATE_BY_NAME = {name.upper(): code for code, name in STATE_NAMES.items()}

REMOTE_STATES = frozenset({"NT", "TAS", "WA"})

_POSTCODE_RE = re.compile(r"^\d{4}$")


def normalize_state(state: str | None) -> str | None:
    """Return the two/three-letter state code for a code or full state name."""
    if not state:
        return None
    candidate = state.strip().upper()
    if candidate in STATE_NAMES:
        return candidate
    return _STATE_BY_NAME.get(candidate)


def normalize_postcode(postcode: str | None) -> str:
    return re.sub(r"\s+", "", postcode or "")


def truncate(value: str | None, max_length: int) -> str:
    return (value or "").strip()[:max_length]


def missing_fields(address: DeliveryAddress) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for field_name, label in (("street", "Street address"), ("city", "City"), ("state", "State"), ("postcode", "Postcode")):
        if not (getattr(address, field_name) or "").strip():
            errors.setdefault(field_name, []).append(f"{label} is required")
    return errors


def validate_address(address: DeliveryAddress) -> dict[str, list[str]]:
    """Return field -> error messages; empty when the address is usable."""
    errors = missing_fields(address)

    if not address.is_domestic:
        return errors

    if address.state and normalize_state(address.state) is None:
        errors.setdefault("state", []).append("State must be a valid Australian state or territory")

    postcode = normalize_postcode(address.postcode)
    if postcode and not _POSTCODE_RE.match(postcode):
        errors.setdefault("postcode", []).append("Postcode must be 4 digits")

    return errors


def normalize_address(address: DeliveryAddress) -> DeliveryAddress:
    """Trim and truncate free text to carrier limits; canonicalise state and postcode."""
    return DeliveryAddress(
        street=truncate(address.street, STREET_MAX_LENGTH),
        city=truncate(address.city, SUBURB_MAX_LENGTH),
        state=normalize_state(address.state) or (address.state or "").strip().upper(),
        postcode=normalize_postcode(address.postcode),
        country="AU" if address.is_domestic else address.country.strip().upper(),
    )

"""Fake carrier adapter: deterministic carrier for testing and development.

Returns canned BigPost-shaped quotes and localities. Configurable to fail with
any ``CarrierError`` for integration testing.
"""

from fulfillment.carrier.errors import CarrierError
from fulfillment.carrier.port import CarrierPort

DEFAULT_QUOTES = [
    {
        "ServiceCode": "FAKE-STD",
        "ServiceName": "Road Express",
        "CarrierName": "Fake Freight",
        "Total": 48.50,
        "EstimatedDeliveryDays": 4,
        "Description": "Depot to door delivery",
        "AuthorityToLeave": True,
    },
    {
        "ServiceCode": "FAKE-EXP",
        "ServiceName": "Priority",
        "CarrierName": "Fake Freight",
        "Total": 79.00,
        "EstimatedDeliveryDays": 2,
        "Description": "Priority door to door delivery",
        "AuthorityToLeave": False,
    },
]

DEFAULT_LOCALITIES = [
    {"Id": 1, "Suburb": "BROOKLYN", "Postcode": "3012", "State": "VIC"},
    {"Id": 2, "Suburb": "BRUNSWICK", "Postcode": "3056", "State": "VIC"},
    {"Id": 3, "Suburb": "BRISBANE", "Postcode": "4000", "State": "QLD"},
]


class FakeCarrier(CarrierPort):
    """Fake carrier that always succeeds by default."""

    def __init__(self):
        self.error: CarrierError | None = None
        self.quotes = [dict(q) for q in DEFAULT_QUOTES]
        self.localities = [dict(loc) for loc in DEFAULT_LOCALITIES]
        self.calls: list[tuple[str, object]] = []

    def configure(self, error: CarrierError | None = None, quotes: list[dict] | None = None):
        """Configure the fake carrier behaviour for testing."""
        self.error = error
        if quotes is not None:
            self.quotes = quotes

    @property
    def is_configured(self) -> bool:
        return True

    def get_quote(self, payload: dict) -> dict:
        self.calls.append(("get_quote", payload))
        if self.error is not None:
            raise self.error
        return {"Success": True, "Quotes": [dict(q) for q in self.quotes]}

    def search_suburbs(self, query: str, state: str | None = None) -> list[dict]:
        self.calls.append(("search_suburbs", query))
        if self.error is not None:
            raise self.error
        needle = query.strip().lower()
        return [
            dict(loc)
            for loc in self.localities
            if (needle in loc["Suburb"].lower() or loc["Postcode"].startswith(needle))
            and (state is None or loc["State"] == state)
        ]

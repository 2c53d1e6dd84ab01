import pytest

from fulfillment.quotes.models import DeliveryAddress, QuoteItem


@pytest.fixture(autouse=True)
def _no_carrier_credentials(monkeypatch):
    """Keep real BigPost credentials from leaking into tests."""
    for name in ("BIGPOST_API_KEY", "BIG_POST_API_KEY", "BIG_POST_API_TOKEN", "CARRIER_ADAPTER"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def brooklyn():
    return DeliveryAddress(street="12 Export Drive", city="Brooklyn", state="VIC", postcode="3012")


@pytest.fixture()
def shower_outlet():
    return QuoteItem(name="Hot/Cold Shower Outlet", quantity=1, price=89.0, weight=0.8, length=20, width=15, height=10)


@pytest.fixture()
def flat_pack():
    return QuoteItem(
        name="Wander Troopy Flat Pack",
        quantity=1,
        price=4400.0,
        weight=120,
        length=190,
        width=95,
        height=60,
        ship_class="oversized",
    )

import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def _no_carrier_credentials(monkeypatch):
    for name in ("BIGPOST_API_KEY", "BIG_POST_API_KEY", "BIG_POST_API_TOKEN", "CARRIER_ADAPTER"):
        monkeypatch.delenv(name, raising=False)


STANDARD_QUOTE = {
    "service": "Road Express",
    "price": 15.0,
    "delivery_days": 4,
    "carrier": "Hunter Express",
    "description": "Depot to door",
    "authority_to_leave": True,
    "restrictions": [],
    "source": "bigpost",
    "service_code": "RE",
    "carrier_id": "17",
}

EXPRESS_QUOTE = {
    **STANDARD_QUOTE,
    "service": "Priority",
    "price": 40.0,
    "delivery_days": 1,
    "service_code": "PRI",
    "restrictions": ["Signature required"],
}


@pytest.fixture()
def quotes():
    return [dict(STANDARD_QUOTE), dict(EXPRESS_QUOTE)]

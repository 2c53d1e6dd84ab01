import pytest
from protean.integrations.pytest import DomainFixture

from enquiries.notifier import set_notifier
from enquiries.notifier.fake_notifier import FakeNotifier


@pytest.fixture(scope="session")
def enquiries_bed():
    from enquiries.domain import enquiries

    bed = DomainFixture(enquiries)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(enquiries_bed):
    with enquiries_bed.domain_context():
        yield


@pytest.fixture()
def fake_notifier():
    notifier = FakeNotifier()
    set_notifier(notifier)
    return notifier


STEP1 = {"project_type": "flat-pack", "base_kit": "wander"}
STEP2 = {"vehicle_type": "troopcarrier", "fridge_type": "chest", "finish": "black-hex", "features": ["lighting"]}
STEP3 = {"timeline": "1-month", "budget": "10k-20k", "installation_preference": "diy"}
STEP4 = {
    "first_name": "Jo",
    "last_name": "Bloggs",
    "email": "jo@example.com.au",
    "phone": "0412 345 678",
    "location": "Brooklyn VIC",
    "message": "Keen on the chest fridge layout",
    "marketing_consent": True,
}


@pytest.fixture()
def step_values():
    return {1: dict(STEP1), 2: dict(STEP2), 3: dict(STEP3), 4: dict(STEP4)}


@pytest.fixture()
def complete_form(step_values):
    return {f"step{step}": values for step, values in step_values.items()}

"""BigPost quote request construction.

The wire models mirror the carrier's documented schema (PascalCase keys,
field length limits). ``build_quote_request`` maps storefront cart lines and
a delivery address onto them, truncating free text so the limits always hold.
"""

from datetime import date
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_pascal

from fulfillment.quotes.address import NAME_MAX_LENGTH, STREET_MAX_LENGTH, SUBURB_MAX_LENGTH, normalize_address, truncate
from fulfillment.quotes.models import DeliveryAddress, QuoteItem, QuoteOptions

DESCRIPTION_MAX_LENGTH = 50
PALLET_WEIGHT_THRESHOLD = 40.0


class JobType(IntEnum):
    DEPOT = 1
    DIRECT = 2
    HOME_DELIVERY = 3


class ItemType(IntEnum):
    CARTON = 0
    SKID = 1
    PALLET = 2
    PACK = 3
    CRATE = 4
    ROLL = 5
    SATCHEL = 6
    STILLAGE = 7
    TUBE = 8
    BAG = 9


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True, frozen=True)


class Locality(_WireModel):
    suburb: str = Field(min_length=1, max_length=SUBURB_MAX_LENGTH)
    postcode: str = Field(pattern=r"^\d{4}$")
    state: str


class Location(_WireModel):
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    address: str = Field(min_length=1, max_length=STREET_MAX_LENGTH)
    address_line_two: str | None = Field(default=None, max_length=STREET_MAX_LENGTH)
    locality: Locality


class QuoteRequestItem(_WireModel):
    item_type: ItemType
    description: str = Field(min_length=1, max_length=DESCRIPTION_MAX_LENGTH)
    quantity: int = Field(ge=1, le=100)
    height: float = Field(gt=0, le=200)
    width: float = Field(gt=0, le=200)
    length: float = Field(gt=0, le=200)
    weight: float = Field(gt=0, le=1000)
    consolidatable: bool = True


class QuoteRequest(_WireModel):
    job_type: JobType | None = None
    buyer_is_business: bool = False
    buyer_has_forklift: bool = False
    return_authority_to_leave_options: bool = True
    job_date: str | None = None
    depot_id: int | None = None
    pickup_location: Location
    buyer_location: Location
    items: list[QuoteRequestItem] = Field(min_length=1)

    @model_validator(mode="after")
    def home_delivery_is_never_business(self):
        if self.job_type == JobType.HOME_DELIVERY and self.buyer_is_business:
            raise ValueError("Home delivery jobs require BuyerIsBusiness to be false")
        return self

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


WAREHOUSE_LOCATION = Location(
    name="Unwind Designs",
    address="Export Drive",
    locality=Locality(suburb="Brooklyn", postcode="3012", state="VIC"),
)


def needs_pallet(item: QuoteItem) -> bool:
    return item.effective_weight > PALLET_WEIGHT_THRESHOLD


def build_item(item: QuoteItem) -> QuoteRequestItem:
    pallet = needs_pallet(item)
    return QuoteRequestItem(
        item_type=ItemType.PALLET if pallet else ItemType.CARTON,
        description=truncate(item.name, DESCRIPTION_MAX_LENGTH) or "Item",
        quantity=item.quantity,
        height=item.effective_height,
        width=item.effective_width,
        length=item.effective_length,
        weight=item.effective_weight,
        consolidatable=not pallet,
    )


def build_quote_request(
    address: DeliveryAddress,
    items: list[QuoteItem],
    options: QuoteOptions | None = None,
    job_date: date | None = None,
) -> QuoteRequest:
    """Compose the carrier request for delivering ``items`` to ``address``.

    Raises:
        pydantic.ValidationError: if an item falls outside the carrier's limits.
    """
    options = options or QuoteOptions()
    normalized = normalize_address(address)
    pallet_job = any(needs_pallet(item) for item in items)

    if pallet_job:
        job_type, business, forklift, atl = JobType.DIRECT, True, True, False
    else:
        job_type, business, forklift, atl = JobType.HOME_DELIVERY, False, False, True

    if options.job_type is not None:
        job_type = JobType(options.job_type)
    if options.buyer_is_business is not None:
        business = options.buyer_is_business
    if options.buyer_has_forklift is not None:
        forklift = options.buyer_has_forklift
    if options.return_authority_to_leave_options is not None:
        atl = options.return_authority_to_leave_options

    return QuoteRequest(
        job_type=job_type,
        buyer_is_business=business,
        buyer_has_forklift=forklift,
        return_authority_to_leave_options=atl,
        job_date=(job_date or date.today()).isoformat(),
        depot_id=options.depot_id,
        pickup_location=WAREHOUSE_LOCATION,
        buyer_location=Location(
            name=truncate(address.street, NAME_MAX_LENGTH),
            address=normalized.street,
            locality=Locality(
                suburb=normalized.city,
                postcode=normalized.postcode,
                state=normalized.state,
            ),
        ),
        items=[build_item(item) for item in items],
    )

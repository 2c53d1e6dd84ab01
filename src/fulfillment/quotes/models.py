"""Value types passed in and out of the quote service."""

from dataclasses import dataclass, field

DEFAULT_LENGTH = 30.0
DEFAULT_WIDTH = 20.0
DEFAULT_HEIGHT = 10.0
DEFAULT_WEIGHT = 1.0


@dataclass(frozen=True)
class DeliveryAddress:
    street: str
    city: str
    state: str
    postcode: str
    country: str = "AU"

    @property
    def is_domestic(self) -> bool:
        return (self.country or "AU").strip().upper() in ("AU", "AUS", "AUSTRALIA")


@dataclass(frozen=True)
class QuoteItem:
    """A cart line as the carrier sees it. Missing dimensions fall back to a small carton."""

    name: str
    quantity: int
    price: float = 0.0
    weight: float | None = None
    length: float | None = None
    width: float | None = None
    height: float | None = None
    ship_class: str = "standard"

    @property
    def effective_weight(self) -> float:
        return self.weight or DEFAULT_WEIGHT

    @property
    def effective_length(self) -> float:
        return self.length or DEFAULT_LENGTH

    @property
    def effective_width(self) -> float:
        return self.width or DEFAULT_WIDTH

    @property
    def effective_height(self) -> float:
        return self.height or DEFAULT_HEIGHT


@dataclass(frozen=True)
class Quote:
    """A priced shipping service offer in the storefront's uniform shape."""

    service: str
    price: float
    delivery_days: int
    carrier: str
    description: str = ""
    authority_to_leave: bool = False
    restrictions: tuple[str, ...] = ()
    source: str = "bigpost"
    service_code: str | None = None
    carrier_id: str | None = None

    def to_dict(self) -> dict:
        return {
            "service": self.service,
            "price": self.price,
            "delivery_days": self.delivery_days,
            "carrier": self.carrier,
            "description": self.description,
            "authority_to_leave": self.authority_to_leave,
            "restrictions": list(self.restrictions),
            "source": self.source,
            "service_code": self.service_code,
            "carrier_id": self.carrier_id,
        }


@dataclass(frozen=True)
class QuoteOptions:
    """Caller overrides for the carrier request.

    ``None`` means "derive from the items" (pallet jobs are direct-to-business
    with a forklift; everything else is home delivery with authority to leave).
    """

    buyer_is_business: bool | None = None
    buyer_has_forklift: bool | None = None
    return_authority_to_leave_options: bool | None = None
    job_type: int | None = None
    depot_id: int | None = None
    fallback_on_error: bool = False


@dataclass(frozen=True)
class QuoteResult:
    success: bool
    quotes: list[Quote] = field(default_factory=list)
    error: str | None = None
    error_code: str | None = None
    fallback_used: bool = False
    details: list | None = None

    @classmethod
    def failure(cls, error: str, error_code: str, details: list | None = None) -> "QuoteResult":
        return cls(success=False, error=error, error_code=error_code, details=details)


@dataclass(frozen=True)
class SuburbSuggestion:
    suburb: str
    postcode: str
    state: str
    locality_id: int | None = None

    @property
    def label(self) -> str:
        return f"{self.suburb} {self.state} {self.postcode}"

    @property
    def description(self) -> str:
        return f"{self.suburb}, {self.state} {self.postcode}"

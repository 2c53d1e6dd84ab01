"""Product records for the storefront catalogue.

Products are static fixture data: loaded once at import time and never
mutated at runtime. They are modelled as frozen dataclasses rather than
aggregates because nothing ever changes their state.

A product may declare variant option axes (Material, Colour, Flat Pack
Model, ...). Selecting a value for every required axis yields a concrete
variant, either one of the product's explicit ``variants`` or one
synthesized from the per-value overrides (see ``catalogue.product.variants``).
"""

from dataclasses import dataclass, field
from enum import Enum


class ProductKind(Enum):
    KIT = "kit"
    COMPONENT = "component"
    UPSELL = "upsell"
    TEST = "test"


class ProductCategory(Enum):
    FLAT_PACKS = "flat-packs"
    COMPONENTS = "components"
    UPSELLS = "upsells"
    TEST = "test"


class ShipClass(Enum):
    STANDARD = "standard"
    OVERSIZED = "oversized"
    FREIGHT = "freight"


class AvailabilityStatus(Enum):
    IN_STOCK = "in-stock"
    LOW_STOCK = "low-stock"
    OUT_OF_STOCK = "out-of-stock"
    COMING_SOON = "coming-soon"


LOW_STOCK_THRESHOLD = 5


@dataclass(frozen=True)
class Dimensions:
    """Packed dimensions in centimetres."""

    length: float
    width: float
    height: float


@dataclass(frozen=True)
class VariantOptionValue:
    """One selectable value of a variant option.

    ``price``, ``image``, ``sku``, ``in_stock`` and ``stock_quantity`` are
    overrides: when set they replace the product's base value for the
    resolved variant.
    """

    value: str
    label: str
    available: bool = True
    price: float | None = None
    image: str | None = None
    sku: str | None = None
    in_stock: bool | None = None
    stock_quantity: int | None = None


@dataclass(frozen=True)
class VariantOption:
    name: str
    display_name: str
    values: tuple[VariantOptionValue, ...]
    required: bool = True

    def find_value(self, raw) -> VariantOptionValue | None:
        """Look up a value by its stable ``value`` key, falling back to its label."""
        if not isinstance(raw, str) or not raw:
            return None
        for option_value in self.values:
            if option_value.value == raw:
                return option_value
        for option_value in self.values:
            if option_value.label == raw:
                return option_value
        return None


@dataclass(frozen=True)
class ExplicitVariant:
    """A pre-built variant declared in the fixture data.

    ``options`` maps option name to either the option value or its label.
    """

    id: str
    sku: str
    price: float
    options: dict[str, str]
    image: str | None = None
    in_stock: bool = True
    stock_quantity: int | None = None


@dataclass(frozen=True)
class ResolvedVariant:
    """A concrete, priced and SKU'd instantiation of a product."""

    id: str
    product_id: str
    sku: str
    price: float
    image: str | None
    in_stock: bool
    stock_quantity: int | None
    available: bool
    options: dict[str, str]


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    slug: str
    price: float
    sku: str
    kind: ProductKind
    category: ProductCategory
    description: str = ""
    short_description: str = ""
    images: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    dimensions: Dimensions | None = None
    weight: float | None = None
    ship_class: ShipClass = ShipClass.STANDARD
    in_stock: bool = True
    stock_quantity: int | None = None
    coming_soon: bool = False
    featured: bool = False
    variant_options: tuple[VariantOption, ...] = ()
    variants: tuple[ExplicitVariant, ...] = ()
    related_ids: tuple[str, ...] = field(default=())

    @property
    def image(self) -> str | None:
        return self.images[0] if self.images else None

    @property
    def has_variants(self) -> bool:
        return bool(self.variant_options)

    @property
    def is_purchasable(self) -> bool:
        return self.in_stock and not self.coming_soon

    def option(self, name: str) -> VariantOption | None:
        return next((o for o in self.variant_options if o.name == name), None)

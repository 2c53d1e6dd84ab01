"""Static catalogue fixtures.

Every product the storefront sells. Loaded once; the lookup helpers in
``catalogue.product.lookup`` index these tuples.
"""

from catalogue.product.product import (
    Dimensions,
    ExplicitVariant,
    Product,
    ProductCategory,
    ProductKind,
    ShipClass,
    VariantOption,
    VariantOptionValue,
)

# ---------------------------------------------------------------------------
# Flat-pack kits
# ---------------------------------------------------------------------------
WANDER_FLAT_PACK = Product(
    id="wander-troopy-flat-pack",
    name="Wander Troopy Flat Pack",
    slug="wander-troopy-flat-pack",
    price=3750.00,
    sku="WFP-001",
    kind=ProductKind.KIT,
    category=ProductCategory.FLAT_PACKS,
    description=(
        "Our budget-friendly Troopy kit. Swiss designed cabinetry connectors mean a full "
        "installation is achieved in a weekend with no experience required."
    ),
    short_description="Budget-friendly flat pack solution for Toyota Troopcarriers",
    images=(
        "/brand/wander-troopy-flat-pack-346203.jpg",
        "/brand/wander-troopy-flat-pack-537705.jpg",
    ),
    tags=("Flat Pack", "Troopcarrier", "Wander", "Complete Kit", "Storage"),
    dimensions=Dimensions(length=190, width=95, height=60),
    weight=120.0,
    ship_class=ShipClass.OVERSIZED,
    stock_quantity=5,
    featured=True,
    variant_options=(
        VariantOption(
            name="Finish",
            display_name="Finish",
            values=(
                VariantOptionValue(value="black-hex", label="Black Hex"),
                VariantOptionValue(value="plain-plywood", label="Plain Plywood"),
            ),
        ),
    ),
    variants=(
        ExplicitVariant(id="WFP-BH", sku="WFP-BH-001", price=4400.00, options={"Finish": "Black Hex"}),
        ExplicitVariant(id="WFP-PP", sku="WFP-PP-001", price=3750.00, options={"Finish": "Plain Plywood"}),
    ),
    related_ids=("cushion-set-troopy-kits", "shower-outlet", "mass-noise-liner"),
)

WANDER_CHEST_PLAIN = Product(
    id="wander-chest-plain",
    name="Wander Kit - Chest Fridge (Plain Hardwood)",
    slug="wander-kit-chest-fridge-plain-hardwood",
    price=3750.00,
    sku="WK-CH-PH-001",
    kind=ProductKind.KIT,
    category=ProductCategory.FLAT_PACKS,
    description="Wander kit configured for a chest fridge in a plain hardwood finish.",
    short_description="Wander kit for chest fridges",
    images=("/brand/wander-chest-plain.jpg",),
    tags=("Flat Pack", "Troopcarrier", "Wander", "Chest Fridge"),
    dimensions=Dimensions(length=190, width=95, height=60),
    weight=115.0,
    ship_class=ShipClass.OVERSIZED,
    stock_quantity=3,
    related_ids=("cushion-set-troopy-kits",),
)

ROAM_FLAT_PACK = Product(
    id="roam-troopy-flat-pack-general",
    name="Roam Troopy Flat Pack",
    slug="roam-troopy-flat-pack",
    price=6700.00,
    sku="RK-GENERAL-001",
    kind=ProductKind.KIT,
    category=ProductCategory.FLAT_PACKS,
    description=(
        "Our most popular mid-range flat pack featuring enhanced hardware, LED lighting, "
        "and premium finishes."
    ),
    short_description="Most popular mid-range flat pack with enhanced features",
    images=("/images/placeholder.svg",),
    tags=("Flat Pack", "Troopcarrier", "Mid-Range", "Popular", "LED Lighting"),
    weight=55.0,
    ship_class=ShipClass.FREIGHT,
    in_stock=False,
    stock_quantity=0,
    coming_soon=True,
)

# ---------------------------------------------------------------------------
# Components
# ---------------------------------------------------------------------------
SIDE_PANELS = Product(
    id="troopy-side-panels-with-storage",
    name="Troopy Side Panels with Storage",
    slug="troopy-side-panels-with-storage",
    price=850.00,
    sku="SP-STOR-001",
    kind=ProductKind.COMPONENT,
    category=ProductCategory.COMPONENTS,
    description="Full-length side panels with integrated storage pockets and optional bungee retention.",
    short_description="Side panels with built-in storage",
    images=("/brand/side-panels-storage.jpg",),
    tags=("Panels", "Storage", "Troopcarrier"),
    dimensions=Dimensions(length=200, width=120, height=8),
    weight=35.0,
    ship_class=ShipClass.OVERSIZED,
    stock_quantity=8,
    variant_options=(
        VariantOption(
            name="Material",
            display_name="Material",
            values=(
                VariantOptionValue(value="plain-birch", label="Plain Birch"),
                VariantOptionValue(value="black-hex", label="Black Hex"),
            ),
        ),
        VariantOption(
            name="Bungee",
            display_name="Bungee",
            values=(
                VariantOptionValue(value="no-bungee", label="No Bungee"),
                VariantOptionValue(value="with-bungee", label="With Bungee"),
            ),
        ),
    ),
    variants=(
        ExplicitVariant(
            id="SP-PB-NB",
            sku="SP-PB-NB-001",
            price=850.00,
            options={"Material": "Plain Birch", "Bungee": "No Bungee"},
        ),
        ExplicitVariant(
            id="SP-PB-WB",
            sku="SP-PB-WB-001",
            price=865.00,
            options={"Material": "Plain Birch", "Bungee": "With Bungee"},
        ),
        ExplicitVariant(
            id="SP-BH-NB",
            sku="SP-BH-NB-001",
            price=850.00,
            options={"Material": "black-hex", "Bungee": "no-bungee"},
        ),
        ExplicitVariant(
            id="SP-BH-WB",
            sku="SP-BH-WB-001",
            price=865.00,
            options={"Material": "black-hex", "Bungee": "with-bungee"},
            in_stock=False,
            stock_quantity=0,
        ),
    ),
    related_ids=("wander-troopy-flat-pack",),
)

SHOWER_OUTLET = Product(
    id="shower-outlet",
    name="Hot/Cold Shower Outlet",
    slug="shower-outlet",
    price=89.00,
    sku="PLB-SHWR-001",
    kind=ProductKind.COMPONENT,
    category=ProductCategory.COMPONENTS,
    description="Recessed hot and cold shower outlet with quick-connect hose fitting.",
    short_description="Recessed external shower outlet",
    images=("/brand/shower-outlet.jpg",),
    tags=("Plumbing", "Shower", "Water Systems"),
    dimensions=Dimensions(length=20, width=15, height=10),
    weight=0.8,
    stock_quantity=4,
)

# ---------------------------------------------------------------------------
# Upsells
# ---------------------------------------------------------------------------
CUSHION_SET = Product(
    id="cushion-set-troopy-kits",
    name="Troopy Kit Cushion Set",
    slug="cushion-set-troopy-kits",
    price=850.00,
    sku="CUSH-TRP-001",
    kind=ProductKind.UPSELL,
    category=ProductCategory.UPSELLS,
    description=(
        "Custom-fitted cushions made from durable, easy-clean marine vinyl with "
        "high-density foam for long-lasting comfort."
    ),
    short_description="Custom cushions for Wander and Roam kits",
    images=("/images/cushions-grey.jpg",),
    tags=("Cushions", "Marine Vinyl", "Custom Fit"),
    dimensions=Dimensions(length=120, width=60, height=8),
    weight=3.5,
    stock_quantity=15,
    featured=True,
    variant_options=(
        VariantOption(
            name="Flat Pack Model",
            display_name="Flat Pack Model",
            values=(
                VariantOptionValue(value="wander-roam", label="Wander / Roam"),
                VariantOptionValue(value="upright", label="Upright Fridge Layout", price=920.00),
            ),
        ),
        VariantOption(
            name="Color",
            display_name="Colour",
            values=(
                VariantOptionValue(value="grey", label="Grey", image="/images/cushions-grey.jpg"),
                VariantOptionValue(value="beige", label="Beige", image="/images/cushions-beige.jpg"),
                VariantOptionValue(value="charcoal", label="Charcoal", available=False, in_stock=False),
            ),
        ),
    ),
    related_ids=("wander-troopy-flat-pack",),
)

MASS_NOISE_LINER = Product(
    id="mass-noise-liner",
    name="Mass Noise Liner",
    slug="mass-noise-liner",
    price=189.00,
    sku="SND-MNL-001",
    kind=ProductKind.UPSELL,
    category=ProductCategory.UPSELLS,
    description="Dense sound-deadening liner cut to suit the Troopcarrier rear cabin.",
    short_description="Sound deadening for the rear cabin",
    images=("/images/mass-noise-liner.jpg",),
    tags=("Sound Deadening", "Insulation"),
    dimensions=Dimensions(length=100, width=50, height=5),
    weight=6.0,
    stock_quantity=2,
    variant_options=(
        VariantOption(
            name="Thickness",
            display_name="Thickness",
            values=(
                VariantOptionValue(value="3mm", label="3mm"),
                VariantOptionValue(value="6mm", label="6mm", price=239.00, sku="SND-MNL-6MM"),
            ),
        ),
        VariantOption(
            name="Adhesive",
            display_name="Adhesive Backing",
            required=False,
            values=(VariantOptionValue(value="peel-stick", label="Peel & Stick", price=209.00),),
        ),
    ),
)

TEST_PRODUCT = Product(
    id="test-checkout-product",
    name="Checkout Test Product",
    slug="test-checkout-product",
    price=1.00,
    sku="TEST-001",
    kind=ProductKind.TEST,
    category=ProductCategory.TEST,
    description="One dollar product used to exercise the live checkout flow.",
    weight=0.1,
    dimensions=Dimensions(length=10, width=10, height=2),
)

PRODUCTS: tuple[Product, ...] = (
    WANDER_FLAT_PACK,
    WANDER_CHEST_PLAIN,
    ROAM_FLAT_PACK,
    SIDE_PANELS,
    SHOWER_OUTLET,
    CUSHION_SET,
    MASS_NOISE_LINER,
    TEST_PRODUCT,
)

"""Variant resolution.

Given a product's declared option axes and a (possibly partial) selection,
work out the concrete variant the customer is looking at. Selection happens
one click at a time, so an incomplete or nonsensical selection resolves to
``None`` instead of raising.
"""

from collections.abc import Mapping

import structlog

from catalogue.product.product import ExplicitVariant, Product, ResolvedVariant, VariantOptionValue

logger = structlog.get_logger(__name__)

VariantKey = tuple[tuple[str, str], ...]


def variant_key(options: Mapping[str, str]) -> VariantKey:
    """Stable lookup key for a combination of option values."""
    return tuple(sorted(options.items()))


def _explicit_variant_index(product: Product) -> dict[VariantKey, ExplicitVariant]:
    """Index the product's explicit variants by their normalised option values.

    Fixture variants may spell an option by value or by display label; both
    are translated to the stable value.
    """
    index = {}
    for variant in product.variants:
        normalised = {}
        for option_name, raw in variant.options.items():
            option = product.option(option_name)
            option_value = option.find_value(raw) if option else None
            normalised[option_name] = option_value.value if option_value else raw
        index.setdefault(variant_key(normalised), variant)
    return index


def _selected_values(product: Product, selected_options) -> dict[str, VariantOptionValue] | None:
    """Map option name to the chosen value, or None if a required option is unset."""
    if not isinstance(selected_options, Mapping):
        return None

    chosen = {}
    for option in product.variant_options:
        option_value = option.find_value(selected_options.get(option.name))
        if option_value is None:
            if option.required:
                return None
            continue
        chosen[option.name] = option_value
    return chosen


def _value_is_available(option_value: VariantOptionValue) -> bool:
    return option_value.available and option_value.in_stock is not False


def resolve_variant(product: Product, selected_options) -> ResolvedVariant | None:
    """Resolve ``selected_options`` (option name -> value) to a variant.

    Returns None when the product has no options, nothing is selected, or a
    required option is missing. Explicit variants win over synthesis.
    """
    if product is None or not product.variant_options or not selected_options:
        return None

    chosen = _selected_values(product, selected_options)
    if not chosen:
        return None

    values_available = all(_value_is_available(v) for v in chosen.values())
    options = {name: value.value for name, value in chosen.items()}

    explicit = _explicit_variant_index(product).get(variant_key(options))
    if explicit is not None:
        return ResolvedVariant(
            id=explicit.id,
            product_id=product.id,
            sku=explicit.sku,
            price=explicit.price,
            image=explicit.image or product.image,
            in_stock=explicit.in_stock,
            stock_quantity=explicit.stock_quantity,
            available=values_available,
            options=options,
        )

    # Synthesized id and sku order values by option name so that the same
    # selection always yields the same identifiers.
    suffix = "-".join(options[name] for name in sorted(options))

    price = product.price
    image = product.image
    sku = f"{product.sku}-{suffix}"
    in_stock = product.in_stock
    stock_quantity = product.stock_quantity

    # Declaration order; a later option's override replaces an earlier one.
    for option in product.variant_options:
        option_value = chosen.get(option.name)
        if option_value is None:
            continue
        if option_value.price is not None:
            price = option_value.price
        if option_value.image is not None:
            image = option_value.image
        if option_value.sku is not None:
            sku = option_value.sku
        if option_value.in_stock is not None:
            in_stock = option_value.in_stock
        if option_value.stock_quantity is not None:
            stock_quantity = option_value.stock_quantity

    logger.debug("variant_synthesized", product_id=product.id, options=options)

    return ResolvedVariant(
        id=f"{product.id}-{suffix}",
        product_id=product.id,
        sku=sku,
        price=price,
        image=image,
        in_stock=in_stock,
        stock_quantity=stock_quantity,
        available=values_available,
        options=options,
    )

"""
Quote Builder - AXIS CHECKOUT
=============================
Turns a requested quantity and currency into a PriceQuote using the
tiered bundling policy:

- 1 unit:   single price, paid shipping
- 2 units:  bundle price (one inseparable line), free shipping
- 3+ units: bundle line + "additional unit" line at the extra price,
            free shipping

Pure and deterministic. Bad input is normalized, never rejected.
"""

import math
import re
from typing import Any, List, Optional

import structlog

from pricing.price_table import (
    DEFAULT_PRICE_TABLE,
    DEFAULT_PRODUCT,
    FREE_SHIPPING_LABEL,
    PAID_SHIPPING_LABEL,
    SHIPPING_ESTIMATE_MAX_DAYS,
    SHIPPING_ESTIMATE_MIN_DAYS,
    CurrencyPriceTable,
)
from schemas.checkout_definitions import (
    LineItem,
    PriceQuote,
    PriceSet,
    ProductInfo,
    ShippingTerm,
)

logger = structlog.get_logger(component="quote_builder")

MIN_QUANTITY = 1
BUNDLE_SIZE = 2

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


# =============================================================================
# INPUT NORMALIZATION
# =============================================================================

def normalize_quantity(value: Any) -> int:
    """
    Coerce a raw quantity to an integer >= 1.

    Strings are read by their leading integer ("3 units" -> 3), floats are
    truncated toward zero. Anything unreadable counts as one unit.
    """
    quantity: Optional[int] = None

    if isinstance(value, bool):
        quantity = None
    elif isinstance(value, int):
        quantity = value
    elif isinstance(value, float):
        if math.isfinite(value):
            quantity = int(value)
    elif isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            try:
                quantity = int(match.group(1))
            except ValueError:
                # beyond the interpreter's int/str digit limit
                quantity = None

    if quantity is None:
        return MIN_QUANTITY
    return max(MIN_QUANTITY, quantity)


def normalize_currency(value: Any, price_table: CurrencyPriceTable = DEFAULT_PRICE_TABLE) -> str:
    """Lowercase currency code known to ``price_table``, else its default."""
    currency, _ = price_table.resolve(value)
    return currency


# =============================================================================
# QUOTE
# =============================================================================

def _single_line(product: ProductInfo, prices: PriceSet) -> LineItem:
    return LineItem(
        name=f"{product.name} (1 pc)",
        description=product.description,
        image_url=product.image_url,
        unit_amount=prices.single,
        quantity=1,
    )


def _bundle_line(product: ProductInfo, prices: PriceSet) -> LineItem:
    return LineItem(
        name=f"{product.name} ({BUNDLE_SIZE} pcs bundle)",
        description=product.description,
        image_url=product.image_url,
        unit_amount=prices.double,
        quantity=1,
        pack_size=BUNDLE_SIZE,
    )


def _extra_line(product: ProductInfo, prices: PriceSet, count: int) -> LineItem:
    return LineItem(
        name=f"{product.name} (additional unit)",
        description=product.description,
        image_url=product.image_url,
        unit_amount=prices.extra,
        quantity=count,
    )


def _shipping_term(fee_amount: int) -> ShippingTerm:
    return ShippingTerm(
        fee_amount=fee_amount,
        label=PAID_SHIPPING_LABEL if fee_amount else FREE_SHIPPING_LABEL,
        estimated_min_days=SHIPPING_ESTIMATE_MIN_DAYS,
        estimated_max_days=SHIPPING_ESTIMATE_MAX_DAYS,
    )


def build_quote(
    quantity: Any,
    currency_code: Any = None,
    *,
    price_table: CurrencyPriceTable = DEFAULT_PRICE_TABLE,
    product: ProductInfo = DEFAULT_PRODUCT,
) -> PriceQuote:
    """
    Price ``quantity`` units in ``currency_code``.

    Args:
        quantity: Requested unit count, any type. Missing, zero, negative
            or non-numeric values are treated as 1.
        currency_code: Case-insensitive ISO code. Unknown codes fall back
            to the table's default currency.
        price_table: Currency prices to quote from.
        product: Display metadata copied onto every line item.

    Returns:
        PriceQuote with the bundle line first when more than one unit is
        ordered. Shipping is charged only for a single unit.
    """
    units = normalize_quantity(quantity)
    currency, prices = price_table.resolve(currency_code)

    line_items: List[LineItem]
    if units == 1:
        line_items = [_single_line(product, prices)]
        shipping = _shipping_term(prices.shipping)
    else:
        line_items = [_bundle_line(product, prices)]
        if units > BUNDLE_SIZE:
            line_items.append(_extra_line(product, prices, units - BUNDLE_SIZE))
        shipping = _shipping_term(0)

    quote = PriceQuote(currency=currency, line_items=tuple(line_items), shipping=shipping)

    logger.debug(
        "quote_built",
        units=units,
        currency=currency,
        line_items=len(quote.line_items),
        total_amount=quote.total_amount,
    )
    return quote

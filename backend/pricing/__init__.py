# pricing/__init__.py
from pricing.price_table import (
    CurrencyPriceTable,
    DEFAULT_CURRENCY,
    DEFAULT_PRICE_TABLE,
    DEFAULT_PRODUCT,
)

from pricing.quote_builder import (
    build_quote,
    normalize_currency,
    normalize_quantity,
)

__all__ = [
    # Price tables
    "CurrencyPriceTable",
    "DEFAULT_CURRENCY",
    "DEFAULT_PRICE_TABLE",
    "DEFAULT_PRODUCT",
    # Quote builder
    "build_quote",
    "normalize_currency",
    "normalize_quantity",
]

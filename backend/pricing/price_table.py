"""
Price Table - AXIS CHECKOUT
===========================
Static pricing data, built once at startup and never mutated:

- CurrencyPriceTable: currency code -> PriceSet, with a default fallback
- DEFAULT_PRODUCT: display metadata for the UV inspection device
- Shipping delivery estimate shared by paid and free shipping
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from schemas.checkout_definitions import PriceSet, ProductInfo


DEFAULT_CURRENCY = "usd"

SHIPPING_ESTIMATE_MIN_DAYS = 5
SHIPPING_ESTIMATE_MAX_DAYS = 7
PAID_SHIPPING_LABEL = "Standard Shipping"
FREE_SHIPPING_LABEL = "Free Shipping"


class CurrencyPriceTable:
    """
    Immutable mapping of lowercase ISO currency codes to PriceSets.

    Lookups never fail: an unknown or missing code resolves to the
    default currency, which must therefore be present.
    """

    def __init__(self, prices: Mapping[str, PriceSet], default: str = DEFAULT_CURRENCY):
        for code in prices:
            if code != code.lower():
                raise ValueError(f"Currency codes must be lowercase: {code!r}")
        if default not in prices:
            raise ValueError(f"Default currency {default!r} missing from price table")

        self._prices = MappingProxyType(dict(prices))
        self._default = default

    @property
    def default_currency(self) -> str:
        return self._default

    @property
    def currencies(self) -> Tuple[str, ...]:
        return tuple(self._prices)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code in self._prices

    def __len__(self) -> int:
        return len(self._prices)

    def resolve(self, code: Optional[object]) -> Tuple[str, PriceSet]:
        """Return ``(currency, prices)`` for ``code``, case-insensitively."""
        if isinstance(code, str):
            normalized = code.strip().lower()
            if normalized in self._prices:
                return normalized, self._prices[normalized]
        return self._default, self._prices[self._default]

    def __repr__(self) -> str:
        return f"CurrencyPriceTable(currencies={self.currencies!r}, default={self._default!r})"


DEFAULT_PRICE_TABLE = CurrencyPriceTable({
    "usd": PriceSet(single=79900, shipping=4000, double=129900, extra=70000),
    "eur": PriceSet(single=79900, shipping=4000, double=129900, extra=70000),
    "try": PriceSet(single=2799000, shipping=150000, double=4599000, extra=2400000),
})

DEFAULT_PRODUCT = ProductInfo(
    name="UV Car Inspection Device",
    description="A powerful portable device for car inspection.",
    image_url="https://yourdomain.com/images/device.jpg",
)

# schemas/__init__.py
from schemas.checkout_definitions import (
    PriceSet,
    ProductInfo,
    LineItem,
    ShippingTerm,
    PriceQuote,
    CheckoutSessionRequest,
    CheckoutSessionResponse,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    # Pricing
    "PriceSet",
    "ProductInfo",
    # Quote
    "LineItem",
    "ShippingTerm",
    "PriceQuote",
    # HTTP bodies
    "CheckoutSessionRequest",
    "CheckoutSessionResponse",
    "ErrorResponse",
    "HealthResponse",
]

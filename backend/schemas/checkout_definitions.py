# schemas/checkout_definitions.py
# ============================================================================
# AXIS CHECKOUT SERVICE — CHECKOUT SCHEMAS
# ============================================================================
# Price tables, quotes, and the HTTP request/response bodies.
# All monetary amounts are integers in the currency's minor unit (cents,
# kuruş, ...).
# ============================================================================

from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field


# ============================================================================
# SECTION 1: PRICING
# ============================================================================

class PriceSet(BaseModel):
    """Prices for one currency."""
    model_config = ConfigDict(frozen=True)

    single: int = Field(ge=0, description="Price of one unit")
    shipping: int = Field(ge=0, description="Shipping fee, charged only for a single unit")
    double: int = Field(ge=0, description="Price of the 2-unit bundle")
    extra: int = Field(ge=0, description="Price per unit beyond the bundle")


class ProductInfo(BaseModel):
    """Display metadata shown on the hosted payment page."""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    image_url: str


# ============================================================================
# SECTION 2: QUOTE
# ============================================================================

class LineItem(BaseModel):
    """Single invoiced line."""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    image_url: str
    unit_amount: int = Field(ge=0)
    quantity: int = Field(ge=1)
    pack_size: int = Field(default=1, ge=1, description="Physical units per invoiced item")


class ShippingTerm(BaseModel):
    """Shipping fee and delivery estimate in business days."""
    model_config = ConfigDict(frozen=True)

    fee_amount: int = Field(ge=0)
    label: str
    estimated_min_days: int = Field(ge=0)
    estimated_max_days: int = Field(ge=0)

    @property
    def is_free(self) -> bool:
        return self.fee_amount == 0


class PriceQuote(BaseModel):
    """Ordered line items plus shipping terms for one checkout."""
    model_config = ConfigDict(frozen=True)

    currency: str
    line_items: Tuple[LineItem, ...]
    shipping: ShippingTerm

    @computed_field
    @property
    def total_amount(self) -> int:
        items = sum(item.unit_amount * item.quantity for item in self.line_items)
        return items + self.shipping.fee_amount

    @computed_field
    @property
    def unit_count(self) -> int:
        """Physical units covered by the quote."""
        return sum(item.quantity * item.pack_size for item in self.line_items)


# ============================================================================
# SECTION 3: HTTP BODIES
# ============================================================================

class CheckoutSessionRequest(BaseModel):
    """
    Body of POST /create-checkout-session.

    Both fields accept anything; the quote builder normalizes bad values
    instead of rejecting them.
    """
    model_config = ConfigDict(extra="ignore")

    quantity: Any = None
    currency: Any = None


class CheckoutSessionResponse(BaseModel):
    """Session created at the payment gateway."""
    id: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    version: str
    uptime_seconds: float
    gateway_configured: bool

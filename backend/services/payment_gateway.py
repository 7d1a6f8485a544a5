"""
Payment Session Gateway - AXIS CHECKOUT
=======================================
Stripe Checkout adapter:
- Composes a Checkout Session request from a PriceQuote
- Creates the session and returns its opaque id
- Resolves once at startup to GatewayConfigured | GatewayUnconfigured

The secret key is passed per request; the global ``stripe.api_key`` is
never touched.

pip install stripe structlog
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple, Union

import stripe
import structlog

from config import ServerConfig
from schemas.checkout_definitions import LineItem, PriceQuote, ShippingTerm

logger = structlog.get_logger(component="payment_gateway")

STRIPE_KEY_PREFIXES = ("sk_", "rk_")
UNCONFIGURED_MESSAGE = "Payment gateway is not configured"


# =============================================================================
# ERRORS
# =============================================================================

class PaymentGatewayError(Exception):
    """The payment provider rejected or could not process a request."""

    def __init__(self, message: str, error_type: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_type = error_type


# =============================================================================
# STRIPE GATEWAY
# =============================================================================

class StripeSessionGateway:
    """
    Creates hosted Stripe Checkout Sessions.

    Example:
        gateway = StripeSessionGateway(api_key="sk_test_...")
        session_id = gateway.create_session(build_quote(3, "eur"))
    """

    def __init__(
        self,
        api_key: str,
        *,
        success_url: str,
        cancel_url: str,
        allowed_countries: Sequence[str],
        stripe_client: Any = stripe,
    ):
        self._api_key = api_key
        self._stripe = stripe_client
        self.success_url = success_url
        self.cancel_url = cancel_url
        self.allowed_countries: Tuple[str, ...] = tuple(allowed_countries)

    def __repr__(self) -> str:
        return f"StripeSessionGateway(allowed_countries={len(self.allowed_countries)})"

    @staticmethod
    def _line_item(item: LineItem, currency: str) -> Dict[str, Any]:
        return {
            "price_data": {
                "currency": currency,
                "product_data": {
                    "name": item.name,
                    "description": item.description,
                    "images": [item.image_url],
                },
                "unit_amount": item.unit_amount,
            },
            "quantity": item.quantity,
        }

    @staticmethod
    def _shipping_option(shipping: ShippingTerm, currency: str) -> Dict[str, Any]:
        return {
            "shipping_rate_data": {
                "type": "fixed_amount",
                "fixed_amount": {"amount": shipping.fee_amount, "currency": currency},
                "display_name": shipping.label,
                "delivery_estimate": {
                    "minimum": {"unit": "business_day", "value": shipping.estimated_min_days},
                    "maximum": {"unit": "business_day", "value": shipping.estimated_max_days},
                },
            },
        }

    def build_session_params(self, quote: PriceQuote) -> Dict[str, Any]:
        """Stripe ``checkout.Session.create`` parameters for ``quote``."""
        return {
            "payment_method_types": ["card"],
            "mode": "payment",
            "line_items": [self._line_item(item, quote.currency) for item in quote.line_items],
            "shipping_address_collection": {"allowed_countries": list(self.allowed_countries)},
            "shipping_options": [self._shipping_option(quote.shipping, quote.currency)],
            "phone_number_collection": {"enabled": True},
            "success_url": self.success_url,
            "cancel_url": self.cancel_url,
        }

    def create_session(self, quote: PriceQuote) -> str:
        """
        Create a Checkout Session for ``quote``.

        Blocking network call; never retried.

        Raises:
            PaymentGatewayError: Stripe rejected the request or was unreachable.
        """
        params = self.build_session_params(quote)

        try:
            session = self._stripe.checkout.Session.create(api_key=self._api_key, **params)
        except stripe.StripeError as e:
            message = e.user_message or str(e) or type(e).__name__
            logger.error(
                "checkout_session_failed",
                error=message,
                error_type=type(e).__name__,
                currency=quote.currency,
            )
            raise PaymentGatewayError(message, error_type=type(e).__name__) from e

        logger.info(
            "checkout_session_created",
            stripe_session_id=session.id,
            currency=quote.currency,
            total_amount=quote.total_amount,
        )
        return session.id


# =============================================================================
# STARTUP RESOLUTION
# =============================================================================

@dataclass(frozen=True)
class GatewayConfigured:
    gateway: StripeSessionGateway


@dataclass(frozen=True)
class GatewayUnconfigured:
    reason: str


GatewayState = Union[GatewayConfigured, GatewayUnconfigured]


def resolve_gateway(config: ServerConfig, stripe_client: Any = stripe) -> GatewayState:
    """
    Decide once whether checkout sessions can be created.

    A missing or malformed secret key is not fatal: the service keeps
    running and every checkout request fails with a clear error.
    """
    api_key = (config.stripe_secret_key or "").strip()

    if not api_key:
        logger.warning("gateway_unconfigured", reason="STRIPE_SECRET_KEY not set")
        return GatewayUnconfigured(reason="STRIPE_SECRET_KEY not set")

    if not api_key.startswith(STRIPE_KEY_PREFIXES):
        logger.warning("gateway_unconfigured", reason="STRIPE_SECRET_KEY is not a secret key")
        return GatewayUnconfigured(reason="STRIPE_SECRET_KEY is not a secret key")

    gateway = StripeSessionGateway(
        api_key,
        success_url=config.success_url,
        cancel_url=config.cancel_url,
        allowed_countries=config.allowed_countries,
        stripe_client=stripe_client,
    )
    logger.info(
        "gateway_configured",
        live_mode=api_key.startswith(("sk_live_", "rk_live_")),
        allowed_countries=len(gateway.allowed_countries),
    )
    return GatewayConfigured(gateway=gateway)

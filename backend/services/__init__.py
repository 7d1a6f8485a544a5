# services/__init__.py
# ============================================================================
# AXIS CHECKOUT SERVICE — SERVICES MODULE
# ============================================================================
# Outbound collaborators (payment gateway)
# ============================================================================

from services.payment_gateway import (
    GatewayConfigured,
    GatewayState,
    GatewayUnconfigured,
    PaymentGatewayError,
    StripeSessionGateway,
    UNCONFIGURED_MESSAGE,
    resolve_gateway,
)

__all__ = [
    "GatewayConfigured",
    "GatewayState",
    "GatewayUnconfigured",
    "PaymentGatewayError",
    "StripeSessionGateway",
    "UNCONFIGURED_MESSAGE",
    "resolve_gateway",
]

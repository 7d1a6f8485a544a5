# api/server.py
# ============================================================================
# AXIS CHECKOUT SERVICE — FASTAPI SERVER
# ============================================================================
# POST /create-checkout-session -> Stripe hosted checkout session id
# GET  /health
# ============================================================================

import json
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
import structlog
import uvicorn

from config import ServerConfig
from logging_config import configure_logging
from pricing import DEFAULT_PRICE_TABLE, DEFAULT_PRODUCT, CurrencyPriceTable, build_quote
from schemas.checkout_definitions import (
    CheckoutSessionRequest,
    CheckoutSessionResponse,
    ErrorResponse,
    HealthResponse,
    ProductInfo,
)
from services.payment_gateway import (
    GatewayConfigured,
    GatewayState,
    PaymentGatewayError,
    UNCONFIGURED_MESSAGE,
    resolve_gateway,
)

VERSION = "1.0.0"

logger = structlog.get_logger(component="server")


def _error(message: str, status_code: int = 500) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


async def _read_body(request: Request) -> Dict[str, Any]:
    """JSON object body, or {} when the body is empty, malformed or not an object."""
    raw = await request.body()
    if not raw:
        return {}
    try:
        payload = json.loads(raw)
    except (ValueError, UnicodeDecodeError):
        logger.debug("request_body_unparseable", size=len(raw))
        return {}
    return payload if isinstance(payload, dict) else {}


# ============================================================================
# APP FACTORY
# ============================================================================

def create_app(
    config: Optional[ServerConfig] = None,
    gateway_state: Optional[GatewayState] = None,
    price_table: CurrencyPriceTable = DEFAULT_PRICE_TABLE,
    product: Optional[ProductInfo] = None,
) -> FastAPI:
    """
    Build the checkout app.

    Configuration, gateway and price data are resolved here, once, and
    captured by the route handlers.
    """
    config = config or ServerConfig.from_env()
    state = gateway_state if gateway_state is not None else resolve_gateway(config)
    product = product or DEFAULT_PRODUCT.model_copy(update={"image_url": config.product_image_url})
    started_at = datetime.now(timezone.utc)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown logic"""
        logger.info(
            "server_starting",
            version=VERSION,
            env=config.env,
            gateway_configured=isinstance(state, GatewayConfigured),
            currencies=list(price_table.currencies),
        )
        missing = config.missing_env_vars()
        if missing:
            logger.warning("missing_env_vars", missing=missing)

        yield

        logger.info("server_shutting_down")

    app = FastAPI(
        title="Axis Checkout Service",
        description="Creates hosted Stripe checkout sessions for the UV car inspection device",
        version=VERSION,
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_credentials="*" not in config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.config = config
    app.state.gateway = state
    app.state.price_table = price_table
    app.state.product = product

    @app.middleware("http")
    async def add_timing_header(request: Request, call_next):
        """Add response timing header."""
        start = time.perf_counter()
        response = await call_next(request)
        duration = (time.perf_counter() - start) * 1000
        response.headers["X-Response-Time-Ms"] = f"{duration:.2f}"
        return response

    # ========================================================================
    # ENDPOINTS
    # ========================================================================

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint."""
        uptime = (datetime.now(timezone.utc) - started_at).total_seconds()
        return HealthResponse(
            status="healthy",
            version=VERSION,
            uptime_seconds=uptime,
            gateway_configured=isinstance(state, GatewayConfigured),
        )

    @app.post(
        "/create-checkout-session",
        response_model=CheckoutSessionResponse,
        responses={500: {"model": ErrorResponse}},
    )
    async def create_checkout_session(request: Request):
        """
        Quote the requested quantity and open a hosted checkout session.

        Invalid quantity or currency values fall back to defaults. Returns
        500 when the gateway is unconfigured or rejects the session.
        """
        body = CheckoutSessionRequest.model_validate(await _read_body(request))
        quote = build_quote(body.quantity, body.currency, price_table=price_table, product=product)

        log = logger.bind(currency=quote.currency, units=quote.unit_count)

        if not isinstance(state, GatewayConfigured):
            log.error("checkout_rejected", reason=state.reason)
            return _error(UNCONFIGURED_MESSAGE)

        try:
            session_id = await run_in_threadpool(state.gateway.create_session, quote)
        except PaymentGatewayError as e:
            log.error("checkout_error", error=e.message, error_type=e.error_type)
            return _error(e.message)
        except Exception as e:
            log.exception("checkout_unexpected_error", error=str(e))
            return _error(str(e) or type(e).__name__)

        log.info("checkout_created", stripe_session_id=session_id, total_amount=quote.total_amount)
        return CheckoutSessionResponse(id=session_id)

    return app


# ============================================================================
# MAIN
# ============================================================================

def main() -> None:
    config = ServerConfig.from_env()
    configure_logging(config.log_level, json=not config.debug)
    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()

"""Shared fixtures: a configured app whose Stripe client is a mock."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from api.server import create_app
from config import ServerConfig
from services.payment_gateway import GatewayConfigured, StripeSessionGateway


@pytest.fixture
def server_config() -> ServerConfig:
    return ServerConfig(
        env="test",
        stripe_secret_key="sk_test_123",
        success_url="https://shop.example/success?session_id={CHECKOUT_SESSION_ID}",
        cancel_url="https://shop.example/cancel",
        allowed_countries=("TR", "US", "DE"),
    )


@pytest.fixture
def fake_stripe() -> MagicMock:
    client = MagicMock(name="stripe")
    client.checkout.Session.create.return_value = SimpleNamespace(id="cs_test_abc123")
    return client


@pytest.fixture
def gateway(server_config: ServerConfig, fake_stripe: MagicMock) -> StripeSessionGateway:
    return StripeSessionGateway(
        server_config.stripe_secret_key,
        success_url=server_config.success_url,
        cancel_url=server_config.cancel_url,
        allowed_countries=server_config.allowed_countries,
        stripe_client=fake_stripe,
    )


@pytest.fixture
def client(server_config: ServerConfig, gateway: StripeSessionGateway):
    app = create_app(server_config, GatewayConfigured(gateway=gateway))
    with TestClient(app) as test_client:
        yield test_client

from config import (
    DEFAULT_ALLOWED_COUNTRIES,
    DEFAULT_CANCEL_URL,
    DEFAULT_SUCCESS_URL,
    ServerConfig,
)


def test_defaults_from_empty_environment():
    config = ServerConfig.from_env({})

    assert config.port == 3000
    assert config.host == "0.0.0.0"
    assert config.cors_origins == ("*",)
    assert config.stripe_secret_key is None
    assert config.success_url == DEFAULT_SUCCESS_URL
    assert config.cancel_url == DEFAULT_CANCEL_URL
    assert config.allowed_countries == DEFAULT_ALLOWED_COUNTRIES
    assert config.debug is True


def test_values_from_environment():
    config = ServerConfig.from_env({
        "PORT": "8080",
        "ENV": "production",
        "LOG_LEVEL": "warning",
        "CORS_ORIGINS": "https://axis-uv.com, https://www.axis-uv.com",
        "STRIPE_SECRET_KEY": "sk_live_x",
        "ALLOWED_COUNTRIES": "tr, us,,gb",
        "CHECKOUT_CANCEL_URL": "https://axis-uv.com/cart",
    })

    assert config.port == 8080
    assert config.debug is False
    assert config.log_level == "WARNING"
    assert config.cors_origins == ("https://axis-uv.com", "https://www.axis-uv.com")
    assert config.stripe_secret_key == "sk_live_x"
    assert config.allowed_countries == ("TR", "US", "GB")
    assert config.cancel_url == "https://axis-uv.com/cart"


def test_empty_key_is_treated_as_missing():
    assert ServerConfig.from_env({"STRIPE_SECRET_KEY": ""}).stripe_secret_key is None
    assert ServerConfig.from_env({"STRIPE_SECRET_KEY": ""}).missing_env_vars() == ["STRIPE_SECRET_KEY"]
    assert ServerConfig.from_env({"STRIPE_SECRET_KEY": "sk_test_1"}).missing_env_vars() == []


def test_secret_key_not_in_repr():
    assert "sk_test_secret" not in repr(ServerConfig(stripe_secret_key="sk_test_secret"))


def test_configure_logging_json_output(capsys):
    import json

    import structlog

    from logging_config import configure_logging

    configure_logging("info", json=True)
    try:
        structlog.get_logger().bind(component="test").info("checkout_created", total_amount=129900)
        structlog.get_logger().debug("filtered_out")
    finally:
        structlog.reset_defaults()

    lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["event"] == "checkout_created"
    assert record["level"] == "info"
    assert record["total_amount"] == 129900

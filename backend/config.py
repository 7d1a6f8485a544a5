# config.py
# ============================================================================
# AXIS CHECKOUT SERVICE — CONFIGURATION
# ============================================================================
# Server configuration read once from the process environment
# ============================================================================

import os
from typing import List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_SUCCESS_URL = "https://axis-uv.com/success?session_id={CHECKOUT_SESSION_ID}"
DEFAULT_CANCEL_URL = "https://axis-uv.com/cancel"
DEFAULT_ALLOWED_COUNTRIES = ("TR", "US", "GB", "DE", "FR", "AE", "EG")
DEFAULT_PRODUCT_IMAGE_URL = "https://yourdomain.com/images/device.jpg"


def _split_csv(raw: Optional[str], default: Tuple[str, ...]) -> Tuple[str, ...]:
    if raw is None:
        return default
    values = tuple(part.strip() for part in raw.split(",") if part.strip())
    return values or default


class ServerConfig(BaseModel):
    """Server configuration from environment"""

    model_config = ConfigDict(frozen=True)

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    env: str = "development"
    log_level: str = "INFO"

    # CORS
    cors_origins: Tuple[str, ...] = ("*",)

    # Stripe
    stripe_secret_key: Optional[str] = Field(default=None, repr=False)

    # Checkout session
    success_url: str = DEFAULT_SUCCESS_URL
    cancel_url: str = DEFAULT_CANCEL_URL
    allowed_countries: Tuple[str, ...] = DEFAULT_ALLOWED_COUNTRIES
    product_image_url: str = DEFAULT_PRODUCT_IMAGE_URL

    @property
    def debug(self) -> bool:
        return self.env == "development"

    def missing_env_vars(self) -> List[str]:
        """Expected variables this configuration was built without; never fatal."""
        missing = []
        if not self.stripe_secret_key:
            missing.append("STRIPE_SECRET_KEY")
        return missing

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        """Build the configuration from ``environ`` (defaults to ``os.environ``)."""
        env = os.environ if environ is None else environ

        return cls(
            host=env.get("HOST", "0.0.0.0"),
            port=int(env.get("PORT", "3000")),
            env=env.get("ENV", "development"),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            cors_origins=_split_csv(env.get("CORS_ORIGINS"), ("*",)),
            stripe_secret_key=env.get("STRIPE_SECRET_KEY") or None,
            success_url=env.get("CHECKOUT_SUCCESS_URL", DEFAULT_SUCCESS_URL),
            cancel_url=env.get("CHECKOUT_CANCEL_URL", DEFAULT_CANCEL_URL),
            allowed_countries=tuple(
                code.upper()
                for code in _split_csv(env.get("ALLOWED_COUNTRIES"), DEFAULT_ALLOWED_COUNTRIES)
            ),
            product_image_url=env.get("PRODUCT_IMAGE_URL", DEFAULT_PRODUCT_IMAGE_URL),
        )


import os
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file automatically
load_dotenv()


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    # PayPal credentials
    PAYPAL_CLIENTID: str
    PAYPAL_SECRET: str

    # Target API
    PAYPAL_ENVIRONMENT: Literal["sandbox", "live"] = "sandbox"
    PAYPAL_BASE_URL: Optional[str] = None
    PAYPAL_TIMEOUT: Optional[float] = None

    # Logging
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: Literal["development", "test", "production"] = "development"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    def __init__(self, **kwargs):
        # Fail early with a readable message instead of a field validation error
        for name in ("PAYPAL_CLIENTID", "PAYPAL_SECRET"):
            if not kwargs.get(name) and not os.getenv(name):
                raise RuntimeError(
                    f"{name} not set; create .env or export the variable"
                )
        super().__init__(**kwargs)


# Settings singleton
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def clear_settings():
    """Clear settings singleton."""
    global _settings
    _settings = None


def init_settings(**overrides) -> Settings:
    """Replace the singleton, e.g. with explicit values in tests."""
    global _settings
    _settings = Settings(**overrides)
    return _settings

"""Configuration module for the Shopify Admin REST client.

Uses pydantic-settings for environment variable loading and validation.
"""

from enum import Enum
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    """Log output format."""

    CONSOLE = "console"
    JSON = "json"


def normalize_shop_name(value: str, domain: str = "myshopify.com") -> str:
    """Turn a shop handle, domain or URL into a bare host name.

    Examples:
        >>> normalize_shop_name("my-shop")
        'my-shop.myshopify.com'
        >>> normalize_shop_name("https://my-shop.myshopify.com/")
        'my-shop.myshopify.com'
    """
    value = value.strip()
    for prefix in ("https://", "http://"):
        if value.startswith(prefix):
            value = value[len(prefix) :]
    value = value.split("/", 1)[0]
    # Anything with a dot is already a host (custom domains included)
    if not value or "." in value:
        return value
    return f"{value}.{domain}"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Environment variables can be set directly or via a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Shop and credentials
    shopify_shop_name: str = Field(
        ...,
        description="Shop handle, domain or URL (e.g., my-shop or my-shop.myshopify.com)",
    )
    shopify_access_token: str | None = Field(
        default=None,
        description="Admin API access token (custom and public apps)",
    )
    shopify_api_key: str | None = Field(
        default=None,
        description="API key for private app basic auth",
    )
    shopify_password: str | None = Field(
        default=None,
        description="API password for private app basic auth",
    )
    shopify_api_version: str = Field(
        default="2024-01",
        description="Admin API version (YYYY-MM or 'unstable'); empty means unversioned",
    )
    shopify_domain: str = Field(
        default="myshopify.com",
        description="Domain appended to bare shop handles",
    )

    # Transport and retry behaviour
    shopify_max_retries: int = Field(
        default=3,
        ge=0,
        description="Retries after the first attempt on 429, retryable 5xx and network errors",
    )
    shopify_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Per request timeout in seconds",
    )
    shopify_initial_backoff: float = Field(
        default=1.0,
        ge=0,
        description="Base of the exponential backoff in seconds",
    )
    shopify_max_backoff: float = Field(
        default=60.0,
        ge=0,
        description="Upper bound for any single wait between attempts",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: LogFormat = Field(
        default=LogFormat.CONSOLE,
        description="Log output format: console or json",
    )

    @field_validator("shopify_shop_name", mode="after")
    @classmethod
    def strip_shop_name(cls, v: str) -> str:
        """Remove protocol prefix and trailing path if present."""
        v = v.strip()
        for prefix in ("https://", "http://"):
            if v.startswith(prefix):
                v = v[len(prefix) :]
        return v.rstrip("/")

    @property
    def shop_host(self) -> str:
        """Fully qualified shop host name."""
        return normalize_shop_name(self.shopify_shop_name, self.shopify_domain)


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings if needed.
    """
    return Settings()

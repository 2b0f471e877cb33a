"""Typed client for the Shopify Admin REST API."""

__version__ = "0.1.0"

from .client import ApiResponse, RateLimitInfo, RetryPolicy, ShopifyClient  # noqa: E402
from .config import Settings, get_settings  # noqa: E402
from .errors import (  # noqa: E402
    ConfigurationError,
    DecodeError,
    RateLimitedError,
    RequestCancelledError,
    ResponseError,
    RetryExhaustedError,
    ServerError,
    ShopifyError,
    TransportError,
    ValidationError,
)
from .pagination import Pagination, parse_link_header  # noqa: E402

__all__ = [
    "__version__",
    "ApiResponse",
    "ConfigurationError",
    "DecodeError",
    "Pagination",
    "RateLimitInfo",
    "RateLimitedError",
    "RequestCancelledError",
    "ResponseError",
    "RetryExhaustedError",
    "RetryPolicy",
    "ServerError",
    "Settings",
    "ShopifyClient",
    "ShopifyError",
    "TransportError",
    "ValidationError",
    "get_settings",
    "parse_link_header",
]

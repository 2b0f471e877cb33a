"""Shopify Admin REST API client with retries, rate limiting, and pagination.

Implements the HTTP invoker every resource service goes through:
- Builds ``https://{shop}/admin/api/{version}/{path}`` URLs
- Authenticates with an access token or private app basic auth
- Encodes query options, leaving out everything the caller did not set
- Retries 429, retryable 5xx and network failures with capped exponential backoff
- Decodes JSON bodies into response envelopes and errors into exceptions
"""

import random
import re
import threading
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from logging import Logger
from typing import Any

import requests
from pydantic import BaseModel, StrictInt
from pydantic import ValidationError as PydanticValidationError

from shopify_admin import __version__
from shopify_admin.config import Settings, get_settings, normalize_shop_name
from shopify_admin.errors import (
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
    decode_error_body,
)
from shopify_admin.logging_config import get_logger
from shopify_admin.models.base import Envelope
from shopify_admin.options import encode_query
from shopify_admin.pagination import Pagination, parse_link_header
from shopify_admin.resources import (
    ApplicationChargeService,
    AssetService,
    BlogService,
    CollectionService,
    CollectService,
    CustomCollectionService,
    CustomerAddressService,
    CustomerService,
    DraftOrderService,
    InventoryItemService,
    InventoryLevelService,
    LocationService,
    OrderService,
    PageService,
    ProductService,
    ShippingZoneService,
    ShopService,
    SmartCollectionService,
    WebhookService,
)

API_VERSION_PATTERN = re.compile(r"^(\d{4}-\d{2}|unstable)$")
CALL_LIMIT_HEADER = "X-Shopify-Shop-Api-Call-Limit"
USER_AGENT = f"shopify-admin/{__version__}"

# Network failures worth another attempt; a reset while reading the body
# surfaces as ChunkedEncodingError
RETRYABLE_TRANSPORT_ERRORS = (
    requests.exceptions.ConnectionError,
    requests.exceptions.Timeout,
    requests.exceptions.ChunkedEncodingError,
)

QueryOptions = BaseModel | Mapping[str, Any] | None


@dataclass(frozen=True)
class RetryPolicy:
    """When and how long to wait before repeating a failed request.

    Attributes:
        max_retries: Retries after the first attempt; 0 disables retrying.
        initial_backoff: Base of the exponential backoff, in seconds.
        max_backoff: Upper bound for any single wait, Retry-After included.
        retry_statuses: 5xx statuses worth another attempt. 429 is always retried.
    """

    max_retries: int = 3
    initial_backoff: float = 1.0
    max_backoff: float = 60.0
    retry_statuses: frozenset[int] = field(
        default_factory=lambda: frozenset({500, 502, 503, 504})
    )

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ConfigurationError("max_retries must not be negative")
        if self.initial_backoff < 0 or self.max_backoff < 0:
            raise ConfigurationError("backoff values must not be negative")

    def backoff(self, retry: int) -> float:
        """Calculate exponential backoff time with jitter.

        Uses the formula: min(max_backoff, initial_backoff * 2^retry + random(0, 1))

        Args:
            retry: Number of retries already made (0 before the first retry).

        Returns:
            Number of seconds to wait before the next attempt.
        """
        exponential_wait = self.initial_backoff * 2**retry
        jitter = random.uniform(0, 1)
        return min(self.max_backoff, exponential_wait + jitter)


def parse_retry_after(value: str | None) -> float | None:
    """Read a ``Retry-After`` header given in seconds or as an HTTP date.

    Returns:
        Seconds to wait (never negative), or None if absent or unreadable.
    """
    if not value or not value.strip():
        return None
    value = value.strip()

    try:
        return max(0.0, float(value))
    except ValueError:
        pass

    try:
        retry_at = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if retry_at.tzinfo is None:
        retry_at = retry_at.replace(tzinfo=timezone.utc)
    return max(0.0, (retry_at - datetime.now(timezone.utc)).total_seconds())


@dataclass(frozen=True)
class RateLimitInfo:
    """Rate limit state reported with the last response.

    Attributes:
        request_count: Calls currently in the leaky bucket.
        bucket_size: Bucket capacity.
        retry_after_seconds: Wait the API asked for, if any.
    """

    request_count: int | None = None
    bucket_size: int | None = None
    retry_after_seconds: float | None = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "RateLimitInfo":
        """Parse ``X-Shopify-Shop-Api-Call-Limit`` (e.g. ``"32/40"``) and ``Retry-After``."""
        request_count: int | None = None
        bucket_size: int | None = None

        call_limit = headers.get(CALL_LIMIT_HEADER)
        if call_limit:
            used, _, size = call_limit.partition("/")
            try:
                request_count, bucket_size = int(used), int(size)
            except ValueError:
                request_count, bucket_size = None, None

        return cls(
            request_count=request_count,
            bucket_size=bucket_size,
            retry_after_seconds=parse_retry_after(headers.get("Retry-After")),
        )

    @property
    def remaining(self) -> int | None:
        if self.request_count is None or self.bucket_size is None:
            return None
        return self.bucket_size - self.request_count


@dataclass
class ApiResponse:
    """A successful response: status, headers and decoded JSON body."""

    status_code: int
    headers: Mapping[str, str]
    data: Any

    @property
    def pagination(self) -> Pagination:
        return parse_link_header(self.headers.get("Link"))


class _CountEnvelope(Envelope):
    count: StrictInt


class ShopifyClient:
    """REST client for the Shopify Admin API.

    This client provides:
    - Typed resource services (``client.orders``, ``client.customers``, ...)
    - Automatic retries with backoff on 429, retryable 5xx and network errors
    - Link header pagination for list endpoints
    - Structured exceptions for every failure

    Example:
        >>> with ShopifyClient("my-shop", access_token="shpat_...") as client:
        ...     for order in client.orders.iter_all(OrderListOptions(status="any")):
        ...         print(order.name)

        >>> # Or configured from the environment
        >>> client = ShopifyClient.from_settings()
        >>> client.orders.count()
    """

    def __init__(
        self,
        shop_name: str,
        *,
        access_token: str | None = None,
        api_key: str | None = None,
        password: str | None = None,
        api_version: str | None = None,
        domain: str = "myshopify.com",
        max_retries: int = 3,
        timeout: float = 30.0,
        retry_policy: RetryPolicy | None = None,
        session: requests.Session | None = None,
        logger: Logger | None = None,
    ):
        """Initialize the Shopify client.

        Args:
            shop_name: Shop handle, domain or URL.
            access_token: Admin API access token. Takes precedence over basic auth.
            api_key: Private app API key, used with ``password``.
            password: Private app password.
            api_version: ``YYYY-MM`` or ``unstable``; anything else uses the
                unversioned ``admin`` prefix.
            domain: Domain appended to bare shop handles.
            max_retries: Retries after the first attempt. Ignored when
                ``retry_policy`` is given.
            timeout: Per request timeout in seconds.
            retry_policy: Full retry configuration.
            session: Session to send requests with. A new one by default. The
                client sets its auth header or credentials on this session, so
                a session passed in should not be shared between clients of
                different shops or credentials.
            logger: Logger for request and retry events.

        Raises:
            ConfigurationError: If the shop name is empty or no credentials are given.
        """
        self._logger = logger or get_logger("client")

        host = normalize_shop_name(shop_name or "", domain)
        if not host:
            raise ConfigurationError("A shop name is required")
        self._host = host

        self._api_version = (api_version or "").strip()
        if API_VERSION_PATTERN.match(self._api_version):
            self._path_prefix = f"admin/api/{self._api_version}"
        else:
            if self._api_version:
                self._logger.warning(
                    "Unrecognised API version, using unversioned paths",
                    extra={"api_version": self._api_version},
                )
            self._api_version = ""
            self._path_prefix = "admin"

        self._timeout = timeout
        self._retry_policy = retry_policy or RetryPolicy(max_retries=max_retries)
        self._rate_limits: RateLimitInfo | None = None

        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/json",
                "User-Agent": USER_AGENT,
            }
        )
        if access_token:
            self._session.headers["X-Shopify-Access-Token"] = access_token
        elif api_key and password:
            self._session.auth = (api_key, password)
        else:
            raise ConfigurationError(
                "Either an access token or an API key and password are required"
            )

        self.orders = OrderService(self)
        self.customers = CustomerService(self)
        self.customer_addresses = CustomerAddressService(self)
        self.webhooks = WebhookService(self)
        self.inventory_items = InventoryItemService(self)
        self.inventory_levels = InventoryLevelService(self)
        self.locations = LocationService(self)
        self.collections = CollectionService(self)
        self.custom_collections = CustomCollectionService(self)
        self.smart_collections = SmartCollectionService(self)
        self.collects = CollectService(self)
        self.pages = PageService(self)
        self.blogs = BlogService(self)
        self.shop = ShopService(self)
        self.assets = AssetService(self)
        self.application_charges = ApplicationChargeService(self)
        self.shipping_zones = ShippingZoneService(self)
        self.draft_orders = DraftOrderService(self)
        self.products = ProductService(self)

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **kwargs: Any) -> "ShopifyClient":
        """Create a client from application settings.

        Args:
            settings: Application settings. If None, loads from environment.
            **kwargs: Passed through to the constructor (e.g. ``session``).

        Returns:
            Configured client.
        """
        settings = settings or get_settings()
        retry_policy = RetryPolicy(
            max_retries=settings.shopify_max_retries,
            initial_backoff=settings.shopify_initial_backoff,
            max_backoff=settings.shopify_max_backoff,
        )
        return cls(
            settings.shop_host,
            access_token=settings.shopify_access_token,
            api_key=settings.shopify_api_key,
            password=settings.shopify_password,
            api_version=settings.shopify_api_version,
            domain=settings.shopify_domain,
            timeout=settings.shopify_timeout,
            retry_policy=retry_policy,
            **kwargs,
        )

    @property
    def host(self) -> str:
        return self._host

    @property
    def api_version(self) -> str:
        """The API version in use, or an empty string for unversioned paths."""
        return self._api_version

    @property
    def path_prefix(self) -> str:
        return self._path_prefix

    @property
    def retry_policy(self) -> RetryPolicy:
        return self._retry_policy

    @property
    def rate_limits(self) -> RateLimitInfo | None:
        """Rate limit state from the most recent response, if any."""
        return self._rate_limits

    def url_for(self, path: str) -> str:
        """Build the absolute URL of an API path such as ``orders/count.json``."""
        return f"https://{self._host}/{self._path_prefix}/{path.lstrip('/')}"

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def __enter__(self) -> "ShopifyClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # Entry points

    def get(
        self,
        path: str,
        envelope: type[BaseModel] | None = None,
        options: QueryOptions = None,
        *,
        cancel_event: threading.Event | None = None,
    ) -> Any:
        """GET ``path`` and decode the body into ``envelope``.

        Returns:
            The envelope instance, or the raw decoded JSON if no envelope is given.
        """
        response = self.request("GET", path, options=options, cancel_event=cancel_event)
        return self._decode(response, envelope)

    def get_with_pagination(
        self,
        path: str,
        envelope: type[BaseModel] | None,
        options: QueryOptions = None,
        *,
        cancel_event: threading.Event | None = None,
    ) -> tuple[Any, Pagination]:
        """GET a list page and return it with the options for adjacent pages."""
        response = self.request("GET", path, options=options, cancel_event=cancel_event)
        return self._decode(response, envelope), response.pagination

    def post(
        self,
        path: str,
        body: Any = None,
        envelope: type[BaseModel] | None = None,
        options: QueryOptions = None,
        *,
        cancel_event: threading.Event | None = None,
    ) -> Any:
        response = self.request(
            "POST", path, options=options, body=body, cancel_event=cancel_event
        )
        return self._decode(response, envelope)

    def put(
        self,
        path: str,
        body: Any = None,
        envelope: type[BaseModel] | None = None,
        options: QueryOptions = None,
        *,
        cancel_event: threading.Event | None = None,
    ) -> Any:
        response = self.request(
            "PUT", path, options=options, body=body, cancel_event=cancel_event
        )
        return self._decode(response, envelope)

    def delete(
        self,
        path: str,
        options: QueryOptions = None,
        *,
        cancel_event: threading.Event | None = None,
    ) -> None:
        self.request("DELETE", path, options=options, cancel_event=cancel_event)

    def count(
        self,
        path: str,
        options: QueryOptions = None,
        *,
        cancel_event: threading.Event | None = None,
    ) -> int:
        """GET a count endpoint and return the number it reports.

        Raises:
            DecodeError: If the body is not ``{"count": <int>}``.
        """
        return self.get(path, _CountEnvelope, options, cancel_event=cancel_event).count

    def request(
        self,
        method: str,
        path: str,
        *,
        options: QueryOptions = None,
        body: Any = None,
        cancel_event: threading.Event | None = None,
    ) -> ApiResponse:
        """Send a request, retrying retryable failures within the retry policy.

        Args:
            method: HTTP method.
            path: API path relative to the version prefix.
            options: Query options; unset values are left out.
            body: JSON body. Pydantic models are serialized without unset fields.
            cancel_event: Setting it aborts the call before the next attempt,
                during a backoff wait, or after the last attempt failed. A
                request already on the wire is not interrupted.

        Returns:
            The successful response.

        Raises:
            ValidationError: The API rejected the request (4xx).
            ServerError: A non-retryable 5xx status.
            TransportError: A non-retryable network failure.
            DecodeError: A 2xx body that is not JSON.
            RetryExhaustedError: Every attempt failed with a retryable error.
            RequestCancelledError: ``cancel_event`` was set.
        """
        url = self.url_for(path)
        params = encode_query(options)
        json_body = self._serialize_body(body)
        policy = self._retry_policy

        last_error: ShopifyError | None = None
        attempts = 0

        for retry in range(policy.max_retries + 1):
            self._check_cancelled(cancel_event, method, path)
            attempts += 1

            try:
                return self._send(method, url, params, json_body, attempt=attempts)
            except ShopifyError as e:
                if not self._is_retryable(e):
                    self._logger.error(
                        "Shopify API request failed",
                        extra={
                            "method": method,
                            "path": path,
                            "status_code": getattr(e, "status_code", None),
                            "error": str(e),
                        },
                    )
                    raise
                last_error = e

            if retry == policy.max_retries:
                break

            backoff_time = self._retry_delay(last_error, retry)
            self._logger.warning(
                "Retryable error from Shopify API, backing off",
                extra={
                    "method": method,
                    "path": path,
                    "attempt": attempts,
                    "status_code": getattr(last_error, "status_code", None),
                    "backoff_seconds": round(backoff_time, 2),
                    "error": str(last_error),
                },
            )
            self._wait(backoff_time, cancel_event, method, path)

        self._check_cancelled(cancel_event, method, path)
        self._logger.error(
            "Retries exhausted for Shopify API request",
            extra={"method": method, "path": path, "attempts": attempts},
        )
        raise RetryExhaustedError(last_error, attempts) from last_error

    # Internals

    def _send(
        self,
        method: str,
        url: str,
        params: dict[str, str],
        json_body: Any,
        attempt: int,
    ) -> ApiResponse:
        self._logger.debug(
            "Sending Shopify API request",
            extra={"method": method, "url": url, "params": params, "attempt": attempt},
        )

        try:
            response = self._session.request(
                method,
                url,
                params=params or None,
                json=json_body,
                timeout=self._timeout,
            )
        except requests.exceptions.RequestException as e:
            # Retried only for RETRYABLE_TRANSPORT_ERRORS
            raise TransportError(f"{method} {url} failed: {e}") from e

        self._rate_limits = RateLimitInfo.from_headers(response.headers)

        if not 200 <= response.status_code < 300:
            raise self._error_for(response)

        return ApiResponse(
            status_code=response.status_code,
            headers=response.headers,
            data=self._decode_json(response),
        )

    def _is_retryable(self, error: ShopifyError) -> bool:
        if isinstance(error, RateLimitedError):
            return True
        if isinstance(error, ServerError):
            return error.status_code in self._retry_policy.retry_statuses
        if isinstance(error, TransportError):
            return isinstance(
                error.__cause__,
                RETRYABLE_TRANSPORT_ERRORS,
            )
        return False

    def _retry_delay(self, error: ShopifyError, retry: int) -> float:
        retry_after = getattr(error, "retry_after", None)
        if retry_after is not None:
            return min(retry_after, self._retry_policy.max_backoff)
        return self._retry_policy.backoff(retry)

    def _check_cancelled(
        self, cancel_event: threading.Event | None, method: str, path: str
    ) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise RequestCancelledError(f"{method} {path} was cancelled")

    def _wait(
        self,
        seconds: float,
        cancel_event: threading.Event | None,
        method: str,
        path: str,
    ) -> None:
        if cancel_event is None:
            time.sleep(seconds)
            return
        # wait() returns True as soon as the event is set
        if cancel_event.wait(seconds):
            raise RequestCancelledError(f"{method} {path} was cancelled")

    @staticmethod
    def _serialize_body(body: Any) -> Any:
        if isinstance(body, BaseModel):
            return body.model_dump(mode="json", by_alias=True, exclude_none=True)
        return body

    @staticmethod
    def _decode_json(response: requests.Response) -> Any:
        if not response.content or not response.content.strip():
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(
                f"Response body is not valid JSON: {e}",
                status_code=response.status_code,
                body=response.text,
            ) from e

    @staticmethod
    def _error_for(response: requests.Response) -> ResponseError:
        try:
            body: Any = response.json()
        except ValueError:
            body = response.text or None

        message, errors, field_errors = decode_error_body(body)
        if not message:
            message = response.reason or f"HTTP {response.status_code}"

        status_code = response.status_code
        kwargs: dict[str, Any] = {
            "status_code": status_code,
            "errors": errors,
            "field_errors": field_errors,
            "body": body,
            "retry_after": parse_retry_after(response.headers.get("Retry-After")),
        }

        if status_code == 429:
            return RateLimitedError(message, **kwargs)
        if status_code >= 500:
            return ServerError(message, **kwargs)
        if status_code >= 400:
            return ValidationError(message, **kwargs)
        return ResponseError(message, **kwargs)

    def _decode(self, response: ApiResponse, envelope: type[BaseModel] | None) -> Any:
        if envelope is None:
            return response.data
        try:
            return envelope.model_validate(response.data)
        except PydanticValidationError as e:
            raise DecodeError(
                f"Response does not match {envelope.__name__}: {e.error_count()} error(s)",
                status_code=response.status_code,
                body=response.data,
            ) from e

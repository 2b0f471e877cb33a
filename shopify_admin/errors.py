"""Exception hierarchy raised by the Shopify Admin client.

Every call either returns a decoded value or raises one of these. Callers
that only care about "did it work" can catch ``ShopifyError``; the subclasses
separate an API rejection (``ValidationError``) from an API that stayed
unavailable for the whole retry budget (``RetryExhaustedError``).
"""

from typing import Any


class ShopifyError(Exception):
    """Base exception for Shopify client errors."""

    pass


class ConfigurationError(ShopifyError):
    """Raised when the client is constructed with unusable settings."""

    pass


class ResponseError(ShopifyError):
    """Raised when the API answers with a non-2xx status.

    Attributes:
        status_code: HTTP status of the response.
        message: Human readable summary of the decoded error body.
        errors: Flat, sorted list of messages ("field: message" for field errors).
        field_errors: Messages grouped by field name when the body carried a map.
        body: Decoded JSON body, or the raw text if it was not JSON.
        retry_after: Seconds the API asked us to wait (``Retry-After``), if it said.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        errors: list[str] | None = None,
        field_errors: dict[str, list[str]] | None = None,
        body: Any = None,
        retry_after: float | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors or []
        self.field_errors = field_errors or {}
        self.body = body
        self.retry_after = retry_after

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.status_code}: {self.message}"


class ValidationError(ResponseError):
    """The API rejected the request (4xx). Never retried."""

    pass


class RateLimitedError(ResponseError):
    """The API throttled the request (429)."""

    pass


class ServerError(ResponseError):
    """The API failed with a 5xx status."""

    pass


class TransportError(ShopifyError):
    """No response was received (connection reset, DNS failure, timeout).

    The underlying ``requests`` exception is kept as ``__cause__``.
    """

    pass


class DecodeError(ShopifyError):
    """The response body was not JSON or did not match the expected shape."""

    def __init__(self, message: str, status_code: int | None = None, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RetryExhaustedError(ShopifyError):
    """Every allowed attempt failed with a retryable error.

    Attributes:
        last_error: The error from the final attempt.
        attempts: Total number of attempts made, first one included.
    """

    def __init__(self, last_error: ShopifyError, attempts: int):
        super().__init__(f"Gave up after {attempts} attempt(s): {last_error}")
        self.last_error = last_error
        self.attempts = attempts


class RequestCancelledError(ShopifyError):
    """The caller's cancel event was set before the call completed."""

    pass


def decode_error_body(body: Any) -> tuple[str, list[str], dict[str, list[str]]]:
    """Flatten the error payload shapes Shopify uses.

    Handles ``{"errors": "msg"}``, ``{"errors": ["a", "b"]}``,
    ``{"errors": {"field": ["m1", "m2"]}}``, ``{"errors": {"field": "m"}}``
    and ``{"error": "msg", "error_description": "..."}``.

    Returns:
        Tuple of (message, sorted messages, messages by field).
    """
    if not isinstance(body, dict):
        return "", [], {}

    if "errors" in body:
        raw = body["errors"]
    elif "error" in body:
        raw = body["error"]
        if body.get("error_description"):
            raw = f"{raw}: {body['error_description']}"
    else:
        return "", [], {}

    if isinstance(raw, str):
        return raw, [raw], {}

    if isinstance(raw, list):
        messages = [str(item) for item in raw]
        return ", ".join(messages), messages, {}

    if isinstance(raw, dict):
        field_errors: dict[str, list[str]] = {}
        for field_name, value in raw.items():
            if isinstance(value, list):
                field_errors[field_name] = [str(v) for v in value]
            else:
                field_errors[field_name] = [str(value)]
        messages = sorted(
            f"{field_name}: {msg}"
            for field_name, values in field_errors.items()
            for msg in values
        )
        return ", ".join(messages), messages, field_errors

    return str(raw), [str(raw)], {}

"""Tests for the HTTP invoker.

Tests cover:
- URL, API version and authentication setup
- Query encoding and JSON bodies on the wire
- Envelope decoding and decode errors
- Retry and backoff on 429, 5xx and network failures
- Error mapping for non-retryable statuses
- Cancellation and rate limit tracking
"""

import logging
import threading
from datetime import datetime, timezone
from unittest.mock import MagicMock, call

import pytest
import requests

from conftest import API_VERSION, BASE_URL, HOST, SHOP, make_response, requested
from shopify_admin.client import (
    RateLimitInfo,
    RetryPolicy,
    ShopifyClient,
    parse_retry_after,
)
from shopify_admin.config import Settings
from shopify_admin.errors import (
    ConfigurationError,
    DecodeError,
    RateLimitedError,
    RequestCancelledError,
    RetryExhaustedError,
    ServerError,
    TransportError,
    ValidationError,
)
from shopify_admin.models import Order, envelope_for
from shopify_admin.options import ListOptions


class TestClientConstruction:
    """Tests for host, path prefix and credentials."""

    @pytest.mark.parametrize(
        "shop_name",
        [
            "fooshop",
            "fooshop.myshopify.com",
            "https://fooshop.myshopify.com",
            "https://fooshop.myshopify.com/",
            "http://fooshop.myshopify.com/admin",
        ],
    )
    def test_shop_name_is_normalised(self, shop_name: str, session):
        """Handles, domains and URLs should all resolve to the same host."""
        client = ShopifyClient(shop_name, access_token="t", session=session)
        assert client.host == HOST

    def test_versioned_url(self, client):
        assert client.url_for("orders.json") == f"{BASE_URL}/orders.json"
        assert client.url_for("/orders/count.json") == f"{BASE_URL}/orders/count.json"

    def test_unstable_version(self, session):
        client = ShopifyClient(SHOP, access_token="t", api_version="unstable", session=session)
        assert client.path_prefix == "admin/api/unstable"

    @pytest.mark.parametrize("api_version", [None, "", "2024-1", "latest", "24-01"])
    def test_missing_or_invalid_version_uses_unversioned_prefix(self, api_version, session):
        """Anything but YYYY-MM or 'unstable' should fall back to plain admin paths."""
        client = ShopifyClient(SHOP, access_token="t", api_version=api_version, session=session)
        assert client.path_prefix == "admin"
        assert client.api_version == ""
        assert client.url_for("shop.json") == f"https://{HOST}/admin/shop.json"

    def test_access_token_header(self, client, session):
        assert session.headers["X-Shopify-Access-Token"] == "shpat_test"
        assert session.headers["Accept"] == "application/json"
        assert session.headers["User-Agent"].startswith("shopify-admin/")
        assert session.auth is None

    def test_basic_auth_for_private_apps(self, session):
        ShopifyClient(SHOP, api_key="key", password="secret", session=session)
        assert session.auth == ("key", "secret")
        assert "X-Shopify-Access-Token" not in session.headers

    def test_default_sessions_are_not_shared(self):
        first = ShopifyClient(SHOP, access_token="shpat_one")
        second = ShopifyClient("barshop", access_token="shpat_two")

        assert first._session is not second._session
        assert first._session.headers["X-Shopify-Access-Token"] == "shpat_one"
        assert second._session.headers["X-Shopify-Access-Token"] == "shpat_two"

    def test_missing_credentials_raise(self, session):
        with pytest.raises(ConfigurationError):
            ShopifyClient(SHOP, session=session)

    def test_api_key_without_password_raises(self, session):
        with pytest.raises(ConfigurationError):
            ShopifyClient(SHOP, api_key="key", session=session)

    def test_empty_shop_name_raises(self, session):
        with pytest.raises(ConfigurationError):
            ShopifyClient("", access_token="t", session=session)

    def test_max_retries_sets_default_policy(self, session):
        client = ShopifyClient(SHOP, access_token="t", max_retries=7, session=session)
        assert client.retry_policy.max_retries == 7
        assert client.retry_policy.retry_statuses == frozenset({500, 502, 503, 504})

    def test_negative_retries_rejected(self):
        with pytest.raises(ConfigurationError):
            RetryPolicy(max_retries=-1)

    def test_from_settings(self, session):
        settings = Settings(
            shopify_shop_name="https://fooshop.myshopify.com/",
            shopify_access_token="shpat_env",
            shopify_api_version="2023-10",
            shopify_max_retries=5,
            shopify_initial_backoff=0.5,
            shopify_max_backoff=10.0,
            _env_file=None,
        )

        client = ShopifyClient.from_settings(settings, session=session)

        assert client.host == HOST
        assert client.path_prefix == "admin/api/2023-10"
        assert client.retry_policy == RetryPolicy(
            max_retries=5, initial_backoff=0.5, max_backoff=10.0
        )
        assert session.headers["X-Shopify-Access-Token"] == "shpat_env"

    def test_context_manager_closes_session(self, session):
        session.close = MagicMock()
        with ShopifyClient(SHOP, access_token="t", session=session) as client:
            assert client.host == HOST
        session.close.assert_called_once()


class TestRequests:
    """Tests for what goes on the wire and how bodies decode."""

    def test_get_returns_raw_json_without_envelope(self, client, session):
        session.request.return_value = make_response(200, {"shop": {"id": 1}})

        assert client.get("shop.json") == {"shop": {"id": 1}}

        method, url, kwargs = requested(session)
        assert method == "GET"
        assert url == f"{BASE_URL}/shop.json"
        assert kwargs["params"] is None
        assert kwargs["json"] is None
        assert kwargs["timeout"] == 30.0

    def test_options_are_encoded_into_params(self, client, session):
        session.request.return_value = make_response(200, {"orders": []})
        options = ListOptions(
            limit=2,
            created_at_min=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )

        client.get("orders.json", options=options)

        _, _, kwargs = requested(session)
        assert kwargs["params"] == {"limit": "2", "created_at_min": "2024-01-01T00:00:00Z"}

    def test_mapping_options_are_accepted(self, client, session):
        session.request.return_value = make_response(200, {"orders": []})

        client.get("orders.json", options={"status": "any", "limit": None})

        _, _, kwargs = requested(session)
        assert kwargs["params"] == {"status": "any"}

    def test_model_body_leaves_out_unset_fields(self, client, session):
        session.request.return_value = make_response(201, {"order": {"id": 1}})

        client.post("orders.json", Order(id=1, email="a@example.com"))

        method, _, kwargs = requested(session)
        assert method == "POST"
        assert kwargs["json"] == {"id": 1, "email": "a@example.com"}

    def test_put_sends_dict_body(self, client, session):
        session.request.return_value = make_response(200, {"order": {"id": 1}})

        client.put("orders/1.json", {"order": {"id": 1, "note": "x"}})

        method, url, kwargs = requested(session)
        assert method == "PUT"
        assert url == f"{BASE_URL}/orders/1.json"
        assert kwargs["json"] == {"order": {"id": 1, "note": "x"}}

    def test_delete_returns_none_on_empty_body(self, client, session):
        session.request.return_value = make_response(200)

        assert client.delete("orders/1.json") is None
        assert requested(session)[0] == "DELETE"

    def test_empty_body_decodes_to_empty_dict(self, client, session):
        session.request.return_value = make_response(200, text="  ")
        assert client.get("shop.json") == {}

    def test_envelope_decoding(self, client, session):
        session.request.return_value = make_response(
            200, {"order": {"id": 450789469, "email": "bob@example.com"}}
        )

        decoded = client.get("orders/450789469.json", envelope_for("order", Order))

        assert isinstance(decoded.order, Order)
        assert decoded.order.id == 450789469

    def test_get_with_pagination_returns_links(self, client, session):
        session.request.return_value = make_response(
            200,
            {"orders": [{"id": 1}]},
            headers={"Link": f'<{BASE_URL}/orders.json?page_info=abc&limit=1>; rel="next"'},
        )

        decoded, pagination = client.get_with_pagination(
            "orders.json", envelope_for("orders", Order, many=True)
        )

        assert [o.id for o in decoded.orders] == [1]
        assert pagination.next_page_options.page_info == "abc"
        assert pagination.previous_page_options is None


class TestDecodeErrors:
    """Tests for 2xx bodies that cannot be decoded."""

    def test_invalid_json_raises_decode_error(self, client, session):
        session.request.return_value = make_response(200, text="<html>oops</html>")

        with pytest.raises(DecodeError) as exc_info:
            client.get("shop.json")

        assert exc_info.value.status_code == 200
        assert session.request.call_count == 1

    def test_envelope_mismatch_raises_decode_error(self, client, session):
        session.request.return_value = make_response(200, {"orders": "nope"})

        with pytest.raises(DecodeError):
            client.get("orders.json", envelope_for("orders", Order, many=True))

        assert session.request.call_count == 1

    def test_missing_envelope_key_raises_decode_error(self, client, session):
        session.request.return_value = make_response(200, {"customers": []})

        with pytest.raises(DecodeError):
            client.get("orders.json", envelope_for("orders", Order, many=True))

    def test_null_singular_payload_is_allowed(self, client, session):
        session.request.return_value = make_response(200, {"order": None})

        decoded = client.get("orders/1.json", envelope_for("order", Order))

        assert decoded.order is None


class TestCount:
    """Tests for count endpoints."""

    def test_count(self, client, session):
        session.request.return_value = make_response(200, {"count": 5})
        assert client.count("orders/count.json") == 5

    @pytest.mark.parametrize("body", [{}, {"count": "five"}, {"total": 5}, [5]])
    def test_unexpected_count_body_raises(self, client, session, body):
        session.request.return_value = make_response(200, body)

        with pytest.raises(DecodeError):
            client.count("orders/count.json")


class TestRetries:
    """Tests for retry and backoff behaviour."""

    def test_429_without_retry_after_backs_off_exponentially(
        self, client, session, sleep, no_jitter
    ):
        """429s should be retried with 1s, 2s, ... waits until a 2xx arrives."""
        session.request.side_effect = [
            make_response(429, {"errors": "Exceeded 2 calls per second for api client."}),
            make_response(429, {"errors": "Exceeded 2 calls per second for api client."}),
            make_response(200, {"count": 3}),
        ]

        assert client.count("orders/count.json") == 3

        assert session.request.call_count == 3
        assert sleep.call_args_list == [call(1.0), call(2.0)]

    def test_retries_resend_identical_request(self, client, session):
        session.request.side_effect = [
            make_response(429),
            make_response(200, {"orders": []}),
        ]

        client.get("orders.json", options=ListOptions(limit=10))

        first, second = session.request.call_args_list
        assert first == second

    def test_retry_after_seconds_is_honoured(self, client, session, sleep):
        session.request.side_effect = [
            make_response(429, headers={"Retry-After": "2.0"}),
            make_response(200, {"count": 1}),
        ]

        client.count("orders/count.json")

        sleep.assert_called_once_with(2.0)

    def test_retry_after_on_server_error_is_honoured(self, client, session, sleep):
        session.request.side_effect = [
            make_response(503, headers={"Retry-After": "7"}),
            make_response(200, {"shop": {"id": 1}}),
        ]

        client.get("shop.json")

        sleep.assert_called_once_with(7.0)

    def test_retry_after_is_capped(self, client, session, sleep):
        session.request.side_effect = [
            make_response(429, headers={"Retry-After": "3600"}),
            make_response(200, {"count": 1}),
        ]

        client.count("orders/count.json")

        sleep.assert_called_once_with(60.0)

    def test_backoff_is_capped(self, session, sleep, no_jitter):
        policy = RetryPolicy(max_retries=3, initial_backoff=4.0, max_backoff=10.0)
        client = ShopifyClient(SHOP, access_token="t", retry_policy=policy, session=session)
        session.request.return_value = make_response(503)

        with pytest.raises(RetryExhaustedError):
            client.get("shop.json")

        assert sleep.call_args_list == [call(4.0), call(8.0), call(10.0)]

    def test_422_is_not_retried_and_carries_field_messages(self, client, session, sleep):
        session.request.return_value = make_response(
            422,
            {"errors": {"name": ["can't be blank"], "email": ["is invalid", "is taken"]}},
        )

        with pytest.raises(ValidationError) as exc_info:
            client.post("customers.json", {"customer": {}})

        error = exc_info.value
        assert error.status_code == 422
        assert error.errors == ["email: is invalid", "email: is taken", "name: can't be blank"]
        assert error.field_errors == {
            "name": ["can't be blank"],
            "email": ["is invalid", "is taken"],
        }
        assert str(error) == "422: email: is invalid, email: is taken, name: can't be blank"
        assert session.request.call_count == 1
        sleep.assert_not_called()

    def test_persistent_503_exhausts_retries(self, client, session, sleep):
        session.request.return_value = make_response(503, {"errors": "Unavailable"})

        with pytest.raises(RetryExhaustedError) as exc_info:
            client.get("orders.json")

        error = exc_info.value
        assert isinstance(error.last_error, ServerError)
        assert error.last_error.status_code == 503
        assert error.attempts == 4
        assert error.__cause__ is error.last_error
        assert session.request.call_count == 4
        assert sleep.call_count == 3

    def test_zero_retries_still_wraps_retryable_error(self, session, sleep):
        client = ShopifyClient(SHOP, access_token="t", max_retries=0, session=session)
        session.request.return_value = make_response(429)

        with pytest.raises(RetryExhaustedError) as exc_info:
            client.get("orders.json")

        assert isinstance(exc_info.value.last_error, RateLimitedError)
        assert exc_info.value.attempts == 1
        sleep.assert_not_called()

    def test_unlisted_5xx_is_not_retried(self, client, session):
        session.request.return_value = make_response(501, {"errors": "Not Implemented"})

        with pytest.raises(ServerError) as exc_info:
            client.get("orders.json")

        assert exc_info.value.status_code == 501
        assert session.request.call_count == 1

    def test_connection_error_is_retried(self, client, session, sleep):
        session.request.side_effect = [
            requests.exceptions.ConnectionError("connection reset"),
            make_response(200, {"count": 2}),
        ]

        assert client.count("orders/count.json") == 2
        assert sleep.call_count == 1

    def test_reset_while_reading_body_is_retried(self, client, session, sleep):
        session.request.side_effect = [
            requests.exceptions.ChunkedEncodingError("Connection reset by peer"),
            make_response(200, {"count": 2}),
        ]

        assert client.count("orders/count.json") == 2
        assert session.request.call_count == 2
        assert sleep.call_count == 1

    def test_persistent_timeout_exhausts_retries(self, client, session):
        session.request.side_effect = requests.exceptions.Timeout("read timed out")

        with pytest.raises(RetryExhaustedError) as exc_info:
            client.get("orders.json")

        last_error = exc_info.value.last_error
        assert isinstance(last_error, TransportError)
        assert isinstance(last_error.__cause__, requests.exceptions.Timeout)
        assert session.request.call_count == 4

    def test_other_request_errors_are_not_retried(self, client, session):
        session.request.side_effect = requests.exceptions.InvalidURL("bad url")

        with pytest.raises(TransportError):
            client.get("orders.json")

        assert session.request.call_count == 1

    def test_retries_are_logged(self, client, session, caplog):
        session.request.side_effect = [make_response(503), make_response(200, {})]

        with caplog.at_level(logging.WARNING, logger="shopify_admin"):
            client.get("shop.json")

        retry_records = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(retry_records) == 1
        assert retry_records[0].status_code == 503
        assert retry_records[0].attempt == 1


class TestErrorMapping:
    """Tests for how non-2xx responses become exceptions."""

    def test_not_found_is_validation_error(self, client, session):
        session.request.return_value = make_response(404, {"errors": "Not Found"})

        with pytest.raises(ValidationError) as exc_info:
            client.get("orders/1.json")

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Not Found"

    def test_oauth_style_error_body(self, client, session):
        session.request.return_value = make_response(
            401,
            {"error": "invalid_token", "error_description": "Token expired"},
        )

        with pytest.raises(ValidationError) as exc_info:
            client.get("shop.json")

        assert exc_info.value.message == "invalid_token: Token expired"

    def test_non_json_error_body_uses_reason(self, client, session):
        session.request.return_value = make_response(400, text="Bad", reason="Bad Request")

        with pytest.raises(ValidationError) as exc_info:
            client.get("shop.json")

        assert exc_info.value.message == "Bad Request"
        assert exc_info.value.body == "Bad"
        assert exc_info.value.errors == []

    def test_rate_limited_error_carries_retry_after(self, session):
        client = ShopifyClient(SHOP, access_token="t", max_retries=0, session=session)
        session.request.return_value = make_response(429, headers={"Retry-After": "4"})

        with pytest.raises(RetryExhaustedError) as exc_info:
            client.get("shop.json")

        assert exc_info.value.last_error.retry_after == 4.0


class TestCancellation:
    """Tests for the cancel event."""

    def test_cancelled_before_first_attempt(self, client, session):
        event = threading.Event()
        event.set()

        with pytest.raises(RequestCancelledError):
            client.get("orders.json", cancel_event=event)

        session.request.assert_not_called()

    def test_cancelled_during_backoff(self, client, session, sleep):
        event = threading.Event()

        def respond(*args, **kwargs):
            event.set()
            return make_response(503)

        session.request.side_effect = respond

        with pytest.raises(RequestCancelledError):
            client.get("orders.json", cancel_event=event)

        assert session.request.call_count == 1
        sleep.assert_not_called()

    def test_cancelled_during_last_attempt(self, session, sleep):
        policy = RetryPolicy(max_retries=1, initial_backoff=0, max_backoff=0)
        client = ShopifyClient(SHOP, access_token="t", retry_policy=policy, session=session)
        event = threading.Event()
        responses = iter([make_response(503), make_response(503)])

        def respond(*args, **kwargs):
            response = next(responses)
            if session.request.call_count == 2:
                event.set()
            return response

        session.request.side_effect = respond

        with pytest.raises(RequestCancelledError):
            client.get("orders.json", cancel_event=event)

        assert session.request.call_count == 2

    def test_unset_event_does_not_interfere(self, client, session):
        session.request.return_value = make_response(200, {"count": 1})
        assert client.count("orders/count.json", cancel_event=threading.Event()) == 1


class TestRateLimits:
    """Tests for rate limit header parsing."""

    def test_call_limit_header_is_tracked(self, client, session):
        assert client.rate_limits is None
        session.request.return_value = make_response(
            200, {}, headers={"X-Shopify-Shop-Api-Call-Limit": "32/40"}
        )

        client.get("shop.json")

        assert client.rate_limits == RateLimitInfo(request_count=32, bucket_size=40)
        assert client.rate_limits.remaining == 8

    def test_malformed_call_limit_header(self):
        info = RateLimitInfo.from_headers({"X-Shopify-Shop-Api-Call-Limit": "lots"})
        assert info.request_count is None
        assert info.remaining is None

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, None),
            ("", None),
            ("2", 2.0),
            ("1.5", 1.5),
            ("-3", 0.0),
            ("soon", None),
            ("Wed, 21 Oct 2015 07:28:00 GMT", 0.0),
        ],
    )
    def test_parse_retry_after(self, value, expected):
        assert parse_retry_after(value) == expected

    def test_parse_retry_after_future_date(self):
        assert 0 < parse_retry_after("Fri, 01 Jan 2100 00:00:00 GMT")


def test_api_version_constant_matches_fixture(client):
    assert client.api_version == API_VERSION

"""Shared fixtures: a client wired to a mocked session, no network, no sleeping."""

import json
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from shopify_admin.client import ShopifyClient
from shopify_admin.config import get_settings

SHOP = "fooshop"
HOST = "fooshop.myshopify.com"
API_VERSION = "2024-01"
BASE_URL = f"https://{HOST}/admin/api/{API_VERSION}"


def make_response(
    status_code: int = 200,
    json_body: Any = None,
    headers: dict[str, str] | None = None,
    text: str | None = None,
    reason: str | None = None,
) -> requests.Response:
    """Build a real ``requests.Response`` without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.encoding = "utf-8"
    if json_body is not None:
        response._content = json.dumps(json_body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    elif text is not None:
        response._content = text.encode("utf-8")
    else:
        response._content = b""
    response.headers.update(headers or {})
    return response


@pytest.fixture
def session():
    """A real session whose ``request`` method is a mock."""
    session = requests.Session()
    session.request = MagicMock(name="request")
    return session


@pytest.fixture
def client(session):
    """Client for fooshop on a fixed API version, using the mocked session."""
    return ShopifyClient(
        SHOP,
        access_token="shpat_test",
        api_version=API_VERSION,
        session=session,
    )


@pytest.fixture(autouse=True)
def sleep(monkeypatch):
    """Replace ``time.sleep`` so backoff never waits."""
    mock_sleep = MagicMock(name="sleep")
    monkeypatch.setattr("shopify_admin.client.time.sleep", mock_sleep)
    return mock_sleep


@pytest.fixture
def no_jitter(monkeypatch):
    """Make backoff deterministic."""
    monkeypatch.setattr("shopify_admin.client.random.uniform", lambda a, b: 0.0)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def requested(session, index: int = -1) -> tuple[str, str, dict[str, Any]]:
    """Return (method, url, kwargs) of a call made on the mocked session."""
    call = session.request.call_args_list[index]
    method, url = call.args
    return method, url, call.kwargs

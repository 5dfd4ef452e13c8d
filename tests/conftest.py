"""Test configuration and fixtures."""

import json
import os

import httpx
import pytest
import structlog

from paypal_async import Client
from paypal_async.core.settings import clear_settings

BASE_URL = "https://paypal.test"

TOKEN = {
    "scope": "https://uri.paypal.com/services/invoicing https://uri.paypal.com/services/payments/payment",
    "access_token": "TESTBEARERTOKEN",
    "token_type": "Bearer",
    "app_id": "APP-80W284485P519543T",
    "expires_in": 32400,
    "nonce": "2022-03-09T22:36:23ZVbB3Xnmfld3nQ8wzl1o2P9_4x7J40HBIWTTQmoD0vYo",
}


class FakePayPal:
    """httpx transport handler standing in for the PayPal API.

    Routes are keyed by ``(method, path)`` and hold either a response factory
    or a ``(status, body)`` pair. Every request is recorded in ``requests``.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes = {}
        self.token_calls = 0
        self.route("POST", "/v1/oauth2/token", 200, TOKEN)

    def route(self, method, path, status=200, body=None, headers=None):
        self.routes[(method, path)] = (status, body, headers or {})

    def fail(self, method, path, exc):
        self.routes[(method, path)] = exc

    def requests_to(self, path):
        return [r for r in self.requests if r.url.path == path]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/v1/oauth2/token":
            self.token_calls += 1
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"name": "RESOURCE_NOT_FOUND", "message": "no route"})
        if isinstance(route, Exception):
            raise route
        status, body, headers = route
        if body is None:
            return httpx.Response(status, headers=headers)
        if isinstance(body, bytes):
            return httpx.Response(status, content=body, headers=headers)
        if isinstance(body, str):
            return httpx.Response(status, text=body, headers=headers)
        return httpx.Response(status, json=body, headers=headers)


def last_json(request: httpx.Request):
    return json.loads(request.content)


@pytest.fixture(autouse=True)
def setup_test_environment():
    """Setup test environment variables before each test."""
    original_env = dict(os.environ)

    os.environ.update(
        {
            "PAYPAL_CLIENTID": "test_client_id",
            "PAYPAL_SECRET": "test_secret",
            "PAYPAL_ENVIRONMENT": "sandbox",
            "ENVIRONMENT": "test",
            "DISABLE_TRACING": "true",
        }
    )
    clear_settings()

    yield

    clear_settings()
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Keep logger configuration from leaking between tests."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def paypal():
    return FakePayPal()


@pytest.fixture
def http_client(paypal):
    return httpx.AsyncClient(transport=httpx.MockTransport(paypal))


@pytest.fixture
def client(http_client):
    return Client("test_client_id", "test_secret", base_url=BASE_URL, http_client=http_client)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "sandbox: marks tests that call the live PayPal sandbox"
    )

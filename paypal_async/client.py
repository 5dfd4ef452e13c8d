"""
Async PayPal REST client.

``Client`` owns the credentials, one cached OAuth2 access token and an
``httpx.AsyncClient``. Every API operation is an ``Endpoint`` passed to
``Client.execute``, which fetches or reuses the token, sends the request and
decodes the response into the endpoint's model.
"""

import asyncio
import time
from enum import Enum
from functools import lru_cache
from typing import Any, Optional, TypeVar

import httpx
import structlog
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode
from pydantic import TypeAdapter

from paypal_async.core.logging import ClientEvents
from paypal_async.core.metrics import request_latency, requests_total, token_refresh_total
from paypal_async.core.settings import Settings, get_settings
from paypal_async.data.common import PayPalModel
from paypal_async.endpoint import Endpoint, HeaderParams, Prefer, query_params
from paypal_async.errors import (
    ApiError,
    AuthError,
    DecodeError,
    RequestError,
    StatusError,
)

R = TypeVar("R")

TOKEN_PATH = "/v1/oauth2/token"

log = structlog.get_logger(__name__)
tracer = trace.get_tracer(__name__)


@lru_cache(maxsize=None)
def response_adapter(model: Any) -> TypeAdapter:
    """Validator for an endpoint response type: a model, a container or any other annotation."""
    return TypeAdapter(model)


class Environment(str, Enum):
    SANDBOX = "sandbox"
    LIVE = "live"

    @property
    def base_url(self) -> str:
        if self is Environment.LIVE:
            return "https://api-m.paypal.com"
        return "https://api-m.sandbox.paypal.com"


class AccessToken(PayPalModel):
    """OAuth2 client-credentials token as returned by ``/v1/oauth2/token``."""

    scope: Optional[str] = None
    access_token: str
    token_type: str = "Bearer"
    app_id: Optional[str] = None
    expires_in: int
    nonce: Optional[str] = None


class Client:
    """Async client for the PayPal REST API.

    Construction does no I/O. A client may be shared by concurrent tasks; the
    token check and refresh run under one lock so only one exchange happens
    at a time.

    Usage::

        async with Client(client_id, secret) as client:
            order = await client.execute(CreateOrder(payload))
    """

    def __init__(
        self,
        client_id: str,
        secret: str,
        environment: Environment = Environment.SANDBOX,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.client_id = client_id
        self._secret = secret
        self.environment = Environment(environment)
        self.base_url = (base_url or self.environment.base_url).rstrip("/")
        self.timeout = timeout
        self._http = http_client
        self._owns_http = http_client is None
        self._token: Optional[AccessToken] = None
        self._token_obtained_at = 0.0
        self._lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs: Any) -> "Client":
        """Build a client from ``PAYPAL_*`` configuration."""
        settings = settings or get_settings()
        return cls(
            settings.PAYPAL_CLIENTID,
            settings.PAYPAL_SECRET,
            Environment(settings.PAYPAL_ENVIRONMENT),
            base_url=settings.PAYPAL_BASE_URL,
            timeout=settings.PAYPAL_TIMEOUT,
            **kwargs,
        )

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._http is not None and self._owns_http:
            await self._http.aclose()
            self._http = None

    @property
    def access_token(self) -> Optional[AccessToken]:
        return self._token

    def make_url(self, path: str) -> str:
        if not path.startswith("/"):
            raise ValueError(f"path must start with '/': {path!r}")
        return f"{self.base_url}{path}"

    def access_token_expired(self) -> bool:
        if self._token is None:
            return True
        return time.monotonic() - self._token_obtained_at >= self._token.expires_in

    def _client(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient()
            self._owns_http = True
        return self._http

    def _request_options(self) -> dict[str, Any]:
        # Without a configured timeout httpx keeps its own defaults
        return {"timeout": self.timeout} if self.timeout is not None else {}

    async def get_access_token(self, force: bool = False) -> AccessToken:
        """Return the cached token, exchanging credentials when it is absent or expired."""
        async with self._lock:
            if not force and not self.access_token_expired():
                return self._token
            return await self._fetch_token()

    async def _fetch_token(self) -> AccessToken:
        log.info(ClientEvents.TOKEN_REQUEST, environment=self.environment.value)
        try:
            response = await self._client().post(
                self.make_url(TOKEN_PATH),
                data={"grant_type": "client_credentials"},
                auth=(self.client_id, self._secret),
                headers={"Accept": "application/json"},
                **self._request_options(),
            )
        except httpx.HTTPError as exc:
            token_refresh_total.labels(outcome="error").inc()
            log.error(ClientEvents.TOKEN_FAILURE, error=str(exc))
            raise AuthError(f"token request failed: {exc}") from exc

        if not response.is_success:
            error = ApiError.parse(response.content)
            token_refresh_total.labels(outcome="rejected").inc()
            log.error(
                ClientEvents.TOKEN_FAILURE,
                status_code=response.status_code,
                error=error.name if error else None,
            )
            detail = f"{error.name}: {error.message}" if error else response.text[:200]
            raise AuthError(
                f"token request rejected with {response.status_code} ({detail})",
                status_code=response.status_code,
                error=error,
            )

        try:
            token = AccessToken.model_validate_json(response.content)
        except ValueError as exc:
            token_refresh_total.labels(outcome="error").inc()
            log.error(ClientEvents.TOKEN_FAILURE, error="malformed token response")
            raise AuthError(
                "malformed token response", status_code=response.status_code
            ) from exc

        self._token = token
        self._token_obtained_at = time.monotonic()
        token_refresh_total.labels(outcome="success").inc()
        log.info(ClientEvents.TOKEN_REFRESHED, expires_in=token.expires_in, app_id=token.app_id)
        return token

    async def _drop_token(self, token: AccessToken) -> None:
        async with self._lock:
            # A concurrent task may already have replaced it
            if self._token is token:
                self._token = None

    def _headers(
        self, endpoint: Endpoint, token: AccessToken, params: Optional[HeaderParams]
    ) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {token.access_token}",
            "Content-Type": "application/json",
            "Prefer": Prefer.REPRESENTATION.value,
        }
        headers.update(endpoint.headers())
        if params is not None:
            headers.update(params.to_headers(self.client_id))
        return headers

    async def execute(self, endpoint: Endpoint[R], headers: Optional[HeaderParams] = None) -> R:
        """Send ``endpoint`` and decode its response.

        Raises:
            AuthError: the token could not be obtained
            RequestError: no response was received
            StatusError: PayPal answered with a non-2xx status
            DecodeError: a 2xx body did not match ``endpoint.response_model``
        """
        token = await self.get_access_token()
        path = endpoint.relative_path()
        url = self.make_url(path)
        bound = log.bind(endpoint=endpoint.name, method=endpoint.method, path=path)

        with tracer.start_as_current_span(f"paypal.{endpoint.name}") as span:
            span.set_attribute("http.method", endpoint.method)
            span.set_attribute("http.url", url)
            bound.info(ClientEvents.REQUEST)

            start = time.perf_counter()
            try:
                response = await self._client().request(
                    endpoint.method,
                    url,
                    params=query_params(endpoint.query()),
                    json=endpoint.json_body(),
                    headers=self._headers(endpoint, token, headers),
                    **self._request_options(),
                )
            except httpx.HTTPError as exc:
                requests_total.labels(endpoint.name, endpoint.method, "error").inc()
                span.set_status(Status(StatusCode.ERROR, str(exc)))
                bound.error(ClientEvents.REQUEST_FAILURE, error=str(exc))
                raise RequestError(f"{endpoint.name} request failed: {exc}") from exc
            finally:
                request_latency.labels(endpoint.name).observe(time.perf_counter() - start)

            status = response.status_code
            span.set_attribute("http.status_code", status)
            requests_total.labels(endpoint.name, endpoint.method, str(status)).inc()

            if not response.is_success:
                if status == 401:
                    await self._drop_token(token)
                error = ApiError.parse(response.content)
                span.set_status(Status(StatusCode.ERROR, error.name if error else str(status)))
                bound.error(
                    ClientEvents.REQUEST_FAILURE,
                    status_code=status,
                    error=error.name if error else None,
                    debug_id=error.debug_id if error else None,
                )
                raise StatusError(status, error, response.text)

            try:
                result = self._decode(endpoint, response)
            except DecodeError as exc:
                span.set_status(Status(StatusCode.ERROR, "decode"))
                bound.error(ClientEvents.REQUEST_FAILURE, status_code=status, error=str(exc))
                raise

            bound.info(ClientEvents.RESPONSE, status_code=status)
            return result

    @staticmethod
    def _decode(endpoint: Endpoint, response: httpx.Response) -> Any:
        model = endpoint.response_model
        if model is None:
            return None
        if model is bytes:
            return response.content
        if not response.content:
            raise DecodeError(f"{endpoint.name}: empty response body")
        try:
            return response_adapter(model).validate_json(response.content)
        except ValueError as exc:
            name = getattr(model, "__name__", repr(model))
            raise DecodeError(
                f"{endpoint.name}: response is not a valid {name}: {exc}",
                body=response.text,
            ) from exc

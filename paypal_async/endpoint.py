"""
The endpoint capability implemented by every API operation.

An endpoint pairs an HTTP verb and a relative path with an optional query,
an optional body, per-endpoint header overrides and the type its response
decodes into. ``Client.execute`` serves all of them, so a PayPal operation
this package does not cover yet only needs a new ``Endpoint`` subclass.
"""

import base64
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Generic, Mapping, Optional, TypeVar

from pydantic import BaseModel

from paypal_async.data.common import PayPalModel

R = TypeVar("R")


class Prefer(str, Enum):
    # id, status and HATEOAS links only
    MINIMAL = "return=minimal"
    # the complete resource representation
    REPRESENTATION = "return=representation"


def auth_assertion(client_id: str, payer_id: str) -> str:
    """Unsigned JWT identifying the merchant a partner acts on behalf of.

    https://developer.paypal.com/api/rest/requests/#paypal-auth-assertion
    """

    def encode(part: dict[str, str]) -> str:
        raw = json.dumps(part, separators=(",", ":")).encode()
        return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()

    return f"{encode({'alg': 'none'})}.{encode({'iss': client_id, 'payer_id': payer_id})}."


@dataclass
class HeaderParams:
    """Optional PayPal request headers for a single call."""

    merchant_payer_id: Optional[str] = None
    client_metadata_id: Optional[str] = None
    partner_attribution_id: Optional[str] = None
    request_id: Optional[str] = None
    prefer: Optional[Prefer] = None
    content_type: Optional[str] = None

    def to_headers(self, client_id: str) -> dict[str, str]:
        headers = {}
        if self.merchant_payer_id:
            headers["PayPal-Auth-Assertion"] = auth_assertion(client_id, self.merchant_payer_id)
        if self.client_metadata_id:
            headers["PayPal-Client-Metadata-Id"] = self.client_metadata_id
        if self.partner_attribution_id:
            headers["PayPal-Partner-Attribution-Id"] = self.partner_attribution_id
        if self.request_id:
            headers["PayPal-Request-Id"] = self.request_id
        if self.prefer:
            headers["Prefer"] = Prefer(self.prefer).value
        if self.content_type:
            headers["Content-Type"] = self.content_type
        return headers


class Query(PayPalModel):
    """Query parameters shared by PayPal list endpoints.

    With ``page_size=20``, ``page=1`` returns items 1-20 and ``page=2``
    items 21-40.
    """

    count: Optional[int] = None
    end_time: Optional[datetime] = None
    page: Optional[int] = None
    page_size: Optional[int] = None
    total_count_required: Optional[bool] = None
    total_required: Optional[bool] = None
    sort_by: Optional[str] = None
    sort_order: Optional[str] = None
    start_id: Optional[str] = None
    start_index: Optional[int] = None
    start_time: Optional[datetime] = None


def query_params(query: Any) -> Optional[dict[str, str]]:
    """Flatten a query model or mapping into string parameters."""
    if query is None:
        return None
    if isinstance(query, BaseModel):
        query = query.model_dump(mode="json", exclude_none=True)
    params = {}
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        params[key] = str(value)
    return params


class Endpoint(ABC, Generic[R]):
    """A typed description of one API operation.

    Subclasses set ``method`` and ``response_model`` and implement
    ``relative_path``. ``response_model`` is a pydantic model type, ``bytes``
    for raw payloads, or None when PayPal answers with an empty body.
    """

    method: ClassVar[str] = "GET"
    response_model: ClassVar[Any] = None

    @abstractmethod
    def relative_path(self) -> str:
        """Path below the environment base url; must start with ``/``."""

    def query(self) -> Any:
        return None

    def body(self) -> Any:
        return None

    def headers(self) -> Mapping[str, str]:
        return {}

    @property
    def name(self) -> str:
        return type(self).__name__

    def json_body(self) -> Any:
        body = self.body()
        if isinstance(body, BaseModel):
            return body.model_dump(mode="json", exclude_none=True)
        return body

    def __repr__(self) -> str:
        return f"{self.name}({self.method} {self.relative_path()})"

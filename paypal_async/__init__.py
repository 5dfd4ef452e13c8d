"""
Async, typed client for the PayPal REST API.

    from paypal_async import Client, Money
    from paypal_async.api import CreateOrder
    from paypal_async.data.orders import Intent, OrderPayload, PurchaseUnit, Amount
"""

from .builder import Builder
from .client import AccessToken, Client, Environment
from .data.common import Currency, Money
from .data.countries import Country
from .endpoint import Endpoint, HeaderParams, Prefer, Query
from .errors import (
    ApiError,
    AuthError,
    DecodeError,
    ErrorDetail,
    InvalidCountryError,
    InvalidCurrencyError,
    PayPalError,
    RequestError,
    StatusError,
    ValidationError,
)

__version__ = "0.1.0"

__all__ = [
    "AccessToken",
    "ApiError",
    "AuthError",
    "Builder",
    "Client",
    "Country",
    "Currency",
    "DecodeError",
    "Endpoint",
    "Environment",
    "ErrorDetail",
    "HeaderParams",
    "InvalidCountryError",
    "InvalidCurrencyError",
    "Money",
    "PayPalError",
    "Prefer",
    "Query",
    "RequestError",
    "StatusError",
    "ValidationError",
]

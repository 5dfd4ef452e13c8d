"""
Common PayPal object definitions shared by the orders, invoicing and payments APIs.

Reference: https://developer.paypal.com/docs/api/reference/currency-codes/
"""

import re
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from paypal_async.builder import Builder
from paypal_async.data.countries import Country
from paypal_async.errors import InvalidCurrencyError, ValidationError

# PayPal's money value pattern, e.g. "10", "10.00", ".5", "-3.25"
MONEY_VALUE = re.compile(r"^((-?[0-9]+)|(-?([0-9]+)?[.][0-9]+))$")


class PayPalModel(BaseModel):
    """Base for every payload and response record.

    Unknown response fields are ignored; ``None`` fields are left out of the
    serialized payload. Direct construction raises ``ValidationError``.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def __init__(self, /, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as exc:
            raise ValidationError.from_pydantic(type(self).__name__, exc) from exc

    @classmethod
    def builder(cls) -> Builder:
        return Builder(cls)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)


class Currency(str, Enum):
    """ISO-4217 currency codes supported by PayPal."""

    AUD = "AUD"
    BRL = "BRL"  # in-country PayPal accounts only
    CAD = "CAD"
    CNY = "CNY"
    CZK = "CZK"
    DKK = "DKK"
    EUR = "EUR"
    HKD = "HKD"
    HUF = "HUF"  # no decimals
    INR = "INR"  # in-country PayPal India accounts only
    ILS = "ILS"
    JPY = "JPY"  # no decimals
    MYR = "MYR"
    MXN = "MXN"
    TWD = "TWD"  # no decimals
    NZD = "NZD"
    NOK = "NOK"
    PHP = "PHP"
    PLN = "PLN"
    GBP = "GBP"
    RUB = "RUB"
    SGD = "SGD"
    SEK = "SEK"
    CHF = "CHF"
    THB = "THB"
    USD = "USD"

    @classmethod
    def parse(cls, code: str) -> "Currency":
        try:
            return cls(code)
        except ValueError:
            raise InvalidCurrencyError(code) from None

    def __str__(self) -> str:
        return self.value


def check_money_value(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError("amount must be a decimal string")
    if isinstance(value, (int, Decimal)):
        value = str(value)
    if not isinstance(value, str):
        raise ValueError("amount must be a decimal string")
    if len(value) > 32 or not MONEY_VALUE.match(value):
        raise ValueError(f"{value!r} is not a valid decimal amount")
    return value


class Money(PayPalModel):
    """A currency code and a decimal string amount."""

    currency_code: Currency
    value: str

    @field_validator("value", mode="before")
    @classmethod
    def check_value(cls, value: Any) -> Any:
        return check_money_value(value)

    @classmethod
    def new(cls, currency: Currency | str, value: Any) -> "Money":
        return cls(currency_code=Currency.parse(currency), value=value)

    @classmethod
    def eur(cls, value: Any) -> "Money":
        return cls(currency_code=Currency.EUR, value=value)

    @classmethod
    def usd(cls, value: Any) -> "Money":
        return cls(currency_code=Currency.USD, value=value)

    @classmethod
    def brl(cls, value: Any) -> "Money":
        return cls(currency_code=Currency.BRL, value=value)

    @classmethod
    def cny(cls, value: Any) -> "Money":
        return cls(currency_code=Currency.CNY, value=value)

    @classmethod
    def czk(cls, value: Any) -> "Money":
        return cls(currency_code=Currency.CZK, value=value)

    @classmethod
    def jpy(cls, value: Any) -> "Money":
        return cls(currency_code=Currency.JPY, value=value)

    def as_decimal(self) -> Decimal:
        return Decimal(self.value)


class PhoneType(str, Enum):
    FAX = "FAX"
    HOME = "HOME"
    MOBILE = "MOBILE"
    OTHER = "OTHER"
    PAGER = "PAGER"


class AddressDetails(PayPalModel):
    """Non-portable address details needed for some compliance and risk checks."""

    street_number: Optional[str] = None
    street_name: Optional[str] = None
    street_type: Optional[str] = None
    delivery_service: Optional[str] = None
    building_name: Optional[str] = None
    sub_building: Optional[str] = None


class Address(PayPalModel):
    address_line_1: Optional[str] = None
    address_line_2: Optional[str] = None
    admin_area_2: Optional[str] = None  # city
    admin_area_1: Optional[str] = None  # state / province
    postal_code: Optional[str] = None
    country_code: Country
    address_details: Optional[AddressDetails] = None


class LinkMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    PATCH = "PATCH"


class LinkDescription(PayPalModel):
    """A HATEOAS link."""

    href: str
    rel: Optional[str] = None
    method: Optional[LinkMethod] = None


class AuthorizationStatusDetailsReason(str, Enum):
    PENDING_REVIEW = "PENDING_REVIEW"


class AuthorizationStatusDetails(PayPalModel):
    reason: AuthorizationStatusDetailsReason


class SellerProtectionStatus(str, Enum):
    ELIGIBLE = "ELIGIBLE"
    PARTIALLY_ELIGIBLE = "PARTIALLY_ELIGIBLE"
    NOT_ELIGIBLE = "NOT_ELIGIBLE"


class DisputeCategory(str, Enum):
    ITEM_NOT_RECEIVED = "ITEM_NOT_RECEIVED"
    UNAUTHORIZED_TRANSACTION = "UNAUTHORIZED_TRANSACTION"


class SellerProtection(PayPalModel):
    """The level of protection offered by PayPal Seller Protection for Merchants."""

    status: SellerProtectionStatus
    dispute_categories: list[DisputeCategory] = []


def find_link(links: Optional[list[LinkDescription]], rel: str) -> Optional[str]:
    """Return the ``href`` of the first link with the given relation."""
    for link in links or []:
        if link.rel == rel:
            return link.href
    return None

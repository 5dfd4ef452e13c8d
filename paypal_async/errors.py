"""
Errors raised by the PayPal client.

Every failure surfaces as a subclass of ``PayPalError``:

- ``AuthError``: the OAuth2 client-credentials exchange failed
- ``RequestError``: the HTTP call never produced a response
- ``StatusError``: PayPal answered with a non-2xx status
- ``DecodeError``: a 2xx body did not match the expected schema
- ``ValidationError``: a payload could not be built from the given fields
"""

import json
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

SUMMARY_FIELDS = ("name", "message", "debug_id", "information_link", "error", "error_description")


class ErrorDetail(BaseModel):
    """One entry of the ``details`` array in a PayPal error body."""

    field: Optional[str] = None
    value: Optional[str] = None
    location: Optional[str] = None
    issue: Optional[str] = None
    description: Optional[str] = None

    # PayPal echoes the offending value with its JSON type, e.g. 10001
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class ApiError(BaseModel):
    """PayPal's structured error payload.

    REST errors carry ``name``/``message``; the OAuth2 token endpoint answers
    with ``error``/``error_description`` instead, which are mirrored into
    ``name``/``message`` so callers can handle both the same way.
    """

    name: Optional[str] = None
    message: Optional[str] = None
    debug_id: Optional[str] = None
    information_link: Optional[str] = None
    details: list[ErrorDetail] = []
    links: list[Any] = []
    error: Optional[str] = None
    error_description: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("details", "links", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @model_validator(mode="before")
    @classmethod
    def fill_from_oauth(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = dict(data)
            if data.get("name") is None and data.get("error") is not None:
                data["name"] = data["error"]
            if data.get("message") is None and data.get("error_description") is not None:
                data["message"] = data["error_description"]
        return data

    @classmethod
    def parse(cls, content: bytes) -> Optional["ApiError"]:
        """Parse a response body, returning None when it is not a PayPal error.

        A body whose secondary fields do not fit the schema still yields the
        top-level ``name``/``message``/``debug_id``.
        """
        try:
            error = cls.model_validate_json(content)
        except PydanticValidationError:
            error = cls._from_summary(content)
            if error is None:
                return None
        if error.name is None and error.message is None:
            return None
        return error

    @classmethod
    def _from_summary(cls, content: bytes) -> Optional["ApiError"]:
        try:
            data = json.loads(content)
        except ValueError:
            return None
        if not isinstance(data, dict):
            return None
        summary = {key: data[key] for key in SUMMARY_FIELDS if isinstance(data.get(key), str)}
        return cls.model_validate(summary)


class PayPalError(Exception):
    pass


class AuthError(PayPalError):
    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error: Optional[ApiError] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.error = error


class RequestError(PayPalError):
    pass


class StatusError(PayPalError):
    """Non-success HTTP status. ``error`` is None when the body was not a PayPal error."""

    def __init__(self, status_code: int, error: Optional[ApiError], body: str = ""):
        self.status_code = status_code
        self.error = error
        self.body = body
        if error is not None:
            text = f"{status_code} {error.name}: {error.message}"
        else:
            text = f"{status_code}: {body[:200]}"
        super().__init__(text)

    @property
    def name(self) -> Optional[str]:
        return self.error.name if self.error else None

    @property
    def debug_id(self) -> Optional[str]:
        return self.error.debug_id if self.error else None


class DecodeError(PayPalError):
    def __init__(self, message: str, body: str = ""):
        super().__init__(message)
        self.body = body


class ValidationError(PayPalError, ValueError):
    """A payload is missing required fields or holds invalid values.

    ``fields`` lists the dotted location of every offending field.
    """

    def __init__(self, message: str, fields: tuple[str, ...] = ()):
        super().__init__(message)
        self.fields = fields

    @classmethod
    def from_pydantic(cls, model: str, exc: PydanticValidationError) -> "ValidationError":
        fields = []
        problems = []
        for err in exc.errors():
            loc = ".".join(str(part) for part in err["loc"]) or "__root__"
            fields.append(loc)
            problems.append(f"{loc}: {err['msg']}")
        return cls(f"invalid {model}: " + "; ".join(problems), tuple(fields))


class InvalidCurrencyError(ValidationError):
    def __init__(self, code: str):
        super().__init__(f"unsupported currency code: {code!r}", ("currency_code",))
        self.code = code


class InvalidCountryError(ValidationError):
    def __init__(self, code: str):
        super().__init__(f"unsupported country code: {code!r}", ("country_code",))
        self.code = code

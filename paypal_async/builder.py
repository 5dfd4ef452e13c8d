"""
Staged construction of payload models.

``Builder`` collects field values through one fluent setter per declared
model field and validates them all at once in ``build()``::

    order = (
        OrderPayload.builder()
        .intent(Intent.AUTHORIZE)
        .purchase_units([PurchaseUnit(amount=Amount.new(Currency.EUR, "10.00"))])
        .build()
    )
"""

from typing import Any, Callable, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from paypal_async.errors import ValidationError

M = TypeVar("M", bound=BaseModel)


class Builder(Generic[M]):
    def __init__(self, model: type[M]):
        self._model = model
        self._values: dict[str, Any] = {}

    def __getattr__(self, name: str) -> Callable[[Any], "Builder[M]"]:
        # Only reached for names that are not real attributes of the builder.
        if name.startswith("_") or name not in self._model.model_fields:
            raise AttributeError(f"{self._model.__name__} has no field {name!r}")

        def setter(value: Any) -> "Builder[M]":
            self._values[name] = value
            return self

        return setter

    def values(self) -> dict[str, Any]:
        return dict(self._values)

    def build(self) -> M:
        """Validate the collected fields.

        Raises:
            ValidationError: naming every missing or invalid field
        """
        try:
            return self._model(**self._values)
        except PydanticValidationError as exc:
            raise ValidationError.from_pydantic(self._model.__name__, exc) from exc

    def __repr__(self) -> str:
        return f"Builder({self._model.__name__}, {sorted(self._values)})"

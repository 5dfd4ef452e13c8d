"""
Payload models, builders and money validation.
"""

from decimal import Decimal

import pytest

from paypal_async import (
    Country,
    Currency,
    InvalidCountryError,
    InvalidCurrencyError,
    Money,
    ValidationError,
)
from paypal_async.data.common import Address
from paypal_async.data.invoice import InvoiceDetail, InvoicePayload, Item, QRCodeParams
from paypal_async.data.orders import (
    Amount,
    Intent,
    Order,
    OrderPayload,
    OrderStatus,
    PurchaseUnit,
)


def eur_order(value="10.00") -> OrderPayload:
    return OrderPayload.new(Intent.AUTHORIZE, [PurchaseUnit.new(Amount.eur(value))])


def test_currency_parse():
    assert Currency.parse("EUR") is Currency.EUR
    assert Currency.parse(Currency.USD) is Currency.USD
    assert str(Currency.JPY) == "JPY"
    assert len(Currency) == 26


def test_currency_parse_rejects_unknown_code():
    with pytest.raises(InvalidCurrencyError) as exc_info:
        Currency.parse("XYZ")

    assert exc_info.value.code == "XYZ"
    assert exc_info.value.fields == ("currency_code",)
    # callers may treat it as any other invalid value
    assert isinstance(exc_info.value, ValidationError)
    assert isinstance(exc_info.value, ValueError)


def test_money_shortcuts():
    assert Money.eur("10.00") == Money(currency_code=Currency.EUR, value="10.00")
    assert Money.usd("5").currency_code is Currency.USD
    assert Money.brl("1.5").currency_code is Currency.BRL
    assert Money.cny("1").currency_code is Currency.CNY
    assert Money.czk("1").currency_code is Currency.CZK
    assert Money.jpy("100").currency_code is Currency.JPY


def test_money_accepts_numbers():
    assert Money.eur(10).value == "10"
    assert Money.eur(Decimal("10.50")).value == "10.50"
    assert Money.eur("-0.5").as_decimal() == Decimal("-0.5")


@pytest.mark.parametrize("value", ["ten", "1.2.3", "", "1e5", "1" * 33])
def test_money_rejects_invalid_values(value):
    with pytest.raises(ValidationError) as exc_info:
        Money.eur(value)

    assert "value" in exc_info.value.fields


def test_money_rejects_unsupported_currency():
    with pytest.raises(InvalidCurrencyError):
        Money.new("ABC", "1.00")

    with pytest.raises(ValidationError) as exc_info:
        Money(currency_code="ABC", value="1.00")
    assert "currency_code" in exc_info.value.fields


def test_money_serializes_as_paypal_json():
    assert Money.eur("10.00").to_payload() == {"currency_code": "EUR", "value": "10.00"}


def test_order_builder_success():
    order = (
        OrderPayload.builder()
        .intent(Intent.AUTHORIZE)
        .purchase_units([PurchaseUnit.new(Amount.new("EUR", "10.00"))])
        .build()
    )

    assert order == eur_order()
    assert order.to_payload() == {
        "intent": "AUTHORIZE",
        "purchase_units": [{"amount": {"currency_code": "EUR", "value": "10.00"}}],
    }


def test_order_payload_json_round_trip():
    order = eur_order()

    assert OrderPayload.model_validate_json(order.to_json()) == order


def test_order_builder_missing_field_names_it():
    builder = OrderPayload.builder().purchase_units([PurchaseUnit.new(Amount.usd("1"))])

    with pytest.raises(ValidationError) as exc_info:
        builder.build()

    assert exc_info.value.fields == ("intent",)
    assert "intent" in str(exc_info.value)


def test_order_requires_a_purchase_unit():
    with pytest.raises(ValidationError) as exc_info:
        OrderPayload.new(Intent.CAPTURE, [])

    assert "purchase_units" in exc_info.value.fields


def test_builder_rejects_unknown_field():
    with pytest.raises(AttributeError, match="OrderPayload has no field 'colour'"):
        OrderPayload.builder().colour("red")


def test_builder_values_and_repr():
    builder = OrderPayload.builder().intent(Intent.CAPTURE)

    assert builder.values() == {"intent": Intent.CAPTURE}
    assert repr(builder) == "Builder(OrderPayload, ['intent'])"


def test_invoice_builder_reports_every_missing_field():
    with pytest.raises(ValidationError) as exc_info:
        InvoicePayload.builder().build()

    assert set(exc_info.value.fields) == {"detail", "items"}


def test_invoice_builder_nested_error_location():
    with pytest.raises(ValidationError) as exc_info:
        Item.builder().name("Widget").quantity("1").unit_amount({"currency_code": "EUR", "value": "x"}).build()

    assert exc_info.value.fields == ("unit_amount.value",)


def test_invoice_payload_serialization_omits_unset_fields():
    invoice = (
        InvoicePayload.builder()
        .detail(InvoiceDetail(currency_code=Currency.USD, invoice_number="INV-1"))
        .items([Item(name="Widget", quantity="2", unit_amount=Money.usd("3.50"))])
        .build()
    )

    assert invoice.to_payload() == {
        "detail": {"currency_code": "USD", "invoice_number": "INV-1"},
        "items": [
            {
                "name": "Widget",
                "quantity": "2",
                "unit_amount": {"currency_code": "USD", "value": "3.50"},
            }
        ],
    }


def test_qr_code_params_bounds():
    assert QRCodeParams().width == 500
    with pytest.raises(ValidationError):
        QRCodeParams(width=100)


def test_order_response_ignores_unknown_fields():
    order = Order.model_validate(
        {
            "id": "5O190127TN364715T",
            "status": "CREATED",
            "something_new": {"nested": True},
            "links": [
                {"href": "https://www.sandbox.paypal.com/checkoutnow?token=5O1", "rel": "approve", "method": "GET"},
            ],
        }
    )

    assert order.status is OrderStatus.CREATED
    assert order.approve_url == "https://www.sandbox.paypal.com/checkoutnow?token=5O1"


def test_order_response_without_links():
    order = Order.model_validate({"id": "5O190127TN364715T", "status": "COMPLETED"})

    assert order.links == []
    assert order.approve_url is None


def test_order_response_requires_id_and_status():
    with pytest.raises(ValueError):
        Order.model_validate({"status": "COMPLETED"})
    with pytest.raises(ValueError):
        Order.model_validate({"id": "5O190127TN364715T"})


def test_country_parse():
    assert Country.parse("DE") is Country.DE
    assert Country.parse("C2") is Country.C2
    assert str(Country.GB) == "GB"


def test_country_parse_rejects_unknown_code():
    with pytest.raises(InvalidCountryError) as exc_info:
        Country.parse("XX")

    assert exc_info.value.code == "XX"
    assert exc_info.value.fields == ("country_code",)
    assert isinstance(exc_info.value, ValidationError)


def test_address_country_must_be_supported():
    address = Address(address_line_1="1 Main St", country_code="US")
    assert address.country_code is Country.US
    assert address.to_payload()["country_code"] == "US"

    with pytest.raises(ValidationError) as exc_info:
        Address(country_code="ZZ")
    assert exc_info.value.fields == ("country_code",)

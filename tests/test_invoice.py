"""
Invoicing endpoints driven through Client.execute.
"""

import json
from datetime import date, datetime, timezone

import pytest

from paypal_async import Currency, Money, Query
from paypal_async.api import (
    CancelInvoice,
    CreateDraftInvoice,
    DeleteInvoice,
    GenerateInvoiceNumber,
    GenerateQRCode,
    GetInvoice,
    ListInvoices,
    RecordInvoicePayment,
    SendInvoice,
    UpdateInvoice,
    UpdateInvoiceQuery,
)
from paypal_async.data.invoice import (
    CancelReason,
    Invoice,
    InvoiceDetail,
    InvoiceNumber,
    InvoicePayload,
    InvoiceStatus,
    Item,
    PaymentMethod,
    QRCodeParams,
    RecordPaymentPayload,
    SendInvoicePayload,
)
from paypal_async.endpoint import query_params

INVOICE_ID = "INV2-Z56S-5LLA-Q52L-CPZ5"
INVOICE_PATH = f"/v2/invoicing/invoices/{INVOICE_ID}"

DRAFT = {
    "id": INVOICE_ID,
    "status": "DRAFT",
    "detail": {
        "invoice_number": "#123",
        "reference": "deal-ref",
        "invoice_date": "2018-11-12",
        "currency_code": "USD",
        "payment_term": {"term_type": "NET_10", "due_date": "2018-11-22"},
        "metadata": {"create_time": "2018-11-12T08:00:20Z", "recipient_view_url": "https://www.sandbox.paypal.com/invoice/p/#Z56S5LLAQ52LCPZ5"},
    },
    "items": [
        {
            "id": "ITEM-5335764681676603X",
            "name": "Yoga Mat",
            "quantity": "1",
            "unit_amount": {"currency_code": "USD", "value": "50.00"},
        }
    ],
    "amount": {"currency_code": "USD", "value": "74.21"},
    "links": [
        {"href": f"https://api-m.sandbox.paypal.com{INVOICE_PATH}", "rel": "self", "method": "GET"},
        {"href": f"https://api-m.sandbox.paypal.com{INVOICE_PATH}/send", "rel": "send", "method": "POST"},
    ],
}


def draft_payload() -> InvoicePayload:
    return (
        InvoicePayload.builder()
        .detail(InvoiceDetail(currency_code=Currency.USD, invoice_number="#123", invoice_date=date(2018, 11, 12)))
        .items([Item(name="Yoga Mat", quantity="1", unit_amount=Money.usd("50.00"))])
        .build()
    )


@pytest.mark.asyncio
async def test_generate_invoice_number(client, paypal):
    paypal.route("POST", "/v2/invoicing/generate-next-invoice-number", 200, {"invoice_number": "ACM-0001"})

    number = await client.execute(GenerateInvoiceNumber())

    assert number == InvoiceNumber(invoice_number="ACM-0001")
    request = paypal.requests_to("/v2/invoicing/generate-next-invoice-number")[0]
    assert request.content == b""


@pytest.mark.asyncio
async def test_create_draft_invoice(client, paypal):
    paypal.route("POST", "/v2/invoicing/invoices", 201, DRAFT)

    invoice = await client.execute(CreateDraftInvoice(draft_payload()))

    assert isinstance(invoice, Invoice)
    assert invoice.status is InvoiceStatus.DRAFT
    assert invoice.detail.payment_term.due_date == date(2018, 11, 22)
    assert invoice.items[0].unit_amount == Money.usd("50.00")

    body = json.loads(paypal.requests_to("/v2/invoicing/invoices")[0].content)
    assert body["detail"] == {"currency_code": "USD", "invoice_number": "#123", "invoice_date": "2018-11-12"}


@pytest.mark.asyncio
async def test_get_invoice(client, paypal):
    paypal.route("GET", INVOICE_PATH, 200, DRAFT)

    invoice = await client.execute(GetInvoice(INVOICE_ID))

    assert invoice.id == INVOICE_ID
    assert invoice.detail.currency_code is Currency.USD


@pytest.mark.asyncio
async def test_list_invoices_sends_query(client, paypal):
    paypal.route(
        "GET",
        "/v2/invoicing/invoices",
        200,
        {"total_items": 1, "total_pages": 1, "items": [DRAFT], "links": []},
    )

    result = await client.execute(ListInvoices(Query(page=2, page_size=10, total_required=True)))

    assert result.total_items == 1
    assert result.items[0].id == INVOICE_ID
    params = paypal.requests_to("/v2/invoicing/invoices")[0].url.params
    assert dict(params) == {"page": "2", "page_size": "10", "total_required": "true"}


def test_query_params_formatting():
    query = Query(start_time=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc), total_count_required=False)

    assert query_params(query) == {"start_time": "2024-01-02T03:04:05Z", "total_count_required": "false"}
    assert query_params(None) is None
    assert query_params(Query()) == {}


@pytest.mark.asyncio
async def test_delete_invoice_returns_none(client, paypal):
    paypal.route("DELETE", INVOICE_PATH, 204)

    assert await client.execute(DeleteInvoice(INVOICE_ID)) is None
    assert paypal.requests_to(INVOICE_PATH)[0].method == "DELETE"


@pytest.mark.asyncio
async def test_update_invoice(client, paypal):
    paypal.route("PUT", INVOICE_PATH, 200, {**DRAFT, "detail": {**DRAFT["detail"], "note": "updated"}})
    invoice = Invoice.model_validate(DRAFT)

    updated = await client.execute(UpdateInvoice(invoice, UpdateInvoiceQuery(send_to_recipient=False)))

    assert updated.detail.note == "updated"
    request = paypal.requests_to(INVOICE_PATH)[0]
    assert request.method == "PUT"
    assert dict(request.url.params) == {"send_to_recipient": "false", "send_to_invoicer": "false"}
    assert json.loads(request.content)["id"] == INVOICE_ID


@pytest.mark.asyncio
async def test_cancel_invoice(client, paypal):
    paypal.route("POST", f"{INVOICE_PATH}/cancel", 204)

    result = await client.execute(
        CancelInvoice(INVOICE_ID, CancelReason(subject="Invoice cancelled", send_to_recipient=True))
    )

    assert result is None
    body = json.loads(paypal.requests_to(f"{INVOICE_PATH}/cancel")[0].content)
    assert body == {"subject": "Invoice cancelled", "send_to_recipient": True}


@pytest.mark.asyncio
async def test_send_invoice_ignores_response_body(client, paypal):
    paypal.route(
        "POST",
        f"{INVOICE_PATH}/send",
        200,
        {"href": f"https://www.sandbox.paypal.com/invoice/p/#{INVOICE_ID}", "rel": "payer-view", "method": "GET"},
    )

    assert await client.execute(SendInvoice(INVOICE_ID, SendInvoicePayload(note="Thanks"))) is None


@pytest.mark.asyncio
async def test_record_invoice_payment(client, paypal):
    paypal.route("POST", f"{INVOICE_PATH}/payments", 200, {"payment_id": "EXTR-86F38350LX4353815"})
    payload = RecordPaymentPayload(method=PaymentMethod.BANK_TRANSFER, amount=Money.usd("74.21"), payment_date=date(2018, 5, 1))

    recorded = await client.execute(RecordInvoicePayment(INVOICE_ID, payload))

    assert recorded.payment_id == "EXTR-86F38350LX4353815"
    body = json.loads(paypal.requests_to(f"{INVOICE_PATH}/payments")[0].content)
    assert body == {
        "method": "BANK_TRANSFER",
        "amount": {"currency_code": "USD", "value": "74.21"},
        "payment_date": "2018-05-01",
    }


@pytest.mark.asyncio
async def test_generate_qr_code_returns_bytes(client, paypal):
    image = b"--boundary\r\nContent-Type: image/png\r\n\r\n\x89PNG..."
    paypal.route("POST", f"{INVOICE_PATH}/generate-qr-code", 200, image, {"Content-Type": "multipart/related"})

    result = await client.execute(GenerateQRCode(INVOICE_ID, QRCodeParams(width=200, height=200)))

    assert result == image
    request = paypal.requests_to(f"{INVOICE_PATH}/generate-qr-code")[0]
    assert request.headers["Accept"] == "*/*"
    assert json.loads(request.content) == {"width": 200, "height": 200}

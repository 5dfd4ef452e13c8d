"""
Use the Invoicing API to create, send, and manage invoices.

Reference: https://developer.paypal.com/docs/api/invoicing/v2/
"""

from typing import Optional
from urllib.parse import quote

from paypal_async.data.common import PayPalModel
from paypal_async.data.invoice import (
    CancelReason,
    Invoice,
    InvoiceList,
    InvoiceNumber,
    InvoicePayload,
    QRCodeParams,
    RecordedPayment,
    RecordPaymentPayload,
    SendInvoicePayload,
)
from paypal_async.endpoint import Endpoint, Query

INVOICES = "/v2/invoicing/invoices"


def invoice_path(invoice_id: str, action: str = "") -> str:
    path = f"{INVOICES}/{quote(invoice_id, safe='')}"
    return f"{path}/{action}" if action else path


class GenerateInvoiceNumber(Endpoint[InvoiceNumber]):
    """Generates the next invoice number available to the merchant.

    The next number keeps the prefix and suffix of the last one and increments
    it, e.g. ``INVOICE-1234`` is followed by ``INVOICE-1235``.
    """

    method = "POST"
    response_model = InvoiceNumber

    def __init__(self, invoice_number: Optional[InvoiceNumber] = None):
        self.invoice_number = invoice_number

    def relative_path(self) -> str:
        return "/v2/invoicing/generate-next-invoice-number"

    def body(self) -> Optional[InvoiceNumber]:
        return self.invoice_number


class CreateDraftInvoice(Endpoint[Invoice]):
    """Creates a draft invoice. Send it to move it to the payable state."""

    method = "POST"
    response_model = Invoice

    def __init__(self, invoice: InvoicePayload):
        self.invoice = invoice

    def relative_path(self) -> str:
        return INVOICES

    def body(self) -> InvoicePayload:
        return self.invoice


class GetInvoice(Endpoint[Invoice]):
    response_model = Invoice

    def __init__(self, invoice_id: str):
        self.invoice_id = invoice_id

    def relative_path(self) -> str:
        return invoice_path(self.invoice_id)


class ListInvoices(Endpoint[InvoiceList]):
    """Lists invoices. Page size is limited to [1, 100]."""

    response_model = InvoiceList

    def __init__(self, query: Optional[Query] = None):
        self.list_query = query or Query()

    def relative_path(self) -> str:
        return INVOICES

    def query(self) -> Query:
        return self.list_query


class DeleteInvoice(Endpoint[None]):
    """Deletes a draft or scheduled invoice. Sent invoices must be cancelled instead."""

    method = "DELETE"

    def __init__(self, invoice_id: str):
        self.invoice_id = invoice_id

    def relative_path(self) -> str:
        return invoice_path(self.invoice_id)


class UpdateInvoiceQuery(PayPalModel):
    send_to_recipient: bool = True
    send_to_invoicer: bool = False


class UpdateInvoice(Endpoint[Invoice]):
    """Fully updates an invoice; partial updates are not supported."""

    method = "PUT"
    response_model = Invoice

    def __init__(self, invoice: Invoice, query: Optional[UpdateInvoiceQuery] = None):
        self.invoice = invoice
        self.update_query = query or UpdateInvoiceQuery()

    def relative_path(self) -> str:
        return invoice_path(self.invoice.id)

    def query(self) -> UpdateInvoiceQuery:
        return self.update_query

    def body(self) -> Invoice:
        return self.invoice


class CancelInvoice(Endpoint[None]):
    """Cancels a sent invoice and optionally notifies the payer and merchant."""

    method = "POST"

    def __init__(self, invoice_id: str, reason: Optional[CancelReason] = None):
        self.invoice_id = invoice_id
        self.reason = reason or CancelReason()

    def relative_path(self) -> str:
        return invoice_path(self.invoice_id, "cancel")

    def body(self) -> CancelReason:
        return self.reason


class SendInvoice(Endpoint[None]):
    """Sends or schedules an invoice to be sent to the customer."""

    method = "POST"

    def __init__(self, invoice_id: str, payload: Optional[SendInvoicePayload] = None):
        self.invoice_id = invoice_id
        self.payload = payload or SendInvoicePayload()

    def relative_path(self) -> str:
        return invoice_path(self.invoice_id, "send")

    def body(self) -> SendInvoicePayload:
        return self.payload


class RecordInvoicePayment(Endpoint[RecordedPayment]):
    """Records a payment made outside PayPal.

    The invoice becomes PAID when nothing remains due, PARTIALLY_PAID otherwise.
    """

    method = "POST"
    response_model = RecordedPayment

    def __init__(self, invoice_id: str, payload: RecordPaymentPayload):
        self.invoice_id = invoice_id
        self.payload = payload

    def relative_path(self) -> str:
        return invoice_path(self.invoice_id, "payments")

    def body(self) -> RecordPaymentPayload:
        return self.payload


class GenerateQRCode(Endpoint[bytes]):
    """Generates a QR code image for an invoice; returns the raw response bytes."""

    method = "POST"
    response_model = bytes

    def __init__(self, invoice_id: str, params: Optional[QRCodeParams] = None):
        self.invoice_id = invoice_id
        self.params = params or QRCodeParams()

    def relative_path(self) -> str:
        return invoice_path(self.invoice_id, "generate-qr-code")

    def body(self) -> QRCodeParams:
        return self.params

    def headers(self) -> dict[str, str]:
        return {"Accept": "*/*"}


CreateInvoice = CreateDraftInvoice

"""
Endpoints grouped by PayPal API.

Each class is an ``Endpoint`` to pass to ``Client.execute``.
"""

from .invoice import (
    CancelInvoice,
    CreateDraftInvoice,
    CreateInvoice,
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
from .orders import AuthorizeOrder, CaptureOrder, CreateOrder, ShowOrderDetails
from .payments import GetAuthorizedPayment

__all__ = [
    "AuthorizeOrder",
    "CancelInvoice",
    "CaptureOrder",
    "CreateDraftInvoice",
    "CreateInvoice",
    "CreateOrder",
    "DeleteInvoice",
    "GenerateInvoiceNumber",
    "GenerateQRCode",
    "GetAuthorizedPayment",
    "GetInvoice",
    "ListInvoices",
    "RecordInvoicePayment",
    "SendInvoice",
    "ShowOrderDetails",
    "UpdateInvoice",
    "UpdateInvoiceQuery",
]

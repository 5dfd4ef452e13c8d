"""
PayPal object definitions used by the invoicing API.

Sending an invoice moves it from draft to payable state; PayPal then emails
the customer a link to pay it.

Reference: https://developer.paypal.com/docs/api/invoicing/v2/
"""

from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from pydantic import Field, field_validator

from paypal_async.data.common import (
    Address,
    Currency,
    LinkDescription,
    Money,
    PayPalModel,
    PhoneType,
    check_money_value,
)


class FileReference(PayPalModel):
    id: Optional[str] = None
    reference_url: Optional[str] = None
    content_type: Optional[str] = None
    create_time: Optional[datetime] = None
    size: Optional[str] = None


class PaymentTermType(str, Enum):
    DUE_ON_RECEIPT = "DUE_ON_RECEIPT"
    DUE_ON_DATE_SPECIFIED = "DUE_ON_DATE_SPECIFIED"
    NET_10 = "NET_10"
    NET_15 = "NET_15"
    NET_30 = "NET_30"
    NET_45 = "NET_45"
    NET_60 = "NET_60"
    NET_90 = "NET_90"
    NO_DUE_DATE = "NO_DUE_DATE"


class PaymentTerm(PayPalModel):
    term_type: Optional[PaymentTermType] = None
    due_date: Optional[date] = None


class FlowType(str, Enum):
    MULTIPLE_RECIPIENTS_GROUP = "MULTIPLE_RECIPIENTS_GROUP"
    BATCH = "BATCH"
    REGULAR_SINGLE = "REGULAR_SINGLE"


class Metadata(PayPalModel):
    """Audit metadata; read only."""

    create_time: Optional[datetime] = None
    created_by: Optional[str] = None
    last_update_time: Optional[datetime] = None
    last_updated_by: Optional[str] = None
    cancel_time: Optional[datetime] = None
    cancelled_by: Optional[str] = None
    first_sent_time: Optional[datetime] = None
    last_sent_time: Optional[datetime] = None
    last_sent_by: Optional[str] = None
    created_by_flow: Optional[FlowType] = None
    recipient_view_url: Optional[str] = None
    invoicer_view_url: Optional[str] = None


class InvoiceDetail(PayPalModel):
    """Invoice details. Only ``currency_code`` is required on creation."""

    currency_code: Currency
    reference: Optional[str] = None
    note: Optional[str] = None
    terms_and_conditions: Optional[str] = None
    memo: Optional[str] = None
    attachments: Optional[list[FileReference]] = None
    invoice_number: Optional[str] = None
    invoice_date: Optional[date] = None
    payment_term: Optional[PaymentTerm] = None
    metadata: Optional[Metadata] = None


class Name(PayPalModel):
    prefix: Optional[str] = None
    given_name: Optional[str] = None
    surname: Optional[str] = None
    middle_name: Optional[str] = None
    suffix: Optional[str] = None
    alternate_full_name: Optional[str] = None
    full_name: Optional[str] = None


class PhoneDetail(PayPalModel):
    country_code: str  # calling code, e.g. "001"
    national_number: str
    extension_number: Optional[str] = None
    phone_type: Optional[PhoneType] = None


class InvoicerInfo(PayPalModel):
    business_name: Optional[str] = None
    name: Optional[Name] = None
    address: Optional[Address] = None
    email_address: Optional[str] = None
    phones: Optional[list[PhoneDetail]] = None
    website: Optional[str] = None
    tax_id: Optional[str] = None
    additional_notes: Optional[str] = None
    logo_url: Optional[str] = None


class BillingInfo(PayPalModel):
    business_name: Optional[str] = None
    name: Optional[Name] = None
    address: Optional[Address] = None
    email_address: Optional[str] = None
    phones: Optional[list[PhoneDetail]] = None
    additional_info: Optional[str] = None
    language: Optional[str] = None


class ContactInformation(PayPalModel):
    business_name: Optional[str] = None
    name: Optional[Name] = None
    address: Optional[Address] = None


class RecipientInfo(PayPalModel):
    billing_info: Optional[BillingInfo] = None
    shipping_info: Optional[ContactInformation] = None


class Tax(PayPalModel):
    name: str
    percent: str
    amount: Optional[Money] = None


class Discount(PayPalModel):
    percent: Optional[str] = None
    amount: Optional[Money] = None


class UnitOfMeasure(str, Enum):
    QUANTITY = "QUANTITY"
    HOURS = "HOURS"
    AMOUNT = "AMOUNT"


class Item(PayPalModel):
    """An invoice line item; ``name``, ``quantity`` and ``unit_amount`` are required."""

    id: Optional[str] = None
    name: str
    description: Optional[str] = None
    quantity: str
    unit_amount: Money
    tax: Optional[Tax] = None
    item_date: Optional[date] = None
    discount: Optional[Discount] = None
    unit_of_measure: Optional[UnitOfMeasure] = None


class PartialPayment(PayPalModel):
    allow_partial_payment: Optional[bool] = None
    minimum_amount_due: Optional[Money] = None


class Configuration(PayPalModel):
    tax_calculated_after_discount: Optional[bool] = None
    tax_inclusive: Optional[bool] = None
    allow_tip: Optional[bool] = None
    partial_payment: Optional[PartialPayment] = None
    template_id: Optional[str] = None


class AggregatedDiscount(PayPalModel):
    invoice_discount: Optional[Discount] = None
    item_discount: Optional[Money] = None


class ShippingCost(PayPalModel):
    amount: Optional[Money] = None
    tax: Optional[Tax] = None


class CustomAmount(PayPalModel):
    label: str
    amount: Optional[Money] = None


class InvoiceBreakdown(PayPalModel):
    item_total: Optional[Money] = None
    discount: Optional[AggregatedDiscount] = None
    tax_total: Optional[Money] = None
    shipping: Optional[ShippingCost] = None
    custom: Optional[CustomAmount] = None


class InvoiceAmount(PayPalModel):
    currency_code: Currency
    value: str
    breakdown: Optional[InvoiceBreakdown] = None

    @field_validator("value", mode="before")
    @classmethod
    def check_value(cls, value: Any) -> Any:
        return check_money_value(value)


class PaymentType(str, Enum):
    PAYPAL = "PAYPAL"
    EXTERNAL = "EXTERNAL"


class PaymentMethod(str, Enum):
    BANK_TRANSFER = "BANK_TRANSFER"
    CASH = "CASH"
    CHECK = "CHECK"
    CREDIT_CARD = "CREDIT_CARD"
    DEBIT_CARD = "DEBIT_CARD"
    PAYPAL = "PAYPAL"
    WIRE_TRANSFER = "WIRE_TRANSFER"
    OTHER = "OTHER"


class PaymentDetail(PayPalModel):
    type: Optional[PaymentType] = None
    payment_id: Optional[str] = None
    payment_date: Optional[date] = None
    method: PaymentMethod = PaymentMethod.PAYPAL
    note: Optional[str] = None
    amount: Optional[Money] = None
    shipping_info: Optional[ContactInformation] = None


class Payments(PayPalModel):
    paid_amount: Optional[Money] = None
    transactions: Optional[list[PaymentDetail]] = None


class RefundDetail(PayPalModel):
    type: Optional[PaymentType] = None
    refund_id: Optional[str] = None
    refund_date: Optional[date] = None
    amount: Optional[Money] = None
    method: PaymentMethod = PaymentMethod.PAYPAL


class Refunds(PayPalModel):
    refund_amount: Optional[Money] = None
    transactions: Optional[list[RefundDetail]] = None


class InvoiceStatus(str, Enum):
    DRAFT = "DRAFT"
    SENT = "SENT"
    SCHEDULED = "SCHEDULED"
    PAID = "PAID"
    MARKED_AS_PAID = "MARKED_AS_PAID"
    CANCELLED = "CANCELLED"
    REFUNDED = "REFUNDED"
    PARTIALLY_PAID = "PARTIALLY_PAID"
    PARTIALLY_REFUNDED = "PARTIALLY_REFUNDED"
    MARKED_AS_REFUNDED = "MARKED_AS_REFUNDED"
    UNPAID = "UNPAID"
    PAYMENT_PENDING = "PAYMENT_PENDING"


class InvoicePayload(PayPalModel):
    """Request body of the create draft invoice endpoint."""

    detail: InvoiceDetail
    invoicer: Optional[InvoicerInfo] = None
    primary_recipients: Optional[list[RecipientInfo]] = None
    additional_recipients: Optional[list[str]] = None
    items: list[Item] = Field(min_length=1)
    configuration: Optional[Configuration] = None
    amount: Optional[InvoiceAmount] = None


class Invoice(PayPalModel):
    """An invoice as returned by the invoicing API."""

    id: str
    parent_id: Optional[str] = None
    status: InvoiceStatus
    detail: InvoiceDetail
    invoicer: Optional[InvoicerInfo] = None
    primary_recipients: Optional[list[RecipientInfo]] = None
    additional_recipients: Optional[list[str]] = None
    items: Optional[list[Item]] = None
    configuration: Optional[Configuration] = None
    amount: Optional[InvoiceAmount] = None
    due_amount: Optional[Money] = None
    gratuity: Optional[Money] = None
    payments: Optional[Payments] = None
    refunds: Optional[Refunds] = None
    links: Optional[list[LinkDescription]] = None


class InvoiceList(PayPalModel):
    total_items: Optional[int] = None
    total_pages: Optional[int] = None
    items: list[Invoice] = []
    links: list[LinkDescription] = []


class InvoiceNumber(PayPalModel):
    invoice_number: str


class CancelReason(PayPalModel):
    subject: Optional[str] = None
    note: Optional[str] = None
    send_to_invoicer: Optional[bool] = None
    send_to_recipient: Optional[bool] = None
    additional_recipients: Optional[list[str]] = None


class SendInvoicePayload(PayPalModel):
    subject: Optional[str] = None
    note: Optional[str] = None
    send_to_invoicer: Optional[bool] = None
    send_to_recipient: Optional[bool] = None
    additional_recipients: Optional[list[str]] = None


class QRCodeAction(str, Enum):
    PAY = "pay"
    DETAILS = "details"


class QRCodeParams(PayPalModel):
    width: int = Field(default=500, ge=150, le=500)
    height: int = Field(default=500, ge=150, le=500)
    action: Optional[QRCodeAction] = None


class RecordPaymentPayload(PayPalModel):
    method: PaymentMethod
    amount: Money
    payment_id: Optional[str] = None
    payment_date: Optional[date] = None
    note: Optional[str] = None
    shipping_info: Optional[ContactInformation] = None


class RecordedPayment(PayPalModel):
    payment_id: str

"""
PayPal object definitions used by the orders API.

Reference: https://developer.paypal.com/docs/api/orders/v2/
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import Field, field_validator

from paypal_async.data.common import (
    Address,
    AuthorizationStatusDetails,
    Currency,
    LinkDescription,
    Money,
    PayPalModel,
    PhoneType,
    check_money_value,
    find_link,
)


class Intent(str, Enum):
    # Capture payment immediately after the customer pays.
    CAPTURE = "CAPTURE"
    # Authorize and hold funds; capture separately. Single purchase unit only.
    AUTHORIZE = "AUTHORIZE"


class PayerName(PayPalModel):
    given_name: Optional[str] = None
    surname: Optional[str] = None


class PhoneNumber(PayPalModel):
    national_number: str


class Phone(PayPalModel):
    phone_type: Optional[PhoneType] = None
    phone_number: PhoneNumber


class TaxIdType(str, Enum):
    BR_CPF = "BR_CPF"
    BR_CNPJ = "BR_CNPJ"


class TaxInfo(PayPalModel):
    tax_id: str
    tax_id_type: TaxIdType


class Payer(PayPalModel):
    """The customer who approves and pays for the order."""

    name: Optional[PayerName] = None
    email_address: Optional[str] = None
    payer_id: Optional[str] = None
    phone: Optional[Phone] = None
    birth_date: Optional[str] = None
    tax_info: Optional[TaxInfo] = None
    address: Optional[Address] = None


class Breakdown(PayPalModel):
    item_total: Optional[Money] = None
    shipping: Optional[Money] = None
    handling: Optional[Money] = None
    tax_total: Optional[Money] = None
    insurance: Optional[Money] = None
    shipping_discount: Optional[Money] = None
    discount: Optional[Money] = None


class Amount(PayPalModel):
    """The total order amount, with an optional breakdown."""

    currency_code: Currency
    value: str
    breakdown: Optional[Breakdown] = None

    @field_validator("value", mode="before")
    @classmethod
    def check_value(cls, value: Any) -> Any:
        return check_money_value(value)

    @classmethod
    def new(cls, currency: Currency | str, value: Any) -> "Amount":
        return cls(currency_code=Currency.parse(currency), value=value)

    @classmethod
    def eur(cls, value: Any) -> "Amount":
        return cls(currency_code=Currency.EUR, value=value)

    @classmethod
    def usd(cls, value: Any) -> "Amount":
        return cls(currency_code=Currency.USD, value=value)


class Payee(PayPalModel):
    email_address: Optional[str] = None
    merchant_id: Optional[str] = None


class PlatformFee(PayPalModel):
    amount: Money
    payee: Optional[Payee] = None


class DisbursementMode(str, Enum):
    INSTANT = "INSTANT"
    DELAYED = "DELAYED"


class PaymentInstruction(PayPalModel):
    platform_fees: Optional[list[PlatformFee]] = None
    disbursement_mode: Optional[DisbursementMode] = None


class ItemCategoryType(str, Enum):
    DIGITAL_GOODS = "DIGITAL_GOODS"
    PHYSICAL_GOODS = "PHYSICAL_GOODS"
    DONATION = "DONATION"


class ShippingDetailName(PayPalModel):
    full_name: str


class ShippingDetail(PayPalModel):
    name: Optional[ShippingDetailName] = None
    address: Optional[Address] = None


class Item(PayPalModel):
    name: str
    unit_amount: Money
    quantity: str
    tax: Optional[Money] = None
    description: Optional[str] = None
    sku: Optional[str] = None
    category: Optional[ItemCategoryType] = None


class AuthorizationStatus(str, Enum):
    CREATED = "CREATED"
    CAPTURED = "CAPTURED"
    DENIED = "DENIED"
    EXPIRED = "EXPIRED"
    PARTIALLY_EXPIRED = "PARTIALLY_EXPIRED"
    PARTIALLY_CAPTURED = "PARTIALLY_CAPTURED"
    VOIDED = "VOIDED"
    PENDING = "PENDING"


class AuthorizationWithData(PayPalModel):
    id: Optional[str] = None
    status: AuthorizationStatus
    status_details: Optional[AuthorizationStatusDetails] = None
    amount: Optional[Money] = None
    expiration_time: Optional[datetime] = None
    links: list[LinkDescription] = []


class CaptureStatus(str, Enum):
    COMPLETED = "COMPLETED"
    DECLINED = "DECLINED"
    PARTIALLY_REFUNDED = "PARTIALLY_REFUNDED"
    PENDING = "PENDING"
    REFUNDED = "REFUNDED"
    FAILED = "FAILED"


class CaptureStatusDetailsReason(str, Enum):
    BUYER_COMPLAINT = "BUYER_COMPLAINT"
    CHARGEBACK = "CHARGEBACK"
    ECHECK = "ECHECK"
    INTERNATIONAL_WITHDRAWAL = "INTERNATIONAL_WITHDRAWAL"
    OTHER = "OTHER"
    PENDING_REVIEW = "PENDING_REVIEW"
    RECEIVING_PREFERENCE_MANDATES_MANUAL_ACTION = "RECEIVING_PREFERENCE_MANDATES_MANUAL_ACTION"
    REFUNDED = "REFUNDED"
    TRANSACTION_APPROVED_AWAITING_FUNDING = "TRANSACTION_APPROVED_AWAITING_FUNDING"
    UNILATERAL = "UNILATERAL"
    VERIFICATION_REQUIRED = "VERIFICATION_REQUIRED"


class CaptureStatusDetails(PayPalModel):
    reason: CaptureStatusDetailsReason


class Capture(PayPalModel):
    id: Optional[str] = None
    status: CaptureStatus
    status_details: Optional[CaptureStatusDetails] = None
    amount: Optional[Money] = None
    final_capture: Optional[bool] = None
    links: list[LinkDescription] = []


class RefundStatus(str, Enum):
    CANCELLED = "CANCELLED"
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"


class RefundStatusDetailsReason(str, Enum):
    ECHECK = "ECHECK"


class RefundStatusDetails(PayPalModel):
    reason: RefundStatusDetailsReason


class ExchangeRate(PayPalModel):
    source_currency: Currency
    target_currency: Currency
    value: str


class NetAmountBreakdown(PayPalModel):
    converted_amount: Optional[Money] = None
    exchange_rate: Optional[ExchangeRate] = None
    payable_amount: Optional[Money] = None


class SellerPayableBreakdown(PayPalModel):
    gross_amount: Optional[Money] = None
    net_amount: Optional[Money] = None
    net_amount_breakdown: Optional[list[NetAmountBreakdown]] = None
    net_amount_in_receivable_currency: Optional[Money] = None
    paypal_fee: Optional[Money] = None
    paypal_fee_in_receivable_currency: Optional[Money] = None
    platform_fees: Optional[list[PlatformFee]] = None
    total_refunded_amount: Optional[Money] = None


class Refund(PayPalModel):
    id: str
    status: RefundStatus
    status_details: Optional[RefundStatusDetails] = None
    amount: Optional[Money] = None
    invoice_id: Optional[str] = None
    note_to_payer: Optional[str] = None
    seller_payable_breakdown: Optional[SellerPayableBreakdown] = None
    links: list[LinkDescription] = []


class PaymentCollection(PayPalModel):
    """Payments made against a purchase unit."""

    authorizations: list[AuthorizationWithData] = []
    captures: list[Capture] = []
    refunds: list[Refund] = []


class PurchaseUnit(PayPalModel):
    """A contract between the payer and one payee. ``amount`` is required."""

    reference_id: Optional[str] = None
    amount: Amount
    payee: Optional[Payee] = None
    payment_instruction: Optional[PaymentInstruction] = None
    description: Optional[str] = None
    custom_id: Optional[str] = None
    invoice_id: Optional[str] = None
    id: Optional[str] = None
    soft_descriptor: Optional[str] = None
    items: Optional[list[Item]] = None
    shipping: Optional[ShippingDetail] = None
    payments: Optional[PaymentCollection] = None

    @classmethod
    def new(cls, amount: Amount) -> "PurchaseUnit":
        return cls(amount=amount)


class LandingPage(str, Enum):
    LOGIN = "LOGIN"
    BILLING = "BILLING"
    NO_PREFERENCE = "NO_PREFERENCE"


class ShippingPreference(str, Enum):
    GET_FROM_FILE = "GET_FROM_FILE"
    NO_SHIPPING = "NO_SHIPPING"
    SET_PROVIDED_ADDRESS = "SET_PROVIDED_ADDRESS"


class UserAction(str, Enum):
    CONTINUE = "CONTINUE"
    PAY_NOW = "PAY_NOW"


class PayeePreferred(str, Enum):
    UNRESTRICTED = "UNRESTRICTED"
    IMMEDIATE_PAYMENT_REQUIRED = "IMMEDIATE_PAYMENT_REQUIRED"


class PaymentMethod(PayPalModel):
    payer_selected: Optional[str] = None
    payee_preferred: Optional[PayeePreferred] = None


class ApplicationContext(PayPalModel):
    """Customizes the payer experience during approval."""

    brand_name: Optional[str] = None
    locale: Optional[str] = None
    landing_page: Optional[LandingPage] = None
    shipping_preference: Optional[ShippingPreference] = None
    user_action: Optional[UserAction] = None
    payment_method: Optional[PaymentMethod] = None
    return_url: Optional[str] = None
    cancel_url: Optional[str] = None


class TransactionReference(PayPalModel):
    id: str
    date: Optional[str] = None
    network: Optional[str] = None


class StoredCredential(PayPalModel):
    """Details of a card stored for merchant or customer initiated payments."""

    payment_initiator: str
    payment_type: str
    usage: Optional[str] = None
    previous_network_transaction_reference: Optional[TransactionReference] = None


class PaymentCard(PayPalModel):
    number: str
    expiry: str  # YYYY-MM
    name: Optional[str] = None
    security_code: Optional[str] = None
    billing_address: Optional[Address] = None


class PaymentSourceToken(PayPalModel):
    id: str
    # Only BILLING_AGREEMENT is accepted by PayPal.
    type: str = "BILLING_AGREEMENT"


class OrderPaymentSource(PayPalModel):
    card: Optional[PaymentCard] = None
    token: Optional[PaymentSourceToken] = None
    stored_credential: Optional[StoredCredential] = None


class OrderPayload(PayPalModel):
    """Request body of the create order endpoint."""

    intent: Intent
    purchase_units: list[PurchaseUnit] = Field(min_length=1)
    payer: Optional[Payer] = None
    application_context: Optional[ApplicationContext] = None
    payment_source: Optional[OrderPaymentSource] = None

    @classmethod
    def new(cls, intent: Intent, purchase_units: list[PurchaseUnit]) -> "OrderPayload":
        return cls(intent=intent, purchase_units=list(purchase_units))


class PaymentSource(PayPalModel):
    token: PaymentSourceToken


class PaymentSourceBody(PayPalModel):
    """Body of the capture and authorize order endpoints."""

    payment_source: Optional[PaymentSource] = None


class CardBrand(str, Enum):
    VISA = "VISA"
    MASTERCARD = "MASTERCARD"
    DISCOVER = "DISCOVER"
    AMEX = "AMEX"
    SOLO = "SOLO"
    JCB = "JCB"
    STAR = "STAR"
    DELTA = "DELTA"
    SWITCH = "SWITCH"
    MAESTRO = "MAESTRO"
    CB_NATIONALE = "CB_NATIONALE"
    CONFIGOGA = "CONFIGOGA"
    CONFIDIS = "CONFIDIS"
    ELECTRON = "ELECTRON"
    CETELEM = "CETELEM"
    CHINA_UNION_PAY = "CHINA_UNION_PAY"


class CardType(str, Enum):
    CREDIT = "CREDIT"
    DEBIT = "DEBIT"
    PREPAID = "PREPAID"
    UNKNOWN = "UNKNOWN"


class CardResponse(PayPalModel):
    last_digits: Optional[str] = None
    brand: Optional[CardBrand] = None
    type: Optional[CardType] = None


class WalletResponse(PayPalModel):
    apple_pay: Optional[CardResponse] = None


class PaymentSourceResponse(PayPalModel):
    card: Optional[CardResponse] = None
    wallet: Optional[WalletResponse] = None


class OrderStatus(str, Enum):
    CREATED = "CREATED"
    SAVED = "SAVED"
    APPROVED = "APPROVED"
    VOIDED = "VOIDED"
    COMPLETED = "COMPLETED"
    PAYER_ACTION_REQUIRED = "PAYER_ACTION_REQUIRED"


class Order(PayPalModel):
    """An order as returned by the orders API."""

    id: str
    status: OrderStatus
    intent: Optional[Intent] = None
    create_time: Optional[datetime] = None
    update_time: Optional[datetime] = None
    payment_source: Optional[PaymentSourceResponse] = None
    payer: Optional[Payer] = None
    purchase_units: Optional[list[PurchaseUnit]] = None
    links: list[LinkDescription] = []

    @property
    def approve_url(self) -> Optional[str]:
        """Where the buyer approves the order (``approve`` or ``payer-action`` link)."""
        return find_link(self.links, "approve") or find_link(self.links, "payer-action")

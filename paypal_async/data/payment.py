"""PayPal object definitions used by the payments API."""

from datetime import datetime
from enum import Enum
from typing import Optional

from paypal_async.data.common import (
    AuthorizationStatusDetails,
    LinkDescription,
    Money,
    PayPalModel,
    SellerProtection,
)


class PaymentStatus(str, Enum):
    CREATED = "CREATED"
    CAPTURED = "CAPTURED"
    DENIED = "DENIED"
    EXPIRED = "EXPIRED"
    PARTIALLY_CAPTURED = "PARTIALLY_CAPTURED"
    PARTIALLY_CREATED = "PARTIALLY_CREATED"
    VOIDED = "VOIDED"
    PENDING = "PENDING"


class AuthorizedPaymentDetails(PayPalModel):
    id: str
    status: PaymentStatus
    status_details: Optional[AuthorizationStatusDetails] = None
    amount: Optional[Money] = None
    invoice_id: Optional[str] = None
    custom_id: Optional[str] = None
    seller_protection: Optional[SellerProtection] = None
    expiration_time: Optional[datetime] = None
    create_time: Optional[datetime] = None
    update_time: Optional[datetime] = None
    links: list[LinkDescription] = []

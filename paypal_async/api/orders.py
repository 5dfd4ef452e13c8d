"""
An order represents a payment between two or more parties. Use the Orders API
to create, retrieve, authorize, and capture orders.

Reference: https://developer.paypal.com/docs/api/orders/v2/
"""

from typing import Optional
from urllib.parse import quote

from paypal_async.data.orders import Order, OrderPayload, PaymentSourceBody
from paypal_async.endpoint import Endpoint


class CreateOrder(Endpoint[Order]):
    """Creates an order."""

    method = "POST"
    response_model = Order

    def __init__(self, order: OrderPayload):
        self.order = order

    def relative_path(self) -> str:
        return "/v2/checkout/orders"

    def body(self) -> OrderPayload:
        return self.order


class ShowOrderDetails(Endpoint[Order]):
    """Shows details for an order, by ID."""

    response_model = Order

    def __init__(self, order_id: str):
        self.order_id = order_id

    def relative_path(self) -> str:
        return f"/v2/checkout/orders/{quote(self.order_id, safe='')}"


class CaptureOrder(Endpoint[Order]):
    """Captures payment for an order.

    The buyer must have approved the order through its ``approve`` link, or a
    valid ``payment_source`` must be supplied in the body.
    """

    method = "POST"
    response_model = Order

    def __init__(self, order_id: str, body: Optional[PaymentSourceBody] = None):
        self.order_id = order_id
        self.payload = body or PaymentSourceBody()

    def relative_path(self) -> str:
        return f"/v2/checkout/orders/{quote(self.order_id, safe='')}/capture"

    def body(self) -> PaymentSourceBody:
        return self.payload


class AuthorizeOrder(Endpoint[Order]):
    """Authorizes payment for an approved order."""

    method = "POST"
    response_model = Order

    def __init__(self, order_id: str, body: Optional[PaymentSourceBody] = None):
        self.order_id = order_id
        self.payload = body or PaymentSourceBody()

    def relative_path(self) -> str:
        return f"/v2/checkout/orders/{quote(self.order_id, safe='')}/authorize"

    def body(self) -> PaymentSourceBody:
        return self.payload

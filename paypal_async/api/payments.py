"""
Call the Payments API to show authorized payment information.

Reference: https://developer.paypal.com/docs/api/payments/v2/
"""

from urllib.parse import quote

from paypal_async.data.payment import AuthorizedPaymentDetails
from paypal_async.endpoint import Endpoint


class GetAuthorizedPayment(Endpoint[AuthorizedPaymentDetails]):
    """Shows details for an authorized payment, by ID."""

    response_model = AuthorizedPaymentDetails

    def __init__(self, authorization_id: str):
        self.authorization_id = authorization_id

    def relative_path(self) -> str:
        return f"/v2/payments/authorizations/{quote(self.authorization_id, safe='')}"

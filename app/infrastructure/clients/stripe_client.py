from __future__ import annotations

import logging

import stripe

from app.application.dto.billing import CheckoutSessionResult
from app.application.ports.stripe_port import StripePort
from app.domain.exceptions import BillingError


logger = logging.getLogger(__name__)


class StripeClient(StripePort):
    def __init__(self, *, secret_key: str):
        stripe.api_key = secret_key

    def create_checkout_session(
        self,
        *,
        price_id: str,
        quantity: int,
        metadata: dict,
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSessionResult:
        payload: dict = {
            "mode": "payment",
            "line_items": [{"price": price_id, "quantity": quantity}],
            "payment_intent_data": {"metadata": metadata},
            "success_url": success_url,
            "cancel_url": cancel_url,
        }

        try:
            session = stripe.checkout.Session.create(**payload)
        except Exception as exc:
            logger.exception(
                "stripe_client: checkout_session_failed price_id=%s quantity=%s",
                price_id,
                quantity,
            )
            raise BillingError("Failed to create Stripe checkout session.") from exc

        session_id = getattr(session, "id", None)
        session_url = getattr(session, "url", None)
        if not session_id or not session_url:
            logger.error(
                "stripe_client: checkout_session_incomplete session_id=%s has_url=%s",
                session_id,
                bool(session_url),
            )
            raise BillingError("Stripe checkout session response is incomplete.")

        return CheckoutSessionResult(id=str(session_id), url=str(session_url))

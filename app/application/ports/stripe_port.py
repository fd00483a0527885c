from __future__ import annotations

from typing import Protocol

from app.application.dto.billing import CheckoutSessionResult


class StripePort(Protocol):
    def create_checkout_session(
        self,
        *,
        price_id: str,
        quantity: int,
        metadata: dict,
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSessionResult:
        ...

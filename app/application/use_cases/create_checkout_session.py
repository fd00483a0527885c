from __future__ import annotations

import logging

from app.application.dto.billing import CreateCheckoutSessionInput, CreateCheckoutSessionOutput
from app.application.ports.stripe_port import StripePort
from app.domain.exceptions import InvalidCheckoutRequestError


logger = logging.getLogger(__name__)


class CreateCheckoutSessionUseCase:
    def __init__(
        self,
        *,
        stripe_port: StripePort,
        price_id: str,
        public_url: str,
        max_credits: int,
    ):
        self._stripe_port = stripe_port
        self._price_id = price_id
        self._public_url = public_url
        self._max_credits = max_credits

    @property
    def success_url(self) -> str:
        return f"{self._public_url}?creditsPurchased"

    @property
    def cancel_url(self) -> str:
        return self._public_url

    def execute(self, command: CreateCheckoutSessionInput) -> CreateCheckoutSessionOutput:
        if command.credits <= 0:
            raise InvalidCheckoutRequestError("credits must be greater than zero.")
        if command.credits > self._max_credits:
            raise InvalidCheckoutRequestError(f"credits must be at most {self._max_credits}.")

        result = self._stripe_port.create_checkout_session(
            price_id=self._price_id,
            quantity=command.credits,
            metadata={"credits": command.credits, "userId": command.user_id},
            success_url=self.success_url,
            cancel_url=self.cancel_url,
        )
        logger.info(
            "create_checkout_session: created session_id=%s user_id=%s credits=%s",
            result.id,
            command.user_id,
            command.credits,
        )
        return CreateCheckoutSessionOutput(
            checkout_session_id=result.id,
            checkout_url=result.url,
        )

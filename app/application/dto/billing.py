from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CreateCheckoutSessionInput:
    user_id: str
    credits: int


@dataclass(frozen=True)
class CreateCheckoutSessionOutput:
    checkout_session_id: str
    checkout_url: str


@dataclass(frozen=True)
class CheckoutSessionResult:
    id: str
    url: str

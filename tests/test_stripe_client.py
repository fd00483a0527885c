from __future__ import annotations

from types import SimpleNamespace

import pytest
import stripe

from app.domain.exceptions import BillingError
from app.infrastructure.clients.stripe_client import StripeClient


@pytest.fixture
def stripe_client(monkeypatch: pytest.MonkeyPatch) -> StripeClient:
    monkeypatch.setattr(stripe, "api_key", None)
    return StripeClient(secret_key="sk_test_123")


def test_create_checkout_session_builds_one_time_payment(
    stripe_client: StripeClient,
    monkeypatch: pytest.MonkeyPatch,
):
    captured: dict = {}

    def fake_create(**kwargs):
        captured.update(kwargs)
        return SimpleNamespace(id="cs_test_1", url="https://checkout.stripe.com/c/pay/cs_test_1")

    monkeypatch.setattr(stripe.checkout.Session, "create", fake_create)

    result = stripe_client.create_checkout_session(
        price_id="price_non_prod",
        quantity=5,
        metadata={"credits": 5, "userId": "u1"},
        success_url="https://game.example.com?creditsPurchased",
        cancel_url="https://game.example.com",
    )

    assert stripe.api_key == "sk_test_123"
    assert result.id == "cs_test_1"
    assert result.url == "https://checkout.stripe.com/c/pay/cs_test_1"
    assert captured == {
        "mode": "payment",
        "line_items": [{"price": "price_non_prod", "quantity": 5}],
        "payment_intent_data": {"metadata": {"credits": 5, "userId": "u1"}},
        "success_url": "https://game.example.com?creditsPurchased",
        "cancel_url": "https://game.example.com",
    }


def test_create_checkout_session_wraps_provider_errors(
    stripe_client: StripeClient,
    monkeypatch: pytest.MonkeyPatch,
):
    def fake_create(**kwargs):
        _ = kwargs
        raise stripe.APIConnectionError("network down")

    monkeypatch.setattr(stripe.checkout.Session, "create", fake_create)

    with pytest.raises(BillingError) as exc_info:
        stripe_client.create_checkout_session(
            price_id="price_non_prod",
            quantity=1,
            metadata={},
            success_url="https://game.example.com?creditsPurchased",
            cancel_url="https://game.example.com",
        )

    assert isinstance(exc_info.value.__cause__, stripe.APIConnectionError)


def test_create_checkout_session_rejects_session_without_url(
    stripe_client: StripeClient,
    monkeypatch: pytest.MonkeyPatch,
):
    monkeypatch.setattr(
        stripe.checkout.Session,
        "create",
        lambda **kwargs: SimpleNamespace(id="cs_test_1", url=None),
    )

    with pytest.raises(BillingError):
        stripe_client.create_checkout_session(
            price_id="price_non_prod",
            quantity=1,
            metadata={},
            success_url="https://game.example.com?creditsPurchased",
            cancel_url="https://game.example.com",
        )

from __future__ import annotations

import pytest

from app.shared.config import CheckoutPrices, get_settings


def test_checkout_prices_select_by_environment():
    prices = CheckoutPrices(production="price_prod", non_production="price_dev")

    assert prices.for_environment("production") == "price_prod"
    assert prices.for_environment("development") == "price_dev"
    assert prices.for_environment("staging") == "price_dev"


def test_get_settings_selects_production_price(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("APP_ENV", "Production")
    monkeypatch.setenv("STRIPE_PRICE_ID_PRODUCTION", "price_prod")
    monkeypatch.setenv("STRIPE_PRICE_ID_NON_PRODUCTION", "price_dev")

    settings = get_settings()

    assert settings.is_production is True
    assert settings.checkout_price_id == "price_prod"


def test_get_settings_defaults(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "APP_ENV",
        "STRIPE_PRICE_ID_PRODUCTION",
        "STRIPE_PRICE_ID_NON_PRODUCTION",
        "CHECKOUT_MAX_CREDITS",
        "STARTING_CREDITS",
        "SUPABASE_URL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.is_production is False
    assert settings.checkout_price_id == "price_1R4EuZLoYru0yFboEZ6Fxzm7"
    assert settings.checkout_max_credits == 10000
    assert settings.starting_credits == 100
    assert settings.supabase_url == ""


def test_get_settings_strips_trailing_slash_from_supabase_url(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.co/")

    assert get_settings().supabase_url == "https://project.supabase.co"

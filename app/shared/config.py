from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


PRODUCTION_ENV = "production"


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _csv(name: str, default: str) -> tuple[str, ...]:
    value = _env(name, default) or ""
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class CheckoutPrices:
    production: str
    non_production: str

    def for_environment(self, app_env: str) -> str:
        if app_env == PRODUCTION_ENV:
            return self.production
        return self.non_production


@dataclass(frozen=True)
class Settings:
    app_env: str
    log_level: str
    cors_allow_origins: tuple[str, ...]
    stripe_secret_key: str
    checkout_prices: CheckoutPrices
    public_url: str
    checkout_max_credits: int
    supabase_url: str
    supabase_service_role_key: str
    supabase_timeout_seconds: float
    postgres_dsn: str
    starting_credits: int

    @property
    def is_production(self) -> bool:
        return self.app_env == PRODUCTION_ENV

    @property
    def checkout_price_id(self) -> str:
        return self.checkout_prices.for_environment(self.app_env)


def get_settings() -> Settings:
    return Settings(
        app_env=(_env("APP_ENV", "development") or "development").strip().lower(),
        log_level=(_env("LOG_LEVEL", "INFO") or "INFO").upper(),
        cors_allow_origins=_csv("CORS_ALLOW_ORIGINS", "*"),
        stripe_secret_key=_env("STRIPE_SECRET_KEY", ""),
        checkout_prices=CheckoutPrices(
            production=_env("STRIPE_PRICE_ID_PRODUCTION", "price_1R4EQvLoYru0yFboaqhwLVd0"),
            non_production=_env("STRIPE_PRICE_ID_NON_PRODUCTION", "price_1R4EuZLoYru0yFboEZ6Fxzm7"),
        ),
        public_url=_env("PUBLIC_URL", ""),
        checkout_max_credits=int(_env("CHECKOUT_MAX_CREDITS", "10000")),
        supabase_url=(_env("SUPABASE_URL", "") or "").rstrip("/"),
        supabase_service_role_key=_env("SUPABASE_SERVICE_ROLE_KEY", ""),
        supabase_timeout_seconds=float(_env("SUPABASE_TIMEOUT_SECONDS", "10")),
        postgres_dsn=_env("POSTGRES_DSN", ""),
        starting_credits=int(_env("STARTING_CREDITS", "100")),
    )

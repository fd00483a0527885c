from __future__ import annotations

from functools import lru_cache

from fastapi import HTTPException

from app.application.ports.profile_port import ProfilePort
from app.application.use_cases.create_checkout_session import CreateCheckoutSessionUseCase
from app.application.use_cases.register_profile import RegisterProfileUseCase
from app.infrastructure.clients.supabase_client import SupabaseClient, SupabaseClientSettings
from app.infrastructure.db.engine import get_engine
from app.infrastructure.db.repositories.profile_repository import SqlProfileRepository
from app.shared.config import get_settings


@lru_cache(maxsize=1)
def _get_stripe_client() -> "StripeClient":
    from app.infrastructure.clients.stripe_client import StripeClient

    settings = get_settings()
    if not settings.stripe_secret_key:
        raise HTTPException(status_code=500, detail="STRIPE_SECRET_KEY is required.")
    return StripeClient(secret_key=settings.stripe_secret_key)


def _get_supabase_client() -> SupabaseClient:
    settings = get_settings()
    if not settings.supabase_url:
        raise HTTPException(status_code=500, detail="SUPABASE_URL is required.")
    if not settings.supabase_service_role_key:
        raise HTTPException(status_code=500, detail="SUPABASE_SERVICE_ROLE_KEY is required.")
    return SupabaseClient(
        SupabaseClientSettings(
            url=settings.supabase_url,
            service_role_key=settings.supabase_service_role_key,
            timeout_seconds=settings.supabase_timeout_seconds,
        )
    )


def _get_profile_store() -> ProfilePort:
    settings = get_settings()
    if settings.postgres_dsn:
        return SqlProfileRepository(get_engine(settings.postgres_dsn))
    return _get_supabase_client()


def get_create_checkout_session_use_case() -> CreateCheckoutSessionUseCase:
    settings = get_settings()
    if not settings.public_url:
        raise HTTPException(status_code=500, detail="PUBLIC_URL is required.")
    return CreateCheckoutSessionUseCase(
        stripe_port=_get_stripe_client(),
        price_id=settings.checkout_price_id,
        public_url=settings.public_url,
        max_credits=settings.checkout_max_credits,
    )


def get_register_profile_use_case() -> RegisterProfileUseCase:
    settings = get_settings()
    return RegisterProfileUseCase(
        identity_port=_get_supabase_client(),
        profile_port=_get_profile_store(),
        starting_credits=settings.starting_credits,
    )

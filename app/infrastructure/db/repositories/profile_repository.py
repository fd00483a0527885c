from __future__ import annotations

import json
import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.application.ports.profile_port import ProfilePort
from app.domain.entities.profile import Profile
from app.domain.exceptions import ProfileStoreError


logger = logging.getLogger(__name__)


class SqlProfileRepository(ProfilePort):
    def __init__(self, engine):
        self._engine = engine

    def profile_exists(self, *, profile_id: str) -> bool:
        sql = """
            SELECT id
            FROM public.profiles
            WHERE id = :profile_id
            LIMIT 1
        """
        try:
            with self._engine.connect() as conn:
                row = conn.execute(text(sql), {"profile_id": profile_id}).mappings().first()
        except SQLAlchemyError as exc:
            logger.exception("profile_repository: select_failed profile_id=%s", profile_id)
            raise ProfileStoreError("Profile lookup failed.") from exc
        return row is not None

    def insert_profile(self, *, profile: Profile) -> None:
        sql = """
            INSERT INTO public.profiles (
                id, first_name, last_name, email, credits, settings, created_at
            ) VALUES (
                :id, :first_name, :last_name, :email, :credits, CAST(:settings AS jsonb), :created_at
            )
            ON CONFLICT (id) DO NOTHING
        """
        params = {
            "id": profile.id,
            "first_name": profile.first_name,
            "last_name": profile.last_name,
            "email": profile.email,
            "credits": profile.credits,
            "settings": json.dumps(profile.settings),
            "created_at": profile.created_at,
        }
        try:
            with self._engine.begin() as conn:
                conn.execute(text(sql), params)
        except SQLAlchemyError as exc:
            logger.exception("profile_repository: insert_failed profile_id=%s", profile.id)
            raise ProfileStoreError("Profile insert failed.") from exc

from __future__ import annotations

from dataclasses import dataclass
import logging
from urllib.parse import quote

import httpx

from app.application.ports.identity_port import IdentityPort
from app.application.ports.profile_port import ProfilePort
from app.domain.entities.profile import IdentityUser, Profile
from app.domain.exceptions import IdentityLookupError, ProfileStoreError
from app.infrastructure.db.mappers.profile_mapper import map_profile_to_row


logger = logging.getLogger(__name__)


PROFILES_TABLE = "profiles"
DOT_SEGMENTS = {".", ".."}


@dataclass(frozen=True)
class SupabaseClientSettings:
    url: str
    service_role_key: str
    timeout_seconds: float


class SupabaseClient(IdentityPort, ProfilePort):
    """Identity and profile access through the Supabase auth admin and REST APIs."""

    def __init__(
        self,
        settings: SupabaseClientSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ):
        self._settings = settings
        self._transport = transport

    def get_user_by_id(self, *, user_id: str) -> IdentityUser | None:
        # A bare dot segment would be collapsed into the parent path by the URL parser.
        if not user_id or user_id in DOT_SEGMENTS:
            return None

        try:
            response = self._request("GET", f"/auth/v1/admin/users/{quote(user_id, safe='')}")
        except httpx.HTTPError as exc:
            logger.exception("supabase_client: identity_lookup_failed user_id=%s", user_id)
            raise IdentityLookupError("Identity lookup failed.") from exc

        if response.status_code == 404:
            return None
        if response.is_error:
            logger.error(
                "supabase_client: identity_lookup_status user_id=%s status=%s body=%s",
                user_id,
                response.status_code,
                response.text,
            )
            raise IdentityLookupError(f"Identity lookup returned status {response.status_code}.")

        payload = _json_or_error(response, IdentityLookupError)
        # Some versions wrap the user as {"user": {...}}.
        if isinstance(payload, dict) and isinstance(payload.get("user"), dict):
            payload = payload["user"]
        if not isinstance(payload, dict) or not payload.get("id"):
            return None
        if str(payload["id"]) != user_id:
            logger.warning(
                "supabase_client: identity_id_mismatch requested=%s returned=%s",
                user_id,
                payload["id"],
            )
            return None
        return IdentityUser(id=str(payload["id"]), email=payload.get("email"))

    def profile_exists(self, *, profile_id: str) -> bool:
        try:
            response = self._request(
                "GET",
                f"/rest/v1/{PROFILES_TABLE}",
                params={"id": f"eq.{profile_id}", "select": "id", "limit": "1"},
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.exception("supabase_client: profile_select_failed profile_id=%s", profile_id)
            raise ProfileStoreError("Profile lookup failed.") from exc

        rows = _json_or_error(response, ProfileStoreError)
        if not isinstance(rows, list):
            raise ProfileStoreError("Unexpected profile lookup response from Supabase.")
        return bool(rows)

    def insert_profile(self, *, profile: Profile) -> None:
        try:
            response = self._request(
                "POST",
                f"/rest/v1/{PROFILES_TABLE}",
                params={"on_conflict": "id"},
                json=map_profile_to_row(profile),
                headers={"Prefer": "resolution=ignore-duplicates,return=minimal"},
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.exception("supabase_client: profile_insert_failed profile_id=%s", profile.id)
            raise ProfileStoreError("Profile insert failed.") from exc

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict | None = None,
        json: dict | None = None,
        headers: dict | None = None,
    ) -> httpx.Response:
        with httpx.Client(
            base_url=self._settings.url,
            timeout=self._settings.timeout_seconds,
            headers=self._auth_headers(),
            transport=self._transport,
        ) as client:
            return client.request(method, path, params=params, json=json, headers=headers)

    def _auth_headers(self) -> dict:
        return {
            "apikey": self._settings.service_role_key,
            "Authorization": f"Bearer {self._settings.service_role_key}",
        }


def _json_or_error(response: httpx.Response, error_type: type[Exception]):
    try:
        return response.json()
    except ValueError as exc:
        raise error_type("Unexpected response body from Supabase.") from exc

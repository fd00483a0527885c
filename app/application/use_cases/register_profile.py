from __future__ import annotations

import logging
from datetime import datetime, timezone

from app.application.dto.profiles import RegisterProfileInput, RegisterProfileOutput
from app.application.ports.identity_port import IdentityPort
from app.application.ports.profile_port import ProfilePort
from app.domain.entities.profile import Profile
from app.domain.exceptions import UserNotFoundError


logger = logging.getLogger(__name__)

DEFAULT_STARTING_CREDITS = 100


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RegisterProfileUseCase:
    """Create the profile of an authenticated user on first registration.

    Re-registering a user that already has a profile is a no-op. The insert is
    delegated to ``ProfilePort.insert_profile``, which must ignore an existing
    row, so two concurrent registrations for the same id cannot produce a
    duplicate.
    """

    def __init__(
        self,
        *,
        identity_port: IdentityPort,
        profile_port: ProfilePort,
        starting_credits: int = DEFAULT_STARTING_CREDITS,
    ):
        self._identity_port = identity_port
        self._profile_port = profile_port
        self._starting_credits = starting_credits

    def execute(self, command: RegisterProfileInput) -> RegisterProfileOutput:
        exists = self._profile_port.profile_exists(profile_id=command.user_id)

        user = self._identity_port.get_user_by_id(user_id=command.user_id)
        if user is None:
            raise UserNotFoundError("User not found")

        if exists:
            return RegisterProfileOutput(user_id=command.user_id, created=False)

        self._profile_port.insert_profile(
            profile=Profile(
                id=command.user_id,
                first_name=command.first_name,
                last_name=command.last_name,
                email=command.email,
                credits=self._starting_credits,
                settings={},
                created_at=utcnow(),
            )
        )
        logger.info(
            "register_profile: created user_id=%s credits=%s",
            command.user_id,
            self._starting_credits,
        )
        return RegisterProfileOutput(user_id=command.user_id, created=True)

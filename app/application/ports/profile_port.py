from __future__ import annotations

from typing import Protocol

from app.domain.entities.profile import Profile


class ProfilePort(Protocol):
    def profile_exists(self, *, profile_id: str) -> bool:
        ...

    def insert_profile(self, *, profile: Profile) -> None:
        """Insert the profile unless one with the same id already exists."""
        ...

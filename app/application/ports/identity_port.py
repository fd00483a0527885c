from __future__ import annotations

from typing import Protocol

from app.domain.entities.profile import IdentityUser


class IdentityPort(Protocol):
    def get_user_by_id(self, *, user_id: str) -> IdentityUser | None:
        """Return None when the user does not exist; raise IdentityLookupError on failure."""
        ...

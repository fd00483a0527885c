from __future__ import annotations

from app.domain.entities.profile import Profile


def map_profile_to_row(profile: Profile) -> dict:
    return {
        "id": profile.id,
        "first_name": profile.first_name,
        "last_name": profile.last_name,
        "email": profile.email,
        "credits": profile.credits,
        "settings": dict(profile.settings),
        "created_at": profile.created_at.isoformat(),
    }

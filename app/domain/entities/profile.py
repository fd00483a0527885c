from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Profile:
    id: str
    first_name: str
    last_name: str
    email: str
    credits: int
    created_at: datetime
    settings: dict = field(default_factory=dict)


@dataclass(frozen=True)
class IdentityUser:
    id: str
    email: str | None

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RegisterProfileInput:
    user_id: str
    first_name: str
    last_name: str
    email: str


@dataclass(frozen=True)
class RegisterProfileOutput:
    user_id: str
    created: bool

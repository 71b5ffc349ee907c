from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class UserRole(str, Enum):
    OWNER = "OWNER"
    PROFESSIONAL = "PROFESSIONAL"
    RECEPTIONIST = "RECEPTIONIST"


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str
    role: UserRole
    photo_url: str | None = None
    professional_id: str | None = None  # links a PROFESSIONAL user to their profile

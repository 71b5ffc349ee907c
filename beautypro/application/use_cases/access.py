from __future__ import annotations

import logging

from beautypro.application.ports.user_directory import UserDirectoryPort
from beautypro.domain.entities.user import User, UserRole


AREAS = ("dashboard", "agenda", "clients", "services", "team", "finance", "marketing", "settings")

_ROLE_AREAS: dict[UserRole, frozenset[str]] = {
    UserRole.OWNER: frozenset(AREAS),
    UserRole.RECEPTIONIST: frozenset({"dashboard", "agenda", "clients"}),
    UserRole.PROFESSIONAL: frozenset({"agenda", "clients"}),
}


def can_access(user: User | None, area: str) -> bool:
    if user is None:
        return False
    return area in _ROLE_AREAS.get(user.role, frozenset())


def sees_financials(user: User | None) -> bool:
    return user is not None and user.role == UserRole.OWNER


class LoginUseCase:
    """Demo login: picks a seeded user by email. There are no credentials."""

    def __init__(self, users: UserDirectoryPort) -> None:
        self._users = users
        self._logger = logging.getLogger(__name__)

    def execute(self, email: str) -> User | None:
        user = self._users.find_by_email(email or "")
        if user is None:
            self._logger.info("Login rejected", extra={"reason": "unknown_email"})
            return None
        self._logger.info("Login", extra={"user_id": user.id, "role": user.role.value})
        return user

    def users(self) -> list[User]:
        return self._users.list()

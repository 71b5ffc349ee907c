from __future__ import annotations

from abc import ABC, abstractmethod

from beautypro.domain.entities.user import User


class UserDirectoryPort(ABC):
    @abstractmethod
    def find_by_email(self, email: str) -> User | None:
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[User]:
        raise NotImplementedError

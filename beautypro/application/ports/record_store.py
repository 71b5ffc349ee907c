from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar


T = TypeVar("T")


class RecordStorePort(ABC, Generic[T]):
    """Keyed collection of immutable records. Records are replaced, never mutated in place."""

    @abstractmethod
    def get(self, record_id: str) -> T | None:
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[T]:
        """All records in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def add(self, record: T) -> None:
        raise NotImplementedError

    @abstractmethod
    def replace(self, record: T) -> None:
        """Swap the stored record with the same id. Unknown ids raise KeyError."""
        raise NotImplementedError

    @abstractmethod
    def remove(self, record_id: str) -> bool:
        """Returns True if a record was removed."""
        raise NotImplementedError

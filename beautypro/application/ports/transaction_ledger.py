from __future__ import annotations

from abc import ABC, abstractmethod

from beautypro.domain.entities.transaction import Transaction


class TransactionLedgerPort(ABC):
    """Append-only list of financial entries."""

    @abstractmethod
    def append(self, transaction: Transaction) -> None:
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[Transaction]:
        """Entries in posting order."""
        raise NotImplementedError

    @abstractmethod
    def find_by_appointment(self, appointment_id: str) -> Transaction | None:
        raise NotImplementedError

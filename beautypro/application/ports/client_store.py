from __future__ import annotations

from abc import abstractmethod

from beautypro.application.ports.record_store import RecordStorePort
from beautypro.domain.entities.client import Client


class ClientStorePort(RecordStorePort[Client]):
    @abstractmethod
    def find_by_phone(self, phone_digits: str) -> Client | None:
        """Match on the digits of the stored phone number."""
        raise NotImplementedError

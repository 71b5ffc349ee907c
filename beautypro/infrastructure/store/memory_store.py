from __future__ import annotations

import logging
import re
import threading
from types import TracebackType
from typing import Any, Generic, TypeVar

from beautypro.application.ports.appointment_store import AppointmentStorePort
from beautypro.application.ports.client_store import ClientStorePort
from beautypro.application.ports.professional_store import ProfessionalStorePort
from beautypro.application.ports.service_catalog import ServiceCatalogPort
from beautypro.application.ports.settings_store import SettingsStorePort
from beautypro.application.ports.transaction_ledger import TransactionLedgerPort
from beautypro.application.ports.unit_of_work import UnitOfWorkPort
from beautypro.application.ports.user_directory import UserDirectoryPort
from beautypro.domain.entities.appointment import Appointment
from beautypro.domain.entities.client import Client
from beautypro.domain.entities.professional import Professional
from beautypro.domain.entities.salon_settings import SalonSettings
from beautypro.domain.entities.service import Service
from beautypro.domain.entities.transaction import Transaction
from beautypro.domain.entities.user import User


T = TypeVar("T")

_NON_DIGITS = re.compile(r"\D")


class _MemoryRecords(Generic[T]):
    def __init__(self, records: list[T] | None = None) -> None:
        self._records: dict[str, T] = {}
        for record in records or []:
            self.add(record)

    def get(self, record_id: str) -> T | None:
        return self._records.get(record_id)

    def list(self) -> list[T]:
        return list(self._records.values())

    def add(self, record: T) -> None:
        record_id = getattr(record, "id")
        if record_id in self._records:
            raise KeyError(f"duplicate id: {record_id}")
        self._records[record_id] = record

    def replace(self, record: T) -> None:
        record_id = getattr(record, "id")
        if record_id not in self._records:
            raise KeyError(record_id)
        self._records[record_id] = record

    def remove(self, record_id: str) -> bool:
        return self._records.pop(record_id, None) is not None

    def snapshot(self) -> Any:
        # Records are frozen dataclasses, a shallow copy is enough.
        return dict(self._records)

    def restore(self, snapshot: Any) -> None:
        self._records = dict(snapshot)


class MemoryClientStore(_MemoryRecords[Client], ClientStorePort):
    def find_by_phone(self, phone_digits: str) -> Client | None:
        wanted = _NON_DIGITS.sub("", phone_digits)
        if not wanted:
            return None
        for client in self._records.values():
            if _NON_DIGITS.sub("", client.phone) == wanted:
                return client
        return None


class MemoryServiceCatalog(_MemoryRecords[Service], ServiceCatalogPort):
    pass


class MemoryProfessionalStore(_MemoryRecords[Professional], ProfessionalStorePort):
    pass


class MemoryAppointmentStore(_MemoryRecords[Appointment], AppointmentStorePort):
    pass


class MemoryTransactionLedger(TransactionLedgerPort):
    def __init__(self, transactions: list[Transaction] | None = None) -> None:
        self._entries: list[Transaction] = list(transactions or [])

    def append(self, transaction: Transaction) -> None:
        self._entries.append(transaction)

    def list(self) -> list[Transaction]:
        return list(self._entries)

    def find_by_appointment(self, appointment_id: str) -> Transaction | None:
        for entry in self._entries:
            if entry.appointment_id == appointment_id:
                return entry
        return None

    def snapshot(self) -> Any:
        return list(self._entries)

    def restore(self, snapshot: Any) -> None:
        self._entries = list(snapshot)


class MemorySettingsStore(SettingsStorePort):
    def __init__(self, settings: SalonSettings) -> None:
        self._settings = settings

    def get(self) -> SalonSettings:
        return self._settings

    def put(self, settings: SalonSettings) -> None:
        self._settings = settings

    def snapshot(self) -> Any:
        return self._settings

    def restore(self, snapshot: Any) -> None:
        self._settings = snapshot


class MemoryUserDirectory(UserDirectoryPort):
    def __init__(self, users: list[User] | None = None) -> None:
        self._users = list(users or [])

    def find_by_email(self, email: str) -> User | None:
        wanted = email.strip().lower()
        for user in self._users:
            if user.email.lower() == wanted:
                return user
        return None

    def list(self) -> list[User]:
        return list(self._users)


class MemoryUnitOfWork(UnitOfWorkPort):
    """
    Single-writer unit of work over the in-memory stores.

    Entering the outermost block takes a process-wide re-entrant lock and
    snapshots every store; leaving it with an exception restores the
    snapshots.
    """

    def __init__(
        self,
        clients: MemoryClientStore | None = None,
        services: MemoryServiceCatalog | None = None,
        professionals: MemoryProfessionalStore | None = None,
        appointments: MemoryAppointmentStore | None = None,
        transactions: MemoryTransactionLedger | None = None,
        settings: MemorySettingsStore | None = None,
    ) -> None:
        self.clients = clients or MemoryClientStore()
        self.services = services or MemoryServiceCatalog()
        self.professionals = professionals or MemoryProfessionalStore()
        self.appointments = appointments or MemoryAppointmentStore()
        self.transactions = transactions or MemoryTransactionLedger()
        self.settings = settings or MemorySettingsStore(SalonSettings(salon_name="BeautyPro"))
        self._lock = threading.RLock()
        self._depth = 0
        self._snapshots: list[tuple[Any, Any]] = []
        self._logger = logging.getLogger(__name__)

    def _stores(self) -> tuple[Any, ...]:
        return (
            self.clients,
            self.services,
            self.professionals,
            self.appointments,
            self.transactions,
            self.settings,
        )

    def __enter__(self) -> "MemoryUnitOfWork":
        self._lock.acquire()
        if self._depth == 0:
            self._snapshots = [(store, store.snapshot()) for store in self._stores()]
        self._depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            self._depth -= 1
            if self._depth == 0:
                if exc_type is not None:
                    for store, snapshot in self._snapshots:
                        store.restore(snapshot)
                    self._logger.warning(
                        "Unit of work rolled back",
                        extra={"reason": exc_type.__name__},
                    )
                self._snapshots = []
        finally:
            self._lock.release()

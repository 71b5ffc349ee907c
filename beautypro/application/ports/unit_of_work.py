from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from beautypro.application.ports.appointment_store import AppointmentStorePort
from beautypro.application.ports.client_store import ClientStorePort
from beautypro.application.ports.professional_store import ProfessionalStorePort
from beautypro.application.ports.service_catalog import ServiceCatalogPort
from beautypro.application.ports.settings_store import SettingsStorePort
from beautypro.application.ports.transaction_ledger import TransactionLedgerPort


class UnitOfWorkPort(ABC):
    """
    Groups the salon stores behind a single writer.

    Usage:
        with uow:
            uow.appointments.replace(...)
            uow.transactions.append(...)

    Everything written inside the block commits together. If the block
    raises, every store is restored to its state at entry and the
    exception propagates. Blocks may nest; only the outermost one commits
    or rolls back.
    """

    clients: ClientStorePort
    services: ServiceCatalogPort
    professionals: ProfessionalStorePort
    appointments: AppointmentStorePort
    transactions: TransactionLedgerPort
    settings: SettingsStorePort

    @abstractmethod
    def __enter__(self) -> "UnitOfWorkPort":
        raise NotImplementedError

    @abstractmethod
    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        raise NotImplementedError

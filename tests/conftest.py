from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from zoneinfo import ZoneInfo

import pytest

from beautypro.application.use_cases.appointments import AppointmentUseCase
from beautypro.application.use_cases.clients import ClientUseCase
from beautypro.application.use_cases.ledger import LedgerEngine
from beautypro.domain.entities.client import Client
from beautypro.domain.entities.professional import Professional
from beautypro.domain.entities.salon_settings import SalonSettings
from beautypro.domain.entities.service import Service
from beautypro.domain.lifecycle import TransitionPolicy
from beautypro.infrastructure.store.memory_store import (
    MemoryClientStore,
    MemoryProfessionalStore,
    MemoryServiceCatalog,
    MemorySettingsStore,
    MemoryUnitOfWork,
)


TZ = ZoneInfo("America/Sao_Paulo")
NOW = datetime(2026, 10, 18, 14, 30, tzinfo=TZ)


@dataclass
class Salon:
    uow: MemoryUnitOfWork
    ledger: LedgerEngine
    appointments: AppointmentUseCase
    clients: ClientUseCase


def make_uow(points_per_currency: str = "1", client_store: MemoryClientStore | None = None) -> MemoryUnitOfWork:
    clients = client_store if client_store is not None else MemoryClientStore()
    for client in (
        Client(id="c1", name="Mariana Souza", phone="(11) 99999-9999"),
        Client(id="c2", name="João Pereira", phone="11988888888"),
    ):
        clients.add(client)
    return MemoryUnitOfWork(
        clients=clients,
        services=MemoryServiceCatalog(
            [
                Service(id="s1", name="Corte Feminino", price=Decimal("100"), duration_minutes=60, category="Cabelo"),
                Service(id="s2", name="Coloração", price=Decimal("250"), duration_minutes=120, category="Cabelo"),
                Service(id="s3", name="Manicure", price=Decimal("39.90"), duration_minutes=45, category="Unhas"),
            ]
        ),
        professionals=MemoryProfessionalStore(
            [
                Professional(id="p1", name="Ana Silva", color="#fecdd3", specialties=("s1", "s2")),
                Professional(id="p2", name="Carlos Oliveira", color="#bfdbfe", specialties=("s3",)),
            ]
        ),
        settings=MemorySettingsStore(
            SalonSettings(salon_name="Test Salon", points_per_currency=Decimal(points_per_currency))
        ),
    )


def make_salon(
    points_per_currency: str = "1",
    strict: bool = False,
    detect_conflicts: bool = False,
    client_store: MemoryClientStore | None = None,
) -> Salon:
    uow = make_uow(points_per_currency, client_store)
    ledger = LedgerEngine(uow=uow, clock=lambda: NOW)
    appointments = AppointmentUseCase(
        uow=uow,
        ledger=ledger,
        timezone=TZ,
        policy=TransitionPolicy(strict=strict),
        detect_conflicts=detect_conflicts,
    )
    return Salon(uow=uow, ledger=ledger, appointments=appointments, clients=ClientUseCase(uow=uow))


@pytest.fixture
def salon() -> Salon:
    return make_salon()

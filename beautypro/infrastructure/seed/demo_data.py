from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal

from beautypro.domain.entities.appointment import Appointment, AppointmentStatus
from beautypro.domain.entities.client import Client
from beautypro.domain.entities.professional import Professional
from beautypro.domain.entities.salon_settings import SalonSettings
from beautypro.domain.entities.service import Service
from beautypro.domain.entities.transaction import Transaction, TransactionType
from beautypro.domain.entities.user import User, UserRole
from beautypro.infrastructure.store.memory_store import (
    MemoryAppointmentStore,
    MemoryClientStore,
    MemoryProfessionalStore,
    MemoryServiceCatalog,
    MemorySettingsStore,
    MemoryTransactionLedger,
    MemoryUnitOfWork,
    MemoryUserDirectory,
)


PROFESSIONALS = [
    Professional(id="p1", name="Ana Silva", color="#fecdd3", photo_url="https://picsum.photos/100/100?random=1", specialties=("s1", "s2", "s3")),
    Professional(id="p2", name="Carlos Oliveira", color="#bfdbfe", photo_url="https://picsum.photos/100/100?random=2", specialties=("s4", "s5")),
    Professional(id="p3", name="Fernanda Lima", color="#e9d5ff", photo_url="https://picsum.photos/100/100?random=3", specialties=("s1", "s2", "s6")),
]

USERS = [
    User(id="u1", name="Roberto Dono", email="admin@beautypro.com", role=UserRole.OWNER, photo_url="https://i.pravatar.cc/150?u=admin"),
    User(id="u2", name="Ana Silva", email="ana@beautypro.com", role=UserRole.PROFESSIONAL, photo_url="https://picsum.photos/100/100?random=1", professional_id="p1"),
    User(id="u3", name="Júlia Recepção", email="recepcao@beautypro.com", role=UserRole.RECEPTIONIST, photo_url="https://i.pravatar.cc/150?u=recep"),
]

SERVICES = [
    Service(id="s1", name="Corte Feminino", price=Decimal("120"), duration_minutes=60, category="Cabelo", description="Lavagem, corte e finalização."),
    Service(id="s2", name="Coloração", price=Decimal("250"), duration_minutes=120, category="Cabelo", description="Coloração global com produtos premium."),
    Service(id="s3", name="Hidratação Profunda", price=Decimal("90"), duration_minutes=45, category="Cabelo"),
    Service(id="s4", name="Barba Completa", price=Decimal("50"), duration_minutes=30, category="Barbearia"),
    Service(id="s5", name="Corte Masculino", price=Decimal("60"), duration_minutes=45, category="Barbearia"),
    Service(id="s6", name="Manicure", price=Decimal("40"), duration_minutes=45, category="Unhas"),
]

CLIENTS = [
    Client(
        id="c1", name="Mariana Souza", phone="11999999999", email="mari@email.com",
        photo_url="https://picsum.photos/200?random=10", birth_date=date(1990, 10, 28),
        tags=("VIP", "Coloração"), total_spent=Decimal("1500"), loyalty_points=120, last_visit=date(2023, 10, 15),
    ),
    Client(
        id="c2", name="João Pereira", phone="11988888888",
        tags=("Novo",), total_spent=Decimal("60"), loyalty_points=10, last_visit=date(2023, 8, 20),
    ),
    Client(
        id="c3", name="Camila Santos", phone="11977777777",
        photo_url="https://picsum.photos/200?random=11", birth_date=date(1995, 5, 15),
        tags=("Frequente",), total_spent=Decimal("3200"), loyalty_points=450, last_visit=date(2023, 10, 25),
    ),
]

DEFAULT_SETTINGS = SalonSettings(
    salon_name="BeautyPro Demo Salon",
    phone="11999990000",
    address="Rua das Flores, 123 - São Paulo, SP",
    logo_url="",
    loyalty_enabled=True,
    points_per_currency=Decimal("1"),
    loyalty_reward_description="A cada 100 pontos, ganhe R$ 10 de desconto.",
    booking_link_slug="beautypro-demo",
)

# (id, client, professional, services, hour, status, total)
_TODAY_APPOINTMENTS = [
    ("a1", "c1", "p1", ("s1",), 9, AppointmentStatus.CONFIRMED, "120"),
    ("a2", "c3", "p1", ("s2",), 13, AppointmentStatus.SCHEDULED, "250"),
    ("a3", "c2", "p2", ("s5",), 10, AppointmentStatus.COMPLETED, "60"),
    ("a4", "c3", "p3", ("s6",), 11, AppointmentStatus.SCHEDULED, "40"),
    ("a5", "c1", "p2", ("s4",), 15, AppointmentStatus.SCHEDULED, "50"),
    ("a6", "c2", "p3", ("s3",), 16, AppointmentStatus.SCHEDULED, "90"),
]


def demo_appointments(now: datetime) -> list[Appointment]:
    """Appointments for the local day of `now`, which must be timezone-aware."""
    return [
        Appointment(
            id=appointment_id,
            client_id=client_id,
            professional_id=professional_id,
            service_ids=service_ids,
            date_time=datetime.combine(now.date(), time(hour), tzinfo=now.tzinfo),
            status=status,
            total_value=Decimal(total),
        )
        for appointment_id, client_id, professional_id, service_ids, hour, status, total in _TODAY_APPOINTMENTS
    ]


def demo_transactions(now: datetime) -> list[Transaction]:
    # a3 is seeded as COMPLETED with its income already posted as t3.
    return [
        Transaction(id="t1", date=now, type=TransactionType.INCOME, value=Decimal("120"), description="Corte - Mariana Souza", category="Serviços"),
        Transaction(id="t2", date=now, type=TransactionType.EXPENSE, value=Decimal("500"), description="Compra de Produtos", category="Estoque"),
        Transaction(id="t3", date=now, type=TransactionType.INCOME, value=Decimal("60"), description="Corte - João Pereira", category="Serviços", appointment_id="a3"),
    ]


def build_demo_unit_of_work(now: datetime, seed: bool = True) -> MemoryUnitOfWork:
    if not seed:
        return MemoryUnitOfWork(settings=MemorySettingsStore(DEFAULT_SETTINGS))
    return MemoryUnitOfWork(
        clients=MemoryClientStore(CLIENTS),
        services=MemoryServiceCatalog(SERVICES),
        professionals=MemoryProfessionalStore(PROFESSIONALS),
        appointments=MemoryAppointmentStore(demo_appointments(now)),
        transactions=MemoryTransactionLedger(demo_transactions(now)),
        settings=MemorySettingsStore(DEFAULT_SETTINGS),
    )


def build_demo_users() -> MemoryUserDirectory:
    return MemoryUserDirectory(USERS)

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class AppointmentStatus(str, Enum):
    SCHEDULED = "Agendado"
    CONFIRMED = "Confirmado"
    ARRIVED = "Chegou"
    COMPLETED = "Finalizado"
    NO_SHOW = "No-Show"
    CANCELLED = "Cancelado"


@dataclass(frozen=True)
class Appointment:
    id: str
    client_id: str
    professional_id: str
    service_ids: tuple[str, ...]
    date_time: datetime
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    total_value: Decimal = Decimal("0")  # snapshot taken at creation
    notes: str | None = None

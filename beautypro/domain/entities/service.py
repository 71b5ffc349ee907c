from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class ServiceStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


@dataclass(frozen=True)
class Service:
    id: str
    name: str
    price: Decimal
    duration_minutes: int
    category: str
    description: str | None = None
    status: ServiceStatus = ServiceStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status == ServiceStatus.ACTIVE

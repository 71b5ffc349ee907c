from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Client:
    id: str
    name: str
    phone: str
    email: str | None = None
    photo_url: str | None = None
    birth_date: date | None = None
    allergies: str | None = None
    color_formula: str | None = None
    notes: str | None = None
    tags: tuple[str, ...] = ()
    last_visit: date | None = None
    total_spent: Decimal = Decimal("0")
    loyalty_points: int = 0

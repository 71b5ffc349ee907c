from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


@dataclass(frozen=True)
class Transaction:
    id: str
    date: datetime
    type: TransactionType
    value: Decimal
    description: str
    category: str
    appointment_id: str | None = None  # set when posted from a completed appointment

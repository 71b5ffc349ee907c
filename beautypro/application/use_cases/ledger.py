from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable

from beautypro.application.exceptions import ValidationError
from beautypro.application.ports.unit_of_work import UnitOfWorkPort
from beautypro.application.utils.money import accrued_points, parse_amount
from beautypro.domain.entities.appointment import Appointment
from beautypro.domain.entities.client import Client
from beautypro.domain.entities.transaction import Transaction, TransactionType


SERVICE_INCOME_LABEL = "Serviço"
SERVICE_INCOME_CATEGORY = "Serviços"
DEFAULT_EXPENSE_CATEGORY = "Despesas"


@dataclass(frozen=True)
class LedgerPosting:
    transaction: Transaction
    client: Client


@dataclass(frozen=True)
class FinanceSummary:
    income: Decimal
    expense: Decimal
    balance: Decimal
    transactions: list[Transaction]


class LedgerEngine:
    """
    Derives financial entries and client accumulations from completed appointments.

    A completion posts one INCOME transaction for the appointment's frozen
    total and credits the client's spend, loyalty points and last visit.
    The append and the client update commit together. An appointment that
    already has a posting is never posted again, so moving it away from
    COMPLETED and back does not double count. Nothing is ever reversed.
    """

    def __init__(self, uow: UnitOfWorkPort, clock: Callable[[], datetime]) -> None:
        self._uow = uow
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    def post_completion(self, appointment: Appointment) -> LedgerPosting | None:
        """Returns the posting, or None when nothing was posted (already posted or unknown client)."""
        with self._uow:
            if self._uow.transactions.find_by_appointment(appointment.id) is not None:
                self._logger.info(
                    "Completion already posted",
                    extra={"appointment_id": appointment.id},
                )
                return None

            client = self._uow.clients.get(appointment.client_id)
            if client is None:
                self._logger.warning(
                    "Completion not posted",
                    extra={
                        "appointment_id": appointment.id,
                        "client_id": appointment.client_id,
                        "reason": "client_not_found",
                    },
                )
                return None

            now = self._clock()
            value = appointment.total_value
            transaction = Transaction(
                id=uuid.uuid4().hex,
                date=now,
                type=TransactionType.INCOME,
                value=value,
                description=f"{SERVICE_INCOME_LABEL} - {client.name}",
                category=SERVICE_INCOME_CATEGORY,
                appointment_id=appointment.id,
            )
            points_per_currency = self._uow.settings.get().points_per_currency
            updated = replace(
                client,
                total_spent=client.total_spent + value,
                loyalty_points=client.loyalty_points + accrued_points(value, points_per_currency),
                last_visit=now.date(),
            )

            self._uow.transactions.append(transaction)
            self._uow.clients.replace(updated)

        self._logger.info(
            "Completion posted",
            extra={
                "appointment_id": appointment.id,
                "client_id": client.id,
                "value": str(value),
                "loyalty_points": updated.loyalty_points,
            },
        )
        return LedgerPosting(transaction=transaction, client=updated)

    def record_entry(
        self,
        type: TransactionType,
        value: Any,
        description: str,
        category: str,
    ) -> Transaction:
        amount = parse_amount(value, "value")
        try:
            entry_type = TransactionType(type)
        except ValueError:
            raise ValidationError("type", f"expected INCOME or EXPENSE, got {type!r}") from None
        description = (description or "").strip()
        if not description:
            raise ValidationError("description", "is required")
        transaction = Transaction(
            id=uuid.uuid4().hex,
            date=self._clock(),
            type=entry_type,
            value=amount,
            description=description,
            category=(category or "").strip() or DEFAULT_EXPENSE_CATEGORY,
        )
        with self._uow:
            self._uow.transactions.append(transaction)
        self._logger.info(
            "Manual entry recorded",
            extra={"transaction_id": transaction.id, "type": transaction.type.value, "value": str(amount)},
        )
        return transaction

    def record_expense(self, value: Any, description: str, category: str = DEFAULT_EXPENSE_CATEGORY) -> Transaction:
        return self.record_entry(TransactionType.EXPENSE, value, description, category)

    def summary(self) -> FinanceSummary:
        entries = self._uow.transactions.list()
        income = sum((t.value for t in entries if t.type == TransactionType.INCOME), Decimal("0"))
        expense = sum((t.value for t in entries if t.type == TransactionType.EXPENSE), Decimal("0"))
        newest_first = sorted(entries, key=lambda t: t.date, reverse=True)
        return FinanceSummary(income=income, expense=expense, balance=income - expense, transactions=newest_first)

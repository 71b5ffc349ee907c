from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from zoneinfo import ZoneInfo

from beautypro.application.ports.unit_of_work import UnitOfWorkPort
from beautypro.application.use_cases.access import sees_financials
from beautypro.application.use_cases.ledger import LedgerEngine
from beautypro.application.use_cases.schedule import ScheduleCard
from beautypro.application.utils.formatting import display_name, format_time, service_names
from beautypro.domain.entities.user import User


UPCOMING_LIMIT = 5


@dataclass(frozen=True)
class DashboardOverview:
    day: date
    appointments_today: int
    upcoming: list[ScheduleCard]
    income: Decimal | None = None  # None when the viewer may not see financials
    expense: Decimal | None = None


class DashboardUseCase:
    def __init__(self, uow: UnitOfWorkPort, ledger: LedgerEngine, timezone: ZoneInfo) -> None:
        self._uow = uow
        self._ledger = ledger
        self._timezone = timezone

    def overview(self, viewer: User | None, today: date) -> DashboardOverview:
        clients = {c.id: c for c in self._uow.clients.list()}
        services = {s.id: s for s in self._uow.services.list()}
        todays = sorted(
            (a for a in self._uow.appointments.list() if a.date_time.astimezone(self._timezone).date() == today),
            key=lambda a: a.date_time,
        )
        upcoming = [
            ScheduleCard(
                appointment=a,
                client_name=display_name(clients, a.client_id),
                service_names=service_names(a.service_ids, services),
                time=format_time(a.date_time.astimezone(self._timezone)),
            )
            for a in todays[:UPCOMING_LIMIT]
        ]
        if not sees_financials(viewer):
            return DashboardOverview(day=today, appointments_today=len(todays), upcoming=upcoming)

        summary = self._ledger.summary()
        return DashboardOverview(
            day=today,
            appointments_today=len(todays),
            upcoming=upcoming,
            income=summary.income,
            expense=summary.expense,
        )

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from zoneinfo import ZoneInfo

from beautypro.application.ports.unit_of_work import UnitOfWorkPort
from beautypro.application.utils.formatting import UNKNOWN, display_name, format_time, service_names
from beautypro.domain.entities.appointment import Appointment
from beautypro.domain.entities.professional import Professional
from beautypro.domain.entities.user import User, UserRole


FIRST_HOUR = 8
LAST_HOUR = 20
HOURS = tuple(range(FIRST_HOUR, LAST_HOUR + 1))


@dataclass(frozen=True)
class ScheduleCard:
    appointment: Appointment
    client_name: str
    service_names: str
    time: str


@dataclass(frozen=True)
class DayGrid:
    day: date
    professionals: list[Professional]
    # rows[hour][professional_id] -> cards starting within that hour
    rows: dict[int, dict[str, list[ScheduleCard]]]
    unplaced: list[ScheduleCard]

    def cell(self, hour: int, professional_id: str) -> list[ScheduleCard]:
        return self.rows.get(hour, {}).get(professional_id, [])


def previous_day(day: date) -> date:
    return day - timedelta(days=1)


def next_day(day: date) -> date:
    return day + timedelta(days=1)


class ScheduleUseCase:
    """
    The agenda: one column per professional, one row per hour from 08:00
    to 20:00. Appointments land in the row of their starting hour in the
    salon's timezone. Appointments outside those hours, or whose
    professional is no longer on the team, are returned in `unplaced`.
    """

    def __init__(self, uow: UnitOfWorkPort, timezone: ZoneInfo) -> None:
        self._uow = uow
        self._timezone = timezone

    def day_grid(self, day: date, viewer: User | None = None, professional_id: str | None = None) -> DayGrid:
        if viewer is not None and viewer.role == UserRole.PROFESSIONAL and viewer.professional_id:
            professional_id = viewer.professional_id

        professionals = self._uow.professionals.list()
        if professional_id is not None:
            professionals = [p for p in professionals if p.id == professional_id]
        columns = {p.id for p in professionals}

        clients = {c.id: c for c in self._uow.clients.list()}
        services = {s.id: s for s in self._uow.services.list()}

        rows: dict[int, dict[str, list[ScheduleCard]]] = {h: {p.id: [] for p in professionals} for h in HOURS}
        unplaced: list[ScheduleCard] = []

        for appointment in sorted(self._uow.appointments.list(), key=lambda a: a.date_time):
            local = appointment.date_time.astimezone(self._timezone)
            if local.date() != day:
                continue
            if professional_id is not None and appointment.professional_id != professional_id:
                continue
            card = ScheduleCard(
                appointment=appointment,
                client_name=display_name(clients, appointment.client_id, UNKNOWN),
                service_names=service_names(appointment.service_ids, services),
                time=format_time(local),
            )
            if local.hour in rows and appointment.professional_id in columns:
                rows[local.hour][appointment.professional_id].append(card)
            else:
                unplaced.append(card)

        return DayGrid(day=day, professionals=professionals, rows=rows, unplaced=unplaced)

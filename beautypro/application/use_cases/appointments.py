from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import date, datetime, timedelta
from decimal import Decimal
from zoneinfo import ZoneInfo

from beautypro.application.exceptions import (
    InvalidTransitionError,
    NotFoundError,
    SchedulingConflictError,
    ValidationError,
)
from beautypro.application.ports.unit_of_work import UnitOfWorkPort
from beautypro.application.use_cases.ledger import LedgerEngine
from beautypro.domain.entities.appointment import Appointment, AppointmentStatus
from beautypro.domain.lifecycle import TransitionPolicy, next_in_cycle


# Statuses that no longer hold the professional's time.
_RELEASED = frozenset({AppointmentStatus.CANCELLED, AppointmentStatus.NO_SHOW})


class AppointmentUseCase:
    def __init__(
        self,
        uow: UnitOfWorkPort,
        ledger: LedgerEngine,
        timezone: ZoneInfo,
        policy: TransitionPolicy | None = None,
        detect_conflicts: bool = False,
    ) -> None:
        self._uow = uow
        self._ledger = ledger
        self._timezone = timezone
        self._policy = policy or TransitionPolicy()
        self._detect_conflicts = detect_conflicts
        self._logger = logging.getLogger(__name__)

    def create(
        self,
        client_id: str,
        professional_id: str,
        service_ids: list[str],
        date_time: datetime,
        notes: str | None = None,
    ) -> Appointment:
        """
        Book an appointment. The total is the sum of the catalog prices at
        this moment; unknown service ids count as zero. Double booking is
        accepted unless conflict detection is switched on.
        """
        if not service_ids:
            raise ValidationError("service_ids", "at least one service is required")
        if date_time.tzinfo is None:
            date_time = date_time.replace(tzinfo=self._timezone)

        with self._uow:
            total = Decimal("0")
            for service_id in service_ids:
                service = self._uow.services.get(service_id)
                if service is not None:
                    total += service.price

            appointment = Appointment(
                id=uuid.uuid4().hex,
                client_id=client_id,
                professional_id=professional_id,
                service_ids=tuple(service_ids),
                date_time=date_time,
                status=AppointmentStatus.SCHEDULED,
                total_value=total,
                notes=notes,
            )
            if self._detect_conflicts:
                self._ensure_free(appointment)
            self._uow.appointments.add(appointment)

        self._logger.info(
            "Appointment created",
            extra={
                "appointment_id": appointment.id,
                "client_id": client_id,
                "professional_id": professional_id,
                "value": str(total),
            },
        )
        return appointment

    def get(self, appointment_id: str) -> Appointment:
        appointment = self._uow.appointments.get(appointment_id)
        if appointment is None:
            raise NotFoundError("appointment", appointment_id)
        return appointment

    def list(
        self,
        day: date | None = None,
        professional_id: str | None = None,
        client_id: str | None = None,
    ) -> list[Appointment]:
        result = []
        for appointment in self._uow.appointments.list():
            if day is not None and self.local_day(appointment) != day:
                continue
            if professional_id is not None and appointment.professional_id != professional_id:
                continue
            if client_id is not None and appointment.client_id != client_id:
                continue
            result.append(appointment)
        return sorted(result, key=lambda a: a.date_time)

    def local_day(self, appointment: Appointment) -> date:
        return appointment.date_time.astimezone(self._timezone).date()

    def set_status(self, appointment_id: str, new_status: AppointmentStatus) -> Appointment:
        """
        Move an appointment to new_status. Only a move to COMPLETED touches the
        ledger; leaving COMPLETED reverses nothing.
        """
        new_status = AppointmentStatus(new_status)
        with self._uow:
            current = self.get(appointment_id)
            if not self._policy.allows(current.status, new_status):
                raise InvalidTransitionError(
                    f"{current.status.name} -> {new_status.name} not allowed for appointment {appointment_id}"
                )
            updated = replace(current, status=new_status)
            self._uow.appointments.replace(updated)
            if new_status == AppointmentStatus.COMPLETED:
                self._ledger.post_completion(updated)

        self._logger.info(
            "Appointment status changed",
            extra={
                "appointment_id": appointment_id,
                "from_status": current.status.name,
                "status": new_status.name,
            },
        )
        return updated

    def advance_status(self, appointment_id: str) -> Appointment:
        """Agenda one-click toggle: SCHEDULED -> CONFIRMED -> COMPLETED -> SCHEDULED."""
        with self._uow:
            current = self.get(appointment_id)
            return self.set_status(appointment_id, next_in_cycle(current.status))

    def _ensure_free(self, candidate: Appointment) -> None:
        start = candidate.date_time
        end = start + self._duration(candidate)
        for other in self._uow.appointments.list():
            if other.professional_id != candidate.professional_id or other.status in _RELEASED:
                continue
            other_end = other.date_time + self._duration(other)
            if start < other_end and other.date_time < end:
                raise SchedulingConflictError(
                    f"professional {candidate.professional_id} already booked by appointment {other.id}"
                )

    def _duration(self, appointment: Appointment) -> timedelta:
        minutes = 0
        for service_id in appointment.service_ids:
            service = self._uow.services.get(service_id)
            if service is not None:
                minutes += service.duration_minutes
        return timedelta(minutes=max(minutes, 1))

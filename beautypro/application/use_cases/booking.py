from __future__ import annotations

import logging
from datetime import datetime, time, timedelta
from typing import Callable
from zoneinfo import ZoneInfo

from beautypro.application.exceptions import NotFoundError, ValidationError
from beautypro.application.ports.unit_of_work import UnitOfWorkPort
from beautypro.application.use_cases.appointments import AppointmentUseCase
from beautypro.application.use_cases.clients import ClientUseCase
from beautypro.domain.entities.appointment import Appointment
from beautypro.domain.entities.professional import Professional
from beautypro.domain.entities.service import Service


ANY_PROFESSIONAL = "any"
SLOTS = ("09:00", "10:00", "11:00", "14:00", "15:00", "16:00", "17:00", "18:00")


class BookingUseCase:
    """
    Client-facing booking: pick a service, a professional (or "any"),
    and one of the fixed slots for tomorrow.
    """

    def __init__(
        self,
        uow: UnitOfWorkPort,
        appointments: AppointmentUseCase,
        clients: ClientUseCase,
        timezone: ZoneInfo,
        clock: Callable[[], datetime],
    ) -> None:
        self._uow = uow
        self._appointments = appointments
        self._clients = clients
        self._timezone = timezone
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    def services(self) -> list[Service]:
        return [s for s in self._uow.services.list() if s.is_active]

    def professionals_for(self, service_id: str) -> list[Professional]:
        team = self._uow.professionals.list()
        specialists = [p for p in team if p.performs(service_id)]
        return specialists or team

    def slots(self) -> tuple[str, ...]:
        return SLOTS

    def book(
        self,
        service_id: str,
        professional_id: str,
        slot: str,
        client_name: str,
        client_phone: str,
    ) -> Appointment:
        if slot not in SLOTS:
            raise ValidationError("slot", f"unavailable slot {slot!r}")

        with self._uow:
            service = self._uow.services.get(service_id)
            if service is None or not service.is_active:
                raise NotFoundError("service", service_id)

            if professional_id == ANY_PROFESSIONAL:
                candidates = self.professionals_for(service_id)
                if not candidates:
                    raise NotFoundError("professional", professional_id)
                professional_id = candidates[0].id
            elif self._uow.professionals.get(professional_id) is None:
                raise NotFoundError("professional", professional_id)

            client = self._clients.find_or_create(client_name, client_phone)
            hour, minute = (int(part) for part in slot.split(":"))
            tomorrow = self._clock().astimezone(self._timezone).date() + timedelta(days=1)
            start = datetime.combine(tomorrow, time(hour, minute), tzinfo=self._timezone)
            appointment = self._appointments.create(
                client_id=client.id,
                professional_id=professional_id,
                service_ids=[service_id],
                date_time=start,
            )

        self._logger.info(
            "Online booking",
            extra={"appointment_id": appointment.id, "client_id": client.id, "service": service_id},
        )
        return appointment

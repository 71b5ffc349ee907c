from __future__ import annotations

from beautypro.application.ports.record_store import RecordStorePort
from beautypro.domain.entities.appointment import Appointment


class AppointmentStorePort(RecordStorePort[Appointment]):
    pass

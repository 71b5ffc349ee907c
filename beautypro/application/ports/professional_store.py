from __future__ import annotations

from beautypro.application.ports.record_store import RecordStorePort
from beautypro.domain.entities.professional import Professional


class ProfessionalStorePort(RecordStorePort[Professional]):
    pass

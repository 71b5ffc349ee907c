from __future__ import annotations

from beautypro.application.ports.record_store import RecordStorePort
from beautypro.domain.entities.service import Service


class ServiceCatalogPort(RecordStorePort[Service]):
    pass

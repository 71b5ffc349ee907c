from __future__ import annotations

from abc import ABC, abstractmethod

from beautypro.domain.entities.salon_settings import SalonSettings


class SettingsStorePort(ABC):
    @abstractmethod
    def get(self) -> SalonSettings:
        raise NotImplementedError

    @abstractmethod
    def put(self, settings: SalonSettings) -> None:
        raise NotImplementedError

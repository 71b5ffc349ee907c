from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Professional:
    id: str
    name: str
    color: str  # hex, used for the calendar column
    photo_url: str = ""
    specialties: tuple[str, ...] = ()  # service ids

    def performs(self, service_id: str) -> bool:
        return service_id in self.specialties

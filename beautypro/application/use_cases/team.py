from __future__ import annotations

import logging
import uuid
from typing import Any, Iterable, Mapping

from beautypro.application.exceptions import NotFoundError
from beautypro.application.ports.unit_of_work import UnitOfWorkPort
from beautypro.application.utils.forms import apply_changes, required_text, text_list
from beautypro.domain.entities.professional import Professional


DEFAULT_COLOR = "#fecdd3"

_PARSERS = {
    "name": lambda v: required_text(v, "name"),
    "color": lambda v: required_text(v, "color"),
    "photo_url": lambda v: str(v or "").strip(),
    "specialties": lambda v: text_list(v, "specialties"),
}


class TeamUseCase:
    def __init__(self, uow: UnitOfWorkPort) -> None:
        self._uow = uow
        self._logger = logging.getLogger(__name__)

    def add(
        self,
        name: str,
        color: str = DEFAULT_COLOR,
        photo_url: str = "",
        specialties: Iterable[str] = (),
    ) -> Professional:
        professional = Professional(
            id=uuid.uuid4().hex,
            name=required_text(name, "name"),
            color=(color or DEFAULT_COLOR).strip(),
            photo_url=(photo_url or "").strip(),
            specialties=tuple(dict.fromkeys(specialties)),
        )
        with self._uow:
            self._uow.professionals.add(professional)
        self._logger.info("Professional added", extra={"professional_id": professional.id})
        return professional

    def get(self, professional_id: str) -> Professional:
        professional = self._uow.professionals.get(professional_id)
        if professional is None:
            raise NotFoundError("professional", professional_id)
        return professional

    def list(self) -> list[Professional]:
        return self._uow.professionals.list()

    def specialists_for(self, service_id: str) -> list[Professional]:
        return [p for p in self._uow.professionals.list() if p.performs(service_id)]

    def update(self, professional_id: str, changes: Mapping[str, Any]) -> Professional:
        with self._uow:
            updated = apply_changes(self.get(professional_id), changes, _PARSERS)
            self._uow.professionals.replace(updated)
        self._logger.info("Professional updated", extra={"professional_id": professional_id})
        return updated

    def toggle_specialty(self, professional_id: str, service_id: str) -> Professional:
        with self._uow:
            current = self.get(professional_id)
            if current.performs(service_id):
                specialties = [s for s in current.specialties if s != service_id]
            else:
                specialties = [*current.specialties, service_id]
            return self.update(professional_id, {"specialties": specialties})

    def remove(self, professional_id: str) -> None:
        """Existing appointments keep the id and render it as unknown."""
        with self._uow:
            if not self._uow.professionals.remove(professional_id):
                raise NotFoundError("professional", professional_id)
        self._logger.info("Professional removed", extra={"professional_id": professional_id})

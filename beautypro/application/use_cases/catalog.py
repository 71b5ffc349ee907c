from __future__ import annotations

import logging
import uuid
from typing import Any, Mapping

from beautypro.application.exceptions import NotFoundError, ValidationError
from beautypro.application.ports.unit_of_work import UnitOfWorkPort
from beautypro.application.utils.forms import apply_changes, optional_text, required_text
from beautypro.application.utils.money import parse_amount, parse_minutes
from beautypro.domain.entities.service import Service, ServiceStatus


def _status(value: Any) -> ServiceStatus:
    if isinstance(value, ServiceStatus):
        return value
    try:
        return ServiceStatus(str(value).strip().upper())
    except ValueError:
        raise ValidationError("status", f"expected ACTIVE or INACTIVE, got {value!r}") from None


_PARSERS = {
    "name": lambda v: required_text(v, "name"),
    "price": lambda v: parse_amount(v, "price"),
    "duration_minutes": parse_minutes,
    "category": lambda v: required_text(v, "category"),
    "description": optional_text,
    "status": _status,
}


class ServiceCatalogUseCase:
    """Service catalog maintenance. Prices edited here never touch existing appointments."""

    def __init__(self, uow: UnitOfWorkPort) -> None:
        self._uow = uow
        self._logger = logging.getLogger(__name__)

    def add(
        self,
        name: str,
        price: Any,
        duration_minutes: Any,
        category: str,
        description: str | None = None,
        status: Any = None,
    ) -> Service:
        service = Service(
            id=uuid.uuid4().hex,
            name=required_text(name, "name"),
            price=parse_amount(price, "price"),
            duration_minutes=parse_minutes(duration_minutes),
            category=required_text(category, "category"),
            description=optional_text(description),
            status=_status(status) if status else ServiceStatus.ACTIVE,
        )
        with self._uow:
            self._uow.services.add(service)
        self._logger.info("Service added", extra={"service_id": service.id, "value": str(service.price)})
        return service

    def get(self, service_id: str) -> Service:
        service = self._uow.services.get(service_id)
        if service is None:
            raise NotFoundError("service", service_id)
        return service

    def list(self, active_only: bool = False) -> list[Service]:
        services = self._uow.services.list()
        if active_only:
            return [s for s in services if s.is_active]
        return services

    def update(self, service_id: str, changes: Mapping[str, Any]) -> Service:
        with self._uow:
            updated = apply_changes(self.get(service_id), changes, _PARSERS)
            self._uow.services.replace(updated)
        self._logger.info("Service updated", extra={"service_id": service_id})
        return updated

    def remove(self, service_id: str) -> None:
        with self._uow:
            if not self._uow.services.remove(service_id):
                raise NotFoundError("service", service_id)
        self._logger.info("Service removed", extra={"service_id": service_id})

from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Any, Mapping

from beautypro.application.exceptions import NotFoundError, ValidationError
from beautypro.application.ports.unit_of_work import UnitOfWorkPort
from beautypro.application.utils.forms import apply_changes, optional_text, parse_date, required_text, text_list
from beautypro.application.utils.money import parse_amount
from beautypro.application.utils.whatsapp import phone_digits
from beautypro.domain.entities.client import Client


NEW_CLIENT_TAG = "Novo"


def _points(value: Any) -> int:
    amount = parse_amount(value, "loyalty_points")
    if amount != amount.to_integral_value():
        raise ValidationError("loyalty_points", "must be a whole number")
    return int(amount)


_PARSERS = {
    "name": lambda v: required_text(v, "name"),
    "phone": lambda v: required_text(v, "phone"),
    "email": optional_text,
    "notes": optional_text,
    "allergies": optional_text,
    "color_formula": optional_text,
    "photo_url": optional_text,
    "birth_date": lambda v: parse_date(v, "birth_date"),
    "last_visit": lambda v: parse_date(v, "last_visit"),
    "tags": lambda v: text_list(v, "tags", split_commas=True),
    "total_spent": lambda v: parse_amount(v, "total_spent"),
    "loyalty_points": _points,
}


class ClientUseCase:
    def __init__(self, uow: UnitOfWorkPort) -> None:
        self._uow = uow
        self._logger = logging.getLogger(__name__)

    def add(
        self,
        name: str,
        phone: str,
        email: str | None = None,
        birth_date: date | str | None = None,
        notes: str | None = None,
    ) -> Client:
        client = Client(
            id=uuid.uuid4().hex,
            name=required_text(name, "name"),
            phone=required_text(phone, "phone"),
            email=optional_text(email),
            birth_date=parse_date(birth_date, "birth_date"),
            notes=optional_text(notes),
            tags=(NEW_CLIENT_TAG,),
        )
        with self._uow:
            self._uow.clients.add(client)
        self._logger.info("Client added", extra={"client_id": client.id})
        return client

    def get(self, client_id: str) -> Client:
        client = self._uow.clients.get(client_id)
        if client is None:
            raise NotFoundError("client", client_id)
        return client

    def list(self) -> list[Client]:
        return self._uow.clients.list()

    def search(self, query: str) -> list[Client]:
        """Case-insensitive name match or raw phone substring, like the clients screen."""
        needle = (query or "").strip()
        if not needle:
            return self.list()
        lowered = needle.lower()
        return [c for c in self._uow.clients.list() if lowered in c.name.lower() or needle in c.phone]

    def update(self, client_id: str, changes: Mapping[str, Any]) -> Client:
        """Administrative edit. Spend and points may be corrected here, never by the ledger."""
        with self._uow:
            updated = apply_changes(self.get(client_id), changes, _PARSERS)
            self._uow.clients.replace(updated)
        self._logger.info("Client updated", extra={"client_id": client_id, "fields": ",".join(sorted(changes))})
        return updated

    def remove(self, client_id: str) -> None:
        with self._uow:
            if not self._uow.clients.remove(client_id):
                raise NotFoundError("client", client_id)
        self._logger.info("Client removed", extra={"client_id": client_id})

    def find_or_create(self, name: str, phone: str) -> Client:
        with self._uow:
            existing = self._uow.clients.find_by_phone(phone_digits(phone))
            if existing is not None:
                return existing
            return self.add(name=name, phone=phone)

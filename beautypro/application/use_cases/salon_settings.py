from __future__ import annotations

import logging
from typing import Any, Mapping

from beautypro.application.exceptions import ValidationError
from beautypro.application.ports.unit_of_work import UnitOfWorkPort
from beautypro.application.utils.forms import apply_changes, required_text
from beautypro.application.utils.money import parse_amount
from beautypro.domain.entities.salon_settings import SalonSettings


def _flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in {"true", "1", "yes", "on"}:
        return True
    if text in {"false", "0", "no", "off"}:
        return False
    raise ValidationError("loyalty_enabled", f"not a boolean: {value!r}")


_PARSERS = {
    "salon_name": lambda v: required_text(v, "salon_name"),
    "phone": lambda v: str(v or "").strip(),
    "address": lambda v: str(v or "").strip(),
    "logo_url": lambda v: str(v or "").strip(),
    "loyalty_enabled": _flag,
    "points_per_currency": lambda v: parse_amount(v, "points_per_currency"),
    "loyalty_reward_description": lambda v: str(v or "").strip(),
    "booking_link_slug": lambda v: required_text(v, "booking_link_slug").strip("/"),
}


class SettingsUseCase:
    def __init__(self, uow: UnitOfWorkPort, booking_base_url: str) -> None:
        self._uow = uow
        self._booking_base_url = booking_base_url.rstrip("/")
        self._logger = logging.getLogger(__name__)

    def get(self) -> SalonSettings:
        return self._uow.settings.get()

    def update(self, changes: Mapping[str, Any]) -> SalonSettings:
        with self._uow:
            updated = apply_changes(self._uow.settings.get(), changes, _PARSERS)
            self._uow.settings.put(updated)
        self._logger.info("Settings updated", extra={"fields": ",".join(sorted(changes))})
        return updated

    def booking_link(self) -> str:
        return f"{self._booking_base_url}/{self._uow.settings.get().booking_link_slug}"

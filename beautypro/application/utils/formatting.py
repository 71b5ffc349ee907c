from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Mapping

from beautypro.application.utils.money import round_cents


UNKNOWN = "Desconhecido"


def format_currency(value: Decimal) -> str:
    """pt-BR currency: R$ 1.234,56"""
    rounded = round_cents(value)
    sign = "-" if rounded < 0 else ""
    text = f"{abs(rounded):,.2f}"
    text = text.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {text}"


def format_date(value: date | datetime) -> str:
    return value.strftime("%d/%m/%Y")


def format_time(value: datetime) -> str:
    return value.strftime("%H:%M")


def display_name(records: Mapping[str, object], record_id: str, placeholder: str = UNKNOWN) -> str:
    record = records.get(record_id)
    if record is None:
        return placeholder
    return str(getattr(record, "name", placeholder))


def service_names(service_ids: Iterable[str], services: Mapping[str, object]) -> str:
    return ", ".join(display_name(services, service_id) for service_id in service_ids)

from __future__ import annotations

from dataclasses import fields, replace
from datetime import date
from typing import Any, Callable, Mapping, TypeVar

from beautypro.application.exceptions import ValidationError


R = TypeVar("R")


def required_text(value: Any, field: str) -> str:
    text = str(value or "").strip()
    if not text:
        raise ValidationError(field, "is required")
    return text


def optional_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def text_list(value: Any, field: str, split_commas: bool = False) -> tuple[str, ...]:
    """A list of non-blank strings, deduplicated in order. Optionally a comma-separated string."""
    if split_commas and isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ValidationError(field, f"expected a list of strings, got {value!r}")
    return tuple(dict.fromkeys(item.strip() for item in value if item.strip()))


def parse_date(value: Any, field: str) -> date | None:
    """Accepts a date, an ISO YYYY-MM-DD string, or empty."""
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise ValidationError(field, f"not a date: {value!r}") from None


def apply_changes(
    record: R,
    changes: Mapping[str, Any],
    parsers: Mapping[str, Callable[[Any], Any]] | None = None,
) -> R:
    """
    Partial edit of a frozen record. Every key must be an existing field
    other than id; values pass through the field's parser when one is given.
    All parsing happens before the new record is built.
    """
    editable = {f.name for f in fields(record)} - {"id"}
    parsed: dict[str, Any] = {}
    for key, value in changes.items():
        if key not in editable:
            raise ValidationError(key, "unknown or read-only field")
        parser = (parsers or {}).get(key)
        parsed[key] = parser(value) if parser else value
    return replace(record, **parsed)

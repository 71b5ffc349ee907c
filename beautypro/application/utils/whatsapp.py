from __future__ import annotations

import re
from urllib.parse import quote


_NON_DIGITS = re.compile(r"\D")

# Characters encodeURIComponent leaves alone, besides alphanumerics and "_.-~".
_URI_COMPONENT_SAFE = "!'()*"


def phone_digits(phone: str) -> str:
    return _NON_DIGITS.sub("", phone or "")


def generate_whatsapp_link(phone: str, message: str, country_code: str = "55") -> str:
    encoded = quote(message, safe=_URI_COMPONENT_SAFE)
    return f"https://wa.me/{country_code}{phone_digits(phone)}?text={encoded}"

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class SalonSettings:
    salon_name: str
    phone: str = ""
    address: str = ""
    logo_url: str = ""
    loyalty_enabled: bool = True
    points_per_currency: Decimal = Decimal("1")
    loyalty_reward_description: str = ""
    booking_link_slug: str = ""

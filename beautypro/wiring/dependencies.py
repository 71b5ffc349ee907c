from __future__ import annotations

import logging
from datetime import date, datetime
from functools import lru_cache
from typing import Callable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from beautypro.application.use_cases.access import LoginUseCase
from beautypro.application.use_cases.appointments import AppointmentUseCase
from beautypro.application.use_cases.booking import BookingUseCase
from beautypro.application.use_cases.catalog import ServiceCatalogUseCase
from beautypro.application.use_cases.clients import ClientUseCase
from beautypro.application.use_cases.dashboard import DashboardUseCase
from beautypro.application.use_cases.ledger import LedgerEngine
from beautypro.application.use_cases.marketing import MarketingUseCase
from beautypro.application.use_cases.salon_settings import SettingsUseCase
from beautypro.application.use_cases.schedule import ScheduleUseCase
from beautypro.application.use_cases.team import TeamUseCase
from beautypro.core.config import settings
from beautypro.domain.lifecycle import TransitionPolicy
from beautypro.infrastructure.seed.demo_data import build_demo_unit_of_work, build_demo_users
from beautypro.infrastructure.store.memory_store import MemoryUnitOfWork, MemoryUserDirectory


@lru_cache
def get_timezone() -> ZoneInfo:
    try:
        return ZoneInfo(settings.SALON_TIMEZONE)
    except (ZoneInfoNotFoundError, ValueError):
        logging.getLogger(__name__).warning(
            "Unknown timezone, falling back to UTC", extra={"reason": settings.SALON_TIMEZONE}
        )
        return ZoneInfo("UTC")


def get_clock() -> Callable[[], datetime]:
    tz = get_timezone()
    return lambda: datetime.now(tz)


def today() -> date:
    return get_clock()().date()


@lru_cache
def get_unit_of_work() -> MemoryUnitOfWork:
    return build_demo_unit_of_work(get_clock()(), seed=settings.SEED_DEMO_DATA)


@lru_cache
def get_user_directory() -> MemoryUserDirectory:
    return build_demo_users()


@lru_cache
def get_ledger() -> LedgerEngine:
    return LedgerEngine(uow=get_unit_of_work(), clock=get_clock())


@lru_cache
def get_appointment_use_case() -> AppointmentUseCase:
    return AppointmentUseCase(
        uow=get_unit_of_work(),
        ledger=get_ledger(),
        timezone=get_timezone(),
        policy=TransitionPolicy(strict=settings.STRICT_STATUS_TRANSITIONS),
        detect_conflicts=settings.DETECT_SCHEDULING_CONFLICTS,
    )


@lru_cache
def get_client_use_case() -> ClientUseCase:
    return ClientUseCase(uow=get_unit_of_work())


@lru_cache
def get_catalog_use_case() -> ServiceCatalogUseCase:
    return ServiceCatalogUseCase(uow=get_unit_of_work())


@lru_cache
def get_team_use_case() -> TeamUseCase:
    return TeamUseCase(uow=get_unit_of_work())


@lru_cache
def get_settings_use_case() -> SettingsUseCase:
    return SettingsUseCase(uow=get_unit_of_work(), booking_base_url=settings.BOOKING_BASE_URL)


@lru_cache
def get_schedule_use_case() -> ScheduleUseCase:
    return ScheduleUseCase(uow=get_unit_of_work(), timezone=get_timezone())


@lru_cache
def get_dashboard_use_case() -> DashboardUseCase:
    return DashboardUseCase(uow=get_unit_of_work(), ledger=get_ledger(), timezone=get_timezone())


@lru_cache
def get_marketing_use_case() -> MarketingUseCase:
    return MarketingUseCase(uow=get_unit_of_work(), country_code=settings.WHATSAPP_COUNTRY_CODE)


@lru_cache
def get_booking_use_case() -> BookingUseCase:
    return BookingUseCase(
        uow=get_unit_of_work(),
        appointments=get_appointment_use_case(),
        clients=get_client_use_case(),
        timezone=get_timezone(),
        clock=get_clock(),
    )


@lru_cache
def get_login_use_case() -> LoginUseCase:
    return LoginUseCase(users=get_user_directory())

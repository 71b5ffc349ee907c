from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends

from beautypro.api.v1.auth import require_area
from beautypro.api.v1.schemas import BookingLinkSchema, SalonSettingsSchema
from beautypro.application.use_cases.salon_settings import SettingsUseCase
from beautypro.domain.entities.user import User
from beautypro.wiring.dependencies import get_settings_use_case


router = APIRouter(prefix="/settings")


@router.get("", response_model=SalonSettingsSchema)
def get_settings(
    _: User = Depends(require_area("settings")),
    uc: SettingsUseCase = Depends(get_settings_use_case),
):
    return uc.get()


@router.patch("", response_model=SalonSettingsSchema)
def update_settings(
    changes: dict[str, Any] = Body(...),
    _: User = Depends(require_area("settings")),
    uc: SettingsUseCase = Depends(get_settings_use_case),
):
    return uc.update(changes)


@router.get("/booking-link", response_model=BookingLinkSchema)
def booking_link(
    _: User = Depends(require_area("settings")),
    uc: SettingsUseCase = Depends(get_settings_use_case),
):
    return BookingLinkSchema(link=uc.booking_link())

from __future__ import annotations

from fastapi import APIRouter, Depends

from beautypro.api.v1.schemas import AppointmentSchema, BookingRequestSchema, ProfessionalSchema, ServiceSchema
from beautypro.application.use_cases.booking import BookingUseCase
from beautypro.wiring.dependencies import get_booking_use_case


# Public, no login.
router = APIRouter(prefix="/booking")


@router.get("/services", response_model=list[ServiceSchema])
def services(uc: BookingUseCase = Depends(get_booking_use_case)):
    return uc.services()


@router.get("/services/{service_id}/professionals", response_model=list[ProfessionalSchema])
def professionals(service_id: str, uc: BookingUseCase = Depends(get_booking_use_case)):
    return uc.professionals_for(service_id)


@router.get("/slots", response_model=list[str])
def slots(uc: BookingUseCase = Depends(get_booking_use_case)):
    return list(uc.slots())


@router.post("", response_model=AppointmentSchema, status_code=201)
def book(req: BookingRequestSchema, uc: BookingUseCase = Depends(get_booking_use_case)):
    return uc.book(
        service_id=req.service_id,
        professional_id=req.professional_id,
        slot=req.slot,
        client_name=req.client_name,
        client_phone=req.client_phone,
    )

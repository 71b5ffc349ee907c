from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends

from beautypro.api.v1.auth import require_area
from beautypro.api.v1.schemas import (
    AppointmentCreateSchema,
    AppointmentSchema,
    DashboardSchema,
    DayGridSchema,
    ProfessionalSchema,
    ScheduleCardSchema,
    ScheduleRowSchema,
    StatusChangeSchema,
)
from beautypro.application.use_cases.appointments import AppointmentUseCase
from beautypro.application.use_cases.dashboard import DashboardUseCase
from beautypro.application.use_cases.schedule import HOURS, ScheduleUseCase, next_day, previous_day
from beautypro.domain.entities.user import User
from beautypro.wiring.dependencies import (
    get_appointment_use_case,
    get_dashboard_use_case,
    get_schedule_use_case,
    today,
)


router = APIRouter()


@router.post("/appointments", response_model=AppointmentSchema, status_code=201)
def create_appointment(
    req: AppointmentCreateSchema,
    _: User = Depends(require_area("agenda")),
    uc: AppointmentUseCase = Depends(get_appointment_use_case),
):
    return uc.create(
        client_id=req.client_id,
        professional_id=req.professional_id,
        service_ids=req.service_ids,
        date_time=req.date_time,
        notes=req.notes,
    )


@router.get("/appointments", response_model=list[AppointmentSchema])
def list_appointments(
    day: date | None = None,
    professional_id: str | None = None,
    client_id: str | None = None,
    _: User = Depends(require_area("agenda")),
    uc: AppointmentUseCase = Depends(get_appointment_use_case),
):
    return uc.list(day=day, professional_id=professional_id, client_id=client_id)


@router.get("/appointments/{appointment_id}", response_model=AppointmentSchema)
def get_appointment(
    appointment_id: str,
    _: User = Depends(require_area("agenda")),
    uc: AppointmentUseCase = Depends(get_appointment_use_case),
):
    return uc.get(appointment_id)


@router.post("/appointments/{appointment_id}/status", response_model=AppointmentSchema)
def change_status(
    appointment_id: str,
    req: StatusChangeSchema,
    _: User = Depends(require_area("agenda")),
    uc: AppointmentUseCase = Depends(get_appointment_use_case),
):
    return uc.set_status(appointment_id, req.status)


@router.post("/appointments/{appointment_id}/advance", response_model=AppointmentSchema)
def advance_status(
    appointment_id: str,
    _: User = Depends(require_area("agenda")),
    uc: AppointmentUseCase = Depends(get_appointment_use_case),
):
    return uc.advance_status(appointment_id)


@router.get("/schedule", response_model=DayGridSchema)
def schedule(
    day: date | None = None,
    professional_id: str | None = None,
    viewer: User = Depends(require_area("agenda")),
    uc: ScheduleUseCase = Depends(get_schedule_use_case),
):
    day = day or today()
    grid = uc.day_grid(day, viewer=viewer, professional_id=professional_id)
    return DayGridSchema(
        day=grid.day,
        previous_day=previous_day(grid.day),
        next_day=next_day(grid.day),
        professionals=[ProfessionalSchema.model_validate(p) for p in grid.professionals],
        rows=[
            ScheduleRowSchema(
                hour=hour,
                cells={
                    pid: [ScheduleCardSchema.model_validate(card) for card in cards]
                    for pid, cards in grid.rows[hour].items()
                },
            )
            for hour in HOURS
        ],
        unplaced=[ScheduleCardSchema.model_validate(card) for card in grid.unplaced],
    )


@router.get("/dashboard", response_model=DashboardSchema)
def dashboard(
    viewer: User = Depends(require_area("dashboard")),
    uc: DashboardUseCase = Depends(get_dashboard_use_case),
):
    return uc.overview(viewer, today())

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Response

from beautypro.api.v1.auth import require_area
from beautypro.api.v1.schemas import (
    ProfessionalCreateSchema,
    ProfessionalSchema,
    ServiceCreateSchema,
    ServiceSchema,
)
from beautypro.application.use_cases.catalog import ServiceCatalogUseCase
from beautypro.application.use_cases.team import TeamUseCase
from beautypro.domain.entities.user import User
from beautypro.wiring.dependencies import get_catalog_use_case, get_team_use_case


router = APIRouter()


@router.get("/services", response_model=list[ServiceSchema])
def list_services(
    active_only: bool = False,
    _: User = Depends(require_area("services")),
    uc: ServiceCatalogUseCase = Depends(get_catalog_use_case),
):
    return uc.list(active_only=active_only)


@router.post("/services", response_model=ServiceSchema, status_code=201)
def add_service(
    req: ServiceCreateSchema,
    _: User = Depends(require_area("services")),
    uc: ServiceCatalogUseCase = Depends(get_catalog_use_case),
):
    return uc.add(**req.model_dump())


@router.patch("/services/{service_id}", response_model=ServiceSchema)
def update_service(
    service_id: str,
    changes: dict[str, Any] = Body(...),
    _: User = Depends(require_area("services")),
    uc: ServiceCatalogUseCase = Depends(get_catalog_use_case),
):
    return uc.update(service_id, changes)


@router.delete("/services/{service_id}", status_code=204)
def remove_service(
    service_id: str,
    _: User = Depends(require_area("services")),
    uc: ServiceCatalogUseCase = Depends(get_catalog_use_case),
):
    uc.remove(service_id)
    return Response(status_code=204)


@router.get("/professionals", response_model=list[ProfessionalSchema])
def list_professionals(
    _: User = Depends(require_area("team")),
    uc: TeamUseCase = Depends(get_team_use_case),
):
    return uc.list()


@router.post("/professionals", response_model=ProfessionalSchema, status_code=201)
def add_professional(
    req: ProfessionalCreateSchema,
    _: User = Depends(require_area("team")),
    uc: TeamUseCase = Depends(get_team_use_case),
):
    return uc.add(**req.model_dump())


@router.patch("/professionals/{professional_id}", response_model=ProfessionalSchema)
def update_professional(
    professional_id: str,
    changes: dict[str, Any] = Body(...),
    _: User = Depends(require_area("team")),
    uc: TeamUseCase = Depends(get_team_use_case),
):
    return uc.update(professional_id, changes)


@router.post("/professionals/{professional_id}/specialties/{service_id}", response_model=ProfessionalSchema)
def toggle_specialty(
    professional_id: str,
    service_id: str,
    _: User = Depends(require_area("team")),
    uc: TeamUseCase = Depends(get_team_use_case),
):
    return uc.toggle_specialty(professional_id, service_id)


@router.delete("/professionals/{professional_id}", status_code=204)
def remove_professional(
    professional_id: str,
    _: User = Depends(require_area("team")),
    uc: TeamUseCase = Depends(get_team_use_case),
):
    uc.remove(professional_id)
    return Response(status_code=204)

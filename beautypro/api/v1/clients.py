from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Response

from beautypro.api.v1.auth import require_area
from beautypro.api.v1.schemas import ClientCreateSchema, ClientSchema
from beautypro.application.use_cases.clients import ClientUseCase
from beautypro.domain.entities.user import User
from beautypro.wiring.dependencies import get_client_use_case


router = APIRouter(prefix="/clients")


@router.get("", response_model=list[ClientSchema])
def list_clients(
    q: str | None = None,
    _: User = Depends(require_area("clients")),
    uc: ClientUseCase = Depends(get_client_use_case),
):
    return uc.search(q) if q else uc.list()


@router.post("", response_model=ClientSchema, status_code=201)
def add_client(
    req: ClientCreateSchema,
    _: User = Depends(require_area("clients")),
    uc: ClientUseCase = Depends(get_client_use_case),
):
    return uc.add(**req.model_dump())


@router.get("/{client_id}", response_model=ClientSchema)
def get_client(
    client_id: str,
    _: User = Depends(require_area("clients")),
    uc: ClientUseCase = Depends(get_client_use_case),
):
    return uc.get(client_id)


@router.patch("/{client_id}", response_model=ClientSchema)
def update_client(
    client_id: str,
    changes: dict[str, Any] = Body(...),
    _: User = Depends(require_area("clients")),
    uc: ClientUseCase = Depends(get_client_use_case),
):
    return uc.update(client_id, changes)


@router.delete("/{client_id}", status_code=204)
def remove_client(
    client_id: str,
    _: User = Depends(require_area("clients")),
    uc: ClientUseCase = Depends(get_client_use_case),
):
    uc.remove(client_id)
    return Response(status_code=204)

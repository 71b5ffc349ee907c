from __future__ import annotations

from typing import Callable

from fastapi import APIRouter, Depends, Header, HTTPException

from beautypro.api.v1.schemas import LoginRequestSchema, UserSchema
from beautypro.application.use_cases.access import LoginUseCase, can_access
from beautypro.domain.entities.user import User
from beautypro.wiring.dependencies import get_login_use_case


router = APIRouter(prefix="/auth")


def get_viewer(
    x_user_email: str | None = Header(None),
    uc: LoginUseCase = Depends(get_login_use_case),
) -> User | None:
    if not x_user_email:
        return None
    return uc.execute(x_user_email)


def require_area(area: str) -> Callable[..., User]:
    def dependency(viewer: User | None = Depends(get_viewer)) -> User:
        if viewer is None:
            raise HTTPException(status_code=401, detail="Login required")
        if not can_access(viewer, area):
            raise HTTPException(status_code=403, detail=f"No access to {area}")
        return viewer

    return dependency


@router.post("/login", response_model=UserSchema)
def login(req: LoginRequestSchema, uc: LoginUseCase = Depends(get_login_use_case)):
    user = uc.execute(req.email)
    if user is None:
        raise HTTPException(status_code=401, detail="Unknown user")
    return user


@router.get("/users", response_model=list[UserSchema])
def users(uc: LoginUseCase = Depends(get_login_use_case)):
    return uc.users()

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from beautypro.api.v1.appointments import router as appointments_router
from beautypro.api.v1.auth import router as auth_router
from beautypro.api.v1.booking import router as booking_router
from beautypro.api.v1.catalog import router as catalog_router
from beautypro.api.v1.clients import router as clients_router
from beautypro.api.v1.finance import router as finance_router
from beautypro.api.v1.marketing import router as marketing_router
from beautypro.api.v1.salon_settings import router as settings_router
from beautypro.application.exceptions import (
    InvalidTransitionError,
    NotFoundError,
    SchedulingConflictError,
    ValidationError,
)
from beautypro.core.config import settings


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in (
            "appointment_id",
            "client_id",
            "professional_id",
            "service_id",
            "transaction_id",
            "user_id",
            "from_status",
            "status",
            "value",
            "loyalty_points",
            "fields",
            "reason",
        ):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

logger = logging.getLogger(__name__)

app = FastAPI(title="BeautyPro Salon", version="1.0.0")

app.include_router(auth_router, tags=["auth"])
app.include_router(appointments_router, tags=["agenda"])
app.include_router(clients_router, tags=["clients"])
app.include_router(catalog_router, tags=["catalog"])
app.include_router(finance_router, tags=["finance"])
app.include_router(marketing_router, tags=["marketing"])
app.include_router(settings_router, tags=["settings"])
app.include_router(booking_router, tags=["booking"])


def _error(status_code: int, exc: Exception) -> JSONResponse:
    logger.warning(
        "Request rejected",
        extra={"reason": f"{type(exc).__name__}: {exc}", "status": status_code},
    )
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.exception_handler(NotFoundError)
async def not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return _error(404, exc)


@app.exception_handler(ValidationError)
async def invalid_input(request: Request, exc: ValidationError) -> JSONResponse:
    return _error(422, exc)


@app.exception_handler(InvalidTransitionError)
async def invalid_transition(request: Request, exc: InvalidTransitionError) -> JSONResponse:
    return _error(409, exc)


@app.exception_handler(SchedulingConflictError)
async def scheduling_conflict(request: Request, exc: SchedulingConflictError) -> JSONResponse:
    return _error(409, exc)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}

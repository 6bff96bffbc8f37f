"""Health check endpoints. Used for liveness and readiness probes."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.core.config import get_settings
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Tenant routing not wired", "model": ReadinessErrorResponse}},
)
async def readiness_check(request: Request) -> ReadinessResponse | JSONResponse:
    """Return 200 if ready; 503 when Supabase is configured but tenant routing is not wired.

    Does not call Supabase: the directory is a soft dependency and an
    outage must not take instances out of rotation.
    """
    settings = get_settings()
    wired = getattr(request.app.state, "tenant_resolver", None) is not None
    if not settings.supabase_enabled:
        return ReadinessResponse(tenant_routing=False)
    if wired:
        return ReadinessResponse(tenant_routing=True)
    return JSONResponse(
        status_code=503,
        content=ReadinessErrorResponse(
            status="not_ready",
            message="Tenant routing has not been initialised",
        ).model_dump(),
    )

"""Health check endpoints."""

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from firstaid.api.deps import AppSettings
from firstaid.chat.triggers import get_trigger_table

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str


class ReadinessResponse(HealthResponse):
    """Readiness response with the active trigger ruleset."""

    ruleset_version: str
    ruleset_hash: str


@router.get(
    "",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Returns service health status",
)
async def health_check() -> HealthResponse:
    """Check if the service is healthy."""
    return HealthResponse(status="ok")


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    status_code=status.HTTP_200_OK,
    summary="Readiness check",
    description="Returns readiness once the trigger ruleset has loaded",
)
async def readiness_check(app_settings: AppSettings) -> ReadinessResponse:
    """Check the service can classify messages.

    Raises:
        HTTPException: 503 if the trigger ruleset cannot be loaded
    """
    try:
        table = get_trigger_table(app_settings.trigger_ruleset)
    except (FileNotFoundError, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Trigger ruleset unavailable: {exc}",
        ) from exc

    return ReadinessResponse(
        status="ok",
        ruleset_version=table.version,
        ruleset_hash=table.ruleset_hash,
    )

"""Health check endpoint."""

from fastapi import APIRouter

from api.schemas import HealthResponse
from config import settings

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check that the audit service is up. No dependencies are probed; the engine is stateless.",
)
async def health_check() -> HealthResponse:
    """Return service health status."""
    return HealthResponse(service=settings.app_name.lower())

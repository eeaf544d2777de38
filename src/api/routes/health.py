"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.v1.dependencies import get_profile_store
from core.config import settings
from infrastructure.store.profile_store import ProfileStore

router = APIRouter(tags=["health"])

API_VERSION = "1.0.0"


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    environment: str
    storage: str | None = None
    profile_count: int | None = None


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check() -> HealthResponse:
    """
    Basic health check for load balancers.

    Returns service status without checking dependencies. Fast and lightweight.
    """
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        timestamp=_now_iso(),
        environment=settings.app_env,
    )


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Detailed health check",
)
async def detailed_health_check(
    store: ProfileStore = Depends(get_profile_store),
) -> HealthResponse:
    """
    Detailed health check including the profile store.

    Reports ``degraded`` when the store has not finished loading.
    """
    if store.initialized:
        profiles = await store.get_all()
        storage_status, count = "healthy", len(profiles)
    else:
        storage_status, count = "not initialized", None

    return HealthResponse(
        status="healthy" if storage_status == "healthy" else "degraded",
        version=API_VERSION,
        timestamp=_now_iso(),
        environment=settings.app_env,
        storage=storage_status,
        profile_count=count,
    )

"""
Health Check Endpoints Router

Provides health check endpoints for monitoring and load balancers.
"""
from datetime import datetime, timezone
from fastapi import APIRouter, Depends

from integration_layer.api.dependencies import get_profile_store, get_settings
from integration_layer.api.schemas import APIResponse, ok
from integration_layer.core.config import Settings
from integration_layer.store import ProfileStore

router = APIRouter(
    tags=["health"],
    responses={404: {"description": "Not found"}},
)


@router.get("/health", response_model=APIResponse, response_model_exclude_none=True)
async def health_check(
    settings: Settings = Depends(get_settings),
    store: ProfileStore = Depends(get_profile_store)
):
    """
    Basic health check endpoint.

    Returns 200 if service is running.
    """
    return ok(
        {
            "service": settings.app_name,
            "version": settings.version,
            "status": "healthy",
            "users_loaded": len(store.list_user_ids()),
            "timestamp": datetime.now(timezone.utc),
        },
        message=f"{settings.app_name} API is running"
    )

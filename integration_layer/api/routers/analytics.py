"""
Analytics & Aggregation Endpoints Router

Provides platform-wide figures computed by scoring every user:
VIP share, monthly revenue, projected annual revenue, segment and persona
distributions.
"""

from fastapi import APIRouter, Depends

from integration_layer.api.dependencies import get_profile_store, get_settings
from integration_layer.api.schemas import APIResponse, ok
from integration_layer.core.config import Settings
from integration_layer.services import compute_analytics
from integration_layer.store import ProfileStore

router = APIRouter(
    tags=["analytics"],
    responses={404: {"description": "Not found"}},
)


@router.get("/analytics", response_model=APIResponse, response_model_exclude_none=True)
async def get_analytics(
    settings: Settings = Depends(get_settings),
    store: ProfileStore = Depends(get_profile_store)
):
    """Aggregate analytics across all users."""
    summary = compute_analytics(store, workers=settings.analytics_workers)
    return ok(summary, message="Analytics data retrieved successfully")

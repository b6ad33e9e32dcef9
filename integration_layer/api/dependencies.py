"""
API Dependencies

Shared dependencies for FastAPI endpoints. The profile store and settings
live on app.state, set by the application factory.
"""
from fastapi import Depends, Request

from integration_layer.core.config import Settings
from integration_layer.services import AggregationService
from integration_layer.store import ProfileStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_profile_store(request: Request) -> ProfileStore:
    return request.app.state.profile_store


def get_aggregation_service(
    store: ProfileStore = Depends(get_profile_store)
) -> AggregationService:
    """
    Aggregation service bound to the app's profile store.

    Usage:
        @router.get("/users/{user_id}/profile")
        async def get_profile(user_id: str, service: AggregationService = Depends(get_aggregation_service)):
            ...
    """
    return AggregationService(store)

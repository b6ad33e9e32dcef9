"""
User Profile & Insight Endpoints Router

Provides:
- User listing
- Unified cross-platform profile with value score and segment
- Cross-sell insights
- Coordinated cross-platform actions (simulated)
"""

from fastapi import APIRouter, Depends

from integration_layer.api.dependencies import get_aggregation_service
from integration_layer.api.schemas import APIResponse, ok
from integration_layer.core.exceptions import UserNotFoundError
from integration_layer.middleware.error_handling import NotFoundError
from integration_layer.middleware.logging_config import get_logger, log_business_event
from integration_layer.models import Segment
from integration_layer.services import AggregationService

logger = get_logger(__name__)

router = APIRouter(
    prefix="/users",
    tags=["users"],
    responses={404: {"description": "User not found"}},
)


@router.get("", response_model=APIResponse, response_model_exclude_none=True)
async def list_users(service: AggregationService = Depends(get_aggregation_service)):
    """List every user known to the profile store."""
    users = service.list_users()
    return ok(users, message=f"Retrieved {len(users)} users")


@router.get("/{user_id}/profile", response_model=APIResponse, response_model_exclude_none=True)
async def get_unified_profile(
    user_id: str,
    service: AggregationService = Depends(get_aggregation_service)
):
    """Unified profile: identity, commerce/gaming/finance profiles and computed score."""
    try:
        profile = service.build_unified_profile(user_id)
    except UserNotFoundError:
        raise NotFoundError(resource="User", identifier=user_id)

    if profile.computed_insights.segment == Segment.VIP:
        log_business_event(
            "vip_profile_viewed",
            user_id=user_id,
            value_score=round(profile.computed_insights.value_score, 2)
        )

    return ok(profile, message="Unified profile retrieved successfully")


@router.get("/{user_id}/insights", response_model=APIResponse, response_model_exclude_none=True)
async def get_insights(
    user_id: str,
    service: AggregationService = Depends(get_aggregation_service)
):
    """Cross-sell insights in rule order."""
    try:
        insights = service.get_insights(user_id)
    except UserNotFoundError:
        raise NotFoundError(resource="User", identifier=user_id)

    return ok(insights, message=f"Generated {len(insights)} insights for user {user_id}")


@router.post("/{user_id}/actions", response_model=APIResponse, response_model_exclude_none=True)
async def execute_actions(
    user_id: str,
    service: AggregationService = Depends(get_aggregation_service)
):
    """Trigger the coordinated cross-platform promotion for a user."""
    try:
        actions = service.plan_actions(user_id)
    except UserNotFoundError:
        raise NotFoundError(resource="User", identifier=user_id)

    return ok(actions, message=f"Executed {len(actions)} coordinated actions for user {user_id}")

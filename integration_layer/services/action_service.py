"""
Coordinated cross-platform actions.

Simulated: every user gets the same gaming-focused promotion pushed to the
commerce and gaming platforms. No platform is actually called.
"""
from datetime import datetime, timezone
from typing import List, Optional

from integration_layer.models import CrossPlatformAction, DataSource


def plan_cross_platform_actions(
    user_id: str,
    now: Optional[datetime] = None
) -> List[CrossPlatformAction]:
    """Build the action plan for a user. IDs embed the unix timestamp."""
    now = now or datetime.now(timezone.utc)

    return [
        CrossPlatformAction(
            action_id=f"action_{user_id}_{int(now.timestamp())}",
            target_platforms=(DataSource.COMMERCE, DataSource.GAMING),
            action_type="targeted_promotion",
            parameters={
                "commerce_action": {
                    "show_gaming_deals": True,
                    "discount_percentage": 15,
                    "categories": ["Gaming Accessories", "PC Components"],
                },
                "gaming_action": {
                    "offer_premium_items": True,
                    "bonus_points": 500,
                    "exclusive_skins": True,
                },
            },
            expected_outcome="15% increase in gaming-related purchases",
            priority=1,
        )
    ]

"""
Profile Aggregation Service

Joins a user's identity with their commerce, gaming and finance profiles,
scores them, and optionally runs the insight rules.

This is the only piece that talks to the profile store. Scoring and
insight generation stay pure.
"""

from datetime import datetime
from typing import List, Optional

import structlog

from integration_layer.core.exceptions import UserNotFoundError
from integration_layer.models import CrossPlatformAction, Insight, UnifiedProfile, User
from integration_layer.services.action_service import plan_cross_platform_actions
from integration_layer.services.insight_service import generate_insights
from integration_layer.services.scoring_service import compute_score
from integration_layer.store import ProfileStore

logger = structlog.get_logger(__name__)


class AggregationService:
    """Builds unified profiles and insights from a profile store"""

    def __init__(self, store: ProfileStore):
        self.store = store

    def list_users(self) -> List[User]:
        """All known users, ordered by id."""
        users = [self.store.get_user(user_id) for user_id in sorted(self.store.list_user_ids())]
        return [user for user in users if user is not None]

    def get_user(self, user_id: str) -> User:
        user = self.store.get_user(user_id)
        if user is None:
            logger.info("user_not_found", user_id=user_id)
            raise UserNotFoundError(user_id)
        return user

    def build_unified_profile(self, user_id: str) -> UnifiedProfile:
        """
        Fetch and score every platform profile for a user.

        Raises:
            UserNotFoundError: If the core identity does not exist. Missing
                platform profiles are scored as empty instead.
        """
        user = self.get_user(user_id)

        commerce = self.store.get_commerce_profile(user_id)
        gaming = self.store.get_gaming_profile(user_id)
        finance = self.store.get_finance_profile(user_id)

        score = compute_score(commerce, gaming, finance)

        logger.debug(
            "user_scored",
            user_id=user_id,
            value_score=round(score.value_score, 2),
            segment=score.segment.value,
            persona=score.persona.value
        )

        return UnifiedProfile(
            user=user,
            commerce_profile=commerce,
            gaming_profile=gaming,
            finance_profile=finance,
            computed_insights=score,
        )

    def get_insights(self, user_id: str, now: Optional[datetime] = None) -> List[Insight]:
        """Unified profile for the user, run through the insight rules."""
        profile = self.build_unified_profile(user_id)
        insights = generate_insights(user_id, profile, now=now)

        logger.info(
            "insights_generated",
            user_id=user_id,
            insight_count=len(insights),
            insight_types=[insight.insight_type.value for insight in insights]
        )

        return insights

    def plan_actions(self, user_id: str, now: Optional[datetime] = None) -> List[CrossPlatformAction]:
        """Simulated coordinated promotion for an existing user."""
        self.get_user(user_id)
        actions = plan_cross_platform_actions(user_id, now=now)

        logger.info("actions_planned", user_id=user_id, action_count=len(actions))

        return actions

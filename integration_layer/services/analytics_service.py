"""
Aggregate Analytics

Scores every known user and reduces the results to platform-wide figures:
- VIP share of the user base
- Total and average monthly revenue contribution
- Projected annual revenue
- Segment and persona distributions

Per-user scoring is independent, so the map step can run on a thread pool.
Users are always processed in sorted id order and the pool's map keeps that
order, so parallel and sequential runs give the same summary.
"""

from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional

import structlog

from integration_layer.models import Persona, ScoreResult, Segment
from integration_layer.services.scoring_service import compute_score
from integration_layer.store import ProfileStore

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class AnalyticsSummary:
    total_users: int
    vip_users: int
    regular_users: int                  # everyone who is not VIP
    vip_percentage: float
    total_monthly_revenue: int
    avg_revenue_per_user: int
    projected_annual_revenue: int
    segment_distribution: Dict[str, int]
    persona_distribution: Dict[str, int]
    last_updated: datetime


def _score_user(store: ProfileStore, user_id: str) -> ScoreResult:
    return compute_score(
        store.get_commerce_profile(user_id),
        store.get_gaming_profile(user_id),
        store.get_finance_profile(user_id),
    )


def score_all_users(store: ProfileStore, workers: int = 1) -> List[ScoreResult]:
    """Score every user in the store, in sorted user id order."""
    user_ids = sorted(store.list_user_ids())

    if workers <= 1 or len(user_ids) <= 1:
        return [_score_user(store, user_id) for user_id in user_ids]

    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(lambda user_id: _score_user(store, user_id), user_ids))


def compute_analytics(
    store: ProfileStore,
    workers: int = 1,
    now: Optional[datetime] = None
) -> AnalyticsSummary:
    """
    Platform-wide analytics across all users.

    Args:
        store: Profile source
        workers: Thread pool size for the scoring step (1 = sequential)
        now: Timestamp to report as last_updated (default: current UTC time)

    Returns:
        AnalyticsSummary. An empty store yields zeros, not an error.
    """
    scores = score_all_users(store, workers=workers)

    total_users = len(scores)
    vip_users = sum(1 for score in scores if score.segment == Segment.VIP)
    total_revenue = sum(score.monthly_revenue_contribution for score in scores)

    segments = Counter(score.segment for score in scores)
    personas = Counter(score.persona for score in scores)

    summary = AnalyticsSummary(
        total_users=total_users,
        vip_users=vip_users,
        regular_users=total_users - vip_users,
        vip_percentage=(vip_users / total_users * 100) if total_users else 0.0,
        total_monthly_revenue=total_revenue,
        avg_revenue_per_user=(total_revenue // total_users) if total_users else 0,
        projected_annual_revenue=total_revenue * 12,
        segment_distribution={segment.value: segments.get(segment, 0) for segment in Segment},
        persona_distribution={persona.value: personas.get(persona, 0) for persona in Persona},
        last_updated=now or datetime.now(timezone.utc),
    )

    logger.info(
        "analytics_computed",
        total_users=total_users,
        vip_users=vip_users,
        total_monthly_revenue=total_revenue,
        workers=workers
    )

    return summary

"""
Cross-Platform Insight Rules

Converts a scored unified profile into actionable recommendations.

Rules are evaluated in a fixed order and fire independently, so one
profile can trigger several. The output keeps rule order; it is never
re-sorted by confidence or revenue.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from integration_layer.models import (
    DataSource,
    Insight,
    InsightType,
    Persona,
    Segment,
    UnifiedProfile,
)


FINANCIAL_CROSS_SELL_MIN_CREDIT = 750
FINANCIAL_CROSS_SELL_MIN_SPEND = 5_000_000


@dataclass(frozen=True)
class InsightRule:
    """A condition on the unified profile and the insight it produces"""
    insight_type: InsightType
    applies: Callable[[UnifiedProfile], bool]
    confidence: float
    data_sources: Tuple[DataSource, ...]
    recommendation: str
    potential_revenue: int

    def build(self, user_id: str, created_at: datetime) -> Insight:
        return Insight(
            user_id=user_id,
            insight_type=self.insight_type,
            confidence=self.confidence,
            data_sources=self.data_sources,
            recommendation=self.recommendation,
            potential_revenue=self.potential_revenue,
            created_at=created_at,
        )


def _is_hardcore_gamer(profile: UnifiedProfile) -> bool:
    return profile.computed_insights.persona == Persona.HARDCORE_GAMER


def _is_vip(profile: UnifiedProfile) -> bool:
    return profile.computed_insights.segment == Segment.VIP


def _is_prime_credit_shopper(profile: UnifiedProfile) -> bool:
    return (
        profile.finance_profile.credit_score > FINANCIAL_CROSS_SELL_MIN_CREDIT and
        profile.commerce_profile.total_spent > FINANCIAL_CROSS_SELL_MIN_SPEND
    )


INSIGHT_RULES: Tuple[InsightRule, ...] = (
    InsightRule(
        insight_type=InsightType.CROSS_SELL_GAMING,
        applies=_is_hardcore_gamer,
        confidence=0.85,
        data_sources=(DataSource.COMMERCE, DataSource.GAMING),
        recommendation="Recommend premium gaming accessories and exclusive in-game items",
        potential_revenue=500_000,
    ),
    InsightRule(
        insight_type=InsightType.VIP_TREATMENT,
        applies=_is_vip,
        confidence=0.90,
        data_sources=(DataSource.COMMERCE, DataSource.GAMING, DataSource.FINANCE),
        recommendation="Activate VIP support, exclusive deals, and priority services",
        potential_revenue=800_000,
    ),
    InsightRule(
        insight_type=InsightType.FINANCIAL_CROSS_SELL,
        applies=_is_prime_credit_shopper,
        confidence=0.80,
        data_sources=(DataSource.COMMERCE, DataSource.FINANCE),
        recommendation="Offer premium credit card or investment products",
        potential_revenue=1_200_000,
    ),
)


def generate_insights(
    user_id: str,
    profile: UnifiedProfile,
    now: Optional[datetime] = None
) -> List[Insight]:
    """
    Run every rule against the profile.

    Args:
        user_id: User the insights are for
        profile: Unified profile including the score result
        now: Creation timestamp for all emitted insights (default: current UTC time)

    Returns:
        Insights in rule order; empty if nothing fired
    """
    created_at = now or datetime.now(timezone.utc)

    return [
        rule.build(user_id, created_at)
        for rule in INSIGHT_RULES
        if rule.applies(profile)
    ]

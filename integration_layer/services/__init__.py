"""
Services

Scoring and insight rules are pure functions; the aggregation service is
the only piece that reads from a profile store.
"""

from .scoring_service import compute_score
from .insight_service import generate_insights
from .aggregation_service import AggregationService
from .analytics_service import AnalyticsSummary, compute_analytics

__all__ = [
    "compute_score",
    "generate_insights",
    "AggregationService",
    "AnalyticsSummary",
    "compute_analytics",
]

"""Universal Integration Layer - Profile Records"""

from .profiles import (
    CommerceProfile,
    CrossPlatformAction,
    DataSource,
    FinanceProfile,
    GamingProfile,
    Insight,
    InsightType,
    Loan,
    Persona,
    Purchase,
    ScoreResult,
    Segment,
    UnifiedProfile,
    User,
)

__all__ = [
    "CommerceProfile",
    "CrossPlatformAction",
    "DataSource",
    "FinanceProfile",
    "GamingProfile",
    "Insight",
    "InsightType",
    "Loan",
    "Persona",
    "Purchase",
    "ScoreResult",
    "Segment",
    "UnifiedProfile",
    "User",
]

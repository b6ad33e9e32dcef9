"""
Profile Records

Plain immutable records for the three platform domains and the
unified view built on top of them:
- User: core identity (the only record whose absence is an error)
- CommerceProfile / GamingProfile / FinanceProfile: per-domain activity
- ScoreResult: output of the scoring engine
- UnifiedProfile: identity + domain profiles + score
- Insight: one actionable recommendation
- CrossPlatformAction: a coordinated promotion across platforms

Every domain profile has an ``empty()`` form. A user with no activity on
a platform gets the empty form rather than an error.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class Segment(str, Enum):
    """Value tier assigned from the composite score"""
    VIP = "VIP"                         # >= 80
    HIGH_VALUE = "High Value"           # >= 60
    REGULAR = "Regular"                 # >= 30
    NEW_LOW_ACTIVITY = "New/Low Activity"


class Persona(str, Enum):
    """Behavioral archetype used to pick cross-sell messaging"""
    HARDCORE_GAMER = "Hardcore Gamer"
    INVESTOR = "Investor"
    CASUAL_USER = "Casual User"


class InsightType(str, Enum):
    CROSS_SELL_GAMING = "cross_sell_gaming"
    VIP_TREATMENT = "vip_treatment"
    FINANCIAL_CROSS_SELL = "financial_cross_sell"


class DataSource(str, Enum):
    """Platform domains a record or insight draws on"""
    COMMERCE = "commerce"
    GAMING = "gaming"
    FINANCE = "finance"


@dataclass(frozen=True)
class User:
    """Core identity shared across platforms"""
    id: str
    name: str
    email: str
    phone: str
    registration_date: datetime
    tier: str                           # "silver", "gold", "platinum"


@dataclass(frozen=True)
class Purchase:
    item: str
    price: int
    date: datetime


@dataclass(frozen=True)
class Loan:
    amount: int
    status: str                         # "paid", "current", "defaulted", ...
    date: datetime


@dataclass(frozen=True)
class CommerceProfile:
    """E-commerce activity for one user"""
    user_id: str
    total_orders: int = 0
    total_spent: int = 0
    favorite_categories: Tuple[str, ...] = ()       # unordered, membership only
    recent_purchases: Tuple[Purchase, ...] = ()     # most recent first
    cart_abandonment_rate: float = 0.0              # 0.0 to 1.0
    last_active: Optional[datetime] = None

    @classmethod
    def empty(cls, user_id: str) -> "CommerceProfile":
        return cls(user_id=user_id)


@dataclass(frozen=True)
class GamingProfile:
    """Gaming activity for one user"""
    user_id: str
    games_played: Tuple[str, ...] = ()
    total_game_hours: int = 0
    monthly_spend: int = 0
    rank: str = ""
    achievements: Tuple[str, ...] = ()
    last_session: Optional[datetime] = None
    social_connections: int = 0
    preferred_game_time: str = ""       # "afternoon", "evening", "night"

    @classmethod
    def empty(cls, user_id: str) -> "GamingProfile":
        return cls(user_id=user_id)


@dataclass(frozen=True)
class FinanceProfile:
    """Wallet, credit and investment activity for one user"""
    user_id: str
    wallet_balance: int = 0
    credit_score: int = 0               # observed range 300-850, 0 when unknown
    loan_history: Tuple[Loan, ...] = ()
    monthly_transactions: int = 0
    avg_transaction: int = 0
    savings_balance: int = 0
    investment_portfolio: int = 0
    last_transaction: Optional[datetime] = None

    @classmethod
    def empty(cls, user_id: str) -> "FinanceProfile":
        return cls(user_id=user_id)


@dataclass(frozen=True)
class ScoreResult:
    """Composite value score and the labels derived from it"""
    value_score: float                  # 0.0 to 100.0
    segment: Segment
    persona: Persona
    cross_sell_opportunity: str
    churn_risk: str
    monthly_revenue_contribution: int   # non-negative


@dataclass(frozen=True)
class UnifiedProfile:
    """Core identity joined with its domain profiles and score"""
    user: User
    commerce_profile: CommerceProfile
    gaming_profile: GamingProfile
    finance_profile: FinanceProfile
    computed_insights: ScoreResult


@dataclass(frozen=True)
class Insight:
    """A single actionable recommendation"""
    user_id: str
    insight_type: InsightType
    confidence: float                   # 0.0 to 1.0
    data_sources: Tuple[DataSource, ...]
    recommendation: str
    potential_revenue: int
    created_at: datetime


@dataclass(frozen=True)
class CrossPlatformAction:
    action_id: str
    target_platforms: Tuple[DataSource, ...]
    action_type: str
    parameters: Dict[str, Any] = field(default_factory=dict)
    expected_outcome: str = ""
    priority: int = 1

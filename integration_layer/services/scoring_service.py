"""
Value Scoring Service

Turns a user's three domain profiles into a composite value score (0-100)
plus the labels derived from it.

Score components (each capped from above before summing):
- Commerce lifetime spend / 100,000 × 20      max 20
- Gaming monthly spend / 10,000 × 15          max 15
- Credit score: (score - 600) / 10            max 25, negative below 600
- Investment portfolio / 1,000,000 × 40       max 40

The credit component is not floored, so a poor credit score drags the other
components down. A missing finance record (credit score 0) adds nothing.
Only the grand total is clamped to [0, 100].

Everything here is pure: same profiles in, same ScoreResult out.
"""
from typing import Tuple

from integration_layer.models import (
    CommerceProfile,
    FinanceProfile,
    GamingProfile,
    Persona,
    ScoreResult,
    Segment,
)


# Component weights and caps
COMMERCE_SPEND_UNIT = 100_000
COMMERCE_WEIGHT = 20.0
GAMING_SPEND_UNIT = 10_000
GAMING_WEIGHT = 15.0
CREDIT_BASELINE = 600
CREDIT_DIVISOR = 10.0
CREDIT_CAP = 25.0
UNKNOWN_CREDIT_SCORE = 0
INVESTMENT_UNIT = 1_000_000
INVESTMENT_WEIGHT = 40.0

MAX_SCORE = 100.0
MIN_SCORE = 0.0

# Inclusive lower bounds, checked high to low
SEGMENT_THRESHOLDS = (
    (80.0, Segment.VIP),
    (60.0, Segment.HIGH_VALUE),
    (30.0, Segment.REGULAR),
)

HARDCORE_GAMER_MIN_MONTHLY_SPEND = 100_000
GAMING_CATEGORY = "Gaming"
INVESTOR_MIN_PORTFOLIO = 5_000_000

CROSS_SELL_BY_PERSONA = {
    Persona.HARDCORE_GAMER: "High - Gaming ecosystem",
    Persona.INVESTOR: "Medium - Financial products",
    Persona.CASUAL_USER: "Low - Basic engagement",
}

# No churn model yet; every user reports the same label
CHURN_RISK_PLACEHOLDER = "Low"

MONTHS_PER_YEAR = 12
TRANSACTION_FEE_RATE = 0.02


def compute_score(
    commerce: CommerceProfile,
    gaming: GamingProfile,
    finance: FinanceProfile
) -> ScoreResult:
    """
    Score a user from their three domain profiles.

    Args:
        commerce: E-commerce profile (empty form if the user never shopped)
        gaming: Gaming profile (empty form if the user never played)
        finance: Finance profile (empty form if the user has no wallet)

    Returns:
        ScoreResult with value score, segment, persona, cross-sell label,
        churn risk and monthly revenue contribution. Never raises.
    """
    value_score = calculate_value_score(commerce, gaming, finance)
    persona, cross_sell = classify_persona(commerce, gaming, finance)

    return ScoreResult(
        value_score=value_score,
        segment=classify_segment(value_score),
        persona=persona,
        cross_sell_opportunity=cross_sell,
        churn_risk=CHURN_RISK_PLACEHOLDER,
        monthly_revenue_contribution=estimate_monthly_revenue(commerce, gaming, finance),
    )


def calculate_value_score(
    commerce: CommerceProfile,
    gaming: GamingProfile,
    finance: FinanceProfile
) -> float:
    """Sum of the four capped components, clamped to [0, 100]."""
    total = (
        _commerce_component(commerce) +
        _gaming_component(gaming) +
        _credit_component(finance) +
        _investment_component(finance)
    )
    return max(MIN_SCORE, min(total, MAX_SCORE))


def _commerce_component(commerce: CommerceProfile) -> float:
    """Lifetime spend: per 100k × 20, max 20"""
    return min(commerce.total_spent / COMMERCE_SPEND_UNIT * COMMERCE_WEIGHT, COMMERCE_WEIGHT)


def _gaming_component(gaming: GamingProfile) -> float:
    """Monthly gaming spend: per 10k × 15, max 15"""
    return min(gaming.monthly_spend / GAMING_SPEND_UNIT * GAMING_WEIGHT, GAMING_WEIGHT)


def _credit_component(finance: FinanceProfile) -> float:
    """
    Credit score above the 600 baseline, one point per 10, max 25.

    Below 600 the component goes negative (300 -> -30). An unknown score
    (0, no finance record) contributes nothing.
    """
    if finance.credit_score == UNKNOWN_CREDIT_SCORE:
        return 0.0
    return min((finance.credit_score - CREDIT_BASELINE) / CREDIT_DIVISOR, CREDIT_CAP)


def _investment_component(finance: FinanceProfile) -> float:
    """Investment portfolio: per 1M × 40, max 40"""
    return min(
        finance.investment_portfolio / INVESTMENT_UNIT * INVESTMENT_WEIGHT,
        INVESTMENT_WEIGHT
    )


def classify_segment(value_score: float) -> Segment:
    for threshold, segment in SEGMENT_THRESHOLDS:
        if value_score >= threshold:
            return segment
    return Segment.NEW_LOW_ACTIVITY


def classify_persona(
    commerce: CommerceProfile,
    gaming: GamingProfile,
    finance: FinanceProfile
) -> Tuple[Persona, str]:
    """
    Pick the persona and its cross-sell label.

    Gaming is checked first: a big gaming spender who also shops for gaming
    gear is a Hardcore Gamer even with a large portfolio.
    """
    shops_gaming = GAMING_CATEGORY in commerce.favorite_categories

    if gaming.monthly_spend > HARDCORE_GAMER_MIN_MONTHLY_SPEND and shops_gaming:
        persona = Persona.HARDCORE_GAMER
    elif finance.investment_portfolio > INVESTOR_MIN_PORTFOLIO:
        persona = Persona.INVESTOR
    else:
        persona = Persona.CASUAL_USER

    return persona, CROSS_SELL_BY_PERSONA[persona]


def estimate_monthly_revenue(
    commerce: CommerceProfile,
    gaming: GamingProfile,
    finance: FinanceProfile
) -> int:
    """
    Monthly revenue contribution across platforms.

    Commerce spend averaged over a year, plus gaming monthly spend, plus a
    2% fee on wallet transaction volume. Truncated toward zero.
    """
    revenue = (
        commerce.total_spent / MONTHS_PER_YEAR +
        gaming.monthly_spend +
        finance.avg_transaction * finance.monthly_transactions * TRANSACTION_FEE_RATE
    )
    return max(0, int(revenue))

"""
Demo fixture data

Three users with activity on all three platforms. Loaded by
InMemoryProfileStore.with_fixture_data() when no real source is configured.
"""

from datetime import datetime, timezone

from integration_layer.models import (
    CommerceProfile,
    FinanceProfile,
    GamingProfile,
    Loan,
    Purchase,
    User,
)


def _day(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


USERS = (
    User(
        id="user_001",
        name="Ahmad Rizki",
        email="ahmad.rizki@email.com",
        phone="+62812345678",
        registration_date=_day(2023, 1, 15),
        tier="gold",
    ),
    User(
        id="user_002",
        name="Siti Nurhaliza",
        email="siti.nur@email.com",
        phone="+62856789012",
        registration_date=_day(2022, 8, 20),
        tier="platinum",
    ),
    User(
        id="user_003",
        name="Budi Santoso",
        email="budi.santoso@email.com",
        phone="+62887654321",
        registration_date=_day(2023, 6, 10),
        tier="silver",
    ),
)

COMMERCE_PROFILES = (
    CommerceProfile(
        user_id="user_001",
        total_orders=45,
        total_spent=8_500_000,
        favorite_categories=("Gaming", "Electronics", "Fashion"),
        recent_purchases=(
            Purchase(item="Gaming Mouse Razer", price=450_000, date=_day(2024, 8, 20)),
            Purchase(item="Mechanical Keyboard", price=800_000, date=_day(2024, 8, 15)),
            Purchase(item="Gaming Headset", price=350_000, date=_day(2024, 8, 10)),
        ),
        cart_abandonment_rate=0.15,
        last_active=_day(2024, 8, 26),
    ),
    CommerceProfile(
        user_id="user_002",
        total_orders=78,
        total_spent=15_200_000,
        favorite_categories=("Beauty", "Fashion", "Home"),
        recent_purchases=(
            Purchase(item="Skincare Set", price=280_000, date=_day(2024, 8, 25)),
            Purchase(item="Designer Handbag", price=1_200_000, date=_day(2024, 8, 20)),
        ),
        cart_abandonment_rate=0.08,
        last_active=_day(2024, 8, 27),
    ),
    CommerceProfile(
        user_id="user_003",
        total_orders=12,
        total_spent=2_100_000,
        favorite_categories=("Books", "Sports", "Gaming"),
        recent_purchases=(
            Purchase(item="Programming Books", price=150_000, date=_day(2024, 8, 18)),
            Purchase(item="Gaming Controller", price=320_000, date=_day(2024, 8, 5)),
        ),
        cart_abandonment_rate=0.35,
        last_active=_day(2024, 8, 22),
    ),
)

GAMING_PROFILES = (
    GamingProfile(
        user_id="user_001",
        games_played=("Free Fire", "PUBG Mobile", "Arena of Valor"),
        total_game_hours=450,
        monthly_spend=200_000,
        rank="Diamond",
        achievements=("Tournament Winner", "Veteran Player"),
        last_session=_day(2024, 8, 26),
        social_connections=234,
        preferred_game_time="evening",
    ),
    GamingProfile(
        user_id="user_002",
        games_played=("Mobile Legends", "Free Fire"),
        total_game_hours=89,
        monthly_spend=50_000,
        rank="Gold",
        achievements=("Team Player",),
        last_session=_day(2024, 8, 25),
        social_connections=45,
        preferred_game_time="afternoon",
    ),
    GamingProfile(
        user_id="user_003",
        games_played=("PUBG Mobile", "Call of Duty Mobile"),
        total_game_hours=234,
        monthly_spend=150_000,
        rank="Platinum",
        achievements=("Sharpshooter", "Rising Star"),
        last_session=_day(2024, 8, 27),
        social_connections=156,
        preferred_game_time="night",
    ),
)

FINANCE_PROFILES = (
    FinanceProfile(
        user_id="user_001",
        wallet_balance=850_000,
        credit_score=750,
        loan_history=(
            Loan(amount=2_000_000, status="paid", date=_day(2024, 6, 15)),
            Loan(amount=1_500_000, status="current", date=_day(2024, 8, 1)),
        ),
        monthly_transactions=45,
        avg_transaction=95_000,
        savings_balance=5_200_000,
        investment_portfolio=3_400_000,
        last_transaction=_day(2024, 8, 26),
    ),
    FinanceProfile(
        user_id="user_002",
        wallet_balance=450_000,
        credit_score=820,
        loan_history=(
            Loan(amount=5_000_000, status="paid", date=_day(2024, 3, 10)),
        ),
        monthly_transactions=67,
        avg_transaction=125_000,
        savings_balance=8_900_000,
        investment_portfolio=12_000_000,
        last_transaction=_day(2024, 8, 27),
    ),
    FinanceProfile(
        user_id="user_003",
        wallet_balance=125_000,
        credit_score=680,
        loan_history=(),
        monthly_transactions=23,
        avg_transaction=67_000,
        savings_balance=780_000,
        investment_portfolio=450_000,
        last_transaction=_day(2024, 8, 20),
    ),
)

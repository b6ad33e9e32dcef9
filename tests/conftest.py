"""
Pytest Configuration and Fixtures

Shared fixtures for all tests:
- Profile builders
- Profile stores (demo fixtures and fakes)
- FastAPI test client
"""

import pytest
from datetime import datetime, timezone
from typing import Iterable

from integration_layer.core.config import Settings
from integration_layer.models import (
    CommerceProfile,
    FinanceProfile,
    GamingProfile,
    UnifiedProfile,
    User,
)
from integration_layer.services import AggregationService, compute_score
from integration_layer.store import InMemoryProfileStore


FIXED_NOW = datetime(2024, 8, 28, 12, 0, 0, tzinfo=timezone.utc)


def make_user(user_id: str = "user_test") -> User:
    return User(
        id=user_id,
        name="Test User",
        email=f"{user_id}@example.com",
        phone="+6200000000",
        registration_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
        tier="silver",
    )


def make_profiles(
    user_id: str = "user_test",
    total_spent: int = 0,
    favorite_categories: Iterable[str] = (),
    monthly_spend: int = 0,
    credit_score: int = 0,
    investment_portfolio: int = 0,
    avg_transaction: int = 0,
    monthly_transactions: int = 0
):
    """Commerce, gaming and finance profiles with only the scored fields set"""
    commerce = CommerceProfile(
        user_id=user_id,
        total_spent=total_spent,
        favorite_categories=tuple(favorite_categories),
    )
    gaming = GamingProfile(user_id=user_id, monthly_spend=monthly_spend)
    finance = FinanceProfile(
        user_id=user_id,
        credit_score=credit_score,
        investment_portfolio=investment_portfolio,
        avg_transaction=avg_transaction,
        monthly_transactions=monthly_transactions,
    )
    return commerce, gaming, finance


def make_unified_profile(user_id: str = "user_test", **profile_fields) -> UnifiedProfile:
    """Scored unified profile built from make_profiles() fields"""
    commerce, gaming, finance = make_profiles(user_id=user_id, **profile_fields)
    return UnifiedProfile(
        user=make_user(user_id),
        commerce_profile=commerce,
        gaming_profile=gaming,
        finance_profile=finance,
        computed_insights=compute_score(commerce, gaming, finance),
    )


# Store fixtures

@pytest.fixture
def fixture_store() -> InMemoryProfileStore:
    """Store seeded with the three demo users"""
    return InMemoryProfileStore.with_fixture_data()


@pytest.fixture
def empty_store() -> InMemoryProfileStore:
    return InMemoryProfileStore()


@pytest.fixture
def aggregation_service(fixture_store) -> AggregationService:
    return AggregationService(fixture_store)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


# API fixtures

@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        environment="test",
        static_dir="/nonexistent/dashboard",
        analytics_workers=2,
        json_logs=False,
    )


@pytest.fixture
def client(fixture_store, test_settings):
    """Provide FastAPI test client backed by the demo store"""
    from fastapi.testclient import TestClient
    from integration_layer.main import create_app

    app = create_app(profile_store=fixture_store, settings=test_settings)
    return TestClient(app)


# Assertion helpers

def assert_error_envelope(body: dict, error_fragment: str):
    """Assert body is a failure envelope mentioning error_fragment"""
    assert body["success"] is False
    assert error_fragment.lower() in body["error"].lower()

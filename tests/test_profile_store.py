"""
Unit Tests for Profile Store and Settings

Tests:
- In-memory store lookups and empty fallbacks
- Demo fixture contents
- Settings parsing
"""

from integration_layer.core.config import Settings
from integration_layer.models import CommerceProfile, FinanceProfile, GamingProfile
from integration_layer.store import InMemoryProfileStore, ProfileStore


class TestInMemoryProfileStore:

    def test_is_profile_store(self, fixture_store):
        assert isinstance(fixture_store, ProfileStore)

    def test_fixture_users(self, fixture_store):
        assert fixture_store.list_user_ids() == {"user_001", "user_002", "user_003"}
        assert fixture_store.get_user("user_002").tier == "platinum"

    def test_unknown_user_is_none(self, fixture_store):
        assert fixture_store.get_user("user_999") is None

    def test_missing_profiles_are_empty(self, empty_store):
        assert empty_store.get_commerce_profile("x") == CommerceProfile.empty("x")
        assert empty_store.get_gaming_profile("x") == GamingProfile.empty("x")
        assert empty_store.get_finance_profile("x") == FinanceProfile.empty("x")

    def test_empty_profiles_are_zero_valued(self):
        finance = FinanceProfile.empty("x")

        assert finance.credit_score == 0
        assert finance.investment_portfolio == 0
        assert finance.loan_history == ()
        assert finance.last_transaction is None

    def test_recent_purchases_most_recent_first(self, fixture_store):
        purchases = fixture_store.get_commerce_profile("user_001").recent_purchases
        dates = [purchase.date for purchase in purchases]

        assert dates == sorted(dates, reverse=True)

    def test_list_user_ids_is_a_copy(self, fixture_store):
        fixture_store.list_user_ids().add("intruder")

        assert "intruder" not in fixture_store.list_user_ids()


class TestSettings:

    def test_cors_origins_list(self):
        settings = Settings(cors_origins="http://localhost:3000, http://localhost:8080")

        assert settings.cors_origins_list == ["http://localhost:3000", "http://localhost:8080"]

    def test_defaults(self):
        settings = Settings()

        assert settings.api_prefix == "/api/v1"
        assert settings.analytics_workers >= 1

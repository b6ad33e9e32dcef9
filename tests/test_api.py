"""
API Tests

Tests every endpoint through the FastAPI test client:
- Success envelope shape
- 404 envelope for unknown users and routes
- Correlation ID propagation
- CORS headers
"""

import pytest
from fastapi.testclient import TestClient

from integration_layer.main import create_app
from integration_layer.store import InMemoryProfileStore
from tests.conftest import assert_error_envelope, make_user


API = "/api/v1"


class FailingProfileStore(InMemoryProfileStore):
    """Store whose backing source is down"""

    def get_user(self, user_id):
        raise RuntimeError("secret db detail")


class TestHealth:

    def test_health(self, client):
        response = client.get(f"{API}/health")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["status"] == "healthy"
        assert body["data"]["version"] == "1.0.0"
        assert body["data"]["users_loaded"] == 3
        assert "error" not in body


class TestUsers:

    def test_list_users(self, client):
        response = client.get(f"{API}/users")

        assert response.status_code == 200
        body = response.json()
        assert [user["id"] for user in body["data"]] == ["user_001", "user_002", "user_003"]
        assert body["message"] == "Retrieved 3 users"

    def test_unified_profile(self, client):
        response = client.get(f"{API}/users/user_001/profile")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True

        data = body["data"]
        assert data["user"]["id"] == "user_001"
        assert data["commerce_profile"]["favorite_categories"] == ["Gaming", "Electronics", "Fashion"]
        assert data["gaming_profile"]["monthly_spend"] == 200_000
        assert data["finance_profile"]["loan_history"][0]["status"] == "paid"

        computed = data["computed_insights"]
        assert computed["value_score"] == pytest.approx(90.0)
        assert computed["segment"] == "VIP"
        assert computed["persona"] == "Hardcore Gamer"
        assert computed["cross_sell_opportunity"] == "High - Gaming ecosystem"
        assert computed["churn_risk"] == "Low"
        assert computed["monthly_revenue_contribution"] == 993_833

    def test_unified_profile_unknown_user(self, client):
        response = client.get(f"{API}/users/user_999/profile")

        assert response.status_code == 404
        assert_error_envelope(response.json(), "user not found")

    def test_insights(self, client):
        response = client.get(f"{API}/users/user_002/insights")

        assert response.status_code == 200
        body = response.json()
        assert [i["insight_type"] for i in body["data"]] == ["vip_treatment", "financial_cross_sell"]
        assert body["data"][1]["potential_revenue"] == 1_200_000
        assert body["data"][1]["data_sources"] == ["commerce", "finance"]
        assert body["message"] == "Generated 2 insights for user user_002"

    def test_insights_empty_list(self):
        """Test a user with no activity gets an empty list, not an error"""
        app = create_app(profile_store=InMemoryProfileStore(users=[make_user("quiet")]))
        response = TestClient(app).get(f"{API}/users/quiet/insights")

        assert response.status_code == 200
        assert response.json()["data"] == []

    def test_insights_unknown_user(self, client):
        response = client.get(f"{API}/users/user_999/insights")

        assert response.status_code == 404
        assert_error_envelope(response.json(), "user_999")

    def test_execute_actions(self, client):
        response = client.post(f"{API}/users/user_001/actions")

        assert response.status_code == 200
        body = response.json()
        action = body["data"][0]
        assert action["action_id"].startswith("action_user_001_")
        assert action["target_platforms"] == ["commerce", "gaming"]
        assert action["parameters"]["commerce_action"]["categories"] == ["Gaming Accessories", "PC Components"]
        assert body["message"] == "Executed 1 coordinated actions for user user_001"

    def test_execute_actions_unknown_user(self, client):
        response = client.post(f"{API}/users/user_999/actions")

        assert response.status_code == 404


class TestAnalytics:

    def test_analytics(self, client):
        response = client.get(f"{API}/analytics")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["total_users"] == 3
        assert data["vip_users"] == 2
        assert data["regular_users"] == 1
        assert data["total_monthly_revenue"] == 2_833_819
        assert data["projected_annual_revenue"] == 2_833_819 * 12
        assert "last_updated" in data


class TestErrorsAndMiddleware:

    def test_unknown_route_uses_envelope(self, client):
        response = client.get(f"{API}/does-not-exist")

        assert response.status_code == 404
        assert_error_envelope(response.json(), "not found")

    def test_correlation_id_echoed(self, client):
        response = client.get(f"{API}/health", headers={"X-Correlation-ID": "test-correlation-123"})

        assert response.headers["X-Correlation-ID"] == "test-correlation-123"

    def test_correlation_id_generated(self, client):
        response = client.get(f"{API}/health")

        assert len(response.headers["X-Correlation-ID"]) == 36

    def test_error_references_correlation_id(self, client):
        response = client.get(
            f"{API}/users/user_999/profile",
            headers={"X-Correlation-ID": "test-correlation-456"}
        )

        assert "test-correlation-456" in response.json()["message"]

    def test_unexpected_error_hides_internal_details(self, test_settings):
        """Test a store failure becomes a generic 500 envelope"""
        app = create_app(profile_store=FailingProfileStore(), settings=test_settings)
        failing_client = TestClient(app, raise_server_exceptions=False)

        response = failing_client.get(
            f"{API}/users/user_001/profile",
            headers={"X-Correlation-ID": "test-correlation-500"}
        )

        assert response.status_code == 500
        body = response.json()
        assert_error_envelope(body, "unexpected error")
        assert "secret" not in response.text
        assert "test-correlation-500" in body["message"]

    def test_cors_allows_any_origin_by_default(self, client):
        response = client.get(f"{API}/health", headers={"Origin": "http://dashboard.example.com"})

        assert response.headers["access-control-allow-origin"] == "*"

"""
Tests for /recommendations endpoints.

- Happy path: valid link → SUCCESS outcome with items
- Failure path: empty link → FAILURE outcome, no Gemini call
- Failure path: count out of range → 422
- Busy session → 409
- State endpoint exposes busy flag and last outcome
"""

import pytest
from fastapi.testclient import TestClient

from eshop.main import app
from eshop.routes.recommendations import get_recommendation_session
from eshop.services.recommendation_session import RecommendationSession


@pytest.fixture
def client():
    """Create test client for FastAPI app."""
    return TestClient(app)


@pytest.fixture
def session(gemini_client_ok):
    """Override the app session with one backed by a mocked Gemini client."""
    test_session = RecommendationSession(client=gemini_client_ok)
    app.dependency_overrides[get_recommendation_session] = lambda: test_session

    yield test_session

    # Clean up after test
    app.dependency_overrides.clear()


class TestGenerateEndpoint:
    """Tests for POST /recommendations/generate."""

    def test_success(self, client, session):
        response = client.post(
            "/recommendations/generate",
            json={"product_link": "https://example.com/stylish-blue-shirt", "num_recommendations": 1},
        )

        assert response.status_code == 200
        assert response.json() == {
            "status": "SUCCESS",
            "items": [{
                "name": "Slim Trousers",
                "price": "$39.99",
                "review": "Great fit",
                "link": "https://example.com/p1",
            }],
        }

    def test_default_count_is_three(self, client, session, gemini_client_ok):
        response = client.post(
            "/recommendations/generate",
            json={"product_link": "https://example.com/running-shoe"},
        )

        assert response.status_code == 200
        kwargs = gemini_client_ok.aio.models.generate_content.await_args.kwargs
        assert "exactly 3 relevant and modern socks or shoe care products" in (
            kwargs["contents"][0].parts[0].text
        )

    def test_empty_link_returns_failure(self, client, session, gemini_client_ok):
        response = client.post(
            "/recommendations/generate",
            json={"product_link": "  ", "num_recommendations": 3},
        )

        assert response.status_code == 200
        assert response.json() == {
            "status": "FAILURE",
            "kind": "VALIDATION_ERROR",
            "message": "Please enter a product link.",
        }
        gemini_client_ok.aio.models.generate_content.assert_not_awaited()

    @pytest.mark.parametrize("count", [0, 11, -1])
    def test_count_out_of_range_is_rejected(self, client, session, count):
        response = client.post(
            "/recommendations/generate",
            json={"product_link": "https://example.com/shirt", "num_recommendations": count},
        )

        assert response.status_code == 422
        assert response.json()["error"] == "validation_error"

    def test_busy_session_returns_conflict(self, client, session, gemini_client_ok):
        session.is_loading = True

        response = client.post(
            "/recommendations/generate",
            json={"product_link": "https://example.com/shirt", "num_recommendations": 2},
        )

        assert response.status_code == 409
        gemini_client_ok.aio.models.generate_content.assert_not_awaited()


class TestStateEndpoint:
    """Tests for GET /recommendations/state."""

    def test_idle_state(self, client, session):
        response = client.get("/recommendations/state")

        assert response.status_code == 200
        assert response.json() == {
            "product_link": "",
            "num_recommendations": 3,
            "is_loading": False,
            "outcome": None,
        }

    def test_state_after_submission(self, client, session):
        client.post(
            "/recommendations/generate",
            json={"product_link": "https://example.com/red-dress", "num_recommendations": 1},
        )

        body = client.get("/recommendations/state").json()

        assert body["product_link"] == "https://example.com/red-dress"
        assert body["num_recommendations"] == 1
        assert body["is_loading"] is False
        assert body["outcome"]["status"] == "SUCCESS"
        assert body["outcome"]["items"][0]["name"] == "Slim Trousers"

    def test_state_reports_busy(self, client, session):
        session.is_loading = True

        assert client.get("/recommendations/state").json()["is_loading"] is True


class TestHealthEndpoint:
    """Tests for GET /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "service": "eshop-ai-backend"}

"""Unit tests for valuation API routes.

Tests cover:
- Successful holding and portfolio valuation
- Domain failures mapped to 422 with the ApiError body
- Request shape validation by FastAPI
- Settings injection for currency rounding
- Health and root endpoints
"""

import pytest
from fastapi.testclient import TestClient

from promptlab.shared.config import Settings


@pytest.fixture
def client():
    """Create test client and clear overrides afterwards."""
    from promptlab.main import app

    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


HOLDING = {
    "symbol": "aapl",
    "name": "Apple Inc.",
    "quantity": 10,
    "average_cost": "150.00",
    "current_price": "175.50",
}


class TestHoldingValuation:
    """Tests for POST /valuation/holding."""

    def test_value_holding(self, client) -> None:
        """Test a valid holding is valued."""
        response = client.post("/valuation/holding", json=HOLDING)

        assert response.status_code == 200
        data = response.json()
        assert data["symbol"] == "AAPL"
        assert data["market_value"] == "1755.00"
        assert data["gain_loss"] == "255.00"

    def test_missing_price_is_422_with_error_body(self, client) -> None:
        """Test domain validation failure returns the ApiError."""
        response = client.post("/valuation/holding", json={**HOLDING, "current_price": None})

        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail["code"] == "VALIDATION_ERROR"
        assert detail["details"]["field"] == "current_price"

    def test_tiny_average_cost_is_422(self, client) -> None:
        """Test a cost with too many decimal places is a validation error, not a 500."""
        response = client.post(
            "/valuation/holding",
            json={**HOLDING, "quantity": 1, "average_cost": "1E-30", "current_price": "1000"},
        )

        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail["code"] == "VALIDATION_ERROR"
        assert detail["details"]["field"] == "average_cost"

    def test_malformed_request_rejected(self, client) -> None:
        """Test FastAPI rejects a request missing required fields."""
        response = client.post("/valuation/holding", json={"symbol": "AAPL"})

        assert response.status_code == 422
        assert isinstance(response.json()["detail"], list)


class TestPortfolioValuation:
    """Tests for POST /valuation/portfolio."""

    def test_value_portfolio(self, client) -> None:
        """Test a portfolio is valued and totalled."""
        response = client.post(
            "/valuation/portfolio",
            json={
                "name": "Growth",
                "risk_profile": "AGGRESSIVE",
                "holdings": [HOLDING, {**HOLDING, "symbol": "msft", "quantity": 1}],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Growth"
        assert data["risk_profile"] == "AGGRESSIVE"
        assert data["total_value"] == "1930.50"
        assert [h["symbol"] for h in data["holdings"]] == ["AAPL", "MSFT"]

    def test_invalid_holding_index_reported(self, client) -> None:
        """Test the failing holding's position is in the error details."""
        response = client.post(
            "/valuation/portfolio",
            json={"name": "Broken", "holdings": [HOLDING, {**HOLDING, "quantity": -3}]},
        )

        assert response.status_code == 422
        details = response.json()["detail"]["details"]
        assert details["index"] == 1
        assert details["field"] == "quantity"

    def test_oversized_price_is_422(self, client) -> None:
        """Test an oversized price is a validation error, not a 500."""
        response = client.post(
            "/valuation/portfolio",
            json={"name": "Huge", "holdings": [{**HOLDING, "current_price": "1E30"}]},
        )

        assert response.status_code == 422
        details = response.json()["detail"]["details"]
        assert details["index"] == 0
        assert details["field"] == "current_price"

    def test_decimal_places_from_settings(self, client) -> None:
        """Test total rounding follows injected settings."""
        from promptlab.api.dependencies import get_settings
        from promptlab.main import app

        app.dependency_overrides[get_settings] = lambda: Settings(currency_decimal_places=0)

        response = client.post(
            "/valuation/portfolio",
            json={"name": "Whole", "holdings": [{**HOLDING, "quantity": 1}]},
        )

        assert response.status_code == 200
        assert response.json()["total_value"] == "176"


class TestServiceEndpoints:
    """Tests for health and root endpoints."""

    def test_health(self, client) -> None:
        """Test health endpoint reports service metadata."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"

    def test_root_redirects_to_docs(self, client) -> None:
        """Test root redirects to the API documentation."""
        response = client.get("/", follow_redirects=False)

        assert response.status_code == 307
        assert response.headers["location"] == "/docs"

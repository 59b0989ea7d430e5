"""Integration tests for API endpoints"""

import logging
import pytest
from unittest.mock import AsyncMock, patch
from fastapi.testclient import TestClient
from fd_gateway.api.main import create_app
from fd_gateway.domain.exceptions import RECOMMENDATION_UNAVAILABLE_MESSAGE, TextGenerationError
from tests.conftest import FakeTextGenerator

GOALS = "Build an emergency fund and buy a car in two years"


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "fd-gateway"}


def test_request_id_header(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"

    response = client.get("/health")
    assert response.headers["X-Request-ID"]


def test_maturity_endpoint(client: TestClient):
    """Test POST /v1/maturity with the calculator defaults"""
    response = client.post(
        "/v1/maturity",
        json={"principal": 100000, "annualRate": 6.5, "tenureYears": 5, "compoundingFrequency": 4},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["principal"] == 100000
    assert data["maturityAmount"] == pytest.approx(100000 * (1 + 0.065 / 4) ** 20)
    assert data["totalInterest"] == pytest.approx(data["maturityAmount"] - 100000)
    assert data["effectiveAnnualRate"] == pytest.approx(6.6602, abs=1e-4)
    assert data["breakdown"] == [
        {"name": "Principal", "value": 100000},
        {"name": "Interest", "value": pytest.approx(data["totalInterest"])},
    ]
    assert data["display"] == {
        "principal": "₹1,00,000",
        "maturityAmount": "₹1,38,042",
        "totalInterest": "₹38,042",
    }


def test_maturity_endpoint_accepts_form_codes(client: TestClient):
    """Compounding frequency may arrive as the form's string code or a name"""
    by_code = client.post(
        "/v1/maturity",
        json={"principal": "50000", "annualRate": "6.5", "tenureYears": "1", "compoundingFrequency": "1"},
    )
    by_name = client.post(
        "/v1/maturity",
        json={"principal": 50000, "annualRate": 6.5, "tenureYears": 1, "compoundingFrequency": "annually"},
    )

    assert by_code.status_code == 200
    assert by_code.json()["maturityAmount"] == pytest.approx(53250)
    assert by_name.json()["maturityAmount"] == by_code.json()["maturityAmount"]


def test_maturity_endpoint_validation(client: TestClient):
    """Every invalid field is reported at once"""
    response = client.post(
        "/v1/maturity",
        json={"principal": -1, "annualRate": 0, "tenureYears": 0, "compoundingFrequency": 3},
    )

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert [v["field"] for v in detail["violations"]] == [
        "principal",
        "annual_rate",
        "tenure_years",
        "compounding_frequency",
    ]
    assert detail["message"].startswith("Amount must be greater than 0., Rate must be greater than 0.")


def test_maturity_endpoint_missing_fields(client: TestClient):
    response = client.post("/v1/maturity", json={"principal": 1000})

    assert response.status_code == 422
    assert len(response.json()["detail"]["violations"]) == 3


def test_maturity_endpoint_rate_cap(client: TestClient):
    ok = client.post(
        "/v1/maturity",
        json={"principal": 1000, "annualRate": 100, "tenureYears": 1, "compoundingFrequency": 1},
    )
    too_high = client.post(
        "/v1/maturity",
        json={"principal": 1000, "annualRate": 100.5, "tenureYears": 1, "compoundingFrequency": 1},
    )

    assert ok.status_code == 200
    assert ok.json()["maturityAmount"] == pytest.approx(2000)
    assert too_high.status_code == 422
    assert too_high.json()["detail"]["message"] == "Rate cannot exceed 100%."


def test_maturity_defaults_endpoint(client: TestClient):
    response = client.get("/v1/maturity/defaults")

    assert response.status_code == 200
    data = response.json()
    assert data["principal"] == 100000
    assert data["annualRate"] == 6.5
    assert data["tenureYears"] == 5
    assert data["compoundingFrequency"] == 4
    assert [o["value"] for o in data["compoundingOptions"]] == [1, 2, 4, 12]


def test_recommendations_endpoint(client: TestClient, fake_generator: FakeTextGenerator, good_reply: dict):
    """Test POST /v1/recommendations round trip with camelCase keys"""
    response = client.post(
        "/v1/recommendations",
        json={"financialGoals": GOALS, "investmentAmount": 150000, "riskTolerance": "medium"},
    )

    assert response.status_code == 200
    assert response.json() == good_reply
    assert fake_generator.call_count == 1
    sent_request, _ = fake_generator.calls[0]
    assert sent_request.financial_goals == GOALS
    assert sent_request.investment_amount == 150000
    assert sent_request.risk_tolerance.value == "medium"


def test_recommendations_short_goals_never_dispatched(client: TestClient, fake_generator: FakeTextGenerator):
    response = client.post(
        "/v1/recommendations",
        json={"financialGoals": "A car", "investmentAmount": 150000, "riskTolerance": "low"},
    )

    assert response.status_code == 422
    assert fake_generator.call_count == 0


def test_recommendations_form_minimum_length(client: TestClient, fake_generator: FakeTextGenerator):
    """The API applies the 20-character end-user contract"""
    response = client.post(
        "/v1/recommendations",
        json={"financialGoals": "Buy a new laptop", "investmentAmount": 90000, "riskTolerance": "low"},
    )

    assert response.status_code == 422
    assert "at least 20 characters" in response.json()["detail"]["message"]
    assert fake_generator.call_count == 0


def test_recommendations_collects_all_violations(client: TestClient, fake_generator: FakeTextGenerator):
    response = client.post(
        "/v1/recommendations",
        json={"financialGoals": "x" * 501, "investmentAmount": 0, "riskTolerance": "yolo"},
    )

    assert response.status_code == 422
    fields = [v["field"] for v in response.json()["detail"]["violations"]]
    assert fields == ["financial_goals", "investment_amount", "risk_tolerance"]
    assert fake_generator.call_count == 0


def test_recommendations_malformed_reply(client: TestClient, fake_generator: FakeTextGenerator, good_reply: dict):
    """Missing rationale is an error, not a partial success"""
    fake_generator.reply = {k: v for k, v in good_reply.items() if k != "rationale"}

    response = client.post(
        "/v1/recommendations",
        json={"financialGoals": GOALS, "investmentAmount": 150000, "riskTolerance": "high"},
    )

    assert response.status_code == 503
    assert response.json() == {"detail": RECOMMENDATION_UNAVAILABLE_MESSAGE}


@patch("fd_gateway.infrastructure.clients.textgen.TextGenerationClient.generate", new_callable=AsyncMock)
def test_recommendations_service_failure_hides_detail(mock_generate: AsyncMock):
    """Upstream error text never reaches the caller"""
    mock_generate.side_effect = TextGenerationError("Text generation error: 500 at 10.0.0.7", reason="http_error")
    client = TestClient(create_app())

    response = client.post(
        "/v1/recommendations",
        json={"financialGoals": GOALS, "investmentAmount": 150000, "riskTolerance": "low"},
    )

    assert response.status_code == 503
    assert response.json()["detail"] == RECOMMENDATION_UNAVAILABLE_MESSAGE
    assert "10.0.0.7" not in response.text
    mock_generate.assert_awaited_once()


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.post(
        "/v1/maturity",
        json={"principal": 1000, "annualRate": 7, "tenureYears": 2, "compoundingFrequency": 12},
    )

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "fd_maturity_calculations_total" in response.text
    assert "fd_recommendation_total" in response.text


def test_maturity_endpoint_rejects_overflow(client: TestClient):
    """Results beyond float range are a 422, not a crash"""
    long_tenure = client.post(
        "/v1/maturity",
        json={"principal": 100000, "annualRate": 100, "tenureYears": 1000000, "compoundingFrequency": 12},
    )
    huge_principal = client.post(
        "/v1/maturity",
        json={"principal": 1e308, "annualRate": 100, "tenureYears": 1, "compoundingFrequency": 1},
    )

    for response in (long_tenure, huge_principal):
        assert response.status_code == 422
        assert [v["field"] for v in response.json()["detail"]["violations"]] == ["maturity_amount"]


def test_maturity_endpoint_huge_finite_amount(client: TestClient):
    response = client.post(
        "/v1/maturity",
        json={"principal": 1e308, "annualRate": 50, "tenureYears": 1, "compoundingFrequency": 1},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["maturityAmount"] == pytest.approx(1.5e308)
    display = data["display"]["maturityAmount"]
    assert display.startswith("₹1")
    assert len(display.replace(",", "")) == len("₹") + 309


@patch("fd_gateway.api.v1.maturity.compute_maturity")
def test_maturity_endpoint_unexpected_error(mock_compute, client: TestClient, caplog: pytest.LogCaptureFixture):
    """Unexpected failures are logged and returned as JSON 500"""
    mock_compute.side_effect = ArithmeticError("boom")

    with caplog.at_level(logging.ERROR):
        response = client.post(
            "/v1/maturity",
            json={"principal": 1000, "annualRate": 7, "tenureYears": 2, "compoundingFrequency": 4},
            headers={"X-Request-ID": "req-500"},
        )

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
    assert "boom" not in response.text
    errors = [r for r in caplog.records if r.getMessage().startswith("Unexpected error")]
    assert errors and errors[0].request_id == "req-500"


def test_request_completed_log(client: TestClient, caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.INFO):
        client.get("/v1/maturity/defaults", headers={"X-Request-ID": "req-log"})

    records = [r for r in caplog.records if r.getMessage() == "Request completed"]
    assert len(records) == 1
    assert records[0].request_id == "req-log"
    assert records[0].path == "/v1/maturity/defaults"
    assert records[0].status == 200

"""Pytest fixtures for testing"""

import pytest
from typing import Any, List
from fastapi.testclient import TestClient
from fd_gateway.api.main import create_app
from fd_gateway.api.dependencies import get_recommendation_service
from fd_gateway.domain.models import MaturityInput, CompoundingFrequency, RecommendationRequest, RiskTolerance
from fd_gateway.domain.recommendations import RecommendationService


class FakeTextGenerator:
    """Test double for the text generation service that counts calls"""

    def __init__(self, reply: Any = None, error: BaseException | None = None):
        self.reply = reply
        self.error = error
        self.calls: List[tuple[RecommendationRequest, str]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    async def generate(self, request: RecommendationRequest, template: str) -> Any:
        self.calls.append((request, template))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def good_reply() -> dict:
    """Well-formed structured reply"""
    return {
        "recommendedTenure": "3 years",
        "recommendedAmount": "₹2,00,000",
        "rationale": "A 3-year deposit locks in current rates ahead of the planned purchase.",
    }


@pytest.fixture
def fake_generator(good_reply: dict) -> FakeTextGenerator:
    return FakeTextGenerator(reply=good_reply)


@pytest.fixture
def client(fake_generator: FakeTextGenerator) -> TestClient:
    """Create FastAPI test client with the fake text generator"""
    app = create_app()
    app.dependency_overrides[get_recommendation_service] = lambda: RecommendationService(fake_generator)
    return TestClient(app)


@pytest.fixture
def quarterly_input() -> MaturityInput:
    """Calculator form defaults: 1 lakh at 6.5% for 5 years, quarterly"""
    return MaturityInput(
        principal=100_000,
        annual_rate=6.5,
        tenure_years=5,
        compounding_frequency=CompoundingFrequency.QUARTERLY,
    )


@pytest.fixture
def recommendation_request() -> RecommendationRequest:
    return RecommendationRequest(
        financial_goals="Save for a house down payment in three years",
        investment_amount=200_000,
        risk_tolerance=RiskTolerance.LOW,
    )

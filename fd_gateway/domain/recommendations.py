"""FD tenure/amount recommendations - request validation and text generation dispatch"""

import asyncio
import logging
import time
from typing import Any, List, Mapping, Optional, Protocol

from fd_gateway.domain.exceptions import ExternalError, MalformedResponseError, TextGenerationError
from fd_gateway.domain.models import (
    RecommendationRequest,
    RecommendationResult,
    RiskTolerance,
    ValidationError,
    Violation,
)
from fd_gateway.domain.prompts import RECOMMENDATION_PROMPT
from fd_gateway.infrastructure.observability.metrics import record_recommendation, textgen_latency_histogram
from fd_gateway.utils.numbers import coerce_number

logger = logging.getLogger(__name__)

# Floor for callers that bypass the form; the API applies its own stricter bound
GOALS_MIN_LENGTH_FLOOR = 10

RESULT_FIELDS = {
    "recommendedTenure": "recommended_tenure",
    "recommendedAmount": "recommended_amount",
    "rationale": "rationale",
}

# Collaborator failure reasons folded into the three reported outcomes
MALFORMED_REASONS = {"malformed_response", "invalid_json", "empty_response"}


def classify_failure(reason: str) -> str:
    """Map a text generation failure reason to timeout | malformed_response | service_error"""
    if reason == "timeout":
        return "timeout"
    if reason in MALFORMED_REASONS:
        return "malformed_response"
    return "service_error"


class TextGenerator(Protocol):
    """Anything that can answer a recommendation request with a structured reply"""

    async def generate(self, request: RecommendationRequest, template: str) -> Mapping[str, Any]:
        ...


def validate_recommendation_request(
    financial_goals: Any,
    investment_amount: Any,
    risk_tolerance: Any,
    min_goals_length: int = GOALS_MIN_LENGTH_FLOOR,
    max_goals_length: Optional[int] = None,
) -> RecommendationRequest | ValidationError:
    """
    Check goals, amount and risk tolerance, collecting every violation.

    Rules:
    - financial_goals: text of at least min_goals_length characters (never
      below the floor of 10) and at most max_goals_length when given
    - investment_amount: finite number > 0
    - risk_tolerance: exactly "low", "medium" or "high"
    """
    violations: List[Violation] = []
    min_length = max(min_goals_length, GOALS_MIN_LENGTH_FLOOR)

    goals = financial_goals.strip() if isinstance(financial_goals, str) else ""
    if len(goals) < min_length:
        violations.append(
            Violation(
                "financial_goals",
                f"Please describe your goals in at least {min_length} characters.",
            )
        )
    elif max_goals_length is not None and len(goals) > max_goals_length:
        violations.append(
            Violation(
                "financial_goals",
                f"Please keep your goals under {max_goals_length} characters.",
            )
        )

    amount = coerce_number(investment_amount)
    if amount is None or amount <= 0:
        violations.append(Violation("investment_amount", "Investment amount must be positive."))

    try:
        tolerance = RiskTolerance(risk_tolerance)
    except ValueError:
        tolerance = None
        violations.append(Violation("risk_tolerance", "Risk tolerance must be one of: low, medium, high."))

    if violations:
        return ValidationError(tuple(violations))

    return RecommendationRequest(
        financial_goals=goals,
        investment_amount=amount,
        risk_tolerance=tolerance,
    )


def parse_recommendation_result(payload: Any) -> RecommendationResult:
    """
    Shape the structured reply into a RecommendationResult.

    Raises:
        MalformedResponseError: payload is not a mapping, or any of the three
            fields is missing, not a string, or blank
    """
    if not isinstance(payload, Mapping):
        raise MalformedResponseError(f"Expected a JSON object, got {type(payload).__name__}")

    values = {}
    for key, attr in RESULT_FIELDS.items():
        value = payload.get(key)
        if not isinstance(value, str) or not value.strip():
            raise MalformedResponseError(f"Missing or empty field: {key}")
        values[attr] = value.strip()

    return RecommendationResult(**values)


class RecommendationService:
    """Single-shot dispatch of a validated request to text generation"""

    def __init__(self, generator: TextGenerator, template: str = RECOMMENDATION_PROMPT):
        self.generator = generator
        self.template = template

    async def fetch_recommendation(self, request: RecommendationRequest) -> RecommendationResult:
        """
        Ask the text generation service for a tenure/amount suggestion.

        No retries: one failed call is reported immediately. Failure detail is
        logged for operators; callers only see the generic ExternalError.

        Raises:
            ExternalError: timeout, malformed reply, or service failure
        """
        start_time = time.time()
        try:
            with textgen_latency_histogram.time():
                payload = await self.generator.generate(request, self.template)
            result = parse_recommendation_result(payload)

        except TextGenerationError as e:
            reason = classify_failure(e.reason)
            self._log_failure(reason, e, start_time)
            raise ExternalError(reason=reason) from e

        except asyncio.TimeoutError as e:
            self._log_failure("timeout", e, start_time)
            raise ExternalError(reason="timeout") from e

        except Exception as e:
            self._log_failure("service_error", e, start_time)
            raise ExternalError(reason="service_error") from e

        record_recommendation("success")
        return result

    def _log_failure(self, reason: str, error: BaseException, start_time: float) -> None:
        record_recommendation(reason)
        logger.error(
            f"Text generation failed: {error!r}",
            extra={
                "step": "textgen_call",
                "reason": reason,
                "duration_ms": (time.time() - start_time) * 1000,
            },
        )

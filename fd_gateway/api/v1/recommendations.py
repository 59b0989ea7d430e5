"""POST /v1/recommendations - FD tenure/amount suggestion endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from fd_gateway.api.dependencies import get_recommendation_service, get_request_id
from fd_gateway.api.errors import validation_http_exception
from fd_gateway.api.v1.schemas import RecommendationRequestBody, RecommendationResponse
from fd_gateway.config import settings
from fd_gateway.domain.exceptions import ExternalError
from fd_gateway.domain.models import ValidationError
from fd_gateway.domain.recommendations import RecommendationService, validate_recommendation_request
from fd_gateway.infrastructure.observability.logging import log_recommendation
from fd_gateway.infrastructure.observability.metrics import record_validation_failure

router = APIRouter()


@router.post("/recommendations", response_model=RecommendationResponse, response_model_by_alias=True)
async def create_recommendation(
    request_body: RecommendationRequestBody,
    request: Request,
    service: RecommendationService = Depends(get_recommendation_service),
):
    """
    Suggest an FD tenure and amount for the user's goals.

    Flow:
    1. Validate goals (form length contract), amount and risk tolerance
    2. Forward the validated request to text generation (single attempt)
    3. Return the three text fields, or a generic error on any failure
    """
    start_time = time.time()
    request_id = get_request_id(request)

    recommendation_request = validate_recommendation_request(
        financial_goals=request_body.financial_goals,
        investment_amount=request_body.investment_amount,
        risk_tolerance=request_body.risk_tolerance,
        min_goals_length=settings.goals_min_length,
        max_goals_length=settings.goals_max_length,
    )
    if isinstance(recommendation_request, ValidationError):
        record_validation_failure("recommendation")
        logging.warning(
            f"Recommendation request rejected: {recommendation_request.message}",
            extra={"request_id": request_id, "fields": list(recommendation_request.fields)},
        )
        raise validation_http_exception(recommendation_request)

    try:
        result = await service.fetch_recommendation(recommendation_request)

    except ExternalError as e:
        duration_ms = (time.time() - start_time) * 1000
        log_recommendation(request_id, recommendation_request.risk_tolerance.value, e.reason, duration_ms)
        raise HTTPException(status_code=503, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    log_recommendation(request_id, recommendation_request.risk_tolerance.value, "success", duration_ms)

    return RecommendationResponse(
        recommended_tenure=result.recommended_tenure,
        recommended_amount=result.recommended_amount,
        rationale=result.rationale,
    )

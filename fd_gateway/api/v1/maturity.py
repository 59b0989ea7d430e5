"""POST /v1/maturity - FD maturity calculator endpoint"""

import time
import logging
from fastapi import APIRouter, HTTPException, Request

from fd_gateway.api.dependencies import get_request_id
from fd_gateway.api.errors import validation_http_exception
from fd_gateway.api.v1.schemas import (
    BreakdownItem,
    CompoundingOption,
    MaturityDefaultsResponse,
    MaturityDisplay,
    MaturityRequest,
    MaturityResponse,
)
from fd_gateway.config import settings
from fd_gateway.domain.formatting import format_currency
from fd_gateway.domain.maturity import compute_maturity, effective_annual_rate, validate_maturity_input
from fd_gateway.domain.models import CompoundingFrequency, ValidationError
from fd_gateway.infrastructure.observability.logging import log_calculation
from fd_gateway.infrastructure.observability.metrics import record_calculation, record_validation_failure

router = APIRouter()

FREQUENCY_LABELS = {
    CompoundingFrequency.ANNUALLY: "Annually",
    CompoundingFrequency.HALF_YEARLY: "Half-Yearly",
    CompoundingFrequency.QUARTERLY: "Quarterly",
    CompoundingFrequency.MONTHLY: "Monthly",
}


@router.post("/maturity", response_model=MaturityResponse, response_model_by_alias=True)
def calculate_maturity(request_body: MaturityRequest, request: Request):
    """
    Compute fixed deposit maturity value.

    Flow:
    1. Validate all four fields, reporting every violation together
    2. Compute maturity amount and total interest (unrounded)
    3. Attach the principal/interest breakdown and whole-rupee display strings
    """
    start_time = time.time()
    request_id = get_request_id(request)

    maturity_input = validate_maturity_input(
        principal=request_body.principal,
        annual_rate=request_body.annual_rate,
        tenure_years=request_body.tenure_years,
        compounding_frequency=request_body.compounding_frequency,
    )
    if isinstance(maturity_input, ValidationError):
        record_validation_failure("maturity")
        raise validation_http_exception(maturity_input)

    try:
        result = compute_maturity(maturity_input)

        response = MaturityResponse(
            principal=result.principal,
            maturity_amount=result.maturity_amount,
            total_interest=result.total_interest,
            effective_annual_rate=effective_annual_rate(
                maturity_input.annual_rate, maturity_input.compounding_frequency
            ),
            breakdown=[
                BreakdownItem(name="Principal", value=result.principal),
                BreakdownItem(name="Interest", value=result.total_interest),
            ],
            display=MaturityDisplay(
                principal=format_currency(result.principal),
                maturity_amount=format_currency(result.maturity_amount),
                total_interest=format_currency(result.total_interest),
            ),
        )

    except Exception as e:
        logging.error(f"Unexpected error: {e!r}", extra={"request_id": request_id, "step": "maturity"})
        raise HTTPException(status_code=500, detail="Internal server error")

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_calculation(maturity_input.compounding_frequency.name)
    log_calculation(
        request_id,
        int(maturity_input.compounding_frequency),
        maturity_input.tenure_years,
        duration_ms,
    )

    return response


@router.get("/maturity/defaults", response_model=MaturityDefaultsResponse, response_model_by_alias=True)
def get_maturity_defaults():
    """Initial calculator values and the selectable compounding frequencies"""
    return MaturityDefaultsResponse(
        principal=settings.default_principal,
        annual_rate=settings.default_annual_rate,
        tenure_years=settings.default_tenure_years,
        compounding_frequency=settings.default_compounding_frequency,
        compounding_options=[
            CompoundingOption(value=int(frequency), label=label)
            for frequency, label in FREQUENCY_LABELS.items()
        ],
    )

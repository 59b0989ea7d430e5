"""Pydantic schemas for API request/response bodies (camelCase on the wire)"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, List


class CamelModel(BaseModel):
    """Serialize snake_case attributes as camelCase JSON keys"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MaturityRequest(CamelModel):
    """
    Request body for POST /v1/maturity

    Fields are deliberately loose; domain validation reports every problem at once.
    """

    principal: Any = None
    annual_rate: Any = None
    tenure_years: Any = None
    compounding_frequency: Any = None


class BreakdownItem(BaseModel):
    """Slice of the principal/interest chart"""

    name: str
    value: float


class MaturityDisplay(CamelModel):
    """Amounts formatted as whole rupees"""

    principal: str
    maturity_amount: str
    total_interest: str


class MaturityResponse(CamelModel):
    """Response for POST /v1/maturity"""

    principal: float
    maturity_amount: float
    total_interest: float
    effective_annual_rate: float
    breakdown: List[BreakdownItem]
    display: MaturityDisplay


class CompoundingOption(BaseModel):
    """Selectable compounding frequency"""

    value: int
    label: str


class MaturityDefaultsResponse(CamelModel):
    """Response for GET /v1/maturity/defaults"""

    principal: float
    annual_rate: float
    tenure_years: float
    compounding_frequency: int
    compounding_options: List[CompoundingOption]


class RecommendationRequestBody(CamelModel):
    """Request body for POST /v1/recommendations"""

    financial_goals: Any = None
    investment_amount: Any = None
    risk_tolerance: Any = None


class RecommendationResponse(CamelModel):
    """Response for POST /v1/recommendations"""

    recommended_tenure: str = Field(..., min_length=1)
    recommended_amount: str = Field(..., min_length=1)
    rationale: str = Field(..., min_length=1)


class ViolationSchema(BaseModel):
    """Single failed validation rule"""

    field: str
    message: str


class ValidationErrorDetail(BaseModel):
    """Body of a 422 response"""

    message: str
    violations: List[ViolationSchema]

"""Domain models - pure Python dataclasses representing request-scoped values"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Tuple


class CompoundingFrequency(IntEnum):
    """How many times per year interest is added to principal"""

    ANNUALLY = 1
    HALF_YEARLY = 2
    QUARTERLY = 4
    MONTHLY = 12


class RiskTolerance(str, Enum):
    """User-declared risk category, only forwarded to text generation"""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class MaturityInput:
    """Validated calculator input"""

    principal: float
    annual_rate: float  # percent, e.g. 6.5
    tenure_years: float
    compounding_frequency: CompoundingFrequency


@dataclass(frozen=True)
class MaturityResult:
    """Output of a maturity calculation (unrounded)"""

    principal: float
    maturity_amount: float
    total_interest: float

    @property
    def principal_share(self) -> float:
        return self.principal / self.maturity_amount

    @property
    def interest_share(self) -> float:
        return self.total_interest / self.maturity_amount


@dataclass(frozen=True)
class RecommendationRequest:
    """Validated goals/amount/risk triple forwarded to text generation"""

    financial_goals: str
    investment_amount: float
    risk_tolerance: RiskTolerance


@dataclass(frozen=True)
class RecommendationResult:
    """Free-text suggestion returned by the text generation service"""

    recommended_tenure: str
    recommended_amount: str
    rationale: str


@dataclass(frozen=True)
class Violation:
    """Single failed validation rule"""

    field: str
    message: str


@dataclass(frozen=True)
class ValidationError:
    """
    Every rule a request failed, collected before reporting.

    Returned in place of a validated value rather than raised, so callers can
    show all problems at once.
    """

    violations: Tuple[Violation, ...]

    @property
    def message(self) -> str:
        return ", ".join(v.message for v in self.violations)

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(v.field for v in self.violations)

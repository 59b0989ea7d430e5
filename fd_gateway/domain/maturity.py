"""Fixed deposit maturity calculator - compound interest on a lump sum"""

import math
import sys
from typing import Any, List

from fd_gateway.domain.models import (
    CompoundingFrequency,
    MaturityInput,
    MaturityResult,
    ValidationError,
    Violation,
)
from fd_gateway.utils.numbers import coerce_number

MAX_ANNUAL_RATE = 100.0
LOG_FLOAT_MAX = math.log(sys.float_info.max)


def parse_compounding_frequency(value: Any) -> CompoundingFrequency | None:
    """
    Resolve a compounding frequency from a member, its count, or its name.

    Accepted: CompoundingFrequency.QUARTERLY, 4, "4", "quarterly", "QUARTERLY".
    Returns None when the value names none of the four frequencies.
    """
    if isinstance(value, CompoundingFrequency):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        return parse_compounding_frequency(int(value))
    if isinstance(value, int):
        try:
            return CompoundingFrequency(value)
        except ValueError:
            return None
    if isinstance(value, str):
        code = value.strip()
        if code.isdigit():
            return parse_compounding_frequency(int(code))
        try:
            return CompoundingFrequency[code.upper().replace("-", "_")]
        except KeyError:
            return None
    return None


def maturity_is_finite(
    principal: float,
    annual_rate: float,
    tenure_years: float,
    compounding_frequency: CompoundingFrequency,
) -> bool:
    """
    Whether P * (1 + r/n) ^ (n * t) fits in a float, checked in log space.

    Both the growth factor and the product must stay below the float maximum.
    """
    n = int(compounding_frequency)
    log_growth = n * tenure_years * math.log1p(annual_rate / 100 / n)
    return log_growth < LOG_FLOAT_MAX and math.log(principal) + log_growth < LOG_FLOAT_MAX


def validate_maturity_input(
    principal: Any,
    annual_rate: Any,
    tenure_years: Any,
    compounding_frequency: Any,
) -> MaturityInput | ValidationError:
    """
    Check every calculator field and collect all violations.

    Rules:
    - principal > 0
    - 0 < annual_rate <= 100 (percent)
    - tenure_years > 0 (fractional years allowed)
    - compounding_frequency is one of 1, 2, 4, 12
    - the resulting maturity amount is a finite float
    """
    violations: List[Violation] = []

    amount = coerce_number(principal)
    if amount is None or amount <= 0:
        violations.append(Violation("principal", "Amount must be greater than 0."))

    rate = coerce_number(annual_rate)
    if rate is None or rate <= 0:
        violations.append(Violation("annual_rate", "Rate must be greater than 0."))
    elif rate > MAX_ANNUAL_RATE:
        violations.append(Violation("annual_rate", "Rate cannot exceed 100%."))

    tenure = coerce_number(tenure_years)
    if tenure is None or tenure <= 0:
        violations.append(Violation("tenure_years", "Tenure must be greater than 0."))

    frequency = parse_compounding_frequency(compounding_frequency)
    if frequency is None:
        violations.append(
            Violation(
                "compounding_frequency",
                "Compounding frequency must be annually, half-yearly, quarterly or monthly.",
            )
        )
    elif not violations and not maturity_is_finite(amount, rate, tenure, frequency):
        violations.append(
            Violation("maturity_amount", "Maturity amount is too large to calculate; reduce amount or tenure.")
        )

    if violations:
        return ValidationError(tuple(violations))

    return MaturityInput(
        principal=amount,
        annual_rate=rate,
        tenure_years=tenure,
        compounding_frequency=frequency,
    )


def compute_maturity(maturity_input: MaturityInput) -> MaturityResult:
    """
    Maturity amount of a fixed deposit.

    A = P * (1 + r/n) ^ (n * t), with r the annual rate as a fraction and
    n the compounding count. The exponent may be fractional for part-year
    tenures. No rounding is applied; input must already be validated.
    """
    n = int(maturity_input.compounding_frequency)
    r = maturity_input.annual_rate / 100

    maturity_amount = maturity_input.principal * (1 + r / n) ** (n * maturity_input.tenure_years)
    total_interest = maturity_amount - maturity_input.principal

    return MaturityResult(
        principal=maturity_input.principal,
        maturity_amount=maturity_amount,
        total_interest=total_interest,
    )


def effective_annual_rate(annual_rate: float, compounding_frequency: CompoundingFrequency) -> float:
    """Annualised yield in percent after compounding: ((1 + r/n)^n - 1) * 100"""
    n = int(compounding_frequency)
    return ((1 + annual_rate / 100 / n) ** n - 1) * 100


def continuous_compounding_limit(principal: float, annual_rate: float, tenure_years: float) -> float:
    """Upper bound P * e^(r*t) approached as compounding frequency grows"""
    return principal * math.exp(annual_rate / 100 * tenure_years)

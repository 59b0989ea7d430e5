"""Instruction template sent to the text generation service"""

RECOMMENDATION_PROMPT = """
You are an expert financial advisor specializing in fixed deposit (FD) investments.

Based on the user's financial goals, investment amount, and risk tolerance, provide
personalized recommendations for FD tenure and amount.
Explain the rationale behind your recommendations.

Financial Goals: {financial_goals}
Investment Amount: {investment_amount}
Risk Tolerance: {risk_tolerance}

Respond with a single JSON object and nothing else, using exactly these keys:
{{"recommendedTenure": "<recommended FD tenure>",
 "recommendedAmount": "<recommended FD amount>",
 "rationale": "<why this tenure and amount are recommended>"}}
"""


def _plain_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def render_prompt(template: str, financial_goals: str, investment_amount: float, risk_tolerance: str) -> str:
    """Fill the template with the request fields verbatim"""
    return template.format(
        financial_goals=financial_goals,
        investment_amount=_plain_number(investment_amount),
        risk_tolerance=risk_tolerance,
    ).strip()

"""Display formatting for calculator amounts (en-IN rupees, whole units)"""

from decimal import Decimal, ROUND_HALF_UP

RUPEE_SYMBOL = "₹"


def group_indian_digits(digits: str) -> str:
    """
    Insert separators the Indian way: last three digits, then pairs.

    Example:
        "13752800" -> "1,37,52,800"
    """
    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)

    return ",".join(groups + [tail])


def format_currency(amount: float, symbol: str = RUPEE_SYMBOL) -> str:
    """
    Render an amount as whole currency units for display.

    Rounds half away from zero, so 137528.5 -> "₹1,37,529". This is the only
    place calculator results are rounded. Amounts must be finite.
    """
    whole = Decimal(str(amount)).to_integral_value(rounding=ROUND_HALF_UP)
    sign = "-" if whole < 0 else ""
    return f"{sign}{symbol}{group_indian_digits(str(abs(int(whole))))}"

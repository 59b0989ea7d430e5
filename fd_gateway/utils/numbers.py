"""Number coercion utilities for boundary validation"""

import math
from typing import Any, Optional


def coerce_number(value: Any) -> Optional[float]:
    """
    Coerce form input to a finite float.

    Accepts ints, floats and numeric strings. Returns None for anything else,
    including booleans, blank strings, NaN and infinities.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number

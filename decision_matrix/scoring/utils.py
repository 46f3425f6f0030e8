"""
Decimal Utilities
decision_matrix/scoring/utils.py

Precision-safe rounding and clamping for scoring calculations.
"""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

# Digits needed to quantize any finite float to a few decimals (max float has 309 integer digits)
_ROUNDING_PRECISION = 400


def round_score(value: float, places: int = 3) -> float:
    """
    Round to `places` decimals, half away from zero.

    Uses the exact binary value of the float (Decimal(value), not
    Decimal(str(value))), so 1.0005 rounds to 1.0 because its stored value
    is 1.000499999...

    Total over all floats: any finite magnitude rounds without error, and
    inf/nan (a weighted sum that overflowed) come back unchanged.
    """
    if not math.isfinite(value):
        return value
    with localcontext() as ctx:
        ctx.prec = _ROUNDING_PRECISION
        quantized = Decimal(value).quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP)
    return float(quantized)


def clamp(value: float, min_val: float = 0.0, max_val: float = 1.0) -> float:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))

"""
Rounding policy for the projection engines.

The reference engine's output is reproduced only when intermediate values are
quantized at the same points it quantizes them. Every such point goes through
one of the functions below so the truncation stays visible and testable.
"""

import math

from apolo_calc.core.constants import (
    MONEY_DECIMALS,
    RATE_DECIMALS,
    SIGNIFICANT_DIGITS,
    RoundingPolicy,
)


def round_half_up(value: float, decimals: int = 0) -> float:
    """
    Round to ``decimals`` places, ties toward +infinity.

    Python's ``round`` uses banker's rounding; the reference rounds with
    ``floor(x * 10^d + 0.5) / 10^d``.

    Examples:
        >>> round_half_up(2.5)
        3.0
        >>> round_half_up(-2.5)
        -2.0
        >>> round_half_up(0.0079741404, 6)
        0.007974
    """
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def quantize_significant(value: float, digits: int = SIGNIFICANT_DIGITS) -> float:
    """Keep ``digits`` significant digits of ``value``."""
    return float(f"{value:.{digits}g}")


def quantize_rate(rate: float) -> float:
    """Monthly rates are carried with 6 decimal places."""
    return round_half_up(rate, RATE_DECIMALS)


def apply_rounding(value: float, policy: RoundingPolicy, is_final: bool) -> float:
    """
    Apply the rounding policy to a monetary quantity.

    Args:
        value: Amount to round
        policy: Configured rounding policy
        is_final: Whether this is the last month of the projection

    Returns:
        The amount, rounded to cents when the policy asks for it
    """
    if policy == RoundingPolicy.NONE:
        return value
    if policy == RoundingPolicy.MONTHLY or is_final:
        return round_half_up(value, MONEY_DECIMALS)
    return value

"""
Rate conversion utilities for the projection engines.

This module provides the standardized functions for converting between the
rate formats used by both engines.

Conventions:
- All user inputs are rates as percentages (e.g., 10.0 = 10%)
- All calculations use decimal rates (e.g., 0.10 = 10%)
- Monthly rates are derived from annual rates either geometrically
  ("effective": (1 + r)^(1/12) - 1) or pro rata ("simple": r / 12)
- Variable naming: *_pct for percentages, plain names for decimals
"""

from typing import Union

from apolo_calc.core.constants import Frequency, MONTHS_PER_YEAR, RateCompounding
from apolo_calc.utils.error_utils import error_handler


@error_handler
def annual_pct_to_decimal(rate_pct: Union[float, str]) -> float:
    """
    Convert a percentage rate to decimal format.

    Examples:
        >>> annual_pct_to_decimal(5.0)
        0.05
        >>> annual_pct_to_decimal("7.5")
        0.075
    """
    return float(rate_pct) / 100.0


@error_handler
def decimal_to_annual_pct(rate_decimal: float) -> float:
    """
    Convert a decimal rate to percentage format.

    Examples:
        >>> decimal_to_annual_pct(0.05)
        5.0
    """
    return float(rate_decimal) * 100.0


@error_handler
def monthly_from_annual(
    annual_rate: float, mode: RateCompounding = RateCompounding.EFFECTIVE
) -> float:
    """
    Convert an annual decimal rate to a monthly decimal rate.

    Args:
        annual_rate: Annual rate as decimal, may be zero or negative
        mode: EFFECTIVE for geometric conversion, SIMPLE for division by 12

    Returns:
        Monthly rate as decimal

    Examples:
        >>> round(monthly_from_annual(0.12, RateCompounding.SIMPLE), 6)
        0.01
        >>> round(monthly_from_annual(0.10), 6)
        0.007974
        >>> monthly_from_annual(0.0)
        0.0
    """
    if mode == RateCompounding.SIMPLE:
        return annual_rate / MONTHS_PER_YEAR
    return (1 + annual_rate) ** (1 / MONTHS_PER_YEAR) - 1


@error_handler
def annual_from_monthly(
    monthly_rate: float, mode: RateCompounding = RateCompounding.EFFECTIVE
) -> float:
    """
    Convert a monthly decimal rate back to an annual decimal rate.

    Examples:
        >>> annual_from_monthly(0.01, RateCompounding.SIMPLE)
        0.12
        >>> round(annual_from_monthly(0.007974140428903741), 6)
        0.1
    """
    if mode == RateCompounding.SIMPLE:
        return monthly_rate * MONTHS_PER_YEAR
    return (1 + monthly_rate) ** MONTHS_PER_YEAR - 1


@error_handler
def monthly_rate_from_input(
    rate_pct: float,
    frequency: Frequency = Frequency.YEARLY,
    mode: RateCompounding = RateCompounding.EFFECTIVE,
) -> float:
    """
    Monthly decimal rate for a user supplied percentage.

    Monthly inputs are taken as they are; yearly inputs go through
    monthly_from_annual.

    Examples:
        >>> monthly_rate_from_input(1.0, Frequency.MONTHLY)
        0.01
        >>> round(monthly_rate_from_input(12.0, Frequency.YEARLY, RateCompounding.SIMPLE), 6)
        0.01
    """
    rate = annual_pct_to_decimal(rate_pct)
    if frequency == Frequency.MONTHLY:
        return rate
    return monthly_from_annual(rate, mode)


@error_handler
def annual_rate_from_input(
    rate_pct: float,
    frequency: Frequency = Frequency.YEARLY,
    mode: RateCompounding = RateCompounding.EFFECTIVE,
) -> float:
    """
    Annual decimal rate for a user supplied percentage.

    Examples:
        >>> annual_rate_from_input(10.0)
        0.1
        >>> annual_rate_from_input(1.0, Frequency.MONTHLY, RateCompounding.SIMPLE)
        0.12
    """
    rate = annual_pct_to_decimal(rate_pct)
    if frequency == Frequency.YEARLY:
        return rate
    return annual_from_monthly(rate, mode)


@error_handler
def monthly_amount(amount: float, frequency: Frequency = Frequency.MONTHLY) -> float:
    """
    Monthly contribution for an amount paid at the given frequency.

    Examples:
        >>> monthly_amount(1200.0, Frequency.YEARLY)
        100.0
        >>> monthly_amount(1000.0)
        1000.0
    """
    if frequency == Frequency.YEARLY:
        return float(amount) / MONTHS_PER_YEAR
    return float(amount)


def fisher_rate(nominal_rate: float, inflation_rate: float) -> float:
    """Real rate of return implied by a nominal rate and an inflation rate."""
    return (1 + nominal_rate) / (1 + inflation_rate) - 1


def nominal_from_real(real_rate: float, inflation_rate: float) -> float:
    """Nominal rate that yields ``real_rate`` under ``inflation_rate``."""
    return (1 + real_rate) * (1 + inflation_rate) - 1


@error_handler
def convert_duration_years_to_months(years: Union[float, int]) -> int:
    """
    Convert duration from years to months.

    Examples:
        >>> convert_duration_years_to_months(2.5)
        30
        >>> convert_duration_years_to_months(25)
        300
    """
    return round(float(years) * MONTHS_PER_YEAR)


def normalize_rate_input(rate_input: Union[str, float, int]) -> float:
    """
    Normalize rate input from various formats to a float percentage.

    Handles string inputs, strips percentage signs and accepts a decimal
    comma. Raises ValueError when the input cannot be read as a number.

    Examples:
        >>> normalize_rate_input("5.5%")
        5.5
        >>> normalize_rate_input("3,75")
        3.75
        >>> normalize_rate_input(7)
        7.0
    """
    if isinstance(rate_input, str):
        cleaned = rate_input.strip().rstrip('%').strip().replace(',', '.')
        try:
            return float(cleaned)
        except ValueError:
            raise ValueError(f"Cannot convert rate input '{rate_input}' to number")
    return float(rate_input)


# Convenience constants for common conversions
PERCENTAGE_TO_DECIMAL = 100.0


# Module metadata
__version__ = "1.0.0"
__author__ = "Apolo Development Team"
__description__ = "Rate conversion utilities for Apolo Calc"

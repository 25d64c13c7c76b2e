"""
Core modules for Apolo Calc.

This package contains the constants, the input and result records, and the
projection engines.
"""

from apolo_calc.core.constants import (
    Frequency,
    RateCompounding,
    DepositTiming,
    ContributionUpdate,
    InflationMode,
    TaxMode,
    RoundingPolicy,
    MONTHS_PER_YEAR,
    MAX_PERIOD_YEARS,
    MILLION,
)

__all__ = [
    "Frequency",
    "RateCompounding",
    "DepositTiming",
    "ContributionUpdate",
    "InflationMode",
    "TaxMode",
    "RoundingPolicy",
    "MONTHS_PER_YEAR",
    "MAX_PERIOD_YEARS",
    "MILLION",
]

__version__ = "1.0.0"

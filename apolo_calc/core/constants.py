"""
Core constants and enumerations for Apolo Calc.

This module defines all constant values, enumerations, and configuration
parameters used by the projection engines.
"""

from enum import Enum


class Frequency(str, Enum):
    """Input frequency for contributions and rates"""
    MONTHLY = "monthly"
    YEARLY = "yearly"


class RateCompounding(str, Enum):
    """Annual to monthly rate conversion convention"""
    EFFECTIVE = "effective"
    SIMPLE = "simple"


class DepositTiming(str, Enum):
    """Whether a month's contribution is added before or after its interest"""
    START = "start"
    END = "end"


class ContributionUpdate(str, Enum):
    """How often the indexed contribution is recomputed"""
    ANNUAL = "annual"
    MONTHLY = "monthly"


class InflationMode(str, Enum):
    """Which balance a generic projection exhibits"""
    NONE = "none"
    DISPLAY_NOMINAL = "display_nominal"
    DEFLATE_BOTH = "display_deflate_both"


class TaxMode(str, Enum):
    """
    Declared tax treatment.

    Only a label: income tax always reduces the monthly rate from month 1,
    whatever mode is selected.
    """
    NONE = "none"
    ON_REDEMPTION = "on_redemption"
    MONTHLY = "monthly"


class RoundingPolicy(str, Enum):
    """When monetary quantities are rounded to cents"""
    NONE = "none"
    MONTHLY = "monthly"
    FINAL = "final"


# Projection limits
MONTHS_PER_YEAR = 12
MAX_PERIOD_YEARS = 50

# Precision artifacts of the reference engine
RATE_DECIMALS = 6
SIGNIFICANT_DIGITS = 15
MONEY_DECIMALS = 2
INPUT_PCT_DECIMALS = 2

# Metrics
MILLION = 1_000_000.0
DEFAULT_PASSIVE_INCOME_RATE = 0.5  # monthly %, generic engine only
DASHBOARD_TABLE_STEP_YEARS = 5


# Module metadata
__version__ = "1.0.0"
__author__ = "Apolo Development Team"
__description__ = "Core constants and enumerations for Apolo Calc"

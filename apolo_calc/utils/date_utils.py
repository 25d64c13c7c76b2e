"""
Date utilities for Apolo Calc.

Projections are month-indexed; a calendar date is attached to each month only
when the caller supplies a start date. All dates are pandas Timestamps
normalized to the first day of the month, except window dates in the WMAP
study, which sit on the last day of their month.
"""

from datetime import datetime, date
from typing import List, Optional, Union

import pandas as pd
from dateutil.relativedelta import relativedelta

from apolo_calc.utils.error_utils import error_handler

DateInput = Union[str, datetime, date, pd.Timestamp]


@error_handler
def parse_date(date_input: DateInput, normalize_to_month_start: bool = True) -> pd.Timestamp:
    """
    Parse a date into a pandas Timestamp.

    Accepts Timestamps, datetime/date objects and strings in ISO
    (YYYY-MM-DD) or day-first (DD/MM/YYYY) format.

    Args:
        date_input: Date in one of the supported formats
        normalize_to_month_start: If True, sets day to 1

    Returns:
        pd.Timestamp: Parsed (and optionally normalized) date

    Raises:
        ValueError: If the string cannot be parsed
        TypeError: If input type is not supported

    Examples:
        >>> parse_date("2024-01-15")
        Timestamp('2024-01-01 00:00:00')
        >>> parse_date("15/01/2024", normalize_to_month_start=False)
        Timestamp('2024-01-15 00:00:00')
    """
    if date_input is None:
        raise ValueError("Date input cannot be None")

    if isinstance(date_input, pd.Timestamp):
        result = date_input
    elif isinstance(date_input, (datetime, date)):
        result = pd.Timestamp(date_input)
    elif isinstance(date_input, str):
        result = _parse_date_string(date_input.strip())
    else:
        raise TypeError(f"Unsupported date input type: {type(date_input)}")

    result = result.normalize()
    if normalize_to_month_start:
        result = result.replace(day=1)

    return result


def _parse_date_string(date_str: str) -> pd.Timestamp:
    if not date_str:
        raise ValueError("Date string cannot be empty")

    for format_str in ("%Y-%m-%d", "%Y/%m/%d", "%d/%m/%Y", "%d-%m-%Y"):
        try:
            return pd.Timestamp(datetime.strptime(date_str, format_str))
        except ValueError:
            continue

    raise ValueError(
        f"Unable to parse date string '{date_str}'. Supported formats include: YYYY-MM-DD, DD/MM/YYYY"
    )


@error_handler
def add_months(start: DateInput, months: int) -> pd.Timestamp:
    """
    Month-start date ``months`` months after ``start``.

    Examples:
        >>> add_months("2024-11-20", 3)
        Timestamp('2025-02-01 00:00:00')
    """
    return parse_date(start) + relativedelta(months=months)


@error_handler
def month_end(date_input: DateInput) -> pd.Timestamp:
    """
    Last day of the month containing ``date_input``.

    Examples:
        >>> month_end("2024-02-10")
        Timestamp('2024-02-29 00:00:00')
    """
    return parse_date(date_input) + relativedelta(months=1, days=-1)


def month_dates(start: Optional[DateInput], months: List[int]) -> List[Optional[pd.Timestamp]]:
    """Calendar date of each month offset, or None for every month without a start."""
    if start is None:
        return [None] * len(months)
    base = parse_date(start)
    return [base + relativedelta(months=m) for m in months]


# Module metadata
__version__ = "1.0.0"
__author__ = "Apolo Development Team"
__description__ = "Date utilities for Apolo Calc"

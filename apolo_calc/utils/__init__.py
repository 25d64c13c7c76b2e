"""
Utility modules for Apolo Calc.

This package contains reusable functions for rate conversion, rounding,
dates, display formatting and error handling.
"""

from apolo_calc.utils.date_utils import (
    parse_date,
    add_months,
    month_end,
    month_dates,
)

from apolo_calc.utils.rate_utils import (
    annual_pct_to_decimal,
    decimal_to_annual_pct,
    monthly_from_annual,
    annual_from_monthly,
    monthly_rate_from_input,
    annual_rate_from_input,
    monthly_amount,
    fisher_rate,
    nominal_from_real,
    convert_duration_years_to_months,
    normalize_rate_input,
    PERCENTAGE_TO_DECIMAL,
)

from apolo_calc.utils.rounding_utils import (
    round_half_up,
    quantize_significant,
    quantize_rate,
    apply_rounding,
)

from apolo_calc.utils.format_utils import (
    format_value,
    format_value_long,
    format_currency,
)

from apolo_calc.utils.error_utils import (
    ProjectionError,
    InvalidInputError,
    error_handler,
    logger,
)

__all__ = [
    # Date utilities
    "parse_date",
    "add_months",
    "month_end",
    "month_dates",
    # Rate utilities
    "annual_pct_to_decimal",
    "decimal_to_annual_pct",
    "monthly_from_annual",
    "annual_from_monthly",
    "monthly_rate_from_input",
    "annual_rate_from_input",
    "monthly_amount",
    "fisher_rate",
    "nominal_from_real",
    "convert_duration_years_to_months",
    "normalize_rate_input",
    "PERCENTAGE_TO_DECIMAL",
    # Rounding
    "round_half_up",
    "quantize_significant",
    "quantize_rate",
    "apply_rounding",
    # Display
    "format_value",
    "format_value_long",
    "format_currency",
    # Error handling
    "ProjectionError",
    "InvalidInputError",
    "error_handler",
    "logger",
]

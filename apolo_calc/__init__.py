"""
Apolo Calc - Wealth Accumulation Projections

Month-by-month projection of a savings plan with:
- A configurable generic engine for exploratory studies
- A reference engine reproducing the official formula set
- Summary metrics, yearly rollups and an engine comparison report
- The WMAP contribution and window planning study
"""

from apolo_calc.core.engine import (
    GenericProjectionEngine,
    ReferenceProjectionEngine,
    aggregate_metrics,
    calculate_wmap_study,
    compare_engines,
    generic_passive_income,
    project_engine_a,
    project_engine_b,
    rollup_yearly,
    yearly_table,
)
from apolo_calc.core.models import (
    CalculationOptions,
    Metrics,
    MonthlyRecord,
    ProjectionInput,
    WMAPStudyInput,
    WMAPStudyResult,
    YearlyRecord,
    official_options,
)

__all__ = [
    "GenericProjectionEngine",
    "ReferenceProjectionEngine",
    "aggregate_metrics",
    "calculate_wmap_study",
    "compare_engines",
    "generic_passive_income",
    "project_engine_a",
    "project_engine_b",
    "rollup_yearly",
    "yearly_table",
    "CalculationOptions",
    "Metrics",
    "MonthlyRecord",
    "ProjectionInput",
    "WMAPStudyInput",
    "WMAPStudyResult",
    "YearlyRecord",
    "official_options",
]

__version__ = "1.0.0"
__author__ = "Apolo Contributors"

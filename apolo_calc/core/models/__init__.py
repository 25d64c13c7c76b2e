"""
Apolo Calc Core Models Package.

Modules:
    inputs: ProjectionInput, CalculationOptions and the official option preset
    records: MonthlyRecord, YearlyRecord, YearlyTableRow and Metrics
    wmap: Input and result records of the WMAP study
"""

from apolo_calc.core.models.inputs import (
    BaseRecord,
    CalculationOptions,
    ProjectionInput,
    official_options,
)

from apolo_calc.core.models.records import (
    Metrics,
    MonthlyRecord,
    YearlyRecord,
    YearlyTableRow,
    records_to_dataframe,
)

from apolo_calc.core.models.wmap import (
    WMAPStudyInput,
    WMAPStudyResult,
    WMAPWindow,
)

__all__ = [
    # Inputs
    "BaseRecord",
    "CalculationOptions",
    "ProjectionInput",
    "official_options",
    # Results
    "Metrics",
    "MonthlyRecord",
    "YearlyRecord",
    "YearlyTableRow",
    "records_to_dataframe",
    # WMAP study
    "WMAPStudyInput",
    "WMAPStudyResult",
    "WMAPWindow",
]

__version__ = "1.0.0"
__author__ = "Apolo Development Team"

"""
Records of the WMAP planning study.
"""

from typing import List

from pydantic import Field

from apolo_calc.core.models.inputs import BaseRecord


class WMAPStudyInput(BaseRecord):
    """Parameters of a WMAP study. Rates are percentages."""

    current_age: int = Field(..., ge=0)
    target_age: int = Field(..., ge=0)
    current_patrimony: float = Field(..., ge=0, description="Current real wealth")
    target_patrimony: float = Field(..., ge=0)
    real_return_rate: float = Field(..., description="Real annual rate in the accumulation phase (%)")
    current_monthly_investment: float = Field(
        default=0.0, description="Current monthly investment, negative as in the spreadsheet"
    )
    window_period: int = Field(default=60, gt=0, description="Window length in months")


class WMAPWindow(BaseRecord):
    """One implementation window."""

    index: int
    date: str
    months_from_now: float
    years_from_now: int
    future_value: float
    present_value: float


class WMAPStudyResult(BaseRecord):
    """Outcome of a WMAP study."""

    delta: float
    years: int
    yearly_contribution: float
    monthly_equivalent: float
    total_monthly_contribution: float
    num_windows: int
    window_target: float
    windows: List[WMAPWindow] = Field(default_factory=list)

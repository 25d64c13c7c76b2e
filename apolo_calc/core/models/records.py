"""
Result records produced by the engines and the aggregators.

Both engines emit MonthlyRecord so downstream consumers (metrics, yearly
rollup, comparison report) never need to know which engine ran. Records are
frozen once appended to their stream.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Type

import pandas as pd
from pydantic import Field

from apolo_calc.core.models.inputs import BaseRecord


class MonthlyRecord(BaseRecord):
    """
    One month of a projection.

    Attributes:
        month: Month index (0..N for the generic engine, 1..N for the reference)
        year: Year index the month belongs to
        month_of_year: Position inside the year (0..11)
        age: Investor age during the month
        date: Calendar month, when the projection was given a start date
        contribution_nominal: Contribution deposited this month
        accumulated_nominal: Initial capital plus every contribution so far
        interest: Interest earned this month
        accumulated_interest: Interest earned so far
        balance_gross_nominal: Nominal balance before tax
        balance_after_tax_nominal: Nominal balance after tax
        real_balance: Balance in constant purchasing power
        real_accumulated: Contributions in constant purchasing power
        tax_amount: Tax charged this month
        inflation_factor: Cumulative inflation since month 0
        balance_exhibited: The balance shown to the user for this month
    """

    month: int = Field(..., ge=0)
    year: int = Field(..., ge=0)
    month_of_year: int = Field(..., ge=0, le=11)
    age: int = Field(..., ge=0)
    date: Optional[datetime] = None
    contribution_nominal: float
    accumulated_nominal: float
    interest: float
    accumulated_interest: float
    balance_gross_nominal: float
    balance_after_tax_nominal: float
    real_balance: float
    real_accumulated: float
    tax_amount: float = 0.0
    inflation_factor: float
    balance_exhibited: float

    def wealth(self, fix_inflation: bool) -> float:
        """Real balance in real mode, gross nominal balance otherwise."""
        return self.real_balance if fix_inflation else self.balance_gross_nominal


class YearlyRecord(BaseRecord):
    """Terminal state of one projection year."""

    year: int = Field(..., ge=0)
    age: int = Field(..., ge=0)
    month: int = Field(..., ge=0)
    wealth: float
    contributions: float
    interest: float
    contribution_pct: float
    interest_pct: float


class YearlyTableRow(BaseRecord):
    """What happened during one year, for tabulation."""

    year: int
    age: int
    contribution: float
    gains: float
    contribution_pct: float
    gains_pct: float


class Metrics(BaseRecord):
    """Summary of a reference projection."""

    final_wealth: float
    passive_income: float
    first_milestone: Optional[MonthlyRecord] = None
    total_contributed: float
    total_interest: float
    contribution_pct: float
    interest_pct: float


def records_to_dataframe(
    records: List[BaseRecord], record_type: Type[BaseRecord] = MonthlyRecord
) -> pd.DataFrame:
    """One DataFrame row per record, columns in field order."""
    rows: List[Dict[str, Any]] = [record.model_dump() for record in records]
    if not rows:
        return pd.DataFrame(columns=list(record_type.model_fields))
    return pd.DataFrame(rows)

"""
Yearly downsampling of a monthly projection, for charts and tables.
"""

from typing import Any, Dict, List, Optional, Union

from apolo_calc.core.engine.metrics import contribution_split
from apolo_calc.core.models.inputs import ProjectionInput
from apolo_calc.core.models.records import MonthlyRecord, YearlyRecord, YearlyTableRow
from apolo_calc.utils.error_utils import error_handler


@error_handler
def rollup_yearly(
    records: List[MonthlyRecord],
    data: Union[ProjectionInput, Dict[str, Any]],
) -> List[YearlyRecord]:
    """
    Keep the last month of every year.

    Later months overwrite earlier ones within a year; the result is sorted
    by year and split into contributions and interest like the metrics.
    """
    data = ProjectionInput.from_dict(data)
    fix_inflation = data.fix_inflation

    last_per_year: Dict[int, MonthlyRecord] = {}
    for record in records:
        last_per_year[record.year] = record

    yearly = []
    for year in sorted(last_per_year):
        record = last_per_year[year]
        contributions, interest, contribution_pct, interest_pct = contribution_split(record, fix_inflation)
        yearly.append(
            YearlyRecord(
                year=year,
                age=record.age,
                month=record.month,
                wealth=record.wealth(fix_inflation),
                contributions=contributions,
                interest=interest,
                contribution_pct=contribution_pct,
                interest_pct=interest_pct,
            )
        )
    return yearly


@error_handler
def yearly_table(yearly: List[YearlyRecord], every: Optional[int] = None) -> List[YearlyTableRow]:
    """
    Contributions and gains made during each year.

    Args:
        yearly: Output of rollup_yearly
        every: When set, keep only years > 0 that are multiples of it

    Returns:
        One row per (kept) year
    """
    rows = []
    previous_contributions = 0.0
    previous_interest = 0.0
    for record in yearly:
        rows.append(
            YearlyTableRow(
                year=record.year,
                age=record.age,
                contribution=record.contributions - previous_contributions,
                gains=record.interest - previous_interest,
                contribution_pct=record.contribution_pct,
                gains_pct=record.interest_pct,
            )
        )
        previous_contributions = record.contributions
        previous_interest = record.interest

    if every:
        rows = [row for row in rows if row.year > 0 and row.year % every == 0]
    return rows

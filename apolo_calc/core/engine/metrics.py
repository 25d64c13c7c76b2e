"""
Summary metrics of a reference projection.

Wealth is read in real terms when the input fixes inflation and in nominal
terms otherwise. Contributions are always the nominal amount actually paid
in, even when wealth is real.
"""

from typing import Any, Dict, List, Optional, Tuple, Union

from apolo_calc.core.constants import MILLION, MONTHS_PER_YEAR
from apolo_calc.core.models.inputs import ProjectionInput
from apolo_calc.core.models.records import Metrics, MonthlyRecord
from apolo_calc.utils.error_utils import error_handler
from apolo_calc.utils.rate_utils import annual_rate_from_input, decimal_to_annual_pct


def contribution_split(record: MonthlyRecord, fix_inflation: bool) -> Tuple[float, float, float, float]:
    """
    Split a month's wealth into contributions and interest.

    Real wealth: interest is whatever the real wealth holds beyond the
    nominal contributions, and the shares are taken over the wealth.
    Nominal wealth: interest is the independently accumulated interest, and
    the shares are taken over contributions plus interest.

    Returns:
        (contributions, interest, contribution share, interest share); shares
        are 0 when the base is not positive
    """
    contributions = record.accumulated_nominal
    if fix_inflation:
        wealth = record.real_balance
        interest = wealth - contributions
        base = wealth
    else:
        interest = record.accumulated_interest
        base = contributions + interest

    if base > 0:
        return contributions, interest, contributions / base, interest / base
    return contributions, interest, 0.0, 0.0


def simplified_real_monthly_rate(data: ProjectionInput) -> float:
    """
    Linear monthly real rate net of tax, used for the passive income figure.

    ((nominal % - inflation %) / 100 * (1 - tax % / 100)) / 12, deliberately
    not compounded.
    """
    nominal_pct = decimal_to_annual_pct(annual_rate_from_input(data.return_rate, data.return_rate_frequency))
    inflation_pct = decimal_to_annual_pct(annual_rate_from_input(data.inflation, data.inflation_frequency))
    return ((nominal_pct - inflation_pct) / 100 * (1 - data.tax_rate / 100)) / MONTHS_PER_YEAR


@error_handler
def find_first_milestone(
    records: List[MonthlyRecord],
    fix_inflation: bool,
    milestone: float = MILLION,
) -> Optional[MonthlyRecord]:
    """
    Record reported for the first month whose wealth reaches ``milestone``.

    The month before the crossing is reported; a crossing at the very first
    record reports that record. None when the milestone is never reached.
    """
    for index, record in enumerate(records):
        if record.wealth(fix_inflation) >= milestone:
            return records[index - 1] if index > 0 else record
    return None


@error_handler
def aggregate_metrics(
    records: List[MonthlyRecord],
    data: Union[ProjectionInput, Dict[str, Any]],
    milestone: float = MILLION,
) -> Metrics:
    """
    Derive the summary metrics of a projection.

    Args:
        records: Monthly stream of the reference engine
        data: The input the stream was produced from
        milestone: Wealth threshold for the milestone month

    Returns:
        Metrics; all zero with no milestone for an empty stream
    """
    data = ProjectionInput.from_dict(data)

    if not records:
        return Metrics(
            final_wealth=0.0,
            passive_income=0.0,
            first_milestone=None,
            total_contributed=0.0,
            total_interest=0.0,
            contribution_pct=0.0,
            interest_pct=0.0,
        )

    fix_inflation = data.fix_inflation
    last = records[-1]
    final_wealth = last.wealth(fix_inflation)
    contributions, interest, contribution_pct, interest_pct = contribution_split(last, fix_inflation)

    return Metrics(
        final_wealth=final_wealth,
        passive_income=final_wealth * simplified_real_monthly_rate(data),
        first_milestone=find_first_milestone(records, fix_inflation, milestone),
        total_contributed=contributions,
        total_interest=interest,
        contribution_pct=contribution_pct,
        interest_pct=interest_pct,
    )

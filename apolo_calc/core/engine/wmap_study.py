"""
WMAP study: contribution needed to reach a wealth target and the schedule of
implementation windows, reproducing the planning spreadsheet.

Spreadsheet cells mirrored here:
    delta           = target - current patrimony
    yearly          = PMT(rate, years, 0, delta)
    monthly         = yearly / 12
    total monthly   = monthly + current monthly investment
    windows         = ROUND(years / (window period / 12), 0)
    window target   = delta / windows
    window i        = window period / 2 + (i - 1) * window period months out
    present value_i = PV(rate, transition year - window year, 0, -ROUND(target))
"""

from datetime import date
from typing import Any, Dict, Optional, Union

import numpy_financial as npf
from dateutil.relativedelta import relativedelta

from apolo_calc.core.constants import MONTHS_PER_YEAR
from apolo_calc.core.models.wmap import WMAPStudyInput, WMAPStudyResult, WMAPWindow
from apolo_calc.utils.date_utils import DateInput, month_end, parse_date
from apolo_calc.utils.error_utils import InvalidInputError, error_handler
from apolo_calc.utils.rate_utils import annual_pct_to_decimal
from apolo_calc.utils.rounding_utils import round_half_up


@error_handler
def calculate_wmap_study(
    inputs: Union[WMAPStudyInput, Dict[str, Any]],
    as_of: Optional[DateInput] = None,
) -> WMAPStudyResult:
    """
    Run a WMAP study.

    Args:
        inputs: Study parameters
        as_of: Date the study is made on; defaults to today

    Returns:
        WMAPStudyResult with absolute contribution amounts

    Raises:
        InvalidInputError: If the target age is not after the current age
    """
    if not isinstance(inputs, WMAPStudyInput):
        inputs = WMAPStudyInput.model_validate(inputs)

    years = inputs.target_age - inputs.current_age
    if years <= 0:
        raise InvalidInputError(
            f"Target age {inputs.target_age} must be after current age {inputs.current_age}"
        )

    today = parse_date(as_of if as_of is not None else date.today(), normalize_to_month_start=False)
    rate = annual_pct_to_decimal(inputs.real_return_rate)
    delta = inputs.target_patrimony - inputs.current_patrimony

    yearly_contribution = float(npf.pmt(rate, years, 0, delta))
    monthly_equivalent = yearly_contribution / MONTHS_PER_YEAR
    total_monthly_contribution = monthly_equivalent + inputs.current_monthly_investment

    num_windows = int(round_half_up(years / (inputs.window_period / MONTHS_PER_YEAR)))
    window_target = delta / num_windows if num_windows > 0 else 0.0
    half_window = inputs.window_period / 2

    transition_year = (today + relativedelta(years=years)).year
    future_value = -round_half_up(window_target)

    windows = []
    for index in range(1, num_windows + 1):
        months_from_now = half_window + (index - 1) * inputs.window_period
        window_date = month_end(today + relativedelta(months=int(months_from_now)))
        years_from_now = transition_year - window_date.year
        present_value = float(npf.pv(rate, years_from_now, 0, future_value))

        windows.append(
            WMAPWindow(
                index=index,
                date=window_date.strftime("%m/%Y"),
                months_from_now=months_from_now,
                years_from_now=years_from_now,
                future_value=future_value,
                present_value=abs(present_value),
            )
        )

    return WMAPStudyResult(
        delta=delta,
        years=years,
        yearly_contribution=abs(yearly_contribution),
        monthly_equivalent=abs(monthly_equivalent),
        total_monthly_contribution=abs(total_monthly_contribution),
        num_windows=num_windows,
        window_target=abs(window_target),
        windows=windows,
    )

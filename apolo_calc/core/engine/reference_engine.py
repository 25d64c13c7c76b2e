"""
Reference monthly projection engine.

Reproduces the official engine's formula set. Unlike the generic engine it
has no options: deposits always land at the end of the month, the return
rate is converted geometrically and permanently reduced by income tax, and
contributions escalate by one combined monthly factor from month 1 on.

Per month k = 1..N:
    contribution_k = contribution_{k-1} * (1 + escalation)
    interest_k     = balance_{k-1} * monthly_rate
    balance_k      = balance_{k-1} + interest_k + contribution_k
    real_k         = (real_{k-1} + contribution_k) * (1 + real_rate)

where real_rate is the Fisher rate of the net monthly rate against the
monthly inflation derived directly from the inflation input.
"""

from typing import Any, Dict, List, Optional, Union

from apolo_calc.core.constants import MONTHS_PER_YEAR, RateCompounding
from apolo_calc.core.engine.base import ProjectionEngine
from apolo_calc.core.engine.contribution_scheduler import reference_escalation_rate
from apolo_calc.core.models.inputs import ProjectionInput
from apolo_calc.core.models.records import MonthlyRecord
from apolo_calc.utils.date_utils import DateInput, month_dates
from apolo_calc.utils.error_utils import error_handler, logger
from apolo_calc.utils.rate_utils import (
    annual_rate_from_input,
    fisher_rate,
    monthly_amount,
    monthly_rate_from_input,
)


class ReferenceProjectionEngine(ProjectionEngine):
    """
    Official month-by-month projection.

    Attributes:
        data: Validated projection input
        monthly_rate: Monthly return rate net of tax, as decimal
        monthly_inflation: Monthly inflation, as decimal
        escalation_rate: Monthly contribution escalation, as decimal
        real_rate: Monthly real rate (Fisher)
    """

    name = "reference"

    @error_handler
    def __init__(
        self,
        data: Union[ProjectionInput, Dict[str, Any]],
        start_date: Optional[DateInput] = None,
    ):
        super().__init__(start_date)
        self.data = ProjectionInput.from_dict(data)

        self.monthly_rate = monthly_rate_from_input(
            self.data.return_rate, self.data.return_rate_frequency, RateCompounding.EFFECTIVE
        )
        if self.data.include_tax:
            self.monthly_rate = self.monthly_rate * (1 - self.data.tax_rate / 100)

        self.monthly_inflation = monthly_rate_from_input(
            self.data.inflation, self.data.inflation_frequency, RateCompounding.EFFECTIVE
        )
        annual_inflation = annual_rate_from_input(self.data.inflation, self.data.inflation_frequency)

        # Real view keeps purchasing power, so contributions always follow inflation
        index_to_inflation = self.data.adjust_contributions_inflation or self.data.adjust_capital_inflation
        self.escalation_rate = reference_escalation_rate(
            annual_inflation, index_to_inflation, self.data.real_growth_contributions
        )

        self.real_rate = fisher_rate(self.monthly_rate, self.monthly_inflation)

    @error_handler
    def get_projection(self) -> List[MonthlyRecord]:
        """
        Calculate the monthly projection.

        Returns:
            One MonthlyRecord per month, months 1..application_period * 12;
            empty for a zero-year period
        """
        data = self.data
        total_months = data.application_period * MONTHS_PER_YEAR

        logger.debug(
            f"{self.name} engine: {total_months} months, monthly rate {self.monthly_rate}, "
            f"escalation {self.escalation_rate}, real rate {self.real_rate}"
        )

        accumulated = data.initial_capital
        accumulated_interest = 0.0
        value_total = data.initial_capital
        value_present = data.initial_capital
        real_accumulated = data.initial_capital
        current_contribution = monthly_amount(data.contribution, data.contribution_frequency)

        dates = month_dates(self.start_date, list(range(1, total_months + 1)))
        projections: List[MonthlyRecord] = []

        for month in range(1, total_months + 1):
            year = (month - 1) // MONTHS_PER_YEAR

            if self.escalation_rate > 0:
                current_contribution = current_contribution * (1 + self.escalation_rate)
            deposit = current_contribution

            interest = value_total * self.monthly_rate
            accumulated = accumulated + deposit
            accumulated_interest = accumulated_interest + interest
            value_total = value_total + interest + deposit

            value_present = (value_present + deposit) * (1 + self.real_rate)

            inflation_factor = (1 + self.monthly_inflation) ** month
            real_accumulated = real_accumulated + deposit / inflation_factor

            projections.append(
                MonthlyRecord(
                    month=month,
                    year=year,
                    month_of_year=(month - 1) % MONTHS_PER_YEAR,
                    age=data.current_age + year,
                    date=dates[month - 1],
                    contribution_nominal=deposit,
                    accumulated_nominal=accumulated,
                    interest=interest,
                    accumulated_interest=accumulated_interest,
                    balance_gross_nominal=value_total,
                    balance_after_tax_nominal=value_total,
                    real_balance=value_present,
                    real_accumulated=real_accumulated,
                    tax_amount=0.0,
                    inflation_factor=inflation_factor,
                    balance_exhibited=value_present if data.fix_inflation else value_total,
                )
            )

        return projections


@error_handler
def project_engine_b(
    data: Union[ProjectionInput, Dict[str, Any]],
    start_date: Optional[DateInput] = None,
) -> List[MonthlyRecord]:
    """Run the reference engine and return its monthly records."""
    return ReferenceProjectionEngine(data, start_date).get_projection()


# Module metadata
__version__ = "1.0.0"
__author__ = "Apolo Development Team"
__description__ = "Reference monthly projection engine for Apolo Calc"

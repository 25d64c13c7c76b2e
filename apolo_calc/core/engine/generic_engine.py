"""
Generic monthly projection engine.

Configurable engine used for exploratory studies. Iterates months 0..N
(month 0 holds the initial capital) under the conventions chosen in
CalculationOptions: rate compounding, deposit timing, contribution update
cadence, inflation display mode and rounding policy.

Reference-parity details that must be kept:
- Annual percentage inputs are rounded to 2 decimals before use.
- Monthly return rates are rounded to 6 decimals, and again after the tax
  reduction.
- Balances are re-quantized to 15 significant digits after every addition.
- Income tax is a permanent reduction of the monthly rate from month 1 in
  every tax mode, so ``tax_amount`` is always 0 and the after-tax balance
  equals the gross balance.
"""

from typing import Any, Dict, List, Optional, Tuple, Union

from apolo_calc.core.constants import (
    INPUT_PCT_DECIMALS,
    MONTHS_PER_YEAR,
    DepositTiming,
    InflationMode,
)
from apolo_calc.core.engine.base import ProjectionEngine
from apolo_calc.core.engine.contribution_scheduler import ContributionScheduler
from apolo_calc.core.models.inputs import CalculationOptions, ProjectionInput
from apolo_calc.core.models.records import MonthlyRecord
from apolo_calc.utils.date_utils import DateInput, month_dates
from apolo_calc.utils.error_utils import error_handler, logger
from apolo_calc.utils.rate_utils import (
    annual_rate_from_input,
    fisher_rate,
    monthly_amount,
    monthly_from_annual,
    monthly_rate_from_input,
    nominal_from_real,
)
from apolo_calc.utils.rounding_utils import (
    apply_rounding,
    quantize_rate,
    quantize_significant,
    round_half_up,
)


class GenericProjectionEngine(ProjectionEngine):
    """
    Configurable month-by-month projection.

    Attributes:
        data: Validated projection input
        options: Validated calculation options
        annual_inflation: Annual inflation as decimal
        monthly_inflation: Monthly inflation as decimal
        monthly_return_rate: Monthly return rate, 6 decimals
        effective_monthly_rate: Monthly return rate net of tax, 6 decimals
        real_monthly_rate: Fisher real rate used in deflate-both mode
        scheduler: Contribution scheduler for months 1..N
    """

    name = "generic"

    @error_handler
    def __init__(
        self,
        data: Union[ProjectionInput, Dict[str, Any]],
        options: Union[CalculationOptions, Dict[str, Any], None] = None,
        start_date: Optional[DateInput] = None,
    ):
        super().__init__(start_date)
        self.data = ProjectionInput.from_dict(data)
        self.options = CalculationOptions.from_dict(options)
        self._prepare_rates()

        self.scheduler = ContributionScheduler(
            base_contribution=monthly_amount(self.data.contribution, self.data.contribution_frequency),
            annual_inflation=self.annual_inflation,
            monthly_inflation=self.monthly_inflation,
            index_to_inflation=self.data.adjust_contributions_inflation,
            real_growth_pct=self.data.real_growth_contributions,
            cadence=self.options.contribution_update,
        )

    def _prepare_rates(self):
        mode = self.options.rate_compounding

        # Inputs are rounded to 2 decimals, as the reference form does
        inflation_pct = round_half_up(self.data.inflation, INPUT_PCT_DECIMALS)
        return_pct = round_half_up(self.data.return_rate, INPUT_PCT_DECIMALS)

        self.annual_inflation = annual_rate_from_input(inflation_pct, self.data.inflation_frequency, mode)
        self.monthly_inflation = monthly_rate_from_input(inflation_pct, self.data.inflation_frequency, mode)

        annual_return = annual_rate_from_input(return_pct, self.data.return_rate_frequency, mode)
        if self.options.inflation_mode == InflationMode.DEFLATE_BOTH:
            # The return rate is read as a real rate in deflate-both mode
            annual_return = nominal_from_real(annual_return, self.annual_inflation)

        self.monthly_return_rate = quantize_rate(monthly_from_annual(annual_return, mode))

        self.effective_monthly_rate = self.monthly_return_rate
        if self.data.include_tax:
            self.effective_monthly_rate = quantize_rate(
                self.monthly_return_rate * (1 - self.data.tax_rate / 100)
            )

        self.real_monthly_rate = fisher_rate(self.effective_monthly_rate, self.monthly_inflation)

    def _deposit(self, balance: float, accumulated: float, contribution: float) -> Tuple[float, float]:
        balance = quantize_significant(balance + contribution)
        accumulated = quantize_significant(accumulated + contribution)
        return balance, accumulated

    def _accrue(self, balance: float) -> Tuple[float, float]:
        interest = balance * self.effective_monthly_rate
        return quantize_significant(balance + interest), interest

    @error_handler
    def get_projection(self) -> List[MonthlyRecord]:
        """
        Calculate the monthly projection.

        Returns:
            One MonthlyRecord per month, months 0..application_period * 12
        """
        opts = self.options
        data = self.data
        total_months = data.application_period * MONTHS_PER_YEAR
        deflate = opts.inflation_mode == InflationMode.DEFLATE_BOTH

        logger.debug(
            f"{self.name} engine: {total_months} months, monthly rate {self.effective_monthly_rate}, "
            f"monthly inflation {self.monthly_inflation}, options {opts.model_dump(mode='json')}"
        )

        balance_nominal = data.initial_capital
        accumulated_nominal = data.initial_capital
        accumulated_interest = 0.0
        real_accumulated_running = data.initial_capital
        real_balance_running = data.initial_capital

        dates = month_dates(self.start_date, list(range(total_months + 1)))
        projections: List[MonthlyRecord] = []

        for month in range(total_months + 1):
            year = month // MONTHS_PER_YEAR
            is_final = month == total_months

            contribution_nominal = 0.0
            interest = 0.0
            if month > 0:
                contribution_nominal = apply_rounding(
                    self.scheduler.contribution_for(month), opts.rounding, is_final
                )

                if opts.deposit_timing == DepositTiming.START:
                    balance_nominal, accumulated_nominal = self._deposit(
                        balance_nominal, accumulated_nominal, contribution_nominal
                    )
                    balance_nominal, interest = self._accrue(balance_nominal)
                else:
                    balance_nominal, interest = self._accrue(balance_nominal)
                    balance_nominal, accumulated_nominal = self._deposit(
                        balance_nominal, accumulated_nominal, contribution_nominal
                    )

            balance_nominal = apply_rounding(balance_nominal, opts.rounding, is_final)
            accumulated_nominal = apply_rounding(accumulated_nominal, opts.rounding, is_final)
            accumulated_interest = apply_rounding(accumulated_interest + interest, opts.rounding, is_final)

            # Tax already reduced the rate; nothing is withheld here
            tax_amount = apply_rounding(0.0, opts.rounding, is_final)
            balance_after_tax_nominal = apply_rounding(balance_nominal, opts.rounding, is_final)

            inflation_factor = (1 + self.monthly_inflation) ** month if month > 0 else 1.0

            if month > 0 and deflate:
                real_accumulated_running += contribution_nominal / inflation_factor

            real_balance = balance_after_tax_nominal
            real_accumulated = accumulated_nominal
            if deflate:
                if month > 0:
                    real_balance_running = (real_balance_running + contribution_nominal) * (
                        1 + self.real_monthly_rate
                    )
                    real_balance = real_balance_running
                real_accumulated = real_accumulated_running

            real_balance = apply_rounding(real_balance, opts.rounding, is_final)
            real_accumulated = apply_rounding(real_accumulated, opts.rounding, is_final)

            if opts.inflation_mode == InflationMode.DEFLATE_BOTH:
                exhibited = real_balance
            elif opts.inflation_mode == InflationMode.DISPLAY_NOMINAL:
                exhibited = balance_after_tax_nominal
            else:
                exhibited = balance_nominal

            projections.append(
                MonthlyRecord(
                    month=month,
                    year=year,
                    month_of_year=month % MONTHS_PER_YEAR,
                    age=data.current_age + year,
                    date=dates[month],
                    contribution_nominal=data.initial_capital if month == 0 else contribution_nominal,
                    accumulated_nominal=accumulated_nominal,
                    interest=interest,
                    accumulated_interest=accumulated_interest,
                    balance_gross_nominal=balance_nominal,
                    balance_after_tax_nominal=balance_after_tax_nominal,
                    real_balance=real_balance,
                    real_accumulated=real_accumulated,
                    tax_amount=tax_amount,
                    inflation_factor=inflation_factor,
                    balance_exhibited=exhibited,
                )
            )

        return projections


@error_handler
def project_engine_a(
    data: Union[ProjectionInput, Dict[str, Any]],
    options: Union[CalculationOptions, Dict[str, Any], None] = None,
    start_date: Optional[DateInput] = None,
) -> List[MonthlyRecord]:
    """Run the generic engine and return its monthly records."""
    return GenericProjectionEngine(data, options, start_date).get_projection()


@error_handler
def generic_passive_income(
    records: List[MonthlyRecord],
    options: Union[CalculationOptions, Dict[str, Any], None] = None,
) -> float:
    """Monthly passive income at the configured rate on the last exhibited balance."""
    options = CalculationOptions.from_dict(options)
    if not records:
        return 0.0
    return records[-1].balance_exhibited * options.passive_income_rate / 100


# Module metadata
__version__ = "1.0.0"
__author__ = "Apolo Development Team"
__description__ = "Generic monthly projection engine for Apolo Calc"

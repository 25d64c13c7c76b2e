"""
Contribution scheduling for the projection engines.

Computes the nominal contribution due in a given month after inflation
indexation and real growth. Two cadences feed the generic engine:

    annual:  c = base * (1 + inflation)^y * (1 + growth)^y, y = month // 12
    monthly: c = base * (1 + monthly inflation)^m * (1 + monthly growth)^m,
             replayed factor by factor from month 1 on every request

The reference engine escalates differently: it combines the enabled annual
factors first, converts the product to one monthly rate and compounds the
running contribution by it every month. The two rules diverge numerically
and are kept apart on purpose.
"""

from apolo_calc.core.constants import MONTHS_PER_YEAR, ContributionUpdate
from apolo_calc.utils.error_utils import error_handler
from apolo_calc.utils.rate_utils import annual_pct_to_decimal, monthly_from_annual


def sanitize_real_growth(growth_pct: float) -> float:
    """
    Real contribution growth actually applied, in percent.

    Growth of 100% or more is treated as 0 and negative growth is clamped
    to 0.

    Examples:
        >>> sanitize_real_growth(2.0)
        2.0
        >>> sanitize_real_growth(150.0)
        0.0
        >>> sanitize_real_growth(-3.0)
        0.0
    """
    if growth_pct >= 100:
        return 0.0
    return max(0.0, float(growth_pct))


class ContributionScheduler:
    """
    Nominal contribution per month for the generic engine.

    Attributes:
        base_contribution: Monthly contribution before indexation
        annual_inflation: Annual inflation as decimal
        monthly_inflation: Monthly inflation as decimal
        index_to_inflation: Whether contributions follow inflation
        real_growth_pct: Sanitized real growth, annual %
        cadence: ANNUAL or MONTHLY recomputation
    """

    def __init__(
        self,
        base_contribution: float,
        annual_inflation: float,
        monthly_inflation: float,
        index_to_inflation: bool,
        real_growth_pct: float,
        cadence: ContributionUpdate = ContributionUpdate.ANNUAL,
    ):
        self.base_contribution = float(base_contribution)
        self.annual_inflation = annual_inflation
        self.monthly_inflation = monthly_inflation
        self.index_to_inflation = index_to_inflation
        self.real_growth_pct = sanitize_real_growth(real_growth_pct)
        self.cadence = ContributionUpdate(cadence)

        self.annual_growth = annual_pct_to_decimal(self.real_growth_pct)
        self.monthly_growth = monthly_from_annual(self.annual_growth)

    @error_handler
    def contribution_for(self, month: int) -> float:
        """
        Contribution due in ``month``.

        Month 0 carries the initial capital, which is never scheduled, so it
        returns 0.
        """
        if month <= 0:
            return 0.0
        if self.cadence == ContributionUpdate.MONTHLY:
            return self.monthly_contribution(month)
        return self.annual_contribution(month)

    def annual_contribution(self, month: int) -> float:
        """Contribution recomputed once per elapsed year."""
        years_elapsed = month // MONTHS_PER_YEAR
        contribution = self.base_contribution

        if self.index_to_inflation and years_elapsed > 0:
            contribution = self.base_contribution * (1 + self.annual_inflation) ** years_elapsed

        if self.real_growth_pct > 0 and years_elapsed > 0:
            contribution = contribution * (1 + self.annual_growth) ** years_elapsed

        return contribution

    def monthly_contribution(self, month: int) -> float:
        """Contribution escalated every month, replaying the whole chain."""
        contribution = self.base_contribution

        if self.index_to_inflation:
            for _ in range(month):
                contribution = contribution * (1 + self.monthly_inflation)

        if self.real_growth_pct > 0:
            for _ in range(month):
                contribution = contribution * (1 + self.monthly_growth)

        return contribution


@error_handler
def reference_escalation_rate(
    annual_inflation: float,
    index_to_inflation: bool,
    real_growth_pct: float,
) -> float:
    """
    Monthly escalation rate of the reference engine.

    The enabled annual factors are multiplied together first and only the
    product is converted to a monthly rate.

    Args:
        annual_inflation: Annual inflation as decimal
        index_to_inflation: Whether contributions follow inflation
        real_growth_pct: Real growth, annual %, sanitized here

    Returns:
        Monthly rate as decimal; 0 when nothing is enabled

    Examples:
        >>> reference_escalation_rate(0.0375, False, 0.0)
        0.0
        >>> round(reference_escalation_rate(0.0375, True, 1.0), 5)
        0.0039
    """
    combined_annual_factor = 1.0
    if index_to_inflation:
        combined_annual_factor *= 1 + annual_inflation

    growth_pct = sanitize_real_growth(real_growth_pct)
    if growth_pct > 0:
        combined_annual_factor *= 1 + annual_pct_to_decimal(growth_pct)

    return combined_annual_factor ** (1 / MONTHS_PER_YEAR) - 1


# Module metadata
__version__ = "1.0.0"
__author__ = "Apolo Development Team"
__description__ = "Contribution scheduling for Apolo Calc"

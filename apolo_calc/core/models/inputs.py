"""
Input records for the projection engines.

ProjectionInput is the plain record every engine consumes; CalculationOptions
configures the generic engine only. Both are frozen pydantic models built
fresh per calculation run.
"""

from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from apolo_calc.core.constants import (
    DEFAULT_PASSIVE_INCOME_RATE,
    MAX_PERIOD_YEARS,
    ContributionUpdate,
    DepositTiming,
    Frequency,
    InflationMode,
    RateCompounding,
    RoundingPolicy,
    TaxMode,
)
from apolo_calc.utils.error_utils import InvalidInputError
from apolo_calc.utils.rate_utils import normalize_rate_input


class BaseRecord(BaseModel):
    """Base model with common configuration."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        allow_inf_nan=False,
        use_enum_values=False,
    )


class ProjectionInput(BaseRecord):
    """
    Parameters of one wealth projection.

    Rates are percentages. Contribution growth is a real annual percentage;
    values of 100 or more are treated as 0 and negative values are clamped
    to 0 by the scheduler rather than rejected.
    """

    current_age: int = Field(default=0, ge=0)
    application_period: int = Field(..., ge=0, le=MAX_PERIOD_YEARS, description="Years to project")
    initial_capital: float = Field(default=0.0, ge=0)
    contribution: float = Field(default=0.0, ge=0)
    contribution_frequency: Frequency = Frequency.MONTHLY
    return_rate: float = Field(..., ge=0, description="Nominal return rate (%)")
    return_rate_frequency: Frequency = Frequency.YEARLY
    inflation: float = Field(default=0.0, ge=0, description="Inflation rate (%)")
    inflation_frequency: Frequency = Frequency.YEARLY
    adjust_capital_inflation: bool = False
    adjust_contributions_inflation: bool = False
    real_growth_contributions: float = Field(default=0.0, description="Real contribution growth (% a year)")
    include_tax: bool = False
    tax_rate: float = Field(default=0.0, ge=0, le=100)

    @field_validator("return_rate", "inflation", "real_growth_contributions", "tax_rate", mode="before")
    @classmethod
    def _normalize_rate(cls, value: Any) -> Any:
        if isinstance(value, str):
            return normalize_rate_input(value)
        return value

    @property
    def fix_inflation(self) -> bool:
        """Wealth is reported in real terms."""
        return self.adjust_capital_inflation

    @classmethod
    def from_dict(cls, data: Union[Dict[str, Any], "ProjectionInput"]) -> "ProjectionInput":
        """Validate a plain mapping, raising InvalidInputError on bad input."""
        if isinstance(data, cls):
            return data
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise InvalidInputError(f"Invalid projection input: {e.error_count()} error(s)", e.errors()) from e

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


class CalculationOptions(BaseRecord):
    """Conventions of the generic engine."""

    rate_compounding: RateCompounding = RateCompounding.EFFECTIVE
    deposit_timing: DepositTiming = DepositTiming.START
    contribution_update: ContributionUpdate = ContributionUpdate.ANNUAL
    inflation_mode: InflationMode = InflationMode.DISPLAY_NOMINAL
    tax_mode: TaxMode = TaxMode.NONE
    rounding: RoundingPolicy = RoundingPolicy.NONE
    passive_income_rate: float = Field(default=DEFAULT_PASSIVE_INCOME_RATE, ge=0, description="Monthly %")

    @classmethod
    def from_dict(cls, data: Union[Dict[str, Any], "CalculationOptions", None]) -> "CalculationOptions":
        """Validate a plain mapping; missing keys take the defaults."""
        if data is None:
            return cls()
        if isinstance(data, cls):
            return data
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise InvalidInputError(f"Invalid calculation options: {e.error_count()} error(s)", e.errors()) from e


def official_options(data: ProjectionInput) -> CalculationOptions:
    """
    Generic-engine options that mimic the reference engine.

    Real mode (capital indexed to inflation) switches to monthly contribution
    updates and deflated display, and the return rate is then read as a real
    rate.
    """
    is_real_mode = data.adjust_capital_inflation
    return CalculationOptions(
        rate_compounding=RateCompounding.EFFECTIVE,
        deposit_timing=DepositTiming.END,
        contribution_update=ContributionUpdate.MONTHLY if is_real_mode else ContributionUpdate.ANNUAL,
        inflation_mode=InflationMode.DEFLATE_BOTH if is_real_mode else InflationMode.DISPLAY_NOMINAL,
        tax_mode=TaxMode.ON_REDEMPTION if data.include_tax else TaxMode.NONE,
        rounding=RoundingPolicy.NONE,
        passive_income_rate=DEFAULT_PASSIVE_INCOME_RATE,
    )

"""
Tests for the projection input records and the official option preset.
"""

import sys
import os
import pytest
from pydantic import ValidationError

# Add repository root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from apolo_calc.core.constants import (
    ContributionUpdate,
    DepositTiming,
    Frequency,
    InflationMode,
    RateCompounding,
    RoundingPolicy,
    TaxMode,
)
from apolo_calc.core.models.inputs import CalculationOptions, ProjectionInput, official_options
from apolo_calc.utils.error_utils import InvalidInputError, ProjectionError


@pytest.fixture
def study_data():
    return {
        "current_age": 30,
        "application_period": 25,
        "initial_capital": 20000,
        "contribution": 2500,
        "return_rate": 10,
        "inflation": 3.75,
        "adjust_capital_inflation": True,
        "adjust_contributions_inflation": True,
        "real_growth_contributions": 1,
        "include_tax": True,
        "tax_rate": 15,
    }


def test_from_dict_valid(study_data):
    """Test building an input from a plain mapping."""
    data = ProjectionInput.from_dict(study_data)
    assert data.application_period == 25
    assert data.return_rate == 10.0
    assert data.contribution_frequency == Frequency.MONTHLY
    assert data.return_rate_frequency == Frequency.YEARLY
    assert data.fix_inflation is True


def test_from_dict_returns_instances_unchanged(study_data):
    """Test that validated inputs pass straight through."""
    data = ProjectionInput.from_dict(study_data)
    assert ProjectionInput.from_dict(data) is data


def test_rate_strings_are_normalized(study_data):
    """Test that percent strings with a decimal comma are accepted."""
    study_data["inflation"] = "3,75%"
    study_data["return_rate"] = "10"
    data = ProjectionInput.from_dict(study_data)
    assert data.inflation == 3.75
    assert data.return_rate == 10.0


@pytest.mark.parametrize(
    "field,value",
    [
        ("return_rate", -1),
        ("inflation", -0.5),
        ("application_period", -1),
        ("application_period", 51),
        ("current_age", -3),
        ("initial_capital", float("inf")),
        ("return_rate", float("nan")),
        ("tax_rate", 120),
    ],
)
def test_invalid_fields_are_rejected(study_data, field, value):
    """Test that malformed values fail fast instead of being clamped."""
    study_data[field] = value
    with pytest.raises(InvalidInputError) as exc_info:
        ProjectionInput.from_dict(study_data)
    assert isinstance(exc_info.value, ProjectionError)
    assert exc_info.value.details


def test_unknown_fields_are_rejected(study_data):
    """Test that unexpected keys are not silently ignored."""
    study_data["taxaDaAplicacao"] = 10
    with pytest.raises(InvalidInputError):
        ProjectionInput.from_dict(study_data)


def test_negative_growth_is_accepted(study_data):
    """Test that out-of-range growth is left for the scheduler to clamp."""
    study_data["real_growth_contributions"] = -5
    assert ProjectionInput.from_dict(study_data).real_growth_contributions == -5
    study_data["real_growth_contributions"] = 150
    assert ProjectionInput.from_dict(study_data).real_growth_contributions == 150


def test_input_is_frozen(study_data):
    """Test that inputs cannot be mutated after validation."""
    data = ProjectionInput.from_dict(study_data)
    with pytest.raises(ValidationError):
        data.return_rate = 12


def test_to_dict_round_trip(study_data):
    """Test serialization back to a mapping."""
    data = ProjectionInput.from_dict(study_data)
    dumped = data.to_dict()
    assert dumped["contribution_frequency"] == "monthly"
    assert ProjectionInput.from_dict(dumped) == data


def test_calculation_options_defaults():
    """Test the generic engine defaults."""
    options = CalculationOptions.from_dict(None)
    assert options.rate_compounding == RateCompounding.EFFECTIVE
    assert options.deposit_timing == DepositTiming.START
    assert options.contribution_update == ContributionUpdate.ANNUAL
    assert options.inflation_mode == InflationMode.DISPLAY_NOMINAL
    assert options.tax_mode == TaxMode.NONE
    assert options.rounding == RoundingPolicy.NONE
    assert options.passive_income_rate == 0.5


def test_calculation_options_from_strings():
    """Test options given as plain strings."""
    options = CalculationOptions.from_dict({"deposit_timing": "end", "inflation_mode": "display_deflate_both"})
    assert options.deposit_timing == DepositTiming.END
    assert options.inflation_mode == InflationMode.DEFLATE_BOTH


def test_calculation_options_invalid():
    """Test that unknown option values are rejected."""
    with pytest.raises(InvalidInputError):
        CalculationOptions.from_dict({"deposit_timing": "middle"})


def test_official_options_real_mode(study_data):
    """Test the preset for inputs reporting real wealth."""
    options = official_options(ProjectionInput.from_dict(study_data))
    assert options.rate_compounding == RateCompounding.EFFECTIVE
    assert options.deposit_timing == DepositTiming.END
    assert options.contribution_update == ContributionUpdate.MONTHLY
    assert options.inflation_mode == InflationMode.DEFLATE_BOTH
    assert options.tax_mode == TaxMode.ON_REDEMPTION
    assert options.rounding == RoundingPolicy.NONE


def test_official_options_nominal_mode(study_data):
    """Test the preset for inputs reporting nominal wealth."""
    study_data["adjust_capital_inflation"] = False
    study_data["include_tax"] = False
    options = official_options(ProjectionInput.from_dict(study_data))
    assert options.contribution_update == ContributionUpdate.ANNUAL
    assert options.inflation_mode == InflationMode.DISPLAY_NOMINAL
    assert options.tax_mode == TaxMode.NONE


if __name__ == "__main__":
    # Run tests with pytest if available
    try:
        pytest.main([__file__, "-v"])
    except SystemExit:
        pass

"""
Tests for the reference (official) projection engine.
"""

import sys
import os
import pytest

# Add repository root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from apolo_calc.core.engine.reference_engine import ReferenceProjectionEngine, project_engine_b
from apolo_calc.utils.error_utils import InvalidInputError


@pytest.fixture
def official_data():
    """Reference scenario with inflation, real growth and income tax."""
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


@pytest.fixture
def flat_data():
    """Nominal scenario without inflation, growth or tax."""
    return {
        "current_age": 45,
        "application_period": 2,
        "initial_capital": 10000,
        "contribution": 1000,
        "return_rate": 12,
        "inflation": 0,
        "include_tax": False,
        "tax_rate": 0,
    }


def test_months_start_at_one(official_data):
    """Test that there is no month-0 row."""
    records = project_engine_b(official_data)
    assert len(records) == 300
    assert records[0].month == 1
    assert records[-1].month == 300
    assert records[0].year == 0
    assert records[11].year == 0
    assert records[12].year == 1
    assert records[-1].year == 24
    assert records[-1].age == 54
    assert [r.month_of_year for r in records[:13]] == list(range(12)) + [0]


def test_reference_fixture(official_data):
    """Test final real wealth and contributions of the reference scenario."""
    final = project_engine_b(official_data)[-1]
    assert final.real_balance == pytest.approx(2_409_309, abs=1000)
    assert final.accumulated_nominal == pytest.approx(1_446_373, abs=1000)
    assert final.real_balance - final.accumulated_nominal == pytest.approx(962_936, abs=1000)
    assert final.balance_exhibited == final.real_balance


def test_rates(official_data):
    """Test the tax-reduced monthly rate and the Fisher real rate."""
    engine = ReferenceProjectionEngine(official_data)
    monthly_inflation = 1.0375 ** (1 / 12) - 1
    assert engine.monthly_rate == pytest.approx((1.1 ** (1 / 12) - 1) * 0.85)
    assert engine.monthly_inflation == pytest.approx(monthly_inflation)
    assert engine.escalation_rate == pytest.approx((1.0375 * 1.01) ** (1 / 12) - 1)
    assert engine.real_rate == pytest.approx((1 + engine.monthly_rate) / (1 + monthly_inflation) - 1)


def test_escalation_applies_from_month_one(official_data):
    """Test that the first contribution is already escalated."""
    engine = ReferenceProjectionEngine(official_data)
    records = engine.get_projection()
    assert records[0].contribution_nominal == pytest.approx(2500 * (1 + engine.escalation_rate))
    assert records[1].contribution_nominal == pytest.approx(2500 * (1 + engine.escalation_rate) ** 2)


def test_deposit_at_end_of_month(flat_data):
    """Test that interest is earned on the previous balance only."""
    engine = ReferenceProjectionEngine(flat_data)
    records = engine.get_projection()
    first = records[0]
    assert first.interest == pytest.approx(10000 * engine.monthly_rate)
    assert first.balance_gross_nominal == pytest.approx(10000 * (1 + engine.monthly_rate) + 1000)
    assert first.contribution_nominal == 1000


def test_flat_contributions_without_escalation(flat_data):
    """Test that contributions stay flat when nothing escalates them."""
    records = project_engine_b(flat_data)
    assert all(r.contribution_nominal == 1000 for r in records)
    assert records[-1].accumulated_nominal == 10000 + 24 * 1000


def test_nominal_wealth_is_exhibited(flat_data):
    """Test that nominal inputs exhibit the nominal balance."""
    final = project_engine_b(flat_data)[-1]
    assert final.balance_exhibited == final.balance_gross_nominal
    assert final.balance_after_tax_nominal == final.balance_gross_nominal
    assert final.tax_amount == 0.0


def test_balance_identity(official_data):
    """Test that the balance is capital plus contributions plus interest."""
    for record in project_engine_b(official_data):
        assert record.balance_gross_nominal == pytest.approx(
            record.accumulated_nominal + record.accumulated_interest, rel=1e-9
        )


def test_accumulated_contributions(official_data):
    """Test that accumulated contributions are non-decreasing sums of deposits."""
    records = project_engine_b(official_data)
    running = official_data["initial_capital"]
    previous = running
    for record in records:
        running += record.contribution_nominal
        assert record.accumulated_nominal >= previous
        assert record.accumulated_nominal == pytest.approx(running, rel=1e-12)
        previous = record.accumulated_nominal


def test_fixed_inflation_forces_indexation(official_data):
    """Test that real mode indexes contributions even when not asked to."""
    data = {**official_data, "adjust_contributions_inflation": False, "real_growth_contributions": 0}
    engine = ReferenceProjectionEngine(data)
    assert engine.escalation_rate == pytest.approx(1.0375 ** (1 / 12) - 1)

    nominal = {**data, "adjust_capital_inflation": False}
    assert ReferenceProjectionEngine(nominal).escalation_rate == 0.0


def test_invalid_growth_is_ignored(flat_data):
    """Test the growth clamps in the reference escalation."""
    for growth in (100, 250, -5):
        engine = ReferenceProjectionEngine({**flat_data, "real_growth_contributions": growth})
        assert engine.escalation_rate == 0.0


def test_real_accumulated_deflates_contributions(official_data):
    """Test the deflated running sum of contributions."""
    records = project_engine_b(official_data)
    first = records[0]
    assert first.inflation_factor == pytest.approx(1.0375 ** (1 / 12))
    assert first.real_accumulated == pytest.approx(20000 + first.contribution_nominal / first.inflation_factor)
    assert records[-1].real_accumulated < records[-1].accumulated_nominal


def test_zero_period(official_data):
    """Test that a zero period yields no records."""
    assert project_engine_b({**official_data, "application_period": 0}) == []


def test_dates(flat_data):
    """Test calendar dates of months 1..N."""
    records = project_engine_b(flat_data, start_date="2025-03-01")
    assert records[0].date.year == 2025
    assert records[0].date.month == 4
    assert records[-1].date.year == 2027
    assert records[-1].date.month == 3


def test_invalid_input_raises(official_data):
    """Test that malformed inputs fail fast."""
    with pytest.raises(InvalidInputError):
        project_engine_b({**official_data, "inflation": -1})
    with pytest.raises(InvalidInputError):
        project_engine_b({**official_data, "application_period": 60})


def test_to_dataframe(official_data):
    """Test the DataFrame view of a projection."""
    df = ReferenceProjectionEngine(official_data).to_dataframe()
    assert len(df) == 300
    assert df["month"].tolist() == list(range(1, 301))


if __name__ == "__main__":
    # Run tests with pytest if available
    try:
        pytest.main([__file__, "-v"])
    except SystemExit:
        pass

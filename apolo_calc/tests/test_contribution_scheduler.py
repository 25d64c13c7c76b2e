"""
Tests for contribution indexation and escalation.
"""

import sys
import os
import pytest

# Add repository root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from apolo_calc.core.constants import ContributionUpdate
from apolo_calc.core.engine.contribution_scheduler import (
    ContributionScheduler,
    reference_escalation_rate,
    sanitize_real_growth,
)

ANNUAL_INFLATION = 0.0375
MONTHLY_INFLATION = 1.0375 ** (1 / 12) - 1


def make_scheduler(index_to_inflation=True, growth=0.0, cadence=ContributionUpdate.ANNUAL):
    return ContributionScheduler(
        base_contribution=1000.0,
        annual_inflation=ANNUAL_INFLATION,
        monthly_inflation=MONTHLY_INFLATION,
        index_to_inflation=index_to_inflation,
        real_growth_pct=growth,
        cadence=cadence,
    )


def test_sanitize_real_growth():
    """Test the two documented growth clamps."""
    assert sanitize_real_growth(2.0) == 2.0
    assert sanitize_real_growth(0.0) == 0.0
    assert sanitize_real_growth(99.9) == 99.9
    assert sanitize_real_growth(100.0) == 0.0
    assert sanitize_real_growth(250.0) == 0.0
    assert sanitize_real_growth(-3.0) == 0.0


def test_month_zero_has_no_contribution():
    """Test that the initial capital month is never scheduled."""
    assert make_scheduler().contribution_for(0) == 0.0


def test_annual_cadence_steps_each_year():
    """Test that annual indexation changes at every multiple of 12."""
    scheduler = make_scheduler()
    assert scheduler.contribution_for(1) == 1000.0
    assert scheduler.contribution_for(11) == 1000.0
    assert scheduler.contribution_for(12) == pytest.approx(1037.5)
    assert scheduler.contribution_for(23) == pytest.approx(1037.5)
    assert scheduler.contribution_for(24) == pytest.approx(1000.0 * 1.0375 ** 2)


def test_annual_cadence_without_indexation():
    """Test flat contributions when nothing is enabled."""
    scheduler = make_scheduler(index_to_inflation=False)
    assert scheduler.contribution_for(1) == 1000.0
    assert scheduler.contribution_for(59) == 1000.0


def test_annual_cadence_with_growth():
    """Test that real growth compounds on top of inflation."""
    scheduler = make_scheduler(index_to_inflation=True, growth=2.0)
    assert scheduler.contribution_for(12) == pytest.approx(1000.0 * 1.0375 * 1.02)
    growth_only = make_scheduler(index_to_inflation=False, growth=2.0)
    assert growth_only.contribution_for(36) == pytest.approx(1000.0 * 1.02 ** 3)


def test_annual_cadence_ignores_invalid_growth():
    """Test that clamped growth leaves contributions unchanged."""
    assert make_scheduler(index_to_inflation=False, growth=150.0).contribution_for(24) == 1000.0
    assert make_scheduler(index_to_inflation=False, growth=-4.0).contribution_for(24) == 1000.0


def test_monthly_cadence_compounds_every_month():
    """Test the replayed monthly escalation chain."""
    scheduler = make_scheduler(cadence=ContributionUpdate.MONTHLY)
    assert scheduler.contribution_for(1) == pytest.approx(1000.0 * (1 + MONTHLY_INFLATION))
    assert scheduler.contribution_for(12) == pytest.approx(1037.5)
    assert scheduler.contribution_for(7) == pytest.approx(1000.0 * (1 + MONTHLY_INFLATION) ** 7)


def test_monthly_cadence_with_growth():
    """Test that monthly growth is the effective monthly equivalent."""
    scheduler = make_scheduler(index_to_inflation=False, growth=2.0, cadence=ContributionUpdate.MONTHLY)
    assert scheduler.contribution_for(12) == pytest.approx(1020.0)


def test_monthly_cadence_is_deterministic():
    """Test that replaying the chain gives the same value on every request."""
    scheduler = make_scheduler(growth=1.0, cadence=ContributionUpdate.MONTHLY)
    assert scheduler.contribution_for(100) == scheduler.contribution_for(100)


def test_reference_escalation_rate_disabled():
    """Test that no escalation is produced when nothing is enabled."""
    assert reference_escalation_rate(ANNUAL_INFLATION, False, 0.0) == 0.0
    assert reference_escalation_rate(ANNUAL_INFLATION, False, 100.0) == 0.0


def test_reference_escalation_rate_combines_factors():
    """Test that annual factors are combined before the monthly conversion."""
    rate = reference_escalation_rate(ANNUAL_INFLATION, True, 1.0)
    assert rate == pytest.approx((1.0375 * 1.01) ** (1 / 12) - 1)
    assert (1 + rate) ** 12 == pytest.approx(1.0375 * 1.01)
    assert reference_escalation_rate(ANNUAL_INFLATION, True, 0.0) == pytest.approx(MONTHLY_INFLATION)


if __name__ == "__main__":
    # Run tests with pytest if available
    try:
        pytest.main([__file__, "-v"])
    except SystemExit:
        pass

"""
Apolo Calc Core Engine Package.

Modules:
    generic_engine: Configurable projection engine (months 0..N)
    reference_engine: Official projection engine (months 1..N)
    contribution_scheduler: Contribution indexation and escalation
    metrics: Final wealth, passive income and milestone
    yearly_rollup: Yearly downsampling and tabulation
    comparison: Year-end cross-check of both engines
    wmap_study: WMAP contribution and window planning
"""

from apolo_calc.core.engine.base import ProjectionEngine
from apolo_calc.core.engine.generic_engine import (
    GenericProjectionEngine,
    generic_passive_income,
    project_engine_a,
)
from apolo_calc.core.engine.reference_engine import ReferenceProjectionEngine, project_engine_b
from apolo_calc.core.engine.contribution_scheduler import ContributionScheduler
from apolo_calc.core.engine.metrics import aggregate_metrics, find_first_milestone
from apolo_calc.core.engine.yearly_rollup import rollup_yearly, yearly_table
from apolo_calc.core.engine.comparison import compare_engines
from apolo_calc.core.engine.wmap_study import calculate_wmap_study

__all__ = [
    "ProjectionEngine",
    "GenericProjectionEngine",
    "ReferenceProjectionEngine",
    "ContributionScheduler",
    "project_engine_a",
    "project_engine_b",
    "generic_passive_income",
    "aggregate_metrics",
    "find_first_milestone",
    "rollup_yearly",
    "yearly_table",
    "compare_engines",
    "calculate_wmap_study",
]

__version__ = "1.0.0"
__author__ = "Apolo Development Team"

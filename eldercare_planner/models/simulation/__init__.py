"""
Scenario simulation module.

Key Components:
- engine: MonthlySimulator, the cash-flow waterfall and project_scenario()
- result: YearSnapshot, ScenarioProjection and the ResultsSampler
"""

from .engine import MonthlySimulator, apply_cash_flow, project_scenario
from .result import MonthlyCashFlow, ResultsSampler, ScenarioProjection, YearSnapshot

__all__ = [
    "MonthlySimulator",
    "apply_cash_flow",
    "project_scenario",
    "MonthlyCashFlow",
    "ResultsSampler",
    "ScenarioProjection",
    "YearSnapshot",
]

"""Data models and calculators for elder-care planning scenarios."""

from .scenario import (
    CareCostSchedule,
    CasitaProject,
    ConstructionProject,
    EconomicAssumptions,
    Household,
    PlannerConfig,
    RentalAssumption,
    ScenarioKind,
    ScenarioOptions,
    create_default_config,
)
from .amortization import LoanCalculator, LoanTerms
from .care_costs import CareCostModel, get_home_care_hours
from .rental_income import RentalBreakdown, RentalIncomeModel
from .scenario_setup import (
    SALE_PROCEEDS_FACTOR,
    ScenarioInitializer,
    ScenarioSetup,
    ScenarioState,
    TrackedLoan,
    auto_down_payment_percent,
    sale_proceeds,
)
from .time_grid import GrowthAdjuster, ProjectionGrid

__all__ = [
    "CareCostSchedule",
    "CasitaProject",
    "ConstructionProject",
    "EconomicAssumptions",
    "Household",
    "PlannerConfig",
    "RentalAssumption",
    "ScenarioKind",
    "ScenarioOptions",
    "create_default_config",
    "LoanCalculator",
    "LoanTerms",
    "CareCostModel",
    "get_home_care_hours",
    "RentalBreakdown",
    "RentalIncomeModel",
    "SALE_PROCEEDS_FACTOR",
    "ScenarioInitializer",
    "ScenarioSetup",
    "ScenarioState",
    "TrackedLoan",
    "auto_down_payment_percent",
    "sale_proceeds",
    "GrowthAdjuster",
    "ProjectionGrid",
]

"""
Projection service for comparing the three elder-care scenarios.

This service runs every scenario through the projection engine, compares each
against the care-facility baseline, and flags scenarios that accumulate care
debt. It also merges partial configuration payloads onto the defaults.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field

from eldercare_planner.models.care_costs import CareCostModel
from eldercare_planner.models.rental_income import RentalBreakdown, RentalIncomeModel
from eldercare_planner.models.scenario import (
    PlannerConfig,
    ScenarioKind,
    create_default_config,
)
from eldercare_planner.models.scenario_setup import auto_down_payment_percent
from eldercare_planner.models.simulation.engine import project_scenario
from eldercare_planner.models.simulation.result import ScenarioProjection
from eldercare_planner.models.time_grid import GrowthAdjuster

logger = logging.getLogger(__name__)

BASELINE_SCENARIO = ScenarioKind.FACILITY
SNAPSHOT_WINDOW_YEARS = 5


class WealthComparison(BaseModel):
    """Wealth of a scenario against the baseline at one snapshot year."""

    scenario: ScenarioKind = Field(..., description="Compared scenario")
    year: int = Field(..., description="Snapshot year")
    total_wealth: float = Field(..., description="Scenario total wealth")
    baseline_wealth: float = Field(..., description="Baseline total wealth")
    difference: float = Field(..., description="Scenario minus baseline")


class CareDebtAlert(BaseModel):
    """Warning for a scenario whose liquid assets run out."""

    scenario: ScenarioKind = Field(..., description="Affected scenario")
    peak_care_debt: float = Field(..., gt=0, description="Largest snapshot care debt")
    first_year: int = Field(..., description="First snapshot year with care debt")


class PlannerProjection(BaseModel):
    """Projections of all three scenarios with comparisons."""

    model_config = {"arbitrary_types_allowed": True}

    projections: Dict[ScenarioKind, ScenarioProjection] = Field(
        ..., description="Projection per scenario"
    )
    comparisons: List[WealthComparison] = Field(
        default_factory=list, description="Wealth versus the baseline"
    )
    alerts: List[CareDebtAlert] = Field(
        default_factory=list, description="Care debt warnings"
    )
    care_phases: Dict[int, List[str]] = Field(
        default_factory=dict, description="Facility care phases per snapshot window"
    )
    rental_breakdown: RentalBreakdown = Field(
        ..., description="Month-0 Gen1 rental figures"
    )
    auto_down_payment_percent: float = Field(
        ..., description="Automatic rebuild down payment (percent)"
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "scenarios": {
                kind.value: projection.to_dict()
                for kind, projection in self.projections.items()
            },
            "comparisons": [c.model_dump(mode="json") for c in self.comparisons],
            "alerts": [a.model_dump(mode="json") for a in self.alerts],
            "care_phases": {str(year): p for year, p in self.care_phases.items()},
            "rental_breakdown": {
                **self.rental_breakdown.model_dump(),
                "net_monthly": self.rental_breakdown.net_monthly,
            },
            "auto_down_payment_percent": self.auto_down_payment_percent,
        }


def compare_to_baseline(
    projections: Mapping[ScenarioKind, ScenarioProjection],
) -> List[WealthComparison]:
    """
    Compare every scenario's snapshots with the baseline scenario.

    Args:
        projections: Projection per scenario, including the baseline

    Returns:
        One comparison per scenario and snapshot year
    """
    baseline = projections[BASELINE_SCENARIO]
    comparisons = []
    for kind, projection in projections.items():
        for snapshot in projection.snapshots:
            baseline_snapshot = baseline.snapshot_for_year(snapshot.year)
            if baseline_snapshot is None:
                continue
            comparisons.append(
                WealthComparison(
                    scenario=kind,
                    year=snapshot.year,
                    total_wealth=snapshot.total_wealth,
                    baseline_wealth=baseline_snapshot.total_wealth,
                    difference=snapshot.total_wealth - baseline_snapshot.total_wealth,
                )
            )
    return comparisons


def find_care_debt_alerts(
    projections: Mapping[ScenarioKind, ScenarioProjection],
) -> List[CareDebtAlert]:
    """Flag scenarios with care debt at any snapshot."""
    alerts = []
    for kind, projection in projections.items():
        indebted = [s for s in projection.snapshots if s.care_debt > 0]
        if not indebted:
            continue
        alerts.append(
            CareDebtAlert(
                scenario=kind,
                peak_care_debt=max(s.care_debt for s in indebted),
                first_year=indebted[0].year,
            )
        )
    return alerts


def merge_config(overrides: Optional[Mapping[str, Any]] = None) -> PlannerConfig:
    """
    Build a configuration from defaults and a partial override payload.

    Args:
        overrides: Nested mapping of fields to replace

    Returns:
        Validated PlannerConfig

    Raises:
        pydantic.ValidationError: If the merged configuration is invalid
    """
    merged = create_default_config().model_dump(mode="json")
    _deep_update(merged, overrides or {})
    return PlannerConfig.model_validate(merged)


def _deep_update(target: Dict[str, Any], updates: Mapping[str, Any]) -> None:
    for key, value in updates.items():
        if isinstance(value, Mapping) and isinstance(target.get(key), dict):
            _deep_update(target[key], value)
        else:
            target[key] = value


class ProjectionService:
    """Service for running and comparing all three scenarios."""

    def __init__(self, enable_detailed_logging: bool = False) -> None:
        """Initialize the projection service."""
        self.enable_detailed_logging = enable_detailed_logging
        self.logger = logging.getLogger(__name__)

    def project_all(self, config: PlannerConfig) -> PlannerProjection:
        """Run all three scenarios.

        Args:
            config: Planner configuration

        Returns:
            PlannerProjection with comparisons and alerts

        Raises:
            Exception: If a scenario fails to project
        """
        self.logger.info("Starting projection of all scenarios")
        projections: Dict[ScenarioKind, ScenarioProjection] = {}
        for kind in ScenarioKind:
            try:
                projections[kind] = project_scenario(
                    config,
                    kind,
                    enable_detailed_logging=self.enable_detailed_logging,
                )
            except Exception as e:
                self.logger.error(f"Projection of {kind.value} failed: {str(e)}")
                raise
            final = projections[kind].snapshots[-1]
            self.logger.info(
                f"Projected {kind.value}: year {final.year} wealth "
                f"{final.total_wealth:,.0f}"
            )

        alerts = find_care_debt_alerts(projections)
        for alert in alerts:
            self.logger.warning(
                f"{alert.scenario.value} accrues care debt by year {alert.first_year}"
            )

        care_model = CareCostModel(
            schedule=config.care_costs,
            casita=config.casita,
            inflation=GrowthAdjuster(
                annual_rate_percent=config.economics.inflation_percent
            ),
        )
        rental_model = RentalIncomeModel(
            assumption=config.rental,
            inflation=GrowthAdjuster(
                annual_rate_percent=config.economics.inflation_percent
            ),
        )
        baseline = projections[BASELINE_SCENARIO]
        care_phases = {
            s.year: care_model.care_phases(s.year - SNAPSHOT_WINDOW_YEARS + 1, s.year)
            for s in baseline.snapshots
        }

        return PlannerProjection(
            projections=projections,
            comparisons=compare_to_baseline(projections),
            alerts=alerts,
            care_phases=care_phases,
            rental_breakdown=rental_model.breakdown(config.gen1.real_estate_value),
            auto_down_payment_percent=auto_down_payment_percent(
                config, config.rebuild_options.rent_gen1_home
            ),
        )

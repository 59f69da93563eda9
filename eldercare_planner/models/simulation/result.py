"""
Projection result models.

This module holds the immutable outputs of a projection run:

1. YearSnapshot summaries taken every five years
2. The per-month numpy trace of wealth, cash flow and care cost
3. The ResultsSampler that collects both while the simulator runs
"""

from typing import Any, Dict, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..scenario import ScenarioKind
from ..scenario_setup import ScenarioSetup, ScenarioState
from ..time_grid import MONTHS_PER_YEAR, ProjectionGrid


class YearSnapshot(BaseModel):
    """Summary of a scenario's balance sheet at the end of a year."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=1, description="Years since the start of the projection")
    total_wealth: float = Field(..., description="Assets less all debts")
    combined_home_value: float = Field(..., description="Real estate of both households")
    combined_liquid: float = Field(..., description="Liquid assets of both households")
    care_debt: float = Field(..., ge=0, description="Unsecured care debt")
    cumulative_cash_flow: float = Field(..., description="Sum of monthly net cash flow")
    annualized_care_cost: float = Field(
        ..., ge=0, description="Care cost of the final month times twelve"
    )


class MonthlyCashFlow(BaseModel):
    """Cash flow components of a single simulated month."""

    model_config = ConfigDict(frozen=True)

    month: int = Field(..., ge=0, description="Zero-based month index")
    income: float = Field(..., description="Income including net rent")
    rental_income: float = Field(default=0, description="Net rent included in income")
    expenses: float = Field(..., description="Living expenses")
    care_cost: float = Field(..., description="Care cost")
    debt_service: float = Field(..., description="Scheduled loan payments")

    @property
    def net_cash_flow(self) -> float:
        return self.income - self.expenses - self.debt_service - self.care_cost


class ScenarioProjection(BaseModel):
    """Full output of one scenario run."""

    kind: ScenarioKind = Field(..., description="Scenario that was projected")
    setup: ScenarioSetup = Field(..., description="Initial transactions")
    snapshots: Tuple[YearSnapshot, ...] = Field(
        ..., description="Snapshots at years 5, 10 and 15"
    )
    monthly_wealth: NDArray[np.float64] = Field(
        ..., description="Total wealth at the end of each month"
    )
    monthly_net_cash_flow: NDArray[np.float64] = Field(
        ..., description="Net cash flow of each month"
    )
    monthly_care_cost: NDArray[np.float64] = Field(
        ..., description="Care cost of each month"
    )
    final_state: ScenarioState = Field(..., description="Balances after the last month")

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @field_validator("monthly_wealth", "monthly_net_cash_flow", "monthly_care_cost")
    @classmethod
    def validate_trace_shape(cls, v: NDArray) -> NDArray:
        """Monthly traces are one value per month."""
        if v.ndim != 1:
            raise ValueError(f"Monthly trace must be 1-dimensional, got {v.ndim}D")
        return v

    @property
    def months(self) -> int:
        return int(self.monthly_wealth.shape[0])

    def snapshot_for_year(self, year: int) -> Optional[YearSnapshot]:
        """Get the snapshot taken at the end of `year`, if any."""
        for snapshot in self.snapshots:
            if snapshot.year == year:
                return snapshot
        return None

    def get_annual_net_cash_flow(self) -> NDArray[np.float64]:
        """Net cash flow summed by projection year."""
        return self.monthly_net_cash_flow.reshape(-1, MONTHS_PER_YEAR).sum(axis=1)

    def get_wealth_statistics(self) -> Dict[str, float]:
        """Summary statistics of the monthly wealth path."""
        return {
            "min_wealth": float(np.min(self.monthly_wealth)),
            "max_wealth": float(np.max(self.monthly_wealth)),
            "final_wealth": float(self.monthly_wealth[-1]),
            "deficit_months": int(np.sum(self.monthly_net_cash_flow < 0)),
            "total_care_cost": float(np.sum(self.monthly_care_cost)),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "scenario": self.kind.value,
            "label": self.kind.label,
            "setup": self.setup.model_dump(mode="json", exclude={"loans", "state"}),
            "snapshots": [s.model_dump() for s in self.snapshots],
            "annual_net_cash_flow": self.get_annual_net_cash_flow().tolist(),
            "statistics": self.get_wealth_statistics(),
        }


class ResultsSampler:
    """Collects snapshots and monthly traces while a scenario runs."""

    def __init__(self, grid: Optional[ProjectionGrid] = None):
        self.grid = grid or ProjectionGrid()
        self.snapshots: List[YearSnapshot] = []
        self.monthly_wealth = np.zeros(self.grid.total_months)
        self.monthly_net_cash_flow = np.zeros(self.grid.total_months)
        self.monthly_care_cost = np.zeros(self.grid.total_months)

    def should_sample(self, month: int) -> bool:
        """Whether a snapshot is due at the end of `month`."""
        return self.grid.is_snapshot_month(month)

    def capture(self, state: ScenarioState, month: int, care_cost: float) -> YearSnapshot:
        """
        Take a snapshot of the state at the end of `month`.

        Args:
            state: Balances after the month's waterfall
            month: Zero-based month index
            care_cost: Care cost charged in that month

        Returns:
            The recorded YearSnapshot
        """
        snapshot = YearSnapshot(
            year=(month + 1) // MONTHS_PER_YEAR,
            total_wealth=state.total_wealth(),
            combined_home_value=state.combined_home_value,
            combined_liquid=state.combined_liquid,
            care_debt=state.care_debt,
            cumulative_cash_flow=state.cumulative_cash_flow,
            annualized_care_cost=care_cost * MONTHS_PER_YEAR,
        )
        self.snapshots.append(snapshot)
        return snapshot

    def record(self, state: ScenarioState, cash_flow: MonthlyCashFlow) -> None:
        """Record the monthly trace values for one month."""
        self.monthly_wealth[cash_flow.month] = state.total_wealth()
        self.monthly_net_cash_flow[cash_flow.month] = cash_flow.net_cash_flow
        self.monthly_care_cost[cash_flow.month] = cash_flow.care_cost

    def build(
        self, kind: ScenarioKind, setup: ScenarioSetup, state: ScenarioState
    ) -> ScenarioProjection:
        """Assemble the projection once every month has run."""
        return ScenarioProjection(
            kind=kind,
            setup=setup,
            snapshots=tuple(self.snapshots),
            monthly_wealth=self.monthly_wealth,
            monthly_net_cash_flow=self.monthly_net_cash_flow,
            monthly_care_cost=self.monthly_care_cost,
            final_state=state,
        )

"""
Monthly simulator for elder-care scenarios.

The simulator advances a ScenarioState through the projection horizon one month
at a time: annual compounding, income, expenses, care cost, debt service,
care-debt interest, and finally the cash-flow waterfall across the two
households.
"""

import logging
from typing import Optional

from ..care_costs import CareCostModel
from ..rental_income import RentalIncomeModel
from ..scenario import PlannerConfig, ScenarioKind, ScenarioOptions
from ..scenario_setup import ScenarioInitializer, ScenarioSetup, ScenarioState
from ..time_grid import MONTHS_PER_YEAR, GrowthAdjuster, ProjectionGrid
from .result import MonthlyCashFlow, ResultsSampler, ScenarioProjection

logger = logging.getLogger(__name__)


def apply_cash_flow(state: ScenarioState, net_cash_flow: float) -> None:
    """
    Settle one month's net cash flow against the households' liquid assets.

    A deficit is drawn from Gen1 liquid first, then Gen2 liquid; whatever both
    cannot cover becomes unsecured care debt. A surplus goes to Gen2 liquid.

    Args:
        state: Balances to update in place
        net_cash_flow: Income less all outflows for the month
    """
    if net_cash_flow >= 0:
        state.gen2_liquid += net_cash_flow
        return

    deficit = -net_cash_flow
    if state.gen1_liquid >= deficit:
        state.gen1_liquid -= deficit
    elif state.gen1_liquid > 0:
        remaining = deficit - state.gen1_liquid
        state.gen1_liquid = 0.0
        if state.gen2_liquid >= remaining:
            state.gen2_liquid -= remaining
        else:
            state.care_debt += remaining - state.gen2_liquid
            state.gen2_liquid = 0.0
    elif state.gen2_liquid >= deficit:
        state.gen2_liquid -= deficit
    else:
        state.care_debt += deficit - state.gen2_liquid
        state.gen2_liquid = 0.0


class MonthlySimulator:
    """Advances one scenario through the projection horizon."""

    def __init__(
        self,
        config: PlannerConfig,
        setup: ScenarioSetup,
        grid: Optional[ProjectionGrid] = None,
        enable_detailed_logging: bool = False,
    ):
        """Initialize the simulator.

        Args:
            config: Planner configuration
            setup: Initial state and loans from ScenarioInitializer
            grid: Projection grid (defaults to 15 years)
            enable_detailed_logging: Log every month at DEBUG level
        """
        self.config = config
        self.setup = setup
        self.kind = setup.kind
        self.grid = grid or ProjectionGrid()
        self.enable_detailed_logging = enable_detailed_logging
        self.state = setup.state.model_copy()

        economics = config.economics
        self.cpi = GrowthAdjuster(annual_rate_percent=economics.inflation_percent)
        self.income_growth = GrowthAdjuster(
            annual_rate_percent=economics.income_growth_percent
        )
        self.investment_growth = GrowthAdjuster(
            annual_rate_percent=economics.investment_return_percent
        )
        self.home_growth = GrowthAdjuster(
            annual_rate_percent=economics.home_appreciation_percent
        )
        self.care_costs = CareCostModel(
            schedule=config.care_costs, casita=config.casita, inflation=self.cpi
        )
        self.rental = RentalIncomeModel(assumption=config.rental, inflation=self.cpi)
        self.care_debt_monthly_rate = config.gen2.other_debt_rate / 100 / MONTHS_PER_YEAR

    def _compound_annually(self) -> None:
        state = self.state
        if state.gen1_real_estate > 0:
            state.gen1_real_estate = self.home_growth.compound_annually(
                state.gen1_real_estate
            )
        if state.gen2_real_estate > 0:
            state.gen2_real_estate = self.home_growth.compound_annually(
                state.gen2_real_estate
            )
        state.gen1_liquid = self.investment_growth.compound_annually(state.gen1_liquid)
        state.gen2_liquid = self.investment_growth.compound_annually(state.gen2_liquid)

    def _rental_income(self, month: int) -> float:
        if not self.setup.rent_gen1_home or self.state.gen1_real_estate <= 0:
            return 0.0
        annual = self.rental.net_rental_income(self.state.gen1_real_estate, month)
        return annual / MONTHS_PER_YEAR

    def _expenses(self, month: int) -> float:
        expenses = self.cpi.adjust(self.config.gen2.monthly_expenses, month)
        if self.kind is not ScenarioKind.FACILITY:
            running_costs = self.config.casita.running_costs_annual
            expenses += self.cpi.adjust(running_costs, month) / MONTHS_PER_YEAR
        return expenses

    def _service_debts(self, month: int) -> float:
        debt_service = 0.0
        for loan in self.setup.loans:
            if getattr(self.state, loan.balance_field) > 0:
                debt_service += loan.terms.monthly_payment()
                setattr(
                    self.state,
                    loan.balance_field,
                    loan.terms.remaining_balance(month + 1),
                )
        return debt_service

    def advance(self, month: int) -> MonthlyCashFlow:
        """
        Simulate a single month.

        Args:
            month: Zero-based month index

        Returns:
            The month's cash flow components
        """
        if self.grid.is_compounding_month(month):
            self._compound_annually()

        base_income = self.config.gen1.monthly_income + self.config.gen2.monthly_income
        rental_income = self._rental_income(month)
        income = self.income_growth.adjust(base_income, month) + rental_income
        expenses = self._expenses(month)
        care_cost = self.care_costs.monthly_care_cost(self.kind, month)
        debt_service = self._service_debts(month)

        if self.state.care_debt > 0:
            self.state.care_debt *= 1 + self.care_debt_monthly_rate

        cash_flow = MonthlyCashFlow(
            month=month,
            income=income,
            rental_income=rental_income,
            expenses=expenses,
            care_cost=care_cost,
            debt_service=debt_service,
        )
        net_cash_flow = cash_flow.net_cash_flow
        self.state.cumulative_cash_flow += net_cash_flow
        apply_cash_flow(self.state, net_cash_flow)

        if self.enable_detailed_logging:
            logger.debug(
                f"{self.kind.value} month {month}: net {net_cash_flow:,.2f}, "
                f"liquid {self.state.combined_liquid:,.2f}, "
                f"care debt {self.state.care_debt:,.2f}"
            )
        return cash_flow

    def run(self) -> ScenarioProjection:
        """Simulate every month of the grid and collect the results."""
        sampler = ResultsSampler(self.grid)
        for month in self.grid.months():
            cash_flow = self.advance(month)
            sampler.record(self.state, cash_flow)
            if sampler.should_sample(month):
                sampler.capture(self.state, month, cash_flow.care_cost)
        return sampler.build(self.kind, self.setup, self.state)


def project_scenario(
    config: PlannerConfig,
    kind: ScenarioKind,
    options: Optional[ScenarioOptions] = None,
    enable_detailed_logging: bool = False,
) -> ScenarioProjection:
    """
    Run one scenario from setup through the full projection.

    Args:
        config: Planner configuration
        kind: Scenario to project
        options: Scenario options (defaults to the config's options for `kind`)
        enable_detailed_logging: Log every month at DEBUG level

    Returns:
        ScenarioProjection with snapshots at years 5, 10 and 15
    """
    if options is None:
        options = config.options_for(kind)
    elif options.kind is not kind:
        raise ValueError(f"Options are for {options.kind.value}, not {kind.value}")

    setup = ScenarioInitializer(config).initialize(options)
    simulator = MonthlySimulator(
        config, setup, enable_detailed_logging=enable_detailed_logging
    )
    return simulator.run()

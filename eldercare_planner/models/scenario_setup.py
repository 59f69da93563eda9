"""
Scenario initialization for elder-care planning.

Each scenario starts from the same two household balance sheets and applies
one-time transactions: selling homes, financing a casita, or buying a new home
with pooled sale proceeds. The result is the mutable state the monthly
simulator advances, plus the loans it has to service.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .amortization import LoanTerms
from .scenario import Household, PlannerConfig, ScenarioKind, ScenarioOptions

# 6% transaction costs plus 3% holding and repairs.
SALE_PROCEEDS_FACTOR = 0.91

DEBT_FIELDS = (
    "gen1_other_debt",
    "gen2_other_debt",
    "gen1_mortgage",
    "gen2_mortgage",
    "casita_debt",
    "new_home_mortgage",
    "care_debt",
)


class ScenarioState(BaseModel):
    """Balances of both households during one projection run."""

    gen1_real_estate: float = 0.0
    gen2_real_estate: float = 0.0
    gen1_liquid: float = 0.0
    gen2_liquid: float = 0.0
    gen1_other_debt: float = 0.0
    gen2_other_debt: float = 0.0
    gen1_mortgage: float = 0.0
    gen2_mortgage: float = 0.0
    casita_debt: float = 0.0
    new_home_mortgage: float = 0.0
    care_debt: float = 0.0
    cumulative_cash_flow: float = 0.0

    @property
    def combined_home_value(self) -> float:
        return self.gen1_real_estate + self.gen2_real_estate

    @property
    def combined_liquid(self) -> float:
        return self.gen1_liquid + self.gen2_liquid

    def total_assets(self) -> float:
        """Real estate plus liquid assets of both households."""
        return self.combined_home_value + self.combined_liquid

    def total_debt(self) -> float:
        """All loan balances including unsecured care debt."""
        return sum(getattr(self, name) for name in DEBT_FIELDS)

    def total_wealth(self) -> float:
        """Combined net worth."""
        return self.total_assets() - self.total_debt()


class TrackedLoan(BaseModel):
    """A state balance paired with the terms it amortizes under."""

    model_config = ConfigDict(frozen=True)

    balance_field: str = Field(..., description="ScenarioState attribute name")
    terms: LoanTerms = Field(..., description="Origination terms")


class ScenarioSetup(BaseModel):
    """Starting state of a scenario and the transactions that produced it."""

    kind: ScenarioKind = Field(..., description="Scenario being set up")
    rent_gen1_home: bool = Field(..., description="Gen1 home rented out")
    state: ScenarioState = Field(..., description="Initial balances")
    loans: List[TrackedLoan] = Field(
        default_factory=list, description="Loans serviced each month"
    )
    gen1_sale_proceeds: float = Field(default=0, description="Net Gen1 sale proceeds")
    gen2_sale_proceeds: float = Field(default=0, description="Net Gen2 sale proceeds")
    down_payment_percent: Optional[float] = Field(
        default=None, description="Down payment applied to the build (percent)"
    )
    down_payment_amount: float = Field(default=0, description="Down payment paid")
    financed_amount: float = Field(default=0, description="Construction debt taken")
    excess_liquid: float = Field(
        default=0, description="Sale proceeds left after the down payment"
    )


def sale_proceeds(household: Household) -> float:
    """Net cash from selling a household's home after costs and payoff."""
    return household.real_estate_value * SALE_PROCEEDS_FACTOR - household.mortgage_balance


def auto_down_payment_percent(config: PlannerConfig, rent_gen1_home: bool) -> float:
    """
    Down payment the pooled sale proceeds cover in the rebuild scenario.

    Args:
        config: Planner configuration
        rent_gen1_home: Whether the Gen1 home is kept as a rental

    Returns:
        Percent of the new-home cost, capped at 100
    """
    total_proceeds = sale_proceeds(config.gen2)
    if not rent_gen1_home:
        total_proceeds += sale_proceeds(config.gen1)
    if config.new_home.build_cost <= 0:
        return 100.0
    return min(100.0, total_proceeds / config.new_home.build_cost * 100)


class ScenarioInitializer:
    """Builds the starting state for each scenario."""

    def __init__(self, config: PlannerConfig):
        self.config = config

    def initialize(self, options: ScenarioOptions) -> ScenarioSetup:
        """
        Apply the one-time transactions of a scenario.

        Args:
            options: Scenario kind, rental flag and optional override

        Returns:
            ScenarioSetup with initial state and serviced loans
        """
        gen1 = self.config.gen1
        gen2 = self.config.gen2
        state = ScenarioState(
            gen1_real_estate=gen1.real_estate_value,
            gen2_real_estate=gen2.real_estate_value,
            gen1_liquid=gen1.liquid_assets,
            gen2_liquid=gen2.liquid_assets,
            gen1_other_debt=gen1.other_debt_balance,
            gen2_other_debt=gen2.other_debt_balance,
            gen1_mortgage=gen1.mortgage_balance,
            gen2_mortgage=gen2.mortgage_balance,
        )
        setup = ScenarioSetup(
            kind=options.kind, rent_gen1_home=options.rent_gen1_home, state=state
        )

        if options.kind is ScenarioKind.FACILITY:
            if not options.rent_gen1_home:
                self._sell_gen1_home(setup)
        elif options.kind is ScenarioKind.CASITA:
            if not options.rent_gen1_home:
                self._sell_gen1_home(setup)
            self._finance_casita(setup)
        elif options.kind is ScenarioKind.REBUILD:
            self._sell_and_rebuild(setup, options)
        else:
            raise ValueError(f"Unknown scenario kind: {options.kind}")

        setup.loans = self._tracked_loans(setup)
        return setup

    def _sell_gen1_home(self, setup: ScenarioSetup) -> None:
        proceeds = sale_proceeds(self.config.gen1)
        setup.gen1_sale_proceeds = proceeds
        setup.state.gen1_liquid += proceeds
        setup.state.gen1_real_estate = 0.0
        setup.state.gen1_mortgage = 0.0

    def _finance_casita(self, setup: ScenarioSetup) -> None:
        casita = self.config.casita
        setup.down_payment_percent = casita.down_payment_percent
        setup.down_payment_amount = casita.down_payment_amount
        setup.financed_amount = casita.financed_amount
        setup.state.casita_debt = casita.financed_amount
        setup.state.gen2_liquid -= casita.down_payment_amount
        setup.state.gen2_real_estate += casita.build_cost

    def _sell_and_rebuild(self, setup: ScenarioSetup, options: ScenarioOptions) -> None:
        state = setup.state
        gen2_proceeds = sale_proceeds(self.config.gen2)
        setup.gen2_sale_proceeds = gen2_proceeds
        state.gen2_real_estate = 0.0
        state.gen2_mortgage = 0.0
        total_proceeds = gen2_proceeds

        if not options.rent_gen1_home:
            gen1_proceeds = sale_proceeds(self.config.gen1)
            setup.gen1_sale_proceeds = gen1_proceeds
            total_proceeds += gen1_proceeds
            state.gen1_real_estate = 0.0
            state.gen1_mortgage = 0.0

        if options.manual_down_payment_percent is not None:
            down_payment_percent = options.manual_down_payment_percent
        else:
            down_payment_percent = auto_down_payment_percent(
                self.config, options.rent_gen1_home
            )

        build_cost = self.config.new_home.build_cost
        down_payment_amount = build_cost * down_payment_percent / 100
        setup.down_payment_percent = down_payment_percent
        setup.down_payment_amount = down_payment_amount
        setup.financed_amount = build_cost - down_payment_amount
        setup.excess_liquid = total_proceeds - down_payment_amount

        state.new_home_mortgage = setup.financed_amount
        state.gen2_real_estate = build_cost
        state.gen2_liquid += setup.excess_liquid

    def _tracked_loans(self, setup: ScenarioSetup) -> List[TrackedLoan]:
        gen1 = self.config.gen1
        gen2 = self.config.gen2
        loans = [
            TrackedLoan(
                balance_field="gen1_other_debt",
                terms=LoanTerms(
                    principal=gen1.other_debt_balance,
                    annual_rate_percent=gen1.other_debt_rate,
                    term_years=gen1.other_debt_term,
                ),
            ),
            TrackedLoan(
                balance_field="gen2_other_debt",
                terms=LoanTerms(
                    principal=gen2.other_debt_balance,
                    annual_rate_percent=gen2.other_debt_rate,
                    term_years=gen2.other_debt_term,
                ),
            ),
            TrackedLoan(
                balance_field="gen1_mortgage",
                terms=LoanTerms(
                    principal=gen1.mortgage_balance,
                    annual_rate_percent=gen1.mortgage_rate,
                    term_years=gen1.mortgage_term,
                ),
            ),
        ]
        if setup.kind is not ScenarioKind.REBUILD:
            loans.append(
                TrackedLoan(
                    balance_field="gen2_mortgage",
                    terms=LoanTerms(
                        principal=gen2.mortgage_balance,
                        annual_rate_percent=gen2.mortgage_rate,
                        term_years=gen2.mortgage_term,
                    ),
                )
            )
        if setup.kind is ScenarioKind.CASITA:
            casita = self.config.casita
            loans.append(
                TrackedLoan(
                    balance_field="casita_debt",
                    terms=LoanTerms(
                        principal=casita.financed_amount,
                        annual_rate_percent=casita.financing_rate,
                        term_years=casita.financing_term_years,
                    ),
                )
            )
        if setup.kind is ScenarioKind.REBUILD:
            new_home = self.config.new_home
            loans.append(
                TrackedLoan(
                    balance_field="new_home_mortgage",
                    terms=LoanTerms(
                        principal=setup.financed_amount,
                        annual_rate_percent=new_home.financing_rate,
                        term_years=new_home.financing_term_years,
                    ),
                )
            )
        return loans

"""
Pydantic models for elder-care planning scenarios.

This module defines the configuration bundle consumed by the projection
engine: the two households, care cost tiers, construction projects, rental
and economic assumptions, and the per-scenario options. Rates are annual
percentages and terms are whole years.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ScenarioKind(str, Enum):
    """The three mutually exclusive restructuring plans."""

    FACILITY = "facility"
    CASITA = "casita"
    REBUILD = "rebuild"

    @property
    def label(self) -> str:
        return _SCENARIO_LABELS[self]


_SCENARIO_LABELS = {
    ScenarioKind.FACILITY: "Scenario A: Care Facility",
    ScenarioKind.CASITA: "Scenario B: Casita",
    ScenarioKind.REBUILD: "Scenario C: Sell Both & Rebuild",
}


class Household(BaseModel):
    """Balance sheet and cash flows of one generation."""

    model_config = ConfigDict(frozen=True)

    real_estate_value: float = Field(default=0, ge=0, description="Home value")
    mortgage_balance: float = Field(
        default=0, ge=0, description="Outstanding mortgage balance"
    )
    mortgage_rate: float = Field(
        default=0, ge=0, le=100, description="Mortgage rate (annual percent)"
    )
    mortgage_term: int = Field(
        default=0, ge=0, le=50, description="Remaining mortgage term in years"
    )
    liquid_assets: float = Field(
        default=0, ge=0, description="Investable liquid assets"
    )
    monthly_income: float = Field(default=0, ge=0, description="Monthly income")
    monthly_expenses: float = Field(
        default=0, ge=0, description="Monthly living expenses"
    )
    other_debt_balance: float = Field(
        default=0, ge=0, description="Non-mortgage debt balance"
    )
    other_debt_rate: float = Field(
        default=0, ge=0, le=100, description="Other debt rate (annual percent)"
    )
    other_debt_term: int = Field(
        default=0, ge=0, le=50, description="Other debt term in years"
    )


class CareCostSchedule(BaseModel):
    """Facility care tiers and the years spent in each."""

    model_config = ConfigDict(frozen=True)

    independent_cost: float = Field(
        ..., ge=0, description="Annual independent living cost"
    )
    assisted_cost: float = Field(..., ge=0, description="Annual assisted living cost")
    skilled_cost: float = Field(..., ge=0, description="Annual skilled nursing cost")
    total_years: int = Field(..., ge=0, description="Total projected years of care")
    years_independent: int = Field(
        ..., ge=0, description="Years before moving to assisted living"
    )
    years_assisted: int = Field(
        ..., ge=0, description="Years before moving to skilled nursing"
    )

    @model_validator(mode="after")
    def validate_tier_years(self):
        if self.years_independent + self.years_assisted > self.total_years:
            raise ValueError(
                "years_independent + years_assisted must not exceed total_years"
            )
        return self

    @property
    def years_skilled(self) -> int:
        """Years of skilled nursing, the remainder of the schedule."""
        return self.total_years - self.years_independent - self.years_assisted


class ConstructionProject(BaseModel):
    """A financed build (the new home in the rebuild scenario)."""

    model_config = ConfigDict(frozen=True)

    build_cost: float = Field(..., ge=0, description="Total construction cost")
    down_payment_percent: float = Field(
        default=20, ge=0, le=100, description="Down payment (percent of cost)"
    )
    financing_rate: float = Field(
        default=0, ge=0, le=100, description="Financing rate (annual percent)"
    )
    financing_term_years: int = Field(
        default=0, ge=0, le=50, description="Financing term in years"
    )

    @property
    def down_payment_amount(self) -> float:
        return self.build_cost * self.down_payment_percent / 100

    @property
    def financed_amount(self) -> float:
        return self.build_cost * (1 - self.down_payment_percent / 100)


class CasitaProject(ConstructionProject):
    """Backyard casita with in-home care and household running costs."""

    home_care_year1_budget: float = Field(
        default=0, ge=0, description="First-year in-home care budget (3 h/week)"
    )
    food_annual: float = Field(default=0, ge=0, description="Annual food cost")
    utilities_annual: float = Field(
        default=0, ge=0, description="Annual utilities cost"
    )

    @property
    def running_costs_annual(self) -> float:
        return self.food_annual + self.utilities_annual


class RentalAssumption(BaseModel):
    """Assumptions for renting out the Gen1 home."""

    model_config = ConfigDict(frozen=True)

    monthly_rent: float = Field(default=0, ge=0, description="Gross monthly rent")
    occupancy_percent: float = Field(
        default=100, ge=0, le=100, description="Occupancy rate (percent)"
    )
    management_fee_percent: float = Field(
        default=0, ge=0, le=100, description="Management fee (percent of rent)"
    )
    tax_insurance_percent: float = Field(
        default=0, ge=0, description="Tax and insurance (percent of home value)"
    )
    maintenance_percent: float = Field(
        default=0, ge=0, description="Maintenance (percent of home value)"
    )


class EconomicAssumptions(BaseModel):
    """Annual economic rates, all in percent."""

    model_config = ConfigDict(frozen=True)

    inflation_percent: float = Field(default=3, ge=0, le=100, description="CPI")
    investment_return_percent: float = Field(
        default=6, ge=0, le=100, description="Return on liquid assets"
    )
    home_appreciation_percent: float = Field(
        default=3.5, ge=0, le=100, description="Real estate appreciation"
    )
    income_growth_percent: float = Field(
        default=2, ge=0, le=100, description="Income growth"
    )


class ScenarioOptions(BaseModel):
    """Per-scenario switches."""

    model_config = ConfigDict(frozen=True)

    kind: ScenarioKind = Field(..., description="Which restructuring plan")
    rent_gen1_home: bool = Field(
        default=False, description="Rent out the Gen1 home instead of selling it"
    )
    manual_down_payment_percent: Optional[float] = Field(
        default=None,
        ge=0,
        le=100,
        description="Override for the automatic new-home down payment",
    )


class PlannerConfig(BaseModel):
    """Complete input bundle for a three-scenario projection."""

    model_config = ConfigDict(frozen=True)

    gen1: Household = Field(..., description="Elder generation household")
    gen2: Household = Field(..., description="Adult-children household")
    care_costs: CareCostSchedule = Field(..., description="Facility care tiers")
    casita: CasitaProject = Field(..., description="Casita construction project")
    new_home: ConstructionProject = Field(
        ..., description="Replacement home for the rebuild scenario"
    )
    rental: RentalAssumption = Field(
        default_factory=RentalAssumption, description="Gen1 rental assumptions"
    )
    economics: EconomicAssumptions = Field(
        default_factory=EconomicAssumptions, description="Economic rates"
    )
    facility_options: ScenarioOptions = Field(
        default_factory=lambda: ScenarioOptions(kind=ScenarioKind.FACILITY)
    )
    casita_options: ScenarioOptions = Field(
        default_factory=lambda: ScenarioOptions(kind=ScenarioKind.CASITA)
    )
    rebuild_options: ScenarioOptions = Field(
        default_factory=lambda: ScenarioOptions(kind=ScenarioKind.REBUILD)
    )

    @model_validator(mode="after")
    def validate_scenario_kinds(self):
        for options, kind in (
            (self.facility_options, ScenarioKind.FACILITY),
            (self.casita_options, ScenarioKind.CASITA),
            (self.rebuild_options, ScenarioKind.REBUILD),
        ):
            if options.kind is not kind:
                raise ValueError(f"Options for {kind.value} have kind {options.kind}")
        return self

    def options_for(self, kind: ScenarioKind) -> ScenarioOptions:
        """Get the options of one scenario."""
        if kind is ScenarioKind.FACILITY:
            return self.facility_options
        if kind is ScenarioKind.CASITA:
            return self.casita_options
        if kind is ScenarioKind.REBUILD:
            return self.rebuild_options
        raise ValueError(f"Unknown scenario kind: {kind}")


def create_default_config() -> PlannerConfig:
    """Create the default planning configuration."""
    return PlannerConfig(
        gen1=Household(
            real_estate_value=400000,
            liquid_assets=300000,
            monthly_income=3000,
            monthly_expenses=2000,
            other_debt_rate=6,
            other_debt_term=10,
        ),
        gen2=Household(
            real_estate_value=800000,
            liquid_assets=1500000,
            monthly_income=8000,
            monthly_expenses=5000,
            other_debt_rate=6,
            other_debt_term=10,
        ),
        care_costs=CareCostSchedule(
            independent_cost=37000,
            assisted_cost=72000,
            skilled_cost=131000,
            total_years=15,
            years_independent=3,
            years_assisted=5,
        ),
        casita=CasitaProject(
            build_cost=200000,
            down_payment_percent=20,
            financing_rate=6.5,
            financing_term_years=15,
            home_care_year1_budget=3432,
            food_annual=4800,
            utilities_annual=1800,
        ),
        new_home=ConstructionProject(
            build_cost=1000000,
            down_payment_percent=20,
            financing_rate=6.5,
            financing_term_years=30,
        ),
        rental=RentalAssumption(
            monthly_rent=2500,
            occupancy_percent=95,
            management_fee_percent=10,
            tax_insurance_percent=2.5,
            maintenance_percent=1,
        ),
        economics=EconomicAssumptions(
            inflation_percent=3,
            investment_return_percent=6,
            home_appreciation_percent=3.5,
            income_growth_percent=2,
        ),
    )

"""
Rental income model for the Gen1 home.

Net rental income is gross rent after vacancy, less a management fee on
collected rent and less tax/insurance and maintenance charged as a share of
the home's value. Income never goes below zero.
"""

from pydantic import BaseModel, ConfigDict, Field

from .scenario import RentalAssumption
from .time_grid import MONTHS_PER_YEAR, GrowthAdjuster


class RentalBreakdown(BaseModel):
    """Month-0 rental figures, in annual dollars unless noted."""

    gross_annual: float = Field(..., description="Gross annual rent")
    effective_annual: float = Field(..., description="Rent after occupancy loss")
    management_fee: float = Field(..., description="Management fee")
    tax_insurance: float = Field(..., description="Property tax and insurance")
    maintenance: float = Field(..., description="Maintenance")
    operating_margin: float = Field(
        ..., description="Effective rent less all costs, may be negative"
    )
    net_annual: float = Field(..., ge=0, description="Net annual income (floored)")

    @property
    def net_monthly(self) -> float:
        return self.net_annual / MONTHS_PER_YEAR


class RentalIncomeModel(BaseModel):
    """Computes net rental income for a home of a given value."""

    model_config = ConfigDict(frozen=True)

    assumption: RentalAssumption = Field(..., description="Rental assumptions")
    inflation: GrowthAdjuster = Field(..., description="CPI adjuster")

    def _components(self, home_value: float, multiplier: float) -> RentalBreakdown:
        gross_annual = self.assumption.monthly_rent * MONTHS_PER_YEAR * multiplier
        effective_annual = gross_annual * self.assumption.occupancy_percent / 100
        management_fee = effective_annual * self.assumption.management_fee_percent / 100
        tax_insurance = (
            home_value * self.assumption.tax_insurance_percent / 100 * multiplier
        )
        maintenance = home_value * self.assumption.maintenance_percent / 100 * multiplier
        margin = effective_annual - management_fee - tax_insurance - maintenance
        return RentalBreakdown(
            gross_annual=gross_annual,
            effective_annual=effective_annual,
            management_fee=management_fee,
            tax_insurance=tax_insurance,
            maintenance=maintenance,
            operating_margin=margin,
            net_annual=max(0.0, margin),
        )

    def net_rental_income(self, home_value: float, elapsed_months: int) -> float:
        """
        Net annual rental income for the given month.

        Args:
            home_value: Current value of the rented home
            elapsed_months: Months since the start of the projection

        Returns:
            Annual net income, floored at zero
        """
        multiplier = self.inflation.multiplier(elapsed_months)
        return self._components(home_value, multiplier).net_annual

    def breakdown(self, home_value: float) -> RentalBreakdown:
        """Static month-0 breakdown without inflation."""
        return self._components(home_value, 1.0)

"""
Care cost schedules for elder-care planning.

Two models are provided: a tiered facility model (independent, assisted and
skilled nursing phases) and an in-home care model whose weekly hours escalate
over the first six years. Both are inflation adjusted with a fractional-year
exponent.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .scenario import CareCostSchedule, CasitaProject, ScenarioKind
from .time_grid import MONTHS_PER_YEAR, GrowthAdjuster

WEEKS_PER_YEAR = 52

# Weekly in-home care hours by care year; year 6 onward stays at the last value.
HOME_CARE_WEEKLY_HOURS = (3, 5, 7, 10, 14, 17)

PHASE_INDEPENDENT = "Independent Living"
PHASE_ASSISTED = "Assisted Living"
PHASE_SKILLED = "Skilled Nursing"


def get_home_care_hours(care_year: int) -> int:
    """Weekly home care hours for a 1-based care year."""
    if care_year <= 1:
        return HOME_CARE_WEEKLY_HOURS[0]
    index = min(care_year, len(HOME_CARE_WEEKLY_HOURS)) - 1
    return HOME_CARE_WEEKLY_HOURS[index]


class CareCostModel(BaseModel):
    """Monthly care cost lookup for every scenario."""

    model_config = ConfigDict(frozen=True)

    schedule: CareCostSchedule = Field(..., description="Facility care tiers")
    casita: CasitaProject = Field(..., description="In-home care budget source")
    inflation: GrowthAdjuster = Field(..., description="CPI adjuster")

    def facility_base_cost(self, elapsed_months: int) -> float:
        """Annual tier cost in base-year dollars for the given month."""
        elapsed_year = elapsed_months // MONTHS_PER_YEAR
        if elapsed_year < self.schedule.years_independent:
            return self.schedule.independent_cost
        if elapsed_year < self.schedule.years_independent + self.schedule.years_assisted:
            return self.schedule.assisted_cost
        return self.schedule.skilled_cost

    def facility_monthly_cost(self, elapsed_months: int) -> float:
        """
        Inflated monthly facility cost.

        Args:
            elapsed_months: Months since the start of the projection

        Returns:
            Monthly cost of the active care tier
        """
        annual = self.inflation.adjust(
            self.facility_base_cost(elapsed_months), elapsed_months
        )
        return annual / MONTHS_PER_YEAR

    @property
    def home_care_hourly_rate(self) -> float:
        """Hourly rate implied by the year-1 budget at 3 hours a week."""
        return self.casita.home_care_year1_budget / (
            HOME_CARE_WEEKLY_HOURS[0] * WEEKS_PER_YEAR
        )

    def home_care_annual_cost(self, elapsed_months: int) -> float:
        """
        Inflated annualized in-home care cost for the given month.

        Args:
            elapsed_months: Months since the start of the projection

        Returns:
            Annual cost at the weekly hours of the current care year
        """
        care_year = elapsed_months // MONTHS_PER_YEAR + 1
        hours = get_home_care_hours(care_year)
        annual = hours * WEEKS_PER_YEAR * self.home_care_hourly_rate
        return self.inflation.adjust(annual, elapsed_months)

    def monthly_care_cost(self, kind: ScenarioKind, elapsed_months: int) -> float:
        """Care cost charged in one month of the given scenario."""
        if kind is ScenarioKind.FACILITY:
            return self.facility_monthly_cost(elapsed_months)
        return self.home_care_annual_cost(elapsed_months) / MONTHS_PER_YEAR

    def care_phases(self, start_year: int, end_year: int) -> List[str]:
        """
        Care phases covered by a window of 1-based years.

        Years beyond the schedule's total are ignored.

        Args:
            start_year: First year of the window
            end_year: Last year of the window (inclusive)

        Returns:
            Phase names in order of first appearance
        """
        phases: List[str] = []
        last_year = min(end_year, self.schedule.total_years)
        for year in range(start_year, last_year + 1):
            if year <= self.schedule.years_independent:
                phase = PHASE_INDEPENDENT
            elif year <= self.schedule.years_independent + self.schedule.years_assisted:
                phase = PHASE_ASSISTED
            else:
                phase = PHASE_SKILLED
            if phase not in phases:
                phases.append(phase)
        return phases

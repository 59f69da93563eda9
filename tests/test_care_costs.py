"""
Tests for facility and in-home care cost schedules.
"""

import pytest

from eldercare_planner.models.care_costs import (
    PHASE_ASSISTED,
    PHASE_INDEPENDENT,
    PHASE_SKILLED,
    CareCostModel,
    get_home_care_hours,
)
from eldercare_planner.models.scenario import ScenarioKind
from eldercare_planner.models.time_grid import GrowthAdjuster


@pytest.fixture
def care_model(default_config):
    """Care cost model at the default 3% inflation."""
    return CareCostModel(
        schedule=default_config.care_costs,
        casita=default_config.casita,
        inflation=GrowthAdjuster(annual_rate_percent=3),
    )


@pytest.fixture
def flat_care_model(default_config):
    """Care cost model without inflation."""
    return CareCostModel(
        schedule=default_config.care_costs,
        casita=default_config.casita,
        inflation=GrowthAdjuster(annual_rate_percent=0),
    )


class TestFacilityCost:
    """Test the tiered facility cost lookup."""

    def test_first_month_is_independent_tier(self, care_model):
        """Month 0 costs the independent tier."""
        assert care_model.facility_monthly_cost(0) == pytest.approx(37000 / 12)

    @pytest.mark.parametrize(
        "month,expected",
        [
            (0, 37000),
            (35, 37000),
            (36, 72000),
            (95, 72000),
            (96, 131000),
            (179, 131000),
        ],
    )
    def test_tier_boundaries(self, flat_care_model, month, expected):
        """Tiers switch at the configured year boundaries."""
        assert flat_care_model.facility_base_cost(month) == expected
        assert flat_care_model.facility_monthly_cost(month) == pytest.approx(expected / 12)

    def test_inflation_uses_fractional_exponent(self, care_model):
        """Costs inflate smoothly within a year."""
        assert care_model.facility_monthly_cost(6) == pytest.approx(
            37000 * 1.03 ** 0.5 / 12
        )
        assert care_model.facility_monthly_cost(40) == pytest.approx(
            72000 * 1.03 ** (40 / 12) / 12
        )


class TestHomeCareCost:
    """Test the escalating in-home care model."""

    @pytest.mark.parametrize(
        "year,hours", [(0, 3), (1, 3), (2, 5), (3, 7), (4, 10), (5, 14), (6, 17), (12, 17)]
    )
    def test_weekly_hours(self, year, hours):
        """Home-care hours escalate by year."""
        assert get_home_care_hours(year) == hours

    def test_hourly_rate_from_year1_budget(self, care_model):
        """The hourly rate spreads the year-1 budget over 156 hours."""
        assert care_model.home_care_hourly_rate == pytest.approx(3432 / 156)

    def test_year1_cost_matches_budget(self, care_model):
        """Year-1 home care costs the year-1 budget."""
        assert care_model.home_care_annual_cost(0) == pytest.approx(3432)

    def test_year6_cost_without_inflation(self, flat_care_model):
        """Seventeen hours a week from year six onward."""
        expected = 17 * 52 * 3432 / 156
        assert flat_care_model.home_care_annual_cost(60) == pytest.approx(expected)
        assert flat_care_model.home_care_annual_cost(179) == pytest.approx(expected)

    def test_inflated_year2_cost(self, care_model):
        """Year-2 home care uses five hours a week and inflation."""
        expected = 5 * 52 * (3432 / 156) * 1.03 ** (15 / 12)
        assert care_model.home_care_annual_cost(15) == pytest.approx(expected)


class TestMonthlyCareCost:
    """Test scenario-dependent care cost selection."""

    def test_facility_uses_tiers(self, care_model):
        """Scenario A pays the facility tiers."""
        assert care_model.monthly_care_cost(ScenarioKind.FACILITY, 10) == pytest.approx(
            care_model.facility_monthly_cost(10)
        )

    @pytest.mark.parametrize("kind", [ScenarioKind.CASITA, ScenarioKind.REBUILD])
    def test_home_scenarios_use_home_care(self, care_model, kind):
        """Scenarios B and C pay for home care."""
        assert care_model.monthly_care_cost(kind, 10) == pytest.approx(
            care_model.home_care_annual_cost(10) / 12
        )


class TestCarePhases:
    """Test care phase labelling of year windows."""

    def test_first_window(self, care_model):
        """Years 1-5 span independent and assisted care."""
        assert care_model.care_phases(1, 5) == [PHASE_INDEPENDENT, PHASE_ASSISTED]

    def test_second_window(self, care_model):
        """Years 6-10 span assisted and skilled care."""
        assert care_model.care_phases(6, 10) == [PHASE_ASSISTED, PHASE_SKILLED]

    def test_last_window(self, care_model):
        """Years 11-15 are skilled care only."""
        assert care_model.care_phases(11, 15) == [PHASE_SKILLED]

    def test_years_past_total_are_ignored(self, care_model):
        """Years beyond the care horizon have no phase."""
        assert care_model.care_phases(16, 20) == []

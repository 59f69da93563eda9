"""
Tests for the Gen1 rental income model.
"""

import pytest

from eldercare_planner.models.rental_income import RentalIncomeModel
from eldercare_planner.models.scenario import RentalAssumption
from eldercare_planner.models.time_grid import GrowthAdjuster


@pytest.fixture
def rental_model(default_config):
    return RentalIncomeModel(
        assumption=default_config.rental,
        inflation=GrowthAdjuster(annual_rate_percent=3),
    )


class TestNetRentalIncome:
    """Test net rental income."""

    def test_month_zero_income(self, rental_model):
        """Default rent on a $400k home."""
        # 30,000 gross, 28,500 effective, 2,850 fee, 10,000 tax, 4,000 upkeep
        assert rental_model.net_rental_income(400000, 0) == pytest.approx(11650)

    def test_income_is_inflated(self, rental_model):
        """Rent and costs inflate with the same multiplier."""
        multiplier = 1.03 ** 2
        expected = (28500 - 2850) * multiplier - 14000 * multiplier
        assert rental_model.net_rental_income(400000, 24) == pytest.approx(expected)

    @pytest.mark.parametrize("maintenance", [10, 50, 500])
    def test_never_negative(self, maintenance):
        """Oversized costs floor income at zero."""
        model = RentalIncomeModel(
            assumption=RentalAssumption(
                monthly_rent=1000,
                occupancy_percent=50,
                management_fee_percent=100,
                tax_insurance_percent=25,
                maintenance_percent=maintenance,
            ),
            inflation=GrowthAdjuster(annual_rate_percent=3),
        )

        for month in (0, 59, 179):
            assert model.net_rental_income(900000, month) == 0

    def test_zero_home_value(self, rental_model):
        """Without a home value only rent-linked costs apply."""
        assert rental_model.net_rental_income(0, 0) == pytest.approx(25650)


class TestRentalBreakdown:
    """Test the static month-0 breakdown."""

    def test_breakdown_components(self, rental_model):
        """Breakdown reports each rental component."""
        breakdown = rental_model.breakdown(400000)

        assert breakdown.gross_annual == pytest.approx(30000)
        assert breakdown.effective_annual == pytest.approx(28500)
        assert breakdown.management_fee == pytest.approx(2850)
        assert breakdown.tax_insurance == pytest.approx(10000)
        assert breakdown.maintenance == pytest.approx(4000)
        assert breakdown.net_annual == pytest.approx(11650)
        assert breakdown.net_monthly == pytest.approx(11650 / 12)

    def test_breakdown_ignores_inflation(self, rental_model):
        """Breakdown uses month-0 figures."""
        assert rental_model.breakdown(400000).net_annual == pytest.approx(
            rental_model.net_rental_income(400000, 0)
        )

    def test_negative_margin_is_reported_but_floored(self, rental_model):
        """Negative margins are shown while net income floors at zero."""
        breakdown = rental_model.breakdown(2000000)

        assert breakdown.operating_margin < 0
        assert breakdown.net_annual == 0

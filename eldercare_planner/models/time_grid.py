"""
Projection horizon and growth adjustment for elder-care planning.

The projection runs in monthly ticks. Costs and incomes are scaled with a
continuous fractional-year exponent, while balances compound once at each
year boundary.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

MONTHS_PER_YEAR = 12
PROJECTION_YEARS = 15
PROJECTION_MONTHS = PROJECTION_YEARS * MONTHS_PER_YEAR
SNAPSHOT_INTERVAL_MONTHS = 60


class ProjectionGrid(BaseModel):
    """Monthly time grid for a projection run."""

    model_config = ConfigDict(frozen=True)

    years: int = Field(
        default=PROJECTION_YEARS, ge=1, le=100, description="Projection length"
    )
    snapshot_interval_months: int = Field(
        default=SNAPSHOT_INTERVAL_MONTHS,
        ge=MONTHS_PER_YEAR,
        description="Months between result snapshots (whole years)",
    )

    @field_validator("snapshot_interval_months")
    @classmethod
    def validate_whole_years(cls, v: int) -> int:
        """Snapshots fall on year boundaries."""
        if v % MONTHS_PER_YEAR != 0:
            raise ValueError(
                f"snapshot_interval_months must be a multiple of {MONTHS_PER_YEAR}"
            )
        return v

    @property
    def total_months(self) -> int:
        """Number of monthly ticks in the projection."""
        return self.years * MONTHS_PER_YEAR

    def months(self) -> range:
        """Zero-based month indices of the projection."""
        return range(self.total_months)

    @staticmethod
    def elapsed_years(month: int) -> float:
        """Fractional years elapsed at the start of `month`."""
        return month / MONTHS_PER_YEAR

    @staticmethod
    def is_compounding_month(month: int) -> bool:
        """Whether annual compounding applies at the start of `month`."""
        return month > 0 and month % MONTHS_PER_YEAR == 0

    def is_snapshot_month(self, month: int) -> bool:
        """Whether a snapshot is taken at the end of `month`."""
        return (month + 1) % self.snapshot_interval_months == 0


class GrowthAdjuster(BaseModel):
    """Scales base-month amounts by an annual percentage rate."""

    model_config = ConfigDict(frozen=True)

    annual_rate_percent: float = Field(
        ..., description="Annual growth or inflation rate (percent)"
    )

    def multiplier(self, elapsed_months: int) -> float:
        """
        Growth factor after `elapsed_months`, using a fractional-year exponent.

        Args:
            elapsed_months: Months since the start of the projection

        Returns:
            (1 + rate) ** (elapsed_months / 12)
        """
        return (1 + self.annual_rate_percent / 100) ** ProjectionGrid.elapsed_years(
            elapsed_months
        )

    def adjust(self, amount: float, elapsed_months: int) -> float:
        """Scale `amount` from month 0 to `elapsed_months`."""
        return amount * self.multiplier(elapsed_months)

    def compound_annually(self, amount: float) -> float:
        """Apply one full year of growth to `amount`."""
        return amount * (1 + self.annual_rate_percent / 100)

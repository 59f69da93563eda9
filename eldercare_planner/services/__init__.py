"""Services coordinating projection runs."""

from .projection_service import (
    CareDebtAlert,
    PlannerProjection,
    ProjectionService,
    WealthComparison,
    compare_to_baseline,
    find_care_debt_alerts,
    merge_config,
)

__all__ = [
    "CareDebtAlert",
    "PlannerProjection",
    "ProjectionService",
    "WealthComparison",
    "compare_to_baseline",
    "find_care_debt_alerts",
    "merge_config",
]

"""Data contracts for the projection and comparison endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field

from fundcompare.core.projection import LedgerEntry
from fundcompare.core.summary import ComparisonSummary, FundSummary
from fundcompare.core.views import FundSelector, PeriodFilter
from fundcompare.models import ComparisonPlan, ProjectionPlan


class ProjectionRequest(ProjectionPlan):
    """A single fund projection plus the rows to display."""

    periodFilter: PeriodFilter = Field(
        PeriodFilter.ALL,
        description="Which months to return; the summary always covers the full horizon.",
    )


class ComparisonRequest(ComparisonPlan):
    """Both fund offers plus display controls."""

    fundSelector: FundSelector = Field(FundSelector.BOTH, description="Which fund ledgers to return.")
    periodFilter: PeriodFilter = Field(PeriodFilter.ALL, description="Which months to return.")

    def to_plan(self) -> ComparisonPlan:
        return ComparisonPlan.model_validate(
            self.model_dump(exclude={"fundSelector", "periodFilter"})
        )


class FundView(BaseModel):
    entries: List[LedgerEntry]
    summary: FundSummary


class ProjectionResponse(FundView):
    pass


class ComparisonResponse(BaseModel):
    years: int
    fundA: Optional[FundView] = None
    fundB: Optional[FundView] = None
    comparison: ComparisonSummary

from __future__ import annotations

import logging
from typing import List

from pydantic import BaseModel, ConfigDict

from fundcompare.core.projection import LedgerEntry, project
from fundcompare.core.summary import ComparisonSummary, FundSummary, compare, summarize_ledger
from fundcompare.core.views import FundSelector, PeriodFilter, filter_periods, selected_funds
from fundcompare.models import ComparisonPlan
from fundcompare.schemas.comparison import ComparisonResponse, FundView

logger = logging.getLogger(__name__)


class FundProjection(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    entries: List[LedgerEntry]
    summary: FundSummary


class FundComparison(BaseModel):
    """Full, unfiltered ledgers for both funds plus their summaries."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    years: int
    fundA: FundProjection
    fundB: FundProjection
    comparison: ComparisonSummary


def project_fund(entries: List[LedgerEntry]) -> FundProjection:
    return FundProjection(entries=entries, summary=summarize_ledger(entries))


def compare_funds(plan: ComparisonPlan) -> FundComparison:
    """
    Project both funds from the plan's shared amount, deposit and horizon,
    then compare A against B by final value.
    """
    input_a, input_b = plan.to_inputs()

    fund_a = project_fund(project(input_a))
    fund_b = project_fund(project(input_b))
    comparison = compare(fund_a.entries[-1], fund_b.entries[-1])

    logger.info(
        "compared funds over %d years: A=%.2f B=%.2f (A %s B)",
        plan.years,
        fund_a.summary.finalValue,
        fund_b.summary.finalValue,
        comparison.direction,
    )

    return FundComparison(
        years=plan.years,
        fundA=fund_a,
        fundB=fund_b,
        comparison=comparison,
    )


def fund_view(projection: FundProjection, period_filter: PeriodFilter) -> FundView:
    return FundView(
        entries=filter_periods(projection.entries, period_filter),
        summary=projection.summary,
    )


def comparison_view(
    result: FundComparison,
    fund_selector: FundSelector = FundSelector.BOTH,
    period_filter: PeriodFilter = PeriodFilter.ALL,
) -> ComparisonResponse:
    """Slice a comparison for display; summaries always come from the full ledgers."""
    show_a, show_b = selected_funds(fund_selector)
    return ComparisonResponse(
        years=result.years,
        fundA=fund_view(result.fundA, period_filter) if show_a else None,
        fundB=fund_view(result.fundB, period_filter) if show_b else None,
        comparison=result.comparison,
    )

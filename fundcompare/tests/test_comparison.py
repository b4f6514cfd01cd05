from __future__ import annotations

from math import isclose

import pytest
from pydantic import ValidationError

from fundcompare.core.views import FundSelector, PeriodFilter
from fundcompare.domain.comparison import compare_funds, comparison_view
from fundcompare.models import ComparisonPlan


def test_default_plan_compares_opening_scenario():
    result = compare_funds(ComparisonPlan())

    assert result.years == 3
    assert len(result.fundA.entries) == 36
    assert len(result.fundB.entries) == 36
    assert isclose(result.fundA.summary.totalDeposits, 224200.0)
    assert isclose(result.fundB.summary.totalDeposits, 224200.0)
    # higher return with a slightly higher fee still wins
    assert result.comparison.direction == "outperforms"
    assert result.comparison.differenceInFinalValue > 0


def test_fee_drag_lowers_every_month():
    """
    Identical funds apart from the fee: the fee-free fund is ahead every month.
    """
    plan = ComparisonPlan(
        initialAmount=50000,
        periodicDeposit=1000,
        annualReturnA=7.0,
        annualFeeA=0.0,
        annualReturnB=7.0,
        annualFeeB=1.0,
        years=5,
    )
    result = compare_funds(plan)

    for entry_a, entry_b in zip(result.fundA.entries[1:], result.fundB.entries[1:]):
        assert entry_a.endingAmount > entry_b.endingAmount
    assert result.comparison.outperforms
    assert result.fundA.summary.totalFees == 0.0
    assert result.fundB.summary.totalFees > 0.0


def test_identical_funds_do_not_underperform():
    plan = ComparisonPlan(annualReturnA=10.0, annualFeeA=0.5, annualReturnB=10.0, annualFeeB=0.5)
    result = compare_funds(plan)

    assert result.comparison.differenceInFinalValue == 0.0
    assert result.comparison.direction == "outperforms"


def test_view_keeps_summaries_of_full_ledger():
    result = compare_funds(ComparisonPlan())
    view = comparison_view(result, FundSelector.FUND_B, PeriodFilter.FIRST6)

    assert view.fundA is None
    assert [entry.period for entry in view.fundB.entries] == [1, 2, 3, 4, 5, 6]
    assert view.fundB.summary == result.fundB.summary
    assert view.comparison == result.comparison
    assert len(result.fundB.entries) == 36


@pytest.mark.parametrize(
    "overrides",
    [
        {"years": 0},
        {"years": 31},
        {"years": 2.5},
        {"initialAmount": -1},
        {"periodicDeposit": -5},
        {"annualReturnA": -101},
        {"annualFeeB": float("inf")},
        {"annualFeeA": 1201},
        {"annualReturnB": float("nan")},
        {"fund3Return": 4.0},
    ],
)
def test_plan_rejects_out_of_domain_values(overrides):
    with pytest.raises(ValidationError):
        ComparisonPlan.model_validate(overrides)

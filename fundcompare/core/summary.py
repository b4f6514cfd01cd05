from __future__ import annotations

from typing import Literal, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from fundcompare.core.errors import InvalidInputError
from fundcompare.core.projection import LedgerEntry


class FundSummary(BaseModel):
    """
    End-of-horizon figures for one fund.
    A ratio is None ("not applicable") when its denominator is zero.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    finalValue: float
    totalDeposits: float
    totalGain: float
    totalFees: float
    returnOnInvestmentPercent: Optional[float]
    feesAsPercentOfDepositsPercent: Optional[float]
    feesAsPercentOfGainPercent: Optional[float]


class ComparisonSummary(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    differenceInFinalValue: float
    relativeOutperformancePercent: Optional[float]
    outperforms: bool
    direction: Literal["outperforms", "underperforms"]


def percent_of(numerator: float, denominator: float) -> Optional[float]:
    if denominator == 0:
        return None
    return numerator / denominator * 100


def summarize(final_entry: LedgerEntry) -> FundSummary:
    deposits = final_entry.cumulativeDeposits
    gain = final_entry.cumulativeGain
    fees = final_entry.cumulativeFees

    return FundSummary(
        finalValue=final_entry.endingAmount,
        totalDeposits=deposits,
        totalGain=gain,
        totalFees=fees,
        returnOnInvestmentPercent=percent_of(gain, deposits),
        feesAsPercentOfDepositsPercent=percent_of(fees, deposits),
        feesAsPercentOfGainPercent=percent_of(fees, gain),
    )


def summarize_ledger(entries: Sequence[LedgerEntry]) -> FundSummary:
    if not entries:
        raise InvalidInputError("cannot summarize an empty ledger")
    return summarize(entries[-1])


def compare(final_a: LedgerEntry, final_b: LedgerEntry) -> ComparisonSummary:
    """
    Compare fund A against fund B by final value.
    A zero difference counts as outperforming (never as underperforming).
    """
    difference = final_a.endingAmount - final_b.endingAmount
    relative = percent_of(abs(difference), final_b.endingAmount)
    outperforms = difference >= 0

    return ComparisonSummary(
        differenceInFinalValue=difference,
        relativeOutperformancePercent=relative,
        outperforms=outperforms,
        direction="outperforms" if outperforms else "underperforms",
    )

"""Read-only display slices over an already computed ledger."""

from __future__ import annotations

from enum import Enum
from typing import List, Sequence, Tuple

from fundcompare.core.projection import LedgerEntry

PREVIEW_PERIODS = 6


class PeriodFilter(str, Enum):
    ALL = "all"
    FIRST6 = "first6"
    LAST6 = "last6"
    QUARTERLY = "quarterly"


class FundSelector(str, Enum):
    BOTH = "both"
    FUND_A = "fundA"
    FUND_B = "fundB"


def _is_quarter_row(entry: LedgerEntry) -> bool:
    return entry.period == 1 or entry.period % 3 == 0


def filter_periods(
    entries: Sequence[LedgerEntry], period_filter: PeriodFilter = PeriodFilter.ALL
) -> List[LedgerEntry]:
    """Return a new list with the entries the filter keeps, in ledger order."""
    period_filter = PeriodFilter(period_filter)

    if period_filter == PeriodFilter.FIRST6:
        return list(entries[:PREVIEW_PERIODS])
    if period_filter == PeriodFilter.LAST6:
        return list(entries[-PREVIEW_PERIODS:])
    if period_filter == PeriodFilter.QUARTERLY:
        return [entry for entry in entries if _is_quarter_row(entry)]
    return list(entries)


def selected_funds(selector: FundSelector = FundSelector.BOTH) -> Tuple[bool, bool]:
    """Return (show fund A, show fund B) for the selector."""
    selector = FundSelector(selector)
    return (
        selector in (FundSelector.BOTH, FundSelector.FUND_A),
        selector in (FundSelector.BOTH, FundSelector.FUND_B),
    )

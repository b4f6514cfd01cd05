"""Plain-text rendering of ledgers and the end-of-horizon summary."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence

from fundcompare.core.projection import LedgerEntry
from fundcompare.core.summary import FundSummary

if TYPE_CHECKING:
    from fundcompare.domain.comparison import FundComparison

NOT_APPLICABLE = "n/a"

LEDGER_COLUMNS = [
    ("Month", "period"),
    ("Starting Amount", "startingAmount"),
    ("Monthly Deposit", "deposit"),
    ("Monthly Return", "returnAmount"),
    ("Monthly Fee", "feeAmount"),
    ("Ending Amount", "endingAmount"),
    ("Total Deposits", "cumulativeDeposits"),
    ("Total Gain", "cumulativeGain"),
    ("Total Fees", "cumulativeFees"),
]


def format_money(amount: float, currency: str = "") -> str:
    return f"{currency}{amount:.2f}"


def format_percent(value: Optional[float]) -> str:
    if value is None:
        return NOT_APPLICABLE
    return f"{value:.2f}%"


def render_ledger(entries: Sequence[LedgerEntry]) -> str:
    """Fixed-width table; year-end months are marked with '*'."""
    header = [title for title, _ in LEDGER_COLUMNS]
    rows: List[List[str]] = []
    for entry in entries:
        row = [f"{entry.period}{'*' if entry.isYearEnd else ''}"]
        row.extend(format_money(getattr(entry, field)) for _, field in LEDGER_COLUMNS[1:])
        rows.append(row)

    widths = [max(len(line[i]) for line in [header, *rows]) for i in range(len(header))]
    lines = [
        "  ".join(
            cell.ljust(width) if index == 0 else cell.rjust(width)
            for index, (cell, width) in enumerate(zip(line, widths))
        )
        for line in [header, *rows]
    ]
    return "\n".join(lines)


def _summary_lines(summary: FundSummary, currency: str) -> List[str]:
    return [
        format_money(summary.finalValue, currency),
        format_money(summary.totalDeposits, currency),
        format_money(summary.totalGain, currency),
        format_percent(summary.returnOnInvestmentPercent),
        format_money(summary.totalFees, currency),
        format_percent(summary.feesAsPercentOfDepositsPercent),
        format_percent(summary.feesAsPercentOfGainPercent),
    ]


def render_summary(comparison: "FundComparison", currency: str = "₪") -> str:
    metrics = [
        "Final Value",
        "Total Deposits",
        "Total Gain",
        "Return on Investment %",
        "Total Fees Paid",
        "Fees as % of Deposits",
        "Fees as % of Gain",
    ]
    fund_a = _summary_lines(comparison.fundA.summary, currency)
    fund_b = _summary_lines(comparison.fundB.summary, currency)

    metric_width = max(len(m) for m in ["Metric", *metrics])
    a_width = max(len(v) for v in ["Fund 1", *fund_a])
    b_width = max(len(v) for v in ["Fund 2", *fund_b])

    lines = [f"Summary After {comparison.years} Years", ""]
    lines.append(f"{'Metric'.ljust(metric_width)}  {'Fund 1'.rjust(a_width)}  {'Fund 2'.rjust(b_width)}")
    for metric, a_value, b_value in zip(metrics, fund_a, fund_b):
        lines.append(f"{metric.ljust(metric_width)}  {a_value.rjust(a_width)}  {b_value.rjust(b_width)}")

    result = comparison.comparison
    lines.append("")
    lines.append(f"Difference in Final Value: {format_money(result.differenceInFinalValue, currency)}")
    if result.relativeOutperformancePercent is None:
        lines.append(f"Fund 1 {result.direction} Fund 2 ({NOT_APPLICABLE})")
    else:
        lines.append(
            f"Fund 1 {result.direction} Fund 2 by {format_percent(result.relativeOutperformancePercent)}"
        )
    return "\n".join(lines)

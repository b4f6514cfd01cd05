from __future__ import annotations

import pytest

from fundcompare.core.projection import project_growth
from fundcompare.core.views import FundSelector, PeriodFilter, filter_periods, selected_funds


@pytest.fixture()
def ledger():
    return project_growth(1000.0, 100.0, 8.0, 0.5, 2)


def periods(entries):
    return [entry.period for entry in entries]


def test_all_returns_a_copy(ledger):
    shown = filter_periods(ledger, PeriodFilter.ALL)

    assert shown == ledger
    assert shown is not ledger


def test_first_and_last_six(ledger):
    assert periods(filter_periods(ledger, PeriodFilter.FIRST6)) == [1, 2, 3, 4, 5, 6]
    assert periods(filter_periods(ledger, PeriodFilter.LAST6)) == [19, 20, 21, 22, 23, 24]


def test_quarterly_keeps_first_month(ledger):
    assert periods(filter_periods(ledger, "quarterly")) == [1, 3, 6, 9, 12, 15, 18, 21, 24]


def test_filters_are_total_over_short_and_empty_input(ledger):
    short = ledger[:4]

    assert periods(filter_periods(short, PeriodFilter.FIRST6)) == [1, 2, 3, 4]
    assert periods(filter_periods(short, PeriodFilter.LAST6)) == [1, 2, 3, 4]
    for period_filter in PeriodFilter:
        assert filter_periods([], period_filter) == []


def test_filtering_does_not_touch_the_ledger(ledger):
    before = list(ledger)
    filter_periods(ledger, PeriodFilter.LAST6)

    assert ledger == before


def test_unknown_filter_is_rejected(ledger):
    with pytest.raises(ValueError):
        filter_periods(ledger, "monthly")


@pytest.mark.parametrize(
    "selector, expected",
    [
        (FundSelector.BOTH, (True, True)),
        (FundSelector.FUND_A, (True, False)),
        ("fundB", (False, True)),
    ],
)
def test_fund_selector(selector, expected):
    assert selected_funds(selector) == expected

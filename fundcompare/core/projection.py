from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import List

from pydantic import BaseModel, ConfigDict, computed_field

from fundcompare.core.errors import InvalidDurationError, InvalidInputError

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12
MAX_YEARS = 30


@dataclass(frozen=True)
class ProjectionInput:
    """Inputs for a single fund projection. Rates are percentages (32.67 means 32.67%)."""

    initialAmount: float
    periodicDeposit: float
    annualReturnPercent: float
    annualFeePercent: float
    years: int


class LedgerEntry(BaseModel):
    """One month of a projection. Frozen once produced."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    period: int
    startingAmount: float
    deposit: float
    returnAmount: float
    feeAmount: float
    endingAmount: float
    cumulativeDeposits: float
    cumulativeFees: float
    cumulativeGain: float

    @computed_field  # type: ignore[prop-decorator]
    @property
    def isYearEnd(self) -> bool:
        return self.period % MONTHS_PER_YEAR == 0


def _check_years(years: object) -> int:
    if isinstance(years, bool) or not isinstance(years, Real):
        raise InvalidDurationError(f"years must be an integer, got {years!r}")
    if not isinstance(years, Integral):
        if not math.isfinite(years) or not float(years).is_integer():
            raise InvalidDurationError(f"years must be a whole number, got {years!r}")
        years = int(years)
    if years < 1:
        raise InvalidDurationError(f"years must be at least 1, got {years}")
    if years > MAX_YEARS:
        raise InvalidDurationError(f"years must be at most {MAX_YEARS}, got {years}")
    return int(years)


def _is_finite(value: Real) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _check_inputs(
    initial_amount: object,
    periodic_deposit: object,
    annual_return_percent: object,
    annual_fee_percent: object,
) -> List[str]:
    errors: List[str] = []
    values = {
        "initialAmount": initial_amount,
        "periodicDeposit": periodic_deposit,
        "annualReturnPercent": annual_return_percent,
        "annualFeePercent": annual_fee_percent,
    }
    for name, value in values.items():
        if isinstance(value, bool) or not isinstance(value, Real):
            errors.append(f"{name} must be a number, got {value!r}")
        elif not _is_finite(value):
            errors.append(f"{name} must be finite, got {value!r}")

    if errors:
        return errors

    if initial_amount < 0:
        errors.append(f"initialAmount must not be negative, got {initial_amount}")
    if periodic_deposit < 0:
        errors.append(f"periodicDeposit must not be negative, got {periodic_deposit}")
    # (1 + r) ** (1/n) has no real root below a total loss
    if annual_return_percent < -100:
        errors.append(f"annualReturnPercent must be at least -100, got {annual_return_percent}")
    return errors


def monthly_return_rate(annual_return_percent: float, years: int) -> float:
    """
    Geometric monthly rate rooted over the whole horizon, not over one year:
    compounding it for years*12 months reproduces the annual return once.
    A 1-year and a 3-year projection of the same annual return therefore grow
    at different monthly rates.
    """
    months = years * MONTHS_PER_YEAR
    return (1 + annual_return_percent / 100) ** (1 / months) - 1


def monthly_fee_rate(annual_fee_percent: float) -> float:
    return annual_fee_percent / MONTHS_PER_YEAR / 100


def project_growth(
    initial_amount: float,
    periodic_deposit: float,
    annual_return_percent: float,
    annual_fee_percent: float,
    years: int,
) -> List[LedgerEntry]:
    """
    Build the month-by-month ledger for one fund.

    Order of operations (per month):
      1) Add the deposit.
      2) Compute return and fee against the same post-deposit balance.
      3) balance = balance + return - fee.
      4) Record the entry; startingAmount is back-computed from the ending amount.

    Raises InvalidDurationError / InvalidInputError before any month is computed,
    and InvalidInputError instead of returning a ledger that overflowed.
    """
    years = _check_years(years)
    errors = _check_inputs(initial_amount, periodic_deposit, annual_return_percent, annual_fee_percent)
    if errors:
        raise InvalidInputError(errors)

    months = years * MONTHS_PER_YEAR
    return_rate = monthly_return_rate(annual_return_percent, years)
    fee_rate = monthly_fee_rate(annual_fee_percent)
    logger.debug(
        "projecting %d months: monthly return rate %.10f, monthly fee rate %.10f",
        months,
        return_rate,
        fee_rate,
    )

    balance = float(initial_amount)
    total_deposits = float(initial_amount)
    total_fees = 0.0

    entries: List[LedgerEntry] = []
    for month in range(1, months + 1):
        balance += periodic_deposit
        total_deposits += periodic_deposit

        month_return = balance * return_rate
        month_fee = balance * fee_rate
        total_fees += month_fee

        balance = balance + month_return - month_fee

        entries.append(
            LedgerEntry(
                period=month,
                startingAmount=balance - month_return - periodic_deposit + month_fee,
                deposit=periodic_deposit,
                returnAmount=month_return,
                feeAmount=month_fee,
                endingAmount=balance,
                cumulativeDeposits=total_deposits,
                cumulativeFees=total_fees,
                cumulativeGain=balance - total_deposits,
            )
        )

    if not (math.isfinite(balance) and math.isfinite(total_fees)):
        raise InvalidInputError(
            f"projection overflowed: fee or return rates too large for {years} years"
        )
    return entries


def project(inputs: ProjectionInput) -> List[LedgerEntry]:
    return project_growth(
        initial_amount=inputs.initialAmount,
        periodic_deposit=inputs.periodicDeposit,
        annual_return_percent=inputs.annualReturnPercent,
        annual_fee_percent=inputs.annualFeePercent,
        years=inputs.years,
    )


__all__ = [
    "MONTHS_PER_YEAR",
    "MAX_YEARS",
    "ProjectionInput",
    "LedgerEntry",
    "monthly_return_rate",
    "monthly_fee_rate",
    "project_growth",
    "project",
]

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from fundcompare.core.projection import MAX_YEARS, ProjectionInput

# a 100% monthly fee wipes the balance; anything above turns it negative
MAX_FEE_PERCENT = 1200


class FundTerms(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    annualReturnPercent: float = Field(ge=-100)
    annualFeePercent: float = Field(le=MAX_FEE_PERCENT)


class ProjectionPlan(BaseModel):
    """A single fund projection as the API receives it."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    initialAmount: float = Field(ge=0)
    periodicDeposit: float = Field(default=0.0, ge=0)
    annualReturnPercent: float = Field(ge=-100)
    annualFeePercent: float = Field(default=0.0, le=MAX_FEE_PERCENT)
    years: int = Field(ge=1, le=MAX_YEARS)

    def to_input(self) -> ProjectionInput:
        return ProjectionInput(
            initialAmount=self.initialAmount,
            periodicDeposit=self.periodicDeposit,
            annualReturnPercent=self.annualReturnPercent,
            annualFeePercent=self.annualFeePercent,
            years=self.years,
        )


class ComparisonPlan(BaseModel):
    """
    Two competing fund offers sharing the same money and horizon.
    Defaults are the calculator's opening scenario.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    initialAmount: float = Field(default=100000.0, ge=0)
    periodicDeposit: float = Field(default=3450.0, ge=0)
    annualReturnA: float = Field(default=32.67, ge=-100)
    annualFeeA: float = Field(default=0.7, le=MAX_FEE_PERCENT)
    annualReturnB: float = Field(default=23.15, ge=-100)
    annualFeeB: float = Field(default=0.6, le=MAX_FEE_PERCENT)
    years: int = Field(default=3, ge=1, le=MAX_YEARS)

    @property
    def fund_a(self) -> FundTerms:
        return FundTerms(annualReturnPercent=self.annualReturnA, annualFeePercent=self.annualFeeA)

    @property
    def fund_b(self) -> FundTerms:
        return FundTerms(annualReturnPercent=self.annualReturnB, annualFeePercent=self.annualFeeB)

    def to_inputs(self) -> Tuple[ProjectionInput, ProjectionInput]:
        return tuple(  # type: ignore[return-value]
            ProjectionInput(
                initialAmount=self.initialAmount,
                periodicDeposit=self.periodicDeposit,
                annualReturnPercent=terms.annualReturnPercent,
                annualFeePercent=terms.annualFeePercent,
                years=self.years,
            )
            for terms in (self.fund_a, self.fund_b)
        )

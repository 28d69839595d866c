"""Data contracts for the growth rate calculation endpoints."""

from datetime import date
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ratefinder.models import SolverResult, YearRecord


class PlanRequest(BaseModel):
    """Date-based inputs as collected by the calculator form."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    current_value: float = Field(..., ge=0, description="Asset balance measured at asset_measurement_date.")
    annual_contribution: float = Field(
        0.0,
        description="Constant contribution added each year until payout starts.",
    )
    withdrawal_today: float = Field(
        ...,
        gt=0,
        description="Desired annual withdrawal expressed in today's money.",
    )
    income_growth_percent: float = Field(
        ...,
        description="Yearly growth of withdrawals in percent (e.g. 3 for 3%).",
    )
    payout_years: int = Field(..., ge=1, description="Number of withdrawal years.")
    current_date: date
    asset_measurement_date: date
    payout_start_date: date


class ScheduleRequest(BaseModel):
    """Inputs for projecting the payout phase at a known rate."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    starting_balance: float = Field(..., description="Balance at the start of the first payout year.")
    payout_years: int = Field(..., ge=1, description="Number of withdrawal years.")
    rate: float = Field(
        ...,
        description="Average annual asset growth rate as a decimal (e.g. 0.05 for 5%).",
    )
    first_year_withdrawal: float = Field(..., gt=0, description="Withdrawal taken in the first payout year.")
    income_growth_rate: float = Field(
        0.0,
        description="Yearly growth of withdrawals as a decimal.",
    )


class ScheduleResponse(BaseModel):
    schedule: List[YearRecord]


class CalculationResponse(BaseModel):
    """Solver outcome, its payout schedule and a readable summary."""

    result: SolverResult
    schedule: List[YearRecord]
    summary: str


class PlanResponse(CalculationResponse):
    growth_phase_years: float
    inflation_years: float
    first_year_withdrawal: float

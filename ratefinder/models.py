from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# Open search interval for the average annual asset growth rate.
LOW_RATE_BOUND = -0.2
HIGH_RATE_BOUND = 0.5


class ScenarioInput(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    current_value: float = Field(ge=0)
    annual_contribution: float = 0.0
    growth_phase_years: float = Field(ge=0)
    first_year_withdrawal: float = Field(gt=0)
    payout_years: int = Field(ge=1)
    income_growth_rate: float = 0.0


class Solved(BaseModel):
    """Break-even rate and the balance it accumulates by payout start."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: Literal["solved"] = "solved"
    rate: float = Field(gt=LOW_RATE_BOUND, lt=HIGH_RATE_BOUND)
    starting_balance: float


class Unachievable(BaseModel):
    """No rate inside the search interval funds the withdrawals."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: Literal["unachievable"] = "unachievable"


SolverResult = Annotated[Union[Solved, Unachievable], Field(discriminator="status")]


class YearRecord(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(ge=1)
    starting_balance: float
    growth_amount: float
    withdrawal: float
    # may go negative when the plan depletes early
    ending_balance: float

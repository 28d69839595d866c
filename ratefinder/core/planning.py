from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Tuple

from ratefinder.core.simulation import compute_yearly_schedule
from ratefinder.core.solver import solve_scenario
from ratefinder.models import ScenarioInput, Solved, SolverResult, YearRecord
from ratefinder.schemas.calculation import CalculationResponse, PlanRequest, PlanResponse

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365.25


class InvalidDurationError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


@dataclass
class PreparedPlan:
    scenario: ScenarioInput
    growth_phase_years: float
    inflation_years: float


def years_between(start: date, end: date) -> float:
    return (end - start).days / DAYS_PER_YEAR


def inflate_withdrawal(withdrawal_today: float, income_growth_rate: float, years: float) -> float:
    """Express today's withdrawal in money of the first payout year."""
    return withdrawal_today * (1 + income_growth_rate) ** years


def prepare_plan(request: PlanRequest) -> PreparedPlan:
    growth_phase_years = years_between(request.asset_measurement_date, request.payout_start_date)
    inflation_years = years_between(request.current_date, request.payout_start_date)

    errors: List[str] = []
    if growth_phase_years < 0:
        errors.append("payout_start_date must not be before asset_measurement_date")
    if inflation_years < 0:
        errors.append("payout_start_date must not be before current_date")
    if errors:
        raise InvalidDurationError(errors)

    income_growth_rate = request.income_growth_percent / 100
    scenario = ScenarioInput(
        current_value=request.current_value,
        annual_contribution=request.annual_contribution,
        growth_phase_years=growth_phase_years,
        first_year_withdrawal=inflate_withdrawal(
            request.withdrawal_today, income_growth_rate, inflation_years
        ),
        payout_years=request.payout_years,
        income_growth_rate=income_growth_rate,
    )
    return PreparedPlan(
        scenario=scenario,
        growth_phase_years=growth_phase_years,
        inflation_years=inflation_years,
    )


def describe_result(result: SolverResult) -> str:
    if isinstance(result, Solved):
        return (
            "Under the given conditions, the required average annual asset growth rate "
            f"is approximately {result.rate * 100:.2f}%."
        )
    return (
        "The goal is not achievable within a realistic growth rate range with the "
        "given conditions. Try adjusting the variables."
    )


def evaluate_scenario(scenario: ScenarioInput) -> Tuple[SolverResult, List[YearRecord]]:
    """Solve for the break-even rate and, when found, project the payout years."""
    result = solve_scenario(scenario)
    if not isinstance(result, Solved):
        logger.info("scenario unachievable: %s", scenario.model_dump())
        return result, []

    schedule = compute_yearly_schedule(
        starting_balance=result.starting_balance,
        payout_years=scenario.payout_years,
        rate=result.rate,
        first_year_withdrawal=scenario.first_year_withdrawal,
        income_growth_rate=scenario.income_growth_rate,
    )
    return result, schedule


def calculate(scenario: ScenarioInput) -> CalculationResponse:
    result, schedule = evaluate_scenario(scenario)
    return CalculationResponse(result=result, schedule=schedule, summary=describe_result(result))


def calculate_plan(request: PlanRequest) -> PlanResponse:
    prepared = prepare_plan(request)
    result, schedule = evaluate_scenario(prepared.scenario)
    return PlanResponse(
        result=result,
        schedule=schedule,
        summary=describe_result(result),
        growth_phase_years=prepared.growth_phase_years,
        inflation_years=prepared.inflation_years,
        first_year_withdrawal=prepared.scenario.first_year_withdrawal,
    )

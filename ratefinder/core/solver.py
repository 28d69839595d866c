"""Bisection search for the break-even average annual asset growth rate."""

from __future__ import annotations

import logging
from typing import Callable, Tuple

from scipy.optimize import brentq

from ratefinder.core.valuation import future_value_of_assets, present_value_of_payouts
from ratefinder.models import (
    HIGH_RATE_BOUND,
    LOW_RATE_BOUND,
    ScenarioInput,
    Solved,
    SolverResult,
    Unachievable,
)

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 100
RATE_TOLERANCE = 1e-6

# A midpoint this close to either bound never found a sign change.
UNACHIEVABLE_HIGH_EDGE = 0.499
UNACHIEVABLE_LOW_EDGE = -0.199

REFINE_XTOL = 1e-12
REFINE_MAXITER = 100


def bisect_growth_rate(surplus: Callable[[float], float]) -> Tuple[float, float, float]:
    """Return (midpoint, low, high) of the final bisection bracket."""
    low, high = LOW_RATE_BOUND, HIGH_RATE_BOUND
    rate = (low + high) / 2
    for iteration in range(MAX_ITERATIONS):
        rate = (low + high) / 2
        if high - low < RATE_TOLERANCE:
            break
        # assets outgrow the payouts: the break-even rate is lower
        if surplus(rate) > 0:
            high = rate
        else:
            low = rate

    logger.debug("bisection stopped after %d iterations at rate %.8f", iteration, rate)
    return rate, low, high


def _refine(surplus: Callable[[float], float], low: float, high: float, rate: float) -> float:
    """Polish the root inside the final bisection bracket.

    Falls back to ``rate`` when the bracket ends do not straddle the root.
    """
    if not (surplus(low) <= 0 < surplus(high)):
        return rate
    try:
        return brentq(surplus, low, high, xtol=REFINE_XTOL, maxiter=REFINE_MAXITER)
    except (ValueError, RuntimeError):
        logger.debug("root polishing failed, keeping bisection midpoint %.8f", rate)
        return rate


def compute_required_growth_rate(
    current_value: float,
    growth_phase_years: float,
    annual_contribution: float,
    first_year_withdrawal: float,
    payout_years: int,
    income_growth_rate: float,
) -> SolverResult:
    """
    Find the constant annual growth rate at which assets accumulated by payout
    start exactly fund the growing withdrawal stream.

    Returns ``Unachievable`` (a normal result, not an error) when the
    bisection ends at either edge of the (-20%, +50%) search interval.
    """

    def surplus(rate: float) -> float:
        assets = future_value_of_assets(current_value, growth_phase_years, annual_contribution, rate)
        liabilities = present_value_of_payouts(
            first_year_withdrawal, payout_years, income_growth_rate, rate
        )
        return assets - liabilities

    midpoint, low, high = bisect_growth_rate(surplus)
    if midpoint >= UNACHIEVABLE_HIGH_EDGE or midpoint <= UNACHIEVABLE_LOW_EDGE:
        logger.debug("no break-even rate inside search interval (midpoint %.6f)", midpoint)
        return Unachievable()

    rate = float(_refine(surplus, low, high, midpoint))
    starting_balance = future_value_of_assets(
        current_value, growth_phase_years, annual_contribution, rate
    )
    return Solved(rate=rate, starting_balance=starting_balance)


def solve_scenario(scenario: ScenarioInput) -> SolverResult:
    return compute_required_growth_rate(
        current_value=scenario.current_value,
        growth_phase_years=scenario.growth_phase_years,
        annual_contribution=scenario.annual_contribution,
        first_year_withdrawal=scenario.first_year_withdrawal,
        payout_years=scenario.payout_years,
        income_growth_rate=scenario.income_growth_rate,
    )

from __future__ import annotations

from datetime import date
from math import isclose

import pytest

from ratefinder.core.planning import (
    InvalidDurationError,
    calculate,
    calculate_plan,
    describe_result,
    inflate_withdrawal,
    prepare_plan,
    years_between,
)
from ratefinder.models import ScenarioInput, Solved, Unachievable
from ratefinder.schemas.calculation import PlanRequest


def plan_request(**changes) -> PlanRequest:
    fields = {
        "current_value": 250000.0,
        "annual_contribution": 15000.0,
        "withdrawal_today": 40000.0,
        "income_growth_percent": 3.0,
        "payout_years": 25,
        "current_date": date(2026, 1, 1),
        "asset_measurement_date": date(2030, 1, 1),
        "payout_start_date": date(2038, 1, 1),
    }
    fields.update(changes)
    return PlanRequest(**fields)


def test_years_between_uses_julian_year():
    assert years_between(date(2030, 1, 1), date(2038, 1, 1)) == 8.0
    assert isclose(years_between(date(2024, 1, 1), date(2024, 7, 2)), 183 / 365.25)
    assert years_between(date(2024, 1, 2), date(2024, 1, 1)) < 0


def test_inflate_withdrawal_compounds_income_growth():
    assert isclose(inflate_withdrawal(40000.0, 0.03, 12.0), 40000.0 * 1.03**12)
    assert inflate_withdrawal(40000.0, 0.03, 0.0) == 40000.0


def test_prepare_plan_converts_dates_and_percent():
    prepared = prepare_plan(plan_request())

    assert prepared.growth_phase_years == 8.0
    assert prepared.inflation_years == 12.0
    scenario = prepared.scenario
    assert scenario.income_growth_rate == pytest.approx(0.03)
    assert scenario.growth_phase_years == 8.0
    assert isclose(scenario.first_year_withdrawal, 57030.435474, rel_tol=1e-9)


def test_same_day_dates_are_allowed():
    prepared = prepare_plan(
        plan_request(
            current_date=date(2026, 1, 1),
            asset_measurement_date=date(2026, 1, 1),
            payout_start_date=date(2026, 1, 1),
        )
    )

    assert prepared.growth_phase_years == 0.0
    assert prepared.scenario.first_year_withdrawal == 40000.0


def test_payout_before_measurement_is_rejected():
    with pytest.raises(InvalidDurationError) as exc_info:
        prepare_plan(plan_request(asset_measurement_date=date(2039, 1, 1)))

    assert exc_info.value.errors == ["payout_start_date must not be before asset_measurement_date"]


def test_every_negative_duration_is_reported():
    with pytest.raises(InvalidDurationError) as exc_info:
        prepare_plan(plan_request(payout_start_date=date(2025, 6, 1)))

    assert len(exc_info.value.errors) == 2
    assert isinstance(exc_info.value, ValueError)


def test_calculate_plan_solves_and_projects():
    response = calculate_plan(plan_request())

    assert isinstance(response.result, Solved)
    assert isclose(response.result.rate, 0.0952085, abs_tol=1e-6)
    assert len(response.schedule) == 25
    assert isclose(response.schedule[0].withdrawal, response.first_year_withdrawal)
    assert abs(response.schedule[-1].ending_balance) < 1.0
    assert response.summary.endswith("approximately 9.52%.")


def test_calculate_unachievable_has_no_schedule():
    scenario = ScenarioInput(
        current_value=0.0,
        annual_contribution=0.0,
        growth_phase_years=5,
        first_year_withdrawal=100000.0,
        payout_years=30,
        income_growth_rate=0.02,
    )

    response = calculate(scenario)

    assert isinstance(response.result, Unachievable)
    assert response.schedule == []
    assert response.summary.startswith("The goal is not achievable")


def test_describe_result_formats_percentage():
    summary = describe_result(Solved(rate=0.0512345, starting_balance=1.0))

    assert "approximately 5.12%" in summary

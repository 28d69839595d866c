"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from ratefinder.core.ping import get_ping_message, get_service_name
from ratefinder.core.planning import InvalidDurationError, calculate, calculate_plan
from ratefinder.core.simulation import compute_yearly_schedule
from ratefinder.models import ScenarioInput
from ratefinder.schemas.calculation import PlanRequest, ScheduleRequest, ScheduleResponse
from ratefinder.schemas.ping import PingResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("Rejected %s: %d validation error(s)", request.path, exc.error_count())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False, include_input=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(InvalidDurationError)
def _handle_invalid_duration(exc: InvalidDurationError):
    logger.warning("Rejected %s: %s", request.path, exc)
    return jsonify({"detail": exc.errors}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message=get_ping_message(), service=get_service_name())
    return jsonify(response.model_dump())


@api_bp.post("/calc/required-rate")
def required_rate() -> Any:
    """Solve for the break-even growth rate from plain numeric inputs."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    scenario = ScenarioInput.model_validate(raw_payload)
    response = calculate(scenario)
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/calc/plan")
def plan() -> Any:
    """Solve a date-based plan, converting dates and today's withdrawal first."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = PlanRequest.model_validate(raw_payload)
    response = calculate_plan(payload)
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/calc/schedule")
def schedule() -> Any:
    """Project the payout years for an already known growth rate."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ScheduleRequest.model_validate(raw_payload)
    records = compute_yearly_schedule(
        starting_balance=payload.starting_balance,
        payout_years=payload.payout_years,
        rate=payload.rate,
        first_year_withdrawal=payload.first_year_withdrawal,
        income_growth_rate=payload.income_growth_rate,
    )
    return jsonify(ScheduleResponse(schedule=records).model_dump(mode="json"))

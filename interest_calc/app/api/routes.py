"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from interest_calc.domain.calculation import FormValidationError, calculate
from interest_calc.models import CalculatorForm
from interest_calc.schemas.ping import PingResponse

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(FormValidationError)
def _handle_form_error(exc: FormValidationError):
    """Field-level messages for a form that broke its required/minimum rules."""
    return jsonify({"errors": exc.errors}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(PingResponse().model_dump())


@api_bp.post("/calc/compound")
def compound() -> Any:
    """Project the submitted scenario; ?monthly=false drops the month-by-month series."""
    raw_payload = request.get_json(force=True, silent=True)
    if not isinstance(raw_payload, dict):
        return jsonify({"detail": "request body must be a JSON object"}), HTTPStatus.BAD_REQUEST

    form = CalculatorForm.model_validate(raw_payload)
    settings = current_app.extensions["interest_calc.settings"]
    result = calculate(form, currency_symbol=settings.currency_symbol)

    body = result.model_dump()
    if request.args.get("monthly", "true").lower() in ("false", "0", "no"):
        body.pop("monthly")
    return jsonify(body), HTTPStatus.OK

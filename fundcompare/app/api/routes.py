"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict, Optional

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from fundcompare.core.errors import ProjectionError
from fundcompare.core.projection import project
from fundcompare.core.report import render_ledger, render_summary
from fundcompare.core.views import filter_periods, selected_funds
from fundcompare.domain.comparison import comparison_view, compare_funds, project_fund
from fundcompare.models import ComparisonPlan
from fundcompare.schemas.comparison import (
    ComparisonRequest,
    ProjectionRequest,
    ProjectionResponse,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


class MalformedPayload(ValueError):
    pass


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected payload: %d validation error(s)", exc.error_count())
    detail = exc.errors(include_url=False, include_context=False, include_input=False)
    return jsonify({"detail": detail}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(ProjectionError)
def _handle_projection_error(exc: ProjectionError):
    logger.warning("rejected projection: %s", exc)
    return jsonify({"error": exc.errors}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(MalformedPayload)
def _handle_malformed_payload(exc: MalformedPayload):
    logger.warning("rejected payload: %s", exc)
    return jsonify({"detail": str(exc)}), HTTPStatus.BAD_REQUEST


def _json_body() -> Dict[str, Any]:
    payload: Optional[Any] = request.get_json(force=True, silent=True)
    if not isinstance(payload, dict):
        raise MalformedPayload("request body must be a JSON object")
    return payload


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    return jsonify({"status": "ok"})


@api_bp.get("/comparison/defaults")
def comparison_defaults() -> Any:
    """The opening scenario the calculator starts from."""
    return jsonify(ComparisonPlan().model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Ledger and summary for a single fund."""
    payload = ProjectionRequest.model_validate(_json_body())
    fund = project_fund(project(payload.to_input()))
    response = ProjectionResponse(
        entries=filter_periods(fund.entries, payload.periodFilter),
        summary=fund.summary,
    )
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/comparison")
def comparison() -> Any:
    """Both funds side by side, sliced by the display controls."""
    payload = ComparisonRequest.model_validate(_json_body())
    result = compare_funds(payload.to_plan())
    response = comparison_view(result, payload.fundSelector, payload.periodFilter)
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/comparison/report")
def comparison_report() -> Any:
    """Plain-text summary, followed by the ledger tables the selector shows."""
    payload = ComparisonRequest.model_validate(_json_body())
    result = compare_funds(payload.to_plan())

    sections = [render_summary(result, currency=current_app.config["CURRENCY_SYMBOL"])]
    show_a, show_b = selected_funds(payload.fundSelector)
    for label, shown, fund in (("Fund 1", show_a, result.fundA), ("Fund 2", show_b, result.fundB)):
        if shown:
            sections.append(f"{label}\n{render_ledger(filter_periods(fund.entries, payload.periodFilter))}")

    body = "\n\n".join(sections) + "\n"
    return current_app.response_class(body, status=HTTPStatus.OK, mimetype="text/plain")

"""
Estimates blueprint for study-abroad cost estimation.

This module provides API endpoints for listing destinations and currencies,
suggesting configuration defaults, and producing estimates and export reports.
"""

from typing import Any

from flask import Blueprint, Response, current_app, jsonify, request
from pydantic import ValidationError

from eurostudy.models.study_config import UserConfig
from eurostudy.services.estimate_service import EstimateService

estimates_bp = Blueprint("estimates", __name__, url_prefix="/api")

ALLOWED_ORIGINS = ("EU", "Non-EU")
ALLOWED_CITY_TIERS = ("Big City", "Mid-sized", "Small Town")


def _get_service() -> EstimateService:
    return current_app.extensions["estimate_service"]


def _parse_config() -> UserConfig:
    """Build a UserConfig from the JSON body, filling settings defaults."""
    data = request.get_json(silent=True) or {}
    if isinstance(data, dict):
        settings = current_app.extensions["settings"]
        data.setdefault("country", settings.default_country)
        data.setdefault("target_currency", settings.default_currency)
    # Non-object bodies fail validation below
    return UserConfig.model_validate(data)


def _validation_error(exc: ValidationError) -> Any:
    details = [
        {"field": ".".join(str(part) for part in error["loc"]), "message": error["msg"]}
        for error in exc.errors()
    ]
    return jsonify({"error": "Invalid configuration", "details": details}), 400


@estimates_bp.route("/countries", methods=["GET"])
def list_countries() -> Any:
    """List selectable destination countries.

    Returns:
        JSON response with countries
    """
    return jsonify({"countries": _get_service().list_countries()}), 200


@estimates_bp.route("/currencies", methods=["GET"])
def list_currencies() -> Any:
    """List supported display currencies.

    Returns:
        JSON response with currencies, symbols and rates
    """
    return jsonify({"currencies": _get_service().list_currencies()}), 200


@estimates_bp.route("/countries/<country>/defaults", methods=["GET"])
def get_destination_defaults(country: str) -> Any:
    """Suggest configuration defaults for a destination.

    Args:
        country: Destination country name

    Returns:
        JSON response with duration, wage and legal hour cap
    """
    student_origin = request.args.get("student_origin", "Non-EU")
    city_tier = request.args.get("city_tier", "Mid-sized")
    course_level = request.args.get("course_level", "Undergraduate")

    if student_origin not in ALLOWED_ORIGINS:
        return jsonify({"error": "Invalid student_origin"}), 400
    if city_tier not in ALLOWED_CITY_TIERS:
        return jsonify({"error": "Invalid city_tier"}), 400

    defaults = _get_service().destination_defaults(
        country,
        student_origin=student_origin,
        city_tier=city_tier,
        course_level=course_level,
    )
    return jsonify(defaults), 200


@estimates_bp.route("/estimates", methods=["POST"])
def create_estimate() -> Any:
    """Produce a cost estimate for a configuration.

    Returns:
        JSON response with record, audit log, metrics and display figures
    """
    try:
        config = _parse_config()
    except ValidationError as e:
        return _validation_error(e)

    try:
        service = _get_service()
        estimate = service.estimate(config)
        return jsonify(service.build_response(estimate)), 200

    except Exception as e:
        current_app.logger.error(f"Error producing estimate: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@estimates_bp.route("/estimates/report", methods=["POST"])
def create_report() -> Any:
    """Render the plain-text export report for a configuration.

    Returns:
        text/plain response with the financial plan
    """
    try:
        config = _parse_config()
    except ValidationError as e:
        return _validation_error(e)

    try:
        service = _get_service()
        report = service.render_report(service.estimate(config))
        return Response(
            report,
            status=200,
            mimetype="text/plain",
            headers={"Content-Disposition": "attachment; filename=EuroStudy_Plan.txt"},
        )

    except Exception as e:
        current_app.logger.error(f"Error rendering report: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500

"""Health check blueprint."""

from flask import Blueprint, Response, current_app, jsonify

health_bp = Blueprint("health", __name__)


@health_bp.route("/healthz")
def health_check() -> Response:
    """Health check endpoint.

    Returns:
        JSON response with status and reference catalog size
    """
    reference_data = current_app.extensions["estimate_service"].reference_data
    return jsonify(
        {
            "status": "ok",
            "countries": len(reference_data.countries),
            "official_datasets": len(reference_data.official_data),
        }
    )

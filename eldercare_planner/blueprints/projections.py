"""
Projections blueprint for elder-care scenario comparisons.

This module exposes the projection engine over JSON: the default
configuration, and a projection of all three scenarios for a (partial)
configuration payload.
"""

from typing import Any

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from eldercare_planner.models.scenario import create_default_config
from eldercare_planner.services.projection_service import (
    ProjectionService,
    merge_config,
)

projections_bp = Blueprint("projections", __name__, url_prefix="/api")


@projections_bp.route("/projections/defaults", methods=["GET"])
def get_defaults() -> Any:
    """Get the default planner configuration.

    Returns:
        JSON response with the configuration fields
    """
    return jsonify(create_default_config().model_dump(mode="json"))


@projections_bp.route("/projections", methods=["POST"])
def create_projection() -> Any:
    """Project all three scenarios.

    Fields missing from the request body fall back to the defaults.

    Returns:
        JSON response with snapshots, comparisons and alerts
    """
    data = request.get_json(silent=True)
    if data is not None and not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    try:
        config = merge_config(data)
    except ValidationError as e:
        return (
            jsonify(
                {
                    "error": "Invalid configuration",
                    "details": e.errors(include_url=False, include_context=False),
                }
            ),
            400,
        )

    try:
        service = ProjectionService(
            enable_detailed_logging=current_app.config.get(
                "ENABLE_DETAILED_LOGGING", False
            )
        )
        result = service.project_all(config)
    except Exception as e:
        current_app.logger.error(f"Error projecting scenarios: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500

    return jsonify(result.to_dict()), 200

"""Elder-Care Planner Flask Application Factory."""

import logging

from flask import Flask

from eldercare_planner.config import get_global_settings


def create_app() -> Flask:
    """Create and configure the Flask application.

    Returns:
        Flask: Configured Flask application instance
    """
    app = Flask(__name__)

    # Configuration from Pydantic Settings
    settings = get_global_settings()
    app.config["ENV"] = settings.app_env
    app.config["DEBUG"] = settings.app_env == "development"
    app.config["TESTING"] = settings.app_env == "testing"
    app.config["ENABLE_DETAILED_LOGGING"] = settings.enable_detailed_logging

    logging.basicConfig(level=settings.log_level)
    logging.getLogger("eldercare_planner").setLevel(settings.log_level)

    # Register blueprints
    from eldercare_planner.blueprints.health import health_bp
    from eldercare_planner.blueprints.projections import projections_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(projections_bp)

    return app

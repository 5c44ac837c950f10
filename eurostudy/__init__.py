"""EuroStudy Estimator Flask Application Factory."""

from typing import Optional

from flask import Flask

from eurostudy.config import Settings, get_global_settings
from eurostudy.services.estimate_service import EstimateService


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        settings: Settings to use instead of the global environment settings

    Returns:
        Flask: Configured Flask application instance
    """
    app = Flask(__name__)

    # Configuration from Pydantic Settings
    settings = settings or get_global_settings()
    app.config["SECRET_KEY"] = settings.secret_key
    app.config["ENV"] = settings.flask_env
    app.config["DEBUG"] = settings.app_env == "development"
    app.config["TESTING"] = settings.app_env == "testing"
    app.json.sort_keys = False
    app.logger.setLevel(settings.log_level)

    # One read-only service per app, shared by all requests
    app.extensions["settings"] = settings
    app.extensions["estimate_service"] = EstimateService(
        resolver_config=settings.resolver_config(),
        metrics_config=settings.metrics_config(),
    )

    # Register blueprints
    from eurostudy.blueprints.estimates import estimates_bp
    from eurostudy.blueprints.health import health_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(estimates_bp)

    return app

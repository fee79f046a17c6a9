"""ABOUTME: Flask application factory with configuration, blueprints, and error handling
ABOUTME: Creates and configures Flask app instance with all necessary extensions and routes"""

from flask import Flask, render_template
from flask_wtf.csrf import CSRFError
from werkzeug.exceptions import HTTPException
from werkzeug.middleware.proxy_fix import ProxyFix

import signupform.logging
from signupform import config
from signupform.entrypoints.extensions import init_extensions


def create_app(config_name: str = "") -> Flask:
    """
    Flask application factory.

    Args:
        config_name: Configuration name (development, testing, production)

    Returns:
        Configured Flask application instance
    """
    signupform.logging.logging_setup(config.get_log_level())

    app = Flask(
        __name__,
        template_folder=str(config.get_templates_path()),
        static_folder=str(config.get_static_path()),
    )

    # Load configuration
    flask_config = config.get_config(config_name)
    app.config.from_object(flask_config)

    # Trust 1 layer of proxy (the reverse proxy in front of the app)
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)  # type: ignore[method-assign]

    # Initialize extensions
    init_extensions(app, flask_config)

    # Register context processors
    register_context_processors(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    app.logger.info("Sign-up form application startup")

    return app


def register_context_processors(app: Flask) -> None:
    """Register template context processors."""
    from .context_processors import static_versioning_context_processor

    app.context_processor(static_versioning_context_processor)


def register_blueprints(app: Flask) -> None:
    """Register application blueprints."""
    from .blueprints.api import api_bp
    from .blueprints.health import health_bp
    from .blueprints.signup import signup_bp

    app.register_blueprint(signup_bp)
    app.register_blueprint(api_bp)
    app.register_blueprint(health_bp)


def register_error_handlers(app: Flask) -> None:
    """Register error handlers for common HTTP errors."""

    @app.errorhandler(CSRFError)
    def csrf_error(error: CSRFError) -> tuple[str, int]:
        """Handle a missing or expired CSRF token."""
        app.logger.warning(f"CSRF failure: {error.description}")
        return render_template("errors/400.html", reason=error.description), 400

    @app.errorhandler(400)
    def bad_request(error: HTTPException) -> tuple[str, int]:
        """Handle 400 Bad Request errors."""
        return render_template("errors/400.html", reason=error.description), 400

    @app.errorhandler(404)
    def not_found(error: HTTPException) -> tuple[str, int]:
        """Handle 404 Not Found errors."""
        return render_template("errors/404.html"), 404

    @app.errorhandler(405)
    def method_not_allowed(error: HTTPException) -> tuple[str, int]:
        """Handle 405 Method Not Allowed errors."""
        return render_template("errors/405.html"), 405

    @app.errorhandler(500)
    def internal_error(error: HTTPException) -> tuple[str, int]:
        """Handle 500 Internal Server errors."""
        app.logger.error(f"Server Error: {error}")
        return render_template("errors/500.html"), 500

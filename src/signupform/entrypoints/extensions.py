"""ABOUTME: Flask extensions initialization and configuration
ABOUTME: Sets up Flask-Babel, Flask-WTF CSRF protection, security headers and static file serving"""

from flask import Flask, current_app, has_request_context, request, session
from flask_babel import Babel
from flask_talisman import Talisman
from flask_wtf.csrf import CSRFProtect
from whitenoise import WhiteNoise

from signupform import config

# Initialize extensions
talisman = Talisman()
babel = Babel()
csrf = CSRFProtect()


def init_extensions(app: Flask, flask_config: config.FlaskBaseConfig) -> None:
    """Initialize Flask extensions with app instance."""

    # Initialize Flask-Talisman for security headers
    talisman.init_app(
        app,
        force_https=flask_config.FORCE_HTTPS,
        strict_transport_security=True,
        session_cookie_secure=flask_config.FORCE_HTTPS,
        content_security_policy={
            "default-src": "'self'",
            "style-src": "'self'",
            "img-src": "'self' data:",
        },
    )

    # Initialize Flask-Babel for i18n/l10n
    babel.init_app(app, locale_selector=get_locale)

    # Initialize Flask-WTF CSRF protection
    csrf.init_app(app)

    # Initialise whitenoise - for serving staticfiles
    app.wsgi_app = WhiteNoise(app.wsgi_app, root=str(config.get_static_path()), prefix="static/")  # type: ignore[method-assign]


def get_locale() -> str:
    """Get the best language match for the user."""
    supported_languages = current_app.config.get("LANGUAGES", ["en"])

    # Outside a request (eg. app context only) there is nothing to negotiate with
    if not has_request_context():
        return str(supported_languages[0])

    # Check URL parameter first (for language switching)
    requested_language = request.args.get("lang")
    if requested_language and requested_language in supported_languages:
        session["language"] = requested_language
        return requested_language

    # Check session (user preference)
    if "language" in session and session["language"] in supported_languages:
        return str(session["language"])

    # Fall back to browser language detection
    return request.accept_languages.best_match(supported_languages) or supported_languages[0]

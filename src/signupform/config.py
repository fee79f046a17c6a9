"""ABOUTME: Configuration management for the sign-up form Flask application
ABOUTME: Loads environment variables and provides configuration objects for different environments"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class InvalidConfig(Exception):
    """Error for when the config is not valid"""


DEV_SECRET_KEY = "dev-secret-key-change-in-production"  # noqa: S105


def to_bool(value: str | None, context_str: str = "") -> bool:
    """
    Convert string to boolean. Valid options (after stripping whitespace and making lower-case)
    - False: "false", "no", "off", "0", None, ""
    - True: "true", "yes", "on", "1"

    The `context_str` is there for the error message, to help find the issue.
    """
    if value is None:
        return False
    value = value.lower().strip()
    if value in ("false", "no", "off", "0", ""):
        return False
    if value in ("true", "yes", "on", "1"):
        return True
    raise ValueError(
        f"Cannot convert '{context_str}{value}' to boolean. Valid values are: true/false, 1/0, yes/no, on/off (case-insensitive)"
    )


def get_flask_env() -> str:
    return os.environ.get("FLASK_ENV", "development").lower().strip()


def is_development() -> bool:
    return get_flask_env() == "development"


def get_log_level() -> int:
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper().strip()
    level = logging.getLevelNamesMapping().get(level_name)
    if level is None:
        raise InvalidConfig(f"Unknown LOG_LEVEL '{level_name}'")
    return level


def should_log_all_requests() -> bool:
    return to_bool(os.environ.get("LOG_ALL_REQUESTS"), context_str="LOG_ALL_REQUESTS=")


class FlaskBaseConfig:
    """Base configuration class that loads from environment variables."""

    WTF_CSRF_ENABLED = True
    TESTING = False

    def __init__(self) -> None:
        self.SECRET_KEY: str = os.environ.get("SECRET_KEY", DEV_SECRET_KEY)
        self.FLASK_ENV: str = os.environ.get("FLASK_ENV", "development")
        self.DEBUG: bool = to_bool(os.environ.get("DEBUG", "False"), context_str="DEBUG=")
        self.FORCE_HTTPS: bool = to_bool(os.environ.get("FORCE_HTTPS", "False"), context_str="FORCE_HTTPS=")

        # Babel/i18n configuration
        self.LANGUAGES = self._get_supported_language_codes()
        self.BABEL_DEFAULT_LOCALE = os.environ.get("BABEL_DEFAULT_LOCALE", "en")
        self.BABEL_DEFAULT_TIMEZONE = os.environ.get("BABEL_DEFAULT_TIMEZONE", "UTC")
        self.BABEL_TRANSLATION_DIRECTORIES = str(get_translations_path())

    def _get_supported_language_codes(self) -> list[str]:
        """Get list of supported language codes from environment or default."""
        languages_env = os.environ.get("SUPPORTED_LANGUAGES", "en")
        languages = [lang.strip() for lang in languages_env.split(",") if lang.strip()]
        # Ensure we always have at least English as a fallback
        return languages if languages else ["en"]


class FlaskConfig(FlaskBaseConfig):
    """Development configuration."""


class FlaskTestConfig(FlaskBaseConfig):
    """Test configuration - no CSRF and a fixed secret key."""

    TESTING = True
    WTF_CSRF_ENABLED = False

    def __init__(self) -> None:
        super().__init__()
        self.SECRET_KEY = "test-secret-key-aockgn298zx081238"  # noqa: S105
        self.FLASK_ENV = "testing"
        self.FORCE_HTTPS = False


class FlaskProductionConfig(FlaskConfig):
    """Production configuration with stricter defaults."""

    def __init__(self) -> None:
        super().__init__()
        self.FLASK_ENV = "production"
        self.FORCE_HTTPS = to_bool(os.environ.get("FORCE_HTTPS", "True"), context_str="FORCE_HTTPS=")

        # Ensure production has proper secret key
        if self.SECRET_KEY == DEV_SECRET_KEY:
            raise InvalidConfig("SECRET_KEY must be set in production")


def get_config(config_name: str = "") -> FlaskBaseConfig:
    """Return the appropriate configuration based on FLASK_ENV or config_name."""
    env = config_name.strip() or get_flask_env()
    env = env.lower().strip()

    config_classes: dict[str, type[FlaskBaseConfig]] = {
        "development": FlaskConfig,
        "testing": FlaskTestConfig,
        "production": FlaskProductionConfig,
    }

    # Fall back to development if unknown config
    config_cls = config_classes.get(env, FlaskConfig)
    return config_cls()


def _get_project_root() -> Path:
    # Go up from src/signupform/config.py to the project root
    # But if installed in venv (as in production) then use PROJECT_ROOT
    required_sub_dirs = ("static", "templates", "translations")

    def _is_valid_project_root(path: Path) -> bool:
        return path.is_dir() and all((path / sub_dir).is_dir() for sub_dir in required_sub_dirs)

    # this is in order of priority to use
    # 1. explicitly set by environment variable
    # 2. editable install or direct run - so relative within the git repo
    # 3. current working directory (eg. running tests)
    possible_roots = (
        Path(os.environ.get("PROJECT_ROOT", "/non-existent")),
        Path(__file__).parents[2],
        Path.cwd(),
    )
    valid_roots = [p for p in possible_roots if _is_valid_project_root(p)]
    if not valid_roots:
        raise InvalidConfig(
            f"Could not find project root containing required directories: {' '.join(required_sub_dirs)}"
        )
    return valid_roots[0]


def get_templates_path() -> Path:
    return _get_project_root() / "templates"


def get_static_path() -> Path:
    return _get_project_root() / "static"


def get_translations_path() -> Path:
    return _get_project_root() / "translations"

"""ABOUTME: Health check endpoint for monitoring service status
ABOUTME: Reports that the app is serving requests, along with its version, as JSON"""

from flask import Blueprint, jsonify
from flask.typing import ResponseReturnValue

from signupform.entrypoints.context_processors import get_signupform_version

health_bp = Blueprint("health", __name__)


@health_bp.route("/health")
def health_check() -> ResponseReturnValue:
    """
    Health check endpoint returning JSON with system status.

    Returns:
        JSON response with:
        - status: "ok"
        - version: str ("UNKNOWN" when the package is not installed)
    """
    return jsonify({"status": "ok", "version": get_signupform_version()}), 200

"""ABOUTME: JSON API endpoint for validating sign-up details
ABOUTME: Lets non-browser clients run the same checks as the sign-up form"""

from flask import Blueprint, jsonify, request
from flask.typing import ResponseReturnValue

from signupform.domain.validators import validate_signup
from signupform.domain.value_objects import FormState
from signupform.entrypoints.extensions import csrf
from signupform.translations import _

api_bp = Blueprint("api", __name__, url_prefix="/api")

FIELD_NAMES = ("email", "password", "confirm_password")


@api_bp.route("/validate", methods=["POST"])
@csrf.exempt
def api_validate() -> ResponseReturnValue:
    """
    Validate sign-up details sent as JSON.

    Missing fields count as empty strings. Returns the three error flags and the
    messages the form would show for them.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": _("Request body must be a JSON object")}), 400

    values: dict[str, str] = {}
    for field_name in FIELD_NAMES:
        value = data.get(field_name, "")
        if not isinstance(value, str):
            return jsonify({"error": _("Field '%(field)s' must be a string", field=field_name)}), 400
        values[field_name] = value

    result = validate_signup(FormState(**values))

    return jsonify({
        "valid": result.is_valid,
        "errors": result.to_dict(),
        "messages": result.messages(),
    })

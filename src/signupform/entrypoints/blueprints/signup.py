"""ABOUTME: Sign-up form routes
ABOUTME: Renders the form and validates each submission, showing a message for every problem found"""

import structlog
from flask import Blueprint, flash, render_template
from flask.typing import ResponseReturnValue

from signupform.domain.validators import validate_signup
from signupform.entrypoints.forms import SignupForm
from signupform.translations import _

signup_bp = Blueprint("signup", __name__)

log = structlog.get_logger(__name__)


@signup_bp.route("/", methods=["GET", "POST"])
def index() -> ResponseReturnValue:
    """Sign-up page. A POST is a submission: every check runs against the values just sent."""
    form = SignupForm()

    if form.validate_on_submit():
        result = validate_signup(form.form_state())
        form.apply_result(result)
        # never log the field values themselves
        log.info("signup_submitted", valid=result.is_valid, errors=[error.value for error in result.errors])
        if result.is_valid:
            flash(_("Your details look good."), "success")

    return render_template("signup/index.html", form=form)

"""ABOUTME: Form definitions using Flask-WTF with CSRF protection
ABOUTME: The sign-up form fields and the glue between submitted values and domain validation"""

from flask_wtf import FlaskForm
from wtforms import PasswordField, StringField, SubmitField
from wtforms.widgets import PasswordInput

from signupform.domain.value_objects import FormState, ValidationResult
from signupform.translations import lazy_gettext as _l


class SignupForm(FlaskForm):  # type: ignore[no-any-unimported]
    """Sign-up form with email, password and password confirmation."""

    # A plain text input - type="email" would let the browser block malformed addresses
    # before our own check gets to report them.
    email = StringField(_l("Email"), render_kw={"autocomplete": "email", "inputmode": "email"})

    # Submitted values are echoed back so the form keeps its state until the page is reloaded.
    password = PasswordField(
        _l("Password"), widget=PasswordInput(hide_value=False), render_kw={"autocomplete": "new-password"}
    )

    confirm_password = PasswordField(
        _l("Confirm Password"), widget=PasswordInput(hide_value=False), render_kw={"autocomplete": "new-password"}
    )

    submit = SubmitField(_l("Submit"))

    def form_state(self) -> FormState:
        """Current field values, with anything not submitted treated as empty."""
        return FormState(
            email=self.email.data or "",
            password=self.password.data or "",
            confirm_password=self.confirm_password.data or "",
        )

    def apply_result(self, result: ValidationResult) -> None:
        """Attach the message for each active error to the field it belongs to."""
        for field_name, messages in result.field_messages().items():
            field = self[field_name]
            field.errors = [*field.errors, *messages]

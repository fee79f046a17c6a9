"""ABOUTME: Value objects and enums for the sign-up form domain
ABOUTME: Defines the submitted form state, the validation result and the user-facing error messages"""

from dataclasses import dataclass
from enum import Enum

from signupform.translations import lazy_gettext as _l


class SignupError(Enum):
    EMAIL_INVALID = "email_invalid"
    PASSWORD_TOO_SHORT = "password_too_short"
    PASSWORDS_MISMATCH = "passwords_mismatch"


# The password length message really does say "email" - kept as the wording users have always seen.
error_messages = {
    SignupError.EMAIL_INVALID: _l("The email you input is invalid."),
    SignupError.PASSWORD_TOO_SHORT: _l("The email you entered should contain 5 or more characters."),
    SignupError.PASSWORDS_MISMATCH: _l("The passwords don't match. Try again."),
}

# form field each error is shown against
error_fields = {
    SignupError.EMAIL_INVALID: "email",
    SignupError.PASSWORD_TOO_SHORT: "password",
    SignupError.PASSWORDS_MISMATCH: "confirm_password",
}


@dataclass(frozen=True, slots=True, kw_only=True)
class FormState:
    """The raw text currently held by the three input fields."""

    email: str = ""
    password: str = ""
    confirm_password: str = ""


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationResult:
    """
    The three error flags derived from a FormState at submission time.

    Each flag is independent of the others - any combination can be set.
    """

    email_invalid: bool
    password_too_short: bool
    passwords_mismatch: bool

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def errors(self) -> list[SignupError]:
        """Active errors, always ordered email, password, confirm password."""
        flags = (
            (SignupError.EMAIL_INVALID, self.email_invalid),
            (SignupError.PASSWORD_TOO_SHORT, self.password_too_short),
            (SignupError.PASSWORDS_MISMATCH, self.passwords_mismatch),
        )
        return [error for error, is_set in flags if is_set]

    def messages(self) -> list[str]:
        return [str(error_messages[error]) for error in self.errors]

    def field_messages(self) -> dict[str, list[str]]:
        """Map each form field name to the messages to show next to it."""
        by_field: dict[str, list[str]] = {}
        for error in self.errors:
            by_field.setdefault(error_fields[error], []).append(str(error_messages[error]))
        return by_field

    def to_dict(self) -> dict[str, bool]:
        return {
            SignupError.EMAIL_INVALID.value: self.email_invalid,
            SignupError.PASSWORD_TOO_SHORT.value: self.password_too_short,
            SignupError.PASSWORDS_MISMATCH.value: self.passwords_mismatch,
        }

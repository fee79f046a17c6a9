"""ABOUTME: Validation rules for the sign-up form
ABOUTME: Pure checks on email shape, password length and password confirmation"""

import re

from signupform.domain.value_objects import FormState, ValidationResult

MIN_PASSWORD_LENGTH = 5

# local part without "@" or whitespace, then "@", then something containing a "."
EMAIL_PATTERN = re.compile(r"[^\s@]+@.+\..+")


def is_email_invalid(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is None


def is_password_too_short(password: str) -> bool:
    return len(password) < MIN_PASSWORD_LENGTH


def do_passwords_mismatch(password: str, confirm_password: str) -> bool:
    return password != confirm_password


def validate_signup(form_state: FormState) -> ValidationResult:
    """
    Run every check against the submitted values.

    All three checks always run, so a single submission reports every problem at once.
    Nothing is raised - problems are reported as flags on the result.
    """
    return ValidationResult(
        email_invalid=is_email_invalid(form_state.email),
        password_too_short=is_password_too_short(form_state.password),
        passwords_mismatch=do_passwords_mismatch(form_state.password, form_state.confirm_password),
    )

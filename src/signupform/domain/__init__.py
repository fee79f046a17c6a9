"""Domain model for the sign-up form."""

from .validators import validate_signup
from .value_objects import FormState, SignupError, ValidationResult

__all__ = ["FormState", "SignupError", "ValidationResult", "validate_signup"]

"""Sign-up form web application."""

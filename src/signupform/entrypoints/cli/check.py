"""ABOUTME: CLI command for checking sign-up details
ABOUTME: Runs the same validation as the web form and reports each problem found"""

import click

from signupform.domain.validators import validate_signup
from signupform.domain.value_objects import FormState


@click.command()
@click.option("--email", required=True, help="Email address to check")
@click.option("--password", help="Password (will prompt if not provided)")
@click.option("--confirm-password", help="Password confirmation (will prompt if not provided)")
def check(email: str, password: str | None, confirm_password: str | None) -> None:
    """Check sign-up details, exiting with status 1 if any check fails."""
    if password is None:
        password = click.prompt("Password", hide_input=True, default="", show_default=False)
    if confirm_password is None:
        confirm_password = click.prompt("Confirm password", hide_input=True, default="", show_default=False)

    result = validate_signup(FormState(email=email, password=password, confirm_password=confirm_password))

    if result.is_valid:
        click.echo(click.style("✓ All fields are valid.", "green"))
        return

    for message in result.messages():
        click.echo(click.style(f"✗ {message}", "red"))
    raise click.exceptions.Exit(1)

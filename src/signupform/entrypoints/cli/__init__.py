"""ABOUTME: Main CLI entry point using Click for the sign-up form
ABOUTME: Provides subcommands to show the version and check sign-up details from the shell"""

import click

from signupform.entrypoints.context_processors import get_signupform_version


@click.group()
def cli() -> None:
    """Sign-up form command line tools."""


@cli.command()
def version() -> None:
    """Show the signupform version."""
    click.echo(f"signupform {get_signupform_version()}")


# Import subcommands to register them
from .check import check  # noqa: E402

cli.add_command(check)


if __name__ == "__main__":
    cli()

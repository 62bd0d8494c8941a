"""Output routing for CLI commands.

user_output() is for messages meant for a human (stderr); machine_output() is
for the program's actual result (stdout), so the report can be piped without
diagnostics mixed in.
"""

import click


def user_output(message: str = "") -> None:
    """Write a diagnostic or status message to stderr."""
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    """Write program output to stdout."""
    click.echo(message)

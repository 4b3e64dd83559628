"""Output utilities for CLI commands with clear intent.

user_output: status and error messages for the person at the terminal (stderr)
machine_output: the command's result, the rendered graph (stdout)
"""

import click


def user_output(message: str = "") -> None:
    """Write a status or error message to stderr."""
    click.echo(message, err=True)


def machine_output(message: str = "", *, nl: bool = True) -> None:
    """Write command results to stdout."""
    click.echo(message, nl=nl)

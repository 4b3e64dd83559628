"""CLI error handling utilities with styled output.

This module provides the Ensure class for terminating CLI commands
with consistent, user-friendly error messages. All errors use red "Error:" prefix
for visual consistency.
"""

from typing import NoReturn

import click

from proot.cli.output import user_output


class Ensure:
    """Helper class for exiting with consistent error handling."""

    @staticmethod
    def fail(error_message: str) -> NoReturn:
        """Output styled error and exit with code 1.

        Args:
            error_message: Error message to display.
                          "Error: " prefix will be added automatically in red.

        Raises:
            SystemExit: Always (with exit code 1)
        """
        user_output(click.style("Error: ", fg="red") + error_message)
        raise SystemExit(1)

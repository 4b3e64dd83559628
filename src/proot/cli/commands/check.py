"""Verify that the gh CLI is available."""

import click

from proot.cli.ensure import Ensure
from proot.cli.output import user_output
from proot.core.context import ProotContext


@click.command("check")
@click.pass_obj
def check_cmd(ctx: ProotContext) -> None:
    """Check if the gh CLI is installed."""
    try:
        version_output = ctx.github.check_health()
    except RuntimeError as e:
        Ensure.fail(str(e))

    version_lines = version_output.strip().splitlines()
    user_output(click.style("✓", fg="green") + " gh CLI is installed")
    if version_lines:
        user_output(click.style(version_lines[0], dim=True))

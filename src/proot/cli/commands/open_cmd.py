"""Open a pull request in the browser."""

import click

from proot.cli.ensure import Ensure
from proot.cli.output import user_output
from proot.core.context import ProotContext


@click.command("open")
@click.argument("pr_number", type=click.IntRange(min=1))
@click.pass_obj
def open_cmd(ctx: ProotContext, pr_number: int) -> None:
    """Open PR_NUMBER on the web.

    `proot PR_NUMBER` is a shortcut for this command.
    """
    try:
        ctx.github.open_pr_on_web(pr_number)
    except RuntimeError as e:
        Ensure.fail(str(e))

    user_output(click.style("✓", fg="green") + f" Opened PR #{pr_number} on the web")

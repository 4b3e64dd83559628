import click

from proot.cli.commands.check import check_cmd
from proot.cli.commands.filter_cmd import filter_cmd
from proot.cli.commands.graph import show_pr_graph
from proot.cli.commands.open_cmd import open_cmd
from proot.cli.debug import configure_logging, debug_enabled
from proot.cli.ensure import Ensure
from proot.cli.group import PrNumberGroup
from proot.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(
    cls=PrNumberGroup,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.option("--no-color", is_flag=True, help="Disable colored output.")
@click.option("--debug", is_flag=True, help="Log gh invocations to stderr.")
@click.version_option(package_name="proot")
@click.pass_context
def cli(ctx: click.Context, no_color: bool, debug: bool) -> None:
    """Visualize the pull request graph of a GitHub repository.

    Without a command, prints every open PR as a tree of stacked branches.
    With a PR number, opens that PR on the web.
    """
    configure_logging(debug_enabled(debug))

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ValueError as e:
            Ensure.fail(str(e))

    if no_color:
        ctx.obj = ctx.obj.with_color(False)

    if ctx.invoked_subcommand is None:
        show_pr_graph(ctx.obj, None)


cli.add_command(check_cmd)
cli.add_command(filter_cmd)
cli.add_command(open_cmd)


def main() -> None:
    """CLI entry point used by the `proot` console script."""
    cli()

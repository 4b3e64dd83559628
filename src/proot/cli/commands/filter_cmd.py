"""Show the PR graph for pull requests matching search filters."""

import click

from proot.cli.commands.graph import show_pr_graph
from proot.core.context import ProotContext

MY_PRS_QUERY = "author:@me"


def build_search_query(me: bool, custom: tuple[str, ...]) -> str:
    """Combine filter options into a single GitHub search query."""
    parts: list[str] = []
    if me:
        parts.append(MY_PRS_QUERY)
    parts.extend(query for query in custom if query.strip())
    return " ".join(parts)


@click.command("filter")
@click.option("-m", "--me", is_flag=True, help="Only show PRs you created.")
@click.option(
    "-c",
    "--custom",
    multiple=True,
    help="Custom search filter, repeatable. (Check `gh pr list --help` for more info.)",
)
@click.pass_obj
def filter_cmd(ctx: ProotContext, me: bool, custom: tuple[str, ...]) -> None:
    """Show the PR graph for PRs matching filters.

    Example:
        $ proot filter --me -c "label:bug"
    """
    show_pr_graph(ctx, build_search_query(me, custom) or None)

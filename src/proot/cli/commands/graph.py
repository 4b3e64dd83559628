"""Fetch pull requests and print their branch dependency graph."""

import logging

from proot.cli.ensure import Ensure
from proot.cli.output import machine_output
from proot.core.context import ProotContext
from proot.core.github.parsing import PrListParseError, parse_pr_list
from proot.core.pr_graph import PrGraph
from proot.core.pr_tree import format_pr_graph

logger = logging.getLogger(__name__)


def _fetch_pr_list_json(ctx: ProotContext, search: str | None) -> str:
    limit = ctx.config.pr_limit
    try:
        if search:
            return ctx.github.get_filtered_prs(search, limit=limit)
        return ctx.github.get_all_prs(limit=limit)
    except RuntimeError as e:
        Ensure.fail(str(e))


def show_pr_graph(ctx: ProotContext, search: str | None) -> None:
    """Print the PR graph for all PRs, or for those matching a search query.

    Prints "No PRs found" instead of a graph when the list is empty.
    """
    pr_list_json = _fetch_pr_list_json(ctx, search)

    try:
        prs = parse_pr_list(pr_list_json)
    except PrListParseError as e:
        Ensure.fail(f"Failed to parse PR list: {e}")

    if not prs:
        machine_output("No PRs found")
        return

    graph = PrGraph(prs)
    logger.debug("Built PR graph with %d edges", graph.pr_count)
    machine_output(format_pr_graph(graph, enable_color=ctx.config.use_color))

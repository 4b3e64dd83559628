"""Tree rendering for the pull request graph.

Example output:

    Pull Request Graph

    ┌ main
    ├──○ [#1] feature - Add feature
    │  └──○ [#4] tests - Add tests
    └──○ [#2] bugfix - Fix bug

"""

import click

from proot.core.pr_graph import PrGraph

GRAPH_HEADER = "Pull Request Graph"

ROOT_CONNECTOR = "┌"
BRANCH_CONNECTOR = "├──○"
LEAF_CONNECTOR = "└──○"
CONTINUATION = "│"


def _accent(text: str, enable_color: bool) -> str:
    return click.style(text, fg="blue", bold=True) if enable_color else text


def _dim(text: str, enable_color: bool) -> str:
    return click.style(text, dim=True) if enable_color else text


def format_pr_graph(graph: PrGraph, *, enable_color: bool) -> str:
    """Format the PR graph as a forest of trees, one segment per root branch.

    A branch is expanded at most once per call. If it is reachable from
    several parents, the edge line appears under each of them but its
    subtree is printed only under the first one reached. This also makes
    cyclic graphs terminate.

    Args:
        graph: Graph to render
        enable_color: Style connectors, root names, numbers and titles with
            ANSI codes. False produces plain text.

    Returns:
        Header line, blank line, then each root segment followed by a blank line
    """
    visited: set[str] = set()
    lines: list[str] = [GRAPH_HEADER, ""]

    for root in graph.get_starting_nodes():
        lines.append(
            f"{_accent(ROOT_CONNECTOR, enable_color)} {_accent(root, enable_color)}"
        )
        _format_children(graph, root, visited, "", lines, enable_color)
        lines.append("")

    return "\n".join(lines) + "\n"


def _format_children(
    graph: PrGraph,
    node: str,
    visited: set[str],
    prefix: str,
    lines: list[str],
    enable_color: bool,
) -> None:
    """Append one line per child of node, recursing depth-first."""
    if node in visited:
        return
    visited.add(node)

    children = graph.children(node)
    for i, child in enumerate(children):
        is_last = i == len(children) - 1
        connector = LEAF_CONNECTOR if is_last else BRANCH_CONNECTOR
        continuation = " " if is_last else CONTINUATION

        pr = graph.get_pr(child, node)
        if pr is not None:
            number = _dim(f"[#{pr.number}]", enable_color)
            title = _dim(pr.title or "", enable_color)
            lines.append(
                f"{prefix}{_accent(connector, enable_color)} {number} {child} - {title}"
            )
        else:
            lines.append(f"{prefix}  {child}")

        _format_children(
            graph,
            child,
            visited,
            f"{prefix}{_accent(continuation, enable_color)}  ",
            lines,
            enable_color,
        )

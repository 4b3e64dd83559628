"""Branch dependency graph built from pull request records.

Each PR contributes one edge: its head branch is a child of its base branch.
The graph is built once and is read-only afterwards.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from proot.core.github.types import EdgeKey, PullRequest


class PrGraph:
    """Directed graph of branches connected by pull requests.

    Holds two structures built in the same pass over the input:
    - adjacency: base branch -> head branches stacked on it, in input order
    - PR index: (head, base) edge -> PullRequest that produced it

    Every head listed in the adjacency has a PR index entry under (head, base).
    Cross-repository heads are named "owner/branch".
    """

    def __init__(self, prs: Iterable[PullRequest]) -> None:
        """Build the graph from parsed PR records.

        Identical (head, base) edges are not deduplicated: the adjacency lists
        the head once per PR, and the PR index keeps the last PR inserted.
        """
        adjacency: dict[str, list[str]] = {}
        pr_index: dict[EdgeKey, PullRequest] = {}

        for pr in prs:
            head = pr.effective_head_ref_name
            base = pr.base_ref_name
            pr_index[self.identifier(head, base)] = pr
            adjacency.setdefault(base, []).append(head)

        self._adjacency: dict[str, tuple[str, ...]] = {
            base: tuple(heads) for base, heads in adjacency.items()
        }
        self._pr_index = pr_index

    @staticmethod
    def identifier(head_ref_name: str, base_ref_name: str) -> EdgeKey:
        """Key identifying the edge from a base branch to a head branch."""
        return EdgeKey(head=head_ref_name, base=base_ref_name)

    @property
    def adjacency(self) -> Mapping[str, tuple[str, ...]]:
        """Read-only view of base branch -> head branches."""
        return MappingProxyType(self._adjacency)

    @property
    def pr_count(self) -> int:
        """Number of entries in the PR index."""
        return len(self._pr_index)

    def children(self, base_ref_name: str) -> tuple[str, ...]:
        """Head branches built directly on a base branch, empty if it is not a base."""
        return self._adjacency.get(base_ref_name, ())

    def get_pr(self, head_ref_name: str, base_ref_name: str) -> PullRequest | None:
        """Get the pull request for an edge, or None if no PR backs it."""
        return self._pr_index.get(self.identifier(head_ref_name, base_ref_name))

    def get_starting_nodes(self) -> list[str]:
        """Get the roots of the forest, sorted by name.

        Roots are base branches that are never the head of another PR.
        """
        heads = {head for children in self._adjacency.values() for head in children}
        return sorted(base for base in self._adjacency if base not in heads)

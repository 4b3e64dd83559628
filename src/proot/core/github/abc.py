"""Abstract base class for gh CLI operations."""

from abc import ABC, abstractmethod


class GitHubCli(ABC):
    """Abstract interface for the gh CLI operations proot needs.

    All implementations (real and fake) must implement this interface.
    Methods return raw stdout so that decoding stays in one place
    (proot.core.github.parsing).
    """

    @abstractmethod
    def check_health(self) -> str:
        """Verify gh is installed and runnable.

        Returns:
            Output of `gh --version`

        Raises:
            RuntimeError: If gh is missing or fails
        """
        ...

    @abstractmethod
    def open_pr_on_web(self, pr_number: int) -> None:
        """Open a pull request in the default web browser.

        Args:
            pr_number: PR number to open

        Raises:
            RuntimeError: If gh fails (unknown PR, not authenticated, ...)
        """
        ...

    @abstractmethod
    def get_all_prs(self, *, limit: int) -> str:
        """List pull requests of the current repository.

        Args:
            limit: Maximum number of PRs to fetch

        Returns:
            JSON array text with the fields in PR_LIST_JSON_FIELDS
        """
        ...

    @abstractmethod
    def get_filtered_prs(self, search: str, *, limit: int) -> str:
        """List pull requests matching a GitHub search query.

        Args:
            search: Search query (e.g. "author:@me label:bug")
            limit: Maximum number of PRs to fetch

        Returns:
            JSON array text with the fields in PR_LIST_JSON_FIELDS
        """
        ...

"""Fake gh CLI operations for testing.

FakeGitHubCli is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from proot.core.github.abc import GitHubCli


class FakeGitHubCli(GitHubCli):
    """In-memory fake implementation of gh CLI operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults.
    """

    def __init__(
        self,
        *,
        pr_list_json: str = "[]",
        filtered_pr_list_json: dict[str, str] | None = None,
        version_output: str = "gh version 2.40.0 (2023-12-07)\n",
        error: str | None = None,
    ) -> None:
        """Create FakeGitHubCli with pre-configured state.

        Args:
            pr_list_json: JSON returned by get_all_prs (and by get_filtered_prs
                for searches missing from filtered_pr_list_json)
            filtered_pr_list_json: Mapping of search query -> JSON text
            version_output: Output returned by check_health
            error: If set, every operation raises RuntimeError with this message
        """
        self._pr_list_json = pr_list_json
        self._filtered_pr_list_json = filtered_pr_list_json or {}
        self._version_output = version_output
        self._error = error
        self._opened_prs: list[int] = []
        self._list_calls: list[tuple[str | None, int]] = []
        self._health_checks = 0

    @property
    def opened_prs(self) -> list[int]:
        """PR numbers passed to open_pr_on_web."""
        return self._opened_prs

    @property
    def list_calls(self) -> list[tuple[str | None, int]]:
        """Read-only access to tracked list calls for test assertions.

        Returns list of (search, limit) tuples; search is None for get_all_prs.
        """
        return self._list_calls

    @property
    def health_checks(self) -> int:
        """Number of check_health calls."""
        return self._health_checks

    def _raise_if_failing(self) -> None:
        if self._error is not None:
            raise RuntimeError(self._error)

    def check_health(self) -> str:
        self._health_checks += 1
        self._raise_if_failing()
        return self._version_output

    def open_pr_on_web(self, pr_number: int) -> None:
        self._raise_if_failing()
        self._opened_prs.append(pr_number)

    def get_all_prs(self, *, limit: int) -> str:
        self._list_calls.append((None, limit))
        self._raise_if_failing()
        return self._pr_list_json

    def get_filtered_prs(self, search: str, *, limit: int) -> str:
        self._list_calls.append((search, limit))
        self._raise_if_failing()
        return self._filtered_pr_list_json.get(search, self._pr_list_json)

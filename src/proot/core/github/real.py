"""Production implementation of gh CLI operations."""

import logging
from pathlib import Path

from proot.core.github.abc import GitHubCli
from proot.core.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)

# Fields requested from `gh pr list`. This is the contract with
# proot.core.github.types.PullRequest; change both together.
PR_LIST_JSON_FIELDS = (
    "id,number,title,url,state,isCrossRepository,baseRefName,headRefName,headRepositoryOwner"
)


class RealGitHubCli(GitHubCli):
    """Production implementation using the gh CLI.

    All operations execute actual gh commands via subprocess.
    """

    def __init__(self, gh_path: str, cwd: Path) -> None:
        """Initialize RealGitHubCli.

        Args:
            gh_path: gh executable name or path
            cwd: Directory gh runs in; gh resolves the repository from it
        """
        self._gh_path = gh_path
        self._cwd = cwd

    def _list_cmd(self, limit: int) -> list[str]:
        return [
            self._gh_path,
            "pr",
            "list",
            "--json",
            PR_LIST_JSON_FIELDS,
            "--limit",
            str(limit),
        ]

    def check_health(self) -> str:
        logger.info("Checking if gh CLI is installed")
        result = run_subprocess_with_context(
            [self._gh_path, "--version"],
            operation_context="check gh CLI installation",
            cwd=self._cwd,
        )
        return result.stdout

    def open_pr_on_web(self, pr_number: int) -> None:
        logger.info("Opening PR #%d on GitHub", pr_number)
        run_subprocess_with_context(
            [self._gh_path, "pr", "view", str(pr_number), "--web"],
            operation_context=f"open PR #{pr_number} on the web",
            cwd=self._cwd,
        )

    def get_all_prs(self, *, limit: int) -> str:
        logger.info("Getting PR list from GitHub")
        result = run_subprocess_with_context(
            self._list_cmd(limit),
            operation_context="list pull requests",
            cwd=self._cwd,
        )
        return result.stdout

    def get_filtered_prs(self, search: str, *, limit: int) -> str:
        logger.info("Getting PR list from GitHub matching %r", search)
        result = run_subprocess_with_context(
            [*self._list_cmd(limit), "--search", search],
            operation_context=f"list pull requests matching '{search}'",
            cwd=self._cwd,
        )
        return result.stdout

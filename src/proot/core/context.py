"""Application context with dependency injection."""

from dataclasses import dataclass, replace
from pathlib import Path

from proot.core.github.abc import GitHubCli
from proot.core.github.fake import FakeGitHubCli
from proot.core.github.real import RealGitHubCli
from proot.core.global_config import GlobalConfig, load_global_config


@dataclass(frozen=True)
class ProotContext:
    """Immutable context holding all dependencies for proot operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    github: GitHubCli
    config: GlobalConfig
    cwd: Path  # Current working directory at CLI invocation

    def with_color(self, use_color: bool) -> "ProotContext":
        """Return a copy with color output switched on or off."""
        return replace(self, config=replace(self.config, use_color=use_color))

    @staticmethod
    def for_test(
        github: GitHubCli | None = None,
        config: GlobalConfig | None = None,
        cwd: Path | None = None,
    ) -> "ProotContext":
        """Create test context with sensible defaults.

        Args:
            github: Optional GitHubCli implementation. If None, creates empty FakeGitHubCli.
            config: Optional GlobalConfig. If None, uses defaults with color disabled
                so tests can compare plain text.
            cwd: Optional current working directory. If None, uses Path("/test/default/cwd").
        """
        return ProotContext(
            github=github if github is not None else FakeGitHubCli(),
            config=config if config is not None else GlobalConfig(use_color=False),
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
        )


def create_context(config_path: Path | None = None) -> ProotContext:
    """Create production context with the real gh CLI.

    Raises:
        ValueError: If the config file is malformed
    """
    config = load_global_config(config_path)
    cwd = Path.cwd()
    return ProotContext(
        github=RealGitHubCli(gh_path=config.gh_path, cwd=cwd),
        config=config,
        cwd=cwd,
    )

"""Tests for the default `proot` command that prints the PR graph."""

from click.testing import CliRunner

from proot.cli.cli import cli
from proot.core.context import ProotContext
from proot.core.github.fake import FakeGitHubCli
from proot.core.global_config import GlobalConfig
from tests.test_utils.github_helpers import pr_list_json, pr_record

STACKED_GRAPH_OUTPUT = "\n".join(
    [
        "Pull Request Graph",
        "",
        "┌ dev",
        "└──○ [#7] feature - Add feature",
        "   └──○ [#4] tests - Add tests",
        "",
        "┌ main",
        "├──○ [#1] feature - Add feature",
        "├──○ [#2] bugfix - Fix bug",
        "│  └──○ [#5] fix-tests - Fix tests",
        "└──○ [#3] refactor - Refactor code",
        "   └──○ [#6] refactor-tests - Refactor tests",
        "",
        "",
    ]
)


def test_prints_graph(stacked_pr_list_json: str) -> None:
    runner = CliRunner()
    github = FakeGitHubCli(pr_list_json=stacked_pr_list_json)
    ctx = ProotContext.for_test(github=github)

    result = runner.invoke(cli, [], obj=ctx)

    assert result.exit_code == 0, result.output
    assert result.output == STACKED_GRAPH_OUTPUT + "\n"
    assert github.list_calls == [(None, ctx.config.pr_limit)]


def test_uses_configured_limit(stacked_pr_list_json: str) -> None:
    runner = CliRunner()
    github = FakeGitHubCli(pr_list_json=stacked_pr_list_json)
    ctx = ProotContext.for_test(github=github, config=GlobalConfig(use_color=False, pr_limit=3))

    result = runner.invoke(cli, [], obj=ctx)

    assert result.exit_code == 0
    assert github.list_calls == [(None, 3)]


def test_no_color_flag_strips_styling(stacked_pr_list_json: str) -> None:
    runner = CliRunner()
    github = FakeGitHubCli(pr_list_json=stacked_pr_list_json)
    ctx = ProotContext.for_test(github=github, config=GlobalConfig(use_color=True))

    result = runner.invoke(cli, ["--no-color"], obj=ctx, color=True)

    assert result.exit_code == 0
    assert "\x1b[" not in result.output
    assert "┌ main" in result.output


def test_color_enabled_styles_output(stacked_pr_list_json: str) -> None:
    runner = CliRunner()
    github = FakeGitHubCli(pr_list_json=stacked_pr_list_json)
    ctx = ProotContext.for_test(github=github, config=GlobalConfig(use_color=True))

    result = runner.invoke(cli, [], obj=ctx, color=True)

    assert result.exit_code == 0
    assert "\x1b[" in result.output


def test_empty_pr_list_reports_no_prs() -> None:
    runner = CliRunner()
    ctx = ProotContext.for_test(github=FakeGitHubCli(pr_list_json="[]"))

    result = runner.invoke(cli, [], obj=ctx)

    assert result.exit_code == 0
    assert "No PRs found" in result.stdout
    assert "Pull Request Graph" not in result.output


def test_gh_failure_exits_with_error() -> None:
    runner = CliRunner()
    ctx = ProotContext.for_test(github=FakeGitHubCli(error="Failed to list pull requests"))

    result = runner.invoke(cli, [], obj=ctx)

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "Failed to list pull requests" in result.output


def test_decode_error_exits_with_error() -> None:
    broken = pr_record(1, "feature", "main")
    del broken["baseRefName"]
    runner = CliRunner()
    ctx = ProotContext.for_test(github=FakeGitHubCli(pr_list_json=pr_list_json(broken)))

    result = runner.invoke(cli, [], obj=ctx)

    assert result.exit_code == 1
    assert "Error: Failed to parse PR list: [0].baseRefName" in result.output
    assert "Pull Request Graph" not in result.output


def test_help_mentions_pr_number_shortcut() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["-h"], obj=ProotContext.for_test())

    assert result.exit_code == 0
    assert "[PR_NUMBER | COMMAND [ARGS]...]" in result.output
    assert "check" in result.output
    assert "filter" in result.output
    assert "open" in result.output

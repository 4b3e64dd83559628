"""Shared pytest configuration and fixture loading."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    """Read a fixture file from tests/fixtures as text.

    Args:
        name: Path relative to tests/fixtures (e.g. "github/pr_list_stacked.json")
    """
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def stacked_pr_list_json() -> str:
    """Seven PRs forming two stacks rooted at main and dev, sharing `feature`."""
    return load_fixture("github/pr_list_stacked.json")

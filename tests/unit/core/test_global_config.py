"""Tests for loading the global config file."""

from pathlib import Path

import pytest

from proot.core.global_config import (
    DEFAULT_PR_LIMIT,
    GlobalConfig,
    default_config_path,
    load_global_config,
)


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("PROOT_CONFIG", raising=False)


def test_missing_file_uses_defaults(tmp_path: Path) -> None:
    config = load_global_config(tmp_path / "config.toml")

    assert config == GlobalConfig()
    assert config.gh_path == "gh"
    assert config.use_color is True
    assert config.pr_limit == DEFAULT_PR_LIMIT


def test_loads_values(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        'gh_path = "/opt/bin/gh"\nuse_color = false\npr_limit = 250\n', encoding="utf-8"
    )

    config = load_global_config(config_path)

    assert config == GlobalConfig(gh_path="/opt/bin/gh", use_color=False, pr_limit=250)


def test_partial_file_keeps_other_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text("pr_limit = 10\n", encoding="utf-8")

    config = load_global_config(config_path)

    assert config.pr_limit == 10
    assert config.gh_path == "gh"
    assert config.use_color is True


def test_wrong_type_raises(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text('use_color = "yes"\n', encoding="utf-8")

    with pytest.raises(ValueError, match="use_color"):
        load_global_config(config_path)


def test_bool_is_not_accepted_as_limit(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text("pr_limit = true\n", encoding="utf-8")

    with pytest.raises(ValueError, match="pr_limit"):
        load_global_config(config_path)


def test_non_positive_limit_raises(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text("pr_limit = 0\n", encoding="utf-8")

    with pytest.raises(ValueError, match="must be positive"):
        load_global_config(config_path)


def test_invalid_toml_raises(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text("pr_limit = \n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid TOML"):
        load_global_config(config_path)


def test_no_color_env_disables_color(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")

    config = load_global_config(tmp_path / "config.toml")

    assert config.use_color is False


def test_default_path_honors_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    override = tmp_path / "custom.toml"
    monkeypatch.setenv("PROOT_CONFIG", str(override))

    assert default_config_path() == override


def test_default_path_in_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(Path, "home", lambda: tmp_path)

    assert default_config_path() == tmp_path / ".proot" / "config.toml"

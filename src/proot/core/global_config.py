"""Global configuration data structures and loading.

Provides immutable global config data loaded from ~/.proot/config.toml
(or the file named by $PROOT_CONFIG). A missing file means defaults.

Example config.toml:

    gh_path = "/opt/homebrew/bin/gh"
    use_color = false
    pr_limit = 200
"""

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

logger = logging.getLogger(__name__)

DEFAULT_PR_LIMIT = 100

T = TypeVar("T")


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in ProotContext.
    """

    gh_path: str = "gh"
    use_color: bool = True
    pr_limit: int = DEFAULT_PR_LIMIT


def default_config_path() -> Path:
    """Path of the global config file, honoring $PROOT_CONFIG."""
    override = os.environ.get("PROOT_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".proot" / "config.toml"


def _typed_value(
    data: dict[str, object], key: str, expected: type[T], default: T, path: Path
) -> T:
    value = data.get(key, default)
    # bool is a subclass of int; reject it where an int is expected
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        msg = f"Invalid '{key}' in {path}: expected {expected.__name__}, got {value!r}"
        raise ValueError(msg)
    return value


def load_global_config(path: Path | None = None) -> GlobalConfig:
    """Load global config.

    Args:
        path: Config file to read. Defaults to default_config_path().

    Returns:
        GlobalConfig with values from the file, or defaults if it doesn't exist.
        NO_COLOR in the environment forces use_color to False.

    Raises:
        ValueError: If the file is not valid TOML or a value has the wrong type
    """
    config_path = path if path is not None else default_config_path()

    data: dict[str, object] = {}
    if config_path.exists():
        logger.debug("Loading config from %s", config_path)
        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

    defaults = GlobalConfig()
    gh_path = _typed_value(data, "gh_path", str, defaults.gh_path, config_path)
    use_color = _typed_value(data, "use_color", bool, defaults.use_color, config_path)
    pr_limit = _typed_value(data, "pr_limit", int, defaults.pr_limit, config_path)

    if pr_limit <= 0:
        raise ValueError(f"Invalid 'pr_limit' in {config_path}: must be positive, got {pr_limit}")

    if os.environ.get("NO_COLOR"):
        use_color = False

    return GlobalConfig(gh_path=gh_path, use_color=use_color, pr_limit=pr_limit)

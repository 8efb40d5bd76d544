"""
Configuration loader for gitscope.

Settings come from an optional .env file, overlaid by GITSCOPE_* process
environment variables, validated against the "config" schema.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from . import envparse
from . import validate

logger = logging.getLogger(__name__)

ENV_PREFIX = "GITSCOPE_"

# GITSCOPE_<suffix> -> settings key
ENV_KEYS = {
    "GIT_BINARY": "GIT_BINARY",
    "TIMEOUT": "GIT_TIMEOUT",
    "DEFAULT_BRANCH": "DEFAULT_BRANCH",
}
SETTINGS_KEYS = set(ENV_KEYS.values())

DEFAULT_GIT_BINARY = "git"
DEFAULT_TIMEOUT = 30
DEFAULT_BRANCH = "master"


@dataclass
class GitConfig:
    """How gitscope invokes git."""
    git_binary: str = DEFAULT_GIT_BINARY  # Name on PATH or absolute path (e.g. /usr/bin/git)
    timeout: int = DEFAULT_TIMEOUT  # Seconds before a git subprocess is killed
    default_branch: str = DEFAULT_BRANCH  # Branch pulled by update_repo/sync when none given


def load_git_config(env_file: Path | None = None) -> GitConfig:
    """Load settings from env_file (if given) and the environment."""
    settings: dict[str, str] = {}
    if env_file is not None:
        # The file may be shared with other tools; only gitscope keys count.
        file_settings = envparse.load_env(env_file)
        settings.update({k: v for k, v in file_settings.items() if k in SETTINGS_KEYS})
        ignored = sorted(set(file_settings) - SETTINGS_KEYS)
        if ignored:
            logger.debug(f"Ignoring non-gitscope keys in {env_file}: {', '.join(ignored)}")
    settings.update(envparse.environ_overrides(ENV_PREFIX, ENV_KEYS))

    validate.validate(settings, "config")

    config = GitConfig(
        git_binary=settings.get("GIT_BINARY", DEFAULT_GIT_BINARY),
        timeout=int(settings.get("GIT_TIMEOUT", DEFAULT_TIMEOUT)),
        default_branch=settings.get("DEFAULT_BRANCH", DEFAULT_BRANCH),
    )
    logger.debug(f"Loaded git config: {config}")
    return config


_active_config: GitConfig | None = None


def get_git_config() -> GitConfig:
    """Return the active config, loading it from the environment on first use."""
    global _active_config
    if _active_config is None:
        _active_config = load_git_config()
    return _active_config


def set_git_config(config: GitConfig | None) -> None:
    """Replace the active config. None forces a reload on next use."""
    global _active_config
    _active_config = config

"""Git remote operations."""

import logging
from pathlib import Path

from gitscope.git.errors import NoRemoteConfigured
from gitscope.git.parse import parse_remotes
from gitscope.git.runner import run_git, require_success, GitResult
from gitscope.git.scope import run_scoped
from gitscope.git.status import is_repository, require_repository
from gitscope.lib.config import get_git_config

logger = logging.getLogger(__name__)

# Clone, fetch and pull talk to the network; local queries use the configured timeout.
NETWORK_TIMEOUT = 300


def list_remotes(path) -> list[str]:
    """
    List remote names in the order git reports them.

    Raises:
        NotARepository: if path is not a git repository
        OperationFailed: if `git remote` fails
    """
    require_repository(path)
    result = run_scoped(path, lambda repo: run_git(["remote"], repo))
    require_success(result, f"Listing remotes at {path} failed")
    return parse_remotes(result.stdout)


def clone(url: str, path) -> GitResult:
    """Clone url into path. Runs in the caller's directory, no scoping."""
    logger.info(f"Cloning {url} into {path}")
    result = run_git(["clone", url, str(path)], timeout=NETWORK_TIMEOUT)
    return require_success(result, f"Cloning {url} into {path} failed")


def fetch_all(path) -> GitResult:
    """Fetch from every remote."""
    result = run_scoped(
        path, lambda repo: run_git(["fetch", "--all"], repo, timeout=NETWORK_TIMEOUT)
    )
    return require_success(result, f"Fetch failed at {path}")


def pull(path, remote: str, branch: str) -> GitResult:
    """Pull branch from remote."""
    result = run_scoped(
        path, lambda repo: run_git(["pull", remote, branch], repo, timeout=NETWORK_TIMEOUT)
    )
    return require_success(result, f"Pulling {remote}/{branch} at {path} failed")


def update_repo(path, branch: str | None = None) -> GitResult:
    """
    Pull branch from the first remote git lists.

    Raises:
        NotARepository: if path is not a git repository
        NoRemoteConfigured: if the repository has no remotes
        OperationFailed: if the pull fails
    """
    branch = branch or get_git_config().default_branch
    remotes = list_remotes(path)
    if not remotes:
        raise NoRemoteConfigured(path)
    logger.info(f"Updating {path} from {remotes[0]}/{branch}")
    return pull(path, remotes[0], branch)


def sync(url: str, path, branch: str | None = None) -> GitResult:
    """Update the repository at path, or clone url there if there is none."""
    if is_repository(path):
        return update_repo(path, branch)
    return clone(url, Path(path))

"""Git init, staging and commit operations."""

import logging

from gitscope.git.runner import run_git, require_success, GitResult
from gitscope.git.scope import run_scoped
from gitscope.git.status import require_repository

logger = logging.getLogger(__name__)


def init(path) -> GitResult:
    """Create (or reinitialize) a repository at path. No scoping needed."""
    result = run_git(["init", str(path)])
    return require_success(result, f"Initializing repository at {path} failed")


def add(file_path: str, repo) -> GitResult:
    """Stage file_path (relative to repo, or absolute) in repo."""
    result = run_scoped(repo, lambda cwd: run_git(["add", str(file_path)], cwd))
    return require_success(result, f"Staging {file_path} failed")


def commit(repo, message: str) -> GitResult:
    """
    Create a commit with the given message.

    Raises:
        NotARepository: if repo is not a git repository
        OperationFailed: if git refuses the commit (e.g. nothing staged)
    """
    require_repository(repo)
    result = run_scoped(repo, lambda cwd: run_git(["commit", "-m", message], cwd))
    require_success(result, "Commit failed")
    logger.debug(f"Committed in {repo}: {message}")
    return result

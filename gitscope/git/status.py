"""Git status probes."""

import logging

from gitscope.git.errors import GitError, NotARepository
from gitscope.git.parse import porcelain_has_modification
from gitscope.git.probe import Probe
from gitscope.git.runner import run_git
from gitscope.git.scope import run_scoped

logger = logging.getLogger(__name__)


def check_repository(path) -> Probe:
    """
    Probe whether path is inside a git repository.

    value is True iff `git status` exits zero. A non-zero exit is a plain
    negative answer; an unusable location, a missing git binary or a
    timeout is a negative answer with error set.
    """
    try:
        result = run_scoped(path, lambda repo: run_git(["status"], repo))
    except GitError as e:
        logger.debug(f"Repository probe failed for {path}: {e}")
        return Probe(False, str(e))

    if result.timed_out:
        return Probe(False, result.stderr)
    return Probe(result.success)


def is_repository(path) -> bool:
    """Check if path is a git repository. Never raises."""
    return check_repository(path).value


def require_repository(path) -> None:
    """Raise NotARepository unless path is a git repository."""
    if not is_repository(path):
        raise NotARepository(path)


def check_modified(path) -> Probe:
    """
    Probe whether the worktree at path has modified tracked files.

    Raises:
        NotARepository: if path is not a git repository
    """
    require_repository(path)
    try:
        result = run_scoped(path, lambda repo: run_git(["status", "--porcelain"], repo))
    except GitError as e:
        logger.warning(f"Modification probe failed for {path}: {e}")
        return Probe(False, str(e))

    if not result.success:
        logger.warning(f"git status --porcelain failed in {path}: {result.stderr.strip()}")
        return Probe(False, result.stderr)
    return Probe(porcelain_has_modification(result.stdout))


def is_modified(path) -> bool:
    """Check if any tracked file is modified (staged or not)."""
    return check_modified(path).value


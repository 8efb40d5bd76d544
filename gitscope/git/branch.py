"""Git branch operations and commit distance."""

import logging
from pathlib import Path

from gitscope.git.errors import ComparisonFailed, GitError
from gitscope.git.parse import count_revisions, parse_branch_ref, parse_upstream
from gitscope.git.probe import Probe
from gitscope.git.runner import run_git
from gitscope.git.scope import run_scoped

logger = logging.getLogger(__name__)


def check_branch(path) -> Probe:
    """Probe the branch HEAD points at; value is None when there is none."""
    try:
        result = run_scoped(path, lambda repo: run_git(["symbolic-ref", "HEAD"], repo))
    except GitError as e:
        return Probe(None, str(e))

    if not result.success:
        # Detached HEAD exits non-zero; that is an answer, not an error.
        return Probe(None, result.stderr.strip() if result.timed_out else None)
    return Probe(parse_branch_ref(result.stdout))


def current_branch(path) -> str | None:
    """Get the current branch name, or None if detached HEAD."""
    return check_branch(path).value


def tracked_upstream(path, branch: str) -> str | None:
    """
    Get the upstream a local branch tracks.

    Returns:
        Upstream short name (e.g. "origin/master"), or None if the branch
        has no upstream or does not exist
    """
    args = ["rev-parse", "--abbrev-ref", "--symbolic-full-name", f"{branch}@{{u}}"]
    try:
        result = run_scoped(path, lambda repo: run_git(args, repo))
    except GitError as e:
        logger.warning(f"Upstream lookup for {branch} failed at {path}: {e}")
        return None
    if not result.success:
        return None
    return parse_upstream(result.stdout)


def _rev_count(repo: Path, range_spec: str) -> int:
    result = run_git(["rev-list", range_spec], repo)
    if not result.success:
        raise ComparisonFailed(range_spec, result.stderr)
    return count_revisions(result.stdout)


def compare(lhs: str, rhs: str, path) -> int:
    """
    How many commits lhs is ahead of rhs.

    Checks lhs-only commits first and returns that count as soon as it is
    non-zero, so when both sides have unique commits only lhs's count is
    reported.

    Args:
        lhs: Commit label (hash prefix, branch, or remote branch)
        rhs: Commit label to compare against
        path: Directory inside the repository

    Returns:
        Positive if lhs is ahead, negative (rhs-only count) if lhs is
        behind, 0 if neither is ahead

    Raises:
        InvalidLocation: if path is not a directory
        ComparisonFailed: if either label cannot be resolved
    """
    def _compare(repo: Path) -> int:
        l2r = _rev_count(repo, f"{rhs}..{lhs}")
        if l2r > 0:
            return l2r

        r2l = _rev_count(repo, f"{lhs}..{rhs}")
        if r2l > 0:
            return -r2l
        return 0

    offset = run_scoped(path, _compare)
    logger.debug(f"compare({lhs}, {rhs}) at {path} -> {offset}")
    return offset

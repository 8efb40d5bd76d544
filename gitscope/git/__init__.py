"""Git operations for gitscope.

Every directory-relative call goes through run_scoped(), which validates
the location, holds the process-wide working-directory lock, and restores
the caller's working directory on exit.

Failure policy:
- Actions (clone, init, add, commit, fetch_all, pull, update_repo, sync)
  return the GitResult on success and raise OperationFailed otherwise.
- Lenient probes never raise for git-level failures: is_repository() and
  is_modified() collapse to False, current_branch() and tracked_upstream()
  to None. The check_*() variants return a Probe whose .error says why a
  fallback answer was given.
- Preconditions raise before any subprocess runs: InvalidLocation (also
  for directories that cannot be entered), NotARepository,
  NoRemoteConfigured, and ConfigError for unusable settings.
- compare() raises ComparisonFailed when either rev-list query fails.
"""

from gitscope.git.errors import (
    GitError,
    InvalidLocation,
    NotARepository,
    NoRemoteConfigured,
    OperationFailed,
    ComparisonFailed,
    ExecutionFailed,
    ConfigError,
)
from gitscope.git.runner import GitResult, execute, run_git
from gitscope.git.scope import run_scoped, scoped_directory, validate_location
from gitscope.git.probe import Probe
from gitscope.git.status import (
    check_repository,
    is_repository,
    check_modified,
    is_modified,
)
from gitscope.git.branch import (
    check_branch,
    current_branch,
    tracked_upstream,
    compare,
)
from gitscope.git.commit import (
    init,
    add,
    commit,
)
from gitscope.git.remote import (
    list_remotes,
    clone,
    fetch_all,
    pull,
    update_repo,
    sync,
)

__all__ = [
    # errors
    "GitError",
    "InvalidLocation",
    "NotARepository",
    "NoRemoteConfigured",
    "OperationFailed",
    "ComparisonFailed",
    "ExecutionFailed",
    "ConfigError",
    # execution
    "GitResult",
    "execute",
    "run_git",
    "run_scoped",
    "scoped_directory",
    "validate_location",
    "Probe",
    # status
    "check_repository",
    "is_repository",
    "check_modified",
    "is_modified",
    # branch
    "check_branch",
    "current_branch",
    "tracked_upstream",
    "compare",
    # commit
    "init",
    "add",
    "commit",
    # remote
    "list_remotes",
    "clone",
    "fetch_all",
    "pull",
    "update_repo",
    "sync",
]

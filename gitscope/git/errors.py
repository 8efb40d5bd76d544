"""Error taxonomy for gitscope git operations.

Precondition failures (InvalidLocation, NotARepository, NoRemoteConfigured)
are raised before any subprocess is spawned. Subprocess failures carry the
raw git diagnostic.
"""

from pathlib import Path


class GitError(Exception):
    """Base class for all gitscope git errors."""
    pass


class InvalidLocation(GitError):
    """Target path does not exist, is not a directory, or cannot be entered."""

    def __init__(self, path, reason: str = "not a directory"):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot use {self.path}: {reason}")


class NotARepository(GitError):
    """Operation requires a git repository at path."""

    def __init__(self, path):
        self.path = Path(path)
        super().__init__(f"Cannot find repository at: {self.path}")


class NoRemoteConfigured(GitError):
    """Repository has no remotes to update from."""

    def __init__(self, path):
        self.path = Path(path)
        super().__init__(f"0 remote found at path: {self.path}")


class OperationFailed(GitError):
    """A git command exited non-zero."""

    def __init__(self, message: str, diagnostic: str = ""):
        self.diagnostic = diagnostic
        text = f"{message}: {diagnostic.strip()}" if diagnostic.strip() else message
        super().__init__(text)


class ComparisonFailed(GitError):
    """A rev-list query used for comparison failed."""

    def __init__(self, range_spec: str, diagnostic: str = ""):
        self.range_spec = range_spec
        self.diagnostic = diagnostic
        super().__init__(f"git rev-list {range_spec} failed due to: {diagnostic.strip()}")


class ExecutionFailed(GitError):
    """The command could not be spawned at all (missing binary, permissions)."""

    def __init__(self, command: str, reason: str):
        self.command = command
        self.reason = reason
        super().__init__(f"Failed to execute {command}: {reason}")


class ConfigError(GitError):
    """gitscope settings could not be loaded when a command needed them."""
    pass

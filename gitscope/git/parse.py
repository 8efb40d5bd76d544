"""Parsers for git command output.

Kept apart from control flow so format assumptions (porcelain columns,
ref segment counts) can be checked against new git versions on their own.
"""

BRANCH_REF_PREFIX = "refs/heads"
MODIFIED_MARKER = "M"


def parse_remotes(output: str) -> list[str]:
    """Remote names from `git remote`, in the order git reports them."""
    return [line.strip() for line in output.split("\n") if line.strip()]


def parse_branch_ref(output: str) -> str | None:
    """
    Branch name from `git symbolic-ref HEAD` output.

    Only the exact shape refs/heads/<name> is accepted; anything else
    (including branch names containing '/') yields None.
    """
    if not output.startswith(BRANCH_REF_PREFIX):
        return None
    parts = output.strip().split("/")
    if len(parts) != 3 or not parts[2]:
        return None
    return parts[2]


def porcelain_has_modification(output: str) -> bool:
    """
    True if any `git status --porcelain` line has an M in its flag token.

    Index and worktree columns are not told apart: " M", "M " and "MM"
    all count.
    """
    for line in output.split("\n"):
        tokens = line.split()
        if tokens and MODIFIED_MARKER in tokens[0]:
            return True
    return False


def count_revisions(output: str) -> int:
    """Number of commits listed by `git rev-list`."""
    return len([line for line in output.strip().split("\n") if line.strip()])


def parse_upstream(output: str) -> str | None:
    """Upstream name (e.g. origin/master) from rev-parse @{u} output."""
    upstream = output.strip()
    return upstream or None

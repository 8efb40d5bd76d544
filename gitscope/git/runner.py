"""Subprocess primitive for git commands, with timeout handling."""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from gitscope.git.errors import ConfigError, ExecutionFailed, OperationFailed
from gitscope.lib.config import get_git_config
from gitscope.lib.validate import ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GitResult:
    """Result of a command: exit status plus captured output."""
    returncode: int
    stdout: str
    stderr: str
    timed_out: bool = False

    @property
    def success(self) -> bool:
        return self.returncode == 0 and not self.timed_out


def execute(
    command: str,
    arguments: Sequence[str],
    cwd: Path | None = None,
    timeout: int | None = None,
) -> GitResult:
    """
    Spawn command, drain stdout and stderr, and wait for it to exit.

    Output is decoded as UTF-8; undecodable bytes (e.g. non-UTF-8 file
    names) are replaced rather than raised.

    A non-zero exit status is returned, not raised; interpreting it is the
    caller's job.

    Args:
        command: Executable name (resolved on PATH) or absolute path
        arguments: Arguments passed after the command
        cwd: Working directory for the child, None to inherit
        timeout: Seconds to wait before killing the child, None to wait forever

    Returns:
        GitResult with returncode, stdout, stderr, and timed_out flag

    Raises:
        ExecutionFailed: if the command cannot be spawned
    """
    cmd = [command] + list(arguments)
    logger.debug(f"Running {' '.join(cmd)} (cwd={cwd or '.'})")
    try:
        result = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd is not None else None,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        logger.warning(f"{' '.join(cmd)} timed out after {timeout}s")
        return GitResult(
            returncode=-1,
            stdout="",
            stderr=f"Command timed out after {timeout}s",
            timed_out=True,
        )
    except OSError as e:
        raise ExecutionFailed(command, str(e)) from e

    return GitResult(
        returncode=result.returncode,
        stdout=result.stdout,
        stderr=result.stderr,
    )


def run_git(
    args: list[str],
    cwd: Path | None = None,
    timeout: int | None = None,
) -> GitResult:
    """
    Run a git subcommand with the configured binary and timeout.

    Args:
        args: Git arguments (e.g., ["status", "--porcelain"])
        cwd: Working directory for the command
        timeout: Override the configured timeout in seconds

    Raises:
        ConfigError: if the settings cannot be loaded
    """
    try:
        config = get_git_config()
    except (FileNotFoundError, ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid gitscope settings: {e}") from e
    return execute(
        config.git_binary,
        args,
        cwd=cwd,
        timeout=timeout if timeout is not None else config.timeout,
    )


def require_success(result: GitResult, message: str) -> GitResult:
    """Return result, or raise OperationFailed carrying git's diagnostic.

    Some failures (e.g. "nothing to commit") are reported on stdout, so
    stdout is used when stderr is empty.
    """
    if not result.success:
        raise OperationFailed(message, result.stderr.strip() or result.stdout)
    return result

"""
Scoped execution for directory-relative git operations.

The process working directory is shared mutable state, so every scoped
section (chdir -> operate -> restore) runs under one process-wide lock.
The lock is re-entrant: a scoped operation may call other scoped helpers
(e.g. list_remotes checks is_repository first) without deadlocking.
"""

import logging
import os
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, TypeVar

from gitscope.git.errors import InvalidLocation

logger = logging.getLogger(__name__)

R = TypeVar("R")

_cwd_lock = threading.RLock()


def validate_location(directory) -> Path:
    """Return directory as an absolute Path, or raise InvalidLocation."""
    path = Path(directory).expanduser()
    if not path.is_dir():
        raise InvalidLocation(path)
    return path.resolve()


@contextmanager
def scoped_directory(directory) -> Iterator[Path]:
    """
    Change into directory for the duration of the block.

    The previous working directory is restored on every exit path,
    including exceptions raised inside the block.

    Raises:
        InvalidLocation: if directory is missing, not a directory, or cannot
            be entered (e.g. permission denied)
    """
    target = validate_location(directory)
    with _cwd_lock:
        try:
            previous = os.getcwd()
            os.chdir(target)
        except OSError as e:
            raise InvalidLocation(target, e.strerror or str(e)) from e
        try:
            yield target
        finally:
            os.chdir(previous)
            logger.debug(f"Restored working directory {previous}")


def run_scoped(directory, operation: Callable[[Path], R]) -> R:
    """
    Run operation inside directory and return its result unchanged.

    operation receives the resolved directory so it can pass it on
    explicitly (e.g. as a subprocess cwd) instead of relying on the
    process working directory.
    """
    with scoped_directory(directory) as target:
        return operation(target)

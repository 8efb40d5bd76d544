"""Result type for lenient probes.

Probes answer yes/no (or a value) and never raise for git-level failures.
Probe keeps the answer and, when the answer is a fallback, the reason, so
callers can tell "not applicable" from "errored".
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Probe:
    """Answer of a probe plus the failure that produced it, if any."""
    value: Any
    error: str | None = None

    @property
    def errored(self) -> bool:
        return self.error is not None

    def __bool__(self) -> bool:
        return bool(self.value)

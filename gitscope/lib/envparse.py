"""
Safe .env parser for gitscope settings.

Reads KEY=value lines without shell execution. Values that look like shell
injection are rejected, since settings such as GIT_BINARY end up in argv.
"""

import os
import re
from pathlib import Path

FORBIDDEN_PATTERNS = [
    r'`',           # backticks
    r'\$\(',        # command substitution
    r'\$\{',        # variable expansion
    r';',           # command chaining
    r'&&',
    r'\|',          # pipes and OR chaining
]

KEY_PATTERN = re.compile(r'^[A-Z][A-Z0-9_]*$')


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value


def check_value(key: str, value: str) -> None:
    """Raise ValueError if value contains a forbidden shell pattern."""
    for pattern in FORBIDDEN_PATTERNS:
        if re.search(pattern, value):
            raise ValueError(f"{key}: Forbidden pattern in value")


def load_env(filepath) -> dict[str, str]:
    """
    Parse a settings file, return dict.

    Raises:
        FileNotFoundError: if file doesn't exist
        ValueError: if syntax invalid or forbidden pattern found
    """
    path = Path(filepath)
    if not path.is_file():
        raise FileNotFoundError(f"Env file not found: {filepath}")

    result = {}
    for lineno, line in enumerate(path.read_text().splitlines(), 1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue

        if line.startswith('export '):
            line = line[len('export '):].lstrip()

        if '=' not in line:
            raise ValueError(f"Line {lineno}: Invalid syntax (no '=')")

        key, _, value = line.partition('=')
        key = key.strip()
        if not KEY_PATTERN.match(key):
            raise ValueError(f"Line {lineno}: Invalid key '{key}'")

        value = _unquote(value.strip())
        try:
            check_value(key, value)
        except ValueError:
            raise ValueError(f"Line {lineno}: Forbidden pattern in value") from None

        result[key] = value

    return result


def environ_overrides(prefix: str, keys: dict[str, str]) -> dict[str, str]:
    """
    Collect process environment overrides.

    Args:
        prefix: Environment variable prefix (e.g., "GITSCOPE_")
        keys: Map of environment suffix -> settings key,
              e.g. {"GIT_BINARY": "GIT_BINARY", "TIMEOUT": "GIT_TIMEOUT"}

    Returns:
        Settings keys for every variable that is set
    """
    result = {}
    for suffix, key in keys.items():
        value = os.environ.get(prefix + suffix)
        if value is None:
            continue
        check_value(prefix + suffix, value)
        result[key] = value.strip()
    return result

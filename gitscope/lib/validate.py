"""
JSON Schema checks for gitscope settings.

Schemas live in gitscope/schemas/<name>.schema.json. Settings are checked
as the raw strings read from the settings file and GITSCOPE_* variables,
before any of them is converted or handed to git.
"""

import json
from pathlib import Path

import jsonschema

SCHEMAS_DIR = Path(__file__).parent.parent / "schemas"


class ValidationError(Exception):
    """A settings mapping does not match its schema."""

    def __init__(self, schema_name: str, message: str, key: str | None = None):
        self.schema_name = schema_name
        self.key = key
        where = f" (setting {key})" if key else ""
        super().__init__(f"[{schema_name}] {message}{where}")


_schemas: dict[str, dict] = {}


def load_schema(schema_name: str) -> dict:
    """Read a bundled schema once and keep it for later calls."""
    if schema_name not in _schemas:
        schema_path = SCHEMAS_DIR / f"{schema_name}.schema.json"
        if not schema_path.is_file():
            raise ValidationError(schema_name, f"No bundled schema at {schema_path}")
        _schemas[schema_name] = json.loads(schema_path.read_text())
    return _schemas[schema_name]


def validate(settings: dict[str, str], schema_name: str) -> None:
    """
    Check settings against a bundled schema.

    Only the first violation is reported, naming the offending setting.

    Raises:
        ValidationError: if settings do not match
    """
    try:
        jsonschema.validate(instance=settings, schema=load_schema(schema_name))
    except jsonschema.ValidationError as e:
        key = str(e.absolute_path[0]) if e.absolute_path else None
        raise ValidationError(schema_name, e.message, key) from None

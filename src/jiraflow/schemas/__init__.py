"""JSON Schema definitions and validation for persisted jiraflow documents.

Schemas:
    - path_cache.schema.json: Path cache document (workflows keyed by
      "<issueType>:<fromState>:<toState>")

Usage:
    from jiraflow.schemas import validate_path_cache

    with open("jira-workflows.json") as f:
        data = json.load(f)
    validate_path_cache(data)  # Raises jsonschema.ValidationError if invalid
"""

from __future__ import annotations

import json
from importlib.resources import files
from typing import Any

import jsonschema


def _load_schema(name: str) -> dict[str, Any]:
    """Load a JSON schema from the schemas package.

    Args:
        name: Schema filename (e.g., 'path_cache.schema.json')

    Returns:
        Parsed JSON schema as a dictionary
    """
    schema_text = files("jiraflow.schemas").joinpath(name).read_text()
    result: dict[str, Any] = json.loads(schema_text)
    return result


def get_path_cache_schema() -> dict[str, Any]:
    """Get the path cache document schema."""
    return _load_schema("path_cache.schema.json")


def validate_path_cache(data: dict[str, Any]) -> None:
    """Validate a path cache document against the schema.

    Args:
        data: Parsed cache document

    Raises:
        jsonschema.ValidationError: If validation fails
    """
    jsonschema.validate(data, get_path_cache_schema())


__all__ = [
    "get_path_cache_schema",
    "validate_path_cache",
]

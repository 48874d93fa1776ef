"""navguard JSON Schema definitions and validation utilities.

Schemas:
    - policy.schema.json: Guard tree declared as JSON (leaf references,
      combinators, execution orders, path conditions)

Usage:
    from navguard.schemas import validate_policy

    with open("policy.json") as f:
        data = json.load(f)
    validate_policy(data)  # Raises jsonschema.ValidationError if invalid
"""

from __future__ import annotations

import json
from importlib.resources import files
from typing import Any

import jsonschema


def _load_schema(name: str) -> dict[str, Any]:
    """Load a JSON schema from the schemas package.

    Args:
        name: Schema filename (e.g., 'policy.schema.json')

    Returns:
        Parsed JSON schema as a dictionary
    """
    schema_text = files("navguard.schemas").joinpath(name).read_text()
    result: dict[str, Any] = json.loads(schema_text)
    return result


def get_policy_schema() -> dict[str, Any]:
    """Get the policy.json schema.

    Returns:
        JSON Schema for guard policy documents
    """
    return _load_schema("policy.schema.json")


def validate_policy(data: dict[str, Any]) -> None:
    """Validate a policy document against the schema.

    Args:
        data: Policy document dictionary

    Raises:
        jsonschema.ValidationError: If validation fails
    """
    jsonschema.validate(data, get_policy_schema())


__all__ = [
    "get_policy_schema",
    "validate_policy",
]

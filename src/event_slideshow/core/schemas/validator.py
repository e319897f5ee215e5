"""
Schema Validation Utilities

Validates stored submission documents before they are normalised into
Submission models.

Two levels:
- Basic checks (always): required fields, id and image reference present
- Strict mode: full JSON Schema validation with jsonschema against
  ``submission.schema.json``
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_submission(data: Any, *, strict: bool = False) -> None:
    """
    Validate a stored submission document.

    Args:
        data: Submission dictionary to validate
        strict: If True, also validate against the JSON schema

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Submission must be an object, got {type(data).__name__}",
            path="",
        )

    if data.get("_id") in (None, "") and data.get("id") in (None, ""):
        raise ValidationError("Missing submission id", path="_id", errors=["Missing field: _id"])

    # Timestamps are the fairness tie-breaker; documents without one are
    # rejected here rather than guessed.
    if data.get("createdAt") in (None, ""):
        raise ValidationError(
            "Missing createdAt timestamp",
            path="createdAt",
            errors=["Missing field: createdAt"],
        )

    if not (data.get("imageUrl") or data.get("finalImageUrl")):
        raise ValidationError(
            "Missing image reference (imageUrl or finalImageUrl)",
            path="imageUrl",
            errors=["Missing field: imageUrl"],
        )

    play_count = data.get("playCount")
    if play_count is not None and (
        isinstance(play_count, bool) or not isinstance(play_count, int) or play_count < 0
    ):
        raise ValidationError(
            f"Invalid playCount: {play_count!r} (must be a non-negative integer)",
            path="playCount",
        )

    metadata = data.get("metadata")
    if metadata is not None and not isinstance(metadata, dict):
        raise ValidationError(
            f"Invalid metadata: expected an object, got {type(metadata).__name__}",
            path="metadata",
        )

    if strict:
        _validate_with_schema(data, "submission")


def _validate_with_schema(data: dict[str, Any], schema_name: str) -> None:
    """Run full JSON Schema validation and collect every error."""
    schema = _load_schema(schema_name)
    validator = jsonschema.Draft7Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.path))
    if errors:
        first = errors[0]
        path = "/".join(str(p) for p in first.path)
        raise ValidationError(
            f"Schema validation failed: {first.message}",
            path=path,
            errors=[e.message for e in errors],
        )

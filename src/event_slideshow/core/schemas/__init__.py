"""JSON schema validation for stored submission documents."""

from .validator import validate_submission, ValidationError

__all__ = [
    "validate_submission",
    "ValidationError",
]

"""Question validation and JSON Schema checks."""

from .validator import (
    ValidationError,
    validate_payload,
    validate_question,
)

__all__ = [
    "ValidationError",
    "validate_payload",
    "validate_question",
]

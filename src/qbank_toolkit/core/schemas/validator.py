"""
Schema Validation Utilities

Two kinds of checks live here:

- ``validate_question()`` inspects a ParsedQuestion (freshly assembled or
  rebuilt after a manual edit) and returns human-readable issues. It never
  raises; an empty list means the record is valid.
- ``validate_payload()`` checks a serialized dictionary against the JSON
  Schema shipped with the package and raises ValidationError on the first
  violation.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List

import jsonschema

from ..models.formats import DEFAULT_TOPIC, OPTION_LETTERS, UNKNOWN_KEY, QuestionKind
from ..models.questions import ParsedQuestion
from qbank_toolkit.common.thresholds import EXTRACTION_THRESHOLDS

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
    """Raised when serialized data fails schema validation."""
    
    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_question(question: ParsedQuestion) -> List[str]:
    """
    Check a question for integrity problems.
    
    Every check runs; nothing short-circuits. A default topic is reported
    as a soft quality signal for reviewers.
    
    Args:
        question: Question to check
        
    Returns:
        List of issue strings, empty when the question is valid
        
    Example:
        >>> validate_question(question_without_key)
        ['Answer key not identified']
    """
    issues: List[str] = []
    
    statement = (question.statement or "").strip()
    if len(statement) < EXTRACTION_THRESHOLDS.min_statement_chars:
        issues.append(f"Statement too short ({len(statement)} characters)")
    
    count = question.option_count
    if question.question_kind is QuestionKind.TRUE_FALSE:
        if count != EXTRACTION_THRESHOLDS.true_false_options:
            issues.append(f"True/false question must have exactly 2 options (found {count})")
    elif count < EXTRACTION_THRESHOLDS.min_multiple_choice_options:
        issues.append(f"Only {count} options found")
    
    key = question.correct_key
    if key == UNKNOWN_KEY:
        issues.append("Answer key not identified")
    elif key not in OPTION_LETTERS:
        issues.append(f"Invalid answer key: {key!r}")
    elif not (question.options.get(key) or "").strip():
        issues.append(f"Answer key {key} has no matching option")
    
    if not question.topic or question.topic == DEFAULT_TOPIC:
        issues.append("Topic not identified")
    
    return issues


def validate_payload(data: dict[str, Any], schema: str = "parsed_question") -> None:
    """
    Validate serialized data against a bundled JSON Schema.
    
    Args:
        data: Dictionary to validate (e.g. from ParsedQuestion.to_dict())
        schema: "parsed_question" or "parse_result"
        
    Raises:
        ValidationError: If data is invalid
        FileNotFoundError: If the schema name is unknown
    """
    try:
        jsonschema.validate(data, _load_schema(schema))
    except jsonschema.ValidationError as e:
        raise ValidationError(
            f"Schema validation failed: {e.message}",
            path=".".join(str(p) for p in e.absolute_path),
            errors=[e.message],
        ) from e

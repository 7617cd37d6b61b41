"""
Question Bank Core Package

Shared data models, validation and serialization used by the parser and by
callers that edit parsed questions.

1. **Immutable Data Models**
   - ParsedQuestion, ParseResult and ParseStats are frozen dataclasses
   - An edit produces a new instance, never an in-place change

2. **Derived Values**
   - question_kind follows detected_format
   - confidence is computed by the assembler, never read from the source
"""

from .models import (
    Confidence,
    ParsedQuestion,
    ParseResult,
    ParseStats,
    QuestionFormat,
    QuestionKind,
)
from .schemas import ValidationError, validate_payload, validate_question

__all__ = [
    "Confidence",
    "ParsedQuestion",
    "ParseResult",
    "ParseStats",
    "QuestionFormat",
    "QuestionKind",
    "ValidationError",
    "validate_payload",
    "validate_question",
]

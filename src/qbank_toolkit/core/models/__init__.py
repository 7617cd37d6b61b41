"""
Core Models Package

Immutable data models that serve as the single source of truth for the
parser and its callers.

All models in this package are frozen dataclasses. A record is built once
by the assembler; an edited record is a new instance.
"""

from .formats import (
    Confidence,
    QuestionFormat,
    QuestionKind,
    OPTION_LETTERS,
    TRUE_FALSE_OPTIONS,
    UNKNOWN_KEY,
    DEFAULT_TOPIC,
)
from .questions import ParsedQuestion
from .results import ParseResult, ParseStats

__all__ = [
    "Confidence",
    "QuestionFormat",
    "QuestionKind",
    "OPTION_LETTERS",
    "TRUE_FALSE_OPTIONS",
    "UNKNOWN_KEY",
    "DEFAULT_TOPIC",
    "ParsedQuestion",
    "ParseResult",
    "ParseStats",
]

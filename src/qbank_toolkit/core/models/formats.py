"""
Module: formats

Purpose:
    Enumerations describing how a question was recognized: the textual
    dialect it was written in, the kind of question that implies, and the
    reliability level attached to the extracted record.

Key Classes:
    - QuestionFormat: Detected dialect tag (format1..format4, unknown)
    - QuestionKind: multiple_choice or true_false, derived from format
    - Confidence: high / medium / low

Used By:
    - core.models.questions.ParsedQuestion
    - parser.detection.formats: Produces QuestionFormat tags
    - parser.assembler: Derives kind and confidence
"""

from __future__ import annotations

from enum import Enum

# Topic used when a block has no topic line
DEFAULT_TOPIC = "General"

# Sentinel answer key when no key could be determined
UNKNOWN_KEY = "unknown"

OPTION_LETTERS = ("A", "B", "C", "D", "E")

# Synthetic option set for true/false questions (A affirmative, B negative)
TRUE_FALSE_OPTIONS = {"A": "TRUE", "B": "FALSE"}


class QuestionFormat(str, Enum):
    """Textual dialect a block was written in."""
    MC_SIMPLE = "format1"       # TOPIC / STATEMENT / OPTIONS labels
    MC_METADATA = "format2"     # Adds BOARD and YEAR
    TF_BRACKETED = "format3"    # "( ) TRUE  ( ) FALSE" markers
    TF_BARE = "format4"         # "TRUE" / "FALSE" on their own lines
    UNKNOWN = "unknown"
    
    def __str__(self) -> str:
        return self.value
    
    @property
    def kind(self) -> "QuestionKind":
        """Question kind implied by this format."""
        if self in (QuestionFormat.TF_BRACKETED, QuestionFormat.TF_BARE):
            return QuestionKind.TRUE_FALSE
        return QuestionKind.MULTIPLE_CHOICE


class QuestionKind(str, Enum):
    """Type of question, drives option-count rules."""
    MULTIPLE_CHOICE = "multiple_choice"
    TRUE_FALSE = "true_false"
    
    def __str__(self) -> str:
        return self.value


class Confidence(str, Enum):
    """Reliability of an extracted question, used to prioritize review."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    
    def __str__(self) -> str:
        return self.value

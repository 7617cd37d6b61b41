"""
Module: questions

Purpose:
    Provides the ParsedQuestion dataclass - the structured record produced
    from one block of exam text. Immutable once constructed; any edit is
    made by building a new instance and re-running validation.

Key Functions:
    - ParsedQuestion.option_count: Number of non-empty options
    - ParsedQuestion.has_answer_key: Whether the key was resolved
    - ParsedQuestion.to_dict() / ParsedQuestion.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - .formats: QuestionFormat, QuestionKind, Confidence

Used By:
    - parser.assembler: Builds instances from text blocks
    - core.models.results.ParseResult
    - core.schemas.validator.validate_question
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .formats import (
    OPTION_LETTERS,
    UNKNOWN_KEY,
    Confidence,
    QuestionFormat,
    QuestionKind,
)


@dataclass(frozen=True)
class ParsedQuestion:
    """
    Structured exam question (immutable).
    
    Attributes:
        topic: Main topic, "General" when the block had no topic line
        statement: Question prose
        options: Option letter -> text, in letter order
        correct_key: "A".."E" or "unknown"
        confidence: Derived reliability level
        detected_format: Dialect the block was recognized as
        question_kind: Derived from detected_format
        sequence_number: Question number as written in the source
        source_board: Issuing exam board, when declared
        source_year: Reference year, when declared
        sub_topic: Second half of a split topic line
        validation_issues: Validator output captured at assembly time
    
    Invariants:
        - option keys are letters A-E
        - correct_key is a letter A-E or "unknown"
        - question_kind matches detected_format
    
    Example:
        >>> q = ParsedQuestion(
        ...     topic="Credit Cards",
        ...     statement="Which rate applies to revolving credit balances?",
        ...     options={"A": "Fixed", "B": "Variable", "C": "None"},
        ...     correct_key="B",
        ...     confidence=Confidence.MEDIUM,
        ...     detected_format=QuestionFormat.MC_SIMPLE,
        ...     question_kind=QuestionKind.MULTIPLE_CHOICE,
        ... )
        >>> q.option_count
        3
    """
    
    topic: str
    statement: str
    options: Dict[str, str]
    correct_key: str
    confidence: Confidence
    detected_format: QuestionFormat
    question_kind: QuestionKind
    sequence_number: Optional[int] = None
    source_board: Optional[str] = None
    source_year: Optional[int] = None
    sub_topic: Optional[str] = None
    validation_issues: Tuple[str, ...] = field(default_factory=tuple)
    
    def __post_init__(self) -> None:
        """Validate question on construction."""
        bad_letters = [k for k in self.options if k not in OPTION_LETTERS]
        if bad_letters:
            raise ValueError(f"option letters must be A-E: {bad_letters!r}")
        
        if self.correct_key != UNKNOWN_KEY and self.correct_key not in OPTION_LETTERS:
            raise ValueError(f"correct_key must be A-E or 'unknown': {self.correct_key!r}")
        
        if not isinstance(self.confidence, Confidence):
            raise ValueError(f"confidence must be a Confidence: {self.confidence!r}")
        if not isinstance(self.detected_format, QuestionFormat):
            raise ValueError(f"detected_format must be a QuestionFormat: {self.detected_format!r}")
        if self.question_kind is not self.detected_format.kind:
            raise ValueError(
                f"question_kind {self.question_kind} does not match format {self.detected_format}"
            )
        
        # Letter order regardless of the order options were recovered in
        ordered = {k: self.options[k] for k in OPTION_LETTERS if k in self.options}
        object.__setattr__(self, "options", ordered)
        object.__setattr__(self, "validation_issues", tuple(self.validation_issues))
    
    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────
    
    @property
    def option_count(self) -> int:
        """Number of options with non-empty text."""
        return sum(1 for text in self.options.values() if text and text.strip())
    
    @property
    def has_answer_key(self) -> bool:
        return self.correct_key != UNKNOWN_KEY
    
    @property
    def is_valid(self) -> bool:
        """True when validation found no issues."""
        return not self.validation_issues
    
    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────
    
    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to a JSON-compatible dictionary.
        
        Returns:
            Dictionary with enum values as strings and options in
            letter order.
        """
        return {
            "sequence_number": self.sequence_number,
            "source_board": self.source_board,
            "source_year": self.source_year,
            "topic": self.topic,
            "sub_topic": self.sub_topic,
            "statement": self.statement,
            "options": dict(self.options),
            "correct_key": self.correct_key,
            "confidence": self.confidence.value,
            "detected_format": self.detected_format.value,
            "question_kind": self.question_kind.value,
            "validation_issues": list(self.validation_issues),
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParsedQuestion":
        """
        Deserialize from a dictionary.
        
        Args:
            data: Dictionary produced by to_dict() (or an edited copy).
            
        Returns:
            ParsedQuestion instance
            
        Raises:
            ValueError: If an enum value or letter is not recognized
            KeyError: If a required field is missing
        """
        detected_format = QuestionFormat(data["detected_format"])
        return cls(
            topic=data["topic"],
            statement=data["statement"],
            options=dict(data["options"]),
            correct_key=data.get("correct_key", UNKNOWN_KEY),
            confidence=Confidence(data["confidence"]),
            detected_format=detected_format,
            question_kind=QuestionKind(data.get("question_kind", detected_format.kind.value)),
            sequence_number=data.get("sequence_number"),
            source_board=data.get("source_board"),
            source_year=data.get("source_year"),
            sub_topic=data.get("sub_topic"),
            validation_issues=tuple(data.get("validation_issues", ())),
        )

"""
Module: results

Purpose:
    Aggregate output of parsing a whole document: the accepted questions
    in source order, one diagnostic string per suspicious rejected block,
    and summary statistics.

Key Classes:
    - ParseStats: Counts per format, per confidence, and answer-key coverage
    - ParseResult: Questions + errors + stats, with a derived success flag

Used By:
    - parser.pipeline.parse_document: Builds the result
    - core.utils.serialization: JSON output
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Tuple

from .formats import Confidence, QuestionFormat
from .questions import ParsedQuestion


@dataclass(frozen=True)
class ParseStats:
    """
    Statistics over accepted questions.
    
    Attributes:
        total: Number of accepted questions
        by_format: Format tag -> count (every tag present, zeros included)
        with_answer_key: Questions whose key was resolved
        without_answer_key: Questions left with the "unknown" key
        by_confidence: Confidence level -> count
    """
    total: int = 0
    by_format: Dict[str, int] = field(
        default_factory=lambda: {f.value: 0 for f in QuestionFormat}
    )
    with_answer_key: int = 0
    without_answer_key: int = 0
    by_confidence: Dict[str, int] = field(
        default_factory=lambda: {c.value: 0 for c in Confidence}
    )
    
    @classmethod
    def from_questions(cls, questions: Iterable[ParsedQuestion]) -> "ParseStats":
        """Compute statistics for a sequence of questions."""
        by_format = {f.value: 0 for f in QuestionFormat}
        by_confidence = {c.value: 0 for c in Confidence}
        total = with_key = 0
        
        for question in questions:
            total += 1
            by_format[question.detected_format.value] += 1
            by_confidence[question.confidence.value] += 1
            if question.has_answer_key:
                with_key += 1
        
        return cls(
            total=total,
            by_format=by_format,
            with_answer_key=with_key,
            without_answer_key=total - with_key,
            by_confidence=by_confidence,
        )
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "by_format": dict(self.by_format),
            "with_answer_key": self.with_answer_key,
            "without_answer_key": self.without_answer_key,
            "by_confidence": dict(self.by_confidence),
        }


@dataclass(frozen=True)
class ParseResult:
    """
    Result of parsing a document.
    
    Partial success is normal: some blocks may be rejected while others
    yield questions.
    
    Attributes:
        questions: Accepted questions in block order
        errors: Human-readable diagnostics for rejected blocks
        stats: Statistics over the accepted questions
    """
    questions: Tuple[ParsedQuestion, ...] = ()
    errors: Tuple[str, ...] = ()
    stats: ParseStats = field(default_factory=ParseStats)
    
    @property
    def success(self) -> bool:
        """True iff at least one question was produced."""
        return len(self.questions) > 0
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "questions": [q.to_dict() for q in self.questions],
            "errors": list(self.errors),
            "stats": self.stats.to_dict(),
        }
    
    def to_json(self, indent: int | None = 2) -> str:
        """Deterministic JSON rendering (same input, same bytes)."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

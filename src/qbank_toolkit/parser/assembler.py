"""
Module: parser.assembler

Purpose:
    Turn one candidate block into a ParsedQuestion or a rejection. Runs
    format detection, the field extractors and the validator, then derives
    the confidence level.

Key Functions:
    - assemble_question(): ParsedQuestion or None
    - assemble_block(): Same, with the rejection reason for diagnostics
    - revise_question(): New record after a manual edit, re-derived
    - derive_confidence(): Confidence rules

Key Classes:
    - AssemblyOutcome: Question or rejection reason

Used By:
    - parser.pipeline.parse_document
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields as dataclass_fields, replace
from typing import Any, Dict, Optional

from qbank_toolkit.common.text import normalize_document
from qbank_toolkit.common.thresholds import EXTRACTION_THRESHOLDS
from qbank_toolkit.core.models.formats import (
    DEFAULT_TOPIC,
    UNKNOWN_KEY,
    Confidence,
    QuestionFormat,
    QuestionKind,
)
from qbank_toolkit.core.models.questions import ParsedQuestion
from qbank_toolkit.core.schemas.validator import validate_question
from .config import DEFAULT_CONFIG, ParserConfig
from .detection.formats import detect_format
from .extraction import (
    extract_answer_key,
    extract_metadata,
    extract_options,
    extract_statement,
    extract_topic,
)

logger = logging.getLogger(__name__)

REJECT_UNKNOWN_FORMAT = "unrecognized format"
REJECT_STATEMENT = "statement missing or too short"
REJECT_OPTIONS = "too few options"


@dataclass(frozen=True)
class AssemblyOutcome:
    """
    Result of assembling one block.
    
    Attributes:
        question: The record, or None when the block was rejected.
        reason: Rejection reason, empty on success.
        detected_format: Format the block was classified as.
    """
    question: Optional[ParsedQuestion]
    reason: str = ""
    detected_format: QuestionFormat = QuestionFormat.UNKNOWN
    
    @property
    def accepted(self) -> bool:
        return self.question is not None


def minimum_options(kind: QuestionKind) -> int:
    """Fewest options a record of ``kind`` may carry."""
    if kind is QuestionKind.TRUE_FALSE:
        return EXTRACTION_THRESHOLDS.true_false_options
    return EXTRACTION_THRESHOLDS.min_multiple_choice_options


def derive_confidence(
    kind: QuestionKind,
    option_count: int,
    correct_key: str,
    topic: str,
) -> Confidence:
    """
    Confidence rules.
    
    - low: answer key unknown
    - medium: multiple choice with fewer than five options, or default topic
    - high: otherwise
    """
    if correct_key == UNKNOWN_KEY:
        return Confidence.LOW
    if kind is QuestionKind.MULTIPLE_CHOICE and option_count < EXTRACTION_THRESHOLDS.full_option_count:
        return Confidence.MEDIUM
    if not topic or topic == DEFAULT_TOPIC:
        return Confidence.MEDIUM
    return Confidence.HIGH


def assemble_block(block: str, config: Optional[ParserConfig] = None) -> AssemblyOutcome:
    """
    Assemble one block, keeping the rejection reason.
    
    Args:
        block: Candidate question block.
        config: Optional parser configuration.
        
    Returns:
        AssemblyOutcome with a question or a reason.
    """
    config = config or DEFAULT_CONFIG
    block = normalize_document(block)
    fmt = detect_format(block)
    
    if fmt is QuestionFormat.UNKNOWN and len(block) < config.noise_threshold_chars:
        return AssemblyOutcome(None, REJECT_UNKNOWN_FORMAT, fmt)
    
    kind = fmt.kind
    metadata = extract_metadata(block)
    topic = extract_topic(block)
    
    statement = extract_statement(block, config.min_statement_chars)
    if not statement:
        return AssemblyOutcome(None, REJECT_STATEMENT, fmt)
    
    options = extract_options(
        block,
        fmt,
        strict=config.strict_true_false,
        min_inline_chars=config.min_inline_option_chars,
    )
    if len(options) < minimum_options(kind):
        return AssemblyOutcome(None, f"{REJECT_OPTIONS} ({len(options)})", fmt)
    
    key = extract_answer_key(block, fmt)
    if key != UNKNOWN_KEY and key not in options:
        logger.debug(f"Answer key {key} has no matching option, treating as unknown")
        key = UNKNOWN_KEY
    
    question = ParsedQuestion(
        topic=topic.topic,
        sub_topic=topic.sub_topic,
        statement=statement,
        options=options,
        correct_key=key,
        confidence=derive_confidence(kind, len(options), key, topic.topic),
        detected_format=fmt,
        question_kind=kind,
        sequence_number=metadata.sequence_number,
        source_board=metadata.source_board,
        source_year=metadata.source_year,
    )
    question = replace(question, validation_issues=tuple(validate_question(question)))
    
    logger.debug(
        f"Assembled Q{question.sequence_number or '?'}: topic={question.topic!r}, "
        f"format={fmt}, key={key}, confidence={question.confidence}"
    )
    return AssemblyOutcome(question, "", fmt)


def assemble_question(block: str, config: Optional[ParserConfig] = None) -> Optional[ParsedQuestion]:
    """
    Assemble one block into a question.
    
    Args:
        block: Candidate question block.
        config: Optional parser configuration.
        
    Returns:
        ParsedQuestion, or None when the block was rejected.
        
    Example:
        >>> q = assemble_question(block_text)
        >>> q.topic, q.correct_key, q.confidence
        ('Credit Cards', 'B', <Confidence.HIGH: 'high'>)
    """
    return assemble_block(block, config).question


def revise_question(question: ParsedQuestion, **changes: Any) -> ParsedQuestion:
    """
    Build a new question from an edited copy and re-derive its state.
    
    ``question_kind`` follows ``detected_format``; ``confidence`` and
    ``validation_issues`` are recomputed, so they cannot be passed in.
    
    Args:
        question: Original question (not modified).
        **changes: Field values to replace.
        
    Returns:
        New ParsedQuestion.
        
    Raises:
        ValueError: If an unknown or derived field is passed, or a value
            is invalid.
    """
    unknown = set(changes) - {f.name for f in dataclass_fields(ParsedQuestion)}
    if unknown:
        raise ValueError(f"unknown question fields: {sorted(unknown)}")
    derived = {"confidence", "question_kind", "validation_issues"} & set(changes)
    if derived:
        raise ValueError(f"derived fields cannot be edited: {sorted(derived)}")
    
    fields: Dict[str, Any] = question.to_dict()
    fields.update(changes)
    fmt = QuestionFormat(fields["detected_format"])
    options = dict(fields["options"])
    key = fields["correct_key"]
    
    revised = replace(
        question,
        **changes,
        question_kind=fmt.kind,
        confidence=derive_confidence(
            fmt.kind,
            sum(1 for text in options.values() if text and text.strip()),
            key,
            fields["topic"],
        ),
        validation_issues=(),
    )
    return replace(revised, validation_issues=tuple(validate_question(revised)))

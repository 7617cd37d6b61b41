"""
Module: parser.detection.formats

Purpose:
    Classify a candidate block into one of the recognized dialects.
    Surface features overlap between dialects (a true/false block also
    declares board and year), so classification is an ordered rule list
    evaluated top to bottom with early return.

Key Functions:
    - block_features(): Boolean feature tests for a block
    - detect_format(): Apply FORMAT_RULES and return the first match

Key Classes:
    - BlockFeatures: Immutable feature summary
    - FormatRule: One named, ordered classification rule

Used By:
    - parser.assembler: First step of assembling a question
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from qbank_toolkit.core.models.formats import QuestionFormat
from ..vocabulary import (
    BOARD_RE,
    OPTIONS_LABEL_RE,
    STATEMENT_LABEL_RE,
    TOPIC_LINE_RE,
    YEAR_RE,
)
from .markers import TrueFalseMarkers, scan_markers

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlockFeatures:
    """
    Surface features of a block used by the format rules.
    
    Attributes:
        has_board: "BANCA:" / "BOARD:" declared.
        has_year: "ANO:" / "YEAR:" followed by four digits.
        has_topic: Topic label line present.
        has_statement: Statement label present.
        has_options: Options label present.
        markers: True/false markers seen in the block.
    """
    has_board: bool
    has_year: bool
    has_topic: bool
    has_statement: bool
    has_options: bool
    markers: TrueFalseMarkers


@dataclass(frozen=True)
class FormatRule:
    """A classification rule: returns a format when it applies, else None."""
    name: str
    rationale: str
    apply: Callable[[BlockFeatures], Optional[QuestionFormat]]


def block_features(block: str) -> BlockFeatures:
    """Compute the feature tests for ``block``."""
    return BlockFeatures(
        has_board=bool(BOARD_RE.search(block)),
        has_year=bool(YEAR_RE.search(block)),
        has_topic=bool(TOPIC_LINE_RE.search(block)),
        has_statement=bool(STATEMENT_LABEL_RE.search(block)),
        has_options=bool(OPTIONS_LABEL_RE.search(block)),
        markers=scan_markers(block),
    )


def _true_false(f: BlockFeatures) -> Optional[QuestionFormat]:
    if f.markers.has_any and f.has_board and f.has_year:
        if f.markers.has_bracketed:
            return QuestionFormat.TF_BRACKETED
        return QuestionFormat.TF_BARE
    return None


def _metadata(f: BlockFeatures) -> Optional[QuestionFormat]:
    if f.has_board and f.has_year and f.has_topic:
        return QuestionFormat.MC_METADATA
    return None


def _simple(f: BlockFeatures) -> Optional[QuestionFormat]:
    if f.has_topic and f.has_statement and f.has_options:
        return QuestionFormat.MC_SIMPLE
    return None


def _partial(f: BlockFeatures) -> Optional[QuestionFormat]:
    if f.has_statement or f.has_options:
        return QuestionFormat.MC_SIMPLE
    return None


FORMAT_RULES: Tuple[FormatRule, ...] = (
    FormatRule(
        "true_false",
        "Checked first: true/false blocks also declare board and year and "
        "would otherwise be routed to multiple-choice option extraction.",
        _true_false,
    ),
    FormatRule(
        "multiple_choice_metadata",
        "Board, year and topic together identify the metadata dialect.",
        _metadata,
    ),
    FormatRule(
        "multiple_choice_simple",
        "Topic, statement and options labels without provenance.",
        _simple,
    ),
    FormatRule(
        "partial_structure",
        "A statement or options label alone; confidence degrades downstream.",
        _partial,
    ),
)


def detect_format(block: str) -> QuestionFormat:
    """
    Classify a block into exactly one format tag.
    
    Args:
        block: Candidate question block.
        
    Returns:
        The first matching rule's format, or QuestionFormat.UNKNOWN.
        
    Example:
        >>> detect_format("BANCA: X\\nANO: 2018\\nTEMA: Juros\\n...")
        <QuestionFormat.MC_METADATA: 'format2'>
    """
    features = block_features(block)
    for rule in FORMAT_RULES:
        fmt = rule.apply(features)
        if fmt is not None:
            logger.debug(f"Format {fmt} matched by rule '{rule.name}'")
            return fmt
    return QuestionFormat.UNKNOWN

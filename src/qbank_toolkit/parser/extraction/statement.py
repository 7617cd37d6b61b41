"""
Module: parser.extraction.statement

Purpose:
    Statement (question prose) extraction. Strategies, first success wins:

    1. Text after the "ENUNCIADO:" / "STATEMENT:" label
    2. Text after the topic line
    3. Text after the leading heading and metadata lines (blocks with
       neither label nor topic line)

    Every window ends at the first options label, option list, answer
    label or true/false marker, whichever comes first.

Key Functions:
    - extract_statement(): Main entry point
    - statement_window(): Text up to the first terminator

Used By:
    - parser.assembler
"""

from __future__ import annotations

import logging
from typing import Optional

from qbank_toolkit.common.text import clean_fragment
from qbank_toolkit.common.thresholds import EXTRACTION_THRESHOLDS
from ..detection.markers import is_bare_marker_line
from ..vocabulary import (
    ANSWER_LABEL_RE,
    BOARD_RE,
    BRACKET_MARKER_RE,
    OPTIONS_LABEL_RE,
    QUESTION_HEADING_RE,
    SEPARATOR_LINE_RE,
    STATEMENT_LABEL_RE,
    TOPIC_LINE_RE,
    YEAR_RE,
)
from .options import option_block_start
from .strategies import first_success

logger = logging.getLogger(__name__)


def _bare_marker_offset(text: str) -> Optional[int]:
    offset = 0
    for line in text.split("\n"):
        if is_bare_marker_line(line):
            return offset
        offset += len(line) + 1
    return None


def statement_window(text: str) -> str:
    """Return ``text`` up to the first options/answer/marker boundary."""
    ends = [len(text)]
    for pattern in (OPTIONS_LABEL_RE, ANSWER_LABEL_RE, BRACKET_MARKER_RE):
        match = pattern.search(text)
        if match:
            ends.append(match.start())
    for offset in (option_block_start(text), _bare_marker_offset(text)):
        if offset is not None:
            ends.append(offset)
    return clean_fragment(text[:min(ends)])


def _is_header_line(line: str) -> bool:
    stripped = line.strip()
    if not stripped:
        return True
    return bool(
        QUESTION_HEADING_RE.match(stripped)
        or TOPIC_LINE_RE.match(stripped)
        or SEPARATOR_LINE_RE.match(stripped)
        or BOARD_RE.match(stripped)
        or YEAR_RE.match(stripped)
    )


def _skip_header_lines(text: str) -> str:
    lines = text.split("\n")
    index = 0
    while index < len(lines) and _is_header_line(lines[index]):
        index += 1
    return "\n".join(lines[index:])


def labelled_statement(block: str) -> Optional[str]:
    """Text following the statement label."""
    label = STATEMENT_LABEL_RE.search(block)
    if not label:
        return None
    return statement_window(block[label.end():])


def after_topic_line(block: str) -> Optional[str]:
    """Text following the topic line."""
    topic = TOPIC_LINE_RE.search(block)
    if not topic:
        return None
    return statement_window(_skip_header_lines(block[topic.end():]))


def after_header(block: str) -> Optional[str]:
    """Text following the heading and metadata lines, for blocks with no topic line."""
    if TOPIC_LINE_RE.search(block):
        return None
    return statement_window(_skip_header_lines(block))


STATEMENT_STRATEGIES = (labelled_statement, after_topic_line, after_header)


def extract_statement(
    block: str,
    min_chars: int = EXTRACTION_THRESHOLDS.min_statement_chars,
) -> str:
    """
    Extract the question statement.
    
    Args:
        block: Candidate question block.
        min_chars: Shortest acceptable statement.
        
    Returns:
        Statement text, or "" when missing or shorter than ``min_chars``.
    """
    statement = first_success(STATEMENT_STRATEGIES, block) or ""
    if len(statement) < min_chars:
        logger.debug(f"Statement rejected ({len(statement)} chars < {min_chars})")
        return ""
    return statement

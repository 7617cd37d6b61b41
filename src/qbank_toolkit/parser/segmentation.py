"""
Module: parser.segmentation

Purpose:
    Split a whole document into candidate question blocks. Documents have
    no reliable delimiter, so three strategies are tried in order:
    explicit "---" separator lines, "QUESTÃO n" headings, and finally the
    whole document as a single block.

Key Functions:
    - split_into_blocks(): Main entry point

Used By:
    - parser.pipeline.parse_document
"""

from __future__ import annotations

import logging
from typing import List, Optional

from qbank_toolkit.common.text import normalize_document
from .config import DEFAULT_CONFIG, ParserConfig
from .vocabulary import QUESTION_HEADING_SPLIT_RE, SEPARATOR_LINE_RE

logger = logging.getLogger(__name__)


def _keep_substantial(segments: List[str], min_chars: int) -> List[str]:
    """Trim segments and drop those not longer than ``min_chars``."""
    return [s.strip() for s in segments if len(s.strip()) > min_chars]


def split_into_blocks(text: str, config: Optional[ParserConfig] = None) -> List[str]:
    """
    Split a document into candidate question blocks.
    
    Args:
        text: Raw document text.
        config: Optional parser configuration (min_block_chars).
        
    Returns:
        Blocks in document order. Empty when the document is blank.
        
    Example:
        >>> blocks = split_into_blocks(doc_with_two_separated_questions)
        >>> len(blocks)
        2
    """
    config = config or DEFAULT_CONFIG
    normalized = normalize_document(text)
    if not normalized:
        return []
    
    if SEPARATOR_LINE_RE.search(normalized):
        blocks = _keep_substantial(SEPARATOR_LINE_RE.split(normalized), config.min_block_chars)
        if len(blocks) > 1:
            logger.debug(f"Split on separator lines: {len(blocks)} blocks")
            return blocks
    
    blocks = _keep_substantial(QUESTION_HEADING_SPLIT_RE.split(normalized), config.min_block_chars)
    if len(blocks) > 1:
        logger.debug(f"Split on question headings: {len(blocks)} blocks")
        return blocks
    
    logger.debug("No block delimiters found, treating document as one block")
    return [normalized]

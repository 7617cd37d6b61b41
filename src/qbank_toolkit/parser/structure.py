"""
Module: parser.structure

Purpose:
    Cheap pre-filter that tells whether a document carries enough
    structural signals to be worth running through the heuristic parser,
    as opposed to routing it to another extraction path.

Key Functions:
    - structure_signals(): Which signal types are present
    - looks_structured(): At least ``min_structure_signals`` of them

Used By:
    - qbank_toolkit.cli (--check)
    - Callers choosing an extraction path
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional, Pattern

from qbank_toolkit.common.text import normalize_document
from .config import DEFAULT_CONFIG, ParserConfig
from .vocabulary import (
    ANSWER_LABEL_RE,
    OPTIONS_LABEL_RE,
    QUESTION_HEADING_RE,
    SEPARATOR_LINE_RE,
    STATEMENT_LABEL_RE,
    TOPIC_LINE_RE,
)

logger = logging.getLogger(__name__)

# An answer label only counts when something follows it on the same line
_ANSWER_WITH_VALUE_RE = re.compile(ANSWER_LABEL_RE.pattern + r"[ ]*\S", ANSWER_LABEL_RE.flags)

SIGNALS: Dict[str, Pattern[str]] = {
    "question_heading": QUESTION_HEADING_RE,
    "topic_label": TOPIC_LINE_RE,
    "statement_label": STATEMENT_LABEL_RE,
    "options_label": OPTIONS_LABEL_RE,
    "answer_label": _ANSWER_WITH_VALUE_RE,
    "separator_line": SEPARATOR_LINE_RE,
}


def structure_signals(text: str) -> List[str]:
    """
    Names of the signal types present in ``text``, in a fixed order.
    
    Example:
        >>> structure_signals("TEMA: Juros\\nEnunciado: ...\\nGABARITO: B")
        ['topic_label', 'statement_label', 'answer_label']
    """
    normalized = normalize_document(text)
    return [name for name, pattern in SIGNALS.items() if pattern.search(normalized)]


def looks_structured(text: str, config: Optional[ParserConfig] = None) -> bool:
    """
    Whether ``text`` has enough structure for the heuristic parser.
    
    Args:
        text: Raw document text.
        config: Optional configuration (min_structure_signals, default 3).
        
    Returns:
        True when at least ``min_structure_signals`` of the six signal
        types are present.
    """
    config = config or DEFAULT_CONFIG
    found = structure_signals(text)
    logger.debug(f"Structure signals: {found}")
    return len(found) >= config.min_structure_signals

"""
Module: parser.extraction.options

Purpose:
    Answer-option extraction. True/false formats always produce the fixed
    synthetic pair {A: TRUE, B: FALSE}. Multiple-choice formats run three
    passes over the options region, each filling only letters that an
    earlier pass did not capture:

    1. "(A) text" per line
    2. "A) text", "A. text", "A text" per line
    3. Loose inline "A text B text ..." for single-line dumps

Key Functions:
    - extract_options(): Format-aware entry point
    - option_block_start(): Offset of the first option line in a text
    - options_region(): Slice of a block holding the options

Used By:
    - parser.assembler
    - parser.extraction.statement: Statement window boundary
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional, Tuple

from qbank_toolkit.common.text import strip_final_period
from qbank_toolkit.common.thresholds import EXTRACTION_THRESHOLDS
from qbank_toolkit.core.models.formats import TRUE_FALSE_OPTIONS, QuestionFormat, QuestionKind
from ..detection.markers import scan_markers
from ..vocabulary import (
    ANSWER_LABEL_RE,
    BARE_OPTION_LINE_RE,
    OPTIONS_LABEL_RE,
    PAREN_OPTION_LINE_RE,
    STATEMENT_LABEL_RE,
)
from .strategies import fill_until

logger = logging.getLogger(__name__)


def _option_lines(text: str) -> List[Tuple[int, str, str]]:
    """Return (offset, LETTER, text) for every option-looking line."""
    found = []
    for m in PAREN_OPTION_LINE_RE.finditer(text):
        found.append((m.start(), m.group(1).upper(), m.group(2)))
    for m in BARE_OPTION_LINE_RE.finditer(text):
        found.append((m.start(), (m.group(1) or m.group(2)).upper(), m.group(3)))
    return sorted(found)


def option_block_start(text: str) -> Optional[int]:
    """
    Offset where the option list begins.
    
    Anchors on the "A" line closest before the first "B" line, so a
    statement line that merely starts with the article "A" does not end
    the statement. A "B" line with no "A" before it starts the list itself.
    Otherwise the first of at least two option-looking lines is used.

    Returns:
        Character offset into ``text``, or None when no option list exists.
    """
    lines = _option_lines(text)
    for i, (offset, letter, _) in enumerate(lines):
        if letter != "B":
            continue
        for earlier, other, _ in reversed(lines[:i]):
            if other == "A":
                return earlier
        return offset
    return lines[0][0] if len(lines) >= 2 else None


def _cut_at_answer(text: str) -> str:
    match = ANSWER_LABEL_RE.search(text)
    return text[:match.start()] if match else text


def options_region(block: str) -> str:
    """
    Slice of ``block`` holding the options.
    
    After the options label when present, otherwise from the first option
    line after the statement label (or anywhere in the block). Always ends
    before the answer label.
    """
    label = OPTIONS_LABEL_RE.search(block)
    if label:
        return _cut_at_answer(block[label.end():])
    
    statement = STATEMENT_LABEL_RE.search(block)
    offset = statement.end() if statement else 0
    tail = block[offset:]
    start = option_block_start(tail)
    if start is None:
        return ""
    return _cut_at_answer(tail[start:])


# ─────────────────────────────────────────────────────────────────────────────
# Multiple-choice passes
# ─────────────────────────────────────────────────────────────────────────────

def _first_per_letter(pairs) -> Dict[str, str]:
    found: Dict[str, str] = {}
    for letter, text in pairs:
        text = strip_final_period(text)
        if text:
            found.setdefault(letter.upper(), text)
    return found


def parenthesized_pass(region: str) -> Dict[str, str]:
    """Options written as "(A) text"."""
    return _first_per_letter(
        (m.group(1), m.group(2)) for m in PAREN_OPTION_LINE_RE.finditer(region)
    )


def bare_letter_pass(region: str) -> Dict[str, str]:
    """
    Options written as "A) text", "A. text" or "A text".

    A single matching line is a one-line dump and is left to the inline pass.
    """
    matches = list(BARE_OPTION_LINE_RE.finditer(region))
    if len(matches) < 2:
        return {}
    return _first_per_letter((m.group(1) or m.group(2), m.group(3)) for m in matches)


def inline_pass(region: str, min_chars: int = EXTRACTION_THRESHOLDS.min_inline_option_chars) -> Dict[str, str]:
    """
    Options dumped on one line: "A first B second C third".
    
    Each option needs at least ``min_chars`` characters before the next
    letter token.
    """
    flat = " ".join(region.split())
    pattern = re.compile(
        rf"(?:^|\s)\(?([A-E])[\)\.]?\s+(.{{{min_chars},}}?)(?=\s+\(?[A-E][\)\.]?\s|\s*$)"
    )
    return _first_per_letter((m.group(1), m.group(2)) for m in pattern.finditer(flat))


def extract_options(
    block: str,
    fmt: QuestionFormat,
    *,
    strict: bool = False,
    min_inline_chars: int = EXTRACTION_THRESHOLDS.min_inline_option_chars,
) -> Dict[str, str]:
    """
    Extract answer options for a block of the given format.
    
    Args:
        block: Candidate question block.
        fmt: Detected format.
        strict: For true/false formats, return {} unless both an
            affirmative and a negative marker were seen.
        min_inline_chars: Minimum text length for the inline pass.
        
    Returns:
        Letter -> option text. May hold fewer than the format's minimum;
        the assembler decides whether that rejects the block.
        
    Example:
        >>> extract_options("( ) CERTO ( ) ERRADO", QuestionFormat.TF_BRACKETED)
        {'A': 'TRUE', 'B': 'FALSE'}
    """
    if fmt.kind is QuestionKind.TRUE_FALSE:
        markers = scan_markers(block)
        if not markers.complete:
            if strict:
                logger.debug("True/false block lacks an affirmative/negative pair, rejecting (strict)")
                return {}
            logger.debug("True/false block lacks an affirmative/negative pair, synthesizing options")
        return dict(TRUE_FALSE_OPTIONS)
    
    region = options_region(block)
    if not region.strip():
        return {}
    
    passes = (
        parenthesized_pass,
        bare_letter_pass,
        lambda text: inline_pass(text, min_inline_chars),
    )
    return fill_until(passes, region, EXTRACTION_THRESHOLDS.min_multiple_choice_options)

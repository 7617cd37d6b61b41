"""
Module: parser.extraction.answer_key

Purpose:
    Answer-key extraction. Multiple choice reads a single letter after the
    answer label. True/false accepts a letter code ("GABARITO: E"), a code
    restated in brackets ("ANSWER: F (False)") or the full word
    ("RESPOSTA: Certo"), and normalizes it so that the affirmative answer
    is always key A and the negative answer key B, whatever letters the
    source wording uses.

Key Functions:
    - extract_answer_key(): Format-aware entry point

Used By:
    - parser.assembler
"""

from __future__ import annotations

import re
from typing import Optional

from qbank_toolkit.core.models.formats import UNKNOWN_KEY, QuestionFormat, QuestionKind
from ..vocabulary import AFFIRMATIVE_WORDS, ANSWER_LABEL_RE, NEGATIVE_WORDS, polarity
from .strategies import first_success

_WORDS = "|".join(AFFIRMATIVE_WORDS + NEGATIVE_WORDS)
_NOT_LETTER = r"(?![^\W\d_])"

_MC_KEY_RE = re.compile(
    rf"{ANSWER_LABEL_RE.pattern}[ ]*\(?([A-E])\)?{_NOT_LETTER}",
    ANSWER_LABEL_RE.flags,
)
_TF_KEY_RE = re.compile(
    rf"{ANSWER_LABEL_RE.pattern}[ ]*(?:({_WORDS})\b|\(?([A-Z])\)?{_NOT_LETTER}(?:[ ]*\([ ]*({_WORDS})[ ]*\))?)",
    ANSWER_LABEL_RE.flags,
)

_POLARITY_KEYS = {"affirmative": "A", "negative": "B"}


def multiple_choice_key(block: str) -> Optional[str]:
    """Single letter A-E after the answer label."""
    match = _MC_KEY_RE.search(block)
    return match.group(1).upper() if match else None


def true_false_key(block: str) -> Optional[str]:
    """
    Affirmative/negative answer after the answer label, as A or B.
    
    A bracketed restatement wins over the letter code it follows.
    """
    for match in _TF_KEY_RE.finditer(block):
        word, code, restated = match.groups()
        kind = polarity(word or restated or code)
        if kind:
            return _POLARITY_KEYS[kind]
    return None


def extract_answer_key(block: str, fmt: QuestionFormat) -> str:
    """
    Extract the answer key for a block of the given format.
    
    Args:
        block: Candidate question block.
        fmt: Detected format.
        
    Returns:
        "A".."E", or "unknown" when no key could be read.
        
    Example:
        >>> extract_answer_key("...\\nGABARITO: E", QuestionFormat.TF_BARE)
        'B'
        >>> extract_answer_key("...\\nANSWER: d", QuestionFormat.MC_SIMPLE)
        'D'
    """
    if fmt.kind is QuestionKind.TRUE_FALSE:
        strategies = (true_false_key,)
    else:
        strategies = (multiple_choice_key,)
    return first_success(strategies, block) or UNKNOWN_KEY

"""
Module: common.text

Purpose:
    Whitespace hygiene helpers shared by segmentation and extraction.
    Normalization never touches the wording of statements or options,
    only line endings and horizontal spacing.

Key Functions:
    - normalize_document(): One-shot normalization of a whole document
    - clean_fragment(): Trim an extracted field value
    - non_empty_lines(): Stripped, non-blank lines of a block

Used By:
    - parser.segmentation: Normalizes documents before splitting
    - parser.extraction: Cleans captured statement and option text
"""

from __future__ import annotations

import re
from typing import List

_HORIZONTAL_RUN_RE = re.compile(r"[ \t\u00a0]+")
_TRAILING_SPACE_RE = re.compile(r"[ ]+$", re.MULTILINE)
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def normalize_document(text: str) -> str:
    """
    Normalize line endings and horizontal whitespace.
    
    Converts CRLF and CR to LF, folds tabs and non-breaking spaces into
    single spaces, strips trailing spaces from each line and trims the
    document.
    
    Args:
        text: Raw document text.
        
    Returns:
        Normalized text.
        
    Example:
        >>> normalize_document("TEMA:\\tJuros  \\r\\nENUNCIADO: x ")
        'TEMA: Juros\\nENUNCIADO: x'
    """
    if not text:
        return ""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _HORIZONTAL_RUN_RE.sub(" ", text)
    text = _TRAILING_SPACE_RE.sub("", text)
    return text.strip()


def clean_fragment(text: str) -> str:
    """Trim a captured field and squeeze runs of blank lines."""
    return _BLANK_RUN_RE.sub("\n\n", text).strip()


def strip_final_period(text: str) -> str:
    """Drop a single trailing period from option text."""
    text = text.strip()
    return text[:-1].rstrip() if text.endswith(".") else text


def non_empty_lines(text: str) -> List[str]:
    """Return stripped lines of ``text`` that are not blank."""
    return [line.strip() for line in text.split("\n") if line.strip()]

"""
Module: parser.vocabulary

Purpose:
    Localized labels and marker words recognized in source documents.
    Question banks are written with Portuguese labels (TEMA, ENUNCIADO,
    GABARITO...) or their English equivalents; every pattern accepts both
    and matches case-insensitively.

Key Constants:
    - QUESTION_HEADING_RE: "QUESTÃO 12" / "QUESTION 12" at line start
    - TOPIC_LINE_RE, STATEMENT_LABEL_RE, OPTIONS_LABEL_RE, ANSWER_LABEL_RE
    - BOARD_RE, YEAR_RE: provenance metadata
    - AFFIRMATIVE_WORDS, NEGATIVE_WORDS: true/false marker words
    - AFFIRMATIVE_CODES, NEGATIVE_CODES: single-letter answer codes

Used By:
    - parser.detection: Format and marker detection
    - parser.segmentation: Heading and separator splitting
    - parser.extraction: Field extraction
    - parser.structure: Structured-format pre-filter
"""

from __future__ import annotations

import re

_FLAGS = re.IGNORECASE | re.MULTILINE

# QUESTÃO / QUESTAO / QUESTION followed by digits
_QUESTION_WORD = r"QUEST(?:[ÃA]O|ION)"
QUESTION_HEADING_RE = re.compile(rf"^[ ]*{_QUESTION_WORD}[ ]*(\d+)", _FLAGS)
QUESTION_HEADING_SPLIT_RE = re.compile(rf"(?=^[ ]*{_QUESTION_WORD}[ ]*\d+)", _FLAGS)

# A line made only of three or more hyphens
SEPARATOR_LINE_RE = re.compile(r"^[ ]*-{3,}[ ]*$", re.MULTILINE)

TOPIC_LINE_RE = re.compile(r"^[ ]*(?:TEMA|TOPIC|ASSUNTO)[ ]*:[ ]*([^\n]*\S)[ ]*$", _FLAGS)
STATEMENT_LABEL_RE = re.compile(r"\b(?:ENUNCIADO|STATEMENT)[ ]*:", re.IGNORECASE)
# Options and answer labels open a line; the same words inside prose are not labels
OPTIONS_LABEL_RE = re.compile(r"^[ ]*(?:ALTERNATIVAS?|OPTIONS?|CHOICES)[ ]*:", _FLAGS)
ANSWER_LABEL_RE = re.compile(
    r"^[ ]*(?:GABARITO|RESPOSTA(?:[ ]+CORRETA)?|(?:CORRECT[ ]+)?ANSWER|CORRECT)[ ]*:",
    _FLAGS,
)

BOARD_RE = re.compile(r"\b(?:BANCA|BOARD)[ ]*:[ ]*([^\n]*\S)", re.IGNORECASE)
YEAR_RE = re.compile(r"\b(?:ANO|YEAR)[ ]*:[ ]*(\d{4})\b", re.IGNORECASE)

# True/false marker words (compared upper-cased)
AFFIRMATIVE_WORDS = ("CERTO", "CORRETO", "VERDADEIRO", "TRUE")
NEGATIVE_WORDS = ("ERRADO", "INCORRETO", "FALSO", "FALSE")

# Single-letter answer codes for true/false keys:
# C = certo, V = verdadeiro, T = true; E = errado, F = falso/false.
# A and B are accepted as the internal codes themselves.
AFFIRMATIVE_CODES = ("C", "V", "T", "A")
NEGATIVE_CODES = ("E", "F", "B")

_WORDS = "|".join(AFFIRMATIVE_WORDS + NEGATIVE_WORDS)

# "( ) CERTO", "(  ) Falso", "() true"
BRACKET_MARKER_RE = re.compile(rf"\([ ]*\)[ ]*({_WORDS})\b", re.IGNORECASE)


def polarity(word: str) -> str | None:
    """
    Classify a marker word or letter code.
    
    Returns:
        "affirmative", "negative", or None when the token is neither
        
    Example:
        >>> polarity("Errado")
        'negative'
        >>> polarity("c")
        'affirmative'
    """
    token = word.strip().upper()
    if token in AFFIRMATIVE_WORDS or token in AFFIRMATIVE_CODES:
        return "affirmative"
    if token in NEGATIVE_WORDS or token in NEGATIVE_CODES:
        return "negative"
    return None


# Option lines: "(A) text", "A) text", "A. text", "A - text", "A text", "a) text".
# Lowercase letters need a ")" or "." so Portuguese articles ("a taxa...")
# at line start are not taken for options.
PAREN_OPTION_LINE_RE = re.compile(r"^[ ]*\(([A-Ea-e])\)[ ]*(\S[^\n]*)$", re.MULTILINE)
BARE_OPTION_LINE_RE = re.compile(
    r"^[ ]*(?:([A-E])(?:[ ]*[\)\.:\-][ ]*|[ ]+)|([a-e])[\)\.][ ]*)(\S[^\n]*)$",
    re.MULTILINE,
)

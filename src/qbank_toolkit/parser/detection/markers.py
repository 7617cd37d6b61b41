"""
Module: parser.detection.markers

Purpose:
    True/false marker detection. A true/false block shows its two possible
    answers either as empty brackets followed by a word ("( ) CERTO") or as
    the bare word alone on its own line ("FALSE").

Key Functions:
    - find_bracket_markers(): Polarities seen in "( ) WORD" markers
    - find_bare_markers(): Polarities seen as standalone marker lines
    - scan_markers(): Both passes combined

Key Classes:
    - TrueFalseMarkers: Immutable summary of what was seen

Used By:
    - parser.detection.formats: Rule 1 (true/false priority)
    - parser.extraction.options: Synthetic true/false option set
    - parser.extraction.statement: Statement window boundaries
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet

from qbank_toolkit.common.text import non_empty_lines
from ..vocabulary import AFFIRMATIVE_WORDS, BRACKET_MARKER_RE, NEGATIVE_WORDS, polarity

_BARE_WORDS = frozenset(AFFIRMATIVE_WORDS + NEGATIVE_WORDS)


@dataclass(frozen=True)
class TrueFalseMarkers:
    """
    True/false markers found in a block.
    
    Attributes:
        bracketed: Polarities found in "( ) WORD" markers.
        bare: Polarities found as standalone marker lines.
        
    Example:
        >>> markers = scan_markers("( ) CERTO ( ) ERRADO")
        >>> markers.has_bracketed, markers.complete
        (True, True)
    """
    bracketed: FrozenSet[str] = frozenset()
    bare: FrozenSet[str] = frozenset()
    
    @property
    def has_bracketed(self) -> bool:
        return bool(self.bracketed)
    
    @property
    def has_any(self) -> bool:
        return bool(self.bracketed or self.bare)
    
    @property
    def complete(self) -> bool:
        """True when both an affirmative and a negative marker were seen."""
        seen = self.bracketed | self.bare
        return {"affirmative", "negative"} <= seen


def is_bare_marker_line(line: str) -> bool:
    """Return True if ``line`` is exactly one marker word."""
    return line.strip().upper() in _BARE_WORDS


def find_bracket_markers(block: str) -> FrozenSet[str]:
    """
    Find polarities of "( ) WORD" markers.
    
    Args:
        block: Candidate question block.
        
    Returns:
        Set containing "affirmative" and/or "negative".
    """
    found = set()
    for match in BRACKET_MARKER_RE.finditer(block):
        kind = polarity(match.group(1))
        if kind:
            found.add(kind)
    return frozenset(found)


def find_bare_markers(block: str) -> FrozenSet[str]:
    """
    Find polarities of standalone marker lines.
    
    Only lines consisting of exactly one marker word count, so prose
    containing "true" or "certo" never triggers a match.
    """
    found = set()
    for line in non_empty_lines(block):
        if is_bare_marker_line(line):
            found.add(polarity(line))
    return frozenset(found)


def scan_markers(block: str) -> TrueFalseMarkers:
    """Run the bracketed pass, then the bare-word pass."""
    return TrueFalseMarkers(
        bracketed=find_bracket_markers(block),
        bare=find_bare_markers(block),
    )

"""Question number and provenance (board, year) extraction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..vocabulary import BOARD_RE, QUESTION_HEADING_RE, YEAR_RE


@dataclass(frozen=True)
class BlockMetadata:
    sequence_number: Optional[int] = None
    source_board: Optional[str] = None
    source_year: Optional[int] = None


def extract_metadata(block: str) -> BlockMetadata:
    """
    Read the question number, board and year declared in a block.
    
    Example:
        >>> extract_metadata("QUESTÃO 7\\nBANCA: CESGRANRIO\\nANO: 2018")
        BlockMetadata(sequence_number=7, source_board='CESGRANRIO', source_year=2018)
    """
    number = QUESTION_HEADING_RE.search(block)
    board = BOARD_RE.search(block)
    year = YEAR_RE.search(block)
    return BlockMetadata(
        sequence_number=int(number.group(1)) if number else None,
        source_board=board.group(1).strip() if board else None,
        source_year=int(year.group(1)) if year else None,
    )

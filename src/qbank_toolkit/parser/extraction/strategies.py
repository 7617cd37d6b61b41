"""
Module: parser.extraction.strategies

Purpose:
    Small combinators for ordered extraction strategies. Each field
    extractor is a tuple of independent strategies; adding a new source
    dialect means appending a strategy, not editing the existing ones.

Key Functions:
    - first_success(): First strategy returning a non-empty value wins
    - fill_until(): Passes fill missing keys until enough are present

Used By:
    - parser.extraction.statement
    - parser.extraction.options
    - parser.extraction.answer_key
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Strategy = Callable[[str], Optional[T]]
FillPass = Callable[[str], Dict[str, str]]


def first_success(strategies: Sequence[Strategy], text: str) -> Optional[T]:
    """
    Run strategies in order and return the first non-empty result.
    
    Args:
        strategies: Callables taking the text and returning a value or None.
        text: Text to extract from.
        
    Returns:
        First truthy result, or None when every strategy fails.
    """
    for strategy in strategies:
        result = strategy(text)
        if result:
            logger.debug(f"Strategy {strategy.__name__} succeeded")
            return result
    return None


def fill_until(passes: Sequence[FillPass], text: str, enough: int) -> Dict[str, str]:
    """
    Merge pass results, first match per key wins.
    
    Each pass only contributes keys not already captured by an earlier
    pass. Stops as soon as ``enough`` distinct keys exist.
    
    Args:
        passes: Callables returning key -> value mappings.
        text: Text to extract from.
        enough: Number of distinct keys that ends the sequence.
        
    Returns:
        Merged mapping.
        
    Example:
        >>> fill_until([lambda t: {"A": "x"}, lambda t: {"A": "y", "B": "z"}], "", 3)
        {'A': 'x', 'B': 'z'}
    """
    merged: Dict[str, str] = {}
    for extraction_pass in passes:
        for key, value in extraction_pass(text).items():
            merged.setdefault(key, value)
        if len(merged) >= enough:
            break
    return merged

"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .text import (
    normalize_document,
    clean_fragment,
    strip_final_period,
    non_empty_lines,
)
from .thresholds import (
    SEGMENTATION_THRESHOLDS,
    EXTRACTION_THRESHOLDS,
    STRUCTURE_THRESHOLDS,
)

__all__ = [
    # text
    "normalize_document",
    "clean_fragment",
    "strip_final_period",
    "non_empty_lines",
    # thresholds
    "SEGMENTATION_THRESHOLDS",
    "EXTRACTION_THRESHOLDS",
    "STRUCTURE_THRESHOLDS",
]

"""Centralized threshold and magic number configuration.

This module contains the character-count thresholds used throughout
segmentation, extraction and validation. Having these in one place makes
tuning easier and documents what each value guards.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SegmentationThresholds:
    """Thresholds for splitting a document into candidate blocks."""

    min_block_chars: int = 50  # Shorter segments are dropped as noise
    noise_threshold_chars: int = 100  # Rejected blocks above this are reported


@dataclass
class ExtractionThresholds:
    """Thresholds for field extraction."""

    min_statement_chars: int = 20  # Statements below this are rejected
    min_inline_option_chars: int = 5  # Loose inline option pass
    min_multiple_choice_options: int = 3
    true_false_options: int = 2
    full_option_count: int = 5  # Fewer recovered options caps confidence at medium


@dataclass
class StructureThresholds:
    """Thresholds for the structured-format pre-filter."""

    min_signals: int = 3  # Out of six signal types


# Global instances for easy import
SEGMENTATION_THRESHOLDS = SegmentationThresholds()
EXTRACTION_THRESHOLDS = ExtractionThresholds()
STRUCTURE_THRESHOLDS = StructureThresholds()

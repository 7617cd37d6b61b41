"""
Module: parser.config

Purpose:
    Configuration dataclass for the parsing pipeline. Provides immutable
    settings for segmentation thresholds, extraction minimums and the
    optional per-block worker pool.

Key Classes:
    - ParserConfig: Main configuration for parsing

Dependencies:
    - dataclasses: For frozen dataclass support
    - common.thresholds: Default values

Used By:
    - parser.pipeline: Uses ParserConfig for pipeline settings
    - parser.assembler: Rejection thresholds and strict mode
"""

from dataclasses import dataclass

from qbank_toolkit.common.thresholds import (
    EXTRACTION_THRESHOLDS,
    SEGMENTATION_THRESHOLDS,
    STRUCTURE_THRESHOLDS,
)


@dataclass(frozen=True)
class ParserConfig:
    """
    Configuration for the question parsing pipeline.
    
    Attributes:
        min_block_chars: Segments at or below this length are dropped (default 50)
        noise_threshold_chars: Unknown-format blocks shorter than this are
            rejected outright, and only rejected blocks longer than this
            are reported as errors (default 100)
        min_statement_chars: Shortest acceptable statement (default 20)
        min_inline_option_chars: Shortest option text for the loose
            inline pass (default 5)
        min_structure_signals: Signal types needed by looks_structured (default 3)
        strict_true_false: Reject true/false blocks lacking both markers
            instead of synthesizing the option pair (default False)
        max_workers: Threads used to assemble blocks; 1 runs inline (default 1)
    """
    min_block_chars: int = SEGMENTATION_THRESHOLDS.min_block_chars
    noise_threshold_chars: int = SEGMENTATION_THRESHOLDS.noise_threshold_chars
    min_statement_chars: int = EXTRACTION_THRESHOLDS.min_statement_chars
    min_inline_option_chars: int = EXTRACTION_THRESHOLDS.min_inline_option_chars
    min_structure_signals: int = STRUCTURE_THRESHOLDS.min_signals
    strict_true_false: bool = False
    max_workers: int = 1
    
    def __post_init__(self) -> None:
        """Validate settings on construction."""
        for name in (
            "min_block_chars",
            "noise_threshold_chars",
            "min_statement_chars",
            "min_inline_option_chars",
            "min_structure_signals",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative: {value}")
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1: {self.max_workers}")


DEFAULT_CONFIG = ParserConfig()

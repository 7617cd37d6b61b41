"""
Module: parser.detection

Purpose:
    Detection subpackage for classifying question blocks. Contains the
    true/false marker scanner and the ordered format rules.

Key Modules:
    - markers: "( ) WORD" and bare-word true/false markers
    - formats: Ordered format classification rules

Used By:
    - parser.assembler: Detects the format before extraction
"""

from .formats import BlockFeatures, FORMAT_RULES, FormatRule, block_features, detect_format
from .markers import TrueFalseMarkers, scan_markers

__all__ = [
    "BlockFeatures",
    "FORMAT_RULES",
    "FormatRule",
    "block_features",
    "detect_format",
    "TrueFalseMarkers",
    "scan_markers",
]

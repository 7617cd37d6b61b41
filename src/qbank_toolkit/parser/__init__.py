"""
Module: parser

Purpose:
    Heuristic parsing pipeline turning free-form exam question text into
    ParsedQuestion records. Recognizes four dialects (plain and
    metadata-labelled multiple choice, bracketed and bare-word true/false)
    without a formal grammar.

Key Functions:
    - parse_document(): Main entry point for parsing
    - split_into_blocks(): Document segmentation
    - detect_format(): Block classification
    - assemble_question(): Single-block assembly
    - revise_question(): Re-derive a manually edited record
    - looks_structured(): Pre-filter for routing documents
    
Key Classes:
    - ParserConfig: Configuration for parsing settings
    - DiagnosticsCollector: Per-block issue collection

Used By:
    - qbank_toolkit.cli: Command-line interface
"""

from .assembler import AssemblyOutcome, assemble_block, assemble_question, revise_question
from .config import DEFAULT_CONFIG, ParserConfig
from .detection import detect_format
from .diagnostics import BlockIssue, DiagnosticsCollector, ParseDiagnosticsReport
from .pipeline import parse_document
from .segmentation import split_into_blocks
from .structure import looks_structured, structure_signals
from .timing import TimingLog, timed_phase

__all__ = [
    "AssemblyOutcome",
    "BlockIssue",
    "DEFAULT_CONFIG",
    "DiagnosticsCollector",
    "ParseDiagnosticsReport",
    "ParserConfig",
    "TimingLog",
    "assemble_block",
    "assemble_question",
    "detect_format",
    "looks_structured",
    "parse_document",
    "revise_question",
    "split_into_blocks",
    "structure_signals",
    "timed_phase",
]

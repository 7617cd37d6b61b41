"""
Module: parser.extraction

Purpose:
    Field extractors, one per semantic field. Each is an ordered list of
    independent pattern strategies with first-success-wins semantics.

Key Modules:
    - metadata: Question number, board, year
    - topic: Topic / sub-topic split
    - statement: Question prose
    - options: Answer options (format-aware)
    - answer_key: Correct answer key (format-aware)
    - strategies: Strategy combinators
"""

from .answer_key import extract_answer_key
from .metadata import BlockMetadata, extract_metadata
from .options import extract_options
from .statement import extract_statement
from .topic import TopicFields, extract_topic, split_topic_line

__all__ = [
    "BlockMetadata",
    "TopicFields",
    "extract_answer_key",
    "extract_metadata",
    "extract_options",
    "extract_statement",
    "extract_topic",
    "split_topic_line",
]

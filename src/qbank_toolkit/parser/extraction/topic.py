"""
Module: parser.extraction.topic

Purpose:
    Topic / sub-topic extraction from a "TEMA: Main / Secondary" line.

Key Functions:
    - extract_topic(): Locate the topic line and split it
    - split_topic_line(): Split a topic value on the first usable separator

Used By:
    - parser.assembler
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from qbank_toolkit.core.models.formats import DEFAULT_TOPIC
from ..vocabulary import TOPIC_LINE_RE

# Tried in order; the first one producing two non-empty parts wins
TOPIC_SEPARATORS = (" / ", " - ", ": ")


@dataclass(frozen=True)
class TopicFields:
    """
    Topic fields of a question.
    
    Attributes:
        topic: Main topic, DEFAULT_TOPIC when the block had no topic line.
        sub_topic: Remainder after the separator, if any.
        defaulted: True when no topic line was found.
    """
    topic: str
    sub_topic: Optional[str] = None
    defaulted: bool = False


def split_topic_line(value: str) -> TopicFields:
    """
    Split a topic value into topic and sub-topic.
    
    Parts beyond the second are rejoined with the same separator, so
    "A / B / C" gives topic "A" and sub-topic "B / C".
    
    Example:
        >>> split_topic_line("Credit Cards / Revolving Credit")
        TopicFields(topic='Credit Cards', sub_topic='Revolving Credit', defaulted=False)
    """
    value = value.strip()
    for sep in TOPIC_SEPARATORS:
        if sep not in value:
            continue
        parts = [p.strip() for p in value.split(sep)]
        parts = [p for p in parts if p]
        if len(parts) >= 2:
            return TopicFields(topic=parts[0], sub_topic=sep.join(parts[1:]))
    return TopicFields(topic=value)


def extract_topic(block: str) -> TopicFields:
    """Extract topic fields from the first topic line in ``block``."""
    match = TOPIC_LINE_RE.search(block)
    if not match:
        return TopicFields(topic=DEFAULT_TOPIC, defaulted=True)
    return split_topic_line(match.group(1))

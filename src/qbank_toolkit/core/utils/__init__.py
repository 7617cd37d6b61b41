"""
Utils Package

Serialization helpers for parsed questions and results.
"""

from .serialization import (
    serialize_question,
    deserialize_question,
    serialize_result,
    result_to_json,
    load_questions_jsonl,
    save_questions_jsonl,
)

__all__ = [
    "serialize_question",
    "deserialize_question",
    "serialize_result",
    "result_to_json",
    "load_questions_jsonl",
    "save_questions_jsonl",
]

"""
Serialization Utilities

Provides to/from JSON utilities for parsed questions and parse results.

- ``serialize_*`` / ``deserialize_*`` pairs wrap the models' ``to_dict()``
  and ``from_dict()`` methods
- Deserialization validates against the bundled schema first
- Derived values (confidence, question_kind) are carried as written; call
  ``parser.assembler.revise_question`` to re-derive them after an edit
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..models.questions import ParsedQuestion
from ..models.results import ParseResult
from ..schemas.validator import validate_payload, ValidationError


# ─────────────────────────────────────────────────────────────────────────────
# Question Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_question(question: ParsedQuestion) -> dict[str, Any]:
    """
    Serialize a ParsedQuestion to a dictionary.
    
    The output can be written to JSON and will pass schema validation.
    """
    return question.to_dict()


def deserialize_question(
    data: dict[str, Any],
    *,
    validate: bool = True,
) -> ParsedQuestion:
    """
    Deserialize a ParsedQuestion from a dictionary.
    
    Args:
        data: Dictionary from JSON
        validate: Whether to validate against schema first
        
    Returns:
        ParsedQuestion instance
        
    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If data cannot be parsed
    """
    if validate:
        validate_payload(data, "parsed_question")
    return ParsedQuestion.from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# Result Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_result(result: ParseResult, *, validate: bool = False) -> dict[str, Any]:
    """
    Serialize a ParseResult to a dictionary.
    
    Args:
        result: Result to serialize
        validate: Check the output against the parse_result schema
        
    Raises:
        ValidationError: If validate=True and the output is invalid
    """
    data = result.to_dict()
    if validate:
        validate_payload(data, "parse_result")
    return data


def result_to_json(result: ParseResult, *, indent: int | None = 2) -> str:
    """Render a ParseResult as deterministic JSON text."""
    return result.to_json(indent=indent)


# ─────────────────────────────────────────────────────────────────────────────
# JSONL Files
# ─────────────────────────────────────────────────────────────────────────────

def load_questions_jsonl(path: Path, *, validate: bool = True) -> list[ParsedQuestion]:
    """
    Load questions from a JSONL file.
    
    Args:
        path: Path to a .jsonl file, one question per line
        validate: Whether to validate each question
        
    Returns:
        List of ParsedQuestion instances
        
    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If any question is invalid
    """
    if not path.exists():
        raise FileNotFoundError(f"Questions file not found: {path}")
    
    questions = []
    with open(path, "r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            
            try:
                data = json.loads(line)
                questions.append(deserialize_question(data, validate=validate))
            except (json.JSONDecodeError, ValidationError, ValueError, KeyError) as e:
                raise ValidationError(
                    f"Error parsing line {line_no}: {e}",
                    path=str(path),
                    errors=[str(e)]
                ) from e
    
    return questions


def save_questions_jsonl(questions: list[ParsedQuestion], path: Path) -> None:
    """
    Save questions to a JSONL file.
    
    Args:
        questions: Questions to save
        path: Output path
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    
    with open(path, "w", encoding="utf-8") as f:
        for question in questions:
            f.write(json.dumps(serialize_question(question), ensure_ascii=False))
            f.write("\n")

"""Top-level package for the question bank toolkit.

Provides subpackages:
- qbank_toolkit.core – immutable models, validation and serialization
- qbank_toolkit.parser – heuristic text-to-question parsing pipeline
- qbank_toolkit.common – shared text helpers and thresholds
- qbank_toolkit.cli – the qbank-parse command
"""

from .core import (
    Confidence,
    ParsedQuestion,
    ParseResult,
    ParseStats,
    QuestionFormat,
    QuestionKind,
    validate_question,
)
from .parser import ParserConfig, looks_structured, parse_document


def _get_version() -> str:
    """Get version from the installed distribution metadata."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    
    try:
        return pkg_version("qbank-toolkit")
    except PackageNotFoundError:
        # Running from a source checkout without an install
        return "0.0.0"


__version__ = _get_version()
__all__: list[str] = [
    "__version__",
    "Confidence",
    "ParsedQuestion",
    "ParseResult",
    "ParseStats",
    "ParserConfig",
    "QuestionFormat",
    "QuestionKind",
    "looks_structured",
    "parse_document",
    "validate_question",
]

"""
Module: parser.diagnostics

Captures per-block parsing issues during a run and generates diagnostic
reports for reviewing why blocks were rejected or kept with low confidence.

Structure:
- Each issue names its source document and 1-based block index
- block_excerpt: The start of the block text, for locating it in the source
- validation_issues: Validator output for kept, low-confidence questions
"""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Set

from qbank_toolkit.core.models.questions import ParsedQuestion

logger = logging.getLogger(__name__)

EXCERPT_CHARS = 160


@dataclass
class BlockIssue:
    """
    A single block-level issue with diagnostic context.
    
    Fields:
    - issue_type: "rejected_block", "block_failure" or "low_confidence"
    - detected_format: Format tag the block was classified as
    - below_noise_threshold: Rejected block too short to be reported as an error
    """
    issue_type: str
    source_name: str
    block_index: int
    message: str
    detected_format: str = ""
    block_excerpt: str = ""
    below_noise_threshold: bool = False
    validation_issues: List[str] = field(default_factory=list)
    
    def to_dict(self) -> Dict[str, Any]:
        d = {
            "issue_type": self.issue_type,
            "source_name": self.source_name,
            "block_index": self.block_index,
            "message": self.message,
        }
        
        if self.detected_format:
            d["detected_format"] = self.detected_format
        if self.block_excerpt:
            d["block_excerpt"] = self.block_excerpt
        if self.below_noise_threshold:
            d["below_noise_threshold"] = True
        if self.validation_issues:
            d["validation_issues"] = self.validation_issues
        
        return d


def _excerpt(block: str) -> str:
    flat = " ".join(block.split())
    return flat if len(flat) <= EXCERPT_CHARS else flat[:EXCERPT_CHARS - 3] + "..."


class DiagnosticsCollector:
    """
    Thread-safe collector for block issues.
    
    Safe to share between the worker threads of one parse and between
    several documents parsed in turn.
    """
    
    def __init__(self):
        self._issues: List[BlockIssue] = []
        self._lock = threading.Lock()
        self._sources: Set[str] = set()
    
    def _add(self, issue: BlockIssue) -> None:
        with self._lock:
            self._issues.append(issue)
            self._sources.add(issue.source_name)
    
    def add_rejected_block(
        self,
        source_name: str,
        block_index: int,
        reason: str,
        detected_format: str,
        block: str,
        below_noise_threshold: bool = False,
    ) -> None:
        """Record a block that yielded no question."""
        self._add(BlockIssue(
            issue_type="rejected_block",
            source_name=source_name,
            block_index=block_index,
            message=f"Block {block_index}: {reason}",
            detected_format=detected_format,
            block_excerpt=_excerpt(block),
            below_noise_threshold=below_noise_threshold,
        ))
    
    def add_block_failure(
        self,
        source_name: str,
        block_index: int,
        error: BaseException,
        block: str,
    ) -> None:
        """Record a block whose assembly raised."""
        self._add(BlockIssue(
            issue_type="block_failure",
            source_name=source_name,
            block_index=block_index,
            message=f"Block {block_index}: {type(error).__name__}: {error}",
            block_excerpt=_excerpt(block),
        ))
    
    def add_low_confidence(
        self,
        source_name: str,
        block_index: int,
        question: ParsedQuestion,
    ) -> None:
        """Record a kept question that needs review."""
        self._add(BlockIssue(
            issue_type="low_confidence",
            source_name=source_name,
            block_index=block_index,
            message=f"Q{question.sequence_number or '?'} kept with {question.confidence} confidence",
            detected_format=question.detected_format.value,
            block_excerpt=_excerpt(question.statement),
            validation_issues=list(question.validation_issues),
        ))
    
    def generate_report(self) -> "ParseDiagnosticsReport":
        with self._lock:
            return ParseDiagnosticsReport.from_issues(list(self._issues), set(self._sources))
    
    @property
    def issue_count(self) -> int:
        with self._lock:
            return len(self._issues)


@dataclass
class ParseDiagnosticsReport:
    """Complete diagnostics report."""
    generated_at: str
    sources: List[str]
    total_issues: int
    summary_by_type: Dict[str, int]
    issues: List[BlockIssue]
    
    @classmethod
    def from_issues(cls, issues: List[BlockIssue], sources: Set[str]) -> "ParseDiagnosticsReport":
        summary_by_type: Dict[str, int] = {}
        for issue in issues:
            summary_by_type[issue.issue_type] = summary_by_type.get(issue.issue_type, 0) + 1
        
        # Worker threads record out of order
        ordered = sorted(issues, key=lambda i: (i.source_name, i.block_index, i.issue_type))
        
        return cls(
            generated_at=datetime.now(timezone.utc).isoformat(),
            sources=sorted(sources),
            total_issues=len(issues),
            summary_by_type=summary_by_type,
            issues=ordered,
        )
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "generated_at": self.generated_at,
            "sources": self.sources,
            "total_issues": self.total_issues,
            "summary_by_type": self.summary_by_type,
            "issues": [issue.to_dict() for issue in self.issues],
        }
    
    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
    
    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json(), encoding="utf-8")
        logger.info(f"Parse diagnostics saved: {path}")

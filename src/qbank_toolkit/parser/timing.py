"""
Module: parser.timing

Purpose:
    Timing instrumentation for the parsing pipeline, to see where time goes
    on large question banks.

Key Classes:
    - TimingLog: Collects timing metrics for document and block phases
    
Key Functions:
    - timed_phase: Context manager for timing code blocks

Used By:
    - parser.pipeline: Main parsing orchestrator
"""

from __future__ import annotations

import json
import logging
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Generator, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass
class TimingLog:
    """
    Timing metrics for the parsing pipeline.
    
    Collects document-level phases (segmentation, whole parse) and
    block-level phases (assembly of each block). Block entries may be
    written from worker threads.
    
    Attributes:
        document_timings: Dict of phase_name -> duration_seconds
        block_timings: Dict of block_id -> {phase_name -> duration_seconds}
    
    Example:
        >>> log = TimingLog()
        >>> log.log_document("segmentation", 0.004)
        >>> log.log_block("block_3", "assembly", 0.001)
        >>> print(log.summary())
    """
    document_timings: Dict[str, float] = field(default_factory=dict)
    block_timings: Dict[str, Dict[str, float]] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)
    
    def log_document(self, phase: str, duration: float) -> None:
        """Log a document-level timing metric."""
        with self._lock:
            self.document_timings[phase] = duration
    
    def log_block(self, block_id: str, phase: str, duration: float) -> None:
        """Log a block-level timing metric."""
        with self._lock:
            self.block_timings.setdefault(block_id, {})[phase] = duration
    
    def get_phase_averages(self) -> Dict[str, float]:
        """Average time per phase across all blocks."""
        phase_totals: Dict[str, float] = {}
        phase_counts: Dict[str, int] = {}
        
        with self._lock:
            for phases in self.block_timings.values():
                for phase, duration in phases.items():
                    phase_totals[phase] = phase_totals.get(phase, 0.0) + duration
                    phase_counts[phase] = phase_counts.get(phase, 0) + 1
        
        return {
            phase: phase_totals[phase] / phase_counts[phase]
            for phase in phase_totals
        }
    
    def get_slowest_blocks(self, n: int = 3) -> List[Tuple[str, float]]:
        """The N slowest blocks with their total time."""
        with self._lock:
            totals = [(bid, sum(phases.values())) for bid, phases in self.block_timings.items()]
        totals.sort(key=lambda x: x[1], reverse=True)
        return totals[:n]
    
    def summary(self) -> str:
        """Human-readable timing summary."""
        lines = ["", "=== Parse Timing Summary ==="]
        
        if self.document_timings:
            lines.append("Document-level:")
            for phase, duration in sorted(self.document_timings.items()):
                lines.append(f"  {phase:25s} {duration:.4f}s")
        
        averages = self.get_phase_averages()
        if averages:
            lines.append("")
            lines.append("Block-level averages:")
            for phase, avg in sorted(averages.items(), key=lambda x: -x[1]):
                lines.append(f"  {phase:25s} {avg:.4f}s")
        
        slowest = self.get_slowest_blocks(3)
        if slowest:
            lines.append("")
            lines.append("Slowest blocks:")
            for bid, total in slowest:
                lines.append(f"  {bid}: {total:.4f}s")
        
        lines.append("")
        return "\n".join(lines)
    
    def to_dict(self) -> Dict[str, Any]:
        """Export timing data as dictionary."""
        with self._lock:
            document = dict(self.document_timings)
            blocks = {bid: dict(phases) for bid, phases in self.block_timings.items()}
        return {
            "document_timings": document,
            "block_timings": blocks,
            "phase_averages": self.get_phase_averages(),
            "slowest_blocks": [
                {"id": bid, "total": total} for bid, total in self.get_slowest_blocks(5)
            ],
        }
    
    def save(self, path: Path) -> None:
        """Save timing data to a JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.debug(f"Saved timing data to {path}")


@contextmanager
def timed_phase(
    log: TimingLog,
    phase: str,
    block_id: Optional[str] = None,
) -> Generator[None, None, None]:
    """
    Context manager for timing a code phase.
    
    Args:
        log: TimingLog instance to record metrics
        phase: Name of the phase being timed
        block_id: If provided, records as block-level metric;
                  otherwise records as document-level metric
    
    Example:
        >>> log = TimingLog()
        >>> with timed_phase(log, "segmentation"):
        ...     blocks = split_into_blocks(text)
        >>> with timed_phase(log, "assembly", block_id="block_1"):
        ...     outcome = assemble_block(blocks[0])
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        if block_id:
            log.log_block(block_id, phase, elapsed)
        else:
            log.log_document(phase, elapsed)

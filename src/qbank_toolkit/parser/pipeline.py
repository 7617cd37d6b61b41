"""
Module: parser.pipeline

Purpose:
    Main pipeline orchestrator for document parsing. Segments the text into
    candidate blocks, assembles each block into a question, and collects
    questions, error messages and statistics into a ParseResult.

Key Functions:
    - parse_document(): Main entry point for parsing

Dependencies:
    - concurrent.futures: Optional per-block worker pool
    - qbank_toolkit.parser.segmentation: Block splitting
    - qbank_toolkit.parser.assembler: Per-block assembly

Used By:
    - qbank_toolkit.cli: Command-line parsing
    - Callers importing qbank_toolkit.parse_document
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional

from qbank_toolkit.core.models.formats import Confidence
from qbank_toolkit.core.models.questions import ParsedQuestion
from qbank_toolkit.core.models.results import ParseResult, ParseStats
from .assembler import AssemblyOutcome, assemble_block
from .config import DEFAULT_CONFIG, ParserConfig
from .diagnostics import DiagnosticsCollector
from .segmentation import split_into_blocks
from .timing import TimingLog, timed_phase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _BlockRun:
    """Outcome of one block: an assembly outcome or the exception it raised."""
    index: int
    block: str
    outcome: Optional[AssemblyOutcome] = None
    error: Optional[Exception] = None


def _run_block(
    index: int,
    block: str,
    config: ParserConfig,
    timing_log: TimingLog,
    source_name: str,
) -> _BlockRun:
    """Assemble one block, containing any failure to that block."""
    try:
        with timed_phase(timing_log, "assembly", block_id=f"{source_name}#{index}"):
            outcome = assemble_block(block, config)
    except Exception as e:
        logger.warning(f"Block {index}: assembly failed: {type(e).__name__}: {e}")
        return _BlockRun(index, block, error=e)
    return _BlockRun(index, block, outcome=outcome)


def _run_all(
    blocks: List[str],
    config: ParserConfig,
    timing_log: TimingLog,
    source_name: str,
) -> List[_BlockRun]:
    numbered = list(enumerate(blocks, start=1))
    if config.max_workers > 1 and len(blocks) > 1:
        workers = min(config.max_workers, len(blocks))
        logger.debug(f"Assembling {len(blocks)} blocks on {workers} workers")
        with ThreadPoolExecutor(max_workers=workers) as pool:
            # map yields in submission order
            return list(pool.map(
                lambda item: _run_block(item[0], item[1], config, timing_log, source_name),
                numbered,
            ))
    return [_run_block(index, block, config, timing_log, source_name) for index, block in numbered]


def parse_document(
    text: str,
    config: Optional[ParserConfig] = None,
    diagnostics: Optional[DiagnosticsCollector] = None,
    *,
    source_name: str = "<text>",
    timing_log: Optional[TimingLog] = None,
) -> ParseResult:
    """
    Parse a whole document into question records.
    
    Pipeline:
    1. Split the text into candidate blocks
    2. Assemble each block (inline, or on a thread pool when
       config.max_workers > 1)
    3. Keep accepted questions in block order, turn long rejected blocks
       and failed blocks into error messages
    4. Compute statistics over the accepted questions
    
    Never raises for any input text; a block that raises is reported as
    "Block N: parsing error - <message>" and the other blocks continue.
    
    Args:
        text: Document text (already extracted from PDF/DOCX).
        config: Optional parser configuration.
        diagnostics: Optional collector receiving one issue per rejected
            or failed block and per low-confidence question.
        source_name: Document name recorded in diagnostics.
        timing_log: Optional TimingLog to fill; a private one is used
            otherwise.
        
    Returns:
        ParseResult with questions, errors and stats.
        
    Example:
        >>> result = parse_document(open("banco.txt").read())
        >>> result.success, result.stats.total
        (True, 12)
    """
    config = config or DEFAULT_CONFIG
    timing_log = timing_log or TimingLog()
    questions: List[ParsedQuestion] = []
    errors: List[str] = []
    
    with timed_phase(timing_log, "total"):
        with timed_phase(timing_log, "segmentation"):
            blocks = split_into_blocks(text, config)
        
        runs = _run_all(blocks, config, timing_log, source_name)
        
        for run in runs:
            if run.error is not None:
                errors.append(f"Block {run.index}: parsing error - {run.error}")
                if diagnostics is not None:
                    diagnostics.add_block_failure(source_name, run.index, run.error, run.block)
                continue
            
            outcome = run.outcome
            if outcome.accepted:
                questions.append(outcome.question)
                if diagnostics is not None and outcome.question.confidence is Confidence.LOW:
                    diagnostics.add_low_confidence(source_name, run.index, outcome.question)
                continue
            
            reportable = len(run.block) > config.noise_threshold_chars
            logger.debug(
                f"Block {run.index} rejected ({outcome.reason}), "
                f"format={outcome.detected_format}, {len(run.block)} chars"
            )
            if reportable:
                errors.append(f"Block {run.index}: no valid question extracted ({outcome.reason})")
            if diagnostics is not None:
                diagnostics.add_rejected_block(
                    source_name,
                    run.index,
                    outcome.reason,
                    outcome.detected_format.value,
                    run.block,
                    below_noise_threshold=not reportable,
                )
    
    stats = ParseStats.from_questions(questions)
    logger.info(
        f"Parsed {source_name}: {stats.total} questions from {len(blocks)} blocks, "
        f"{len(errors)} errors, {stats.without_answer_key} without answer key"
    )
    logger.debug(timing_log.summary())
    
    return ParseResult(questions=tuple(questions), errors=tuple(errors), stats=stats)

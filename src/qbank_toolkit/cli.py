"""
Module: cli

Purpose:
    ``qbank-parse`` command. Parses question bank text files (or stdin)
    and prints a summary or the JSON result.

Usage:
    qbank-parse banco.txt
    qbank-parse --json banco.txt > result.json
    cat banco.txt | qbank-parse --jsonl questions.jsonl
    qbank-parse --check banco.txt

Exit status:
    0 when at least one question was parsed (or, with --check, every input
    looks structured), 1 otherwise, 2 when an input cannot be read.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .core.models.results import ParseResult
from .core.utils.serialization import save_questions_jsonl, serialize_result
from .parser.config import ParserConfig
from .parser.diagnostics import DiagnosticsCollector
from .parser.pipeline import parse_document
from .parser.structure import looks_structured, structure_signals
from .parser.timing import TimingLog

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOTHING_PARSED = 1
EXIT_UNREADABLE = 2

STDIN_NAME = "<stdin>"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qbank-parse",
        description="Parse free-form exam question text into structured questions",
    )
    parser.add_argument(
        "inputs", nargs="*", type=Path,
        help="Text files to parse (reads stdin when omitted or '-')",
    )
    parser.add_argument("--json", action="store_true", help="Print the full parse result as JSON")
    parser.add_argument("--jsonl", type=Path, help="Write parsed questions to a JSONL file")
    parser.add_argument("--check", action="store_true", help="Only report whether inputs look structured")
    parser.add_argument("--diagnostics", type=Path, help="Write a block diagnostics report (JSON)")
    parser.add_argument("--timing", type=Path, help="Write per-phase timings (JSON)")
    parser.add_argument(
        "--strict-true-false", action="store_true",
        help="Reject true/false blocks lacking both answer markers",
    )
    parser.add_argument("--workers", type=int, default=1, help="Threads used to assemble blocks")
    parser.add_argument("--verbose", "-v", action="count", default=0, help="-v for info, -vv for debug")
    return parser


def _read_inputs(paths: Sequence[Path]) -> List[Tuple[str, str]]:
    """Read each input as UTF-8 text; raises OSError/UnicodeDecodeError."""
    if not paths or [str(p) for p in paths] == ["-"]:
        return [(STDIN_NAME, sys.stdin.read())]
    return [(str(path), path.read_text(encoding="utf-8")) for path in paths]


def _print_summary(name: str, result: ParseResult) -> None:
    stats = result.stats
    formats = ", ".join(f"{fmt}={count}" for fmt, count in stats.by_format.items() if count)
    print(f"{name}: {stats.total} questions ({formats or 'none'})")
    print(
        f"  answer key: {stats.with_answer_key} found, {stats.without_answer_key} unknown; "
        f"confidence: " + ", ".join(f"{c}={n}" for c, n in stats.by_confidence.items())
    )
    for error in result.errors:
        print(f"  {error}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    
    try:
        config = ParserConfig(
            strict_true_false=args.strict_true_false,
            max_workers=args.workers,
        )
    except ValueError as e:
        parser.error(str(e))
    
    try:
        documents = _read_inputs(args.inputs)
    except (OSError, UnicodeDecodeError) as e:
        print(f"qbank-parse: cannot read input: {e}", file=sys.stderr)
        return EXIT_UNREADABLE
    
    if args.check:
        all_structured = True
        for name, text in documents:
            structured = looks_structured(text, config)
            all_structured = all_structured and structured
            signals = ", ".join(structure_signals(text)) or "none"
            print(f"{name}: {'structured' if structured else 'unstructured'} ({signals})")
        return EXIT_OK if all_structured else EXIT_NOTHING_PARSED
    
    collector = DiagnosticsCollector() if args.diagnostics else None
    timing_log = TimingLog()
    results = [
        (name, parse_document(text, config, collector, source_name=name, timing_log=timing_log))
        for name, text in documents
    ]
    
    if args.json:
        if len(results) == 1:
            payload = serialize_result(results[0][1])
        else:
            payload = {name: serialize_result(result) for name, result in results}
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        for name, result in results:
            _print_summary(name, result)
    
    if args.jsonl:
        questions = [q for _, result in results for q in result.questions]
        save_questions_jsonl(questions, args.jsonl)
        logger.info(f"Wrote {len(questions)} questions to {args.jsonl}")
    
    if collector is not None:
        collector.generate_report().save(args.diagnostics)
    
    if args.timing:
        timing_log.save(args.timing)
    
    return EXIT_OK if any(result.success for _, result in results) else EXIT_NOTHING_PARSED


if __name__ == "__main__":
    sys.exit(main())

"""Command-line interface for abc_analyzer."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from .core import DEFAULT_LIMITS, TraversalLimits, inspect
from .core.exceptions import AlembicBindingsNotAvailableError
from .logging_config import setup_logging
from .models import ArchiveReport

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Walk Alembic archives and print their node and property structure."
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Alembic archives to inspect. If omitted, a file picker appears.",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_LIMITS.max_depth,
        help=f"Abort the traversal below this tree depth (default: {DEFAULT_LIMITS.max_depth}).",
    )
    parser.add_argument(
        "--max-nodes",
        type=int,
        default=DEFAULT_LIMITS.max_nodes,
        help=f"Abort the traversal after this many nodes (default: {DEFAULT_LIMITS.max_nodes}).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 unless every archive was valid and traversed without errors.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=_LOG_LEVELS,
        help="Diagnostic log level; logs go to stderr (default: WARNING).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write diagnostic logs to this file.",
    )
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(getattr(logging, args.log_level), str(args.log_file) if args.log_file else None)

    paths: List[Path] = list(args.paths)
    if not paths:
        from .gui import ask_for_abc_file

        selected = ask_for_abc_file()
        if not selected:
            print("No Alembic archive selected; exiting.")
            return 1
        paths = [Path(selected)]

    for path in paths:
        if not path.exists():
            parser.error(f"File not found: {path}")

    if args.max_depth < 1 or args.max_nodes < 1:
        parser.error("--max-depth and --max-nodes must be positive.")
    limits = TraversalLimits(max_depth=args.max_depth, max_nodes=args.max_nodes)

    reports: List[ArchiveReport] = []
    try:
        for path in paths:
            reports.append(inspect(str(path), limits=limits))
    except AlembicBindingsNotAvailableError as exc:
        parser.error(str(exc))

    if len(reports) > 1:
        _print_run_summary(reports)

    if args.strict and not all(report.clean for report in reports):
        return 1
    return 0


def _print_run_summary(reports: Iterable[ArchiveReport]) -> None:
    reports = list(reports)
    clean = sum(1 for report in reports if report.clean)
    print(f"Archives inspected: {len(reports)} ({clean} clean)")
    for report in reports:
        if report.clean:
            continue
        reasons = []
        if not report.valid:
            reasons.append("invalid")
        if report.error_count:
            reasons.append(f"{report.error_count} node errors")
        if report.skipped_count:
            reasons.append(f"{report.skipped_count} skipped")
        if report.aborted is not None:
            reasons.append("aborted")
        if report.failure is not None:
            reasons.append("failed")
        print(f"  - {report.path} [{', '.join(reasons)}]")


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

"""Alembic archive fuzzer (Atheris).

Each input is written to a scratch file and run through the full structural
inspection. Decoder errors are contained and never fail the process; the only
fatal condition is being unable to create or remove the scratch file.

Usage:
    abc-analyzer-fuzz [--show-report] [libFuzzer options] [corpus dirs]
"""

from __future__ import annotations

import argparse
import contextlib
import logging
import os
import sys
import tempfile
from dataclasses import dataclass
from typing import Optional, TextIO

from .core import inspect, sdk
from .core.exceptions import ScratchFileError
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1


@dataclass
class HarnessState:
    show_report: bool = False
    sink: Optional[TextIO] = None


_state = HarnessState()


def write_scratch_file(data: bytes) -> str:
    """Materialize ``data`` as a temporary file and return its path."""

    try:
        fd, path = tempfile.mkstemp(prefix="abc_analyzer_", suffix=".abc")
    except OSError as exc:
        raise ScratchFileError(f"Unable to create scratch file: {exc}") from exc
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
    except OSError as exc:
        with contextlib.suppress(OSError):
            os.remove(path)
        raise ScratchFileError(f"Unable to write scratch file '{path}': {exc}") from exc
    return path


def delete_scratch_file(path: str) -> None:
    try:
        os.remove(path)
    except OSError as exc:
        raise ScratchFileError(f"Unable to remove scratch file '{path}': {exc}") from exc


def report_sink() -> TextIO:
    """Return the stream reports go to; muted unless ``--show-report`` was given."""

    if _state.show_report:
        return sys.stdout
    if _state.sink is None:
        _state.sink = open(os.devnull, "w", encoding="utf-8")
    return _state.sink


def test_one_input(data: bytes) -> int:
    """libFuzzer callback."""

    try:
        path = write_scratch_file(data)
    except ScratchFileError as exc:
        logger.critical("%s", exc)
        sys.exit(EXIT_FAILURE)

    sink = report_sink()
    try:
        inspect(path, sink)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        print(exc, file=sink)

    try:
        delete_scratch_file(path)
    except ScratchFileError as exc:
        logger.critical("%s", exc)
        sys.exit(EXIT_FAILURE)

    return 0


def _import_atheris():
    try:
        import atheris  # type: ignore
    except ImportError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "atheris is not installed. Install the 'fuzz' extra: pip install 'abc-analyzer[fuzz]'."
        ) from exc
    return atheris


def main() -> None:
    """Run the fuzzer; unrecognized arguments are passed to libFuzzer."""

    parser = argparse.ArgumentParser(
        description="Structural Alembic archive fuzzer using Atheris/libFuzzer",
        epilog="All unrecognized arguments are passed to libFuzzer.",
    )
    parser.add_argument(
        "--show-report",
        action="store_true",
        help="Print each input's report to stdout instead of discarding it.",
    )
    parser.add_argument(
        "--log-level",
        default="CRITICAL",
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        help="Diagnostic log level (default: CRITICAL).",
    )

    args, remaining = parser.parse_known_args()
    _state.show_report = args.show_report
    setup_logging(getattr(logging, args.log_level))

    try:
        sdk.import_alembic_module()
        atheris = _import_atheris()
    except ImportError as exc:  # includes AlembicBindingsNotAvailableError
        parser.error(str(exc))

    sys.argv = [sys.argv[0], *remaining]
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()


if __name__ == "__main__":
    main()

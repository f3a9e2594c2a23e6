"""High level analyzer orchestration."""

from __future__ import annotations

import contextlib
import logging
import sys
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Optional, TextIO, Union

from ..inspectors import SchemaInspector, default_registry
from ..models import (
    ArchiveReport,
    NodeDescriptor,
    NodeSkipped,
    NodeSummary,
    TraversalAborted,
    TypeTag,
)
from ..report import format_archive_header, format_display_name, format_event, format_failure
from . import sdk
from .dispatch import classify, open_schema
from .exceptions import ArchiveNotValidError
from .traversal import DEFAULT_LIMITS, TraversalLimits, iter_nodes

logger = logging.getLogger(__name__)

Registry = Mapping[TypeTag, SchemaInspector]
WalkEvent = Union[NodeSummary, NodeSkipped, TraversalAborted]


@dataclass
class ArchiveHandle:
    """An opened (or rejected) archive. Check ``valid`` before anything else."""

    path: str
    archive: Any = field(default=None, repr=False)

    @property
    def valid(self) -> bool:
        return self.archive is not None

    @property
    def display_name(self) -> str:
        self._require_valid()
        return sdk.archive_name(self.archive)

    @property
    def root(self) -> Any:
        self._require_valid()
        return sdk.archive_top(self.archive)

    def _require_valid(self) -> None:
        if not self.valid:
            raise ArchiveNotValidError(f"'{self.path}' is not a readable Alembic archive")


def open_archive(path: str, modules: Optional[sdk.AlembicModules] = None) -> ArchiveHandle:
    """Open ``path``; malformed input yields an invalid handle instead of raising."""

    if modules is None:
        modules = sdk.import_alembic_module()
    return ArchiveHandle(path=path, archive=sdk.load_archive(modules, path))


def summarize_node(node: NodeDescriptor, modules: sdk.AlembicModules, registry: Registry) -> NodeSummary:
    """Classify ``node`` and run the matching inspector.

    Failures are recorded on the returned summary so the caller can move on to
    the next node.
    """

    summary = NodeSummary(
        name=node.name,
        full_name=node.full_name,
        metadata=node.metadata,
        depth=node.depth,
    )
    try:
        summary.type_tag = classify(node, modules)
        inspector = registry.get(summary.type_tag)
        if inspector is not None:
            summary.schema = inspector.collect(open_schema(node, summary.type_tag, modules))
    except Exception as exc:
        logger.warning("Failed to summarize %s: %s", node.full_name, exc)
        summary.error = str(exc) or type(exc).__name__
    return summary


class AlembicAnalyzer(contextlib.AbstractContextManager["AlembicAnalyzer"]):
    """Opens an Alembic archive and coordinates the traversal."""

    def __init__(
        self,
        path: str,
        *,
        registry: Optional[Registry] = None,
        limits: TraversalLimits = DEFAULT_LIMITS,
    ) -> None:
        self._path = path
        self._registry: Registry = registry if registry is not None else default_registry()
        self._limits = limits
        self._modules: Optional[sdk.AlembicModules] = None
        self._handle: Optional[ArchiveHandle] = None

    @property
    def path(self) -> str:
        return self._path

    @property
    def handle(self) -> ArchiveHandle:
        if self._handle is None:
            raise RuntimeError("Analyzer not loaded. Call load() before accessing the archive.")
        return self._handle

    @property
    def modules(self) -> sdk.AlembicModules:
        if self._modules is None:
            raise RuntimeError("Analyzer not loaded. Call load() before walking the archive.")
        return self._modules

    def load(self) -> "AlembicAnalyzer":
        if self._handle is not None:
            return self

        self._modules = sdk.import_alembic_module()
        self._handle = open_archive(self._path, self._modules)
        if not self._handle.valid:
            logger.info("'%s' is not a readable Alembic archive", self._path)
        return self

    def close(self) -> None:
        self._handle = None
        self._modules = None

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None

    def __enter__(self) -> "AlembicAnalyzer":
        return self.load()

    def run(self) -> Iterator[WalkEvent]:
        """Walk the archive, yielding one event per visited or skipped node."""

        handle = self.handle
        modules = self.modules
        for event in iter_nodes(handle.root, self._limits):
            if isinstance(event, NodeDescriptor):
                yield summarize_node(event, modules, self._registry)
            else:
                yield event


def inspect(
    path: str,
    stream: Optional[TextIO] = None,
    *,
    limits: TraversalLimits = DEFAULT_LIMITS,
    registry: Optional[Registry] = None,
) -> ArchiveReport:
    """Print the structural report of ``path`` and return its tally.

    Returns normally for unreadable archives and for failures inside the
    traversal; only a missing binding installation propagates.
    """

    out = stream if stream is not None else sys.stdout

    def emit(line: str) -> None:
        print(line, file=out)

    with AlembicAnalyzer(path, registry=registry, limits=limits) as analyzer:
        handle = analyzer.handle
        report = ArchiveReport(path=path, valid=handle.valid)
        emit(format_archive_header(path, handle.valid))
        if not handle.valid:
            return report

        try:
            report.display_name = handle.display_name
            emit(format_display_name(report.display_name))
            for event in analyzer.run():
                _tally(report, event)
                for line in format_event(event):
                    emit(line)
        except Exception as exc:
            logger.error("Traversal of %s failed: %s", path, exc)
            report.failure = str(exc) or type(exc).__name__
            emit(format_failure(exc))

    return report


def _tally(report: ArchiveReport, event: WalkEvent) -> None:
    if isinstance(event, NodeSummary):
        report.node_count += 1
        if event.error is not None:
            report.error_count += 1
    elif isinstance(event, NodeSkipped):
        report.skipped_count += 1
    elif isinstance(event, TraversalAborted):
        report.aborted = event

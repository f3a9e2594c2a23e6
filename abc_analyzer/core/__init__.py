"""Core infrastructure for Alembic archive loading and traversal."""

from .analyzer import AlembicAnalyzer, ArchiveHandle, inspect, open_archive, summarize_node
from .dispatch import classify
from .exceptions import (
    AlembicBindingsNotAvailableError,
    ArchiveLoadError,
    ArchiveNotValidError,
    SchemaMismatchError,
    ScratchFileError,
)
from .traversal import DEFAULT_LIMITS, TraversalLimits, iter_nodes

__all__ = [
    "AlembicAnalyzer",
    "ArchiveHandle",
    "inspect",
    "open_archive",
    "summarize_node",
    "classify",
    "iter_nodes",
    "TraversalLimits",
    "DEFAULT_LIMITS",
    "AlembicBindingsNotAvailableError",
    "ArchiveLoadError",
    "ArchiveNotValidError",
    "SchemaMismatchError",
    "ScratchFileError",
]

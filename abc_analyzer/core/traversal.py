"""Utilities for traversing Alembic object trees."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Set, Tuple, Union

from ..models import NodeDescriptor, NodeSkipped, TraversalAborted

logger = logging.getLogger(__name__)

TraversalEvent = Union[NodeDescriptor, NodeSkipped, TraversalAborted]


@dataclass(frozen=True)
class TraversalLimits:
    max_depth: int = 256
    max_nodes: int = 100_000


DEFAULT_LIMITS = TraversalLimits()


def describe(raw, parent: Optional[Any] = None, depth: int = 0) -> NodeDescriptor:
    """Project the header of ``raw`` into a :class:`NodeDescriptor`."""

    header = raw.getHeader()
    metadata = header.getMetaData()
    return NodeDescriptor(
        name=str(header.getName()),
        full_name=str(header.getFullName()),
        metadata=str(metadata.serialize()),
        depth=depth,
        raw=raw,
        parent=parent,
        schema_metadata=metadata,
    )


def iter_children(node: NodeDescriptor) -> Iterator[Any]:
    """Yield the children of ``node`` in declaration order."""

    raw = node.raw
    for idx in range(raw.getNumChildren()):
        yield raw.getChild(idx)


def iter_nodes(root, limits: TraversalLimits = DEFAULT_LIMITS) -> Iterator[TraversalEvent]:
    """Yield nodes depth-first starting at ``root`` (inclusive).

    Uses an explicit stack of lazy child iterators, so memory is bounded by
    ``limits.max_depth`` rather than by the widest level. Problems local to one
    child are reported as :class:`NodeSkipped` and the walk goes on; exceeding a
    limit yields a single :class:`TraversalAborted` and ends the walk.
    """

    root_node = describe(root)
    yield root_node

    visited = 1
    seen: Set[str] = {root_node.full_name}
    stack: List[Tuple[NodeDescriptor, Iterator[Tuple[int, Any]]]] = [
        (root_node, enumerate(iter_children(root_node)))
    ]

    while stack:
        parent, children = stack[-1]
        try:
            idx, raw = next(children)
        except StopIteration:
            stack.pop()
            continue
        except Exception as exc:
            logger.warning("Children of %s unavailable: %s", parent.full_name, exc)
            stack.pop()
            yield NodeSkipped(parent.full_name, f"children unavailable: {exc}")
            continue

        depth = parent.depth + 1
        if depth > limits.max_depth:
            logger.warning("Depth limit %d exceeded below %s", limits.max_depth, parent.full_name)
            yield TraversalAborted(parent.full_name, depth, f"depth limit {limits.max_depth} exceeded")
            return
        if visited >= limits.max_nodes:
            logger.warning("Node budget %d exhausted below %s", limits.max_nodes, parent.full_name)
            yield TraversalAborted(parent.full_name, depth, f"node budget {limits.max_nodes} exhausted")
            return

        # Every attempted child counts, including unreadable and duplicate ones.
        visited += 1
        try:
            node = describe(raw, parent.raw, depth)
        except Exception as exc:
            logger.warning("Unreadable header of child %d below %s: %s", idx, parent.full_name, exc)
            yield NodeSkipped(parent.full_name, f"unreadable header of child {idx}: {exc}")
            continue

        if node.full_name in seen:
            logger.warning("Duplicate path %s; subtree skipped", node.full_name)
            yield NodeSkipped(node.full_name, "duplicate path")
            continue

        seen.add(node.full_name)
        yield node
        stack.append((node, enumerate(iter_children(node))))

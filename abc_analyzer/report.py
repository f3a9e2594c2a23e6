"""Line-oriented rendering of traversal results."""

from __future__ import annotations

from typing import List, Union

from .models import (
    NodeSkipped,
    NodeSummary,
    PropertySummary,
    SchemaSummary,
    TraversalAborted,
    TypeTag,
)
from .utils import format_optional

_SAMPLE_ROLES = {"positions", "normals", "uvs"}


def format_archive_header(path: str, valid: bool) -> str:
    return f"file {path}{'' if valid else ' (invalid)'}:"


def format_display_name(name: str) -> str:
    return f"file name: {name}"


def format_failure(exc: BaseException) -> str:
    return f"Traversal failed: {exc}"


def format_event(event: Union[NodeSummary, NodeSkipped, TraversalAborted]) -> List[str]:
    if isinstance(event, NodeSkipped):
        return [f"Skipped node {event.full_name}: {event.reason}"]
    if isinstance(event, TraversalAborted):
        return [f"Traversal aborted at {event.full_name} (depth {event.depth}): {event.reason}"]
    return format_node(event)


def format_node(summary: NodeSummary) -> List[str]:
    lines = [
        f"Node name: {summary.name}",
        f"Node full name: {summary.full_name}",
        f"MetaData: {summary.metadata}",
    ]
    if summary.schema is not None:
        lines.extend(format_schema(summary.schema))
    elif summary.type_tag is TypeTag.UNRECOGNIZED and summary.error is None:
        lines.append("Object type ignored.")
    if summary.error is not None:
        lines.append(f"  Error: {summary.error}")
    return lines


def format_schema(schema: SchemaSummary) -> List[str]:
    lines: List[str] = []
    if schema.properties is not None:
        lines.append(f"  {schema.label} Property Count: {len(schema.properties)}.")
        for prop in schema.properties:
            lines.extend(_format_property(prop))

    for label, value in schema.fields:
        lines.append(f"  {label}: {value}")

    if schema.targets is not None:
        lines.append(f"  Target Count: {len(schema.targets)}")
        for t, target in enumerate(schema.targets):
            lines.append(f"  Target[{t}] name: {target.name}")
            lines.append(f"    Shader Type Count: {len(target.shader_types)}")
            for s, binding in enumerate(target.shader_types):
                lines.append(f"    Shader Type [{s}] name: {binding.name}")
                lines.append(f"    Shader Parameter Count: {format_optional(binding.parameter_count)}")
    return lines


def _format_property(prop: PropertySummary) -> List[str]:
    lines = [f"  Property[{prop.index}] name: {prop.name}"]
    if prop.role in _SAMPLE_ROLES:
        lines.append(f"    Sample Count: {format_optional(prop.sample_count)}")
    elif prop.role == "arb_geom_params":
        count = None if prop.geom_params is None else len(prop.geom_params)
        lines.append(f"    GeomParams Count: {format_optional(count)}.")
        for g, name in enumerate(prop.geom_params or []):
            lines.append(f"    arbGeomParam[{g}] name: {name}")
    return lines

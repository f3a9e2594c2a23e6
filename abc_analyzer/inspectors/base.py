"""Shared inspector plumbing."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Protocol, Tuple

from ..models import PropertySummary, SchemaSummary, TypeTag
from ..utils import format_optional, property_kind, property_names, resolve_accessor, sample_count


class SchemaInspector(Protocol):
    """Protocol defining how inspectors summarize one typed schema."""

    tag: TypeTag

    def collect(self, schema: Any) -> SchemaSummary:
        """Return the summary of ``schema``."""


ARB_GEOM_PARAMS = ".arbGeomParams"


def optional_field(label: str, value: Optional[Any]) -> Tuple[str, str]:
    return (label, format_optional(value))


class PropertyListingInspector:
    """Lists every declared property, resolving the well-known names.

    ``sample_accessors`` maps a property name to the ``(role, accessor)`` pair
    used to obtain its sample count.
    """

    tag: TypeTag
    label: str = ""
    sample_accessors: Dict[str, Tuple[str, str]] = {}

    def collect(self, schema: Any) -> SchemaSummary:
        summary = SchemaSummary(label=self.label, properties=self.list_properties(schema))
        summary.fields.extend(self.extra_fields(schema))
        return summary

    def list_properties(self, schema: Any) -> List[PropertySummary]:
        entries: List[PropertySummary] = []
        for index in range(schema.getNumProperties()):
            header = schema.getPropertyHeader(index)
            name = str(header.getName())
            entry = PropertySummary(index=index, name=name, kind=property_kind(header))

            if name in self.sample_accessors:
                entry.role, accessor = self.sample_accessors[name]
                entry.sample_count = sample_count(schema, accessor)
            elif name == ARB_GEOM_PARAMS:
                # Nested sample counts are not read.
                entry.role = "arb_geom_params"
                entry.geom_params = property_names(resolve_accessor(schema, "getArbGeomParams"))

            entries.append(entry)
        return entries

    def extra_fields(self, schema: Any) -> Iterable[Tuple[str, str]]:
        return ()

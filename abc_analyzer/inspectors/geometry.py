"""Inspectors for geometry schemas: poly meshes, subdivision surfaces, curves and face sets."""

from __future__ import annotations

from typing import Any, Iterable, Tuple

from ..models import SchemaSummary, TypeTag
from ..utils import first_sample_value, safe_count
from .base import PropertyListingInspector, optional_field

_POSITIONS = ("positions", "getPositionsProperty")
_NORMALS = ("normals", "getNormalsParam")
_UVS = ("uvs", "getUVsParam")


class PolyMeshInspector(PropertyListingInspector):
    tag = TypeTag.POLY_MESH
    label = "Mesh"
    sample_accessors = {"P": _POSITIONS, "N": _NORMALS, "uv": _UVS, "st": _UVS}


class SubDInspector(PropertyListingInspector):
    """Subdivision surfaces carry no normals, so ``N`` is listed without a count."""

    tag = TypeTag.SUBD
    label = "SubD"
    sample_accessors = {"P": _POSITIONS, "uv": _UVS, "st": _UVS}

    _SCALARS = (
        ("Subdivision Scheme", "getSubdivisionSchemeProperty"),
        ("Face Varying Interpolate Boundary", "getFaceVaryingInterpolateBoundaryProperty"),
        ("Face Varying Propagate Corners", "getFaceVaryingPropagateCornersProperty"),
        ("Interpolate Boundary", "getInterpolateBoundaryProperty"),
    )

    def extra_fields(self, schema: Any) -> Iterable[Tuple[str, str]]:
        return [optional_field(label, first_sample_value(schema, accessor)) for label, accessor in self._SCALARS]


class CurvesInspector(PropertyListingInspector):
    tag = TypeTag.CURVES
    label = "Curves"
    sample_accessors = {"P": _POSITIONS, "N": _NORMALS, "uv": _UVS, "st": _UVS}


class FaceSetInspector:
    tag = TypeTag.FACE_SET

    def collect(self, schema: Any) -> SchemaSummary:
        return SchemaSummary(
            label="FaceSet",
            fields=[optional_field("Sample Count", safe_count(schema, "getNumSamples"))],
        )

"""Inspector implementations, one per recognized schema."""

from typing import Dict

from ..models import TypeTag
from .base import SchemaInspector
from .geometry import CurvesInspector, FaceSetInspector, PolyMeshInspector, SubDInspector
from .material import MaterialInspector
from .xform import XformInspector


def default_registry() -> Dict[TypeTag, SchemaInspector]:
    """Return a fresh mapping from every recognized tag to its inspector."""

    inspectors = [
        PolyMeshInspector(),
        SubDInspector(),
        FaceSetInspector(),
        CurvesInspector(),
        XformInspector(),
        MaterialInspector(),
    ]
    return {inspector.tag: inspector for inspector in inspectors}


INSPECTORS = default_registry()

__all__ = [
    "INSPECTORS",
    "default_registry",
    "SchemaInspector",
    "PolyMeshInspector",
    "SubDInspector",
    "FaceSetInspector",
    "CurvesInspector",
    "XformInspector",
    "MaterialInspector",
]

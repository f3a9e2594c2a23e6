"""Classify archive objects against the known Alembic schemas."""

from __future__ import annotations

import logging
from typing import Any, Tuple

from ..models import NodeDescriptor, TypeTag
from .exceptions import SchemaMismatchError
from .sdk import AlembicModules

logger = logging.getLogger(__name__)


# First match wins.
MATCH_ORDER: Tuple[Tuple[TypeTag, str, str], ...] = (
    (TypeTag.POLY_MESH, "AbcGeom", "IPolyMesh"),
    (TypeTag.SUBD, "AbcGeom", "ISubD"),
    (TypeTag.FACE_SET, "AbcGeom", "IFaceSet"),
    (TypeTag.CURVES, "AbcGeom", "ICurves"),
    (TypeTag.XFORM, "AbcGeom", "IXform"),
    (TypeTag.MATERIAL, "AbcMaterial", "IMaterial"),
)


def schema_class(modules: AlembicModules, tag: TypeTag) -> Any:
    for candidate, namespace, class_name in MATCH_ORDER:
        if candidate is tag:
            return getattr(getattr(modules, namespace), class_name)
    raise SchemaMismatchError(f"No schema class for {tag.value} objects")


def classify(node: NodeDescriptor, modules: AlembicModules) -> TypeTag:
    """Return the first :class:`TypeTag` whose schema matches ``node``."""

    for tag, _, _ in MATCH_ORDER:
        try:
            if schema_class(modules, tag).matches(node.schema_metadata):
                return tag
        except Exception as exc:
            logger.debug("%s predicate failed on %s: %s", tag.value, node.full_name, exc)
    return TypeTag.UNRECOGNIZED


def open_schema(node: NodeDescriptor, tag: TypeTag, modules: AlembicModules) -> Any:
    """Resolve the typed schema of ``node`` through its parent."""

    if tag is TypeTag.UNRECOGNIZED:
        raise SchemaMismatchError(f"{node.full_name} has no recognized schema")
    if node.parent is None:
        raise SchemaMismatchError(f"{node.full_name} has no parent to resolve a {tag.value} from")
    typed = schema_class(modules, tag)(node.parent, node.name)
    return typed.getSchema()

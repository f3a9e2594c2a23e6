"""Domain models used across the analyzer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple


ABSENT = "<absent>"


class TypeTag(str, Enum):
    POLY_MESH = "PolyMesh"
    SUBD = "SubD"
    FACE_SET = "FaceSet"
    CURVES = "Curves"
    XFORM = "Xform"
    MATERIAL = "Material"
    UNRECOGNIZED = "Unrecognized"


class PropertyKind(str, Enum):
    SCALAR = "Scalar"
    ARRAY = "Array"
    COMPOUND = "Compound"


@dataclass(frozen=True)
class NodeDescriptor:
    """Read-only view of one archive object.

    ``parent`` is only used to re-resolve a typed schema view; traversal always
    goes through the children of ``raw``.
    """

    name: str
    full_name: str
    metadata: str
    depth: int
    raw: Any = field(repr=False, compare=False)
    parent: Any = field(default=None, repr=False, compare=False)
    schema_metadata: Any = field(default=None, repr=False, compare=False)


@dataclass
class PropertySummary:
    index: int
    name: str
    kind: PropertyKind
    role: Optional[str] = None
    sample_count: Optional[int] = None
    geom_params: Optional[List[str]] = None


@dataclass
class ShaderBinding:
    name: str
    parameter_count: Optional[int] = None


@dataclass
class MaterialTarget:
    name: str
    shader_types: List[ShaderBinding] = field(default_factory=list)


@dataclass
class SchemaSummary:
    label: str
    properties: Optional[List[PropertySummary]] = None
    fields: List[Tuple[str, str]] = field(default_factory=list)
    targets: Optional[List[MaterialTarget]] = None


@dataclass
class NodeSummary:
    name: str
    full_name: str
    metadata: str
    depth: int
    type_tag: TypeTag = TypeTag.UNRECOGNIZED
    schema: Optional[SchemaSummary] = None
    error: Optional[str] = None


@dataclass(frozen=True)
class NodeSkipped:
    full_name: str
    reason: str


@dataclass(frozen=True)
class TraversalAborted:
    full_name: str
    depth: int
    reason: str


@dataclass
class ArchiveReport:
    path: str
    valid: bool
    display_name: Optional[str] = None
    node_count: int = 0
    error_count: int = 0
    skipped_count: int = 0
    aborted: Optional[TraversalAborted] = None
    failure: Optional[str] = None

    @property
    def clean(self) -> bool:
        """True when the archive was valid and fully traversed without errors."""

        return (
            self.valid
            and self.aborted is None
            and self.failure is None
            and self.error_count == 0
            and self.skipped_count == 0
        )

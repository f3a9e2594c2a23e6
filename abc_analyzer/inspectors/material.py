"""Material inspector."""

from __future__ import annotations

import logging
from typing import Any, List, Sequence

from ..models import MaterialTarget, SchemaSummary, ShaderBinding, TypeTag
from ..utils import safe_count

logger = logging.getLogger(__name__)


class MaterialInspector:
    """Summarize shader bindings per render target.

    Target names are not discovered from the archive: only the names handed to
    the constructor are looked up, and the default instance has none, so the
    report shows ``Target Count: 0``.
    """

    tag = TypeTag.MATERIAL

    def __init__(self, target_names: Sequence[str] = ()) -> None:
        self.target_names = tuple(target_names)

    def collect(self, schema: Any) -> SchemaSummary:
        targets: List[MaterialTarget] = []
        for target_name in self.target_names:
            target = MaterialTarget(name=target_name)
            for shader_type in _shader_types(schema, target_name):
                parameters = _shader_parameters(schema, target_name, shader_type)
                target.shader_types.append(
                    ShaderBinding(name=shader_type, parameter_count=safe_count(parameters, "getNumProperties"))
                )
            targets.append(target)
        return SchemaSummary(label="Material", targets=targets)


def _shader_types(schema: Any, target_name: str) -> List[str]:
    try:
        return [str(name) for name in schema.getShaderTypesForTarget(target_name)]
    except Exception as exc:
        logger.debug("Shader types for target %s unavailable: %s", target_name, exc)
        return []


def _shader_parameters(schema: Any, target_name: str, shader_type: str) -> Any:
    try:
        return schema.getShaderParameters(target_name, shader_type)
    except Exception as exc:
        logger.debug("Parameters for %s/%s unavailable: %s", target_name, shader_type, exc)
        return None

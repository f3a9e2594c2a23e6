"""Transform inspector."""

from __future__ import annotations

from typing import Any

from ..models import SchemaSummary, TypeTag
from ..utils import safe_count
from .base import optional_field


class XformInspector:
    tag = TypeTag.XFORM

    def collect(self, schema: Any) -> SchemaSummary:
        return SchemaSummary(
            label="Xform",
            fields=[
                optional_field("Sample Count", safe_count(schema, "getNumSamples")),
                optional_field("Number of Ops", safe_count(schema, "getNumOps")),
            ],
        )

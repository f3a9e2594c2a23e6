"""Shared helper utilities for interacting with the PyAlembic bindings."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from .models import ABSENT, PropertyKind

logger = logging.getLogger(__name__)


def resolve_accessor(obj: Any, accessor: str) -> Optional[Any]:
    """Call ``obj.<accessor>()`` and return the result if it is a valid object.

    Returns ``None`` when the accessor is missing, raises, or hands back an
    object whose ``valid()`` is false.
    """

    func = getattr(obj, accessor, None)
    if not callable(func):
        return None
    try:
        result = func()
    except Exception as exc:
        logger.debug("%s() failed: %s", accessor, exc)
        return None
    if result is None:
        return None
    valid = getattr(result, "valid", None)
    if callable(valid):
        try:
            if not valid():
                return None
        except Exception as exc:
            logger.debug("%s().valid() failed: %s", accessor, exc)
            return None
    return result


def safe_count(obj: Any, method: str) -> Optional[int]:
    """Return ``int(obj.<method>())`` or ``None`` if it cannot be read."""

    if obj is None:
        return None
    func = getattr(obj, method, None)
    if not callable(func):
        return None
    try:
        return int(func())
    except Exception as exc:
        logger.debug("%s() failed: %s", method, exc)
        return None


def sample_count(obj: Any, accessor: str) -> Optional[int]:
    """Resolve ``accessor`` on ``obj`` and return its sample count."""

    return safe_count(resolve_accessor(obj, accessor), "getNumSamples")


def first_sample_value(obj: Any, accessor: str) -> Optional[str]:
    """Return the first sample of a scalar property as text."""

    prop = resolve_accessor(obj, accessor)
    if prop is None or not safe_count(prop, "getNumSamples"):
        return None
    try:
        return str(prop.getValue())
    except Exception as exc:
        logger.debug("%s().getValue() failed: %s", accessor, exc)
        return None


def property_names(compound: Any) -> Optional[List[str]]:
    """Return the names of the properties nested in ``compound``."""

    count = safe_count(compound, "getNumProperties")
    if count is None:
        return None
    try:
        return [str(compound.getPropertyHeader(idx).getName()) for idx in range(count)]
    except Exception as exc:
        logger.debug("Nested property headers unavailable: %s", exc)
        return None


def property_kind(header: Any) -> PropertyKind:
    if header.isCompound():
        return PropertyKind.COMPOUND
    if header.isArray():
        return PropertyKind.ARRAY
    return PropertyKind.SCALAR


def format_optional(value: Any) -> str:
    return ABSENT if value is None else str(value)

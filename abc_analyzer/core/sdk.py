"""PyAlembic binding helpers."""

from __future__ import annotations

import logging
from typing import Any, NamedTuple, Optional

from .exceptions import AlembicBindingsNotAvailableError

logger = logging.getLogger(__name__)


class AlembicModules(NamedTuple):
    Abc: Any
    AbcGeom: Any
    AbcMaterial: Any


def import_alembic_module() -> AlembicModules:
    """Import the PyAlembic binding modules.

    Encapsulates the import so code can provide a helpful error when it is
    missing instead of failing at module import time. Note that the unrelated
    ``alembic`` migration tool on PyPI shares the top-level name; it lacks the
    ``Abc`` submodules and is reported the same way.
    """

    try:
        from alembic import Abc, AbcGeom, AbcMaterial  # type: ignore
    except ImportError as exc:  # pragma: no cover - dependent on external bindings
        raise AlembicBindingsNotAvailableError(
            "PyAlembic bindings are not available. "
            "Install Alembic with Python support (e.g. conda-forge 'alembic') and ensure "
            "the 'alembic.Abc', 'alembic.AbcGeom' and 'alembic.AbcMaterial' modules are importable."
        ) from exc

    return AlembicModules(Abc=Abc, AbcGeom=AbcGeom, AbcMaterial=AbcMaterial)


def load_archive(modules: AlembicModules, path: str) -> Optional[Any]:
    """Open ``path`` as an Alembic archive, returning ``None`` if it cannot be read."""

    try:
        archive = modules.Abc.IArchive(path)
    except Exception as exc:  # the decoder raises for anything it cannot parse
        logger.debug("Decoder rejected %s: %s", path, exc)
        return None

    valid = getattr(archive, "valid", None)
    if callable(valid) and not valid():
        logger.debug("Decoder returned an invalid archive for %s", path)
        return None
    return archive


def archive_name(archive) -> str:
    """Return the archive's display name."""

    return str(archive.getName())


def archive_top(archive):
    """Return the top (root) object of ``archive``."""

    return archive.getTop()

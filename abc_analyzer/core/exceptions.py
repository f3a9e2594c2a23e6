"""Project-specific exception types."""


class AlembicBindingsNotAvailableError(ImportError):
    """Raised when the PyAlembic bindings are missing."""


class ArchiveLoadError(RuntimeError):
    """Raised for archive-level problems."""


class ArchiveNotValidError(ArchiveLoadError):
    """Raised when an invalid archive handle is asked for its contents."""


class SchemaMismatchError(RuntimeError):
    """Raised when a node cannot be resolved into its typed schema view."""


class ScratchFileError(OSError):
    """Raised when the fuzz harness cannot create or remove its scratch file."""

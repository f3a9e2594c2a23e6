"""Structural inspection of Alembic scene archives."""

__version__ = "0.1.0"

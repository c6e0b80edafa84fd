"""
Application package initializer.

The code is organised in layers: ``schemas`` hold the pydantic models
and field coercion, ``services`` hold the record store and the query
engine (no I/O), ``api`` holds the versioned FastAPI routers and
``core`` holds settings, logging, error types and seed data.
"""

from .main import app  # noqa: F401

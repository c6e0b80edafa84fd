"""
Error types raised by the service layer.

The API layer translates each of them into an HTTP status code.  They
carry a human readable message only; no partial state is ever left
behind when one is raised.
"""


class UnicornError(Exception):
    """Base class for all record store errors."""


class ValidationError(UnicornError):
    """A required field is missing or a supplied value cannot be parsed."""


class ConflictError(UnicornError):
    """A record with the same (case-insensitive) name already exists."""


class NotFoundError(UnicornError):
    """No record matches the requested name."""

"""
In-memory record store for unicorns.

``UnicornStore`` keeps the records in insertion order and is the only
component that mutates them.  Lookups are by name, case-insensitively.
Every mutation validates the complete payload before touching the
collection, so a failed call leaves the store exactly as it was.

A store is an ordinary object: the application creates one in
``create_app`` and tests construct fresh instances.  A re-entrant lock
serialises access so concurrent requests cannot both create the same
name or observe a half-applied update.
"""

import logging
import threading
import uuid
from typing import Any, Iterable, List, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

from unicorn_api.app.core.errors import ConflictError, NotFoundError, ValidationError
from unicorn_api.app.schemas.unicorn import (
    REQUIRED_FIELDS,
    Unicorn,
    UnicornCreate,
    UnicornUpdate,
)

logger = logging.getLogger(__name__)


def _describe(exc: PydanticValidationError) -> str:
    """Flatten pydantic errors into a single readable message."""
    parts = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        parts.append(f"{field}: {message}" if field else message)
    return "; ".join(parts) or "Invalid data format"


class UnicornStore:
    """Ordered, name-keyed collection of unicorn records."""

    def __init__(self, records: Optional[Iterable[Mapping[str, Any]]] = None) -> None:
        self._records: List[Unicorn] = []
        self._lock = threading.RLock()
        for fields in records or ():
            self.create(fields)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _index_of(self, name: str) -> Optional[int]:
        key = name.lower()
        for index, record in enumerate(self._records):
            if record.name.lower() == key:
                return index
        return None

    def all(self) -> List[Unicorn]:
        """Return a snapshot of every record in insertion order."""
        with self._lock:
            return [record.model_copy(deep=True) for record in self._records]

    def find_by_name(self, name: str) -> Optional[Unicorn]:
        """Return the record whose name matches ``name`` ignoring case."""
        with self._lock:
            index = self._index_of(name)
            if index is None:
                return None
            return self._records[index].model_copy(deep=True)

    def get(self, name: str) -> Unicorn:
        """Like :meth:`find_by_name` but raise ``NotFoundError`` on a miss."""
        record = self.find_by_name(name)
        if record is None:
            raise NotFoundError(f"Unicorn {name!r} not found")
        return record

    def create(self, fields: Mapping[str, Any]) -> Unicorn:
        """Validate ``fields``, append a new record and return it.

        Raises ``ValidationError`` when a required field is missing or
        a value cannot be parsed and ``ConflictError`` when the name is
        already taken.  Client supplied ids are ignored.
        """
        missing = [name for name in REQUIRED_FIELDS if fields.get(name) is None]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")
        try:
            data = UnicornCreate.model_validate(dict(fields))
        except PydanticValidationError as exc:
            raise ValidationError(_describe(exc)) from exc

        with self._lock:
            if self._index_of(data.name) is not None:
                logger.info("Rejected duplicate unicorn '%s'", data.name)
                raise ConflictError(f"Unicorn with name {data.name!r} already exists")
            record = Unicorn(id=uuid.uuid4().hex, **data.model_dump())
            self._records.append(record)
            logger.info("Created unicorn '%s' (%s)", record.name, record.id)
            return record.model_copy(deep=True)

    def update(self, name: str, fields: Mapping[str, Any]) -> Unicorn:
        """Apply the supplied fields to the record called ``name``.

        Only keys present in ``fields`` change; ``name`` and the id are
        never updated.  An explicit ``None`` or ``""`` for ``vampires``
        clears the count.
        """
        with self._lock:
            index = self._index_of(name)
            if index is None:
                raise NotFoundError(f"Unicorn {name!r} not found")
            try:
                changes = UnicornUpdate.model_validate(dict(fields)).changes()
            except PydanticValidationError as exc:
                raise ValidationError(_describe(exc)) from exc
            if not changes:
                return self._records[index].model_copy(deep=True)
            record = self._records[index].model_copy(update=changes, deep=True)
            self._records[index] = record
            logger.info("Updated unicorn '%s': %s", record.name, ", ".join(sorted(changes)))
            return record.model_copy(deep=True)

    def delete(self, name: str) -> Unicorn:
        """Remove the record called ``name`` and return it."""
        with self._lock:
            index = self._index_of(name)
            if index is None:
                raise NotFoundError(f"Unicorn {name!r} not found")
            record = self._records.pop(index)
            logger.info("Deleted unicorn '%s' (%s)", record.name, record.id)
            return record

"""
Pydantic models for unicorn records.

``Unicorn`` is the stored and returned record.  ``UnicornCreate`` and
``UnicornUpdate`` describe incoming payloads; their ``before``
validators coerce the loosely typed JSON values clients send (numbers
as strings, a single ``loves`` string, ``"male"`` for ``"m"`` ...)
into the normalised representation kept by the store.  The coercion
helpers are plain functions so the query engine can share the gender
normalisation.
"""

import math
from datetime import date, datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

GENDER_CODES = ("m", "f")
GENDER_SYNONYMS = {"male": "m", "female": "f"}

# Payload keys the store reads; everything else in a body is ignored.
REQUIRED_FIELDS = ("name", "dob", "loves", "weight", "gender")
MUTABLE_FIELDS = ("dob", "loves", "weight", "vampires", "gender", "vaccinated")


def normalize_gender(value: str) -> str:
    """Lower-case a gender string and map ``male``/``female`` to codes."""
    code = value.strip().lower()
    return GENDER_SYNONYMS.get(code, code)


def format_timestamp(moment: datetime) -> str:
    """Render a datetime as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def coerce_name(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError("name must be a non-empty string")
    return value.strip()


def coerce_dob(value: Any) -> str:
    """Parse a date of birth into a normalised ISO-8601 UTC string.

    Accepts ISO date/datetime strings (``Z`` suffix allowed, naive
    values are UTC), ``date``/``datetime`` objects and epoch
    milliseconds.
    """
    if isinstance(value, bool):
        raise ValueError("dob must be a date")
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)):
        try:
            moment = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as exc:
            raise ValueError(f"dob {value!r} is out of range") from exc
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("dob must not be empty")
        if text[-1] in "Zz":
            text = text[:-1] + "+00:00"
        try:
            moment = datetime.fromisoformat(text)
        except ValueError as exc:
            raise ValueError(f"dob {value!r} is not a valid date") from exc
    else:
        raise ValueError("dob must be a date")
    try:
        return format_timestamp(moment)
    except OverflowError as exc:
        raise ValueError(f"dob {value!r} is out of range") from exc


def coerce_loves(value: Any) -> List[str]:
    if isinstance(value, str):
        items = [value]
    elif isinstance(value, (list, tuple)):
        items = list(value)
    else:
        raise ValueError("loves must be a string or a list of strings")
    if not items:
        raise ValueError("loves must not be empty")
    loves = []
    for item in items:
        if not isinstance(item, str) or not item.strip():
            raise ValueError("each love must be a non-empty string")
        loves.append(item.strip())
    return loves


def coerce_weight(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError("weight must be a number")
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError as exc:
            raise ValueError("weight is out of range") from exc
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError as exc:
            raise ValueError(f"weight {value!r} is not a number") from exc
    else:
        raise ValueError("weight must be a number")
    if not math.isfinite(number):
        raise ValueError("weight must be finite")
    return number


def coerce_vampires(value: Any) -> Optional[int]:
    """Return a non-negative vampire count, or ``None`` for absent.

    ``None`` and the empty string both mean the count is unknown.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError("vampires must be an integer")
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = int(text)
        except ValueError as exc:
            raise ValueError(f"vampires {value!r} is not an integer") from exc
    elif isinstance(value, int):
        number = value
    elif isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"vampires {value!r} is not an integer")
        number = int(value)
    else:
        raise ValueError("vampires must be an integer")
    if number < 0:
        raise ValueError("vampires must not be negative")
    return number


def coerce_gender(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError("gender must be a string")
    code = normalize_gender(value)
    if code not in GENDER_CODES:
        raise ValueError(f"gender {value!r} must be one of m, f, male, female")
    return code


def coerce_vaccinated(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ValueError("vaccinated must be true or false")


class Unicorn(BaseModel):
    """A stored unicorn record.

    The identity serialises as ``_id``.  ``vampires`` is ``None`` when
    the count is unknown; responses omit it in that case.
    """

    id: str = Field(..., alias="_id", examples=["5f2b6c0e9d3a4b1c8e7f6a5b"])
    name: str = Field(..., examples=["Aurora"])
    dob: str = Field(..., examples=["1991-01-24T13:00:00.000Z"])
    loves: List[str] = Field(..., examples=[["carrot", "grape"]])
    weight: float = Field(..., examples=[450])
    vampires: Optional[int] = Field(None, examples=[43])
    gender: str = Field(..., examples=["f"])
    vaccinated: bool = Field(True, examples=[True])

    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
    }


class UnicornCreate(BaseModel):
    """Schema for creating a unicorn.

    ``name``, ``dob``, ``loves``, ``weight`` and ``gender`` are
    required.  ``vaccinated`` defaults to ``True``.
    """

    name: str
    dob: str
    loves: List[str]
    weight: float
    vampires: Optional[int] = None
    gender: str
    vaccinated: bool = True

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v):
        return coerce_name(v)

    @field_validator("dob", mode="before")
    @classmethod
    def validate_dob(cls, v):
        return coerce_dob(v)

    @field_validator("loves", mode="before")
    @classmethod
    def validate_loves(cls, v):
        return coerce_loves(v)

    @field_validator("weight", mode="before")
    @classmethod
    def validate_weight(cls, v):
        return coerce_weight(v)

    @field_validator("vampires", mode="before")
    @classmethod
    def validate_vampires(cls, v):
        return coerce_vampires(v)

    @field_validator("gender", mode="before")
    @classmethod
    def validate_gender(cls, v):
        return coerce_gender(v)

    @field_validator("vaccinated", mode="before")
    @classmethod
    def validate_vaccinated(cls, v):
        if v is None:
            return True
        return coerce_vaccinated(v)


class UnicornUpdate(BaseModel):
    """Schema for updating a unicorn.

    All fields are optional.  ``None`` means "leave unchanged" except
    for ``vampires``, where an explicit ``None`` or empty string clears
    the count; use ``model_fields_set`` to tell the two apart.
    """

    dob: Optional[str] = None
    loves: Optional[List[str]] = None
    weight: Optional[float] = None
    vampires: Optional[int] = None
    gender: Optional[str] = None
    vaccinated: Optional[bool] = None

    @field_validator("dob", mode="before")
    @classmethod
    def validate_dob(cls, v):
        return None if v is None else coerce_dob(v)

    @field_validator("loves", mode="before")
    @classmethod
    def validate_loves(cls, v):
        return None if v is None else coerce_loves(v)

    @field_validator("weight", mode="before")
    @classmethod
    def validate_weight(cls, v):
        return None if v is None else coerce_weight(v)

    @field_validator("vampires", mode="before")
    @classmethod
    def validate_vampires(cls, v):
        return coerce_vampires(v)

    @field_validator("gender", mode="before")
    @classmethod
    def validate_gender(cls, v):
        return None if v is None else coerce_gender(v)

    @field_validator("vaccinated", mode="before")
    @classmethod
    def validate_vaccinated(cls, v):
        return None if v is None else coerce_vaccinated(v)

    def changes(self) -> dict:
        """Return the field values that should be written to the record."""
        changes = {}
        for name in MUTABLE_FIELDS:
            value = getattr(self, name)
            if name == "vampires":
                if name in self.model_fields_set:
                    changes[name] = value
            elif value is not None:
                changes[name] = value
        return changes


class UnicornDeleted(BaseModel):
    """Confirmation returned after a unicorn has been removed."""

    message: str = Field("Unicorn deleted successfully")
    unicorn: Unicorn
